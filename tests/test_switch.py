import json

import pytest

from hadiscovery.serializer import MqttContext, Serializer, config_topic, data_topic
from hadiscovery.switch import Switch


@pytest.fixture
def context():
    return MqttContext(device_id="testDevice")


@pytest.fixture
def switch(context):
    return Switch("uniqueSwitch", context)


def state_topic(context):
    return data_topic(context, "uniqueSwitch", "stat_t")


def test_set_state_publishes_on(switch, context):
    assert switch.set_state(True) is True
    assert switch.current_state is True
    message = context.published[-1]
    assert (message.topic, message.payload, message.retain) == (
        state_topic(context),
        "ON",
        True,
    )


def test_set_state_publishes_off(switch, context):
    switch.current_state = True
    assert switch.set_state(False) is True
    assert context.published[-1].payload == "OFF"


def test_same_state_is_not_republished(switch, context):
    assert switch.set_state(False) is True
    assert context.published == []


def test_force_republishes(switch, context):
    assert switch.set_state(False, force=True) is True
    assert [m.payload for m in context.published] == ["OFF"]


def test_failed_publish_keeps_state(switch, context):
    context.connected = False
    assert switch.set_state(True) is False
    assert switch.current_state is False


def test_turn_on_and_off(switch, context):
    assert switch.turn_on() is True
    assert switch.current_state is True
    assert switch.turn_off() is True
    assert switch.current_state is False
    assert [m.payload for m in context.published] == ["ON", "OFF"]


def test_config_minimal(switch, context):
    switch.name = "Kitchen"
    switch.build_serializer()
    config = json.loads(switch.serializer.serialize())
    assert list(config) == ["name", "uniq_id", "stat_t", "cmd_t"]
    assert config["uniq_id"] == "uniqueSwitch"
    assert config["stat_t"] == state_topic(context)
    assert config["cmd_t"] == data_topic(context, "uniqueSwitch", "cmd_t")


def test_config_optional_properties(switch, context):
    switch.device_class = "outlet"
    switch.icon = "mdi:lamp"
    switch.retain = True
    switch.optimistic = True
    switch.build_serializer()
    config = json.loads(switch.serializer.serialize())
    assert config["dev_cla"] == "outlet"
    assert config["ic"] == "mdi:lamp"
    assert config["ret"] is True
    assert config["opt"] is True


def test_config_includes_device(context):
    device = Serializer()
    device.set("name", "Dev")
    context.device_serializer = device
    switch = Switch("uniqueSwitch", context)
    switch.build_serializer()
    config = json.loads(switch.serializer.serialize())
    assert config["dev"] == {"name": "Dev"}


def test_config_with_shared_availability(context):
    context.shared_availability = True
    switch = Switch("uniqueSwitch", context)
    switch.build_serializer()
    config = json.loads(switch.serializer.serialize())
    assert config["avty_t"] == context.availability_topic


def test_on_mqtt_connected(switch, context):
    switch.on_mqtt_connected()
    topics = [m.topic for m in context.published]
    assert topics[0] == config_topic(context, "switch", "uniqueSwitch")
    assert context.published[-1].topic == state_topic(context)
    assert context.published[-1].payload == "OFF"
    assert context.subscriptions == [data_topic(context, "uniqueSwitch", "cmd_t")]


def test_on_mqtt_connected_with_retain_skips_state(switch, context):
    switch.retain = True
    switch.on_mqtt_connected()
    assert [m.topic for m in context.published] == [
        config_topic(context, "switch", "uniqueSwitch")
    ]


def test_on_mqtt_connected_publishes_availability(switch, context):
    switch.availability = True
    switch.on_mqtt_connected()
    avty = data_topic(context, "uniqueSwitch", "avty_t")
    assert [m.payload for m in context.published if m.topic == avty] == ["online"]


def test_no_unique_id_does_nothing(context):
    switch = Switch(None, context)
    switch.on_mqtt_connected()
    assert context.published == []
    assert context.subscriptions == []


@pytest.mark.parametrize("payload, expected", [(b"ON", True), (b"OFF", False), ("ON", True)])
def test_command_callback(switch, context, payload, expected):
    received = []
    switch.on_command(lambda state, sender: received.append((state, sender)))
    switch.on_mqtt_message(data_topic(context, "uniqueSwitch", "cmd_t"), payload)
    assert received == [(expected, switch)]


def test_command_on_other_topic_is_ignored(switch, context):
    received = []
    switch.on_command(lambda state, sender: received.append(state))
    switch.on_mqtt_message(data_topic(context, "otherSwitch", "cmd_t"), b"ON")
    assert received == []