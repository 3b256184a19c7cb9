import json

import pytest

from hadiscovery.scene import Scene
from hadiscovery.serializer import MqttContext, Serializer, config_topic, data_topic


@pytest.fixture
def context():
    return MqttContext(device_id="testDevice")


@pytest.fixture
def scene(context):
    return Scene("uniqueScene", context)


def test_config_minimal(scene, context):
    scene.build_serializer()
    config = json.loads(scene.serializer.serialize())
    assert list(config) == ["uniq_id", "pl_on", "cmd_t"]
    assert config["pl_on"] == "ON"
    assert config["cmd_t"] == data_topic(context, "uniqueScene", "cmd_t")


def test_config_optional_properties(scene):
    scene.name = "Movie"
    scene.icon = "mdi:movie"
    scene.retain = True
    scene.build_serializer()
    config = json.loads(scene.serializer.serialize())
    assert config["name"] == "Movie"
    assert config["ic"] == "mdi:movie"
    assert config["ret"] is True


def test_config_has_no_device(context):
    device = Serializer()
    device.set("name", "Dev")
    context.device_serializer = device
    scene = Scene("uniqueScene", context)
    scene.build_serializer()
    assert "dev" not in json.loads(scene.serializer.serialize())


def test_config_with_availability(scene, context):
    scene.availability = False
    scene.build_serializer()
    config = json.loads(scene.serializer.serialize())
    assert config["avty_t"] == data_topic(context, "uniqueScene", "avty_t")


def test_on_mqtt_connected(scene, context):
    scene.on_mqtt_connected()
    assert [m.topic for m in context.published] == [
        config_topic(context, "scene", "uniqueScene")
    ]
    assert context.published[0].retain is True
    assert context.subscriptions == [data_topic(context, "uniqueScene", "cmd_t")]


def test_no_unique_id_does_nothing(context):
    scene = Scene(None, context)
    scene.on_mqtt_connected()
    assert context.published == []
    assert context.subscriptions == []


def test_command_triggers_callback(scene, context):
    received = []
    scene.on_command(received.append)
    scene.on_mqtt_message(data_topic(context, "uniqueScene", "cmd_t"), b"ON")
    assert received == [scene]


def test_command_on_other_topic_is_ignored(scene, context):
    received = []
    scene.on_command(received.append)
    scene.on_mqtt_message(data_topic(context, "otherScene", "cmd_t"), b"ON")
    assert received == []