import json

import pytest

from hadiscovery.lock import Lock, LockCommand, LockState
from hadiscovery.serializer import MqttContext, config_topic, data_topic


@pytest.fixture
def context():
    return MqttContext(device_id="testDevice")


@pytest.fixture
def lock(context):
    return Lock("uniqueLock", context)


def test_default_state_is_unknown(lock):
    assert lock.current_state is LockState.UNKNOWN


@pytest.mark.parametrize(
    "state, payload",
    [(LockState.LOCKED, "LOCKED"), (LockState.UNLOCKED, "UNLOCKED")],
)
def test_set_state_publishes(lock, context, state, payload):
    assert lock.set_state(state) is True
    assert lock.current_state is state
    message = context.published[-1]
    assert (message.topic, message.payload, message.retain) == (
        data_topic(context, "uniqueLock", "stat_t"),
        payload,
        True,
    )


def test_unknown_state_cannot_be_published(lock, context):
    lock.current_state = LockState.LOCKED
    assert lock.set_state(LockState.UNKNOWN) is False
    assert lock.current_state is LockState.LOCKED
    assert context.published == []


def test_same_state_without_force(lock, context):
    lock.current_state = LockState.LOCKED
    assert lock.set_state(LockState.LOCKED) is True
    assert context.published == []
    assert lock.set_state(LockState.LOCKED, force=True) is True
    assert [m.payload for m in context.published] == ["LOCKED"]


def test_failed_publish_keeps_state(lock, context):
    context.connected = False
    assert lock.set_state(LockState.LOCKED) is False
    assert lock.current_state is LockState.UNKNOWN


def test_config(lock, context):
    lock.name = "Door"
    lock.icon = "mdi:lock"
    lock.optimistic = True
    lock.build_serializer()
    config = json.loads(lock.serializer.serialize())
    assert list(config) == ["name", "uniq_id", "ic", "opt", "stat_t", "cmd_t"]
    assert config["opt"] is True
    assert config["cmd_t"] == data_topic(context, "uniqueLock", "cmd_t")


def test_on_mqtt_connected_unknown_state_not_published(lock, context):
    lock.on_mqtt_connected()
    assert [m.topic for m in context.published] == [
        config_topic(context, "lock", "uniqueLock")
    ]
    assert context.subscriptions == [data_topic(context, "uniqueLock", "cmd_t")]


def test_on_mqtt_connected_publishes_known_state(lock, context):
    lock.current_state = LockState.UNLOCKED
    lock.on_mqtt_connected()
    assert context.published[-1].payload == "UNLOCKED"


def test_on_mqtt_connected_with_retain(lock, context):
    lock.retain = True
    lock.current_state = LockState.LOCKED
    lock.on_mqtt_connected()
    config = json.loads(context.published[0].payload)
    assert config["ret"] is True
    assert len(context.published) == 1


@pytest.mark.parametrize(
    "payload, command",
    [
        (b"LOCK", LockCommand.LOCK),
        (b"UNLOCK", LockCommand.UNLOCK),
        (b"OPEN", LockCommand.OPEN),
        ("OPEN", LockCommand.OPEN),
    ],
)
def test_commands(lock, context, payload, command):
    received = []
    lock.on_command(lambda cmd, sender: received.append((cmd, sender)))
    lock.on_mqtt_message(data_topic(context, "uniqueLock", "cmd_t"), payload)
    assert received == [(command, lock)]


def test_unknown_command_is_ignored(lock, context):
    received = []
    lock.on_command(lambda cmd, sender: received.append(cmd))
    lock.on_mqtt_message(data_topic(context, "uniqueLock", "cmd_t"), b"CLOSE")
    assert received == []


def test_command_on_other_topic_is_ignored(lock, context):
    received = []
    lock.on_command(lambda cmd, sender: received.append(cmd))
    lock.on_mqtt_message(data_topic(context, "uniqueLock", "stat_t"), b"LOCK")
    assert received == []