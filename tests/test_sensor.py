import pytest

from hadiscovery.numeric import Numeric, Precision
from hadiscovery.sensor import Sensor, SensorNumber
from hadiscovery.serializer import MqttContext

STATE = "aha/testDevice/uid/stat_t"
CONFIG = "homeassistant/sensor/testDevice/uid/config"


@pytest.fixture
def context():
    return MqttContext(device_id="testDevice")


def test_set_value_publishes_retained(context):
    sensor = Sensor("uid", context)
    assert sensor.set_value("abc") is True
    msg = context.published[-1]
    assert (msg.topic, msg.payload, msg.retain) == (STATE, "abc", True)


def test_set_value_publishes_every_time(context):
    sensor = Sensor("uid", context)
    sensor.set_value("x")
    sensor.set_value("x")
    assert [m.payload for m in context.published] == ["x", "x"]


def test_set_value_fails_when_disconnected(context):
    context.connected = False
    assert Sensor("uid", context).set_value("abc") is False
    assert context.published == []


def test_set_value_none_is_rejected(context):
    assert Sensor("uid", context).set_value(None) is False


def test_default_config(context):
    sensor = Sensor("uid", context)
    sensor.build_serializer()
    assert sensor.serializer.serialize() == '{"uniq_id":"uid","stat_t":"' + STATE + '"}'


def test_extended_config(context):
    sensor = Sensor("uid", context)
    sensor.name = "Temp"
    sensor.device_class = "temperature"
    sensor.icon = "mdi:home"
    sensor.unit_of_measurement = "C"
    sensor.force_update = True
    sensor.build_serializer()
    assert sensor.serializer.serialize() == (
        '{"name":"Temp","uniq_id":"uid","dev_cla":"temperature","ic":"mdi:home",'
        '"unit_of_meas":"C","frc_upd":true,"stat_t":"' + STATE + '"}'
    )


def test_on_connected_publishes_config_only(context):
    Sensor("uid", context).on_mqtt_connected()
    assert [m.topic for m in context.published] == [CONFIG]
    assert context.subscriptions == []


def test_without_unique_id_nothing_happens(context):
    sensor = Sensor(None, context)
    sensor.on_mqtt_connected()
    assert sensor.serializer is None
    assert context.published == []


def test_number_publishes_integer(context):
    sensor = SensorNumber("uid", context)
    assert sensor.set_value(25) is True
    assert context.published[-1].payload == "25"
    assert sensor.current_value == Numeric(25, 0)


def test_number_publishes_float_with_precision(context):
    sensor = SensorNumber("uid", context, Precision.P1)
    assert sensor.set_value(21.5) is True
    assert context.published[-1].payload == "21.5"


def test_number_precision_mismatch_rejected(context):
    sensor = SensorNumber("uid", context)
    assert sensor.set_value(Numeric(5, 1)) is False
    assert context.published == []
    assert not sensor.current_value.is_set


def test_number_unchanged_not_republished_unless_forced(context):
    sensor = SensorNumber("uid", context)
    sensor.set_value(7)
    assert sensor.set_value(7) is True
    assert len(context.published) == 1
    assert sensor.set_value(7, force=True) is True
    assert len(context.published) == 2


def test_number_failed_publish_keeps_old_value(context):
    sensor = SensorNumber("uid", context)
    context.connected = False
    assert sensor.set_value(3) is False
    assert not sensor.current_value.is_set


def test_number_current_value_published_on_connect(context):
    sensor = SensorNumber("uid", context)
    sensor.set_current_value(42)
    assert context.published == []
    sensor.on_mqtt_connected()
    assert [(m.topic, m.payload) for m in context.published][1] == (STATE, "42")
    assert context.published[0].topic == CONFIG


def test_number_current_value_precision_mismatch_ignored(context):
    sensor = SensorNumber("uid", context, Precision.P2)
    sensor.set_current_value(Numeric(1, 0))
    assert not sensor.current_value.is_set


def test_number_unset_value_not_published_on_connect(context):
    SensorNumber("uid", context).on_mqtt_connected()
    assert [m.topic for m in context.published] == [CONFIG]