"""Sensor entities that publish textual or numeric readings."""

from __future__ import annotations

from typing import Optional, Union

from .dictionary import (
    COMPONENT_SENSOR,
    DEVICE_CLASS_PROPERTY,
    FORCE_UPDATE_PROPERTY,
    ICON_PROPERTY,
    NAME_PROPERTY,
    STATE_TOPIC,
    UNIQUE_ID_PROPERTY,
    UNIT_OF_MEASUREMENT_PROPERTY,
)
from .numeric import Numeric, Precision
from .serializer import Entity, Flag, MqttContext, Serializer, ValueType

NumberLike = Union[Numeric, int, float]


class Sensor(Entity):
    """A sensor whose textual values are shown in the panel.

    The value is not remembered: every ``set_value`` call publishes.
    """

    def __init__(self, unique_id: Optional[str], context: MqttContext) -> None:
        super().__init__(COMPONENT_SENSOR, unique_id, context)
        self.device_class: Optional[str] = None
        self.force_update = False
        self.icon: Optional[str] = None
        self.unit_of_measurement: Optional[str] = None

    def set_value(self, value: Optional[str]) -> bool:
        """Publish ``value`` on the state topic; True if it was published."""
        if value is None:
            return False
        return self.publish_on_data_topic(STATE_TOPIC, str(value), True)

    def build_serializer(self) -> None:
        if self.serializer is not None or self.unique_id is None:
            return
        serializer = Serializer(self)
        serializer.set(NAME_PROPERTY, self.name)
        serializer.set(UNIQUE_ID_PROPERTY, self.unique_id)
        serializer.set(DEVICE_CLASS_PROPERTY, self.device_class)
        serializer.set(ICON_PROPERTY, self.icon)
        serializer.set(UNIT_OF_MEASUREMENT_PROPERTY, self.unit_of_measurement)
        if self.force_update:
            serializer.set(FORCE_UPDATE_PROPERTY, True, ValueType.BOOL)
        serializer.set_flag(Flag.WITH_DEVICE)
        serializer.set_flag(Flag.WITH_AVAILABILITY)
        serializer.topic(STATE_TOPIC)
        self.serializer = serializer

    def on_mqtt_connected(self) -> None:
        if self.unique_id is None:
            return
        super().on_mqtt_connected()


class SensorNumber(Sensor):
    """A sensor that publishes numbers of a fixed precision."""

    def __init__(
        self,
        unique_id: Optional[str],
        context: MqttContext,
        precision: Precision = Precision.P0,
    ) -> None:
        super().__init__(unique_id, context)
        self.precision = Precision(precision)
        self.current_value = Numeric()

    def _as_numeric(self, value: NumberLike) -> Numeric:
        if isinstance(value, Numeric):
            return value
        return Numeric(value, self.precision)

    def set_value(self, value: NumberLike, force: bool = False) -> bool:
        """Publish ``value``; an unchanged value is not published unless forced.

        A value whose precision differs from the sensor's is rejected.
        """
        number = self._as_numeric(value)
        if number.precision != self.precision:
            return False
        if not force and number == self.current_value:
            return True
        if self._publish_value(number):
            self.current_value = Numeric.from_base(number.base_value, number.precision) \
                if number.is_set else Numeric()
            return True
        return False

    def set_current_value(self, value: NumberLike) -> None:
        """Remember ``value`` without publishing it; mismatched precision is ignored."""
        number = self._as_numeric(value)
        if number.precision == self.precision:
            self.current_value = number

    def on_mqtt_connected(self) -> None:
        if self.unique_id is None:
            return
        super().on_mqtt_connected()
        self._publish_value(self.current_value)

    def _publish_value(self, value: Numeric) -> bool:
        if not value.is_set or value.calculate_size() == 0:
            return False
        return self.publish_on_data_topic(STATE_TOPIC, value.to_str(), True)