"""An on/off switch entity."""

from __future__ import annotations

from typing import Callable, Optional, Union

from .dictionary import (
    COMMAND_TOPIC,
    COMPONENT_SWITCH,
    DEVICE_CLASS_PROPERTY,
    ICON_PROPERTY,
    NAME_PROPERTY,
    OPTIMISTIC_PROPERTY,
    RETAIN_PROPERTY,
    STATE_OFF,
    STATE_ON,
    STATE_TOPIC,
    UNIQUE_ID_PROPERTY,
)
from .serializer import (
    Entity,
    Flag,
    MqttContext,
    Serializer,
    ValueType,
    compare_data_topics,
)

Payload = Union[str, bytes, bytearray, memoryview]
SwitchCallback = Callable[[bool, "Switch"], None]


def _as_bytes(payload: Payload) -> bytes:
    return payload.encode() if isinstance(payload, str) else bytes(payload)


class Switch(Entity):
    """A switch shown in the panel that sends on/off commands to the device."""

    def __init__(self, unique_id: Optional[str], context: MqttContext) -> None:
        super().__init__(COMPONENT_SWITCH, unique_id, context)
        self.device_class: Optional[str] = None
        self.icon: Optional[str] = None
        self.retain = False
        self.optimistic = False
        self.current_state = False
        self._command_callback: Optional[SwitchCallback] = None

    def set_state(self, state: bool, force: bool = False) -> bool:
        """Publish ``state``; an unchanged state is not published unless forced.

        Returns True if the state is known to Home Assistant afterwards.
        """
        state = bool(state)
        if not force and state == self.current_state:
            return True
        if self._publish_state(state):
            self.current_state = state
            return True
        return False

    def turn_on(self) -> bool:
        """Same as ``set_state(True)``."""
        return self.set_state(True)

    def turn_off(self) -> bool:
        """Same as ``set_state(False)``."""
        return self.set_state(False)

    def on_command(self, callback: Optional[SwitchCallback]) -> Optional[SwitchCallback]:
        """Register the callback called with ``(state, sender)`` on each command."""
        self._command_callback = callback
        return callback

    def build_serializer(self) -> None:
        if self.serializer is not None or self.unique_id is None:
            return
        serializer = Serializer(self)
        serializer.set(NAME_PROPERTY, self.name)
        serializer.set(UNIQUE_ID_PROPERTY, self.unique_id)
        serializer.set(DEVICE_CLASS_PROPERTY, self.device_class)
        serializer.set(ICON_PROPERTY, self.icon)
        if self.retain:
            serializer.set(RETAIN_PROPERTY, True, ValueType.BOOL)
        if self.optimistic:
            serializer.set(OPTIMISTIC_PROPERTY, True, ValueType.BOOL)
        serializer.set_flag(Flag.WITH_DEVICE)
        serializer.set_flag(Flag.WITH_AVAILABILITY)
        serializer.topic(STATE_TOPIC)
        serializer.topic(COMMAND_TOPIC)
        self.serializer = serializer

    def on_mqtt_connected(self) -> None:
        if self.unique_id is None:
            return
        super().on_mqtt_connected()
        if not self.retain:
            self._publish_state(self.current_state)
        self.subscribe_topic(COMMAND_TOPIC)

    def on_mqtt_message(self, topic: str, payload: Payload) -> None:
        if self._command_callback is None:
            return
        if compare_data_topics(self.context, topic, self.unique_id, COMMAND_TOPIC):
            state = len(_as_bytes(payload)) == len(STATE_ON)
            self._command_callback(state, self)

    def _publish_state(self, state: bool) -> bool:
        return self.publish_on_data_topic(
            STATE_TOPIC, STATE_ON if state else STATE_OFF, True
        )