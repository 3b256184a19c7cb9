"""A dropdown entity with a fixed list of options."""

from __future__ import annotations

from typing import Callable, Optional, Union

from .dictionary import (
    COMMAND_TOPIC,
    COMPONENT_SELECT,
    ICON_PROPERTY,
    NAME_PROPERTY,
    OPTIMISTIC_PROPERTY,
    OPTIONS_PROPERTY,
    RETAIN_PROPERTY,
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
from .serializer_array import SerializerArray

Payload = Union[str, bytes, bytearray, memoryview]
SelectCallback = Callable[[int, "Select"], None]

_SEPARATOR = ";"


def _as_bytes(payload: Payload) -> bytes:
    return payload.encode() if isinstance(payload, str) else bytes(payload)


class Select(Entity):
    """A dropdown in the panel; its state is the index of the chosen option."""

    def __init__(self, unique_id: Optional[str], context: MqttContext) -> None:
        super().__init__(COMPONENT_SELECT, unique_id, context)
        self._options: Optional[SerializerArray] = None
        self.current_state = -1
        self.icon: Optional[str] = None
        self.retain = False
        self.optimistic = False
        self._command_callback: Optional[SelectCallback] = None

    @property
    def options(self) -> Optional[tuple[str, ...]]:
        """The configured options, or None if they were never set."""
        return None if self._options is None else self._options.items

    def set_options(self, options: Optional[str]) -> None:
        """Set the options from a semicolon-separated string.

        Options can be set only once; an empty string is ignored. Parsing
        stops at the first empty option.
        """
        if options is None or self._options is not None or not options:
            return
        parts = options.split(_SEPARATOR)
        array = SerializerArray(len(parts))
        for part in parts:
            if not part:
                break
            array.add(part)
        self._options = array

    def set_state(self, state: int, force: bool = False) -> bool:
        """Publish the option at index ``state``; unchanged states need ``force``."""
        state = int(state)
        if not force and state == self.current_state:
            return True
        if self._publish_state(state):
            self.current_state = state
            return True
        return False

    def on_command(self, callback: Optional[SelectCallback]) -> Optional[SelectCallback]:
        """Register the callback called with ``(index, sender)`` on each command."""
        self._command_callback = callback
        return callback

    def build_serializer(self) -> None:
        if self.serializer is not None or self.unique_id is None or self._options is None:
            return
        serializer = Serializer(self)
        serializer.set(NAME_PROPERTY, self.name)
        serializer.set(UNIQUE_ID_PROPERTY, self.unique_id)
        serializer.set(ICON_PROPERTY, self.icon)
        serializer.set(OPTIONS_PROPERTY, self._options, ValueType.ARRAY)
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
        if self._command_callback is None or self._options is None:
            return
        if not compare_data_topics(self.context, topic, self.unique_id, COMMAND_TOPIC):
            return
        data = _as_bytes(payload)
        # The payload is matched against the leading part of each option.
        for index, option in enumerate(self._options):
            if option.encode().startswith(data):
                self._command_callback(index, self)
                return

    def _publish_state(self, state: int) -> bool:
        if self._options is None or state < 0 or state >= len(self._options):
            return False
        return self.publish_on_data_topic(STATE_TOPIC, self._options[state], True)