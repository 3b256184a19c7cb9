"""A lock entity that can be locked, unlocked and opened from the panel."""

from __future__ import annotations

import enum
from typing import Callable, Optional, Union

from .dictionary import (
    COMMAND_TOPIC,
    COMPONENT_LOCK,
    ICON_PROPERTY,
    LOCK_COMMAND,
    NAME_PROPERTY,
    OPEN_COMMAND,
    OPTIMISTIC_PROPERTY,
    RETAIN_PROPERTY,
    STATE_LOCKED,
    STATE_TOPIC,
    STATE_UNLOCKED,
    UNIQUE_ID_PROPERTY,
    UNLOCK_COMMAND,
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


class LockState(enum.IntEnum):
    """States of the lock reported to Home Assistant."""

    UNKNOWN = 0
    LOCKED = 1
    UNLOCKED = 2


class LockCommand(enum.IntEnum):
    """Commands sent by Home Assistant."""

    LOCK = 1
    UNLOCK = 2
    OPEN = 3


LockCallback = Callable[[LockCommand, "Lock"], None]

_COMMANDS = (
    (LOCK_COMMAND, LockCommand.LOCK),
    (UNLOCK_COMMAND, LockCommand.UNLOCK),
    (OPEN_COMMAND, LockCommand.OPEN),
)


def _as_bytes(payload: Payload) -> bytes:
    return payload.encode() if isinstance(payload, str) else bytes(payload)


class Lock(Entity):
    """A lock (for example a door lock) controlled from the panel."""

    def __init__(self, unique_id: Optional[str], context: MqttContext) -> None:
        super().__init__(COMPONENT_LOCK, unique_id, context)
        self.icon: Optional[str] = None
        self.retain = False
        self.optimistic = False
        self.current_state = LockState.UNKNOWN
        self._command_callback: Optional[LockCallback] = None

    def set_state(self, state: LockState, force: bool = False) -> bool:
        """Publish ``state``; an unchanged state is not published unless forced."""
        state = LockState(state)
        if not force and state == self.current_state:
            return True
        if self._publish_state(state):
            self.current_state = state
            return True
        return False

    def on_command(self, callback: Optional[LockCallback]) -> Optional[LockCallback]:
        """Register the callback called with ``(command, sender)`` on each command."""
        self._command_callback = callback
        return callback

    def build_serializer(self) -> None:
        if self.serializer is not None or self.unique_id is None:
            return
        serializer = Serializer(self)
        serializer.set(NAME_PROPERTY, self.name)
        serializer.set(UNIQUE_ID_PROPERTY, self.unique_id)
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
        if compare_data_topics(self.context, topic, self.unique_id, COMMAND_TOPIC):
            self._handle_command(_as_bytes(payload))

    def _handle_command(self, data: bytes) -> None:
        if self._command_callback is None:
            return
        # The payload is matched against the leading part of each command.
        for text, command in _COMMANDS:
            if text.encode().startswith(data):
                self._command_callback(command, self)
                return

    def _publish_state(self, state: LockState) -> bool:
        if state == LockState.UNKNOWN:
            return False
        payload = STATE_LOCKED if state == LockState.LOCKED else STATE_UNLOCKED
        return self.publish_on_data_topic(STATE_TOPIC, payload, True)