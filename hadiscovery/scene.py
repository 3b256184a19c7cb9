"""A scene entity that runs a callback when activated."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .dictionary import (
    COMMAND_TOPIC,
    COMPONENT_SCENE,
    ICON_PROPERTY,
    NAME_PROPERTY,
    PAYLOAD_ON_PROPERTY,
    RETAIN_PROPERTY,
    STATE_ON,
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

SceneCallback = Callable[["Scene"], None]


class Scene(Entity):
    """A scene in Home Assistant that triggers a callback once activated."""

    def __init__(self, unique_id: Optional[str], context: MqttContext) -> None:
        super().__init__(COMPONENT_SCENE, unique_id, context)
        self.icon: Optional[str] = None
        self.retain = False
        self._command_callback: Optional[SceneCallback] = None

    def on_command(self, callback: Optional[SceneCallback]) -> Optional[SceneCallback]:
        """Register the callback called with ``sender`` when the scene is activated."""
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
        # Home Assistant rejects scenes without this property.
        serializer.set(PAYLOAD_ON_PROPERTY, STATE_ON)
        serializer.set_flag(Flag.WITH_AVAILABILITY)
        serializer.topic(COMMAND_TOPIC)
        self.serializer = serializer

    def on_mqtt_connected(self) -> None:
        if self.unique_id is None:
            return
        super().on_mqtt_connected()
        self.subscribe_topic(COMMAND_TOPIC)

    def on_mqtt_message(self, topic: str, payload: Any) -> None:
        if self._command_callback is not None and compare_data_topics(
            self.context, topic, self.unique_id, COMMAND_TOPIC
        ):
            self._command_callback(self)