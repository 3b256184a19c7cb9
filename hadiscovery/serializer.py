"""Discovery topics and the JSON serializer used for entity configuration."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

from .dictionary import (
    AVAILABILITY_TOPIC,
    CONFIG_TOPIC,
    DEVICE_PROPERTY,
    FALSE,
    NAME_PROPERTY,
    OFFLINE,
    ONLINE,
    SERIALIZER_JSON_DATA_PREFIX,
    SERIALIZER_JSON_DATA_SUFFIX,
    SERIALIZER_JSON_ESCAPE_CHAR,
    SERIALIZER_JSON_PROPERTIES_SEPARATOR,
    SERIALIZER_JSON_PROPERTY_PREFIX,
    SERIALIZER_JSON_PROPERTY_SUFFIX,
    SERIALIZER_SLASH,
    TRUE,
    UNIQUE_ID_PROPERTY,
)
from .numeric import Numeric
from .serializer_array import SerializerArray


class ValueType(enum.IntEnum):
    """Kinds of property values a serializer can hold."""

    STRING = 1
    BOOL = 2
    NUMBER = 3
    ARRAY = 4


class Flag(enum.IntEnum):
    """Special entries that expand into device or availability data."""

    WITH_DEVICE = 1
    WITH_AVAILABILITY = 2


class _EntryKind(enum.Enum):
    PROPERTY = enum.auto()
    TOPIC = enum.auto()
    FLAG = enum.auto()


@dataclass(frozen=True)
class Message:
    """A message handed to the MQTT context for publishing."""

    topic: str
    payload: str
    retain: bool


@dataclass
class MqttContext:
    """Connection-wide settings plus an in-memory record of traffic.

    ``publish`` and ``subscribe`` record what they are given; a subclass may
    override them to hand the data to a real MQTT client.
    """

    device_id: Optional[str] = None
    discovery_prefix: Optional[str] = "homeassistant"
    data_prefix: Optional[str] = "aha"
    shared_availability: bool = False
    device_serializer: Optional["Serializer"] = None
    connected: bool = True
    published: list[Message] = field(default_factory=list)
    subscriptions: list[str] = field(default_factory=list)

    @property
    def availability_topic(self) -> Optional[str]:
        """The device-wide availability topic, or None if it cannot be built."""
        return data_topic(self, None, AVAILABILITY_TOPIC)

    def publish(self, topic: str, payload: str, retain: bool = False) -> bool:
        """Publish ``payload`` on ``topic``; False when not connected."""
        if not self.connected:
            return False
        self.published.append(Message(topic, payload, retain))
        return True

    def subscribe(self, topic: str) -> bool:
        """Subscribe to ``topic``; False when not connected."""
        if not self.connected:
            return False
        self.subscriptions.append(topic)
        return True


def config_topic(
    context: Optional[MqttContext],
    component: Optional[str],
    object_id: Optional[str],
) -> Optional[str]:
    """Return ``[discovery prefix]/[component]/[device ID]/[object ID]/config``.

    None is returned when any part is missing.
    """
    if (
        component is None
        or object_id is None
        or context is None
        or context.discovery_prefix is None
        or context.device_id is None
    ):
        return None
    return SERIALIZER_SLASH.join(
        (context.discovery_prefix, component, context.device_id, object_id, CONFIG_TOPIC)
    )


def data_topic(
    context: Optional[MqttContext],
    object_id: Optional[str],
    topic: Optional[str],
) -> Optional[str]:
    """Return ``[data prefix]/[device ID]/[object ID]/[topic]``.

    The object ID part is left out when ``object_id`` is None; None is
    returned when the prefix, the device ID or the topic is missing.
    """
    if (
        topic is None
        or context is None
        or context.data_prefix is None
        or context.device_id is None
    ):
        return None
    parts = [context.data_prefix, context.device_id]
    if object_id is not None:
        parts.append(object_id)
    parts.append(topic)
    return SERIALIZER_SLASH.join(parts)


def compare_data_topics(
    context: Optional[MqttContext],
    actual_topic: Optional[str],
    object_id: Optional[str],
    topic: Optional[str],
) -> bool:
    """Return True if ``actual_topic`` is the data topic for ``object_id``."""
    if actual_topic is None:
        return False
    expected = data_topic(context, object_id, topic)
    return expected is not None and actual_topic == expected


@dataclass(frozen=True)
class _Entry:
    kind: _EntryKind
    prop: Optional[str]
    value: Any = None
    value_type: Optional[ValueType] = None
    flag: Optional[Flag] = None


class Entity:
    """Base of all entity types: topics, config publishing and availability."""

    def __init__(
        self,
        component: str,
        unique_id: Optional[str],
        context: MqttContext,
    ) -> None:
        self.component = component
        self.unique_id = unique_id
        self.context = context
        self.name: Optional[str] = None
        # None means availability is not reported for this entity.
        self.availability: Optional[bool] = None
        self.serializer: Optional[Serializer] = None

    @property
    def is_availability_configured(self) -> bool:
        return self.availability is not None

    def publish_on_data_topic(self, topic: str, payload: str, retain: bool = False) -> bool:
        """Publish ``payload`` on this entity's data topic ``topic``."""
        if self.unique_id is None:
            return False
        full_topic = data_topic(self.context, self.unique_id, topic)
        if full_topic is None:
            return False
        return self.context.publish(full_topic, payload, retain)

    def subscribe_topic(self, topic: str) -> bool:
        """Subscribe to this entity's data topic ``topic``."""
        if self.unique_id is None:
            return False
        full_topic = data_topic(self.context, self.unique_id, topic)
        if full_topic is None:
            return False
        return self.context.subscribe(full_topic)

    def publish_config(self) -> bool:
        """Build the serializer if needed and publish the discovery config."""
        self.build_serializer()
        if self.serializer is None:
            return False
        topic = config_topic(self.context, self.component, self.unique_id)
        if topic is None:
            return False
        return self.context.publish(topic, self.serializer.serialize(), True)

    def _publish_availability(self) -> bool:
        if not self.is_availability_configured or self.context.shared_availability:
            return False
        return self.publish_on_data_topic(
            AVAILABILITY_TOPIC, ONLINE if self.availability else OFFLINE, True
        )

    def build_serializer(self) -> None:
        """Create the configuration serializer with the common properties."""
        if self.serializer is not None or self.unique_id is None:
            return
        serializer = Serializer(self)
        serializer.set(NAME_PROPERTY, self.name)
        serializer.set(UNIQUE_ID_PROPERTY, self.unique_id)
        serializer.set_flag(Flag.WITH_DEVICE)
        serializer.set_flag(Flag.WITH_AVAILABILITY)
        self.serializer = serializer

    def on_mqtt_connected(self) -> None:
        """Publish the config and availability after (re)connecting."""
        if self.unique_id is None:
            return
        self.publish_config()
        self._publish_availability()

    def on_mqtt_message(self, topic: str, payload: Any) -> None:
        """Handle an incoming message; entities without commands ignore it."""
        return None


class Serializer:
    """Collects entries and renders them as a compact JSON object."""

    def __init__(self, entity: Optional[Entity] = None) -> None:
        self.entity = entity
        self._entries: list[_Entry] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[_Entry, ...]:
        return tuple(self._entries)

    def set(self, prop: Optional[str], value: Any, value_type: ValueType = ValueType.STRING) -> None:
        """Add a property; nothing is added when the name or value is None."""
        if prop is None or value is None:
            return
        self._entries.append(
            _Entry(_EntryKind.PROPERTY, prop, value, ValueType(value_type))
        )

    def set_flag(self, flag: Flag) -> None:
        """Add a device or availability entry.

        The availability entry is added only when shared availability is
        enabled or the entity reports its own availability.
        """
        if self.entity is None:
            raise ValueError("flags need a serializer that belongs to an entity")
        flag = Flag(flag)
        if flag is Flag.WITH_DEVICE:
            self._entries.append(_Entry(_EntryKind.FLAG, None, flag=flag))
            return

        context = self.entity.context
        shared = context.shared_availability
        if not shared and not self.entity.is_availability_configured:
            return
        value = context.availability_topic if shared else None
        self._entries.append(_Entry(_EntryKind.TOPIC, AVAILABILITY_TOPIC, value))

    def topic(self, topic: Optional[str]) -> None:
        """Add a data topic of the owning entity."""
        if self.entity is None or topic is None:
            return
        self._entries.append(_Entry(_EntryKind.TOPIC, topic))

    def calculate_size(self) -> int:
        """Return the length of the serialized object."""
        return len(self.serialize())

    def serialize(self) -> str:
        """Return the entries as a JSON object.

        Raises ValueError when a topic entry cannot be turned into a topic.
        """
        fragments = (self._render(entry) for entry in self._entries)
        body = SERIALIZER_JSON_PROPERTIES_SEPARATOR.join(
            fragment for fragment in fragments if fragment is not None
        )
        return f"{SERIALIZER_JSON_DATA_PREFIX}{body}{SERIALIZER_JSON_DATA_SUFFIX}"

    @staticmethod
    def _key(prop: str) -> str:
        return f"{SERIALIZER_JSON_PROPERTY_PREFIX}{prop}{SERIALIZER_JSON_PROPERTY_SUFFIX}"

    @staticmethod
    def _quoted(text: str) -> str:
        return f"{SERIALIZER_JSON_ESCAPE_CHAR}{text}{SERIALIZER_JSON_ESCAPE_CHAR}"

    def _render(self, entry: _Entry) -> Optional[str]:
        if entry.kind is _EntryKind.PROPERTY:
            return self._key(entry.prop) + self._render_value(entry)
        if entry.kind is _EntryKind.TOPIC:
            return self._render_topic(entry)
        return self._render_flag(entry)

    @staticmethod
    def _render_value(entry: _Entry) -> str:
        value = entry.value
        if entry.value_type is ValueType.STRING:
            return Serializer._quoted(str(value))
        if entry.value_type is ValueType.BOOL:
            return TRUE if value else FALSE
        if entry.value_type is ValueType.NUMBER:
            if not isinstance(value, Numeric):
                raise TypeError("number properties take a Numeric value")
            return value.to_str()
        if not isinstance(value, SerializerArray):
            raise TypeError("array properties take a SerializerArray value")
        return value.serialize()

    def _render_topic(self, entry: _Entry) -> str:
        if entry.value is not None:
            topic = str(entry.value)
        else:
            topic = data_topic(self.entity.context, self.entity.unique_id, entry.prop)
            if topic is None:
                raise ValueError(f"cannot build the data topic for {entry.prop!r}")
        return self._key(entry.prop) + self._quoted(topic)

    def _render_flag(self, entry: _Entry) -> Optional[str]:
        device_serializer = self.entity.context.device_serializer
        if entry.flag is Flag.WITH_DEVICE and device_serializer is not None:
            return self._key(DEVICE_PROPERTY) + device_serializer.serialize()
        return None