"""A bounded list of strings serialized as a JSON array."""

from __future__ import annotations

from collections.abc import Iterator

from .dictionary import (
    SERIALIZER_JSON_ARRAY_PREFIX,
    SERIALIZER_JSON_ARRAY_SUFFIX,
    SERIALIZER_JSON_ESCAPE_CHAR,
    SERIALIZER_JSON_PROPERTIES_SEPARATOR,
)


class SerializerArray:
    """Holds up to ``size`` strings and renders them as a JSON array."""

    def __init__(self, size: int) -> None:
        self.size = size
        self._items: list[str] = []

    @property
    def items(self) -> tuple[str, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __getitem__(self, index: int) -> str:
        return self._items[index]

    def add(self, item: str) -> bool:
        """Append ``item``; return False if the array is already full."""
        if len(self._items) >= self.size:
            return False
        self._items.append(item)
        return True

    def calculate_size(self) -> int:
        """Return the length of the serialized array."""
        return len(self.serialize())

    def serialize(self) -> str:
        """Return the items as a JSON array of strings."""
        body = SERIALIZER_JSON_PROPERTIES_SEPARATOR.join(
            f"{SERIALIZER_JSON_ESCAPE_CHAR}{item}{SERIALIZER_JSON_ESCAPE_CHAR}"
            for item in self._items
        )
        return f"{SERIALIZER_JSON_ARRAY_PREFIX}{body}{SERIALIZER_JSON_ARRAY_SUFFIX}"

    def clear(self) -> None:
        """Remove all items."""
        self._items.clear()