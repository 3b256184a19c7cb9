"""Small string helpers."""

from __future__ import annotations

from .dictionary import HEX_MAP


def ends_with(string: str | None, suffix: str | None) -> bool:
    """Return True if ``string`` ends with ``suffix``.

    Missing or empty arguments, and a suffix longer than the string, never match.
    """
    if string is None or suffix is None:
        return False
    if not string or not suffix or len(suffix) > len(string):
        return False
    return string.endswith(suffix)


def bytes_to_hex(data: bytes | bytearray | memoryview) -> str:
    """Return the lower-case hex representation of ``data``, two characters per byte."""
    return "".join(HEX_MAP[byte >> 4] + HEX_MAP[byte & 0x0F] for byte in bytes(data))