"""Fixed-point numbers as they are exchanged with Home Assistant."""

from __future__ import annotations

import enum
import math
import struct

_DIGIT_ZERO = ord("0")
_INT64_MASK = (1 << 64) - 1
_INT64_SIGN = 1 << 63


class Precision(enum.IntEnum):
    """Number of digits in the decimal part of a number."""

    P0 = 0
    P1 = 1
    P2 = 2
    P3 = 3


def _to_int64(value: int) -> int:
    """Wrap ``value`` into the signed 64-bit range."""
    value &= _INT64_MASK
    return value - (1 << 64) if value & _INT64_SIGN else value


def _to_float32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


class Numeric:
    """A number stored as an integer base value plus a decimal precision.

    A precision of ``p`` means the base value holds the number multiplied by
    ``10**p``; for example a base value of ``1234`` with precision ``1``
    represents ``123.4``. A number may also be unset.
    """

    MAX_DIGITS = 19

    __slots__ = ("is_set", "base_value", "precision")
    __hash__ = None  # mutable

    def __init__(self, value: int | float | None = None, precision: int = 0) -> None:
        if value is None:
            self.is_set = False
            self.base_value = 0
            self.precision = 0
            return

        self.is_set = True
        self.precision = int(precision)
        base = self.precision_base()
        if isinstance(value, float):
            scaled = _to_float32(_to_float32(value) * float(base))
            self.base_value = _to_int64(math.trunc(scaled))
        else:
            self.base_value = int(value) * base

    @classmethod
    def from_str(cls, buffer: str | bytes | bytearray) -> Numeric:
        """Parse a base value (an optionally signed run of digits).

        The result has precision zero; anything that is not a number of at
        most ``MAX_DIGITS`` digits gives an unset number.
        """
        data = buffer.encode() if isinstance(buffer, str) else bytes(buffer)
        if not data:
            return cls()

        negative = data[0] == ord("-")
        digits = data[1:] if negative else data
        if len(digits) > cls.MAX_DIGITS:
            return cls()

        out = 0
        for byte in digits:
            digit = byte - _DIGIT_ZERO
            if not 0 <= digit <= 9:
                return cls()
            out = out * 10 + digit

        out = _to_int64(out)
        return cls.from_base(_to_int64(-out) if negative else out, 0)

    @classmethod
    def from_base(cls, base_value: int, precision: int = 0) -> Numeric:
        """Create a number from its base value without any scaling."""
        number = cls()
        number.is_set = True
        number.base_value = int(base_value)
        number.precision = int(precision)
        return number

    def precision_base(self) -> int:
        """Return the multiplier that turns a number into its base value."""
        return {1: 10, 2: 100, 3: 1000}.get(self.precision, 1)

    def calculate_size(self) -> int:
        """Return the length of the textual form, or 0 when the number is unset."""
        if not self.is_set:
            return 0

        magnitude = abs(self.base_value)
        negative = self.base_value < 0
        digits = len(str(magnitude)) + (1 if negative else 0)

        if self.precision > 0:
            if magnitude == 0:
                return 1
            # one digit + dot + decimal digits (+ sign)
            minimum = self.precision + (3 if negative else 2)
            return digits + 1 if digits >= minimum else minimum

        return digits

    def to_str(self) -> str:
        """Return the textual form; unset and zero numbers give ``"0"``."""
        if not self.is_set or self.base_value == 0:
            return "0"

        sign = "-" if self.base_value < 0 else ""
        magnitude = abs(self.base_value)
        if self.precision <= 0:
            return f"{sign}{magnitude}"

        whole, fraction = divmod(magnitude, self.precision_base())
        return f"{sign}{whole}.{fraction:0{self.precision}d}"

    def reset(self) -> None:
        """Make the number unset."""
        self.is_set = False
        self.base_value = 0
        self.precision = 0

    def _is_integer_in(self, low: int, high: int) -> bool:
        return self.is_set and self.precision == 0 and low <= self.base_value <= high

    def is_uint8(self) -> bool:
        return self._is_integer_in(0, 0xFF)

    def is_uint16(self) -> bool:
        return self._is_integer_in(0, 0xFFFF)

    def is_uint32(self) -> bool:
        return self._is_integer_in(0, 0xFFFFFFFF)

    def is_int8(self) -> bool:
        return self._is_integer_in(-(1 << 7), (1 << 7) - 1)

    def is_int16(self) -> bool:
        return self._is_integer_in(-(1 << 15), (1 << 15) - 1)

    def is_int32(self) -> bool:
        return self._is_integer_in(-(1 << 31), (1 << 31) - 1)

    def is_float(self) -> bool:
        return self.is_set and self.precision > 0

    def to_float(self) -> float:
        """Return the represented value as a float."""
        return self.base_value / float(self.precision_base())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Numeric):
            return NotImplemented
        return (
            self.is_set == other.is_set
            and self.base_value == other.base_value
            and self.precision == other.precision
        )

    def __repr__(self) -> str:
        if not self.is_set:
            return "Numeric()"
        return f"Numeric.from_base({self.base_value}, {self.precision})"