"""Decimal to fixed-width binary conversion.

A :class:`BinaryDigit` is a value type holding up to six bits (MSB first)
alongside the decimal value they encode.  Conversion never raises: an
out-of-range bit count produces :data:`INVALID_DIGIT`, recognisable by its
``bit_count == 0``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from binary_clock.result import ErrorCode

MAX_BITS = 6
"""Capacity of every digit's bit vector."""

OFF_GLYPH = "🌚"
ON_GLYPH = "🌝"

DigitStyle = Literal["binary", "emoji", "decimal"]


@dataclass(frozen=True)
class BinaryDigit:
    """Immutable binary encoding of a single decimal digit.

    Attributes:
        bit_count:     Number of significant bits (1-6).  ``0`` marks an
                       invalid digit.
        bits:          Exactly six booleans, most significant first.  Only the
                       first ``bit_count`` entries are meaningful; the rest
                       are always ``False``.
        decimal_value: The encoded value, already masked to ``bit_count`` bits.
    """

    bit_count: int = 0
    bits: tuple[bool, ...] = (False,) * MAX_BITS
    decimal_value: int = 0

    @property
    def is_valid(self) -> bool:
        return self.bit_count != 0

    @property
    def significant_bits(self) -> tuple[bool, ...]:
        """The first ``bit_count`` bits."""
        return self.bits[: self.bit_count]

    def as_ints(self) -> list[int]:
        """Significant bits as a list of ``0``/``1`` integers."""
        return [1 if bit else 0 for bit in self.significant_bits]

    def format(self, style: DigitStyle = "binary") -> str:
        """Render the digit as text.

        ``binary`` gives ``"0"``/``"1"`` characters, ``emoji`` one moon glyph
        per bit and ``decimal`` the decimal value.  Invalid digits render as
        an empty string in every style.
        """
        if not self.is_valid:
            return ""
        if style == "binary":
            return "".join("1" if bit else "0" for bit in self.significant_bits)
        if style == "emoji":
            return "".join(ON_GLYPH if bit else OFF_GLYPH for bit in self.significant_bits)
        if style == "decimal":
            return str(self.decimal_value)
        raise ValueError(f"Unknown digit style: {style!r}")


INVALID_DIGIT = BinaryDigit()


def check_bit_count(bit_count: int) -> ErrorCode:
    """Return :attr:`ErrorCode.INVALID_BIT_COUNT` unless 1 <= *bit_count* <= 6."""
    if not 1 <= bit_count <= MAX_BITS:
        return ErrorCode.INVALID_BIT_COUNT
    return ErrorCode.SUCCESS


def to_binary(value: int, bit_count: int) -> BinaryDigit:
    """Encode *value* using *bit_count* bits, MSB first.

    Values wider than *bit_count* are truncated with ``(1 << bit_count) - 1``.
    Returns :data:`INVALID_DIGIT` when *bit_count* is outside 1-6.
    """
    if check_bit_count(bit_count) is not ErrorCode.SUCCESS:
        return INVALID_DIGIT

    masked = value & ((1 << bit_count) - 1)
    bits = [bool((masked >> (bit_count - 1 - i)) & 1) for i in range(bit_count)]
    bits.extend([False] * (MAX_BITS - bit_count))

    return BinaryDigit(bit_count=bit_count, bits=tuple(bits), decimal_value=masked)


def to_decimal(digit: BinaryDigit | None) -> int:
    """Rebuild the integer encoded by *digit*'s significant bits.

    ``None`` and invalid digits decode to ``0``.
    """
    if digit is None or not digit.is_valid:
        return 0

    result = 0
    for i, bit in enumerate(digit.significant_bits):
        if bit:
            result |= 1 << (digit.bit_count - 1 - i)
    return result
