"""Signed integers stored as a sign and 64-bit limbs."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

LIMB_BITS = 64
LIMB_MAX = (1 << LIMB_BITS) - 1
_WIDTHS = (8, 16, 32, 64, 128)


class Sign(enum.IntEnum):
    """Sign of a non-zero integer; negative orders before positive."""

    NEGATIVE = -1
    POSITIVE = 1


def _check_width(bits: int) -> None:
    if bits not in _WIDTHS:
        raise ValueError(f"unsupported width {bits}; expected one of {_WIDTHS}")


def _limbs(value: int, bits: int) -> list[int]:
    count = max(1, bits // LIMB_BITS)
    return [(value >> (LIMB_BITS * index)) & LIMB_MAX for index in range(count)]


@dataclass
class Integer:
    """An integer with an optional sign (``None`` for zero) and limbs, least significant first."""

    sign: Sign | None = None
    parts: list[int] = field(default_factory=lambda: [0])

    @classmethod
    def from_unsigned(cls, value: int, bits: int = 64) -> Integer:
        """Convert an unsigned value of the given bit width."""
        _check_width(bits)
        if not 0 <= value < (1 << bits):
            raise ValueError(f"{value} does not fit in an unsigned {bits}-bit integer")
        sign = None if value == 0 else Sign.POSITIVE
        return cls(sign, _limbs(value, bits))

    @classmethod
    def from_signed(cls, value: int, bits: int = 64) -> Integer:
        """Convert a signed value; negative magnitudes are stored one's-complemented."""
        _check_width(bits)
        limit = 1 << (bits - 1)
        if not -limit <= value < limit:
            raise ValueError(f"{value} does not fit in a signed {bits}-bit integer")
        if value == 0:
            sign = None
        elif value < 0:
            sign = Sign.NEGATIVE
        else:
            sign = Sign.POSITIVE
        parts = _limbs(abs(value), bits)
        if sign is Sign.NEGATIVE:
            parts = [part ^ LIMB_MAX for part in parts]
        return cls(sign, parts)