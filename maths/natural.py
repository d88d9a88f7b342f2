"""Arbitrary-size natural numbers stored as 64-bit limbs."""

from __future__ import annotations

import functools
import re
from itertools import product, zip_longest
from typing import Iterable

LIMB_BITS = 64
LIMB_MAX = (1 << LIMB_BITS) - 1
_U128_MAX = (1 << 128) - 1
_CHUNK_DIGITS = 39
_CHUNK_PATTERN = re.compile(r"\+?[0-9]+")


def _check_limb(value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"limb must be an int, got {type(value).__name__}")
    if not 0 <= value <= LIMB_MAX:
        raise ValueError(f"limb {value} does not fit in {LIMB_BITS} bits")
    return value


def _split_limbs(value: int) -> list[int]:
    limbs = [value & LIMB_MAX]
    value >>= LIMB_BITS
    while value:
        limbs.append(value & LIMB_MAX)
        value >>= LIMB_BITS
    return limbs


def _add_limbs(lhs: Iterable[int], rhs: Iterable[int]) -> list[int]:
    result = []
    carry = 0
    for left, right in zip_longest(lhs, rhs, fillvalue=0):
        total = left + right + carry
        result.append(total & LIMB_MAX)
        carry = total >> LIMB_BITS
    if carry:
        result.append(carry)
    return result


@functools.total_ordering
class Natural:
    """A natural number held either as one machine word (small) or as limbs (big).

    Limbs are stored least significant first. Equality is structural, as for
    the underlying variants: a small number never equals a big one.
    """

    __slots__ = ("_small", "_limbs")

    def __init__(self, value: int = 0) -> None:
        other = Natural.from_int(value)
        self._small = other._small
        self._limbs = other._limbs

    @classmethod
    def _make(cls, small: bool, limbs: Iterable[int]) -> Natural:
        obj = cls.__new__(cls)
        obj._small = small
        obj._limbs = tuple(limbs)
        return obj

    @classmethod
    def small(cls, value: int) -> Natural:
        """Build the single-word variant."""
        return cls._make(True, (_check_limb(value),))

    @classmethod
    def big(cls, parts: Iterable[int]) -> Natural:
        """Build the multi-limb variant exactly as given, without trimming."""
        return cls._make(False, (_check_limb(part) for part in parts))

    @classmethod
    def from_int(cls, value: int) -> Natural:
        """Convert a non-negative integer, using the small form when it fits."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"expected an int, got {type(value).__name__}")
        if value < 0:
            raise ValueError("a natural number cannot be negative")
        if value <= LIMB_MAX:
            return cls.small(value)
        return cls._make(False, _split_limbs(value))

    @classmethod
    def from_signed(cls, value: int) -> Natural:
        """Convert a signed integer; zero and negative values are rejected."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"expected an int, got {type(value).__name__}")
        if value <= 0:
            raise ValueError(f"{value} is not a positive integer")
        return cls.from_int(value)

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> Natural:
        """Collect limbs into a big number and trim it."""
        return cls.big(limbs).trim()

    @classmethod
    def parse(cls, text: str) -> Natural:
        """Parse a decimal string in chunks of 39 digits, each an unsigned 128-bit value."""
        total = cls.small(0)
        remaining = text
        exponent = 0
        while remaining:
            remaining, chunk = remaining[:-_CHUNK_DIGITS], remaining[-_CHUNK_DIGITS:]
            if not _CHUNK_PATTERN.fullmatch(chunk):
                raise ValueError(f"invalid natural number literal: {text!r}")
            chunk_value = int(chunk)
            if chunk_value > _U128_MAX:
                raise ValueError(f"invalid natural number literal: {text!r}")
            part = cls.from_int(chunk_value) * cls.from_int(10 ** (_CHUNK_DIGITS * exponent))
            exponent += 1
            total = total + part
        return total

    @property
    def limbs(self) -> tuple[int, ...]:
        """The stored words, least significant first."""
        return self._limbs

    def is_small(self) -> bool:
        return self._small

    def is_big(self) -> bool:
        return not self._small

    def trim(self) -> Natural:
        """Drop high zero limbs; a single remaining limb becomes the small form."""
        if self._small:
            return self
        limbs = list(self._limbs)
        while limbs and limbs[-1] == 0:
            limbs.pop()
        if not limbs:
            raise ValueError("a big natural must hold at least one non-zero limb")
        if len(limbs) == 1:
            return Natural.small(limbs[0])
        return Natural._make(False, limbs)

    def shift_up(self, n: int) -> Natural:
        """Shift up by ``n`` whole limbs."""
        if n < 0:
            raise ValueError("shift amount cannot be negative")
        if n == 0:
            return self
        return Natural._make(False, (0,) * n + self._limbs)

    def __add__(self, other: object) -> Natural:
        if not isinstance(other, Natural):
            return NotImplemented
        if self._small and other._small:
            total = self._limbs[0] + other._limbs[0]
            if total > LIMB_MAX:
                return Natural.big((total & LIMB_MAX, 1))
            return Natural.small(total)
        return Natural._make(False, _add_limbs(self._limbs, other._limbs))

    def __mul__(self, other: object) -> Natural:
        if not isinstance(other, Natural):
            return NotImplemented
        result = Natural.small(0)
        for (left_index, left), (right_index, right) in product(
            enumerate(self._limbs), enumerate(other._limbs)
        ):
            term = Natural.from_int(left * right).shift_up(left_index + right_index)
            result = result + term
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Natural):
            return NotImplemented
        return self._small == other._small and self._limbs == other._limbs

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Natural):
            return NotImplemented
        if self._small != other._small:
            return self._small
        return int(self) < int(other)

    def __hash__(self) -> int:
        return hash((self._small, self._limbs))

    def __int__(self) -> int:
        return sum(limb << (LIMB_BITS * index) for index, limb in enumerate(self._limbs))

    def __repr__(self) -> str:
        if self._small:
            return f"Natural.small({self._limbs[0]})"
        return f"Natural.big({list(self._limbs)})"