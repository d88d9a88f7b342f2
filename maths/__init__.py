"""Arbitrary-size natural numbers and signed integers stored as 64-bit limbs."""

__version__ = "0.1.0"
__all__ = ["natural", "integer"]