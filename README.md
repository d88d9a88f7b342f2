# maths

Natural numbers and integers held as 64-bit limbs, least significant limb first.

## Natural numbers

`maths.natural.Natural` has one of two forms:

- **small**: a single 64-bit word.
- **big**: a tuple of limbs, for values that do not fit in one word.

```python
from maths.natural import Natural

n = Natural.from_int(2**64 + 5)
n.is_big()          # True
n.limbs             # (5, 1)
int(n)              # 18446744073709551621

a = Natural.small(3)
b = Natural.parse("100000000000000000000")
int(a + b)          # 100000000000000000003
int(a * b)          # 300000000000000000000

Natural.big([2, 0]).trim() == Natural.small(2)   # True: high zero limbs are dropped
Natural.from_limbs([7, 0, 0]).is_small()          # True
```

Constructors:

- `Natural(value=0)` and `Natural.from_int(value)` convert a non-negative `int`, giving the small form when the value fits in one word. A negative value raises `ValueError`; a non-`int` raises `TypeError`.
- `Natural.from_signed(value)` accepts only strictly positive values and raises `ValueError` for zero or below.
- `Natural.small(value)` builds the single-word form; `Natural.big(parts)` builds the limb form exactly as given, without trimming. Each limb must fit in 64 bits.
- `Natural.from_limbs(limbs)` builds the limb form and trims it.
- `Natural.parse(text)` reads a decimal string in chunks of 39 digits; a chunk that is not digits, or whose value exceeds an unsigned 128-bit integer, raises `ValueError`.

Other operations:

- `trim()` drops high zero limbs, returning the small form if one limb remains; trimming a big number whose limbs are all zero raises `ValueError`.
- `shift_up(n)` shifts up by `n` whole limbs (a negative `n` raises `ValueError`).
- `+`, `*`, `==`, `<` and the other comparisons, `hash()` and `int()`.

Equality is structural: a small number never equals a big one, even with the same value, so `Natural.big([2, 0]) != Natural.small(2)` until trimmed. In ordering, every small number is less than every big one; numbers of the same form compare by value.

## Integers

`maths.integer.Integer` is a dataclass holding a `sign` (a `Sign`, or `None` for zero) and `parts`, a list of 64-bit limbs. It is built from a value of a fixed bit width (8, 16, 32, 64 or 128; any other raises `ValueError`, as does a value out of range for the width):

```python
from maths.integer import Integer, Sign

Integer.from_unsigned(42, 8)           # Integer(sign=Sign.POSITIVE, parts=[42])
Integer.from_unsigned(2**64 - 1, 128)  # parts == [18446744073709551615, 0]
Integer.from_signed(-1, 64).sign       # Sign.NEGATIVE
```

Widths up to 64 bits give one limb; 128 bits gives two. For negative values, `from_signed` stores the limbs of the magnitude with every bit inverted.

`Sign` is an `IntEnum` with `NEGATIVE` (-1) and `POSITIVE` (1).

## What it does not do

- No subtraction, division or bit operations on `Natural`; only addition and multiplication.
- No arithmetic, comparison or conversion back to `int` on `Integer`.
- No decimal, hex or other text output beyond `repr()`.
- No real or rational numbers, and no command-line tool.

## Development

```
pip install -e .[test]
pytest
```