import pytest

from maths.integer import Integer, Sign

MAX = (1 << 64) - 1


def test_from_u8():
    assert Integer.from_unsigned(0, 8).parts == [0]
    assert Integer.from_unsigned(255, 8).parts == [255]
    assert Integer.from_unsigned(42, 8).parts == [42]


def test_from_u64():
    assert Integer.from_unsigned(0, 64).parts == [0]
    assert Integer.from_unsigned(MAX, 64).parts == [MAX]
    assert Integer.from_unsigned(42, 64).parts == [42]


def test_from_u128_splits_into_limbs():
    assert Integer.from_unsigned(0, 128).parts == [0, 0]
    assert Integer.from_unsigned((1 << 128) - 1, 128).parts == [MAX, MAX]
    assert Integer.from_unsigned(42, 128).parts == [42, 0]


def test_unsigned_sign():
    assert Integer.from_unsigned(0, 32).sign is None
    assert Integer.from_unsigned(7, 32).sign is Sign.POSITIVE


def test_unsigned_out_of_range():
    with pytest.raises(ValueError):
        Integer.from_unsigned(256, 8)
    with pytest.raises(ValueError):
        Integer.from_unsigned(-1, 8)


def test_unsupported_width():
    with pytest.raises(ValueError):
        Integer.from_unsigned(1, 12)
    with pytest.raises(ValueError):
        Integer.from_signed(1, 7)


def test_signed_positive():
    value = Integer.from_signed(42, 16)
    assert value.sign is Sign.POSITIVE
    assert value.parts == [42]


def test_signed_zero():
    value = Integer.from_signed(0, 64)
    assert value.sign is None
    assert value.parts == [0]


def test_signed_negative_is_complemented():
    value = Integer.from_signed(-1, 8)
    assert value.sign is Sign.NEGATIVE
    assert value.parts == [MAX - 1]


def test_signed_128_positive():
    assert Integer.from_signed(42, 128).parts == [42, 0]


def test_signed_out_of_range():
    with pytest.raises(ValueError):
        Integer.from_signed(128, 8)
    with pytest.raises(ValueError):
        Integer.from_signed(-129, 8)


def test_sign_ordering():
    negative = Integer.from_signed(-5, 32).sign
    positive = Integer.from_signed(5, 32).sign
    assert negative is Sign.NEGATIVE
    assert positive is Sign.POSITIVE
    assert negative < positive
    assert sorted([positive, negative]) == [Sign.NEGATIVE, Sign.POSITIVE]