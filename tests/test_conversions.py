import pytest

from drills.conversions import (
    binary_to_decimal,
    decimal_to_binary,
    hexadecimal_to_decimal,
    octal_to_decimal,
)


@pytest.mark.parametrize("n", [0, 1, 2, 5, 10, 255, 1024, 4097])
def test_binary_round_trip(n):
    assert binary_to_decimal(decimal_to_binary(n)) == n


@pytest.mark.parametrize("n", [1, 6, 37, 300])
def test_decimal_to_binary_matches_format(n):
    assert str(decimal_to_binary(n)) == format(n, "b")


def test_decimal_to_binary_zero():
    assert decimal_to_binary(0) == 0


def test_decimal_to_binary_negative():
    with pytest.raises(ValueError):
        decimal_to_binary(-1)


@pytest.mark.parametrize("text", ["1", "1010", "111111", "100000001"])
def test_binary_to_decimal_matches_int(text):
    assert binary_to_decimal(int(text)) == int(text, 2)


def test_binary_to_decimal_nonpositive():
    assert binary_to_decimal(0) == 0
    assert binary_to_decimal(-101) == 0


@pytest.mark.parametrize("n", [0, 7, 8, 64, 511, 12345])
def test_octal_round_trip(n):
    assert octal_to_decimal(int(format(n, "o"))) == n


@pytest.mark.parametrize("n", [0, 9, 10, 15, 16, 255, 48879, 65535])
def test_hexadecimal_round_trip(n):
    assert hexadecimal_to_decimal(format(n, "X")) == n


def test_hexadecimal_ignores_other_characters():
    assert hexadecimal_to_decimal("ff") == 0
    assert hexadecimal_to_decimal("1f") == hexadecimal_to_decimal("10")
    assert hexadecimal_to_decimal("") == 0