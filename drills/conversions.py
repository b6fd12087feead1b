"""Conversions between decimal and digit-encoded binary, octal and hexadecimal."""


def _from_digit_encoded(n: int, base: int) -> int:
    """Read the decimal digits of ``n`` as digits in ``base``."""
    total = 0
    weight = 1
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit * weight
        weight *= base
    return total


def binary_to_decimal(n: int) -> int:
    """Interpret the decimal digits of ``n`` as a binary number."""
    return _from_digit_encoded(n, 2)


def decimal_to_binary(n: int) -> int:
    """Return an integer whose decimal digits spell ``n`` in binary."""
    if n < 0:
        raise ValueError("negative numbers are not supported")
    power = 1
    while power <= n:
        power *= 2
    power //= 2
    result = 0
    while power:
        bit = 1 if n >= power else 0
        n -= bit * power
        result = result * 10 + bit
        power //= 2
    return result


def hexadecimal_to_decimal(text: str) -> int:
    """Convert an upper-case hexadecimal string to an integer.

    Characters outside ``0-9`` and ``A-F`` contribute nothing but still
    occupy a digit position.
    """
    total = 0
    for position, char in enumerate(reversed(text)):
        if "0" <= char <= "9":
            value = ord(char) - ord("0")
        elif "A" <= char <= "F":
            value = ord(char) - ord("A") + 10
        else:
            continue
        total += value * 16**position
    return total


def octal_to_decimal(n: int) -> int:
    """Interpret the decimal digits of ``n`` as an octal number."""
    return _from_digit_encoded(n, 8)