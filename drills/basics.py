"""Small integer exercises: digit tricks, primes, branching and echo loops."""

from collections.abc import Iterable, Iterator

_GREETINGS = {
    "a": "Namaste",
    "b": "Hola",
    "c": "Ciao!",
    "d": "Salute!",
}
_UNKNOWN_GREETING = "I am still learning more!"


def _digits(n: int) -> Iterator[int]:
    """Yield the decimal digits of a positive number, least significant first."""
    while n > 0:
        n, digit = divmod(n, 10)
        yield digit


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def is_armstrong(n: int) -> bool:
    """Return True when the sum of the cubes of the digits of ``n`` equals ``n``."""
    return sum(d**3 for d in _digits(n)) == n


def calculate(a: int, b: int, op: str) -> int:
    """Apply ``op`` (one of ``+ - * /``) to two integers.

    Division rounds toward zero. An unknown operator raises ValueError.
    """
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise ZeroDivisionError("division by zero")
        return _truncating_div(a, b)
    raise ValueError(f"Enter another operator (got {op!r})")


def non_multiples_of_three(limit: int = 100) -> Iterator[int]:
    """Yield the numbers from 1 to ``limit`` that are not divisible by three."""
    return (i for i in range(1, limit + 1) if i % 3 != 0)


def echo_until_nonpositive(values: Iterable[int]) -> Iterator[int]:
    """Yield the first value unconditionally, then the following ones while positive."""
    it = iter(values)
    try:
        first = next(it)
    except StopIteration:
        return
    yield first
    for value in it:
        if value <= 0:
            return
        yield value


def echo_while_positive(values: Iterable[int]) -> Iterator[int]:
    """Yield values until the first one that is not positive."""
    for value in values:
        if value <= 0:
            return
        yield value


def parity(n: int) -> str:
    """Return ``"Even"`` or ``"Odd"``."""
    remainder = n % 2
    if remainder == 0:
        return "Even"
    return "Odd"


def add(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b


def max_of_three(a: int, b: int, c: int) -> int:
    """Return ``a`` or ``b`` when strictly greater than the other two, otherwise ``c``."""
    if a > b and a > c:
        return a
    if b > a and b > c:
        return b
    return c


def is_prime(n: int) -> bool:
    """Trial-division primality test; numbers below 2 are not prime."""
    return n >= 2 and all(n % d != 0 for d in range(2, n))


def primes_between(a: int, b: int) -> list[int]:
    """Return the primes in the closed range ``[a, b]``."""
    return [i for i in range(a, b + 1) if is_prime(i)]


def reverse_digits(n: int) -> int:
    """Reverse the decimal digits of a positive number; zero or less gives 0."""
    result = 0
    for digit in _digits(n):
        result = result * 10 + digit
    return result


def sum_to(n: int) -> int:
    """Return 1 + 2 + ... + n (0 when ``n`` is below 1)."""
    return sum(range(1, n + 1))


def greeting(button: str) -> str:
    """Return the greeting bound to a button letter."""
    return _GREETINGS.get(button, _UNKNOWN_GREETING)