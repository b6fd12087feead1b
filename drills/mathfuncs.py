"""Factorials, Fibonacci numbers, binomials, primes and Pythagorean triplets."""

from drills.basics import is_prime


def factorial(n: int) -> int:
    """Return ``n!``; values below 1 give 1."""
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, starting 0, 1, 1, ..."""
    terms = []
    a, b = 0, 1
    for _ in range(n):
        terms.append(a)
        a, b = b, a + b
    return terms


def n_choose_r(n: int, r: int) -> int:
    """Return ``n! / (r! (n - r)!)`` computed from factorials."""
    return factorial(n) // (factorial(r) * factorial(n - r))


def pascal_triangle(n: int) -> list[list[int]]:
    """Return the first ``n`` rows of Pascal's triangle."""
    return [[n_choose_r(i, j) for j in range(i + 1)] for i in range(n)]


def primes_in_range(a: int, b: int) -> list[int]:
    """Return the primes in the closed range ``[a, b]``."""
    return [i for i in range(a, b + 1) if is_prime(i)]


def is_pythagorean_triplet(x: int, y: int, z: int) -> bool:
    """Return True when the square of the largest equals the sum of the other two squares."""
    largest, *rest = sorted((x, y, z), reverse=True)
    return largest**2 == sum(v**2 for v in rest)


def sum_first_n(n: int) -> int:
    """Return 1 + 2 + ... + n (0 when ``n`` is below 1)."""
    return sum(range(1, n + 1))