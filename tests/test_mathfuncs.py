import itertools
import math

import pytest

from drills.basics import is_prime
from drills.mathfuncs import (
    factorial,
    fibonacci,
    is_pythagorean_triplet,
    n_choose_r,
    pascal_triangle,
    primes_in_range,
    sum_first_n,
)


@pytest.mark.parametrize("n", [0, 1, 2, 5, 10, 20])
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative_is_one():
    assert factorial(-4) == factorial(0)


def test_fibonacci_prefix():
    assert fibonacci(7) == [0, 1, 1, 2, 3, 5, 8]


@pytest.mark.parametrize("n", [0, 1, 2, 15])
def test_fibonacci_recurrence(n):
    terms = fibonacci(n)
    assert len(terms) == n
    assert all(c == a + b for a, b, c in zip(terms, terms[1:], terms[2:]))


@pytest.mark.parametrize("n,r", [(5, 2), (10, 0), (10, 10), (12, 7)])
def test_n_choose_r_matches_comb(n, r):
    assert n_choose_r(n, r) == math.comb(n, r)


def test_pascal_triangle_rows():
    rows = pascal_triangle(8)
    assert len(rows) == 8
    for i, row in enumerate(rows):
        assert row == [math.comb(i, j) for j in range(i + 1)]
        assert sum(row) == 2**i


def test_pascal_triangle_empty():
    assert pascal_triangle(0) == []


def test_primes_in_range():
    result = primes_in_range(10, 60)
    assert all(is_prime(p) for p in result)
    assert set(result) == {x for x in range(10, 61) if is_prime(x)}
    assert primes_in_range(-5, 1) == []


@pytest.mark.parametrize("triple", list(itertools.permutations([3, 4, 5])))
def test_pythagorean_triplet_any_order(triple):
    assert is_pythagorean_triplet(*triple) is True


@pytest.mark.parametrize("triple", [(2, 3, 4), (1, 1, 1), (5, 12, 14)])
def test_not_pythagorean_triplet(triple):
    assert is_pythagorean_triplet(*triple) is False


@pytest.mark.parametrize("n", [0, 1, 7, 100])
def test_sum_first_n(n):
    assert sum_first_n(n) == sum(range(n + 1))
    assert 2 * sum_first_n(n) == n * (n + 1)