# drills

This is a set of small programming exercises. Each one is a plain function that returns its result. None of them reads input or prints anything. Text patterns come back as lists of lines.

## Install

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Modules

### `drills.basics`

Number checks:

- `is_armstrong(n)`: true when the sum of the cubes of the digits of `n` equals `n`.
- `parity(n)`: returns `"Even"` or `"Odd"`.
- `is_prime(n)`: trial division. Numbers below 2 are not prime.
- `max_of_three(a, b, c)`: returns `a` or `b` when it is strictly greater than the other two. Otherwise it returns `c`.

Arithmetic:

- `calculate(a, b, op)`: applies `+`, `-`, `*` or `/`. Division rounds toward zero. A zero divisor raises `ZeroDivisionError`. An unknown operator raises `ValueError`.
- `add(a, b)`: returns the sum of two numbers.
- `sum_to(n)`: returns 1 + … + n.
- `reverse_digits(n)`: returns the decimal digits in reverse order. Zero or a negative number gives 0.

Sequences:

- `primes_between(a, b)`: the primes in the closed range from `a` to `b`.
- `non_multiples_of_three(limit=100)`: the numbers from 1 to `limit` that three does not divide.
- `echo_while_positive(values)`: yields values until the first one that is not positive.
- `echo_until_nonpositive(values)`: always yields the first value, then the values after it while they stay positive.

Other:

- `greeting(button)`: maps `"a"`–`"d"` to a greeting. Any other button gives a fallback message.

### `drills.conversions`

- `binary_to_decimal(n)` and `octal_to_decimal(n)` read the decimal digits of an integer as digits in base 2 or base 8.
- `hexadecimal_to_decimal(text)` reads an upper-case hex string. Characters outside `0-9` and `A-F` add nothing, but they still take up a digit position.
- `decimal_to_binary(n)` returns an integer whose decimal digits spell `n` in binary. A negative `n` raises `ValueError`.

### `drills.mathfuncs`

- `factorial(n)`
- `fibonacci(n)`: the first `n` terms, starting with 0, 1.
- `n_choose_r(n, r)`
- `pascal_triangle(n)`: a list of rows.
- `primes_in_range(a, b)`
- `is_pythagorean_triplet(x, y, z)`: the numbers may be given in any order.
- `sum_first_n(n)`

### `drills.patterns`

Every function in this module returns a list of strings, one string per row.

Pyramids:

- `half_pyramid`
- `half_pyramid_numbers`
- `inverted_half_pyramid`
- `number_pyramid`
- `palindromic_pyramid`

Triangles and sequences:

- `floyds_triangle`
- `zero_one_triangle`
- `inverted_numbers`

Other shapes:

- `butterfly`
- `diamond`
- `rectangle(rows, columns)`
- `hollow_rectangle(rows, columns)`
- `rhombus`
- `zigzag`

### `drills.searching`

- `binary_search(items, key)`: `items` must be in ascending order. Returns an index of `key`, or `None` if it is not there.
- `linear_search(items, target)`: returns the index of the first match, or `None`.

### `drills.sorting`

`bubble_sort`, `insertion_sort` and `selection_sort` each take any iterable and return a new sorted list.

## Example

```python
from drills.basics import is_armstrong
from drills.conversions import hexadecimal_to_decimal
from drills.patterns import half_pyramid
from drills.sorting import bubble_sort

is_armstrong(153)              # True
hexadecimal_to_decimal("1F")   # 31
print("\n".join(half_pyramid(3)))
bubble_sort([3, 1, 2])         # [1, 2, 3]
```

## What it does not do

The package has no command-line tool and no interactive prompts. You import the functions and pass them values.