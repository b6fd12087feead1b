"""Text patterns built from stars, digits and spaces, returned as lists of lines."""


def _stars(count: int) -> str:
    return "*" * max(count, 0)


def _spaces(count: int) -> str:
    return " " * max(count, 0)


def zero_one_triangle(n: int) -> list[str]:
    """Rows of alternating 1s and 0s; odd rows start with 1 and even rows with 0."""
    rows = []
    for i in range(1, n + 1):
        first = i % 2
        rows.append("".join(str((first + k) % 2) for k in range(i)))
    return rows


def butterfly(n: int) -> list[str]:
    """Two mirrored wings of stars separated by a gap that narrows and then widens."""
    upper = [_stars(i) + _spaces(2 * (n - i)) + _stars(i) for i in range(1, n + 1)]
    return upper + upper[::-1]


def diamond(n: int) -> list[str]:
    """A centred star pyramid of ``n`` rows followed by its inverted twin."""
    upper = [_spaces(n - i) + _stars(2 * i - 1) for i in range(1, n + 1)]
    return upper + upper[::-1]


def floyds_triangle(n: int) -> list[str]:
    """Consecutive numbers from 1 laid out in rows of growing length.

    Each number is followed by a single space.
    """
    rows = []
    counter = 1
    for i in range(1, n + 1):
        numbers = range(counter, counter + i)
        rows.append("".join(f"{value} " for value in numbers))
        counter += i
    return rows


def half_pyramid(n: int) -> list[str]:
    """A right-aligned triangle of stars."""
    return [_spaces(n - i) + _stars(i) for i in range(1, n + 1)]


def half_pyramid_numbers(n: int) -> list[str]:
    """Row ``i`` repeats the number ``i`` exactly ``i`` times."""
    return [str(i) * i for i in range(1, n + 1)]


def hollow_rectangle(rows: int, columns: int) -> list[str]:
    """A rectangle outlined in stars with a blank interior."""
    lines = []
    for i in range(1, rows + 1):
        if i in (1, rows):
            lines.append(_stars(columns))
        else:
            lines.append(
                "".join("*" if j in (1, columns) else " " for j in range(1, columns + 1))
            )
    return lines


def inverted_half_pyramid(n: int) -> list[str]:
    """A left-aligned triangle of stars that shrinks by one each row."""
    return [_stars(n - i + 1) for i in range(1, n + 1)]


def inverted_numbers(n: int) -> list[str]:
    """Rows counting up from 1, each one number shorter than the last."""
    return ["".join(str(v) for v in range(1, n - i + 2)) for i in range(1, n + 1)]


def number_pyramid(n: int) -> list[str]:
    """A centred pyramid where row ``i`` counts from 1 to ``i``, each followed by a space."""
    return [
        _spaces(n - i) + "".join(f"{v} " for v in range(1, i + 1))
        for i in range(1, n + 1)
    ]


def palindromic_pyramid(n: int) -> list[str]:
    """A right-aligned pyramid where row ``i`` counts down to 1 and back up to ``i``."""
    rows = []
    for i in range(1, n + 1):
        down = "".join(str(v) for v in range(i, 0, -1))
        up = "".join(str(v) for v in range(2, i + 1))
        rows.append(_spaces(n - i) + down + up)
    return rows


def rectangle(rows: int, columns: int) -> list[str]:
    """A solid rectangle of stars."""
    return [_stars(columns) for _ in range(rows)]


def rhombus(n: int) -> list[str]:
    """A slanted parallelogram of ``n`` rows, each ``n`` stars wide."""
    return [_spaces(n - i) + _stars(n) for i in range(1, n + 1)]


def zigzag(n: int) -> list[str]:
    """A star zigzag ``n`` columns wide.

    The number of rows is one less than half of ``n`` (rounded toward zero).
    """
    half = int(n / 2)
    return [
        "".join(
            "*" if (i + j) % 4 == 0 or (i == 2 and j % 4 == 0) else " "
            for j in range(1, n + 1)
        )
        for i in range(1, half)
    ]