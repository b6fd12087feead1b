"""Elementary comparison sorts returning new lists."""

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, moving the largest remaining item to the end each pass."""
    result = list(items)
    n = len(result)
    for pass_number in range(1, n):
        for i in range(n - pass_number):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, inserting each item into the sorted prefix."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy, swapping the smallest remaining item into each position."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        for j in range(i + 1, n):
            if result[j] < result[i]:
                result[i], result[j] = result[j], result[i]
    return result