"""Linear and binary search over sequences."""

from collections.abc import Sequence
from typing import Any


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in the ascending sequence ``items``, or None."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        value = items[mid]
        if value == key:
            return mid
        if key > value:
            start = mid + 1
        else:
            end = mid - 1
    return None


def linear_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first occurrence of ``target``, or None."""
    for index, value in enumerate(items):
        if value == target:
            return index
    return None