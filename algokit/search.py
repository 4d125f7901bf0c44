"""Linear, binary and ternary search, and pivot finding in rotated arrays."""

from collections.abc import Sequence
from typing import Any


def linear_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first item equal to ``target``, or None."""
    return next((i for i, item in enumerate(items) if item == target), None)


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def ternary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending ``items``, or None.

    The range is cut at two pivots a third of the way apart.
    """
    left, right = 0, len(items)
    while right - left > 0:
        third = (right - left) // 3
        first = left + third
        second = first + third
        if items[first] == target:
            return first
        if items[second] == target:
            return second
        if items[first] > target:
            right = first
        elif items[second] < target:
            left = second + 1
        else:
            left, right = first, second
    return None


def find_pivot(items: Sequence[Any]) -> int | None:
    """Return the index of the largest item of a rotated ascending sequence.

    Returns None when the sequence is not rotated.
    """
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        if mid < end and items[mid] > items[mid + 1]:
            return mid
        if mid > start and items[mid] < items[mid - 1]:
            return mid - 1
        if items[start] >= items[mid]:
            end = mid - 1
        else:
            start = mid + 1
    return None