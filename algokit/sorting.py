"""Comparison sorts and merging of sorted sequences."""

from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items``, swapping adjacent pairs pass by pass."""
    result = list(items)
    for done in range(1, len(result)):
        for j in range(len(result) - done):
            if result[j + 1] < result[j]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def bubble_sort_recursive(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items``; one bubbling pass, then recurse on the rest."""
    result = list(items)

    def sort_prefix(n: int) -> None:
        if n <= 1:
            return
        for i in range(n - 1):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
        sort_prefix(n - 1)

    sort_prefix(len(result))
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items``, inserting each item into the sorted prefix."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        pos = i - 1
        while pos >= 0 and result[pos] > current:
            result[pos + 1] = result[pos]
            pos -= 1
        result[pos + 1] = current
    return result


def insertion_sort_recursive(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items``; sort the first n-1, then insert the last."""
    result = list(items)

    def sort_prefix(n: int) -> None:
        if n <= 1:
            return
        sort_prefix(n - 1)
        last = result[n - 1]
        pos = n - 2
        while pos >= 0 and result[pos] > last:
            result[pos + 1] = result[pos]
            pos -= 1
        result[pos + 1] = last

    sort_prefix(len(result))
    return result


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items`` using a max-heap."""
    result = list(items)
    n = len(result)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(result, n, root)
    for end in range(n - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``items``, moving each minimum to the front."""
    result = list(items)
    for t in range(len(result) - 1):
        pos = min(range(t, len(result)), key=result.__getitem__)
        result[t], result[pos] = result[pos], result[t]
    return result


def merge_sorted(
    first: Iterable[Any], second: Iterable[Any], descending: bool = False
) -> list[Any]:
    """Sort both inputs, then merge them into one ascending or descending list."""
    a = selection_sort(first)
    b = selection_sort(second)
    if descending:
        a.reverse()
        b.reverse()
    merged: list[Any] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if descending:
            take_first = not (a[i] < b[j])
        else:
            take_first = a[i] < b[j]
        if take_first:
            merged.append(a[i])
            i += 1
        else:
            merged.append(b[j])
            j += 1
    merged.extend(a[i:])
    merged.extend(b[j:])
    return merged


def merge_into(
    buffer: MutableSequence[Any], items: Sequence[Any], empty: Any = None
) -> None:
    """Merge the ascending ``items`` into ``buffer`` in place.

    ``buffer`` holds ascending values interleaved with ``empty`` markers;
    there must be exactly one marker for each element of ``items``.
    """
    values = [value for value in buffer if value != empty]
    slots = len(buffer) - len(values)
    if slots != len(items):
        raise ValueError(
            f"buffer has {slots} empty slots but {len(items)} items to merge"
        )
    i = j = 0
    for k in range(len(buffer)):
        if j == len(items) or (i < len(values) and values[i] <= items[j]):
            buffer[k] = values[i]
            i += 1
        else:
            buffer[k] = items[j]
            j += 1