"""Sorting and binary search over sequences of numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def shell_sort(values: Iterable[float]) -> list[float]:
    """Return a new ascending list built with Shell sort (gap halving)."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for i in range(gap, len(items)):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items


def bubble_sort(values: Iterable[float]) -> list[float]:
    """Return a new ascending list built with bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(end):
            if items[i + 1] < items[i]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def binary_search(values: Sequence[float], target: float) -> int | None:
    """Return the index of ``target`` in ascending ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = (low + high) // 2
        current = values[middle]
        if current == target:
            return middle
        if current > target:
            high = middle - 1
        else:
            low = middle + 1
    return None


def sort_and_search(
    values: Iterable[float], target: float
) -> tuple[list[float], int | None]:
    """Sort ``values`` and look up ``target``; return the sorted list and index."""
    ordered = shell_sort(values)
    return ordered, binary_search(ordered, target)