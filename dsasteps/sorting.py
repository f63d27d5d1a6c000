"""In-place comparison sorts and a zero-moving helper for lists of numbers."""

from __future__ import annotations

from heapq import merge
from typing import Any


def bubble_sort(values: list[Any]) -> None:
    """Sort ``values`` in place by repeatedly bubbling the largest item to the end."""
    for end in range(len(values) - 1, 0, -1):
        for j in range(end):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]


def insertion_sort(values: list[Any]) -> None:
    """Sort ``values`` in place by inserting each item into the sorted prefix."""
    for i in range(len(values)):
        j = i
        while j > 0 and values[j - 1] > values[j]:
            values[j - 1], values[j] = values[j], values[j - 1]
            j -= 1


def selection_sort(values: list[Any]) -> None:
    """Sort ``values`` in place by selecting the minimum of the unsorted suffix."""
    for i in range(len(values) - 1):
        smallest = min(range(i, len(values)), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]


def _merge_sorted(items: list[Any]) -> list[Any]:
    if len(items) <= 1:
        return list(items)
    middle = (len(items) + 1) // 2
    return list(merge(_merge_sorted(items[:middle]), _merge_sorted(items[middle:])))


def merge_sort(values: list[Any]) -> None:
    """Sort ``values`` in place with a stable top-down merge sort."""
    values[:] = _merge_sorted(values)


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[low]
    i, j = low, high
    while i < j:
        while i < high and values[i] <= pivot:
            i += 1
        while j > low and values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def _quick_sort(values: list[Any], low: int, high: int) -> None:
    while low < high:
        split = _partition(values, low, high)
        # Recurse into the smaller side to keep the stack shallow.
        if split - low < high - split:
            _quick_sort(values, low, split - 1)
            low = split + 1
        else:
            _quick_sort(values, split + 1, high)
            high = split - 1


def quick_sort(values: list[Any]) -> None:
    """Sort ``values`` in place with quicksort, using the first item as pivot."""
    _quick_sort(values, 0, len(values) - 1)


def _bubble_pass(values: list[Any], length: int) -> None:
    if length <= 1:
        return
    swapped = False
    for j in range(length - 1):
        if values[j] > values[j + 1]:
            values[j], values[j + 1] = values[j + 1], values[j]
            swapped = True
    if swapped:
        _bubble_pass(values, length - 1)


def recursive_bubble_sort(values: list[Any]) -> None:
    """Sort ``values`` in place with bubble sort, recursing on a shrinking prefix."""
    _bubble_pass(values, len(values))


def _insert_from(values: list[Any], i: int) -> None:
    if i >= len(values):
        return
    j = i
    while j > 0 and values[j - 1] > values[j]:
        values[j - 1], values[j] = values[j], values[j - 1]
        j -= 1
    _insert_from(values, i + 1)


def recursive_insertion_sort(values: list[Any]) -> None:
    """Sort ``values`` in place with insertion sort, one recursive step per item."""
    _insert_from(values, 0)


def move_zeros_to_end(values: list[Any]) -> None:
    """Move every zero to the end in place, keeping the other items in order."""
    nonzero = [value for value in values if value != 0]
    values[:] = nonzero + [0] * (len(values) - len(nonzero))