"""Classic comparison sorts.

Every function takes any iterable and returns a new ascending list. The
input is left unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by exchanging: each slot in turn swaps with any smaller later item."""
    items = list(values)
    for i in range(len(items) - 1):
        for j in range(i + 1, len(items)):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by sliding each item left past every larger item before it."""
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j - 1] > items[j]:
            items[j - 1], items[j] = items[j], items[j - 1]
            j -= 1
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sorted(items: list[Any]) -> list[Any]:
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(_merge_sorted(items[:middle]), _merge_sorted(items[middle:]))


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    return _merge_sorted(list(values))


def _partition(items: list[Any], start: int, end: int) -> int:
    """Partition around ``items[end]`` and return the pivot's final index."""
    pivot = items[end]
    boundary = start - 1
    for i in range(start, end + 1):
        if items[i] < pivot:
            boundary += 1
            items[i], items[boundary] = items[boundary], items[i]
    items[boundary + 1], items[end] = items[end], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort with the last item of each range as the pivot."""
    items = list(values)
    start, end = 0, len(items) - 1
    pending: list[tuple[int, int]] = []
    while True:
        if start < end:
            pivot = _partition(items, start, end)
            # Defer the larger side so the pending list stays shallow.
            if pivot - start < end - pivot:
                pending.append((pivot + 1, end))
                end = pivot - 1
            else:
                pending.append((start, pivot - 1))
                start = pivot + 1
        elif pending:
            start, end = pending.pop()
        else:
            return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining item into each slot in turn."""
    items = list(values)
    for i in range(len(items)):
        smallest = i
        for j in range(i + 1, len(items)):
            if items[smallest] > items[j]:
                smallest = j
        items[smallest], items[i] = items[i], items[smallest]
    return items