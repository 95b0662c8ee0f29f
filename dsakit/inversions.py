"""Counting inversion pairs: pairs i < j with values[i] > values[j]."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations
from typing import Any


def count_inversions_brute_force(values: Iterable[Any]) -> int:
    """Count inversions by comparing every pair."""
    return sum(1 for first, second in combinations(list(values), 2) if first > second)


def _sort_and_count(values: Sequence[Any]) -> tuple[list[Any], int]:
    if len(values) <= 1:
        return list(values), 0
    middle = len(values) // 2
    left, left_count = _sort_and_count(values[:middle])
    right, right_count = _sort_and_count(values[middle:])
    merged: list[Any] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            count += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(values: Iterable[Any]) -> int:
    """Count inversions with merge sort in O(n log n); the input is not changed."""
    return _sort_and_count(list(values))[1]