"""Membership search in sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(items: Sequence[Any], key: Any) -> bool:
    """Return whether ``key`` is in ``items``, which must be sorted ascending."""
    index = bisect_left(items, key)
    return index < len(items) and items[index] == key


def linear_search(items: Iterable[Any], key: Any) -> bool:
    """Return whether ``key`` is in ``items``, scanning from the start."""
    return any(item == key for item in items)