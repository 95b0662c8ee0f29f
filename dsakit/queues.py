"""A fixed-capacity circular FIFO queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 5


class QueueFullError(Exception):
    """Raised when enqueueing onto a full queue."""


class QueueEmptyError(IndexError):
    """Raised when dequeueing from an empty queue."""


class CircularQueue(Generic[T]):
    """A queue stored in a ring of ``capacity`` slots."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._slots: list[T | None] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def enqueue(self, item: T) -> None:
        """Add ``item`` at the rear."""
        if self.is_full():
            raise QueueFullError(f"queue is full ({self.capacity} items)")
        rear = (self._front + self._size) % self.capacity
        self._slots[rear] = item
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise QueueEmptyError("dequeue from an empty queue")
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return item  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % self.capacity]  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"CircularQueue(capacity={self.capacity}, items={list(self)!r})"