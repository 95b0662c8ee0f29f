"""A circular singly linked list and the Josephus elimination game."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    next: Optional[_Node[T]] = None


class CircularList(Generic[T]):
    """A singly linked list whose last node links back to the first."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: T) -> None:
        """Add ``value`` after the last node, keeping the ring closed."""
        node: _Node[T] = _Node(value)
        if self._tail is None:
            node.next = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Go once round the ring, starting at the first node."""
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node.value  # type: ignore[union-attr]
            node = node.next  # type: ignore[union-attr]

    def __str__(self) -> str:
        return ", ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"


def josephus(names: Sequence[T], step: int) -> tuple[list[T], T]:
    """Play the Josephus game over ``names`` in a circle.

    Counting starts at the first name, which counts as 1; the name reached
    at ``step`` is eliminated and counting resumes with the one after it.
    Returns the names in the order they were eliminated and the survivor.
    """
    if step < 1:
        raise ValueError(f"step must be at least 1, got {step}")
    circle = deque(names)
    if not circle:
        raise ValueError("at least one name is needed")
    eliminated: list[T] = []
    while len(circle) > 1:
        circle.rotate(-(step - 1))
        eliminated.append(circle.popleft())
    return eliminated, circle[0]