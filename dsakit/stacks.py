"""A bounded LIFO stack and two small algorithms built on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping from or peeking at an empty stack."""


class Stack(Generic[T]):
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Put ``item`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError(f"stack is full ({self.capacity} items)")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflowError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflowError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack(capacity={self.capacity}, items={list(self)!r})"


def reverse_string(text: str) -> str:
    """Reverse ``text`` by pushing every character and popping them all."""
    stack: Stack[str] = Stack(max(len(text), 1))
    for char in text:
        stack.push(char)
    chars = []
    while not stack.is_empty():
        chars.append(stack.pop())
    return "".join(chars)


def sort_with_stacks(values: Iterable[T]) -> list[T]:
    """Return the values in ascending order, sorted with two stacks.

    The main stack keeps its smallest item on top; each new value is slid
    into place by moving the smaller items to a helper stack and back.
    """
    items = list(values)
    capacity = max(len(items), 1)
    main: Stack[T] = Stack(capacity)
    helper: Stack[T] = Stack(capacity)
    for value in items:
        while not main.is_empty() and value > main.peek():
            helper.push(main.pop())
        main.push(value)
        while not helper.is_empty():
            main.push(helper.pop())
    return list(main)