"""A singly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from dsakit.stacks import Stack

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional[_Node[T]] = None


class LinkedList(Generic[T]):
    """A singly linked list; positions are counted from 1."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> _Node[T]:
        node = self._head
        for _ in range(position - 1):
            node = node.next  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def append(self, value: T) -> None:
        """Add ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert(self, position: int, value: T) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(
                f"insert position {position} out of range 1..{self._size + 1}"
            )
        if position == self._size + 1:
            self.append(value)
            return
        if position == 1:
            self._head = _Node(value, self._head)
        else:
            previous = self._node_at(position - 1)
            previous.next = _Node(value, previous.next)
        self._size += 1

    def delete(self, position: int) -> T:
        """Remove and return the value at ``position``."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        if not 1 <= position <= self._size:
            raise IndexError(f"delete position {position} out of range 1..{self._size}")
        if position == 1:
            node = self._head
            self._head = node.next
            if self._head is None:
                self._tail = None
        else:
            previous = self._node_at(position - 1)
            node = previous.next  # type: ignore[assignment]
            previous.next = node.next
            if node is self._tail:
                self._tail = previous
        self._size -= 1
        return node.value

    def pop(self) -> T:
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        return self.delete(self._size)

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        previous: Optional[_Node[T]] = None
        current = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head, self._tail = previous, self._head

    def reverse_values(self) -> None:
        """Reverse the list in place by passing its values through a stack."""
        stack: Stack[T] = Stack(max(self._size, 1))
        for value in self:
            stack.push(value)
        for node in self._nodes():
            node.value = stack.pop()

    def merge(self, other: LinkedList[T]) -> None:
        """Move every node of ``other`` onto the end of this list.

        ``other`` is left empty.
        """
        if other is self:
            raise ValueError("cannot merge a list into itself")
        if other._head is None:
            return
        if self._tail is None:
            self._head = other._head
        else:
            self._tail.next = other._head
        self._tail = other._tail
        self._size += other._size
        other._head = other._tail = None
        other._size = 0

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value

    def __str__(self) -> str:
        return ", ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"