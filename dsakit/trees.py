"""Binary tree nodes, their traversals, and a binary search tree."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def preorder(node: Optional[TreeNode]) -> list[Any]:
    """Values in root, left, right order."""
    result: list[Any] = []
    pending = [node] if node is not None else []
    while pending:
        current = pending.pop()
        result.append(current.value)
        if current.right is not None:
            pending.append(current.right)
        if current.left is not None:
            pending.append(current.left)
    return result


def inorder(node: Optional[TreeNode]) -> list[Any]:
    """Values in left, root, right order."""
    result: list[Any] = []
    pending: list[TreeNode] = []
    current = node
    while pending or current is not None:
        while current is not None:
            pending.append(current)
            current = current.left
        current = pending.pop()
        result.append(current.value)
        current = current.right
    return result


def postorder(node: Optional[TreeNode]) -> list[Any]:
    """Values in left, right, root order."""
    result: list[Any] = []
    pending = [node] if node is not None else []
    while pending:
        current = pending.pop()
        result.append(current.value)
        if current.left is not None:
            pending.append(current.left)
        if current.right is not None:
            pending.append(current.right)
    result.reverse()
    return result


def tree_size(node: Optional[TreeNode]) -> int:
    """Number of nodes in the tree rooted at ``node``."""
    return len(preorder(node))


class BinarySearchTree:
    """A binary search tree of distinct values; duplicates are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[TreeNode] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False if it was already present."""
        if self.root is None:
            self.root = TreeNode(value)
            self._size += 1
            return True
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def delete(self, value: Any) -> bool:
        """Remove ``value``; return False if it was not present.

        A node with two children takes the smallest value of its right
        subtree, and that value's node is removed instead.
        """
        parent: Optional[TreeNode] = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            parent, node = successor_parent, successor
        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1
        return True

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def inorder(self) -> list[Any]:
        """Values in ascending order."""
        return inorder(self.root)

    def preorder(self) -> list[Any]:
        return preorder(self.root)

    def postorder(self) -> list[Any]:
        return postorder(self.root)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"