"""Binary search tree with insertion, search, deletion and the three depth-first orders."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class _Node:
    data: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """An unbalanced binary search tree; equal values go into the left subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value``; values not greater than a node go to its left."""
        new = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value <= node.data:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def delete(self, value: Any) -> bool:
        """Remove one node holding ``value``; return whether one was found.

        A node with two children takes the smallest value of its right
        subtree, which is then deleted from that subtree.
        """
        self._root, removed = self._delete(self._root, value)
        if removed:
            self._size -= 1
        return removed

    def _delete(self, node: _Node | None, value: Any) -> tuple[_Node | None, bool]:
        if node is None:
            return None, False
        if value < node.data:
            node.left, removed = self._delete(node.left, value)
            return node, removed
        if value > node.data:
            node.right, removed = self._delete(node.right, value)
            return node, removed
        if node.left is None or node.right is None:
            return (node.left if node.left is not None else node.right), True
        successor = self._leftmost(node.right)
        node.data = successor.data
        node.right, _ = self._delete(node.right, successor.data)
        return node, True

    @staticmethod
    def _leftmost(node: _Node) -> _Node:
        while node.left is not None:
            node = node.left
        return node

    def minimum(self) -> Any:
        """The smallest value in the tree; raise :class:`ValueError` if it is empty."""
        if self._root is None:
            raise ValueError("minimum of an empty tree")
        return self._leftmost(self._root).data

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if node.data == value:
                return True
            node = node.left if value <= node.data else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inorder())

    def preorder(self) -> list[Any]:
        """Values in node, left, right order."""
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def inorder(self) -> list[Any]:
        """Values in left, node, right order: ascending."""
        result: list[Any] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.data)
            node = node.right
        return result

    def postorder(self) -> list[Any]:
        """Values in left, right, node order."""
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result