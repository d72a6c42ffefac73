"""A singly linked list and two stacks sharing one fixed-size store."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list built in the order of the given values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        last: _Node | None = None
        for value in values:
            node = _Node(value)
            if last is None:
                self._head = node
            else:
                last.next = node
            last = node

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the head of the list."""
        self._head = _Node(value, self._head)

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        reversed_head: _Node | None = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = reversed_head
            reversed_head = node
            node = following
        self._head = reversed_head

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        return reversed(list(self))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return "H->" + "".join(f"{value}->" for value in self) + "|||"


class StackOverflowError(Exception):
    """Raised when pushing onto a full double stack."""


class StackUnderflowError(Exception):
    """Raised when popping from an empty stack."""


class DoubleStack:
    """Two stacks, A and B, that share a store of ``capacity`` items."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._a: list[Any] = []
        self._b: list[Any] = []

    def _check_room(self, name: str) -> None:
        if len(self._a) + len(self._b) >= self.capacity:
            raise StackOverflowError(f"stack {name} overflow")

    def push_a(self, item: Any) -> None:
        """Push ``item`` onto stack A."""
        self._check_room("A")
        self._a.append(item)

    def push_b(self, item: Any) -> None:
        """Push ``item`` onto stack B."""
        self._check_room("B")
        self._b.append(item)

    def pop_a(self) -> Any:
        """Pop and return the top of stack A."""
        if not self._a:
            raise StackUnderflowError("stack A underflow")
        return self._a.pop()

    def pop_b(self) -> Any:
        """Pop and return the top of stack B."""
        if not self._b:
            raise StackUnderflowError("stack B underflow")
        return self._b.pop()