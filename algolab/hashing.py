"""Hash tables: a prime-sized direct table, linear probing of integers, and word tables."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class CollisionError(Exception):
    """Raised when a key's slot already holds a different key."""


def is_prime(n: int) -> bool:
    """Return whether ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def next_prime(n: int) -> int:
    """Smallest odd prime not below ``n``; an even ``n`` is first raised to the next odd."""
    candidate = n + 1 if n % 2 == 0 else n
    while not is_prime(candidate):
        candidate += 2
    return candidate


class PrimeHashTable:
    """A table of ``key -> data`` with one slot per hash value and no collision handling.

    The capacity is raised to a prime. A key goes into slot ``key % capacity``;
    if that slot already holds another key, :class:`CollisionError` is raised.
    """

    def __init__(self, capacity: int = 10) -> None:
        self.capacity = next_prime(capacity)
        self._slots: list[tuple[int, int] | None] = [None] * self.capacity

    def _index(self, key: int) -> int:
        return key % self.capacity

    def insert(self, key: int, data: int) -> None:
        """Store ``data`` under ``key``, replacing the data of an existing equal key."""
        index = self._index(key)
        slot = self._slots[index]
        if slot is not None and slot[0] != key:
            raise CollisionError(f"slot {index} already holds key {slot[0]}")
        self._slots[index] = (key, data)

    def remove(self, key: int) -> None:
        """Remove ``key``; raise :class:`KeyError` if it is not present."""
        index = self._index(key)
        slot = self._slots[index]
        if slot is None or slot[0] != key:
            raise KeyError(key)
        self._slots[index] = None

    def slots(self) -> list[tuple[int, int] | None]:
        """The table's slots in order: ``(key, data)`` pairs or ``None`` for empty ones."""
        return list(self._slots)

    def __len__(self) -> int:
        return sum(slot is not None for slot in self._slots)


def linear_probe_table(keys: Iterable[int], size: int = 13) -> list[int | None]:
    """Insert ``keys`` by the division method with linear probing.

    Returns the slots of a table of ``size`` entries, ``None`` where empty.
    """
    items = list(keys)
    if len(items) > size:
        raise ValueError(f"cannot store {len(items)} keys in a table of size {size}")
    table: list[int | None] = [None] * size
    for key in items:
        index = key % size
        while table[index] is not None:
            index = (index + 1) % size
        table[index] = key
    return table


class Probing(Enum):
    """Collision resolution for :class:`WordHashTable`."""

    LINEAR = "linear"
    QUADRATIC = "quadratic"


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a word search: the slot found (or ``None``) and the comparisons made."""

    index: int | None
    comparisons: int

    @property
    def found(self) -> bool:
        """Whether the word was found."""
        return self.index is not None


class WordHashTable:
    """Words hashed by their first letter (a=0, b=1, ...) modulo the table size."""

    def __init__(self, probing: Probing = Probing.LINEAR, size: int = 26) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.probing = probing
        self.size = size
        self._slots: list[str | None] = [None] * size

    def _home(self, word: str) -> int:
        if not word:
            raise ValueError("word must not be empty")
        return (ord(word[0].lower()) - ord("a")) % self.size

    def _probe(self, home: int, step: int) -> int:
        offset = step if self.probing is Probing.LINEAR else step * step
        return (home + offset) % self.size

    def insert(self, word: str) -> int:
        """Store ``word`` in the first free slot of its probe sequence and return that slot."""
        home = self._home(word)
        for step in range(self.size):
            index = self._probe(home, step)
            if self._slots[index] is None:
                self._slots[index] = word
                return index
        raise ValueError(f"no free slot for {word!r}")

    def search(self, word: str) -> SearchResult:
        """Follow ``word``'s probe sequence, counting comparisons until found or an empty slot."""
        home = self._home(word)
        comparisons = 0
        step = 0
        index = home
        while self._slots[index] != word:
            comparisons += 1
            step += 1
            index = self._probe(home, step)
            if self._slots[index] is None or comparisons > self.size:
                return SearchResult(None, comparisons)
        return SearchResult(index, comparisons)

    def slots(self) -> list[str | None]:
        """The table's slots in order, ``None`` for empty ones."""
        return list(self._slots)