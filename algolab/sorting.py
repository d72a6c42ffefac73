"""Classic comparison sorts.

Every function takes any iterable of mutually comparable items and returns a
new sorted list (or string, for :func:`quick_sort_chars`); the input is never
modified.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")


def _swap(items: MutableSequence[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


# --------------------------------------------------------------------------
# Bubble sort
# --------------------------------------------------------------------------


def _bubble_pass(items: list[T], n: int) -> None:
    while True:
        for i in range(n - 1):
            if items[i] > items[i + 1]:
                _swap(items, i, i + 1)
        if n - 1 <= 1:
            return
        n -= 1


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly bubbling the largest item to the end of a shrinking prefix."""
    items = list(values)
    _bubble_recursive(items, len(items))
    return items


def _bubble_recursive(items: list[T], n: int) -> None:
    for i in range(n - 1):
        if items[i] > items[i + 1]:
            _swap(items, i, i + 1)
    if n - 1 > 1:
        _bubble_recursive(items, n - 1)


# --------------------------------------------------------------------------
# Insertion sort
# --------------------------------------------------------------------------


def _insert_last(items: list[T], n: int) -> None:
    """Insert ``items[n - 1]`` into the already sorted ``items[:n - 1]``."""
    current = items[n - 1]
    j = n - 2
    while j >= 0 and items[j] > current:
        items[j + 1] = items[j]
        j -= 1
    items[j + 1] = current


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by shifting larger items right and inserting each item in place."""
    items = list(values)
    for n in range(2, len(items) + 1):
        _insert_last(items, n)
    return items


def recursive_insertion_sort(values: Iterable[T]) -> list[T]:
    """Insertion sort that sorts the first n-1 items recursively, then inserts the last."""
    items = list(values)

    def sort_prefix(n: int) -> None:
        if n <= 1:
            return
        sort_prefix(n - 1)
        _insert_last(items, n)

    sort_prefix(len(items))
    return items


# --------------------------------------------------------------------------
# Selection sort
# --------------------------------------------------------------------------


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by swapping the minimum of the unsorted suffix into place."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        _swap(items, i, smallest)
    return items


def recursive_selection_sort(values: Iterable[T]) -> list[T]:
    """Recursive exchange-selection sort.

    For each position ``i``, every later item that is smaller than the item at
    ``i`` is swapped into it, leaving the minimum of the suffix at ``i``.
    """
    items = list(values)
    size = len(items)

    def settle(i: int, j: int) -> None:
        if j >= size:
            return
        if items[i] > items[j]:
            _swap(items, i, j)
        settle(i, j + 1)

    def select(i: int) -> None:
        if i >= size - 1:
            return
        settle(i, i + 1)
        select(i + 1)

    select(0)
    return items


# --------------------------------------------------------------------------
# Quick sort
# --------------------------------------------------------------------------


def _lomuto_partition(items: MutableSequence[Any], left: int, right: int, *, inclusive: bool) -> int:
    pivot = items[right]
    store = left
    for i in range(left, right):
        if items[i] < pivot or (inclusive and items[i] == pivot):
            _swap(items, i, store)
            store += 1
    _swap(items, store, right)
    return store


def _quick(items: MutableSequence[Any], left: int, right: int, *, inclusive: bool) -> None:
    if left >= right:
        return
    p = _lomuto_partition(items, left, right, inclusive=inclusive)
    _quick(items, left, p - 1, inclusive=inclusive)
    _quick(items, p + 1, right, inclusive=inclusive)


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quick sort with the last item as pivot (Lomuto partition)."""
    items = list(values)
    _quick(items, 0, len(items) - 1, inclusive=False)
    return items


def _first_pivot_partition(items: list[T], left: int, right: int) -> int:
    pivot = items[left]
    start = left
    while left < right:
        while left < right and items[left] <= pivot:
            left += 1
        while items[right] > pivot:
            right -= 1
        if left < right:
            _swap(items, left, right)
    items[start] = items[right]
    items[right] = pivot
    return right


def hoare_quick_sort(values: Iterable[T]) -> list[T]:
    """Quick sort with the first item as pivot and two converging scans."""
    items = list(values)

    def sort(left: int, right: int) -> None:
        if left >= right:
            return
        p = _first_pivot_partition(items, left, right)
        sort(left, p - 1)
        sort(p + 1, right)

    sort(0, len(items) - 1)
    return items


def quick_sort_chars(text: str) -> str:
    """Return the characters of ``text`` in ascending order, sorted by quick sort."""
    chars = list(text)
    _quick(chars, 0, len(chars) - 1, inclusive=True)
    return "".join(chars)


# --------------------------------------------------------------------------
# Merge sort
# --------------------------------------------------------------------------


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


# --------------------------------------------------------------------------
# Heap sorts
# --------------------------------------------------------------------------


def _sift_down(items: list[T], n: int, i: int) -> None:
    """Restore the max-heap property below index ``i`` within ``items[:n]``."""
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2
        if left < n and items[left] > items[largest]:
            largest = left
        if right < n and items[right] > items[largest]:
            largest = right
        if largest == i:
            return
        _swap(items, i, largest)
        i = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Heap sort: build a max-heap bottom-up, then repeatedly move the root to the end."""
    items = list(values)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, i)
    for end in range(n - 1, 0, -1):
        _swap(items, 0, end)
        _sift_down(items, end, 0)
    return items


def _sift_up(items: list[T], index: int) -> None:
    value = items[index]
    while index > 0 and items[(index - 1) // 2] < value:
        items[index] = items[(index - 1) // 2]
        index = (index - 1) // 2
    items[index] = value


def _restore_down(items: list[T], n: int) -> None:
    """Move the root down into ``items[:n]`` by shifting larger children up."""
    if n == 0:
        return
    value = items[0]
    hole = 0
    child = 1
    while child < n:
        if child + 1 < n and items[child] < items[child + 1]:
            child += 1
        if items[child] < value:
            break
        items[hole] = items[child]
        hole = child
        child = 2 * child + 1
    items[hole] = value


def insertion_heap_sort(values: Iterable[T]) -> list[T]:
    """Heap sort that builds the heap by inserting items one by one."""
    items: list[T] = []
    for value in values:
        items.append(value)
        _sift_up(items, len(items) - 1)
    for end in range(len(items) - 1, 0, -1):
        _swap(items, 0, end)
        _restore_down(items, end)
    return items


def make_heap(values: Iterable[T]) -> list[T]:
    """Return the items arranged as a max-heap, built by successive sift-ups."""
    items = list(values)
    for j in range(len(items)):
        i = j
        while i and items[i] > items[(i - 1) // 2]:
            _swap(items, i, (i - 1) // 2)
            i = (i - 1) // 2
    return items


def iterative_heap_sort(values: Iterable[T]) -> list[T]:
    """Heap sort with an iterative sift-down after each root extraction."""
    items = make_heap(values)
    for end in range(len(items) - 1, 0, -1):
        _swap(items, 0, end)
        i = 0
        while True:
            lc, rc = 2 * i + 1, 2 * i + 2
            if lc >= end:
                break
            child = rc if rc < end and items[rc] > items[lc] else lc
            if not items[i] < items[child]:
                break
            _swap(items, i, child)
            i = child
    return items