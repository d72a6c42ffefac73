"""Small array and number exercises: searching, diagonals, digits, Fibonacci, LCS."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any


def linear_search(values: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first item equal to ``target``, or ``None``."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None


def find_in_matrix(matrix: Iterable[Iterable[Any]], target: Any) -> list[tuple[int, int]]:
    """Return every ``(row, column)`` position holding ``target``, row by row."""
    return [
        (r, c)
        for r, row in enumerate(matrix)
        for c, value in enumerate(row)
        if value == target
    ]


def diagonal_sums(matrix: Iterable[Iterable[int]]) -> tuple[int, int]:
    """Return the sums of the main diagonal and the anti-diagonal of a square matrix."""
    rows = [list(row) for row in matrix]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("matrix must be square")
    primary = sum(row[i] for i, row in enumerate(rows))
    secondary = sum(row[n - 1 - i] for i, row in enumerate(rows))
    return primary, secondary


def reverse_number(number: int) -> int:
    """Reverse the decimal digits of ``number``, keeping its sign."""
    sign = -1 if number < 0 else 1
    return sign * int(str(abs(number))[::-1])


def fibonacci_upto(limit: int) -> Iterator[int]:
    """Yield Fibonacci numbers, starting at 0, while they are below ``limit``."""
    first, second = 0, 1
    while first < limit:
        yield first
        first, second = second, first + second


def lcs_length(first: Sequence[Any], second: Sequence[Any]) -> int:
    """Length of the longest common subsequence of two sequences."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second):
            current.append(previous[j] + 1 if a == b else max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]