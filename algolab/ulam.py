"""Ulam spiral of the primes."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

_DOTS = "." * 17


def prime_sieve(limit: int) -> list[bool]:
    """Return flags for ``0 .. limit - 1``: ``flags[k]`` is true when ``k`` is prime."""
    if limit <= 0:
        return []
    flags = [k % 2 == 1 for k in range(limit)]
    if limit > 2:
        flags[2] = True
    if limit > 1:
        flags[1] = False
    i = 3
    while i * i < limit:
        if flags[i]:
            for j in range(i * i, limit, 2 * i):
                flags[j] = False
        i += 2
    return flags


def ulam_value(x: int, y: int, n: int) -> int:
    """Number at column ``x``, row ``y`` of an ``n`` x ``n`` Ulam spiral."""
    x -= (n - 1) // 2
    y -= n // 2
    ring = 2 * max(abs(x), abs(y))
    offset = ring * 3 + x + y if y >= x else ring - x - y
    return (ring - 1) ** 2 + offset


def ulam_spiral(n: int, glyph: str | None = None) -> str:
    """Render the Ulam spiral of side ``n``, with even sides reduced by one.

    Without a glyph, primes are printed as numbers and other cells as dots;
    with one, primes show the glyph and other cells a single dot.
    """
    if glyph is not None and len(glyph) != 1:
        raise ValueError("glyph must be a single character")
    if n % 2 == 0:
        n -= 1
    if n < 1:
        return ""

    width = len(str(n * n))
    primes = prime_sieve(n * n + 1)
    rows = []
    for row in range(n):
        cells = []
        for column in range(n):
            value = ulam_value(column, row, n)
            if glyph is None:
                cells.append(f"{value:>{width}d} " if primes[value] else _DOTS[:width] + " ")
            else:
                cells.append(glyph if primes[value] else _DOTS[0])
        rows.append("".join(cells) + "\n")
    return "".join(rows)


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Print the numeric and the glyph spiral; the optional argument is the side (default 9)."""
    args = sys.argv[1:] if argv is None else list(argv)
    n = _leading_int(args[0]) if args else 9
    print(ulam_spiral(n))
    print(ulam_spiral(n, "#"))
    return 0