"""Contiguous memory allocation strategies: first, best and worst fit."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

_Chooser = Callable[[list[int], list[int]], int]


def _allocate(requests: Iterable[int], blocks: Iterable[int], choose: _Chooser) -> list[int | None]:
    free = list(blocks)
    allocations: list[int | None] = []
    for request in requests:
        fitting = [j for j, size in enumerate(free) if size >= request]
        if not fitting:
            allocations.append(None)
            continue
        chosen = choose(fitting, free)
        free[chosen] -= request
        allocations.append(chosen)
    return allocations


def first_fit(requests: Iterable[int], blocks: Iterable[int]) -> list[int | None]:
    """Give each request the first block with enough space left.

    Returns, per request, the index of the block used or ``None``.
    """
    return _allocate(requests, blocks, lambda fitting, free: fitting[0])


def best_fit(requests: Iterable[int], blocks: Iterable[int]) -> list[int | None]:
    """Give each request the block with the least space left that still fits it."""
    return _allocate(requests, blocks, lambda fitting, free: min(fitting, key=free.__getitem__))


def worst_fit(requests: Iterable[int], blocks: Iterable[int]) -> list[int | None]:
    """Give each request the block with the most space left."""
    return _allocate(requests, blocks, lambda fitting, free: max(fitting, key=free.__getitem__))


def format_allocations(allocations: Sequence[int | None]) -> str:
    """Render allocations as a table of process, status and block number."""
    lines = ["Process ID\tStatus\t\tBlock Number"]
    for pid, block in enumerate(allocations):
        if block is None:
            lines.append(f"{pid}\t\tNot allocated\t----")
        else:
            lines.append(f"{pid}\t\tAllocated\t{block}")
    return "\n".join(lines) + "\n"