"""Graph traversals: depth first over an adjacency matrix, breadth first over adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping, Sequence


def adjacency_matrix(edges: Iterable[tuple[int, int]], size: int) -> list[list[int]]:
    """Build the ``size`` x ``size`` adjacency matrix of an undirected graph.

    Each edge ``(u, v)`` sets both ``matrix[u][v]`` and ``matrix[v][u]`` to 1.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    matrix = [[0] * size for _ in range(size)]
    for u, v in edges:
        if not (0 <= u < size and 0 <= v < size):
            raise ValueError(f"edge ({u}, {v}) lies outside a graph of {size} vertices")
        matrix[u][v] = 1
        matrix[v][u] = 1
    return matrix


def depth_first(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the vertices in the order a stack-based depth-first traversal visits them.

    Neighbours are pushed in ascending order, so the highest-numbered
    unvisited neighbour is explored first.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise ValueError(f"start vertex {start} is not in the graph")

    visited = [False] * size
    order: list[int] = []
    stack = [start]
    while stack:
        node = stack.pop()
        if not visited[node]:
            order.append(node)
            visited[node] = True
        stack.extend(
            neighbour
            for neighbour, linked in enumerate(matrix[node])
            if linked == 1 and not visited[neighbour]
        )
    return order


def breadth_first(adjacency: Mapping[int, Iterable[int]], start: int) -> list[int]:
    """Return the vertices in breadth-first order from ``start``.

    ``adjacency`` maps each vertex to its neighbours, visited in the order
    given; a vertex missing from the mapping has no neighbours.
    """
    visited = {start}
    order: list[int] = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency.get(node, ()):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order