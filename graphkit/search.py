"""Walk counting, path finding, components and connectivity of graphs given as matrices.

Vertices are numbered from 1; a matrix entry of 1 marks an edge or arc.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Sequence
from enum import IntEnum

Matrix = Sequence[Sequence[int]]


class Connectivity(IntEnum):
    """How well a directed graph is connected; values are the classic answer codes."""

    NONE = 0
    STRONG = 1
    WEAK = 2


def _size(matrix: Matrix) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


def _check_vertex(vertex: int, n: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} out of range 1..{n}")


def _successors(matrix: Matrix) -> list[list[int]]:
    return [[j for j, weight in enumerate(row, 1) if weight == 1] for row in matrix]


def _symmetrised(matrix: Matrix) -> list[list[int]]:
    """Neighbour lists where every 1-entry (i, j) links i to j and j to i, in reading order."""
    neighbours: list[list[int]] = [[] for _ in matrix]
    for i, row in enumerate(matrix, 1):
        for j, weight in enumerate(row, 1):
            if weight == 1:
                neighbours[i - 1].append(j)
                neighbours[j - 1].append(i)
    return neighbours


def _reachable(neighbours: Sequence[Sequence[int]], start: int) -> set[int]:
    seen = {start}
    stack = [start]
    while stack:
        u = stack.pop()
        for v in neighbours[u - 1]:
            if v not in seen:
                seen.add(v)
                stack.append(v)
    return seen


def count_walks_of_length_two(matrix: Matrix, start: int, end: int) -> int:
    """Entry (start, end) of the squared adjacency matrix."""
    n = _size(matrix)
    _check_vertex(start, n)
    _check_vertex(end, n)
    return sum(a * row[end - 1] for a, row in zip(matrix[start - 1], matrix))


def find_path(matrix: Matrix, start: int, end: int) -> list[int] | None:
    """Path from ``start`` to ``end`` found by depth-first search, or None if unreachable.

    Every 1-entry of the matrix is treated as an undirected edge.
    """
    n = _size(matrix)
    _check_vertex(start, n)
    _check_vertex(end, n)
    neighbours = _symmetrised(matrix)

    parent: dict[int, int | None] = {start: None}
    stack = [(start, iter(neighbours[start - 1]))]
    while stack:
        u, pending = stack[-1]
        for v in pending:
            if v not in parent:
                parent[v] = u
                stack.append((v, iter(neighbours[v - 1])))
                break
        else:
            stack.pop()

    if end not in parent:
        return None
    path = []
    vertex: int | None = end
    while vertex is not None:
        path.append(vertex)
        vertex = parent[vertex]
    path.reverse()
    return path


def _components(matrix: Matrix, take: Callable[[deque[int]], int]) -> list[list[int]]:
    n = _size(matrix)
    successors = _successors(matrix)
    visited: set[int] = set()
    result = []
    for source in range(1, n + 1):
        if source in visited:
            continue
        visited.add(source)
        component = [source]
        frontier = deque([source])
        while frontier:
            u = take(frontier)
            for v in successors[u - 1]:
                if v not in visited:
                    visited.add(v)
                    component.append(v)
                    frontier.append(v)
        result.append(sorted(component))
    return result


def components_dfs(matrix: Matrix) -> list[list[int]]:
    """Groups of vertices reached by depth-first search from each unvisited vertex in turn.

    Arcs are followed in their direction only; each group is sorted.
    """
    return _components(matrix, deque.pop)


def components_bfs(matrix: Matrix) -> list[list[int]]:
    """Same grouping as :func:`components_dfs`, found by breadth-first search."""
    return _components(matrix, deque.popleft)


def connectivity(matrix: Matrix) -> Connectivity:
    """Whether a directed graph is strongly, weakly or not connected."""
    n = _size(matrix)
    successors = _successors(matrix)
    if all(len(_reachable(successors, source)) == n for source in range(1, n + 1)):
        return Connectivity.STRONG
    if len(_reachable(_symmetrised(matrix), 1)) == n:
        return Connectivity.WEAK
    return Connectivity.NONE