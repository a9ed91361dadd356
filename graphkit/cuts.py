"""Cut vertices and bridges of undirected graphs given as adjacency matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from .undirected import adjacency_lists, edge_list

Matrix = Sequence[Sequence[int]]


def _size(matrix: Matrix) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


def _nonzero_neighbours(matrix: Matrix) -> list[list[int]]:
    return [[j for j, weight in enumerate(row, 1) if weight] for row in matrix]


def _count_components(neighbours: Sequence[Sequence[int]], removed: int | None = None) -> int:
    seen: set[int] = set() if removed is None else {removed}
    count = 0
    for source in range(1, len(neighbours) + 1):
        if source in seen:
            continue
        count += 1
        seen.add(source)
        stack = [source]
        while stack:
            u = stack.pop()
            for v in neighbours[u - 1]:
                if v not in seen:
                    seen.add(v)
                    stack.append(v)
    return count


def articulation_points(matrix: Matrix) -> list[int]:
    """Vertices whose removal leaves more components than the graph has."""
    n = _size(matrix)
    neighbours = _nonzero_neighbours(matrix)
    base = _count_components(neighbours)
    return [v for v in range(1, n + 1) if _count_components(neighbours, v) > base]


def bridges(matrix: Matrix) -> list[tuple[int, int]]:
    """Bridges found by Tarjan's low-link search, as sorted (parent, child) pairs."""
    n = _size(matrix)
    neighbours = _nonzero_neighbours(matrix)
    order = [0] * (n + 1)
    low = [0] * (n + 1)
    clock = 0
    found: set[tuple[int, int]] = set()

    for root in range(1, n + 1):
        if order[root]:
            continue
        clock += 1
        order[root] = low[root] = clock
        stack = [(root, root, iter(neighbours[root - 1]))]
        while stack:
            u, previous, pending = stack[-1]
            for v in pending:
                if v == previous:
                    continue
                if not order[v]:
                    clock += 1
                    order[v] = low[v] = clock
                    stack.append((v, u, iter(neighbours[v - 1])))
                    break
                low[u] = min(low[u], order[v])
            else:
                stack.pop()
                if stack:
                    parent = stack[-1][0]
                    low[parent] = min(low[parent], low[u])
                    if low[u] == order[u]:
                        found.add((parent, u))
    return sorted(found)


def _reaches_without_edge(neighbours: Sequence[Sequence[int]], u: int, v: int) -> bool:
    cut = {u, v}
    seen = {u}
    queue = deque([u])
    while queue:
        x = queue.popleft()
        for w in neighbours[x - 1]:
            if {x, w} == cut or w in seen:
                continue
            if w == v:
                return True
            seen.add(w)
            queue.append(w)
    return False


def bridges_by_removal(matrix: Matrix) -> list[tuple[int, int]]:
    """Bridges (u, v) with u < v, found by deleting each edge and searching again."""
    n = _size(matrix)
    for i in range(n):
        for j in range(n):
            if (matrix[i][j] == 1) != (matrix[j][i] == 1):
                raise ValueError("adjacency matrix must be symmetric")
    neighbours = adjacency_lists(matrix)
    return sorted(
        (u, v) for u, v in edge_list(matrix) if not _reaches_without_edge(neighbours, u, v)
    )