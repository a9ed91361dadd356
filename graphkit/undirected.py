"""Undirected graphs: conversions between matrix, edge list, adjacency and incidence forms.

Vertices are numbered from 1 in every result; matrices are plain lists of rows.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

NO_EDGE = 10000
"""Weight that marks a missing edge in a weighted adjacency matrix."""


def _size(matrix: Sequence[Sequence[int]]) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


def _check_vertex(vertex: int, n: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} out of range 1..{n}")


def _is_weighted_edge(weight: int) -> bool:
    return weight != 0 and weight != NO_EDGE


def degrees(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Degree of each vertex: the sum of its row."""
    _size(matrix)
    return [sum(row) for row in matrix]


def edge_list(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Edges (u, v) with u < v, in row-major order."""
    _size(matrix)
    return [
        (i, j)
        for i, row in enumerate(matrix, 1)
        for j, weight in enumerate(row, 1)
        if j > i and weight == 1
    ]


def adjacency_lists(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Neighbours of each vertex in increasing order."""
    _size(matrix)
    return [[j for j, weight in enumerate(row, 1) if weight == 1] for row in matrix]


def incidence_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Vertex-by-edge incidence matrix, edges ordered as in :func:`edge_list`."""
    return incidence_from_edges(_size(matrix), edge_list(matrix))


def matrix_from_edges(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Symmetric 0/1 adjacency matrix of ``n`` vertices holding the given edges."""
    grid = [[0] * n for _ in range(n)]
    for u, v in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        grid[u - 1][v - 1] = grid[v - 1][u - 1] = 1
    return grid


def incidence_from_edges(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Vertex-by-edge incidence matrix, one column per edge in the given order."""
    edges = list(edges)
    table = [[0] * len(edges) for _ in range(n)]
    for column, (u, v) in enumerate(edges):
        _check_vertex(u, n)
        _check_vertex(v, n)
        table[u - 1][column] = table[v - 1][column] = 1
    return table


def matrix_from_adjacency(adjacency: Sequence[Iterable[int]]) -> list[list[int]]:
    """Adjacency matrix from per-vertex neighbour lists (entries set as listed)."""
    n = len(adjacency)
    grid = [[0] * n for _ in range(n)]
    for row, neighbours in zip(grid, adjacency):
        for u in neighbours:
            _check_vertex(u, n)
            row[u - 1] = 1
    return grid


def weighted_degrees(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Degree of each vertex in a weighted matrix where 0 and NO_EDGE mean no edge."""
    _size(matrix)
    return [sum(1 for weight in row if _is_weighted_edge(weight)) for row in matrix]


def weighted_edge_list(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int, int]]:
    """Edges (u, v, weight) with u < v of a weighted matrix."""
    _size(matrix)
    return [
        (i, j, weight)
        for i, row in enumerate(matrix, 1)
        for j, weight in enumerate(row, 1)
        if j > i and _is_weighted_edge(weight)
    ]