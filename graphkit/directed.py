"""Directed graphs: conversions between matrix, arc list, successor lists and incidence forms.

Vertices are numbered from 1 in every result; matrices are plain lists of rows.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _size(matrix: Sequence[Sequence[int]]) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


def _check_arc(u: int, v: int, n: int) -> None:
    for vertex in (u, v):
        if not 1 <= vertex <= n:
            raise ValueError(f"vertex {vertex} out of range 1..{n}")


def in_out_degrees(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """(in-degree, out-degree) of each vertex: column sum and row sum."""
    _size(matrix)
    return [(sum(column), sum(row)) for column, row in zip(zip(*matrix), matrix)]


def arc_list(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Arcs (u, v) in row-major order."""
    _size(matrix)
    return [
        (i, j)
        for i, row in enumerate(matrix, 1)
        for j, weight in enumerate(row, 1)
        if weight == 1
    ]


def successor_lists(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Successors of each vertex in increasing order."""
    _size(matrix)
    return [[j for j, weight in enumerate(row, 1) if weight == 1] for row in matrix]


def incidence_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Vertex-by-arc incidence matrix (1 at the tail, -1 at the head)."""
    return incidence_from_arcs(_size(matrix), arc_list(matrix))


def matrix_from_arcs(n: int, arcs: Iterable[tuple[int, int]]) -> list[list[int]]:
    """0/1 adjacency matrix of ``n`` vertices holding the given arcs."""
    grid = [[0] * n for _ in range(n)]
    for u, v in arcs:
        _check_arc(u, v, n)
        grid[u - 1][v - 1] = 1
    return grid


def in_out_degrees_from_arcs(n: int, arcs: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """(in-degree, out-degree) of each vertex, counting repeated arcs each time."""
    ins = [0] * n
    outs = [0] * n
    for u, v in arcs:
        _check_arc(u, v, n)
        outs[u - 1] += 1
        ins[v - 1] += 1
    return list(zip(ins, outs))


def successor_lists_from_arcs(n: int, arcs: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Successors of each vertex in the order the arcs are given."""
    lists: list[list[int]] = [[] for _ in range(n)]
    for u, v in arcs:
        _check_arc(u, v, n)
        lists[u - 1].append(v)
    return lists


def incidence_from_arcs(n: int, arcs: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Vertex-by-arc incidence matrix, one column per arc in the given order.

    A loop's column holds -1, the head mark being written last.
    """
    arcs = list(arcs)
    table = [[0] * len(arcs) for _ in range(n)]
    for column, (u, v) in enumerate(arcs):
        _check_arc(u, v, n)
        table[u - 1][column] = 1
        table[v - 1][column] = -1
    return table


def matrix_from_successors(successors: Sequence[Iterable[int]]) -> list[list[int]]:
    """Adjacency matrix from per-vertex successor lists."""
    return matrix_from_arcs(len(successors), arcs_from_successors(successors))


def arcs_from_successors(successors: Sequence[Iterable[int]]) -> list[tuple[int, int]]:
    """Arcs (u, v) read from per-vertex successor lists, in list order."""
    n = len(successors)
    arcs = [(i, v) for i, targets in enumerate(successors, 1) for v in targets]
    for u, v in arcs:
        _check_arc(u, v, n)
    return arcs