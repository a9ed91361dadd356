"""Euler circuits and paths in graphs given as adjacency matrices.

Vertices are numbered from 1; any non-zero matrix entry counts as an edge.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

Matrix = Sequence[Sequence[int]]


class EulerKind(IntEnum):
    """Whether a graph has an Euler circuit, only an Euler path, or neither."""

    NONE = 0
    CIRCUIT = 1
    PATH = 2


def _size(matrix: Matrix) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


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


def _parity_kind(degrees: Sequence[int]) -> EulerKind:
    odd = sum(1 for degree in degrees if degree % 2)
    if odd == 0:
        return EulerKind.CIRCUIT
    if odd == 2:
        return EulerKind.PATH
    return EulerKind.NONE


def classify_by_parity(matrix: Matrix) -> EulerKind:
    """Classify an undirected graph by vertex degree parity alone, ignoring connectivity."""
    _size(matrix)
    return _parity_kind([sum(row) for row in matrix])


def classify_undirected(matrix: Matrix) -> EulerKind:
    """Classify an undirected graph: its edges must be connected, then parity decides."""
    _size(matrix)
    degrees = [sum(row) for row in matrix]
    active = [vertex for vertex, degree in enumerate(degrees, 1) if degree > 0]
    if active:
        neighbours = [[j for j, weight in enumerate(row, 1) if weight] for row in matrix]
        reached = _reachable(neighbours, active[0])
        if any(vertex not in reached for vertex in active):
            return EulerKind.NONE
    return _parity_kind(degrees)


def classify_directed(matrix: Matrix) -> EulerKind:
    """Classify a directed graph: vertices with arcs must be strongly connected,
    then in- and out-degrees decide."""
    n = _size(matrix)
    outs = [sum(row) for row in matrix]
    ins = [sum(column) for column in zip(*matrix)] if n else []

    start = next((vertex for vertex, out in enumerate(outs, 1) if out > 0), None)
    if start is not None:
        involved = [v for v in range(1, n + 1) if ins[v - 1] + outs[v - 1] > 0]
        forward = [[j for j, weight in enumerate(row, 1) if weight] for row in matrix]
        backward: list[list[int]] = [[] for _ in range(n)]
        for i, row in enumerate(matrix, 1):
            for j, weight in enumerate(row, 1):
                if weight:
                    backward[j - 1].append(i)
        for neighbours in (forward, backward):
            reached = _reachable(neighbours, start)
            if any(vertex not in reached for vertex in involved):
                return EulerKind.NONE

    sources = sinks = 0
    for into, out in zip(ins, outs):
        if out == into + 1:
            sources += 1
        elif into == out + 1:
            sinks += 1
        elif into != out:
            return EulerKind.NONE

    if sources == 0 and sinks == 0:
        return EulerKind.CIRCUIT
    if sources == 1 and sinks == 1:
        return EulerKind.PATH
    return EulerKind.NONE


def euler_circuit(matrix: Matrix, start: int, directed: bool = False) -> list[int]:
    """Walk through every edge once from ``start`` (Hierholzer), lowest neighbour first.

    The matrix is not modified. Each traversed entry is cleared as a whole,
    and in an undirected graph its mirror entry too.
    """
    n = _size(matrix)
    if not 1 <= start <= n:
        raise ValueError(f"vertex {start} out of range 1..{n}")
    grid = [list(row) for row in matrix]
    stack = [start]
    circuit: list[int] = []
    while stack:
        u = stack[-1]
        row = grid[u - 1]
        v = next((j for j, weight in enumerate(row, 1) if weight), None)
        if v is None:
            circuit.append(stack.pop())
            continue
        row[v - 1] = 0
        if not directed:
            grid[v - 1][u - 1] = 0
        stack.append(v)
    circuit.reverse()
    return circuit