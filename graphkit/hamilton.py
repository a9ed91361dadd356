"""Hamiltonian cycles by backtracking, in plain and weighted adjacency matrices."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

Matrix = Sequence[Sequence[int]]

DEFAULT_MAX_WEIGHT = 50
"""Largest weight that still counts as an edge in :func:`cheapest_hamiltonian_cycle`."""


def _size(matrix: Matrix) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


def _cycles(matrix: Matrix, start: int, usable: Callable[[int], bool]) -> Iterator[list[int]]:
    n = _size(matrix)
    if not 1 <= start <= n:
        raise ValueError(f"vertex {start} out of range 1..{n}")
    path = [start]
    visited = {start}

    def extend(u: int) -> Iterator[list[int]]:
        if len(path) == n:
            if usable(matrix[u - 1][start - 1]):
                yield path + [start]
            return
        for v, weight in enumerate(matrix[u - 1], 1):
            if usable(weight) and v not in visited:
                visited.add(v)
                path.append(v)
                yield from extend(v)
                path.pop()
                visited.discard(v)

    yield from extend(start)


def hamiltonian_cycles(matrix: Matrix, start: int) -> list[list[int]]:
    """All Hamiltonian cycles from ``start``, each closed by ``start``, in search order."""
    return list(_cycles(matrix, start, lambda weight: weight == 1))


def cheapest_hamiltonian_cycle(
    matrix: Matrix, start: int, max_weight: int = DEFAULT_MAX_WEIGHT
) -> tuple[int, list[int]] | None:
    """Cost and cycle of the first cheapest Hamiltonian cycle, or None if there is none.

    Only entries with 0 < weight <= max_weight count as edges.
    """
    best: tuple[int, list[int]] | None = None
    for cycle in _cycles(matrix, start, lambda weight: 0 < weight <= max_weight):
        cost = sum(matrix[a - 1][b - 1] for a, b in zip(cycle, cycle[1:]))
        if best is None or cost < best[0]:
            best = (cost, cycle)
    return best