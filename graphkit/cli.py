"""Command-line front end reading whitespace-separated integer problems.

Tasks:
  matrix  type 1: degree of each vertex; otherwise: edge list (undirected matrix input)
  search  type 1: walks of length two; otherwise: a path between two vertices
  euler   type 1: Euler classification; type 2: Euler circuit from a start vertex
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from .euler import classify_directed, classify_undirected, euler_circuit
from .search import count_walks_of_length_two, find_path
from .undirected import degrees, edge_list


def read_tokens(text: str) -> list[int]:
    """Integers separated by whitespace."""
    tokens = []
    for word in text.split():
        try:
            tokens.append(int(word))
        except ValueError:
            raise ValueError(f"not an integer: {word!r}") from None
    return tokens


class _Tokens:
    def __init__(self, values: Iterable[int]) -> None:
        self._values: Iterator[int] = iter(values)

    def take(self) -> int:
        try:
            return next(self._values)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def count(self) -> int:
        n = self.take()
        if n < 0:
            raise ValueError(f"vertex count must not be negative, got {n}")
        return n

    def matrix(self, n: int) -> list[list[int]]:
        return [[self.take() for _ in range(n)] for _ in range(n)]


def _joined(values: Iterable[int]) -> str:
    return " ".join(str(value) for value in values)


def _solve_matrix(tokens: _Tokens, directed: bool) -> list[str]:
    kind = tokens.take()
    n = tokens.count()
    matrix = tokens.matrix(n)
    if kind == 1:
        return [_joined(degrees(matrix))]
    total = sum(row[j] for i, row in enumerate(matrix) for j in range(i + 1, n))
    return [f"{n} {total}", *(f"{u} {v}" for u, v in edge_list(matrix))]


def _solve_search(tokens: _Tokens, directed: bool) -> list[str]:
    kind = tokens.take()
    n = tokens.count()
    start = tokens.take()
    end = tokens.take()
    matrix = tokens.matrix(n)
    if kind == 1:
        return [str(count_walks_of_length_two(matrix, start, end))]
    path = find_path(matrix, start, end)
    return ["0" if path is None else _joined(path)]


def _solve_euler(tokens: _Tokens, directed: bool) -> list[str]:
    kind = tokens.take()
    if kind == 1:
        matrix = tokens.matrix(tokens.count())
        classify = classify_directed if directed else classify_undirected
        return [str(int(classify(matrix)))]
    if kind == 2:
        n = tokens.count()
        start = tokens.take()
        matrix = tokens.matrix(n)
        return [_joined(euler_circuit(matrix, start, directed))]
    return []


_TASKS: dict[str, Callable[[_Tokens, bool], list[str]]] = {
    "matrix": _solve_matrix,
    "search": _solve_search,
    "euler": _solve_euler,
}


def main(argv: list[str] | None = None) -> int:
    """Run one task on an input file (or stdin) and write the answer; return the exit code."""
    parser = argparse.ArgumentParser(prog="graphkit", description="Solve small graph problems.")
    parser.add_argument("task", choices=sorted(_TASKS), help="problem to solve")
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for stdin")
    parser.add_argument("-o", "--output", default="-", help="output file, '-' for stdout")
    parser.add_argument(
        "--directed", action="store_true", help="treat the euler input as a directed graph"
    )
    args = parser.parse_args(argv)

    try:
        text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    except OSError as exc:
        print(f"graphkit: {exc}", file=sys.stderr)
        return 1

    try:
        lines = _TASKS[args.task](_Tokens(read_tokens(text)), args.directed)
    except ValueError as exc:
        print(f"graphkit: {exc}", file=sys.stderr)
        return 2

    answer = "".join(line + "\n" for line in lines)
    if args.output == "-":
        sys.stdout.write(answer)
    else:
        try:
            Path(args.output).write_text(answer)
        except OSError as exc:
            print(f"graphkit: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())