# graphkit

A small, dependency-free toolkit for simple graphs given as adjacency
matrices, edge lists or adjacency lists. Matrices are plain lists of rows,
and vertices are numbered from 1 in every argument and result.

It covers:

- converting between representations (adjacency matrix, edge list,
  adjacency lists, incidence matrix) for undirected and directed graphs;
- degrees, in-degrees and out-degrees, including weighted graphs;
- walks of length two, paths, and groups of vertices reached by
  depth-first or breadth-first search;
- strong and weak connectivity of directed graphs;
- articulation points and bridges;
- Euler circuits and paths, Hamiltonian cycles and the cheapest
  Hamiltonian cycle.

Functions raise `ValueError` for a matrix that is not square or a vertex
outside `1..n`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `graphkit.undirected`

- `degrees(matrix)`: the row sum of each vertex.
- `edge_list(matrix)`: edges `(u, v)` with `u < v` whose entry is 1, in
  row-major order.
- `adjacency_lists(matrix)`: neighbours of each vertex in increasing order.
- `incidence_matrix(matrix)`: vertex-by-edge 0/1 matrix, columns in the
  order of `edge_list`.
- `matrix_from_edges(n, edges)`, `incidence_from_edges(n, edges)`,
  `matrix_from_adjacency(adjacency)`: build the other forms.
- `weighted_degrees(matrix)`, `weighted_edge_list(matrix)`: for weight
  matrices, where `0` or `NO_EDGE` (`10000`) means "no edge";
  `weighted_edge_list` yields `(u, v, weight)` with `u < v`.

### `graphkit.directed`

- `in_out_degrees(matrix)`: `(in-degree, out-degree)` per vertex.
- `arc_list(matrix)`, `successor_lists(matrix)`.
- `incidence_matrix(matrix)`: `1` at the tail of an arc, `-1` at its head.
- `matrix_from_arcs(n, arcs)`, `in_out_degrees_from_arcs(n, arcs)`
  (repeated arcs are counted each time), `successor_lists_from_arcs(n, arcs)`
  (successors in the order given), `incidence_from_arcs(n, arcs)`.
- `matrix_from_successors(successors)`, `arcs_from_successors(successors)`.

### `graphkit.search`

- `count_walks_of_length_two(matrix, start, end)`: entry `(start, end)` of
  the squared matrix.
- `find_path(matrix, start, end)`: a path found by depth-first search,
  treating every 1-entry as an undirected edge, or `None` if `end` cannot
  be reached.
- `components_dfs(matrix)`, `components_bfs(matrix)`: from each vertex not
  yet visited, the sorted group of vertices reached by following arcs in
  their direction.
- `connectivity(matrix)`: a `Connectivity` value, `STRONG` (1), `WEAK` (2)
  or `NONE` (0), for a directed graph.

### `graphkit.cuts`

- `articulation_points(matrix)`: vertices whose removal leaves more
  components than the graph has.
- `bridges(matrix)`: bridges found with low-link values in one search,
  as sorted `(parent, child)` pairs of the search tree.
- `bridges_by_removal(matrix)`: bridges `(u, v)` with `u < v`, found by
  removing each edge in turn; the matrix must be symmetric.

### `graphkit.hamilton`

- `hamiltonian_cycles(matrix, start)`: every Hamiltonian cycle from
  `start`, closed by `start`, in search order, using entries equal to 1.
- `cheapest_hamiltonian_cycle(matrix, start, max_weight=50)`: `(cost, cycle)`
  of the first cycle of least total weight, using only entries with
  `0 < weight <= max_weight`, or `None` if there is no such cycle.

### `graphkit.euler`

- `classify_by_parity(matrix)`: decides by vertex degree parity alone.
- `classify_undirected(matrix)`: the vertices with edges must be connected,
  then parity decides.
- `classify_directed(matrix)`: the vertices with arcs must be strongly
  connected, then in- and out-degrees decide.

These return an `EulerKind`: `CIRCUIT` (1), `PATH` (2) or `NONE` (0).

- `euler_circuit(matrix, start, directed=False)`: the vertex sequence of a
  walk from `start` that uses every edge once (Hierholzer's method, lowest
  neighbour first). The input matrix is left unchanged.

## Example

```python
from graphkit.undirected import degrees, edge_list
from graphkit.search import components_bfs
from graphkit.euler import EulerKind, classify_undirected, euler_circuit

matrix = [
    [0, 1, 1],
    [1, 0, 1],
    [1, 1, 0],
]

degrees(matrix)                                   # [2, 2, 2]
edge_list(matrix)                                 # [(1, 2), (1, 3), (2, 3)]
components_bfs(matrix)                            # [[1, 2, 3]]
classify_undirected(matrix) == EulerKind.CIRCUIT  # True
euler_circuit(matrix, 1)                          # [1, 2, 3, 1]
```

## Command line

```
graphkit TASK [INPUT] [-o OUTPUT] [--directed]
```

`INPUT` and `OUTPUT` default to `-`, meaning standard input and output.
The input is whitespace-separated integers, beginning with a type number:

- `matrix`: `type n` then an `n`×`n` undirected matrix. Type 1 prints the
  degree of each vertex; any other type prints `n` and the sum of the
  entries above the diagonal, then one edge `u v` per line.
- `search`: `type n start end` then the matrix. Type 1 prints the number
  of walks of length two from `start` to `end`; any other type prints a
  path between them, or `0` if there is none.
- `euler`: type 1 is `1 n` then the matrix, and prints the classification
  as 1, 2 or 0; type 2 is `2 n start` then the matrix, and prints the
  Euler walk from `start`. `--directed` treats the matrix as directed.

The exit code is 0 on success, 1 if a file cannot be read or written, and
2 for malformed input.

## What it does not do

The command line covers only the three tasks above. Everything else —
the directed conversions, incidence matrices, components, connectivity,
cut vertices, bridges and Hamiltonian cycles — is available from Python
only.