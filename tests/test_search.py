import pytest

from graphkit.directed import matrix_from_arcs
from graphkit.search import (
    Connectivity,
    components_bfs,
    components_dfs,
    connectivity,
    count_walks_of_length_two,
    find_path,
)
from graphkit.undirected import degrees, matrix_from_edges

PATH4 = matrix_from_edges(4, [(1, 2), (2, 3), (3, 4)])
MIXED = matrix_from_edges(6, [(1, 2), (2, 3), (1, 3), (3, 5), (4, 6)])
TREE = matrix_from_edges(7, [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6), (6, 7)])


@pytest.mark.parametrize("matrix", [PATH4, MIXED, TREE])
def test_walks_back_to_self_equal_degree(matrix):
    for vertex, degree in enumerate(degrees(matrix), 1):
        assert count_walks_of_length_two(matrix, vertex, vertex) == degree


@pytest.mark.parametrize("matrix", [PATH4, MIXED, TREE])
def test_walk_counts_are_symmetric_for_undirected_graphs(matrix):
    n = len(matrix)
    for u in range(1, n + 1):
        for v in range(1, n + 1):
            assert count_walks_of_length_two(matrix, u, v) == count_walks_of_length_two(matrix, v, u)


def test_no_walks_without_edges():
    empty = matrix_from_edges(3, [])
    assert count_walks_of_length_two(empty, 1, 3) == 0


def test_walks_reject_out_of_range_vertex():
    with pytest.raises(ValueError):
        count_walks_of_length_two(PATH4, 0, 2)
    with pytest.raises(ValueError):
        count_walks_of_length_two(PATH4, 1, 5)


def test_walks_reject_non_square_matrix():
    with pytest.raises(ValueError):
        count_walks_of_length_two([[0, 1], [1]], 1, 2)


def test_find_path_along_a_path_graph():
    assert find_path(PATH4, 1, 4) == [1, 2, 3, 4]


@pytest.mark.parametrize("matrix,start,end", [(MIXED, 1, 5), (TREE, 4, 7), (TREE, 7, 1)])
def test_found_path_is_a_simple_walk(matrix, start, end):
    path = find_path(matrix, start, end)
    assert path[0] == start
    assert path[-1] == end
    assert len(set(path)) == len(path)
    for u, v in zip(path, path[1:]):
        assert matrix[u - 1][v - 1] == 1


def test_find_path_to_self_is_single_vertex():
    assert find_path(TREE, 3, 3) == [3]


def test_find_path_unreachable_returns_none():
    assert find_path(MIXED, 1, 6) is None


def test_find_path_follows_arcs_both_ways():
    only_backwards = matrix_from_arcs(3, [(2, 1), (3, 2)])
    path = find_path(only_backwards, 1, 3)
    assert path[0] == 1 and path[-1] == 3


def test_components_of_undirected_graph():
    matrix = matrix_from_edges(5, [(1, 2), (4, 5)])
    assert components_dfs(matrix) == [[1, 2], [3], [4, 5]]


@pytest.mark.parametrize("finder", [components_dfs, components_bfs])
@pytest.mark.parametrize("matrix", [PATH4, MIXED, TREE])
def test_components_partition_the_vertices(finder, matrix):
    groups = finder(matrix)
    flat = [v for group in groups for v in group]
    assert sorted(flat) == list(range(1, len(matrix) + 1))
    assert all(group == sorted(group) for group in groups)


@pytest.mark.parametrize(
    "matrix",
    [PATH4, MIXED, TREE, matrix_from_arcs(4, [(2, 1), (3, 4), (4, 2)])],
)
def test_dfs_and_bfs_agree(matrix):
    assert components_dfs(matrix) == components_bfs(matrix)


def test_components_follow_arc_direction():
    backwards = matrix_from_arcs(2, [(2, 1)])
    forwards = matrix_from_arcs(2, [(1, 2)])
    assert len(components_dfs(backwards)) == 2
    assert len(components_dfs(forwards)) == 1


def test_directed_cycle_is_strongly_connected():
    assert connectivity(matrix_from_arcs(3, [(1, 2), (2, 3), (3, 1)])) is Connectivity.STRONG


def test_directed_path_is_weakly_connected():
    assert connectivity(matrix_from_arcs(3, [(1, 2), (2, 3)])) is Connectivity.WEAK


def test_disconnected_graph():
    assert connectivity(matrix_from_arcs(3, [(1, 2)])) is Connectivity.NONE


def test_connectivity_codes():
    results = [
        connectivity(matrix_from_arcs(3, [(1, 2)])),
        connectivity(matrix_from_arcs(3, [(1, 2), (2, 3), (3, 1)])),
        connectivity(matrix_from_arcs(3, [(1, 2), (2, 3)])),
    ]
    assert [int(result) for result in results] == [0, 1, 2]


def test_undirected_connected_graph_is_strong():
    assert connectivity(TREE) is Connectivity.STRONG