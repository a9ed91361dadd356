import pytest

from graphkit.directed import (
    arc_list,
    arcs_from_successors,
    in_out_degrees,
    in_out_degrees_from_arcs,
    incidence_from_arcs,
    incidence_matrix,
    matrix_from_arcs,
    matrix_from_successors,
    successor_lists,
    successor_lists_from_arcs,
)

ARCS = [(1, 2), (1, 3), (2, 3), (3, 1), (3, 4)]


@pytest.fixture
def sample():
    return matrix_from_arcs(4, ARCS)


def test_arc_list_round_trip(sample):
    assert arc_list(sample) == ARCS
    assert matrix_from_arcs(4, arc_list(sample)) == sample


def test_degree_sums_equal_arc_count(sample):
    pairs = in_out_degrees(sample)
    assert sum(i for i, _ in pairs) == len(ARCS)
    assert sum(o for _, o in pairs) == len(ARCS)


def test_degrees_from_arcs_match_matrix(sample):
    assert in_out_degrees_from_arcs(4, ARCS) == in_out_degrees(sample)


def test_sink_has_no_successors(sample):
    assert successor_lists(sample)[3] == []
    assert in_out_degrees(sample)[3][1] == 0


def test_successor_lists_match_out_degrees(sample):
    lists = successor_lists(sample)
    assert [len(x) for x in lists] == [o for _, o in in_out_degrees(sample)]


def test_successor_round_trips(sample):
    lists = successor_lists(sample)
    assert matrix_from_successors(lists) == sample
    assert arcs_from_successors(lists) == arc_list(sample)


def test_successor_lists_from_arcs_keep_order():
    arcs = [(1, 3), (1, 2), (2, 1)]
    assert successor_lists_from_arcs(3, arcs) == [[3, 2], [1], []]
    assert arcs_from_successors(successor_lists_from_arcs(3, arcs)) == arcs


def test_repeated_arcs_are_counted():
    once = in_out_degrees_from_arcs(2, [(1, 2)])
    twice = in_out_degrees_from_arcs(2, [(1, 2), (1, 2)])
    assert [(2 * i, 2 * o) for i, o in once] == twice
    assert successor_lists_from_arcs(2, [(1, 2), (1, 2)])[0] == [2, 2]


def test_incidence_columns_mark_tail_and_head(sample):
    table = incidence_matrix(sample)
    for column, (u, v) in enumerate(ARCS):
        values = [row[column] for row in table]
        assert sum(values) == 0
        assert values[u - 1] == 1
        assert values[v - 1] == -1


def test_incidence_from_arcs_matches_matrix_form(sample):
    assert incidence_from_arcs(4, ARCS) == incidence_matrix(sample)


def test_incidence_loop_keeps_head_mark():
    table = incidence_from_arcs(2, [(2, 2)])
    assert table == [[0], [-1]]


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        in_out_degrees([[0, 1, 0], [0, 0]])


def test_out_of_range_vertex_rejected():
    with pytest.raises(ValueError):
        matrix_from_arcs(2, [(1, 3)])
    with pytest.raises(ValueError):
        incidence_from_arcs(2, [(0, 1)])
    with pytest.raises(ValueError):
        in_out_degrees_from_arcs(2, [(3, 1)])
    with pytest.raises(ValueError):
        arcs_from_successors([[2], [5]])