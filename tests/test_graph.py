import pytest

from algobox.graph import adjacency_to_incidence


def test_single_edge():
    assert adjacency_to_incidence([[False, True], [True, False]]) == [[True, True]]


def test_self_loop_marks_one_vertex():
    assert adjacency_to_incidence([[True, False], [False, False]]) == [[True, False]]


def test_no_edges():
    assert adjacency_to_incidence([[False] * 3 for _ in range(3)]) == []


def test_triangle_rows_mark_two_vertices():
    adj = [[False, True, True], [True, False, True], [True, True, False]]
    incidence = adjacency_to_incidence(adj)
    assert len(incidence) == 3
    assert all(sum(row) == 2 for row in incidence)
    assert all(len(row) == 3 for row in incidence)
    for row in incidence:
        a, b = [i for i, v in enumerate(row) if v]
        assert adj[a][b]


def test_empty_matrix_raises():
    with pytest.raises(ValueError):
        adjacency_to_incidence([])


def test_non_square_raises():
    with pytest.raises(ValueError):
        adjacency_to_incidence([[True, False, True], [False, True, False]])