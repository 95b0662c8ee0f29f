import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.graphs import depth_first_search

EXAMPLE = [
    [0, 1, 1, 0, 0, 0],
    [1, 0, 0, 1, 1, 0],
    [1, 0, 0, 0, 1, 0],
    [0, 1, 0, 0, 1, 1],
    [0, 1, 1, 1, 0, 1],
    [0, 0, 0, 1, 1, 0],
]


def test_example_graph_from_zero():
    assert depth_first_search(EXAMPLE, 0) == [0, 1, 3, 4, 2, 5]


def test_single_vertex():
    assert depth_first_search([[0]], 0) == [0]


def test_disconnected_component_not_visited():
    matrix = [
        [0, 1, 0, 0],
        [1, 0, 0, 0],
        [0, 0, 0, 1],
        [0, 0, 1, 0],
    ]
    assert depth_first_search(matrix, 0) == [0, 1]
    assert depth_first_search(matrix, 3) == [3, 2]


def test_start_out_of_range():
    with pytest.raises(IndexError):
        depth_first_search(EXAMPLE, 6)
    with pytest.raises(IndexError):
        depth_first_search([], 0)


def test_non_square_matrix():
    with pytest.raises(ValueError):
        depth_first_search([[0, 1], [1]], 0)


@st.composite
def graphs(draw):
    size = draw(st.integers(1, 8))
    matrix = [[0] * size for _ in range(size)]
    for i in range(size):
        for j in range(i + 1, size):
            if draw(st.booleans()):
                matrix[i][j] = matrix[j][i] = 1
    start = draw(st.integers(0, size - 1))
    return matrix, start


@given(graphs())
def test_visit_order_invariants(case):
    matrix, start = case
    order = depth_first_search(matrix, start)
    assert order[0] == start
    assert len(order) == len(set(order))
    for position, vertex in enumerate(order[1:], start=1):
        assert any(matrix[earlier][vertex] == 1 for earlier in order[:position])
    seen = set(order)
    for vertex in seen:
        for neighbour, edge in enumerate(matrix[vertex]):
            if edge == 1:
                assert neighbour in seen


def test_long_path_graph():
    size = 3000
    matrix = [[0] * size for _ in range(size)]
    for i in range(size - 1):
        matrix[i][i + 1] = matrix[i + 1][i] = 1
    assert depth_first_search(matrix, 0) == list(range(size))