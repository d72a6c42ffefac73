import pytest

from algolab.graph import adjacency_matrix, breadth_first, depth_first

SAMPLE_EDGES = [
    (1, 2), (1, 4), (2, 3), (2, 5), (2, 7), (2, 8), (3, 4),
    (3, 10), (3, 9), (5, 6), (5, 7), (5, 8), (7, 8),
]


def test_adjacency_matrix_is_symmetric_and_marks_edges():
    matrix = adjacency_matrix(SAMPLE_EDGES, 11)
    assert len(matrix) == 11
    assert all(matrix[u][v] == matrix[v][u] for u in range(11) for v in range(11))
    for u, v in SAMPLE_EDGES:
        assert matrix[u][v] == 1
    assert sum(map(sum, matrix)) == 2 * len(SAMPLE_EDGES)


def test_adjacency_matrix_rejects_out_of_range_edge():
    with pytest.raises(ValueError):
        adjacency_matrix([(0, 3)], 3)


def test_depth_first_visits_every_reachable_vertex_once():
    order = depth_first(adjacency_matrix(SAMPLE_EDGES, 11), 1)
    assert order[0] == 1
    assert sorted(order) == list(range(1, 11))


def test_depth_first_path():
    assert depth_first(adjacency_matrix([(0, 1), (1, 2)], 3), 0) == [0, 1, 2]


def test_depth_first_explores_highest_neighbour_first():
    matrix = adjacency_matrix([(0, 1), (0, 2), (0, 3)], 4)
    assert depth_first(matrix, 0) == [0, 3, 2, 1]


def test_depth_first_isolated_vertex():
    assert depth_first(adjacency_matrix([(0, 1)], 6), 5) == [5]


def test_depth_first_rejects_bad_start():
    with pytest.raises(ValueError):
        depth_first(adjacency_matrix([], 3), 3)


def test_depth_first_rejects_non_square_matrix():
    with pytest.raises(ValueError):
        depth_first([[0, 1], [1]], 0)


def test_breadth_first_star():
    assert breadth_first({0: [1, 2, 3]}, 0) == [0, 1, 2, 3]


def test_breadth_first_missing_start_has_no_neighbours():
    assert breadth_first({1: [2]}, 7) == [7]


def test_breadth_first_self_entries_do_not_change_order():
    plain = {1: [2, 4], 2: [1, 3], 3: [2, 4], 4: [1, 3]}
    with_self = {node: [node, *neighbours] for node, neighbours in plain.items()}
    assert breadth_first(with_self, 1) == breadth_first(plain, 1)


def test_breadth_first_visits_by_distance():
    matrix = adjacency_matrix(SAMPLE_EDGES, 11)
    adjacency = {u: [v for v in range(11) if matrix[u][v]] for u in range(11)}
    order = breadth_first(adjacency, 1)
    assert sorted(order) == list(range(1, 11))
    distance = {1: 0}
    for node in order:
        for neighbour in adjacency[node]:
            distance.setdefault(neighbour, distance[node] + 1)
    assert [distance[n] for n in order] == sorted(distance[n] for n in order)