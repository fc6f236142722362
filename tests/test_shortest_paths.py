import math

import pytest

from algokit.shortest_paths import (
    bellman_ford,
    dijkstra,
    floyd_warshall,
    has_negative_cycle,
)

SAMPLE = [
    (0, 1, -1),
    (0, 2, 4),
    (1, 2, 3),
    (3, 2, 5),
    (1, 3, 2),
    (3, 1, 1),
    (4, 3, -3),
    (1, 4, 2),
]

POSITIVE = [
    (0, 1, 4),
    (0, 2, 1),
    (2, 1, 2),
    (1, 3, 1),
    (2, 3, 5),
    (3, 4, 3),
]


def test_bellman_ford_sample():
    result = bellman_ford(5, SAMPLE, 0)
    assert result.distances == [0, -1, 2, -2, 1]
    assert result.negative_cycle is False


def test_bellman_ford_detects_negative_cycle():
    result = bellman_ford(3, [(0, 1, 1), (1, 2, -3), (2, 1, 1)], 0)
    assert result.negative_cycle is True


def test_bellman_ford_unreachable_is_infinite():
    result = bellman_ford(3, [(0, 1, 2)], 0)
    assert math.isinf(result.distances[2])
    assert result.distances[0] == 0


def test_dijkstra_agrees_with_bellman_ford():
    assert dijkstra(6, POSITIVE, 0) == bellman_ford(6, POSITIVE, 0).distances


def test_dijkstra_rejects_negative_weight():
    with pytest.raises(ValueError):
        dijkstra(2, [(0, 1, -1)], 0)


def test_out_of_range_vertex_rejected():
    with pytest.raises(ValueError):
        bellman_ford(2, [(0, 5, 1)], 0)
    with pytest.raises(ValueError):
        floyd_warshall(2, [(3, 0, 1)])


def test_floyd_warshall_rows_match_single_source():
    matrix = floyd_warshall(5, SAMPLE)
    for source in range(5):
        assert matrix[source] == bellman_ford(5, SAMPLE, source).distances
    assert not has_negative_cycle(matrix)


def test_floyd_warshall_diagonal_is_zero_without_cycles():
    matrix = floyd_warshall(6, POSITIVE)
    assert all(row[i] == 0 for i, row in enumerate(matrix))


def test_floyd_warshall_negative_cycle():
    matrix = floyd_warshall(3, [(0, 1, 1), (1, 2, -3), (2, 1, 1)])
    assert has_negative_cycle(matrix)


def test_negative_self_loop_counts_as_cycle():
    matrix = floyd_warshall(2, [(1, 1, -2)])
    assert has_negative_cycle(matrix)