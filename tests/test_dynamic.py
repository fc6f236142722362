import pytest

from algokit.dynamic import knapsack_max_value, min_cost_path

ITEMS = [(3, 30), (4, 50), (5, 60)]
GRID = [[1, 2, 3], [4, 8, 2], [1, 5, 3]]


def test_knapsack_example():
    assert knapsack_max_value(ITEMS, 8) == 90


def test_knapsack_zero_capacity():
    assert knapsack_max_value(ITEMS, 0) == 0


def test_knapsack_everything_fits():
    total_weight = sum(w for w, _ in ITEMS)
    assert knapsack_max_value(ITEMS, total_weight) == sum(v for _, v in ITEMS)


def test_knapsack_single_item_too_heavy():
    assert knapsack_max_value([(10, 5)], 9) == 0


def test_knapsack_monotone_in_capacity():
    values = [knapsack_max_value(ITEMS, c) for c in range(15)]
    assert values == sorted(values)


def test_knapsack_rejects_negative_capacity():
    with pytest.raises(ValueError):
        knapsack_max_value(ITEMS, -1)


def test_min_cost_path_example():
    assert min_cost_path(GRID, 2, 2) == 8


def test_min_cost_path_origin():
    assert min_cost_path(GRID, 0, 0) == GRID[0][0]


def test_min_cost_path_along_first_row_and_column():
    assert min_cost_path(GRID, 0, 2) == sum(GRID[0])
    assert min_cost_path(GRID, 2, 0) == sum(row[0] for row in GRID)


def test_min_cost_path_out_of_range():
    with pytest.raises(IndexError):
        min_cost_path(GRID, 3, 0)


def test_min_cost_path_empty():
    with pytest.raises(ValueError):
        min_cost_path([], 0, 0)