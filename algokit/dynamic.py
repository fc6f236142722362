"""Dynamic-programming problems: value-indexed knapsack and grid path cost."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def knapsack_max_value(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Return the best total value of (weight, value) items fitting in capacity.

    The table is indexed by value and holds the least weight reaching it, which
    suits large capacities with small values.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    item_list = list(items)
    for weight, value in item_list:
        if weight < 0 or value < 0:
            raise ValueError("weights and values must not be negative")
    total = sum(value for _, value in item_list)
    lightest: list[float] = [0] + [math.inf] * total
    for weight, value in item_list:
        for achieved in range(total, value - 1, -1):
            candidate = lightest[achieved - value] + weight
            if candidate < lightest[achieved]:
                lightest[achieved] = candidate
    return max(value for value, weight in enumerate(lightest) if weight <= capacity)


def min_cost_path(cost: Sequence[Sequence[int]], row: int, col: int) -> int:
    """Cheapest cost from the top-left cell to (row, col) moving right, down or diagonally."""
    if not cost or not cost[0]:
        raise ValueError("cost grid is empty")
    if not (0 <= row < len(cost) and 0 <= col < len(cost[0])):
        raise IndexError(f"cell ({row}, {col}) is outside the grid")

    previous: list[int] = []
    for i, line in enumerate(cost[: row + 1]):
        current: list[int] = []
        for j, cell in enumerate(line[: col + 1]):
            if i == 0 and j == 0:
                current.append(cell)
            elif i == 0:
                current.append(current[j - 1] + cell)
            elif j == 0:
                current.append(previous[0] + cell)
            else:
                current.append(cell + min(previous[j], previous[j - 1], current[j - 1]))
        previous = current
    return previous[col]