"""Knapsack-style minimisation problems."""

from __future__ import annotations

from math import isqrt
from typing import Sequence

__all__ = ["num_squares", "paint_walls"]


def num_squares(n: int) -> int:
    """Return the fewest perfect squares that sum to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    best = [n] * (n + 1)
    best[0] = 0
    for root in range(1, isqrt(n) + 1):
        square = root * root
        for total in range(square, n + 1):
            best[total] = min(best[total], best[total - square] + 1)
    return best[n]


def paint_walls(cost: Sequence[int], time: Sequence[int]) -> int:
    """Return the least money needed to paint all walls.

    Wall i's paid painter costs ``cost[i]`` and takes ``time[i]`` units,
    during which a free painter paints one wall per unit.
    """
    if len(cost) != len(time):
        raise ValueError("cost and time must have the same length")
    walls = len(cost)
    # best[w]: cheapest way to cover w walls with the painters seen so far
    best = [0] + [float("inf")] * walls
    for price, duration in zip(cost, time):
        for w in range(walls, 0, -1):
            best[w] = min(best[w], best[max(0, w - 1 - duration)] + price)
    return int(best[walls])