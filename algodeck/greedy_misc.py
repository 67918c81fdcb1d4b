"""Assorted greedy problems."""

from __future__ import annotations

import heapq
from itertools import pairwise
from typing import Sequence

__all__ = ["has_exact_pairs", "nice_matrix_operations", "furthest_building"]


def has_exact_pairs(a: int, b: int, c: int, m: int) -> bool:
    """Tell whether a string of ``a`` 'A's, ``b`` 'B's and ``c`` 'C's can
    have exactly ``m`` pairs of equal adjacent letters."""
    smallest, middle, largest = sorted((a, b, c))
    low = largest - 1 - (middle + smallest)
    high = (a - 1) + (b - 1) + (c - 1)
    return low <= m <= high


def nice_matrix_operations(matrix: Sequence[Sequence[int]]) -> int:
    """Return the fewest +1/-1 steps that make every row and every column
    of ``matrix`` a palindrome."""
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    total = 0
    for i in range(rows // 2):
        for j in range(cols // 2):
            group = sorted(
                (
                    matrix[i][j],
                    matrix[rows - 1 - i][j],
                    matrix[i][cols - 1 - j],
                    matrix[rows - 1 - i][cols - 1 - j],
                )
            )
            median = group[2]
            total += sum(abs(median - value) for value in group)
    if rows % 2:
        row = matrix[rows // 2]
        total += sum(abs(row[cols - 1 - j] - row[j]) for j in range((cols + 1) // 2))
    if cols % 2:
        mid = cols // 2
        total += sum(
            abs(matrix[rows - 1 - j][mid] - matrix[j][mid]) for j in range((rows + 1) // 2)
        )
    return total


def furthest_building(heights: Sequence[int], bricks: int, ladders: int) -> int:
    """Return the furthest building index reachable from the first one,
    spending a ladder or as many bricks as the climb on every upward step."""
    climbs: list[int] = []  # climbs currently covered by ladders
    for i, (current, following) in enumerate(pairwise(heights)):
        climb = following - current
        if climb <= 0:
            continue
        heapq.heappush(climbs, climb)
        if len(climbs) <= ladders:
            continue
        smallest = heapq.heappop(climbs)
        if bricks < smallest:
            return i
        bricks -= smallest
    return len(heights) - 1