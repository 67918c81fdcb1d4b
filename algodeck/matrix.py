"""Square-finding problems on 0/1 matrices."""

from __future__ import annotations

from itertools import accumulate
from typing import Sequence

__all__ = ["count_squares", "maximal_square"]


def count_squares(matrix: Sequence[Sequence[int]]) -> int:
    """Count the square submatrices made only of ones."""
    if not matrix or not matrix[0]:
        return 0
    rows, cols = len(matrix), len(matrix[0])

    # prefix[i][j] holds the sum of matrix[:i][:j]
    prefix = [[0] * (cols + 1)]
    for row in matrix:
        line = [0, *accumulate(row)]
        above = prefix[-1]
        prefix.append([a + b for a, b in zip(line, above)])

    def area_sum(top: int, left: int, size: int) -> int:
        bottom, right = top + size, left + size
        return (
            prefix[bottom][right]
            - prefix[top][right]
            - prefix[bottom][left]
            + prefix[top][left]
        )

    return sum(
        area_sum(top, left, size) == size * size
        for size in range(1, min(rows, cols) + 1)
        for top in range(rows - size + 1)
        for left in range(cols - size + 1)
    )


def maximal_square(matrix: Sequence[Sequence[str]]) -> int:
    """Return the area of the largest square of '1' cells."""
    if not matrix or not matrix[0]:
        return 0
    sizes = [[int(cell) for cell in row] for row in matrix]
    best = 0
    for i, row in enumerate(sizes):
        for j, cell in enumerate(row):
            if i > 0 and j > 0 and cell == 1:
                row[j] = min(sizes[i - 1][j], row[j - 1], sizes[i - 1][j - 1]) + 1
            best = max(best, row[j])
    return best * best