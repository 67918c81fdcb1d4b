"""Small counting problems solved with a closed formula."""

from __future__ import annotations

from typing import Sequence

__all__ = [
    "max_teams",
    "impossible_dice_values",
    "column_title",
    "interesting_function_sum",
]


def max_teams(a: int, b: int) -> int:
    """Return the most teams of four that can be formed from ``a`` people of
    one kind and ``b`` of the other, each team holding at least one of each.

    Teams are taken greedily as 1+3 until the counts balance, then as 2+2.
    """
    few, many = sorted((a, b))
    lopsided = min(few, many // 3, (many - few + 1) // 2)
    few -= lopsided
    many -= 3 * lopsided
    balanced = max(0, min(few // 2, many // 2))
    return lopsided + balanced


def impossible_dice_values(dice: Sequence[int], total: int) -> list[int]:
    """For each die, count the faces it certainly did not show, given that
    dice with ``dice[i]`` faces each summed to ``total``."""
    count = len(dice)
    all_faces = sum(dice)
    result = []
    for faces in dice:
        others_max = all_faces - faces
        others_min = count - 1
        too_high = faces - min(faces, total - others_min)
        too_low = max(1, total - others_max) - 1
        result.append(too_high + too_low)
    return result


def column_title(column: int) -> str:
    """Return the spreadsheet column name for a 1-based column number
    (1 is 'A', 27 is 'AA'); numbers below 1 give an empty string."""
    letters = []
    while column > 0:
        column, offset = divmod(column - 1, 26)
        letters.append(chr(ord("A") + offset))
    return "".join(reversed(letters))


def interesting_function_sum(l: int, r: int) -> int:
    """Return the total number of changed digits when counting from ``l``
    up to ``r`` one at a time."""
    total = 0
    while l > 0 or r > 0:
        total += r - l
        l //= 10
        r //= 10
    return total