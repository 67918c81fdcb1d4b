"""Greedy problems on closed intervals."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate
from typing import Sequence

__all__ = ["min_groups", "erase_overlap_intervals"]


def min_groups(intervals: Sequence[Sequence[int]]) -> int:
    """Return the fewest groups the inclusive intervals can be split into so
    that no two intervals in a group meet; this is the deepest overlap."""
    changes: Counter[int] = Counter()
    for left, right in intervals:
        changes[left] += 1
        changes[right + 1] -= 1
    points = sorted(changes)
    return max(accumulate(changes[point] for point in points), default=0)


def erase_overlap_intervals(intervals: Sequence[Sequence[int]]) -> int:
    """Return the fewest intervals to remove so the rest do not overlap;
    intervals that only touch at an end point do not overlap."""
    ordered = sorted(((start, end) for start, end in intervals), key=lambda i: (i[1], i[0]))
    removed = 0
    kept = 0
    while kept < len(ordered):
        following = kept + 1
        while following < len(ordered) and ordered[following][0] < ordered[kept][1]:
            following += 1
            removed += 1
        kept = following
    return removed