"""Constructive problems: building an answer directly from observations."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

__all__ = ["divine_array_queries", "complete_square", "reconstruct_queue"]


def divine_array_queries(
    array: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer queries on the array transformed by replacing every value with
    its number of occurrences.

    Each query is ``(position, k)``: the 1-based position's value after
    ``k`` steps. The array stops changing after about log2(n) steps.
    """
    n = len(array)
    if n == 0:
        raise ValueError("array must not be empty")
    depth = n.bit_length() - 1
    steps = [list(array)]
    for _ in range(depth + 1):
        counts = Counter(steps[-1])
        steps.append([counts[value] for value in steps[-1]])
    answers = []
    for position, k in queries:
        if not 1 <= position <= n:
            raise IndexError(f"position {position} is outside 1..{n}")
        if k < 0:
            raise ValueError("the number of steps must not be negative")
        answers.append(steps[min(k, depth + 1)][position - 1])
    return answers


def complete_square(x1: int, y1: int, x2: int, y2: int) -> tuple[int, int, int, int]:
    """Return the other two corners ``(x3, y3, x4, y4)`` of an axis-parallel
    square having the two given points as corners.

    Raises ValueError if no such square exists.
    """
    if x1 != x2 and y1 != y2:
        if abs(x2 - x1) != abs(y2 - y1):
            raise ValueError("the points cannot be corners of an axis-parallel square")
        return x1, y2, x2, y1
    if y1 == y2:
        side = abs(x2 - x1)
        return x1, y1 + side, x2, y1 + side
    side = abs(y2 - y1)
    return x1 + side, y1, x1 + side, y2


def reconstruct_queue(people: Iterable[Sequence[int]]) -> list[list[int]]:
    """Order people given as ``[height, k]`` so that each has exactly ``k``
    people at least as tall in front of them."""
    ordered = sorted((height, ahead) for height, ahead in people)
    if not ordered:
        return []
    first = min(
        (i for i, (_, ahead) in enumerate(ordered) if ahead == 0),
        key=lambda i: ordered[i][0],
        default=0,
    )
    queue: list[list[int] | None] = [None] * len(ordered)
    queue[0] = list(ordered[first])
    for i, (height, ahead) in enumerate(ordered):
        if i == first:
            continue
        remaining = ahead
        for slot, occupant in enumerate(queue):
            if occupant is not None:
                if occupant[0] >= height:
                    remaining -= 1
            elif remaining <= 0:
                queue[slot] = [height, ahead]
                break
            else:
                remaining -= 1
    return [person for person in queue if person is not None]