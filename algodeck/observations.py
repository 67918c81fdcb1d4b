"""Problems whose answer follows from a structural observation."""

from __future__ import annotations

from collections import Counter, defaultdict
from itertools import chain, groupby, islice
from typing import Iterable, Sequence

__all__ = [
    "wonderful_coloring",
    "can_reach_end",
    "longest_divisors_interval",
    "min_substring_function",
    "max_same_colour",
]


def wonderful_coloring(values: Sequence[int], k: int) -> list[int]:
    """Paint as many elements as possible with colours ``1..k`` so that equal
    values get different colours and every colour is used equally often.

    Unpainted elements get 0.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    positions: defaultdict[int, list[int]] = defaultdict(list)
    for index, value in enumerate(values):
        if len(positions[value]) < k:
            positions[value].append(index)
    kept = sum(len(indices) for indices in positions.values())
    budget = kept - kept % k
    colours = [0] * len(values)
    ordered = chain.from_iterable(positions[value] for value in sorted(positions))
    for turn, index in enumerate(islice(ordered, budget)):
        colours[index] = turn % k + 1
    return colours


def can_reach_end(n: int, blocked: Iterable[tuple[int, int]]) -> bool:
    """Tell whether (n, n) can be reached from (1, 1) on an n-by-n grid by
    right and down moves, avoiding the 1-based ``blocked`` cells.

    The way is shut exactly when some anti-diagonal is entirely blocked.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    per_diagonal: Counter[int] = Counter()
    for x, y in blocked:
        if not (1 <= x <= n and 1 <= y <= n):
            raise ValueError(f"cell ({x}, {y}) is outside the grid")
        per_diagonal[x + y] += 1
    for diagonal, count in per_diagonal.items():
        cells = diagonal - 1 if diagonal <= n + 1 else 2 * n + 1 - diagonal
        if count == cells:
            return False
    return True


def longest_divisors_interval(n: int) -> int:
    """Return the length of the longest run of consecutive integers that all
    divide ``n``; the run 1, 2, ..., m is always among the longest."""
    if n < 1:
        raise ValueError("n must be positive")
    length = 0
    while n % (length + 1) == 0:
        length += 1
    return length


def min_substring_function(n: int, m: int) -> int:
    """Return the fewest all-zero substrings a binary string of length ``n``
    with exactly ``m`` ones can have."""
    if n < 0 or not 0 <= m <= n:
        raise ValueError("need 0 <= m <= n")
    ones, zeros = m, n - m
    if ones == 0:
        return zeros * (zeros + 1) // 2
    if zeros <= ones:
        return zeros
    gaps = ones + 1
    short, longer = divmod(zeros, gaps)
    plain = gaps - longer
    return plain * short * (short + 1) // 2 + longer * (short + 1) * (short + 2) // 2


def max_same_colour(s: str, k: int) -> int:
    """Return the most cells of one colour that can be left in a row, all of
    that colour, after at most ``k`` deletions of contiguous pieces of ``s``.

    Returns -1 when the colours differ and no deletion is allowed.
    """
    n = len(s)
    if n == 0:
        raise ValueError("s must not be empty")
    if k < 0:
        raise ValueError("k must not be negative")
    if n == 1:
        return 1

    left = 0
    while left < n - 1 and s[left] == s[left + 1]:
        left += 1
    left += 1
    prefix = left
    if prefix == n:
        return n
    if k == 0:
        return -1

    j = n - 1
    while left < j - 1 and s[j - 1] == s[j]:
        j -= 1
    right = j - 1
    suffix = n - 1 - right

    best = prefix + suffix if s[0] == s[-1] else max(prefix, suffix)
    if k == 1:
        return best

    runs: defaultdict[str, list[int]] = defaultdict(list)
    for letter, group in groupby(s[left : right + 1]):
        runs[letter].append(sum(1 for _ in group))
    for letter, lengths in runs.items():
        kept = sum(sorted(lengths, reverse=True)[: k - 1])
        if letter == s[0]:
            kept += prefix
        if letter == s[-1]:
            kept += suffix
        best = max(best, kept)
    return best