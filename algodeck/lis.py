"""Longest-increasing-subsequence style dynamic programming."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Sequence

__all__ = [
    "largest_divisible_subset",
    "longest_unequal_adjacent_groups",
    "longest_arithmetic_subsequence",
    "max_sum_increasing_subsequence",
    "number_of_lis",
    "length_of_lis",
]


def _trace(values: Sequence, previous: Sequence[int], end: int) -> list:
    chain = []
    index = end
    while index != -1:
        chain.append(values[index])
        index = previous[index]
    chain.reverse()
    return chain


def largest_divisible_subset(nums: Iterable[int]) -> list[int]:
    """Return a largest subset in which every pair divides one way or the
    other, in ascending order."""
    values = sorted(nums)
    if not values:
        return []
    links = [0] * len(values)
    previous = [-1] * len(values)
    best_links, best_end = -1, 0
    for i in range(1, len(values)):
        for j in range(i):
            if values[i] % values[j] == 0 and links[j] + 1 >= links[i]:
                links[i] = links[j] + 1
                previous[i] = j
        if best_links < links[i]:
            best_links, best_end = links[i], i
    return _trace(values, previous, best_end)


def _one_letter_apart(first: str, second: str) -> bool:
    return len(first) == len(second) and sum(a != b for a, b in zip(first, second)) == 1


def longest_unequal_adjacent_groups(
    words: Sequence[str], groups: Sequence[int]
) -> list[str]:
    """Return a longest subsequence of ``words`` in which neighbours belong to
    different groups and differ in exactly one letter."""
    if len(words) != len(groups):
        raise ValueError("words and groups must have the same length")
    if not words:
        return []
    lengths = [1] * len(words)
    previous = [-1] * len(words)
    best_len, best_end = 1, 0
    for i, word in enumerate(words):
        for j in range(i):
            if (
                groups[i] != groups[j]
                and _one_letter_apart(word, words[j])
                and lengths[i] < lengths[j] + 1
            ):
                lengths[i] = lengths[j] + 1
                previous[i] = j
        if best_len <= lengths[i]:
            best_len, best_end = lengths[i], i
    return _trace(words, previous, best_end)


def longest_arithmetic_subsequence(arr: Iterable[int], difference: int) -> int:
    """Return the length of the longest subsequence whose consecutive
    elements differ by ``difference``."""
    ending: dict[int, int] = {}
    best = 0
    for value in arr:
        before = value - difference
        if before in ending:
            ending[value] = max(ending.get(value, 0), ending[before] + 1)
        else:
            ending[value] = 1
        best = max(best, ending[value])
    return best


def max_sum_increasing_subsequence(arr: Sequence[int]) -> int:
    """Return the largest sum of a strictly increasing subsequence."""
    if not arr:
        return 0
    sums = list(arr)
    for i, value in enumerate(arr):
        for j in range(i):
            if arr[j] < value and sums[j] + value > sums[i]:
                sums[i] = sums[j] + value
    return max(sums)


def number_of_lis(nums: Sequence[int]) -> int:
    """Count the longest strictly increasing subsequences."""
    n = len(nums)
    lengths = [1] * n
    counts = [1] * n
    for left in reversed(range(n)):
        for right in range(left + 1, n):
            if nums[left] >= nums[right]:
                continue
            if lengths[left] < lengths[right] + 1:
                lengths[left] = lengths[right] + 1
                counts[left] = counts[right]
            elif lengths[left] == lengths[right] + 1:
                counts[left] += counts[right]
    longest = max(lengths, default=0)
    return sum(c for length, c in zip(lengths, counts) if length == longest)


def length_of_lis(nums: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        if not tails or tails[-1] < value:
            tails.append(value)
        else:
            tails[bisect_left(tails, value)] = value
    return len(tails)