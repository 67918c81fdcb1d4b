"""Problems solved with a monotonic stack."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

__all__ = [
    "find_132_pattern",
    "largest_rectangle_area",
    "remove_duplicates",
    "remove_duplicate_letters",
    "sum_subarray_mins",
    "longest_valid_substring",
]

MOD = 1_000_000_007


def find_132_pattern(nums: Sequence[int]) -> bool:
    """Tell whether there are i < j < k with nums[i] < nums[k] < nums[j]."""
    if len(nums) <= 2:
        return False
    lowest = nums[0]
    # decreasing stack of (value, smallest value seen before it)
    stack: list[tuple[int, int]] = [(nums[0], nums[0])]
    for value in nums[1:]:
        while stack and stack[-1][0] <= value:
            stack.pop()
        if stack and stack[-1][1] < value < stack[-1][0]:
            return True
        stack.append((value, lowest))
        lowest = min(lowest, value)
    return False


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle inside the histogram."""
    n = len(heights)
    left = [0] * n
    right = [n - 1] * n
    stack: list[int] = []
    for i, height in enumerate(heights):
        while stack and heights[stack[-1]] >= height:
            stack.pop()
        left[i] = stack[-1] + 1 if stack else 0
        stack.append(i)
    stack.clear()
    for i in reversed(range(n)):
        while stack and heights[stack[-1]] >= heights[i]:
            stack.pop()
        right[i] = stack[-1] - 1 if stack else n - 1
        stack.append(i)
    return max(
        ((r - l + 1) * height for l, r, height in zip(left, right, heights)),
        default=0,
    )


def remove_duplicates(s: str, k: int) -> str:
    """Repeatedly remove runs of ``k`` equal adjacent letters from ``s``."""
    stack: list[list] = []  # [letter, run length]
    for letter in s:
        if stack and stack[-1][0] == letter:
            run = stack.pop()
            if run[1] + 1 < k:
                run[1] += 1
                stack.append(run)
        else:
            stack.append([letter, 1])
    return "".join(letter * count for letter, count in stack)


def remove_duplicate_letters(s: str) -> str:
    """Return the lexicographically smallest subsequence of ``s`` holding
    every distinct letter exactly once."""
    if not s:
        return ""
    remaining = Counter(s[1:])
    result = [s[0]]
    used = {s[0]}
    for letter in s[1:]:
        if letter in used:
            remaining[letter] -= 1
            continue
        while result and result[-1] >= letter and remaining[result[-1]] > 0:
            used.discard(result.pop())
        remaining[letter] -= 1
        used.add(letter)
        result.append(letter)
    return "".join(result)


def sum_subarray_mins(arr: Sequence[int]) -> int:
    """Return the sum of the minimum of every contiguous subarray, modulo
    1e9+7."""
    n = len(arr)
    smaller_left = [-1] * n
    smaller_right = [n] * n
    stack: list[int] = []
    for i, value in enumerate(arr):
        while stack and arr[stack[-1]] >= value:
            stack.pop()
        smaller_left[i] = stack[-1] if stack else -1
        stack.append(i)
    stack.clear()
    for i in reversed(range(n)):
        while stack and arr[stack[-1]] > arr[i]:
            stack.pop()
        smaller_right[i] = stack[-1] if stack else n
        stack.append(i)
    total = 0
    for i, value in enumerate(arr):
        spans = (i - smaller_left[i]) * (smaller_right[i] - i) % MOD
        total = (total + value * spans) % MOD
    return total


def longest_valid_substring(s: str) -> int:
    """Return the length of the longest well-formed parentheses substring."""
    stack = [-1]
    best = 0
    for i, char in enumerate(s):
        if char == ")" and stack[-1] != -1 and s[stack[-1]] == "(":
            stack.pop()
        else:
            stack.append(i)
        best = max(best, i - stack[-1])
    return best