"""Maximum-sum subarray and subsequence problems."""

from __future__ import annotations

import heapq
from typing import Sequence

__all__ = ["max_subarray", "constrained_subset_sum"]


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_subarray() needs at least one number")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def constrained_subset_sum(nums: Sequence[int], k: int) -> int:
    """Return the largest sum of a non-empty subsequence in which consecutive
    chosen indices are at most ``k`` apart."""
    if not nums:
        raise ValueError("constrained_subset_sum() needs at least one number")
    largest = max(nums)
    if largest < 0:
        return largest

    best = nums[0]
    # max-heap of (sum ending at index, index), stored negated
    heap = [(-nums[0], 0)]
    for i in range(1, len(nums)):
        while heap and i - (-heap[0][1]) > k:
            heapq.heappop(heap)
        ending_here = max(nums[i], nums[i] - heap[0][0])
        best = max(best, ending_here)
        heapq.heappush(heap, (-ending_here, -i))
    return best