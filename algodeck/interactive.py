"""Strategies for problems where the answer is found by asking questions."""

from __future__ import annotations

from typing import Callable

__all__ = ["guess_permutation", "find_kth_zero"]


def guess_permutation(n: int, query: Callable[[int, int], int]) -> list[int]:
    """Recover a hidden permutation of ``1..n``.

    ``query(i, j)`` must return ``p[i] mod p[j]`` for 1-based positions.
    Two questions are asked for every position after the first.
    """
    answer = [n] * n
    largest = 1
    for position in range(2, n + 1):
        forward = query(largest, position)
        backward = query(position, largest)
        if forward > backward:
            # p[largest] < p[position], so forward == p[largest]
            answer[largest - 1] = forward
            largest = position
        else:
            answer[position - 1] = backward
    return answer


def find_kth_zero(n: int, k: int, query: Callable[[int, int], int]) -> int:
    """Return the 1-based position of the k-th zero in a hidden 0/1 array of
    length ``n``, or -1 if there is none.

    ``query(l, r)`` must return the sum of the array between positions
    ``l`` and ``r`` inclusive.
    """
    low, high, found = 1, n, -1
    while low <= high:
        mid = (low + high) // 2
        zeros = mid - query(1, mid)
        if zeros >= k:
            found = mid
            high = mid - 1
        else:
            low = mid + 1
    return found