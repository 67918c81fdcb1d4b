"""Counting and feasibility problems solved with memoised recurrences."""

from __future__ import annotations

from typing import Iterable, Sequence

__all__ = [
    "num_factored_binary_trees",
    "unique_paths_with_obstacles",
    "valid_partition",
    "count_orders",
    "can_cross",
]

MOD = 1_000_000_007


def num_factored_binary_trees(arr: Iterable[int]) -> int:
    """Count binary trees over ``arr`` where every inner node is the product
    of its two children, modulo 1e9+7."""
    values = sorted(arr)
    trees: dict[int, int] = {}
    total = 0
    for i, value in enumerate(values):
        count = 1
        for factor in values[:i]:
            if value % factor:
                continue
            other = value // factor
            count = (count + trees[factor] * trees.get(other, 0)) % MOD
        trees[value] = count
        total = (total + count) % MOD
    return total


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths from the top-left to the bottom-right cell that
    avoid cells marked 1."""
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one cell")
    rows, cols = len(grid), len(grid[0])
    # below[y] holds the path count from the cell one row down
    below = [0] * (cols + 1)
    for x in reversed(range(rows)):
        current = [0] * (cols + 1)
        for y in reversed(range(cols)):
            if grid[x][y] == 1:
                current[y] = 0
            elif x == rows - 1 and y == cols - 1:
                current[y] = 1
            else:
                current[y] = current[y + 1] + below[y]
        below = current
    return below[0]


def valid_partition(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` splits into contiguous blocks, each being two
    equal values, three equal values, or three consecutive increasing values."""
    n = len(nums)
    ok = [False] * n + [True, True, True]
    for i in reversed(range(n)):
        pair = i + 1 < n and nums[i] == nums[i + 1]
        if pair and ok[i + 2]:
            ok[i] = True
            continue
        if i + 2 >= n:
            continue
        triple = pair and nums[i] == nums[i + 2]
        run = nums[i] + 1 == nums[i + 1] and nums[i] + 2 == nums[i + 2]
        ok[i] = (triple or run) and ok[i + 3]
    return ok[0]


def count_orders(n: int) -> int:
    """Count sequences of n pickups and n deliveries where every delivery
    follows its own pickup, modulo 1e9+7."""
    if n < 0:
        return 0
    # ways[p][d]: orderings with p pickups and d deliveries still to place
    ways = [[0] * (n + 1) for _ in range(n + 1)]
    for p in range(n + 1):
        for d in range(p, n + 1):
            if p == 0 and d == 0:
                ways[p][d] = 1
                continue
            take_pickup = ways[p - 1][d] if p > 0 else 0
            take_delivery = ways[p][d - 1] if p < d else 0
            ways[p][d] = (p * take_pickup + (d - p) * take_delivery) % MOD
    return ways[n][n]


def can_cross(stones: Sequence[int]) -> bool:
    """Tell whether a frog starting on the first stone can reach the last one.

    The first jump is one unit; after a jump of k units the next is
    k - 1, k or k + 1 units, always forward.
    """
    if len(stones) < 2:
        return True
    if stones[1] > 1:
        return False
    index_of = {position: i for i, position in enumerate(stones)}
    arrivals: list[set[int]] = [set() for _ in stones]
    arrivals[1].add(1)
    for i in range(1, len(stones)):
        for last in arrivals[i]:
            for step in (last - 1, last, last + 1):
                if step <= 0:
                    continue
                target = index_of.get(stones[i] + step)
                if target is not None and target > i:
                    arrivals[target].add(step)
    return bool(arrivals[-1])