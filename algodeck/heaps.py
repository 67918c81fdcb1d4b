"""Greedy problems driven by priority queues."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from string import ascii_lowercase
from typing import Sequence

__all__ = [
    "find_maximized_capital",
    "longest_diverse_string",
    "min_deletions",
    "maximum_safeness_factor",
    "smallest_chair",
]


def find_maximized_capital(
    k: int, w: int, profits: Sequence[int], capital: Sequence[int]
) -> int:
    """Return the capital after finishing at most ``k`` projects, starting
    with ``w``; a project needs its capital up front and adds its profit."""
    if len(profits) != len(capital):
        raise ValueError("profits and capital must have the same length")
    projects = sorted(zip(capital, profits), key=lambda project: project[0])
    affordable: list[int] = []  # negated profits
    money = w
    next_project = 0
    for _ in range(k):
        while next_project < len(projects) and projects[next_project][0] <= money:
            heapq.heappush(affordable, -projects[next_project][1])
            next_project += 1
        if not affordable:
            break
        money -= heapq.heappop(affordable)
    return money


def longest_diverse_string(a: int, b: int, c: int) -> str:
    """Return a longest string of at most ``a`` 'a's, ``b`` 'b's and ``c``
    'c's that never holds the same letter three times in a row."""
    heap = [(-count, letter) for letter, count in zip("abc", (a, b, c)) if count > 0]
    heapq.heapify(heap)
    built: list[str] = []

    def allowed(letter: str) -> bool:
        return len(built) < 2 or not (built[-1] == letter and built[-2] == letter)

    while heap:
        count, letter = heapq.heappop(heap)
        if allowed(letter):
            built.append(letter)
            count += 1
        else:
            if not heap:
                break
            second_count, second = heapq.heappop(heap)
            built.append(second)
            second_count += 1
            if second_count < 0:
                heapq.heappush(heap, (second_count, second))
        if count < 0:
            heapq.heappush(heap, (count, letter))
    return "".join(built)


def min_deletions(s: str) -> int:
    """Return the fewest characters to delete from ``s`` so that no two
    letters occur the same number of times."""
    unknown = set(s) - set(ascii_lowercase)
    if unknown:
        raise ValueError(f"only lowercase letters are allowed, got {sorted(unknown)!r}")
    letter_counts = Counter(s)
    frequencies = [letter_counts.get(letter, 0) for letter in ascii_lowercase]
    how_many = Counter(frequencies)
    free: list[int] = []  # negated unused frequencies below the current one
    deletions = 0
    for frequency in range(max(frequencies) + 1):
        sharing = how_many.get(frequency, 0)
        if sharing == 0:
            heapq.heappush(free, -frequency)
            continue
        while sharing > 1 and free:
            deletions += frequency + heapq.heappop(free)
            sharing -= 1
        if sharing > 1:
            deletions += (sharing - 1) * frequency
    return deletions


_STEPS = ((-1, 0), (0, -1), (0, 1), (1, 0))


def maximum_safeness_factor(grid: Sequence[Sequence[int]]) -> int:
    """Return the largest, over all paths from the top-left to the
    bottom-right cell, of the smallest Manhattan distance from a path cell
    to any cell holding 1."""
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one cell")
    rows, cols = len(grid), len(grid[0])

    def neighbours(x: int, y: int):
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < rows and 0 <= ny < cols:
                yield nx, ny

    distance = [[-1] * cols for _ in range(rows)]
    frontier: deque[tuple[int, int]] = deque()
    for x, row in enumerate(grid):
        for y, cell in enumerate(row):
            if cell == 1:
                distance[x][y] = 0
                frontier.append((x, y))
    while frontier:
        x, y = frontier.popleft()
        for nx, ny in neighbours(x, y):
            if distance[nx][ny] < 0:
                distance[nx][ny] = distance[x][y] + 1
                frontier.append((nx, ny))

    safeness = distance[0][0]
    seen = [[False] * cols for _ in range(rows)]
    seen[0][0] = True
    heap = [(-distance[0][0], 0, 0)]
    while heap:
        negated, x, y = heapq.heappop(heap)
        safeness = min(safeness, -negated)
        if (x, y) == (rows - 1, cols - 1):
            break
        for nx, ny in neighbours(x, y):
            if not seen[nx][ny]:
                seen[nx][ny] = True
                heapq.heappush(heap, (-distance[nx][ny], nx, ny))
    return safeness


def smallest_chair(times: Sequence[Sequence[int]], target_friend: int) -> int:
    """Return the chair taken by ``target_friend``, or -1 if there is no such
    friend.

    Friends arrive in order and take the lowest free chair; a chair is free
    again from the moment its occupant leaves.
    """
    arrivals = sorted(
        (arrival, leave, friend) for friend, (arrival, leave) in enumerate(times)
    )
    empty = list(range(len(arrivals)))
    occupied: list[tuple[int, int]] = []  # (leave time, chair)
    for arrival, leave, friend in arrivals:
        while occupied and occupied[0][0] <= arrival:
            heapq.heappush(empty, heapq.heappop(occupied)[1])
        chair = heapq.heappop(empty)
        heapq.heappush(occupied, (leave, chair))
        if friend == target_friend:
            return chair
    return -1