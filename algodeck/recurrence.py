"""Counting problems defined by simple recurrences."""

from __future__ import annotations

from math import comb
from typing import Sequence

__all__ = ["n_choose_r_mod", "count_routes", "dice_throw_ways", "check_record"]

MOD = 1_000_000_007


def n_choose_r_mod(n: int, r: int) -> int:
    """Return C(n, r) modulo 1e9+7.

    As in the recurrence this follows, any choice from zero items counts
    as 0, and r > n gives 0.
    """
    if r < 0:
        raise ValueError("r must not be negative")
    if n == 0 or n < r:
        return 0
    return comb(n, r) % MOD


def count_routes(locations: Sequence[int], start: int, finish: int, fuel: int) -> int:
    """Count routes from ``start`` to ``finish`` using at most ``fuel``,
    where moving between cities costs their distance, modulo 1e9+7."""
    if fuel < 0:
        return 0
    cities = range(len(locations))
    # routes[f][city]: routes from city to finish with f fuel left
    routes: list[list[int]] = []
    for remaining in range(fuel + 1):
        row = []
        for city in cities:
            total = 1 if city == finish else 0
            for other in cities:
                if other == city:
                    continue
                usage = abs(locations[city] - locations[other])
                if usage <= remaining:
                    total += routes[remaining - usage][other]
            row.append(total % MOD)
        routes.append(row)
    return routes[fuel][start]


def dice_throw_ways(faces: int, dice: int, total: int) -> int:
    """Count the ways ``dice`` dice with ``faces`` faces each show ``total``."""
    if dice < 0 or total < 0:
        return 0
    # ways[x]: ways the dice thrown so far sum to x
    ways = [1] + [0] * total
    for _ in range(dice):
        ways = [
            sum(ways[x - face] for face in range(1, min(faces, x) + 1))
            for x in range(total + 1)
        ]
    return ways[total]


def check_record(n: int) -> int:
    """Count attendance records of length ``n`` with fewer than two absences
    and never three lates in a row, modulo 1e9+7."""
    # counts[absences][trailing_lates]
    counts = [[1, 0, 0], [0, 0, 0]]
    for _ in range(n):
        fresh = [[0, 0, 0], [0, 0, 0]]
        for absences in range(2):
            for lates in range(3):
                ways = counts[absences][lates]
                if not ways:
                    continue
                fresh[absences][0] += ways
                if lates < 2:
                    fresh[absences][lates + 1] += ways
                if absences == 0:
                    fresh[1][0] += ways
        counts = [[w % MOD for w in row] for row in fresh]
    return sum(map(sum, counts)) % MOD