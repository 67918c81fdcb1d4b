"""Search problems solved by exhaustive backtracking."""

from __future__ import annotations

from itertools import permutations
from typing import Iterable, Sequence

__all__ = [
    "add_operators",
    "make_square",
    "max_compatibility_sum",
    "word_break",
]


def add_operators(num: str, target: int) -> list[str]:
    """Return every way to put '+', '-' or '*' between the digits of ``num``
    so that the expression evaluates to ``target``.

    Operands with a leading zero (such as ``05``) are never produced.
    """
    results: list[str] = []
    length = len(num)

    def explore(start: int, value: int, path: str, last: int) -> None:
        if start == length:
            if value == target:
                results.append(path)
            return
        term = 0
        for end in range(start, length):
            if end > start and num[start] == "0":
                break
            term = term * 10 + int(num[end])
            operand = num[start : end + 1]
            if start == 0:
                explore(end + 1, term, operand, term)
                continue
            explore(end + 1, value - last + last * term, f"{path}*{operand}", last * term)
            explore(end + 1, value + term, f"{path}+{operand}", term)
            explore(end + 1, value - term, f"{path}-{operand}", -term)

    explore(0, 0, "", 0)
    return results


def make_square(matchsticks: Iterable[int]) -> bool:
    """Tell whether all matchsticks together can form the four sides of a square."""
    sticks = sorted(matchsticks, reverse=True)
    total = sum(sticks)
    if total % 4:
        return False
    side = total // 4
    sides = [0, 0, 0, 0]

    def place(index: int) -> bool:
        if index == len(sticks):
            return all(s == side for s in sides)
        stick = sticks[index]
        for slot in range(4):
            if sides[slot] + stick <= side:
                sides[slot] += stick
                if place(index + 1):
                    return True
                sides[slot] -= stick
        return False

    return place(0)


def max_compatibility_sum(
    students: Sequence[Sequence[int]], mentors: Sequence[Sequence[int]]
) -> int:
    """Return the best total compatibility over all one-to-one pairings of
    students with mentors.

    The compatibility of a pair is the number of answers they share.
    """
    if not students:
        return 0
    questions = len(students[0])

    def score(student: Sequence[int], mentor: Sequence[int]) -> int:
        return sum(a == b for a, b in zip(student[:questions], mentor[:questions]))

    table = [[score(student, mentor) for mentor in mentors] for student in students]
    return max(
        sum(row[mentor] for row, mentor in zip(table, order))
        for order in permutations(range(len(students)))
    )


def word_break(s: str, word_dict: Iterable[str]) -> list[str]:
    """Return every sentence made by splitting ``s`` into words of ``word_dict``."""
    words = set(word_dict)
    sentences: list[str] = []
    chosen: list[str] = []

    def split(start: int) -> None:
        if start >= len(s):
            if chosen:
                sentences.append(" ".join(chosen))
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece in words:
                chosen.append(piece)
                split(end)
                chosen.pop()

    split(0)
    return sentences