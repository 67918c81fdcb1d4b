"""Array and string problems answered by direct simulation."""

from __future__ import annotations

from typing import Iterable, Sequence

__all__ = ["color_the_array", "repeated_substring_pattern"]


def color_the_array(n: int, queries: Iterable[Sequence[int]]) -> list[int]:
    """Colour positions of an uncoloured array of length ``n`` one query
    ``(index, colour)`` at a time, and return after each query the number
    of adjacent pairs sharing a non-zero colour."""
    colours = [0] * n
    pairs = 0
    answers = []
    for index, new in queries:
        if not 0 <= index < n:
            raise IndexError(f"index {index} is outside 0..{n - 1}")
        before = colours[index - 1] if index > 0 else 0
        after = colours[index + 1] if index + 1 < n else 0
        old = colours[index]
        if old:
            pairs -= (old == before) + (old == after)
        colours[index] = new
        if new:
            pairs += (new == before) + (new == after)
        answers.append(pairs)
    return answers


def repeated_substring_pattern(s: str) -> bool:
    """Tell whether ``s`` is some shorter string repeated two or more times."""
    n = len(s)
    return any(
        s == s[:size] * (n // size) for size in range(1, n // 2 + 1) if n % size == 0
    )