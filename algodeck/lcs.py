"""Two-string dynamic programming problems in the style of LCS."""

from __future__ import annotations

__all__ = ["is_interleave", "minimum_delete_sum"]


def is_interleave(s1: str, s2: str, s3: str) -> bool:
    """Tell whether ``s3`` is formed by interleaving ``s1`` and ``s2`` while
    keeping the order of characters from each."""
    n1, n2 = len(s1), len(s2)
    if n1 + n2 != len(s3):
        return False
    # row[y]: s3[:x + y] is an interleaving of s1[:x] and s2[:y]
    row = [True] * (n2 + 1)
    for y in range(1, n2 + 1):
        row[y] = row[y - 1] and s2[y - 1] == s3[y - 1]
    for x in range(1, n1 + 1):
        row[0] = row[0] and s1[x - 1] == s3[x - 1]
        for y in range(1, n2 + 1):
            target = s3[x + y - 1]
            row[y] = (row[y] and s1[x - 1] == target) or (
                row[y - 1] and s2[y - 1] == target
            )
    return row[n2]


def minimum_delete_sum(s1: str, s2: str) -> int:
    """Return the lowest total of character codes deleted from both strings
    to make them equal."""
    # best[j]: largest code sum of a common subsequence of s1[i:] and s2[j:]
    best = [0] * (len(s2) + 1)
    for a in reversed(s1):
        current = [0] * (len(s2) + 1)
        for j in reversed(range(len(s2))):
            if a == s2[j]:
                current[j] = ord(a) + best[j + 1]
            else:
                current[j] = max(best[j], current[j + 1])
        best = current
    total = sum(map(ord, s1)) + sum(map(ord, s2))
    return total - 2 * best[0]