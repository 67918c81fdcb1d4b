"""Generation of full binary trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["TreeNode", "all_possible_fbt"]


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def all_possible_fbt(n: int) -> list[TreeNode]:
    """Return every full binary tree with ``n`` nodes, all valued 0.

    Subtrees are shared between the returned trees.
    """
    memo: dict[int, list[TreeNode]] = {}

    def build(size: int) -> list[TreeNode]:
        if size % 2 == 0:
            return []
        if size == 1:
            return [TreeNode()]
        if size in memo:
            return memo[size]
        trees = [
            TreeNode(0, left, right)
            for left_size in range(1, size, 2)
            for left in build(left_size)
            for right in build(size - left_size - 1)
        ]
        memo[size] = trees
        return trees

    return build(n)