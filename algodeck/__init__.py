"""Classic algorithm solutions: backtracking, dynamic programming, greedy, heap and stack techniques."""

__version__ = "0.1.0"