"""Backtracking, DP, graph paths, KMP, digit-string arithmetic, an ordered multiset and hashing."""

__version__ = "0.1.0"
__all__ = ["backtracking", "bigint", "dp", "graph", "hashing", "kmp", "ordered_set"]