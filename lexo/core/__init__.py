"""
Core alphabet, position algebra, rebalance and the Rank value type.

This package is independent of any storage layer: every function is pure and
operates on plain strings or immutable Rank values.
"""
