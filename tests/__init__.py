"""
Test suite for lexo

Contains:
- tests/unit/          : Unit tests for alphabet, algebra, rebalancer, Rank, contracts and sequencer
"""
