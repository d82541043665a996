"""
lexo — lexicographically ordered position strings ("ranks").

Ranks are sort keys for ordered lists stored as rows: inserting, moving or
reordering an item creates one new rank and never rewrites the others.

Usage:
    from lexo import Rank, after, before, between, first

    head = first()                 # Rank(value='H')
    tail = after(head)             # Rank(value='I')
    mid = between(head, tail)      # Rank(value='HH')
"""

from lexo.core.alphabet import (
    BASE62,
    END_CHAR,
    MID_CHAR,
    START_CHAR,
    Alphabet,
    InvalidSymbolError,
)
from lexo.core.domain.rank import EmptyRankError, Rank
from lexo.core.math.position_algebra import DegenerateRangeError, NoPredecessorError
from lexo.core.math.rebalance import RebalanceConfig
from lexo.operations import after, balanced_ranks, before, between, first

__all__ = [
    # Alphabet
    "Alphabet",
    "BASE62",
    "START_CHAR",
    "END_CHAR",
    "MID_CHAR",
    # Rank
    "Rank",
    # Operations
    "first",
    "after",
    "before",
    "between",
    "balanced_ranks",
    "RebalanceConfig",
    # Exceptions
    "InvalidSymbolError",
    "EmptyRankError",
    "NoPredecessorError",
    "DegenerateRangeError",
]
