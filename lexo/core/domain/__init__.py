"""
Domain models and value objects.

Contains the Rank value type used as a sort key for ordered rows.
"""

from lexo.core.domain.rank import EmptyRankError, Rank

__all__ = [
    "EmptyRankError",
    "Rank",
]
