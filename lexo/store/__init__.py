"""
Position Store boundary and sequencing helpers.

The store itself (table, column, transactions) is external; this package only
defines the protocol it must satisfy, a dict-backed reference implementation,
and the sequencer that computes next ranks and rebalance plans over it.
"""

from lexo.store.memory import InMemoryPositionStore
from lexo.store.position_store import PositionStore, RowId
from lexo.store.sequencer import (
    PositionSequencer,
    RankAssignment,
    RebalanceCollisionError,
    RebalancePlan,
    RebalanceResult,
    SequencerConfig,
    next_rank,
    plan_rebalance,
    rebalance,
)

__all__ = [
    # Protocol
    "PositionStore",
    "RowId",
    # Reference store
    "InMemoryPositionStore",
    # Sequencer
    "PositionSequencer",
    "SequencerConfig",
    "RankAssignment",
    "RebalancePlan",
    "RebalanceResult",
    "RebalanceCollisionError",
    "next_rank",
    "plan_rebalance",
    "rebalance",
]
