"""
Core math modules для lexo

Алгебра позиций и rebalance: чистые детерминированные функции над строками Base62.
"""

# Position Algebra
from lexo.core.math.position_algebra import (
    DegenerateRangeError,
    NoPredecessorError,
    after,
    before,
    between,
    first,
)

# Rebalancer
from lexo.core.math.rebalance import (
    DEFAULT_REBALANCE_CONFIG,
    REBALANCE_MAX_LENGTH_DEFAULT,
    REBALANCE_PRECISION_EPS_DEFAULT,
    REBALANCE_SAFE_COUNT_DEFAULT,
    RebalanceConfig,
    balanced_positions,
    fraction_to_position,
    is_strictly_increasing,
)

__all__ = [
    # Position Algebra: Exceptions
    "DegenerateRangeError",
    "NoPredecessorError",
    # Position Algebra: Functions
    "after",
    "before",
    "between",
    "first",
    # Rebalancer: Constants
    "DEFAULT_REBALANCE_CONFIG",
    "REBALANCE_MAX_LENGTH_DEFAULT",
    "REBALANCE_PRECISION_EPS_DEFAULT",
    "REBALANCE_SAFE_COUNT_DEFAULT",
    # Rebalancer: Types
    "RebalanceConfig",
    # Rebalancer: Functions
    "balanced_positions",
    "fraction_to_position",
    "is_strictly_increasing",
]
