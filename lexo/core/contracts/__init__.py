"""
Contract Validation Module

Модуль для валидации JSON контрактов lexo (позиции и планы rebalance).
"""

from .validators import (
    ContractValidator,
    RankValidator,
    RebalancePlanValidator,
    SchemaLoader,
    validate_rank,
    validate_rebalance_plan,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RankValidator",
    "RebalancePlanValidator",
    # Functions
    "validate_rank",
    "validate_rebalance_plan",
]
