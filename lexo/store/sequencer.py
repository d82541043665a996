"""
Position Sequencer — выдача позиций и rebalance поверх PositionStore

Операции:
- next_rank: позиция после текущего максимума последовательности
  (first() для пустой последовательности)
- plan_rebalance: план замены всех позиций последовательности на
  balanced_positions(N) с сохранением текущего порядка
- rebalance: план + проверка контракта + запись в хранилище

Sequencer не координирует конкурентные записи: вызывающий код держит
стабильный snapshot последовательности (транзакцию) на время rebalance.
"""

import logging
from dataclasses import dataclass
from typing import Any

from lexo.core.contracts import validate_rebalance_plan
from lexo.core.domain.rank import Rank
from lexo.core.math.rebalance import (
    DEFAULT_REBALANCE_CONFIG,
    RebalanceConfig,
    balanced_positions,
    is_strictly_increasing,
)
from lexo.operations import after, first
from lexo.store.position_store import PositionStore, RowId

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RebalanceCollisionError(RuntimeError):
    """
    Сгенерированные позиции не строго возрастают.

    Возникает, когда точность RebalanceConfig недостаточна для размера
    последовательности. План не записывается.
    """

    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SequencerConfig:
    """Конфигурация PositionSequencer."""

    # Проверять payload плана против rebalance_plan.json перед записью
    validate_plans: bool = True

    rebalance: RebalanceConfig = DEFAULT_REBALANCE_CONFIG


# =============================================================================
# RESULTS
# =============================================================================


def _payload_row_id(row_id: RowId) -> str | int:
    """row_id в JSON-форме контракта: str и int как есть, остальное через str()"""
    if isinstance(row_id, (str, int)) and not isinstance(row_id, bool):
        return row_id
    return str(row_id)


@dataclass(frozen=True)
class RankAssignment:
    """Замена позиции одной строки."""

    row_id: RowId
    old_rank: Rank
    new_rank: Rank

    @property
    def changed(self) -> bool:
        return self.old_rank != self.new_rank


@dataclass(frozen=True)
class RebalancePlan:
    """План rebalance последовательности (в текущем порядке строк)."""

    group_key: str | None
    assignments: tuple[RankAssignment, ...]

    @property
    def count(self) -> int:
        return len(self.assignments)

    def as_mapping(self) -> dict[RowId, Rank]:
        """row_id → новый Rank, в форме для PositionStore.assign"""
        return {a.row_id: a.new_rank for a in self.assignments}

    def to_payload(self) -> dict[str, Any]:
        """
        JSON-совместимое представление (контракт rebalance_plan).

        row_id, не являющиеся str или int (UUID, tuple), сериализуются
        через str(); as_mapping() сохраняет исходные row_id.
        """
        return {
            "group_key": self.group_key,
            "count": self.count,
            "assignments": [
                {
                    "row_id": _payload_row_id(a.row_id),
                    "old_rank": a.old_rank.value,
                    "new_rank": a.new_rank.value,
                }
                for a in self.assignments
            ],
        }


@dataclass(frozen=True)
class RebalanceResult:
    """Результат rebalance."""

    count: int  # Строк в последовательности
    changed: int  # Строк, чей Rank действительно изменился
    plan: RebalancePlan


# =============================================================================
# SEQUENCER
# =============================================================================


class PositionSequencer:
    """Выдача позиций и rebalance для последовательностей одного хранилища.

    Порядок rebalance:
    1. Чтение строк последовательности в текущем порядке
    2. balanced_positions(N) и проверка строгого возрастания
    3. Проверка payload против контракта (если validate_plans)
    4. Запись через PositionStore.assign
    """

    def __init__(self, store: PositionStore, config: SequencerConfig | None = None):
        self.store = store
        self.config = config or SequencerConfig()

    def next_rank(self, group_key: str | None = None) -> Rank:
        """
        Rank для добавления в конец последовательности.

        Returns:
            after(max) или first() для пустой последовательности
        """
        current_max = self.store.max_rank(group_key)
        if current_max is None:
            rank = first()
        else:
            rank = after(current_max)
        logger.debug(f"next_rank(group_key={group_key!r}): {current_max} -> {rank}")
        return rank

    def plan_rebalance(self, group_key: str | None = None) -> RebalancePlan:
        """
        План замены позиций последовательности.

        Raises:
            RebalanceCollisionError: Если новые позиции не строго возрастают
        """
        rows = list(self.store.ordered_rows(group_key))
        positions = balanced_positions(len(rows), self.config.rebalance)

        if not is_strictly_increasing(positions):
            raise RebalanceCollisionError(
                f"Balanced positions for {len(rows)} rows are not strictly increasing "
                f"with {self.config.rebalance}; increase max_length or lower precision_eps"
            )

        assignments = tuple(
            RankAssignment(row_id=row_id, old_rank=old_rank, new_rank=Rank(value=position))
            for (row_id, old_rank), position in zip(rows, positions)
        )
        return RebalancePlan(group_key=group_key, assignments=assignments)

    def rebalance(self, group_key: str | None = None) -> RebalanceResult:
        """
        Rebalance последовательности с записью в хранилище.

        Returns:
            RebalanceResult (count == 0 для пустой последовательности,
            хранилище в этом случае не вызывается)

        Raises:
            RebalanceCollisionError: Если новые позиции не строго возрастают
            ValidationError: Если payload плана нарушает контракт
        """
        plan = self.plan_rebalance(group_key)
        if plan.count == 0:
            return RebalanceResult(count=0, changed=0, plan=plan)

        if self.config.validate_plans:
            validate_rebalance_plan(plan.to_payload())

        self.store.assign(plan.as_mapping())

        changed = sum(1 for a in plan.assignments if a.changed)
        logger.info(
            f"Rebalanced {plan.count} rows (group_key={group_key!r}, changed={changed})"
        )
        return RebalanceResult(count=plan.count, changed=changed, plan=plan)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def next_rank(
    store: PositionStore,
    group_key: str | None = None,
    config: SequencerConfig | None = None,
) -> Rank:
    """Rank после текущего максимума последовательности"""
    return PositionSequencer(store, config).next_rank(group_key)


def plan_rebalance(
    store: PositionStore,
    group_key: str | None = None,
    config: SequencerConfig | None = None,
) -> RebalancePlan:
    """План rebalance без записи"""
    return PositionSequencer(store, config).plan_rebalance(group_key)


def rebalance(
    store: PositionStore,
    group_key: str | None = None,
    config: SequencerConfig | None = None,
) -> RebalanceResult:
    """Rebalance последовательности с записью в хранилище"""
    return PositionSequencer(store, config).rebalance(group_key)
