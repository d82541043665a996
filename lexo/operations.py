"""
Rank operations — типизированный фасад над алгеброй позиций

Те же операции, что в lexo.core.math, но над Rank вместо str.
None означает "нет границы" (начало или конец списка).
"""

from lexo.core.domain.rank import Rank
from lexo.core.math import position_algebra
from lexo.core.math.rebalance import RebalanceConfig, balanced_positions


def _value(rank: Rank | None) -> str | None:
    return rank.value if rank is not None else None


def first() -> Rank:
    """Seed-позиция для нового списка"""
    return Rank.first()


def after(rank: Rank | None) -> Rank:
    """Rank строго после rank (first() если rank is None)"""
    return Rank(value=position_algebra.after(_value(rank)))


def before(rank: Rank | None) -> Rank:
    """
    Rank строго перед rank (first() если rank is None).

    Raises:
        NoPredecessorError: Если rank является минимальной позицией
    """
    return Rank(value=position_algebra.before(_value(rank)))


def between(lower: Rank | None, upper: Rank | None, strict: bool = False) -> Rank:
    """
    Rank между lower и upper.

    Args:
        lower: Предыдущий элемент (None: вставка в начало)
        upper: Следующий элемент (None: вставка в конец)
        strict: Поднимать DegenerateRangeError при lower >= upper
            вместо fallback на after(lower)

    Examples:
        >>> between(Rank(value="A"), Rank(value="C")).value
        'B'
        >>> between(None, None).value
        'H'
    """
    return Rank(
        value=position_algebra.between(_value(lower), _value(upper), strict=strict)
    )


def balanced_ranks(count: int, config: RebalanceConfig | None = None) -> list[Rank]:
    """count равномерно распределённых Rank в порядке возрастания"""
    return [Rank(value=v) for v in balanced_positions(count, config)]
