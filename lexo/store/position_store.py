"""
Position Store — граница хранилища позиций

Хранилище (таблица/колонка с позициями) является внешним компонентом. Ядро lexo
видит его только через этот протокол:
- текущий максимум последовательности (для добавления в конец)
- все строки последовательности в текущем порядке (для rebalance)
- запись новых позиций по идентификатору строки

Сериализация read-then-write (row-level lock, serializable транзакция)
обеспечивает реализация хранилища, а не ядро.
"""

from typing import Hashable, Mapping, Protocol, Sequence, runtime_checkable

from lexo.core.domain.rank import Rank

RowId = Hashable


@runtime_checkable
class PositionStore(Protocol):
    """Протокол хранилища позиций"""

    def max_rank(self, group_key: str | None = None) -> Rank | None:
        """Максимальный Rank последовательности (None, если последовательность пуста)"""
        ...

    def ordered_rows(
        self, group_key: str | None = None
    ) -> Sequence[tuple[RowId, Rank]]:
        """Все строки последовательности, упорядоченные по текущему Rank"""
        ...

    def assign(self, assignments: Mapping[RowId, Rank]) -> None:
        """Запись новых Rank по идентификатору строки"""
        ...
