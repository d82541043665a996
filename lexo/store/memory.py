"""
InMemoryPositionStore — эталонная реализация PositionStore на dict

Используется в тестах и как образец для настоящих хранилищ.
group_key=None адресует всю "таблицу" целиком.
"""

import threading
from typing import Mapping

from lexo.core.domain.rank import Rank
from lexo.store.position_store import RowId


class InMemoryPositionStore:
    """
    Хранилище позиций в памяти.

    Каждый вызов выполняется под lock, но составные операции
    (next_rank, затем insert) не атомарны.
    """

    def __init__(self):
        self._rows: dict[RowId, tuple[str | None, Rank]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._rows)

    def insert(self, row_id: RowId, rank: Rank, group_key: str | None = None) -> None:
        """
        Добавление строки.

        Raises:
            KeyError: Если row_id уже существует
        """
        with self._lock:
            if row_id in self._rows:
                raise KeyError(f"Row {row_id!r} already exists")
            self._rows[row_id] = (group_key, rank)

    def rank_of(self, row_id: RowId) -> Rank:
        """Текущий Rank строки (KeyError для неизвестной строки)"""
        with self._lock:
            return self._rows[row_id][1]

    def _select(self, group_key: str | None) -> list[tuple[RowId, Rank]]:
        return [
            (row_id, rank)
            for row_id, (key, rank) in self._rows.items()
            if group_key is None or key == group_key
        ]

    def max_rank(self, group_key: str | None = None) -> Rank | None:
        with self._lock:
            ranks = [rank for _, rank in self._select(group_key)]
        return max(ranks) if ranks else None

    def ordered_rows(self, group_key: str | None = None) -> list[tuple[RowId, Rank]]:
        with self._lock:
            rows = self._select(group_key)
        # Стабильная сортировка: совпавшие Rank остаются в порядке вставки
        return sorted(rows, key=lambda row: row[1].value)

    def assign(self, assignments: Mapping[RowId, Rank]) -> None:
        """
        Запись новых Rank.

        Raises:
            KeyError: Если хотя бы одна строка неизвестна (ничего не записывается)
        """
        with self._lock:
            missing = [row_id for row_id in assignments if row_id not in self._rows]
            if missing:
                raise KeyError(f"Unknown rows: {missing!r}")
            for row_id, rank in assignments.items():
                group_key, _ = self._rows[row_id]
                self._rows[row_id] = (group_key, rank)
