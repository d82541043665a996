"""
Rank — Модель позиции в упорядоченном списке

Immutable Pydantic модель, оборачивающая валидированную строку Base62.
Используется как sort key: равенство и порядок полностью делегируются
сравнению строк.

Политика пустого значения: пустой Rank запрещён. Отсутствие границы
("нет позиции") выражается через None, а не через пустую строку.
"""

from pydantic import BaseModel, Field, field_validator

from lexo.core.alphabet import MID_CHAR, validate_position


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EmptyRankError(ValueError):
    """Пустая строка не является допустимым Rank"""

    def __init__(self):
        super().__init__("Rank value must not be empty (use None for 'no bound')")


# =============================================================================
# RANK MODEL
# =============================================================================


class Rank(BaseModel):
    """
    Валидированная позиция.

    Immutable модель (frozen=True): перемещение элемента всегда создаёт
    новый Rank, старый просто отбрасывается.
    """

    value: str = Field(..., min_length=1, description="Позиция Base62 (0-9, A-Z, a-z)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("value")
    @classmethod
    def validate_base62(cls, v: str) -> str:
        """Каждый символ должен принадлежать алфавиту Base62"""
        return validate_position(v)

    @classmethod
    def parse(cls, value: str) -> "Rank":
        """
        Создание Rank с ошибками домена вместо pydantic ValidationError.

        Args:
            value: Строка позиции

        Returns:
            Новый Rank

        Raises:
            EmptyRankError: Если value пустая
            InvalidSymbolError: Если value содержит символ вне алфавита
        """
        if not value:
            raise EmptyRankError()
        validate_position(value)
        return cls(value=value)

    @classmethod
    def first(cls) -> "Rank":
        """Seed-позиция для нового списка"""
        return cls(value=MID_CHAR)

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value >= other.value
