"""
Alphabet & Codec — Base62 алфавит позиций

Фиксированный упорядоченный набор из 62 символов: 0-9, A-Z, a-z.
Порядок символов по raw-значению (code point) совпадает с порядком индексов,
поэтому обычное сравнение str даёт корректный порядок позиций.

Модуль обеспечивает:
- Неизменяемую таблицу символов (Alphabet) и специальные символы START/END/MID
- Конверсию symbol ↔ index
- Проверку строк на принадлежность алфавиту

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. index_of / symbol_at: биекция между 0..61 и символами алфавита
2. Пустая строка валидна и означает "нет границы" (unbounded)
3. MID фиксирован для deployment: смена MID ломает сохранённые позиции
"""

from dataclasses import dataclass, field
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

BASE62_SYMBOLS: Final[str] = (
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
)

# Индекс seed-позиции ('H'): ближе к началу, оставляет место для вставок перед ней
MID_INDEX_DEFAULT: Final[int] = 17


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidSymbolError(ValueError):
    """
    Строка содержит символ вне алфавита.

    Никогда не исправляется молча: вызывающий код получает первый
    невалидный символ и его смещение.
    """

    def __init__(self, value: str, symbol: str, offset: int):
        self.value = value
        self.symbol = symbol
        self.offset = offset
        super().__init__(
            f"Invalid position {value!r}: symbol {symbol!r} at offset {offset} "
            f"is not Base62 (0-9, A-Z, a-z)"
        )


# =============================================================================
# ALPHABET
# =============================================================================


@dataclass(frozen=True)
class Alphabet:
    """
    Неизменяемая таблица символов позиций.

    Attributes:
        symbols: Символы в порядке возрастания индекса
        mid_index: Индекс seed-символа MID
    """

    symbols: str = BASE62_SYMBOLS
    mid_index: int = MID_INDEX_DEFAULT
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError("Alphabet symbols must be distinct")
        if list(self.symbols) != sorted(self.symbols):
            raise ValueError("Alphabet symbols must be sorted by raw value")
        if not 0 < self.mid_index < len(self.symbols) - 1:
            raise ValueError(
                f"mid_index must be interior (0 < mid < {len(self.symbols) - 1}), "
                f"got {self.mid_index}"
            )
        object.__setattr__(
            self, "_index", {symbol: i for i, symbol in enumerate(self.symbols)}
        )

    @property
    def base(self) -> int:
        return len(self.symbols)

    @property
    def start_index(self) -> int:
        return 0

    @property
    def end_index(self) -> int:
        return len(self.symbols) - 1

    @property
    def start(self) -> str:
        """Минимальный символ (index 0)"""
        return self.symbols[0]

    @property
    def end(self) -> str:
        """Максимальный символ (index base-1)"""
        return self.symbols[-1]

    @property
    def mid(self) -> str:
        """Seed-символ для первой позиции"""
        return self.symbols[self.mid_index]

    def index_of(self, symbol: str) -> int | None:
        """
        Индекс символа в алфавите.

        Args:
            symbol: Один символ

        Returns:
            Индекс 0..base-1 или None, если символ не из алфавита

        Examples:
            >>> BASE62.index_of("A")
            10
            >>> BASE62.index_of("!") is None
            True
        """
        return self._index.get(symbol)

    def symbol_at(self, index: int) -> str | None:
        """
        Символ по индексу.

        Returns:
            Символ или None для индекса вне 0..base-1
        """
        if 0 <= index < len(self.symbols):
            return self.symbols[index]
        return None

    def is_valid(self, value: str) -> bool:
        """Все символы строки принадлежат алфавиту (пустая строка валидна)"""
        return all(symbol in self._index for symbol in value)

    def validate(self, value: str) -> str:
        """
        Валидация строки позиции.

        Args:
            value: Проверяемая строка (пустая строка допустима)

        Returns:
            value без изменений

        Raises:
            InvalidSymbolError: На первом символе вне алфавита
        """
        for offset, symbol in enumerate(value):
            if symbol not in self._index:
                raise InvalidSymbolError(value, symbol, offset)
        return value


# Глобальный экземпляр алфавита
BASE62: Final[Alphabet] = Alphabet()

BASE: Final[int] = BASE62.base
START_CHAR: Final[str] = BASE62.start
END_CHAR: Final[str] = BASE62.end
MID_CHAR: Final[str] = BASE62.mid


# =============================================================================
# CODEC (функции над глобальным алфавитом)
# =============================================================================


def index_of(symbol: str) -> int | None:
    """Индекс символа в BASE62 или None"""
    return BASE62.index_of(symbol)


def symbol_at(index: int) -> str | None:
    """Символ BASE62 по индексу или None"""
    return BASE62.symbol_at(index)


def is_valid(value: str) -> bool:
    """
    Проверка строки на Base62.

    Examples:
        >>> is_valid("abc123XYZ")
        True
        >>> is_valid("hello!")
        False
        >>> is_valid("")
        True
    """
    return BASE62.is_valid(value)


def validate_position(value: str) -> str:
    """
    Валидация строки позиции против BASE62.

    Raises:
        InvalidSymbolError: Если строка содержит символ вне алфавита
    """
    return BASE62.validate(value)
