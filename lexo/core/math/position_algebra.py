"""
Position Algebra — генерация позиций first / after / before / between

Чистые детерминированные функции над строками Base62.
Каждая операция минимизирует рост длины строки: при вставках в одном
направлении (типичный случай: добавление в конец списка) позиции
остаются короткими.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. after(p) > p для любой валидной p
2. before(p) < p для любой валидной p, кроме минимальной (только START)
3. before(START...START) → NoPredecessorError (жёсткая граница, без clamp)
4. a < between(a, b) < b при a < b и наличии места между ними
5. None / "" означает "нет границы" → результат MID

Позиции сравниваются обычным сравнением str: алфавит ASCII и упорядочен
по code point, поэтому порядок str совпадает с побайтовым.
"""

import logging

from lexo.core.alphabet import (
    BASE62,
    END_CHAR,
    MID_CHAR,
    START_CHAR,
    validate_position,
)

logger = logging.getLogger(__name__)

_START_INDEX = BASE62.start_index
_END_INDEX = BASE62.end_index


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NoPredecessorError(Exception):
    """
    Попытка получить позицию перед минимальной (строка только из START).

    Повтор не поможет: вызывающий код должен выбрать другую стратегию
    (например, сначала выполнить rebalance последовательности).
    """

    def __init__(self, position: str):
        self.position = position
        super().__init__(
            f"Cannot generate a position before {position!r}: "
            f"this is the minimum possible position"
        )


class DegenerateRangeError(ValueError):
    """between(a, b) в strict-режиме при a >= b"""

    def __init__(self, lower: str, upper: str):
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"Degenerate range: lower {lower!r} must sort before upper {upper!r}"
        )


# =============================================================================
# OPERATIONS
# =============================================================================


def first() -> str:
    """Seed-позиция для нового списка (MID)"""
    return MID_CHAR


def after(position: str | None) -> str:
    """
    Минимальная по длине позиция строго после position.

    Алгоритм:
    1. Сканируем символы справа налево
    2. Первый символ с индексом < END увеличиваем на 1, хвост отбрасываем
    3. Если все символы END, дописываем START ("z" → "z0")

    Args:
        position: Текущая позиция или None (нет границы)

    Returns:
        Новая позиция > position (MID для пустого входа)

    Raises:
        InvalidSymbolError: Если position содержит символ вне алфавита

    Examples:
        >>> after("A")
        'B'
        >>> after("Az")
        'B'
        >>> after("z")
        'z0'
    """
    if not position:
        return MID_CHAR
    validate_position(position)

    for i in range(len(position) - 1, -1, -1):
        idx = BASE62.index_of(position[i])
        if idx < _END_INDEX:
            return position[:i] + BASE62.symbol_at(idx + 1)

    # Все символы END: более длинная строка с position как префиксом больше неё
    return position + START_CHAR


def before(position: str | None) -> str:
    """
    Наибольшая позиция строго перед position с минимальным ростом длины.

    Алгоритм:
    1. Сканируем символы справа налево
    2. Первый символ с индексом > START уменьшаем на 1, хвост отбрасываем:
       - последний символ с запасом > 1 индекса: одного декремента достаточно
       - иначе после декремента дописываем END, оставляя место для вставок ниже
    3. Все символы START → NoPredecessorError

    Args:
        position: Текущая позиция или None (нет границы)

    Returns:
        Новая позиция < position (MID для пустого входа)

    Raises:
        InvalidSymbolError: Если position содержит символ вне алфавита
        NoPredecessorError: Если position состоит только из START

    Examples:
        >>> before("B")
        'A'
        >>> before("1")
        '0z'
        >>> before("A0")
        '9z'
    """
    if not position:
        return MID_CHAR
    validate_position(position)

    last = len(position) - 1
    for i in range(last, -1, -1):
        idx = BASE62.index_of(position[i])
        if idx > _START_INDEX:
            result = position[:i] + BASE62.symbol_at(idx - 1)
            if i == last and idx > _START_INDEX + 1:
                return result
            return result + END_CHAR

    raise NoPredecessorError(position)


def between(lower: str | None, upper: str | None, strict: bool = False) -> str:
    """
    Позиция строго между lower и upper.

    Сравниваем символы до большей длины; недостающий символ lower читается
    как START, недостающий символ upper читается как END:
    - равные символы копируются (включая START на месте недостающих
      символов lower)
    - первый индекс, где lower < upper:
        * разрыв > 1: середина разрыва, результат готов
        * соседние символы: символ lower, затем after(остаток lower)
          или MID, если lower закончился
    - различий нет (upper == lower + START...START): lower + MID,
      места между границами нет

    Политика при lower >= upper: возвращается after(lower) с warning в логе.
    strict=True вместо этого поднимает DegenerateRangeError.

    Args:
        lower: Нижняя граница или None
        upper: Верхняя граница или None
        strict: Запретить fallback при lower >= upper

    Returns:
        Новая позиция

    Raises:
        InvalidSymbolError: Если граница содержит символ вне алфавита
        NoPredecessorError: Если lower отсутствует, а upper минимальна
        DegenerateRangeError: strict=True и lower >= upper

    Examples:
        >>> between("A", "C")
        'B'
        >>> between("A", "B")
        'AH'
        >>> between(None, None)
        'H'
    """
    if not lower and not upper:
        return MID_CHAR
    if not lower:
        return before(upper)
    if not upper:
        return after(lower)

    validate_position(lower)
    validate_position(upper)

    if lower >= upper:
        if strict:
            raise DegenerateRangeError(lower, upper)
        logger.warning(
            f"between({lower!r}, {upper!r}): lower does not sort before upper, "
            f"falling back to after({lower!r})"
        )
        return after(lower)

    for i in range(max(len(lower), len(upper))):
        lo_char = lower[i] if i < len(lower) else START_CHAR
        hi_char = upper[i] if i < len(upper) else END_CHAR
        lo_idx = BASE62.index_of(lo_char)
        hi_idx = BASE62.index_of(hi_char)

        if lo_idx >= hi_idx:
            continue

        # Префикс берётся из дополненного lower: недостающие символы равны START
        prefix = lower[:i] + START_CHAR * max(0, i - len(lower))
        if hi_idx - lo_idx > 1:
            return prefix + BASE62.symbol_at((lo_idx + hi_idx) // 2)

        # Соседние символы: спускаемся на следующий разряд
        if i + 1 < len(lower):
            return prefix + lo_char + after(lower[i + 1 :])
        return prefix + lo_char + MID_CHAR

    return lower + MID_CHAR
