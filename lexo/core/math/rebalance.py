"""
Rebalancer — равномерное перераспределение N позиций

Восстановление после многократных вставок между соседями, когда позиции
стали длинными. Генерирует N коротких строго возрастающих позиций,
равномерно распределённых по пространству порядка.

Вызывающий код берёт текущую упорядоченную (по существующим значениям)
последовательность из N позиций и заменяет i-ю позицию на i-й элемент
balanced_positions(N): относительный порядок сохраняется.

ФОРМУЛА:
    fraction_i = (i + 0.5) / N,   i = 0..N-1
    position_i = base62-разложение fraction_i (до max_length символов)

ТОЧНОСТЬ:
    max_length ограничивает длину позиции, precision_eps задаёт порог остатка,
    после которого разложение обрывается. При значениях по умолчанию
    (6 символов, 1e-4) последовательности до REBALANCE_SAFE_COUNT_DEFAULT
    элементов гарантированно строго возрастают. Для больших N нужно
    увеличить max_length или уменьшить precision_eps.
"""

import math
from dataclasses import dataclass
from typing import Final, Sequence

from lexo.core.alphabet import BASE, BASE62, END_CHAR, MID_CHAR, START_CHAR

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальная длина позиции при rebalance
REBALANCE_MAX_LENGTH_DEFAULT: Final[int] = 6

# Порог остатка разложения (в единицах текущего разряда)
REBALANCE_PRECISION_EPS_DEFAULT: Final[float] = 1e-4

# Документированный безопасный размер последовательности для значений по умолчанию
REBALANCE_SAFE_COUNT_DEFAULT: Final[int] = 10_000


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RebalanceConfig:
    """Конфигурация base62-разложения при rebalance.

    Безопасный диапазон: N <= REBALANCE_SAFE_COUNT_DEFAULT для значений
    по умолчанию.
    """

    max_length: int = REBALANCE_MAX_LENGTH_DEFAULT
    precision_eps: float = REBALANCE_PRECISION_EPS_DEFAULT

    def __post_init__(self):
        if self.max_length < 1:
            raise ValueError(f"max_length must be >= 1, got {self.max_length}")
        if not 0.0 < self.precision_eps < 1.0:
            raise ValueError(
                f"precision_eps must be in (0, 1), got {self.precision_eps}"
            )


DEFAULT_REBALANCE_CONFIG: Final[RebalanceConfig] = RebalanceConfig()


# =============================================================================
# FRACTION → POSITION
# =============================================================================


def fraction_to_position(
    fraction: float,
    config: RebalanceConfig | None = None,
) -> str:
    """
    Конверсия доли (0..1) в позицию минимальной длины.

    Разложение по основанию 62: умножаем на 62, целая часть даёт индекс
    очередного символа, вычитаем её и продолжаем. Останавливаемся после
    max_length символов или когда остаток меньше precision_eps.

    Args:
        fraction: Доля в диапазоне (0, 1)
        config: Параметры точности (default: DEFAULT_REBALANCE_CONFIG)

    Returns:
        Позиция; START для fraction <= 0, END для fraction >= 1

    Raises:
        ValueError: Если fraction NaN

    Examples:
        >>> fraction_to_position(0.5)
        'V'
        >>> fraction_to_position(0.0)
        '0'
    """
    if math.isnan(fraction):
        raise ValueError("fraction must not be NaN")
    if fraction <= 0.0:
        return START_CHAR
    if fraction >= 1.0:
        return END_CHAR

    config = config or DEFAULT_REBALANCE_CONFIG

    symbols = []
    remaining = fraction
    for _ in range(config.max_length):
        remaining *= BASE
        idx = min(math.floor(remaining), BASE - 1)
        symbols.append(BASE62.symbol_at(idx))
        remaining -= idx

        if remaining < config.precision_eps:
            break

    return "".join(symbols)


# =============================================================================
# BALANCED POSITIONS
# =============================================================================


def balanced_positions(
    count: int,
    config: RebalanceConfig | None = None,
) -> list[str]:
    """
    N строго возрастающих позиций, равномерно распределённых по (0, 1).

    Args:
        count: Количество позиций (>= 0)
        config: Параметры точности (default: DEFAULT_REBALANCE_CONFIG)

    Returns:
        [] для count == 0, [MID] для count == 1, иначе fraction_to_position
        для (i + 0.5) / count

    Raises:
        ValueError: Если count < 0

    Examples:
        >>> balanced_positions(1)
        ['H']
        >>> balanced_positions(2)
        ['FV', 'kV']
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count == 0:
        return []
    if count == 1:
        return [MID_CHAR]

    return [fraction_to_position((i + 0.5) / count, config) for i in range(count)]


def is_strictly_increasing(positions: Sequence[str]) -> bool:
    """Каждая позиция строго больше предыдущей"""
    return all(a < b for a, b in zip(positions, positions[1:]))
