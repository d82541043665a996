"""
Тесты для модуля Position Algebra

Проверяет:
1. after / before: минимальный рост длины и строгий порядок
2. between: середина разрыва, соседние символы, префиксы
3. Пустые границы (None / "") → MID
4. Жёсткую границу before(START...) → NoPredecessorError
5. Fallback политику between при lower >= upper
6. Последовательности вставок
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import product

import pytest

from lexo.core.alphabet import END_CHAR, MID_CHAR, START_CHAR, InvalidSymbolError
from lexo.core.math.position_algebra import (
    DegenerateRangeError,
    NoPredecessorError,
    after,
    before,
    between,
    first,
)

SAMPLE_POSITIONS = ["1", "9", "A", "H", "Z", "a", "y", "z", "zz", "A0", "Az", "H0z", "10", "0z", "0001"]


# =============================================================================
# FIRST
# =============================================================================


class TestFirst:
    """Тесты для first"""

    def test_first_is_mid(self) -> None:
        assert first() == MID_CHAR == "H"

    def test_first_is_deterministic(self) -> None:
        assert first() == first()


# =============================================================================
# AFTER
# =============================================================================


class TestAfter:
    """Тесты для after"""

    def test_minimal_increment(self) -> None:
        """Один шаг индекса без роста длины"""
        assert after("A") == "B"
        assert after("0") == "1"
        assert after("Z") == "a"
        assert after("H") == "I"

    def test_overflow_appends_start(self) -> None:
        """Все символы END → дописываем START"""
        assert after("z") == "z" + START_CHAR == "z0"
        assert after("zz") == "zz0"

    def test_truncates_after_incremented_symbol(self) -> None:
        assert after("Az") == "B"
        assert after("H5z") == "H6"
        assert after("Azz") == "B"

    def test_empty_returns_mid(self) -> None:
        assert after("") == MID_CHAR
        assert after(None) == MID_CHAR

    @pytest.mark.parametrize("position", SAMPLE_POSITIONS)
    def test_result_strictly_greater(self, position: str) -> None:
        assert after(position) > position

    def test_invalid_symbol_raises(self) -> None:
        with pytest.raises(InvalidSymbolError):
            after("A!")


# =============================================================================
# BEFORE
# =============================================================================


class TestBefore:
    """Тесты для before"""

    def test_minimal_decrement(self) -> None:
        assert before("B") == "A"
        assert before("Z") == "Y"
        assert before("a") == "Z"
        assert before("2") == "1"

    def test_decrement_to_start_appends_end(self) -> None:
        """Последний символ с запасом в 1 индекс → декремент + END"""
        assert before("1") == "0" + END_CHAR == "0z"
        assert before("01") == "00z"

    def test_trailing_starts_are_dropped(self) -> None:
        """Символ не последний → декремент + END"""
        assert before("A0") == "9z"
        assert before("10") == "0z"

    def test_empty_returns_mid(self) -> None:
        assert before("") == MID_CHAR
        assert before(None) == MID_CHAR

    @pytest.mark.parametrize("position", SAMPLE_POSITIONS)
    def test_result_strictly_less(self, position: str) -> None:
        assert before(position) < position

    @pytest.mark.parametrize("position", ["0", "00", "000"])
    def test_minimum_position_raises(self, position: str) -> None:
        """Позиция только из START минимальна, предшественника нет"""
        with pytest.raises(NoPredecessorError, match="Cannot generate a position before") as exc_info:
            before(position)
        assert exc_info.value.position == position

    def test_invalid_symbol_raises(self) -> None:
        with pytest.raises(InvalidSymbolError):
            before("-")

    def test_before_after_not_inverse(self) -> None:
        """before(after(p)) != p в общем случае (асимметричный рост)"""
        assert before(after("1")) == "1"
        assert before(after("Az")) != "Az"


# =============================================================================
# BETWEEN
# =============================================================================


class TestBetween:
    """Тесты для between"""

    def test_midpoint_of_gap(self) -> None:
        assert between("A", "C") == "B"
        assert between("0", "z") == "U"

    def test_adjacent_symbols_descend(self) -> None:
        """Соседние символы → результат длиннее одного символа"""
        result = between("A", "B")
        assert "A" < result < "B"
        assert len(result) > 1
        assert result == "A" + MID_CHAR

        assert between("Z", "a") == "ZH"
        assert between("0", "1") == "0H"

    def test_adjacent_with_lower_suffix(self) -> None:
        """Остаток lower увеличивается через after"""
        assert between("Az", "B") == "Az0"
        assert between("A5", "B") == "A6"

    def test_common_prefix(self) -> None:
        assert between("AB", "AC") == "ABH"
        assert between("A0", "A1") == "A0H"

    def test_different_lengths(self) -> None:
        """Недостающий символ lower читается как START"""
        assert between("A", "AA") == "A5"
        assert between("z", "z1") == "z0H"

    def test_unbounded_sides(self) -> None:
        assert between(None, None) == MID_CHAR
        assert between("", "") == MID_CHAR
        assert between("H", None) == after("H")
        assert between(None, "H") == before("H")

    def test_unbounded_lower_at_minimum_raises(self) -> None:
        with pytest.raises(NoPredecessorError):
            between(None, "0")

    @pytest.mark.parametrize(
        "lower, upper",
        [
            ("0", "z"),
            ("0", "1"),
            ("A", "B"),
            ("Z", "a"),
            ("AB", "AC"),
            ("A0", "A1"),
            ("z", "z1"),
            ("A", "AA"),
            ("Az", "B"),
            ("H", "Hz"),
            ("yz", "z"),
            ("0z", "1"),
            ("A", "A01"),
            ("A", "A0z"),
            ("H", "H00z"),
            ("z", "z05"),
            ("A", before("A1")),
        ],
    )
    def test_result_strictly_between(self, lower: str, upper: str) -> None:
        result = between(lower, upper)
        assert lower < result < upper

    def test_padded_prefix_keeps_start_symbols(self) -> None:
        """Недостающие символы lower копируются как START"""
        assert between("A", "A0z") == "A0U"
        assert between("A", "A01") == "A00H"
        assert between("z", "z05") == "z02"
        assert between("H", "H00z") == "H00U"

    def test_no_headroom_returns_lower_plus_mid(self) -> None:
        """upper == lower + START...START: места между границами нет"""
        assert between("A", "A0") == "AH"
        assert between("A", "A00") == "AH"

    def test_generated_pairs_strictly_between(self) -> None:
        """Все пары строк длины <= 3 над небольшим алфавитом"""
        positions = sorted(
            "".join(symbols)
            for length in range(1, 4)
            for symbols in product("01yzAH", repeat=length)
        )

        failures = []
        for lower, upper in product(positions, repeat=2):
            if lower >= upper:
                continue
            tail = upper[len(lower) :]
            if upper.startswith(lower) and tail == START_CHAR * len(tail):
                continue
            result = between(lower, upper)
            if not lower < result < upper:
                failures.append((lower, upper, result))

        assert failures == []

    def test_invalid_order_falls_back_to_after(self, caplog: pytest.LogCaptureFixture) -> None:
        """lower >= upper → after(lower) + warning"""
        with caplog.at_level(logging.WARNING, logger="lexo.core.math.position_algebra"):
            assert between("z", "0") == after("z")
            assert between("H", "H") == "I"

        assert "falling back" in caplog.text

    def test_strict_mode_raises(self) -> None:
        with pytest.raises(DegenerateRangeError, match="must sort before"):
            between("z", "0", strict=True)
        with pytest.raises(DegenerateRangeError):
            between("H", "H", strict=True)

    def test_strict_mode_normal_range(self) -> None:
        assert between("A", "C", strict=True) == "B"

    def test_invalid_symbol_raises(self) -> None:
        with pytest.raises(InvalidSymbolError):
            between("A", "C!")
        with pytest.raises(InvalidSymbolError):
            between("A!", "C")


# =============================================================================
# ПОСЛЕДОВАТЕЛЬНОСТИ ВСТАВОК
# =============================================================================


class TestInsertionSequences:
    """Сценарии многократных вставок"""

    def test_append_stability(self) -> None:
        """100 последовательных after от first() строго возрастают"""
        positions = [first()]
        for _ in range(100):
            positions.append(after(positions[-1]))

        for a, b in zip(positions, positions[1:]):
            assert a < b

    def test_append_keeps_ranks_short(self) -> None:
        second = after(first())
        third = after(second)
        assert len(second) <= 2
        assert len(third) <= 2

    def test_prepend_stability(self) -> None:
        """Вставки в начало строго убывают до минимума"""
        positions = [first()]
        for _ in range(50):
            positions.append(before(positions[-1]))

        for a, b in zip(positions, positions[1:]):
            assert a > b

    def test_deep_insertion(self) -> None:
        """Повторные вставки перед одним и тем же соседом"""
        positions = ["0", "1"]
        for _ in range(20):
            mid = between(positions[0], positions[1])
            assert positions[0] < mid < positions[1]
            positions.insert(1, mid)

    def test_insert_between_neighbours(self) -> None:
        first_pos = first()
        third = after(first_pos)
        second = between(first_pos, third)
        assert first_pos < second < third

    def test_concurrent_calls_are_deterministic(self) -> None:
        """Чистые функции: одинаковый результат из разных потоков"""
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda _: between("A", "B"), range(32)))
        assert set(results) == {"AH"}
