"""
JSON Schema Contract Validators

Проверка JSON-представлений позиций и планов rebalance перед тем, как
они покидают ядро (запись в хранилище, аудит, передача по сети).

Схемы (lexo/core/contracts/schema/):
- rank.json: одна позиция Base62
- rebalance_plan.json: план замены позиций одной последовательности
"""

import json
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: dict[str, dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'rank')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Схема загружается один раз через общий SchemaLoader.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


class RankValidator(ContractValidator):
    """Валидатор для rank контракта"""

    def __init__(self):
        super().__init__("rank")


class RebalancePlanValidator(ContractValidator):
    """Валидатор для rebalance_plan контракта"""

    def __init__(self):
        super().__init__("rebalance_plan")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_rank(data: Any) -> None:
    """
    Валидация позиции как JSON значения.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RankValidator().validate(data)


def validate_rebalance_plan(data: dict[str, Any]) -> None:
    """
    Валидация payload плана rebalance.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RebalancePlanValidator().validate(data)
