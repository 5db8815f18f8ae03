"""
JSON Schema Contracts — входные данные multi-send в виде plain dict

Путь от внешних данных (JSON, RPC payload) к доменным моделям:
1. Проверка против JSON Schema (форма, типы, знак сумм в ногах)
2. Model.model_validate (инварианты модели: уникальные деноминации и т.п.)

Любое нарушение на любом шаге поднимает ContractViolation со списком
всех найденных ошибок (путь в документе + сообщение).

Схемы (поставляются вместе с пакетом, contracts/schema/):
- balance.json
- denom_definition.json
- multi_send.json
"""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel, ValidationError

from multisend.core.domain import Balance, DenomDefinition, MultiSend

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ContractViolation(ValueError):
    """Данные не соответствуют контракту (схеме или инвариантам модели)."""

    reason = "contract_violation"

    def __init__(self, contract: str, errors: list[str]):
        self.contract = contract
        self.errors = errors
        super().__init__(f"{contract} contract violated: " + "; ".join(errors))


def _location(path: Iterable[Any]) -> str:
    """Путь в документе: inputs[0].coins[1].amount"""
    location = ""
    for part in path:
        location += f"[{part}]" if isinstance(part, int) else f".{part}"
    return location.lstrip(".") or "<root>"


# =============================================================================
# CONTRACT
# =============================================================================


class Contract:
    """
    Контракт одной модели: JSON Schema + Pydantic модель.

    Схема читается и проверяется (meta-validation) при создании.
    """

    def __init__(self, name: str, model: type[BaseModel], schema_dir: Path | None = None):
        schema_path = (schema_dir or SCHEMA_DIR) / f"{name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {name}.json: {e}") from e

        self.name = name
        self.model = model
        self.schema = schema
        self._validator = Draft202012Validator(schema)

    def errors(self, data: Any) -> list[str]:
        """
        Все нарушения схемы (пустой список, если данные валидны).

        Порядок детерминирован: по пути в документе.
        """
        found = sorted(
            self._validator.iter_errors(data),
            key=lambda e: [str(part) for part in e.absolute_path],
        )
        return [f"{_location(e.absolute_path)}: {e.message}" for e in found]

    def load(self, data: Any) -> BaseModel:
        """
        Проверка схемы и построение модели.

        Raises:
            ContractViolation: Нарушение схемы или инвариантов модели
        """
        schema_errors = self.errors(data)
        if schema_errors:
            raise ContractViolation(self.name, schema_errors)

        try:
            return self.model.model_validate(data)
        except ValidationError as e:
            raise ContractViolation(
                self.name,
                [f"{_location(err['loc'])}: {err['msg']}" for err in e.errors()],
            ) from e


BALANCE = Contract("balance", Balance)
DENOM_DEFINITION = Contract("denom_definition", DenomDefinition)
MULTI_SEND = Contract("multi_send", MultiSend)


# =============================================================================
# LOADERS
# =============================================================================


def load_balances(items: Iterable[Any]) -> list[Balance]:
    """
    Снапшот балансов из списка dict.

    Raises:
        ContractViolation: Первый невалидный элемент
    """
    return [BALANCE.load(item) for item in items]


def load_definitions(items: Iterable[Any]) -> list[DenomDefinition]:
    """
    Определения деноминаций из списка dict.

    Ставки-строки ("0.08") сохраняют точное десятичное значение.

    Raises:
        ContractViolation: Первый невалидный элемент
    """
    return [DENOM_DEFINITION.load(item) for item in items]


def load_multi_send(data: Any) -> MultiSend:
    """
    Транзакция multi-send из dict.

    Raises:
        ContractViolation: Нарушение схемы или инвариантов модели
    """
    return MULTI_SEND.load(data)
