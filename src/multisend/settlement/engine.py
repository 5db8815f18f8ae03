"""Settlement Engine — расчёт нетто-изменений балансов одного multi-send

Стадии выполняются строго последовательно:
1. Index Builder: индексы балансов, определений, свёрнутых ног
2. Fee Apportioner: проекция долей burn/commission (нужна валидатору)
3. Validator: определения, балансы с учётом комиссий, равенство сумм
4. Delta Accumulator: нетто-дельты на (address, denom)

Расчёт чистый: нет I/O, нет разделяемого состояния, индексы локальны
для вызова. Одинаковые входы дают одинаковый результат или одинаковую ошибку.

Две поверхности:
- calculate_balance_changes(): возвращает список BalanceChange или
  поднимает MultiSendError
- MultiSendSettlement.evaluate(): всегда возвращает SettlementResult
  (accepted / reject_reason), ошибка не поднимается
- MultiSendSettlement.evaluate_payload(): то же для plain dict,
  с проверкой контрактов до расчёта
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from multisend.core.contracts import (
    ContractViolation,
    load_balances,
    load_definitions,
    load_multi_send,
)
from multisend.core.domain import Balance, BalanceChange, DenomDefinition, MultiSend
from multisend.settlement.accumulator import accumulate_deltas
from multisend.settlement.errors import MultiSendError
from multisend.settlement.fees import FeePlan, plan_fees
from multisend.settlement.index import (
    aggregate_legs,
    build_balance_index,
    build_definition_index,
    by_denom,
    denom_totals,
)
from multisend.settlement.validator import check_senders, check_sums

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SettlementConfig:
    """Конфигурация расчёта.

    include_fees_in_balance_check=False воспроизводит упрощённую проверку
    баланса только по сумме перевода (без комиссий).
    """

    include_fees_in_balance_check: bool = True
    omit_zero_deltas: bool = True


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class SettlementResult:
    """Результат расчёта multi-send."""

    accepted: bool
    reject_reason: str

    error: MultiSendError | ContractViolation | None
    balance_changes: tuple[BalanceChange, ...] = ()
    fee_plans: Mapping[str, FeePlan] = field(
        default_factory=lambda: MappingProxyType({})
    )

    # Детали
    details: str = ""

    @property
    def burned(self) -> dict[str, int]:
        """Сожжённые суммы по деноминациям."""
        return {denom: plan.burned for denom, plan in self.fee_plans.items()}

    @property
    def commission(self) -> dict[str, int]:
        """Комиссии эмитентам по деноминациям."""
        return {denom: plan.commission for denom, plan in self.fee_plans.items()}


# =============================================================================
# ENGINE
# =============================================================================


class MultiSendSettlement:
    """Расчёт multi-send с комиссиями деноминаций.

    Stateless: конфигурация неизменяема, индексы строятся на каждый вызов.
    """

    def __init__(self, config: SettlementConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or SettlementConfig()

    def settle(
        self,
        original_balances: Sequence[Balance],
        definitions: Sequence[DenomDefinition],
        multi_send: MultiSend,
    ) -> tuple[list[BalanceChange], dict[str, FeePlan]]:
        """Расчёт с планами комиссий.

        Returns:
            (изменения балансов, планы комиссий по деноминациям)

        Raises:
            UnknownDenomination, InsufficientBalance, MismatchedSumForDenom
        """
        # 1. Индексы
        balance_index = build_balance_index(original_balances)
        definition_index = build_definition_index(definitions)
        inputs = aggregate_legs(multi_send.inputs)
        outputs = aggregate_legs(multi_send.outputs)

        # 2. Проекция комиссий
        fee_plans = plan_fees(by_denom(inputs), by_denom(outputs), definition_index)

        # 3. Валидация
        check_senders(
            balance_index,
            definition_index,
            inputs,
            fee_plans,
            include_fees=self.config.include_fees_in_balance_check,
        )
        check_sums(multi_send.denoms(), denom_totals(inputs), denom_totals(outputs))

        # 4. Нетто-дельты
        changes = accumulate_deltas(
            inputs, outputs, fee_plans, omit_zero=self.config.omit_zero_deltas
        )
        return changes, fee_plans

    def evaluate(
        self,
        original_balances: Sequence[Balance],
        definitions: Sequence[DenomDefinition],
        multi_send: MultiSend,
    ) -> SettlementResult:
        """Оценка multi-send без исключений.

        Returns:
            SettlementResult: accepted=True с изменениями балансов
            или accepted=False с причиной отклонения
        """
        try:
            changes, fee_plans = self.settle(original_balances, definitions, multi_send)
        except MultiSendError as e:
            return self._rejected(e)

        burned = sum(plan.burned for plan in fee_plans.values())
        commission = sum(plan.commission for plan in fee_plans.values())
        logger.info(
            "Multi-send accepted: %d balance changes, %d denoms, burned=%d, commission=%d",
            len(changes),
            len(fee_plans),
            burned,
            commission,
        )
        return SettlementResult(
            accepted=True,
            reject_reason="",
            error=None,
            balance_changes=tuple(changes),
            fee_plans=MappingProxyType(fee_plans),
            details=(
                f"Settled: changes={len(changes)}, denoms={len(fee_plans)}, "
                f"burned={burned}, commission={commission}"
            ),
        )

    def evaluate_payload(
        self,
        balances_data: Sequence[dict[str, Any]],
        definitions_data: Sequence[dict[str, Any]],
        multi_send_data: dict[str, Any],
    ) -> SettlementResult:
        """Оценка multi-send из plain dict (JSON / RPC payload).

        Данные проверяются контрактами (JSON Schema + модели) до расчёта.

        Returns:
            SettlementResult: reject_reason="contract_violation" для
            невалидных данных, иначе результат evaluate()
        """
        try:
            original_balances = load_balances(balances_data)
            definitions = load_definitions(definitions_data)
            multi_send = load_multi_send(multi_send_data)
        except ContractViolation as e:
            return self._rejected(e)
        return self.evaluate(original_balances, definitions, multi_send)

    def _rejected(self, error: MultiSendError | ContractViolation) -> SettlementResult:
        """Создание rejected result."""
        logger.warning("Multi-send rejected (%s): %s", error.reason, error)
        return SettlementResult(
            accepted=False,
            reject_reason=error.reason,
            error=error,
            details=str(error),
        )


def calculate_balance_changes(
    original_balances: Sequence[Balance],
    definitions: Sequence[DenomDefinition],
    multi_send: MultiSend,
    config: SettlementConfig | None = None,
) -> list[BalanceChange]:
    """
    Нетто-изменения балансов одного multi-send.

    Args:
        original_balances: Существующие балансы
        definitions: Определения деноминаций
        multi_send: Транзакция
        config: Конфигурация (опционально)

    Returns:
        Одна BalanceChange на затронутый адрес

    Raises:
        UnknownDenomination: Вход ссылается на деноминацию без определения
        InsufficientBalance: Баланса не хватает на сумму и комиссии
        MismatchedSumForDenom: Суммы входов и выходов не совпадают
    """
    changes, _ = MultiSendSettlement(config).settle(original_balances, definitions, multi_send)
    return changes
