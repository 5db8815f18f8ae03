"""
Validator — проверка корректности и платёжеспособности multi-send

Порядок проверок (первое нарушение отклоняет транзакцию):
1. Для каждой пары (отправитель, деноминация) в порядке сканирования:
   a. Определение деноминации существует → иначе UnknownDenomination
   b. Существующий баланс >= сумма + доля burn + доля commission
      → иначе InsufficientBalance
2. Для каждой деноминации (сначала из входов, затем только из выходов):
   сумма входов == сумма выходов → иначе MismatchedSumForDenom

Порядок сканирования: адреса отправителей в порядке первого появления
во входах, для каждого — деноминации в порядке первого появления.

Доли комиссий проецируются Fee Apportioner до проверки баланса:
отправитель платит не только сумму перевода, но и комиссии.
"""

from collections.abc import Iterable

from multisend.core.domain import DenomDefinition
from multisend.settlement.errors import (
    InsufficientBalance,
    MismatchedSumForDenom,
    UnknownDenomination,
)
from multisend.settlement.fees import FeePlan
from multisend.settlement.index import BalanceIndex, existing_amount


def check_senders(
    balances: BalanceIndex,
    definitions: dict[str, DenomDefinition],
    inputs: BalanceIndex,
    fee_plans: dict[str, FeePlan],
    include_fees: bool = True,
) -> None:
    """
    Проверка определений и балансов отправителей.

    Args:
        balances: Индекс существующих балансов
        definitions: Индекс определений
        inputs: Свёрнутые входы (address -> {denom -> amount})
        fee_plans: Планы комиссий по деноминациям
        include_fees: Учитывать комиссии в требуемом списании

    Raises:
        UnknownDenomination: Нет определения деноминации
        InsufficientBalance: Баланса не хватает на списание
    """
    for address, coins in inputs.items():
        for denom, amount in coins.items():
            if denom not in definitions:
                raise UnknownDenomination(denom)

            required = amount
            if include_fees:
                sender = fee_plans[denom].sender(address)
                if sender is not None:
                    required = sender.debit

            available = existing_amount(balances, address, denom)
            if available < required:
                raise InsufficientBalance(address, denom, available, required)


def check_sums(
    denoms: Iterable[str],
    input_totals: dict[str, int],
    output_totals: dict[str, int],
) -> None:
    """
    Проверка равенства сумм входов и выходов по каждой деноминации.

    Args:
        denoms: Деноминации в порядке проверки (MultiSend.denoms())
        input_totals: denom -> сумма входов
        output_totals: denom -> сумма выходов

    Raises:
        MismatchedSumForDenom: Суммы не совпадают
    """
    for denom in denoms:
        input_total = input_totals.get(denom, 0)
        output_total = output_totals.get(denom, 0)
        if input_total != output_total:
            raise MismatchedSumForDenom(denom, input_total, output_total)
