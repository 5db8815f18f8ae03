"""
Delta Accumulator — сведение эффектов в нетто-дельты

Объединяет:
- списания отправителей (сумма + burn + commission)
- зачисления получателей (ровно объявленная сумма выхода)
- зачисление комиссии эмитенту

в одну дельту на пару (address, denom). Адрес, у которого есть и списание,
и зачисление по одной деноминации (например, эмитент-получатель),
получает одну нетто-запись.

Сожжённая сумма не появляется ни в одной положительной дельте.
"""

from collections.abc import Iterable

from multisend.core.domain import Balance, BalanceChange, Coin
from multisend.settlement.fees import FeePlan
from multisend.settlement.index import BalanceIndex, build_balance_index


class DeltaAccumulator:
    """
    Накопитель знаковых дельт.

    Порядок адресов и деноминаций — порядок первого добавления.
    """

    def __init__(self):
        self._deltas: dict[str, dict[str, int]] = {}

    def add(self, address: str, denom: str, amount: int) -> None:
        coins = self._deltas.setdefault(address, {})
        coins[denom] = coins.get(denom, 0) + amount

    def debit(self, address: str, denom: str, amount: int) -> None:
        self.add(address, denom, -amount)

    def credit(self, address: str, denom: str, amount: int) -> None:
        self.add(address, denom, amount)

    def to_balance_changes(self, omit_zero: bool = True) -> list[BalanceChange]:
        """
        Итоговый список BalanceChange.

        Args:
            omit_zero: Пропускать нулевые нетто-дельты и адреса без изменений

        Returns:
            Список изменений в порядке первого появления адресов
        """
        changes = []
        for address, coins in self._deltas.items():
            deltas = [
                Coin(denom=denom, amount=amount)
                for denom, amount in coins.items()
                if amount != 0 or not omit_zero
            ]
            if deltas or not omit_zero:
                changes.append(BalanceChange(address=address, coins=deltas))
        return changes


def accumulate_deltas(
    inputs: BalanceIndex,
    outputs: BalanceIndex,
    fee_plans: dict[str, FeePlan],
    omit_zero: bool = True,
) -> list[BalanceChange]:
    """
    Сведение списаний, зачислений и комиссий эмитентам.

    Порядок: отправители, затем получатели, затем эмитенты.

    Args:
        inputs: Свёрнутые входы
        outputs: Свёрнутые выходы
        fee_plans: Планы комиссий (ключи — все деноминации входов)
        omit_zero: Пропускать нулевые нетто-дельты

    Returns:
        Нетто-изменения балансов
    """
    acc = DeltaAccumulator()

    for address, coins in inputs.items():
        for denom, amount in coins.items():
            sender = fee_plans[denom].sender(address)
            acc.debit(address, denom, sender.debit if sender is not None else amount)

    for address, coins in outputs.items():
        for denom, amount in coins.items():
            acc.credit(address, denom, amount)

    for plan in fee_plans.values():
        if plan.commission > 0:
            acc.credit(plan.issuer, plan.denom, plan.commission)

    return acc.to_balance_changes(omit_zero=omit_zero)


def apply_balance_changes(
    original_balances: Iterable[Balance],
    changes: Iterable[BalanceChange],
) -> list[Balance]:
    """
    Проекция снапшота балансов после применения дельт.

    Не изменяет входные данные. Новые адреса и деноминации
    добавляются в конец в порядке появления в changes.

    Args:
        original_balances: Снапшот до транзакции
        changes: Результат calculate_balance_changes

    Returns:
        Снапшот после транзакции
    """
    index = build_balance_index(original_balances)
    for change in changes:
        coins = index.setdefault(change.address, {})
        for coin in change.coins:
            coins[coin.denom] = coins.get(coin.denom, 0) + coin.amount

    return [
        Balance(
            address=address,
            coins=[Coin(denom=denom, amount=amount) for denom, amount in coins.items()],
        )
        for address, coins in index.items()
    ]
