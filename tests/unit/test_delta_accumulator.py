"""Unit тесты для Delta Accumulator.

Coverage:
- Нетто-сведение дельт на (address, denom)
- Пропуск нулевых дельт
- Зачисление комиссии эмитенту
- Проекция снапшота после применения дельт
"""

from multisend.core.domain import Balance, BalanceChange, Coin, DenomDefinition
from multisend.settlement.accumulator import (
    DeltaAccumulator,
    accumulate_deltas,
    apply_balance_changes,
)
from multisend.settlement.fees import plan_fees
from multisend.settlement.index import by_denom


class TestDeltaAccumulator:
    def test_nets_same_pair(self):
        acc = DeltaAccumulator()
        acc.debit("issuer", "d", 100)
        acc.credit("issuer", "d", 30)
        assert acc.to_balance_changes() == [
            BalanceChange(address="issuer", coins=[Coin(denom="d", amount=-70)])
        ]

    def test_zero_omitted(self):
        acc = DeltaAccumulator()
        acc.debit("a", "d", 5)
        acc.credit("a", "d", 5)
        acc.credit("a", "e", 1)
        acc.debit("b", "d", 0)
        assert acc.to_balance_changes() == [
            BalanceChange(address="a", coins=[Coin(denom="e", amount=1)])
        ]

    def test_zero_kept_when_requested(self):
        acc = DeltaAccumulator()
        acc.debit("b", "d", 0)
        assert acc.to_balance_changes(omit_zero=False) == [
            BalanceChange(address="b", coins=[Coin(denom="d", amount=0)])
        ]


class TestAccumulateDeltas:
    def test_issuer_commission_and_burn(self):
        definitions = {
            "d": DenomDefinition(denom="d", issuer="issuer", burn_rate="0.08", commission_rate="0.12")
        }
        inputs = {"a": {"d": 1000}}
        outputs = {"r": {"d": 1000}}
        plans = plan_fees(by_denom(inputs), by_denom(outputs), definitions)

        changes = accumulate_deltas(inputs, outputs, plans)

        assert changes == [
            BalanceChange(address="a", coins=[Coin(denom="d", amount=-1200)]),
            BalanceChange(address="r", coins=[Coin(denom="d", amount=1000)]),
            BalanceChange(address="issuer", coins=[Coin(denom="d", amount=120)]),
        ]
        # 80 сожжено: сумма дельт отрицательна ровно на burn
        assert sum(coin.amount for c in changes for coin in c.coins) == -80

    def test_no_issuer_line_without_commission(self):
        definitions = {
            "d": DenomDefinition(denom="d", issuer="issuer", burn_rate="0.5", commission_rate=0)
        }
        inputs = {"a": {"d": 10}}
        outputs = {"r": {"d": 10}}
        plans = plan_fees(by_denom(inputs), by_denom(outputs), definitions)
        changes = accumulate_deltas(inputs, outputs, plans)
        assert [c.address for c in changes] == ["a", "r"]


class TestApplyBalanceChanges:
    def test_projection(self):
        original = [
            Balance(address="a", coins=[Coin(denom="d", amount=1200), Coin(denom="e", amount=1)]),
        ]
        changes = [
            BalanceChange(address="a", coins=[Coin(denom="d", amount=-1200)]),
            BalanceChange(address="r", coins=[Coin(denom="d", amount=1000)]),
            BalanceChange(address="issuer", coins=[Coin(denom="d", amount=120)]),
        ]
        projected = apply_balance_changes(original, changes)
        assert projected == [
            Balance(address="a", coins=[Coin(denom="d", amount=0), Coin(denom="e", amount=1)]),
            Balance(address="r", coins=[Coin(denom="d", amount=1000)]),
            Balance(address="issuer", coins=[Coin(denom="d", amount=120)]),
        ]

    def test_inputs_not_mutated(self):
        original = [Balance(address="a", coins=[Coin(denom="d", amount=5)])]
        apply_balance_changes(original, [BalanceChange(address="a", coins=[Coin(denom="d", amount=-5)])])
        assert original[0].coins == [Coin(denom="d", amount=5)]
