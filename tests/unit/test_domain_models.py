"""
Тесты для доменных моделей: Coin, Balance, DenomDefinition, MultiSend, BalanceChange

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Инварианты (уникальные деноминации, неотрицательные ноги, ставки в [0, 1])
3. Immutability (frozen=True)
4. Сериализацию/десериализацию JSON
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from multisend.core.domain import Balance, BalanceChange, Coin, DenomDefinition, MultiSend


# =============================================================================
# COIN / BALANCE
# =============================================================================


class TestCoin:
    """Тесты для модели Coin"""

    def test_signed_amount_allowed(self):
        """Coin допускает отрицательную сумму (дельта в результате)."""
        coin = Coin(denom="denom1", amount=-350)
        assert coin.amount == -350

    def test_arbitrary_precision(self):
        """Суммы за пределами i128 не теряют точность."""
        huge = 2**200 + 1
        assert Coin(denom="denom1", amount=huge).amount == huge

    def test_empty_denom_rejected(self):
        with pytest.raises(ValidationError):
            Coin(denom="", amount=1)

    def test_immutable(self):
        coin = Coin(denom="denom1", amount=1)
        with pytest.raises(ValidationError):
            coin.amount = 2


class TestBalance:
    """Тесты для модели Balance"""

    def test_coins_keep_order(self):
        balance = Balance(
            address="account1",
            coins=[Coin(denom="denom1", amount=1000), Coin(denom="denom2", amount=2000)],
        )
        assert [(c.denom, c.amount) for c in balance.coins] == [("denom1", 1000), ("denom2", 2000)]

    def test_duplicate_denom_rejected(self):
        with pytest.raises(ValidationError, match="duplicate denom"):
            Balance(
                address="account1",
                coins=[Coin(denom="denom1", amount=1), Coin(denom="denom1", amount=2)],
            )

    def test_empty_coins_default(self):
        assert Balance(address="account1").coins == []

    def test_json_roundtrip(self):
        balance = Balance(address="account1", coins=[Coin(denom="denom1", amount=5)])
        restored = Balance.model_validate_json(balance.model_dump_json())
        assert restored == balance


# =============================================================================
# DENOM DEFINITION
# =============================================================================


class TestDenomDefinition:
    """Тесты для модели DenomDefinition"""

    def test_rates_are_decimal(self):
        definition = DenomDefinition(
            denom="denom1", issuer="issuer", burn_rate="0.08", commission_rate="0.12"
        )
        assert definition.burn_rate == Decimal("0.08")
        assert definition.commission_rate == Decimal("0.12")

    def test_float_rates_keep_decimal_value(self):
        """0.08 из JSON-числа даёт Decimal('0.08'), а не двоичное приближение."""
        definition = DenomDefinition(
            denom="denom1", issuer="issuer", burn_rate=0.08, commission_rate=0.12
        )
        assert definition.burn_rate == Decimal("0.08")
        assert definition.commission_rate == Decimal("0.12")
        assert definition.burn_rate != Decimal(0.08)

    @pytest.mark.parametrize("rate", ["-0.01", "1.01", "2"])
    def test_rate_out_of_range_rejected(self, rate):
        with pytest.raises(ValidationError):
            DenomDefinition(denom="denom1", issuer="issuer", burn_rate=rate, commission_rate=0)
        with pytest.raises(ValidationError):
            DenomDefinition(denom="denom1", issuer="issuer", burn_rate=0, commission_rate=rate)

    def test_boundary_rates_allowed(self):
        definition = DenomDefinition(
            denom="denom1", issuer="issuer", burn_rate="1", commission_rate="0"
        )
        assert definition.burn_rate == 1

    def test_is_issuer(self):
        definition = DenomDefinition(
            denom="denom1", issuer="issuer", burn_rate=0, commission_rate=0
        )
        assert definition.is_issuer("issuer")
        assert not definition.is_issuer("account1")


# =============================================================================
# MULTI SEND
# =============================================================================


class TestMultiSend:
    """Тесты для модели MultiSend"""

    def test_negative_input_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            MultiSend(
                inputs=[Balance(address="a", coins=[Coin(denom="d", amount=-1)])],
                outputs=[],
            )

    def test_negative_output_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            MultiSend(
                inputs=[],
                outputs=[Balance(address="a", coins=[Coin(denom="d", amount=-1)])],
            )

    def test_denoms_first_appearance_order(self):
        """Сначала деноминации входов, затем только из выходов."""
        tx = MultiSend(
            inputs=[
                Balance(address="a", coins=[Coin(denom="d2", amount=1)]),
                Balance(address="b", coins=[Coin(denom="d1", amount=1), Coin(denom="d2", amount=1)]),
            ],
            outputs=[
                Balance(address="c", coins=[Coin(denom="d3", amount=1), Coin(denom="d1", amount=1)]),
            ],
        )
        assert tx.denoms() == ["d2", "d1", "d3"]

    def test_from_dict(self):
        tx = MultiSend.model_validate(
            {
                "inputs": [{"address": "a", "coins": [{"denom": "d", "amount": 5}]}],
                "outputs": [{"address": "b", "coins": [{"denom": "d", "amount": 5}]}],
            }
        )
        assert tx.inputs[0].coins == [Coin(denom="d", amount=5)]
        assert tx.outputs[0].address == "b"


class TestBalanceChange:
    """Тесты для модели BalanceChange"""

    def test_signed_deltas(self):
        change = BalanceChange(address="a", coins=[Coin(denom="d", amount=-7)])
        assert change.coins[0].amount == -7

    def test_immutable(self):
        change = BalanceChange(address="a", coins=[])
        with pytest.raises(ValidationError):
            change.address = "b"
