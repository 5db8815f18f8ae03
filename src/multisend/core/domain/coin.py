"""
Coin / Balance — Базовые value objects леджера

Coin — количество одной деноминации (denom) в целых минимальных единицах.
Balance — набор Coin, привязанный к адресу.

Balance используется в двух ролях:
- снапшот существующих балансов (original_balances)
- нога перевода (input/output в MultiSend)

Immutable Pydantic модели (frozen=True). Суммы — Python int
(произвольная точность, переполнение невозможно).
"""

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# COIN
# =============================================================================


class Coin(BaseModel):
    """
    Количество одной деноминации.

    В ногах перевода amount неотрицателен (проверяется в MultiSend).
    В результатах расчёта amount — знаковая дельта:
    отрицательная = списание, положительная = зачисление.
    """

    denom: str = Field(..., min_length=1, description="Идентификатор деноминации")
    amount: int = Field(..., description="Количество в минимальных единицах (знаковое)")

    model_config = {"frozen": True}


# =============================================================================
# BALANCE
# =============================================================================


class Balance(BaseModel):
    """
    Монеты одного адреса.

    Инвариант: деноминации внутри coins уникальны.
    """

    address: str = Field(..., min_length=1, description="Адрес владельца")
    coins: list[Coin] = Field(default_factory=list, description="Монеты адреса")

    model_config = {"frozen": True}

    @field_validator("coins")
    @classmethod
    def validate_unique_denoms(cls, v: list[Coin]) -> list[Coin]:
        """Одна запись на деноминацию."""
        seen: set[str] = set()
        for coin in v:
            if coin.denom in seen:
                raise ValueError(f"duplicate denom {coin.denom!r} in balance coins")
            seen.add(coin.denom)
        return v
