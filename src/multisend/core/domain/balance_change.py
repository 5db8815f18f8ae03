"""
BalanceChange — Результат расчёта multi-send

Одна запись на адрес, чей баланс изменился хотя бы по одной деноминации.
Coin.amount — знаковая дельта. Вызывающая сторона сама применяет дельты
к своему состоянию леджера.
"""

from pydantic import BaseModel, Field

from .coin import Coin


class BalanceChange(BaseModel):
    """
    Нетто-изменение баланса одного адреса.

    Immutable модель (frozen=True). Одна Coin на деноминацию.
    """

    address: str = Field(..., min_length=1, description="Адрес")
    coins: list[Coin] = Field(default_factory=list, description="Знаковые дельты")

    model_config = {"frozen": True}
