"""
MultiSend — Пакетный мультивалютный перевод

Одна транзакция: набор входов (отправители) и выходов (получатели),
каждый — Balance с одной или несколькими деноминациями.

Модель проверяет только структурную корректность (неотрицательные суммы).
Равенство сумм входов и выходов по каждой деноминации проверяется
при расчёте (MismatchedSumForDenom), а не здесь: ошибка должна
возвращаться как причина отклонения транзакции.
"""

from pydantic import BaseModel, Field, field_validator

from .coin import Balance


class MultiSend(BaseModel):
    """
    Предлагаемая транзакция multi-send.

    Immutable модель (frozen=True).
    """

    inputs: list[Balance] = Field(default_factory=list, description="Ноги отправителей")
    outputs: list[Balance] = Field(default_factory=list, description="Ноги получателей")

    model_config = {"frozen": True}

    @field_validator("inputs", "outputs")
    @classmethod
    def validate_non_negative_amounts(cls, v: list[Balance]) -> list[Balance]:
        """Суммы в ногах перевода неотрицательны."""
        for balance in v:
            for coin in balance.coins:
                if coin.amount < 0:
                    raise ValueError(
                        f"negative amount {coin.amount} of {coin.denom!r} "
                        f"for {balance.address!r}"
                    )
        return v

    def denoms(self) -> list[str]:
        """
        Деноминации транзакции в порядке первого появления.

        Сначала входы, затем деноминации, присутствующие только в выходах.
        """
        ordered: dict[str, None] = {}
        for balance in (*self.inputs, *self.outputs):
            for coin in balance.coins:
                ordered.setdefault(coin.denom, None)
        return list(ordered)
