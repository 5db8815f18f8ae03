"""
DenomDefinition — Определение деноминации

Каждая деноминация имеет эмитента (issuer) и две ставки комиссий:
- burn_rate: доля переводимого объёма, которая сжигается
- commission_rate: доля переводимого объёма, которая уходит эмитенту

Ставки хранятся как Decimal, чтобы избежать дрейфа двоичного float
на точных границах комиссий. Float на входе конвертируется Pydantic
через строковое представление (0.08 → Decimal("0.08")).
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class DenomDefinition(BaseModel):
    """
    Определение деноминации (одно на denom).

    Immutable модель (frozen=True).
    """

    denom: str = Field(..., min_length=1, description="Уникальный ключ деноминации")
    issuer: str = Field(..., min_length=1, description="Адрес эмитента")
    burn_rate: Decimal = Field(..., ge=0, le=1, description="Доля сжигания [0, 1]")
    commission_rate: Decimal = Field(
        ..., ge=0, le=1, description="Доля комиссии эмитенту [0, 1]"
    )

    model_config = {"frozen": True}

    def is_issuer(self, address: str) -> bool:
        """Является ли адрес эмитентом деноминации (освобождён от комиссий)."""
        return address == self.issuer
