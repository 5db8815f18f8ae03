"""
Fee Math — Точная арифметика комиссий

Модуль обеспечивает детерминированный расчёт долей комиссий:
- Конверсия ставок (Decimal/int/str) в точное рациональное число (Fraction)
- Пропорциональная доля отправителя с округлением вверх (ceil)
- Валидация сумм

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Двоичный float никогда не участвует в расчёте доли
2. Каждая доля — ceil точного рационального значения (никогда не вниз)
3. Деление на ноль никогда не происходит (нулевой знаменатель → 0)
4. Все операции детерминированы и воспроизводимы

ФОРМУЛЫ:
    fee_base = min(non_issuer_input_sum, non_issuer_output_sum)
    total = fee_base * rate
    share(a) = ceil(total * a / non_issuer_input_sum)
"""

import math
from decimal import Decimal
from fractions import Fraction

Rate = Decimal | Fraction | int | str


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_fraction(rate: Rate) -> Fraction:
    """
    Точная конверсия ставки в Fraction.

    float намеренно не принимается: Fraction(0.1) != 1/10.

    Args:
        rate: Ставка (Decimal, Fraction, int или строка вида "0.08")

    Returns:
        Точное рациональное значение

    Raises:
        TypeError: Если передан float или bool
        ValueError: Если Decimal не конечен (NaN/Inf)

    Examples:
        >>> to_fraction(Decimal("0.08"))
        Fraction(2, 25)
        >>> to_fraction("0.1")
        Fraction(1, 10)
    """
    if isinstance(rate, (bool, float)):
        raise TypeError(
            f"rate must be Decimal, Fraction, int or str, got {type(rate).__name__}"
        )
    if isinstance(rate, Decimal) and not rate.is_finite():
        raise ValueError(f"rate must be finite, got {rate}")
    return Fraction(rate)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative_amount(amount: int, name: str) -> None:
    """
    Валидация неотрицательной целой суммы.

    Args:
        amount: Сумма в минимальных единицах
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если amount не int
        ValueError: Если amount < 0
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"{name} must be int, got {type(amount).__name__}")
    if amount < 0:
        raise ValueError(f"{name} must be non-negative, got {amount}")


# =============================================================================
# ДОЛИ КОМИССИЙ
# =============================================================================


def fee_base(non_issuer_input_sum: int, non_issuer_output_sum: int) -> int:
    """
    База комиссии: объём, реально переданный между не-эмитентами.

    Объём от эмитента или к эмитенту освобождён от комиссий.
    """
    validate_non_negative_amount(non_issuer_input_sum, "non_issuer_input_sum")
    validate_non_negative_amount(non_issuer_output_sum, "non_issuer_output_sum")
    return min(non_issuer_input_sum, non_issuer_output_sum)


def ceil_share(value: Fraction) -> int:
    """
    Округление доли вверх до целой единицы.

    Examples:
        >>> ceil_share(Fraction(15, 2))
        8
        >>> ceil_share(Fraction(3))
        3
    """
    return math.ceil(value)


def proportional_share(total: Fraction, amount: int, denominator: int) -> Fraction:
    """
    Точная пропорциональная доля total для суммы amount.

    share = total * amount / denominator

    Args:
        total: Общая сумма комиссии (точное значение)
        amount: Вклад отправителя
        denominator: Сумма вкладов всех плательщиков

    Returns:
        Точная доля; Fraction(0), если denominator == 0
    """
    if denominator == 0:
        return Fraction(0)
    return total * amount / denominator


def ceil_proportional_share(total: Fraction, amount: int, denominator: int) -> int:
    """
    Доля отправителя, округлённая вверх.

    Examples:
        >>> ceil_proportional_share(Fraction(15, 2), 60, 150)
        3
        >>> ceil_proportional_share(Fraction(15, 2), 90, 150)
        5
    """
    return ceil_share(proportional_share(total, amount, denominator))
