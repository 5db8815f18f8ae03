"""
Fee Apportioner — распределение burn и commission между отправителями

Для каждой деноминации d с определением (issuer, burn_rate, commission_rate):

1. non_issuer_input_sum  = сумма входов d от адресов != issuer
2. non_issuer_output_sum = сумма выходов d на адреса != issuer
3. fee_base = min(non_issuer_input_sum, non_issuer_output_sum)
4. total_burn = fee_base * burn_rate
   total_commission = fee_base * commission_rate
5. Для отправителя s (не эмитента) с суммой a:
   share_burn = ceil(total_burn * a / non_issuer_input_sum)
   share_commission = ceil(total_commission * a / non_issuer_input_sum)
   debit = a + share_burn + share_commission
   Эмитент платит только a.

Округление: каждая доля округляется вверх независимо, без перераспределения
остатков. Сумма долей может превысить точный total не более чем на
(число отправителей-не-эмитентов - 1) единиц.

Сумма долей commission зачисляется эмитенту. Сумма долей burn
выводится из обращения (списана у отправителей, не зачислена никому).
"""

import logging
from dataclasses import dataclass, field
from fractions import Fraction

from multisend.core.domain import DenomDefinition
from multisend.core.math import ceil_proportional_share, fee_base, to_fraction

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT TYPES
# =============================================================================


@dataclass(frozen=True)
class SenderFee:
    """Доля комиссий одного отправителя по одной деноминации."""

    address: str
    amount: int  # Сумма перевода
    burn: int  # Округлённая доля сжигания
    commission: int  # Округлённая доля комиссии эмитенту
    is_issuer: bool

    @property
    def debit(self) -> int:
        """Полное списание: сумма + комиссии."""
        return self.amount + self.burn + self.commission


@dataclass(frozen=True)
class FeePlan:
    """План комиссий по одной деноминации."""

    denom: str
    issuer: str

    non_issuer_input_sum: int
    non_issuer_output_sum: int
    fee_base: int

    # Точные (нерасщеплённые) суммы
    total_burn: Fraction
    total_commission: Fraction

    # Отправители в порядке первого появления
    senders: tuple[SenderFee, ...]

    # address -> SenderFee, строится из senders
    _by_address: dict[str, SenderFee] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self):
        object.__setattr__(
            self, "_by_address", {sender.address: sender for sender in self.senders}
        )

    @property
    def burned(self) -> int:
        """Сумма округлённых долей сжигания."""
        return sum(sender.burn for sender in self.senders)

    @property
    def commission(self) -> int:
        """Сумма округлённых долей комиссии (зачисляется эмитенту)."""
        return sum(sender.commission for sender in self.senders)

    @property
    def rounding_excess(self) -> Fraction:
        """Превышение округлённых сумм над точными."""
        return (self.burned - self.total_burn) + (self.commission - self.total_commission)

    def sender(self, address: str) -> SenderFee | None:
        """Доля отправителя (None, если адрес не отправлял деноминацию)."""
        return self._by_address.get(address)


# =============================================================================
# APPORTIONER
# =============================================================================


def plan_denom_fees(
    definition: DenomDefinition,
    senders: dict[str, int],
    receivers: dict[str, int],
) -> FeePlan:
    """
    План комиссий по одной деноминации.

    Args:
        definition: Определение деноминации
        senders: address -> сумма входа (в порядке первого появления)
        receivers: address -> сумма выхода

    Returns:
        FeePlan с долями каждого отправителя
    """
    issuer = definition.issuer

    non_issuer_input_sum = sum(
        amount for address, amount in senders.items() if not definition.is_issuer(address)
    )
    non_issuer_output_sum = sum(
        amount for address, amount in receivers.items() if not definition.is_issuer(address)
    )
    base = fee_base(non_issuer_input_sum, non_issuer_output_sum)

    total_burn = base * to_fraction(definition.burn_rate)
    total_commission = base * to_fraction(definition.commission_rate)

    shares = []
    for address, amount in senders.items():
        if definition.is_issuer(address):
            shares.append(
                SenderFee(address=address, amount=amount, burn=0, commission=0, is_issuer=True)
            )
            continue

        # при non_issuer_input_sum == 0 доля равна 0, деления нет
        shares.append(
            SenderFee(
                address=address,
                amount=amount,
                burn=ceil_proportional_share(total_burn, amount, non_issuer_input_sum),
                commission=ceil_proportional_share(
                    total_commission, amount, non_issuer_input_sum
                ),
                is_issuer=False,
            )
        )

    plan = FeePlan(
        denom=definition.denom,
        issuer=issuer,
        non_issuer_input_sum=non_issuer_input_sum,
        non_issuer_output_sum=non_issuer_output_sum,
        fee_base=base,
        total_burn=total_burn,
        total_commission=total_commission,
        senders=tuple(shares),
    )

    logger.debug(
        "Fee plan for %s: fee_base=%d, burn=%s->%d, commission=%s->%d, "
        "rounding_excess=%s, senders=%d",
        plan.denom,
        plan.fee_base,
        plan.total_burn,
        plan.burned,
        plan.total_commission,
        plan.commission,
        plan.rounding_excess,
        len(plan.senders),
    )
    return plan


def plan_fees(
    senders_by_denom: dict[str, dict[str, int]],
    receivers_by_denom: dict[str, dict[str, int]],
    definitions: dict[str, DenomDefinition],
) -> dict[str, FeePlan]:
    """
    Планы комиссий по всем деноминациям входов.

    Деноминации без определения пропускаются: их отклоняет валидатор
    в порядке сканирования (UnknownDenomination).

    Args:
        senders_by_denom: denom -> {address -> сумма входа}
        receivers_by_denom: denom -> {address -> сумма выхода}
        definitions: denom -> DenomDefinition

    Returns:
        denom -> FeePlan в порядке первого появления во входах
    """
    plans: dict[str, FeePlan] = {}
    for denom, senders in senders_by_denom.items():
        definition = definitions.get(denom)
        if definition is None:
            continue
        plans[denom] = plan_denom_fees(definition, senders, receivers_by_denom.get(denom, {}))
    return plans
