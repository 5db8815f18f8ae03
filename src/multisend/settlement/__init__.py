"""Settlement — расчёт multi-send с комиссиями деноминаций.

Стадии:
- Index Builder: локальные индексы балансов и определений
- Fee Apportioner: доли burn/commission с округлением вверх
- Validator: определения, балансы, равенство сумм
- Delta Accumulator: нетто-дельты на (address, denom)
"""

from .accumulator import DeltaAccumulator, accumulate_deltas, apply_balance_changes
from .engine import (
    MultiSendSettlement,
    SettlementConfig,
    SettlementResult,
    calculate_balance_changes,
)
from .errors import (
    InsufficientBalance,
    MismatchedSumForDenom,
    MultiSendError,
    UnknownDenomination,
)
from .fees import FeePlan, SenderFee, plan_denom_fees, plan_fees
from .index import (
    aggregate_legs,
    build_balance_index,
    build_definition_index,
    by_denom,
    denom_totals,
)
from .validator import check_senders, check_sums

__all__ = [
    "MultiSendSettlement",
    "SettlementConfig",
    "SettlementResult",
    "calculate_balance_changes",
    "apply_balance_changes",
    "DeltaAccumulator",
    "accumulate_deltas",
    "MultiSendError",
    "UnknownDenomination",
    "InsufficientBalance",
    "MismatchedSumForDenom",
    "FeePlan",
    "SenderFee",
    "plan_denom_fees",
    "plan_fees",
    "aggregate_legs",
    "build_balance_index",
    "build_definition_index",
    "by_denom",
    "denom_totals",
    "check_senders",
    "check_sums",
]
