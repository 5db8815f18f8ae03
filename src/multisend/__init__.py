"""
multisend — net balance changes of a batched multi-denomination transfer.

Quick start:

    from multisend import (
        Balance, Coin, DenomDefinition, MultiSend, calculate_balance_changes,
    )

    changes = calculate_balance_changes(original_balances, definitions, multi_send)

Evaluation without exceptions:

    from multisend import MultiSendSettlement

    result = MultiSendSettlement().evaluate(original_balances, definitions, multi_send)
    if not result.accepted:
        print(result.reject_reason)
"""

from multisend.core.contracts import (
    ContractViolation,
    load_balances,
    load_definitions,
    load_multi_send,
)
from multisend.core.domain import Balance, BalanceChange, Coin, DenomDefinition, MultiSend
from multisend.settlement import (
    FeePlan,
    InsufficientBalance,
    MismatchedSumForDenom,
    MultiSendError,
    MultiSendSettlement,
    SenderFee,
    SettlementConfig,
    SettlementResult,
    UnknownDenomination,
    apply_balance_changes,
    calculate_balance_changes,
)

__version__ = "0.1.0"

__all__ = [
    # Domain
    "Coin",
    "Balance",
    "DenomDefinition",
    "MultiSend",
    "BalanceChange",
    # Settlement
    "calculate_balance_changes",
    "apply_balance_changes",
    "MultiSendSettlement",
    "SettlementConfig",
    "SettlementResult",
    "FeePlan",
    "SenderFee",
    # Contracts
    "ContractViolation",
    "load_balances",
    "load_definitions",
    "load_multi_send",
    # Errors
    "MultiSendError",
    "UnknownDenomination",
    "InsufficientBalance",
    "MismatchedSumForDenom",
]
