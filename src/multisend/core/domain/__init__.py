"""
Domain models and value objects.

Contains fundamental ledger entities: Coin, Balance, DenomDefinition,
MultiSend, BalanceChange.
"""

from multisend.core.domain.balance_change import BalanceChange
from multisend.core.domain.coin import Balance, Coin
from multisend.core.domain.denom import DenomDefinition
from multisend.core.domain.multi_send import MultiSend

__all__ = [
    "Coin",
    "Balance",
    "DenomDefinition",
    "MultiSend",
    "BalanceChange",
]
