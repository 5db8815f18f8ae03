"""
Contract Validation Module

Валидация и загрузка входных данных multi-send из plain dict.
"""

from .validators import (
    BALANCE,
    DENOM_DEFINITION,
    MULTI_SEND,
    Contract,
    ContractViolation,
    load_balances,
    load_definitions,
    load_multi_send,
)

__all__ = [
    # Classes
    "Contract",
    "ContractViolation",
    # Contracts
    "BALANCE",
    "DENOM_DEFINITION",
    "MULTI_SEND",
    # Loaders
    "load_balances",
    "load_definitions",
    "load_multi_send",
]
