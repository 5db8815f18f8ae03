"""
Core math modules для multisend

Точная арифметика комиссий без двоичного float.
"""

from multisend.core.math.fee_math import (
    Rate,
    ceil_proportional_share,
    ceil_share,
    fee_base,
    proportional_share,
    to_fraction,
    validate_non_negative_amount,
)

__all__ = [
    # Types
    "Rate",
    # Conversion
    "to_fraction",
    # Validation
    "validate_non_negative_amount",
    # Fee shares
    "fee_base",
    "ceil_share",
    "proportional_share",
    "ceil_proportional_share",
]
