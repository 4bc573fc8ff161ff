"""Mathematical utilities for the unstake pool.

This package provides the fixed-point primitives used for pool accounting:
- Quantity: 6-decimal fixed-point base shared by every unit
- TokenAmount, StakedTokenAmount, LpTokenAmount, Price, Percentage
"""

from unstake_pool.math.fixed_point import (
    PRECISION,
    SCALE,
    LpTokenAmount,
    Percentage,
    Price,
    Quantity,
    StakedTokenAmount,
    TokenAmount,
)

__all__ = [
    "Quantity",
    "TokenAmount",
    "StakedTokenAmount",
    "LpTokenAmount",
    "Price",
    "Percentage",
    "PRECISION",
    "SCALE",
]
