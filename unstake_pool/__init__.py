"""Single-sided unstake liquidity pool with a liquidity-sensitive fee.

Usage:
    from unstake_pool import LpPool, Percentage, Price, StakedTokenAmount, TokenAmount

    pool = LpPool.init(
        price=Price.from_float(1.5),
        min_fee=Percentage.from_float(0.001),
        max_fee=Percentage.from_float(0.09),
        liquidity_target=TokenAmount.from_int(90),
    )
    lp = pool.add_liquidity(TokenAmount.from_int(100))
    out = pool.swap(StakedTokenAmount.from_int(6))
"""

from unstake_pool.config import DEFAULT_POOL_CONFIG, PoolConfig
from unstake_pool.errors import (
    AddLiquidityError,
    InvalidPoolParameters,
    NoTokensProvided,
    NotEnoughTokens,
    PoolNotEnoughTokens,
    RemoveLiquidityError,
    SwapCalculationOverflow,
    SwapError,
    TokenAmountTooBig,
    UnstakePoolError,
    WithdrawCalculationOverflow,
    ZeroTokensAsArgument,
)
from unstake_pool.math import (
    SCALE,
    LpTokenAmount,
    Percentage,
    Price,
    Quantity,
    StakedTokenAmount,
    TokenAmount,
)
from unstake_pool.models import PoolState
from unstake_pool.pool import LpPool

__all__ = [
    # Pool
    "LpPool",
    "PoolState",
    # Config
    "PoolConfig",
    "DEFAULT_POOL_CONFIG",
    # Quantities
    "Quantity",
    "TokenAmount",
    "StakedTokenAmount",
    "LpTokenAmount",
    "Price",
    "Percentage",
    "SCALE",
    # Errors
    "UnstakePoolError",
    "InvalidPoolParameters",
    "AddLiquidityError",
    "NoTokensProvided",
    "TokenAmountTooBig",
    "RemoveLiquidityError",
    "NotEnoughTokens",
    "WithdrawCalculationOverflow",
    "SwapError",
    "ZeroTokensAsArgument",
    "PoolNotEnoughTokens",
    "SwapCalculationOverflow",
]
