"""Unstake pool error classes.

One hierarchy per pool operation. Every error is raised before the pool
is mutated, so the pool remains usable after catching any of them.
"""

from __future__ import annotations

from unstake_pool.math.fixed_point import LpTokenAmount, TokenAmount


class UnstakePoolError(Exception):
    """Base error for unstake pool operations."""

    pass


class InvalidPoolParameters(UnstakePoolError):
    """Pool parameters rejected by strict configuration."""

    pass


# =============================================================================
# add_liquidity
# =============================================================================


class AddLiquidityError(UnstakePoolError):
    """Base error for add_liquidity."""

    pass


class NoTokensProvided(AddLiquidityError):
    """Add liquidity was called without any tokens."""

    def __init__(self) -> None:
        super().__init__("Add liquidity was called without any tokens")


class TokenAmountTooBig(AddLiquidityError):
    """LP mint calculation does not fit in 64 bits."""

    def __init__(self, token_amount: TokenAmount) -> None:
        self.token_amount = token_amount
        super().__init__(f"Token amount {token_amount} is too big for LP mint calculation")


# =============================================================================
# remove_liquidity
# =============================================================================


class RemoveLiquidityError(UnstakePoolError):
    """Base error for remove_liquidity."""

    pass


class NotEnoughTokens(RemoveLiquidityError):
    """Requested LP burn exceeds the LP supply."""

    def __init__(self, withdraw_amount: LpTokenAmount, pool_capacity: LpTokenAmount) -> None:
        self.withdraw_amount = withdraw_amount
        self.pool_capacity = pool_capacity
        super().__init__(
            f"Cannot withdraw {withdraw_amount} LP tokens, pool only has {pool_capacity}"
        )


class WithdrawCalculationOverflow(RemoveLiquidityError):
    """Pro-rata withdraw calculation does not fit in 64 bits."""

    def __init__(self) -> None:
        super().__init__("Withdraw calculation overflowed")


# =============================================================================
# swap
# =============================================================================


class SwapError(UnstakePoolError):
    """Base error for swap."""

    pass


class ZeroTokensAsArgument(SwapError):
    """Swap was called with zero staked tokens."""

    def __init__(self) -> None:
        super().__init__("Swap was called with zero tokens")


class PoolNotEnoughTokens(SwapError):
    """Pre-fee swap output exceeds the unstaked token reserve."""

    def __init__(self, token_amount: TokenAmount, pool_capacity: TokenAmount) -> None:
        self.token_amount = token_amount
        self.pool_capacity = pool_capacity
        super().__init__(
            f"Swap needs {token_amount} tokens, pool only has {pool_capacity}"
        )


class SwapCalculationOverflow(SwapError):
    """Staked token reserve would not fit in 64 bits after the swap."""

    def __init__(self) -> None:
        super().__init__("Swap calculation overflowed")
