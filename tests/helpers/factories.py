"""Factory functions for creating test amounts.

Usage:
    from tests.helpers import tokens, staked, lp_tokens

    amount = tokens("8.991")

Amounts are built from decimal strings so the expected values in tests are
exact, without float representation error.
"""

from decimal import Decimal

from unstake_pool.math.fixed_point import LpTokenAmount, StakedTokenAmount, TokenAmount


def tokens(value: str | int) -> TokenAmount:
    """TokenAmount from a decimal string or whole number."""
    return TokenAmount.from_decimal(Decimal(value))


def staked(value: str | int) -> StakedTokenAmount:
    """StakedTokenAmount from a decimal string or whole number."""
    return StakedTokenAmount.from_decimal(Decimal(value))


def lp_tokens(value: str | int) -> LpTokenAmount:
    """LpTokenAmount from a decimal string or whole number."""
    return LpTokenAmount.from_decimal(Decimal(value))
