"""Tests for the pool error hierarchy."""

import pytest

from unstake_pool.errors import (
    AddLiquidityError,
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
from unstake_pool.math.fixed_point import LpTokenAmount, TokenAmount


@pytest.mark.parametrize(
    ("error", "base"),
    [
        (NoTokensProvided, AddLiquidityError),
        (TokenAmountTooBig, AddLiquidityError),
        (NotEnoughTokens, RemoveLiquidityError),
        (WithdrawCalculationOverflow, RemoveLiquidityError),
        (ZeroTokensAsArgument, SwapError),
        (PoolNotEnoughTokens, SwapError),
        (SwapCalculationOverflow, SwapError),
    ],
)
def test_hierarchy(error, base):
    """Each error belongs to its operation and to the pool root."""
    assert issubclass(error, base)
    assert issubclass(error, UnstakePoolError)


def test_not_enough_tokens_message():
    err = NotEnoughTokens(LpTokenAmount(1_500_000), LpTokenAmount(1_000_000))
    assert err.withdraw_amount == LpTokenAmount(1_500_000)
    assert "1.5" in str(err)
    assert "1" in str(err)


def test_pool_not_enough_tokens_message():
    err = PoolNotEnoughTokens(TokenAmount(9_000_001), TokenAmount(9_000_000))
    assert err.pool_capacity == TokenAmount(9_000_000)
    assert "9.000001" in str(err)


def test_operation_errors_are_distinct():
    """Catching one operation's errors does not swallow another's."""
    assert not issubclass(ZeroTokensAsArgument, AddLiquidityError)
    assert not issubclass(NoTokensProvided, SwapError)
