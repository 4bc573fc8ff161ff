"""Pytest configuration and fixtures."""

import pytest

from unstake_pool.math.fixed_point import (
    LpTokenAmount,
    Percentage,
    Price,
    StakedTokenAmount,
    TokenAmount,
)
from unstake_pool.pool import LpPool


@pytest.fixture
def story_example_pool() -> LpPool:
    """Empty pool used by the end-to-end walkthrough.

    price 1.5, liquidity target 90, fee between 0.1% and 9%.
    """
    return LpPool.init(
        price=Price.from_float(1.5),
        min_fee=Percentage.from_float(0.001),
        max_fee=Percentage.from_float(0.09),
        liquidity_target=TokenAmount.from_int(90),
    )


@pytest.fixture
def empty_pool() -> LpPool:
    """Empty pool with a zero minimum fee."""
    return LpPool.init(
        price=Price.from_int(2),
        min_fee=Percentage.from_int(0),
        max_fee=Percentage(90_000),
        liquidity_target=TokenAmount.from_int(100),
    )


@pytest.fixture
def non_empty_pool() -> LpPool:
    """Pool already holding both assets."""
    return LpPool(
        price=Price.from_int(5),
        token_amount=TokenAmount.from_int(2**20),
        st_token_amount=StakedTokenAmount.from_int(30),
        lp_token_amount=LpTokenAmount.from_int(250),
        liquidity_target=TokenAmount.from_int(100),
        min_fee=Percentage(100_000),
        max_fee=Percentage(200_000),
    )


@pytest.fixture
def small_pool() -> LpPool:
    """Pool holding both assets with balances small enough for exact pro-rata checks."""
    return LpPool(
        price=Price.from_int(5),
        token_amount=TokenAmount.from_int(1_000),
        st_token_amount=StakedTokenAmount.from_int(30),
        lp_token_amount=LpTokenAmount.from_int(250),
        liquidity_target=TokenAmount.from_int(100),
        min_fee=Percentage(100_000),
        max_fee=Percentage(200_000),
    )
