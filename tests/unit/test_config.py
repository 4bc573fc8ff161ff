"""Tests for pool configuration and strict parameter checks."""

import pytest

from unstake_pool.config import DEFAULT_POOL_CONFIG, STRICT_PARAMETERS_ENV, PoolConfig
from unstake_pool.errors import InvalidPoolParameters, UnstakePoolError
from unstake_pool.math.fixed_point import Percentage, Price, TokenAmount
from unstake_pool.pool import LpPool

STRICT = PoolConfig(strict_parameters=True)


def _init(config=None, **overrides):
    params = {
        "price": Price.from_float(1.5),
        "min_fee": Percentage(1_000),
        "max_fee": Percentage(90_000),
        "liquidity_target": TokenAmount.from_int(90),
    }
    params.update(overrides)
    return LpPool.init(config=config, **params)


class TestPoolConfig:
    """Tests for PoolConfig."""

    def test_default_is_permissive(self):
        assert DEFAULT_POOL_CONFIG.strict_parameters is False

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_POOL_CONFIG.strict_parameters = True  # type: ignore[misc]

    @pytest.mark.parametrize("value", ["true", "1", "yes", "TRUE"])
    def test_from_env_enabled(self, monkeypatch, value):
        monkeypatch.setenv(STRICT_PARAMETERS_ENV, value)
        assert PoolConfig.from_env().strict_parameters is True

    @pytest.mark.parametrize("value", ["false", "0", "no", ""])
    def test_from_env_disabled(self, monkeypatch, value):
        monkeypatch.setenv(STRICT_PARAMETERS_ENV, value)
        assert PoolConfig.from_env().strict_parameters is False

    def test_from_env_unset(self, monkeypatch):
        monkeypatch.delenv(STRICT_PARAMETERS_ENV, raising=False)
        assert PoolConfig.from_env() == DEFAULT_POOL_CONFIG


class TestStrictInit:
    """Tests for LpPool.init with strict_parameters."""

    def test_valid_parameters_accepted(self):
        pool = _init(config=STRICT)
        assert pool.config is STRICT
        assert pool.lp_token_amount.is_zero

    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"price": Price.zero()}, "price"),
            ({"liquidity_target": TokenAmount.zero()}, "liquidity_target"),
            ({"min_fee": Percentage(100_000), "max_fee": Percentage(1_000)}, "min_fee"),
            ({"max_fee": Percentage.from_int(2)}, "100%"),
        ],
    )
    def test_invalid_parameters_rejected(self, overrides, message):
        with pytest.raises(InvalidPoolParameters) as exc_info:
            _init(config=STRICT, **overrides)
        assert message in str(exc_info.value)

    def test_invalid_parameters_accepted_when_permissive(self):
        pool = _init(price=Price.zero(), liquidity_target=TokenAmount.zero())
        assert pool.price.is_zero

    def test_error_is_pool_error(self):
        assert issubclass(InvalidPoolParameters, UnstakePoolError)
