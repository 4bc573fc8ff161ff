"""Pydantic model for exporting and restoring pool state.

The pool never persists itself. Callers that need durability take a
snapshot, store it however they like, and restore it later.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict

from unstake_pool.safe_int import UINT64_MAX


def validate_raw_amount(value: Any) -> int:
    """Validate a raw fixed-point amount given as int or decimal string.

    Raises:
        ValueError: If value is not a non-negative integer within uint64 range
    """
    if isinstance(value, bool):
        raise ValueError("Raw amount must be an integer, got bool")

    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as err:
            raise ValueError(f"Raw amount must be a decimal integer string: '{value}'") from err

    if not isinstance(value, int):
        raise ValueError(f"Raw amount must be string or int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"Raw amount cannot be negative: {value}")
    if value > UINT64_MAX:
        raise ValueError(f"Raw amount overflow: {value} > 2^64-1")

    return value


# Fixed-point value scaled by 10^6, as int or decimal string
RawAmount = Annotated[int, BeforeValidator(validate_raw_amount)]


class PoolState(BaseModel):
    """Complete state of an LpPool as raw scaled integers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    price: RawAmount
    token_amount: RawAmount
    st_token_amount: RawAmount
    lp_token_amount: RawAmount
    liquidity_target: RawAmount
    min_fee: RawAmount
    max_fee: RawAmount
