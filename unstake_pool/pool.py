"""Single-sided unstake liquidity pool.

Liquidity providers deposit the unstaked token and receive LP tokens.
Swappers bring staked tokens and receive unstaked tokens at a fixed price
minus a fee that grows as the unstaked reserve is drained:

    fee = max_fee - (max_fee - min_fee) * amount_after / liquidity_target

clamped to [min_fee, max_fee]. The fee stays in the pool and accrues to LP
holders.

Every operation validates and computes first, then assigns all changed
balances together. A raised error never leaves the pool half-updated.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from unstake_pool.config import DEFAULT_POOL_CONFIG, PoolConfig
from unstake_pool.errors import (
    InvalidPoolParameters,
    NoTokensProvided,
    NotEnoughTokens,
    PoolNotEnoughTokens,
    SwapCalculationOverflow,
    TokenAmountTooBig,
    WithdrawCalculationOverflow,
    ZeroTokensAsArgument,
)
from unstake_pool.math.fixed_point import (
    LpTokenAmount,
    Percentage,
    Price,
    StakedTokenAmount,
    TokenAmount,
)
from unstake_pool.models import PoolState
from unstake_pool.safe_int import UINT64_MAX, DivisionByZero, Overflow, S

logger = structlog.get_logger()


@dataclass
class LpPool:
    """Unstake liquidity pool.

    Attributes:
        price: Staked token price in unstaked tokens (fixed, set externally)
        token_amount: Unstaked token reserve
        st_token_amount: Staked token reserve accumulated from swaps
        lp_token_amount: LP token supply outstanding
        liquidity_target: Reserve level at which the fee reaches min_fee
        min_fee: Lowest swap fee
        max_fee: Highest swap fee (charged when a swap empties the reserve)
        config: Behavior flags
    """

    price: Price
    token_amount: TokenAmount
    st_token_amount: StakedTokenAmount
    lp_token_amount: LpTokenAmount
    liquidity_target: TokenAmount
    min_fee: Percentage
    max_fee: Percentage
    config: PoolConfig = field(default=DEFAULT_POOL_CONFIG, repr=False, compare=False)

    @classmethod
    def init(
        cls,
        price: Price,
        min_fee: Percentage,
        max_fee: Percentage,
        liquidity_target: TokenAmount,
        config: PoolConfig | None = None,
    ) -> LpPool:
        """Create an empty pool.

        With the default configuration the parameters are taken as given:
        inverted fee bounds produce inverted fee behavior, not an error.

        Raises:
            InvalidPoolParameters: If config.strict_parameters is set and a
                parameter is out of range
        """
        config = config or DEFAULT_POOL_CONFIG
        if config.strict_parameters:
            _validate_parameters(price, min_fee, max_fee, liquidity_target)

        return cls(
            price=price,
            token_amount=TokenAmount.zero(),
            st_token_amount=StakedTokenAmount.zero(),
            lp_token_amount=LpTokenAmount.zero(),
            liquidity_target=liquidity_target,
            min_fee=min_fee,
            max_fee=max_fee,
            config=config,
        )

    @classmethod
    def from_state(cls, state: PoolState, config: PoolConfig | None = None) -> LpPool:
        """Restore a pool from a snapshot."""
        return cls(
            price=Price(state.price),
            token_amount=TokenAmount(state.token_amount),
            st_token_amount=StakedTokenAmount(state.st_token_amount),
            lp_token_amount=LpTokenAmount(state.lp_token_amount),
            liquidity_target=TokenAmount(state.liquidity_target),
            min_fee=Percentage(state.min_fee),
            max_fee=Percentage(state.max_fee),
            config=config or DEFAULT_POOL_CONFIG,
        )

    def snapshot(self) -> PoolState:
        """Export the pool as raw scaled integers."""
        return PoolState(
            price=self.price.raw,
            token_amount=self.token_amount.raw,
            st_token_amount=self.st_token_amount.raw,
            lp_token_amount=self.lp_token_amount.raw,
            liquidity_target=self.liquidity_target.raw,
            min_fee=self.min_fee.raw,
            max_fee=self.max_fee.raw,
        )

    # =========================================================================
    # Operations
    # =========================================================================

    def add_liquidity(self, token_amount_in: TokenAmount) -> LpTokenAmount:
        """Deposit unstaked tokens and mint LP tokens.

        The first deposit mints 1:1. Later deposits mint
        lp_supply * token_amount_in / total_value, which keeps the value
        behind each LP token unchanged.

        Args:
            token_amount_in: Unstaked tokens provided by the caller

        Returns:
            LP tokens granted to the caller

        Raises:
            NoTokensProvided: If token_amount_in is zero
            TokenAmountTooBig: If the mint calculation does not fit in 64 bits,
                or the pool has LP supply but its total value truncates to zero
        """
        if token_amount_in.is_zero:
            logger.debug("add_liquidity_rejected", reason="no_tokens_provided")
            raise NoTokensProvided()

        try:
            if self.lp_token_amount.is_zero:
                lp_amount = LpTokenAmount(token_amount_in.raw)
            else:
                minted = S(self.lp_token_amount.raw) * token_amount_in.raw // self.total_value().raw
                lp_amount = LpTokenAmount(minted.value)
            new_token_amount = self.token_amount + token_amount_in
            new_lp_token_amount = self.lp_token_amount + lp_amount
        except (Overflow, DivisionByZero) as err:
            logger.debug(
                "add_liquidity_rejected",
                reason="token_amount_too_big",
                token_amount_in=token_amount_in.raw,
                lp_token_amount=self.lp_token_amount.raw,
            )
            raise TokenAmountTooBig(token_amount_in) from err

        self.token_amount = new_token_amount
        self.lp_token_amount = new_lp_token_amount

        logger.debug(
            "add_liquidity",
            token_amount_in=token_amount_in.raw,
            lp_minted=lp_amount.raw,
            token_amount=self.token_amount.raw,
            lp_token_amount=self.lp_token_amount.raw,
        )
        return lp_amount

    def remove_liquidity(
        self,
        lp_amount_out: LpTokenAmount,
    ) -> tuple[TokenAmount, StakedTokenAmount]:
        """Burn LP tokens for a pro-rata share of both reserves.

        Args:
            lp_amount_out: LP tokens the caller returns to the pool

        Returns:
            Tuple of (unstaked tokens, staked tokens) paid out

        Raises:
            NotEnoughTokens: If lp_amount_out exceeds the LP supply
            WithdrawCalculationOverflow: If a pro-rata product does not fit in 64 bits
        """
        if lp_amount_out > self.lp_token_amount:
            logger.debug(
                "remove_liquidity_rejected",
                reason="not_enough_tokens",
                withdraw_amount=lp_amount_out.raw,
                pool_capacity=self.lp_token_amount.raw,
            )
            raise NotEnoughTokens(
                withdraw_amount=lp_amount_out,
                pool_capacity=self.lp_token_amount,
            )

        # Nothing to burn; also avoids dividing by an empty LP supply
        if lp_amount_out.is_zero:
            return TokenAmount.zero(), StakedTokenAmount.zero()

        token_out_raw = self._pro_rata(self.token_amount.raw, lp_amount_out)
        staked_out_raw = self._pro_rata(self.st_token_amount.raw, lp_amount_out)
        if token_out_raw is None or staked_out_raw is None:
            logger.debug(
                "remove_liquidity_rejected",
                reason="withdraw_calculation_overflow",
                withdraw_amount=lp_amount_out.raw,
            )
            raise WithdrawCalculationOverflow()

        token_out = TokenAmount(token_out_raw)
        staked_out = StakedTokenAmount(staked_out_raw)

        new_token_amount = self.token_amount - token_out
        new_st_token_amount = self.st_token_amount - staked_out
        new_lp_token_amount = self.lp_token_amount - lp_amount_out

        self.token_amount = new_token_amount
        self.st_token_amount = new_st_token_amount
        self.lp_token_amount = new_lp_token_amount

        logger.debug(
            "remove_liquidity",
            lp_burned=lp_amount_out.raw,
            token_out=token_out.raw,
            staked_out=staked_out.raw,
            lp_token_amount=self.lp_token_amount.raw,
        )
        return token_out, staked_out

    def swap(self, swap_amount: StakedTokenAmount) -> TokenAmount:
        """Swap staked tokens for unstaked tokens.

        Args:
            swap_amount: Staked tokens provided by the caller

        Returns:
            Unstaked tokens granted to the caller, after the fee

        Raises:
            ZeroTokensAsArgument: If swap_amount is zero
            PoolNotEnoughTokens: If the pre-fee output exceeds the reserve. An
                output too large for 64 bits is reported as UINT64_MAX.
            SwapCalculationOverflow: If the staked reserve would not fit in 64 bits
        """
        amount_out, fee, new_st_token_amount = self._quote(swap_amount)

        new_token_amount = self.token_amount - amount_out

        self.token_amount = new_token_amount
        self.st_token_amount = new_st_token_amount

        logger.debug(
            "swap",
            staked_in=swap_amount.raw,
            token_out=amount_out.raw,
            fee=fee.raw,
            token_amount=self.token_amount.raw,
            st_token_amount=self.st_token_amount.raw,
        )
        return amount_out

    def quote_swap(self, swap_amount: StakedTokenAmount) -> TokenAmount:
        """Return what swap() would pay out, without changing the pool.

        Raises:
            ZeroTokensAsArgument: If swap_amount is zero
            PoolNotEnoughTokens: If the pre-fee output exceeds the reserve
            SwapCalculationOverflow: If the staked reserve would not fit in 64 bits
        """
        amount_out, _, _ = self._quote(swap_amount)
        return amount_out

    # =========================================================================
    # Queries
    # =========================================================================

    def total_value(self) -> TokenAmount:
        """Value of both reserves expressed in unstaked tokens."""
        return self.token_amount + self.st_token_amount.to_token_amount(self.price)

    def fee(self, amount_after: TokenAmount) -> Percentage:
        """Swap fee for a given reserve level after the swap.

        Args:
            amount_after: Unstaked token reserve left after the operation

        Raises:
            DivisionByZero: If liquidity_target is zero
        """
        if self.liquidity_target.is_zero:
            raise DivisionByZero("Fee curve requires a non-zero liquidity target")

        # Inverted bounds collapse the curve instead of underflowing
        spread = S(self.max_fee.raw).checked_sub(self.min_fee.raw) or S.zero()

        # Product may exceed 64 bits; it is capped at max_fee before use
        rhs = spread.value * amount_after.raw // self.liquidity_target.raw
        rhs = min(rhs, self.max_fee.raw)

        current_percentage = max(self.max_fee.raw - rhs, self.min_fee.raw)
        return Percentage(current_percentage)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _quote(
        self,
        swap_amount: StakedTokenAmount,
    ) -> tuple[TokenAmount, Percentage, StakedTokenAmount]:
        """Return (amount_out, fee, new staked reserve) for a swap."""
        if swap_amount.is_zero:
            logger.debug("swap_rejected", reason="zero_tokens_as_argument")
            raise ZeroTokensAsArgument()

        try:
            amount_out_before_fees = swap_amount.to_token_amount(self.price)
        except Overflow as err:
            # No reserve can cover a value past 64 bits
            raise self._not_enough_tokens(TokenAmount(UINT64_MAX)) from err

        # Sufficiency is checked on the pre-fee amount
        remaining = self.token_amount.checked_sub(amount_out_before_fees)
        if remaining is None:
            raise self._not_enough_tokens(amount_out_before_fees)

        try:
            new_st_token_amount = self.st_token_amount + swap_amount
        except Overflow as err:
            logger.debug(
                "swap_rejected",
                reason="swap_calculation_overflow",
                staked_in=swap_amount.raw,
                st_token_amount=self.st_token_amount.raw,
            )
            raise SwapCalculationOverflow() from err

        fee = self.fee(remaining)
        return amount_out_before_fees.apply_fee(fee), fee, new_st_token_amount

    def _not_enough_tokens(self, token_amount: TokenAmount) -> PoolNotEnoughTokens:
        logger.debug(
            "swap_rejected",
            reason="pool_not_enough_tokens",
            token_amount=token_amount.raw,
            pool_capacity=self.token_amount.raw,
        )
        return PoolNotEnoughTokens(token_amount=token_amount, pool_capacity=self.token_amount)

    def _pro_rata(self, reserve_raw: int, lp_amount_out: LpTokenAmount) -> int | None:
        """reserve * lp_amount_out / lp_supply, or None if the product overflows 64 bits."""
        product = S(reserve_raw).checked_mul(lp_amount_out.raw)
        if product is None:
            return None
        return (product // self.lp_token_amount.raw).value


def _validate_parameters(
    price: Price,
    min_fee: Percentage,
    max_fee: Percentage,
    liquidity_target: TokenAmount,
) -> None:
    """Reject parameters that make the pool unusable or the fee curve inverted."""
    problems = []
    if price.is_zero:
        problems.append("price must be positive")
    if liquidity_target.is_zero:
        problems.append("liquidity_target must be positive")
    if min_fee > max_fee:
        problems.append(f"min_fee {min_fee} exceeds max_fee {max_fee}")
    if max_fee.raw > Percentage.ONE:
        problems.append(f"max_fee {max_fee} exceeds 100%")

    if problems:
        logger.warning(
            "pool_parameters_rejected",
            price=price.raw,
            min_fee=min_fee.raw,
            max_fee=max_fee.raw,
            liquidity_target=liquidity_target.raw,
            problems=problems,
        )
        raise InvalidPoolParameters("; ".join(problems))
