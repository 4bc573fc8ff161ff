"""6-decimal fixed-point quantities.

All values are stored as unsigned 64-bit integers scaled by 10^6.
Example: 1.5 is stored as 1_500_000

Five quantity kinds share the representation but are distinct classes, so a
TokenAmount can never be added to a StakedTokenAmount by accident. Moving
between kinds always goes through an explicit conversion (for example
StakedTokenAmount.to_token_amount(price)).

Multiplication and division always truncate toward zero. Subtraction below
zero raises Underflow instead of wrapping.
"""

from __future__ import annotations

import math
from decimal import ROUND_DOWN, Decimal
from typing import ClassVar, TypeVar

from unstake_pool.safe_int import DivisionByZero, S

__all__ = [
    # Classes
    "Quantity",
    "TokenAmount",
    "StakedTokenAmount",
    "LpTokenAmount",
    "Price",
    "Percentage",
    # Constants
    "PRECISION",
    "SCALE",
]

# =============================================================================
# Constants
# =============================================================================

PRECISION = 6
SCALE = 10**PRECISION

Q = TypeVar("Q", bound="Quantity")


def _mul_div(a: int, b: int, denominator: int) -> int:
    """(a * b) // denominator, truncating.

    The intermediate product is exact; only the result has to fit in 64 bits,
    which the Quantity constructor enforces.

    Raises:
        DivisionByZero: If denominator is zero
    """
    if denominator == 0:
        raise DivisionByZero(f"Division by zero: {a} * {b} // 0")
    return a * b // denominator


# =============================================================================
# Shared base
# =============================================================================


class Quantity:
    """Non-negative fixed-point number stored as a scaled int.

    Subclasses only name the unit. Arithmetic and ordering are defined
    between two quantities of the same class; anything else raises
    TypeError.
    """

    ONE: ClassVar[int] = SCALE

    __slots__ = ("_raw",)

    def __init__(self, raw: int) -> None:
        """Create from raw scaled value.

        Raises:
            TypeError: If raw is not an int
            Underflow: If raw is negative
            Overflow: If raw does not fit in 64 bits
        """
        self._raw = S(raw).value

    # --- Construction ---

    @classmethod
    def from_raw(cls: type[Q], raw: int) -> Q:
        """Wrap a value already scaled by 10^6."""
        return cls(raw)

    @classmethod
    def from_int(cls: type[Q], units: int) -> Q:
        """Create from a whole number of units (scaled by 10^6).

        Raises:
            ValueError: If units is negative
            Overflow: If the scaled value does not fit in 64 bits
        """
        if units < 0:
            raise ValueError(f"{cls.__name__} cannot be negative: {units}")
        return cls((S(units) * cls.ONE).value)

    @classmethod
    def from_float(cls: type[Q], value: float) -> Q:
        """Create from a float, truncating toward zero.

        Lossy: anything below 10^-6 (and any binary representation error)
        is dropped, never rounded up.
        """
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"{cls.__name__} requires a finite non-negative value, got {value}")
        return cls(int(value * cls.ONE))

    @classmethod
    def from_decimal(cls: type[Q], d: Decimal) -> Q:
        """Create from a Decimal, truncating toward zero."""
        if not d.is_finite() or d < 0:
            raise ValueError(f"{cls.__name__} requires a finite non-negative value, got {d}")
        scaled = (d * cls.ONE).to_integral_value(rounding=ROUND_DOWN)
        return cls(int(scaled))

    @classmethod
    def zero(cls: type[Q]) -> Q:
        return cls(0)

    # --- Inspection ---

    @property
    def raw(self) -> int:
        """The scaled integer."""
        return self._raw

    @property
    def is_zero(self) -> bool:
        return self._raw == 0

    def to_decimal(self) -> Decimal:
        """Convert to Decimal for display (exact)."""
        return Decimal(self._raw) / Decimal(self.ONE)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._raw})"

    def __str__(self) -> str:
        return str(self.to_decimal())

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._raw))

    def __bool__(self) -> bool:
        return self._raw != 0

    # --- Arithmetic (same unit only) ---

    def _same_unit(self: Q, other: object, op: str) -> Q:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot {op} {type(self).__name__} and {type(other).__name__}; "
                "convert explicitly first"
            )
        return other  # type: ignore[return-value]

    def __add__(self: Q, other: Q) -> Q:
        """a + b. Raises Overflow past 64 bits."""
        other = self._same_unit(other, "add")
        return type(self)((S(self._raw) + other._raw).value)

    def __sub__(self: Q, other: Q) -> Q:
        """a - b. Raises Underflow when b > a."""
        other = self._same_unit(other, "subtract")
        return type(self)((S(self._raw) - other._raw).value)

    def checked_sub(self: Q, other: Q) -> Q | None:
        """a - b, or None when b > a."""
        other = self._same_unit(other, "subtract")
        result = S(self._raw).checked_sub(other._raw)
        if result is None:
            return None
        return type(self)(result.value)

    def __mul__(self: Q, other: Q) -> Q:
        """Fixed-point multiply with truncation: (a * b) // 10^6"""
        other = self._same_unit(other, "multiply")
        return type(self)(_mul_div(self._raw, other._raw, self.ONE))

    def __truediv__(self: Q, other: Q) -> Q:
        """Fixed-point divide with truncation: (a * 10^6) // b

        Raises:
            DivisionByZero: If other is zero
        """
        other = self._same_unit(other, "divide")
        return type(self)(_mul_div(self._raw, self.ONE, other._raw))

    # --- Comparison (same unit only) ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return type(other) is type(self) and self._raw == other._raw

    def __lt__(self: Q, other: Q) -> bool:
        return self._raw < self._same_unit(other, "compare")._raw

    def __le__(self: Q, other: Q) -> bool:
        return self._raw <= self._same_unit(other, "compare")._raw

    def __gt__(self: Q, other: Q) -> bool:
        return self._raw > self._same_unit(other, "compare")._raw

    def __ge__(self: Q, other: Q) -> bool:
        return self._raw >= self._same_unit(other, "compare")._raw


# =============================================================================
# Units
# =============================================================================


class Price(Quantity):
    """Price of one staked token in unstaked tokens."""

    __slots__ = ()


class Percentage(Quantity):
    """Fraction where ONE (10^6) is 100%."""

    __slots__ = ()


class TokenAmount(Quantity):
    """Amount of the unstaked (underlying) token."""

    __slots__ = ()

    def apply_fee(self, fee: Percentage) -> TokenAmount:
        """Amount left after charging fee: a * (1 - fee), truncating."""
        return TokenAmount(_mul_div(self._raw, (S(self.ONE) - fee.raw).value, self.ONE))

    def to_staked_amount(self, price: Price) -> StakedTokenAmount:
        """Staked tokens worth this amount at price, truncating."""
        return StakedTokenAmount(_mul_div(self._raw, self.ONE, price.raw))


class StakedTokenAmount(Quantity):
    """Amount of the staked token."""

    __slots__ = ()

    def to_token_amount(self, price: Price) -> TokenAmount:
        """Value of this amount in unstaked tokens at price, truncating."""
        return TokenAmount(_mul_div(self._raw, price.raw, self.ONE))


class LpTokenAmount(Quantity):
    """Amount of LP tokens."""

    __slots__ = ()
