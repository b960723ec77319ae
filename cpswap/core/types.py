"""Data types for the swap simulator.

All records are frozen dataclasses (immutable). A swap never mutates its
input pool; ``PoolState.apply()`` builds the post-trade pool instead.

Units/conventions:
- reserves and amounts are plain floats in token units (no decimals scaling).
- ``fee`` is a fraction of the input amount, e.g. ``0.003`` for 0.3%.
- prices are "out-asset per in-asset" for the trade's direction.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import Any

from .errors import InvalidDirectionError, Rejection

_DIRECTION_ALIASES = {
    "A2B": "A2B",
    "A_TO_B": "A2B",
    "B2A": "B2A",
    "B_TO_A": "B2A",
}


@unique
class Direction(Enum):
    """Which reserve the trader pays into."""
    A_TO_B = "A2B"
    B_TO_A = "B2A"

    @classmethod
    def parse(cls, token: Any) -> Direction:
        """Normalize a direction token (case-insensitive) to a ``Direction``."""
        if isinstance(token, Direction):
            return token
        if not isinstance(token, str):
            raise InvalidDirectionError("direction must be A2B or B2A")
        canonical = _DIRECTION_ALIASES.get(token.upper())
        if canonical is None:
            raise InvalidDirectionError("direction must be A2B or B2A")
        return cls(canonical)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SwapResult:
    """Outcome of one priced swap."""

    amount_out: float
    new_reserve_a: float
    new_reserve_b: float
    effective_price: float
    slippage_percent: float

    def to_dict(self) -> dict[str, float]:
        return {
            "amount_out": self.amount_out,
            "new_reserve_a": self.new_reserve_a,
            "new_reserve_b": self.new_reserve_b,
            "effective_price": self.effective_price,
            "slippage_percent": self.slippage_percent,
        }


@dataclass(frozen=True)
class PoolState:
    """Two-asset reserves of a constant-product pool just before a trade."""

    reserve_a: float
    reserve_b: float
    fee: float

    def apply(self, result: SwapResult) -> PoolState:
        """Return the pool left behind by ``result`` (same fee)."""
        return PoolState(
            reserve_a=result.new_reserve_a,
            reserve_b=result.new_reserve_b,
            fee=self.fee,
        )


@dataclass(frozen=True)
class SwapRequest:
    """Everything needed to price one trade."""

    pool: PoolState
    direction: Direction
    amount_in: float


@dataclass(frozen=True)
class SwapOutcome:
    """Tagged result of ``evaluate()``: a result or a rejection, never both."""

    accepted: bool
    result: SwapResult | None = None
    rejection: Rejection | None = None
    reason: str | None = None
