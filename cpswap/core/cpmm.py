"""
Constant Product Market Maker (CPMM) pricing.

This module implements the quote side of a two-asset constant-product pool:
the output amount for an exact input, with the trading fee deducted from the
input before the curve is applied (Uniswap-v2-style).

Algorithm Design:
- Type: Binary floating point (IEEE-754 double), no rounding rules
- Time Complexity: O(1) per quote
- Space Complexity: O(1) auxiliary
- Invariant: (reserve_in + amount_in) * (reserve_out - amount_out) >= k,
  with equality when fee == 0 (the fee stays in the pool)

This is a pricing simulator, not a ledger: it is not suitable for
fixed-point or integer on-chain accounting.
"""

from __future__ import annotations

import math

from .errors import InvalidAmountError, InvalidFeeError, InvalidPoolError


def is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0.0


def get_amount_out(
    amount_in: float,
    reserve_in: float,
    reserve_out: float,
    fee: float,
) -> float:
    """
    Compute the output amount for an exact-in swap.

    This implements the CPMM formula:
        amount_in_with_fee = amount_in * (1 - fee)
        amount_out = amount_in_with_fee * reserve_out / (reserve_in + amount_in_with_fee)

    The result approaches ``reserve_out`` asymptotically as ``amount_in``
    grows and is strictly concave in ``amount_in`` (price impact).

    Args:
        amount_in: Exact input amount paid into the pool
        reserve_in: Current reserve of the input asset
        reserve_out: Current reserve of the output asset
        fee: Proportional fee in [0, 1), e.g. 0.003 for 0.3%

    Returns:
        Output amount (always strictly below ``reserve_out``)

    Raises:
        InvalidAmountError: If amount_in is not a positive finite number
        InvalidPoolError: If either reserve is not a positive finite number
        InvalidFeeError: If fee is outside [0, 1)
    """
    if not is_positive(amount_in):
        raise InvalidAmountError("amountIn must be > 0")
    if not (is_positive(reserve_in) and is_positive(reserve_out)):
        raise InvalidPoolError("reserves must be > 0")
    if not (0.0 <= fee < 1.0):
        raise InvalidFeeError("fee must be in [0, 1)")

    # 0.3% fee => 99.7% of the input is priced against the curve.
    amount_in_with_fee = amount_in * (1.0 - fee)
    return (amount_in_with_fee * reserve_out) / (reserve_in + amount_in_with_fee)


def spot_price(reserve_in: float, reserve_out: float) -> float:
    """Marginal price before a trade, in out-asset per in-asset."""
    if not (is_positive(reserve_in) and is_positive(reserve_out)):
        raise InvalidPoolError("reserves must be > 0")
    return reserve_out / reserve_in


def constant_product(reserve_a: float, reserve_b: float) -> float:
    return reserve_a * reserve_b
