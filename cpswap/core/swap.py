"""Swap simulator for a two-asset constant-product pool.

``simulate_swap(pool, direction, amount_in)`` is the single entry point. It:

1. Validates the pool reserves and normalizes the direction token.
2. Resolves the direction into a (reserve_in, reserve_out) pair.
3. Prices the trade with ``cpmm.get_amount_out``.
4. Rejects trades that would drain the opposing reserve.
5. Returns a ``SwapResult`` with the post-trade reserves and price metrics.

``evaluate()`` runs the same steps but returns a ``SwapOutcome`` instead of
raising. Nothing is retained between calls.
"""

from __future__ import annotations

from .cpmm import is_positive, get_amount_out, spot_price
from .errors import InvalidPoolError, PoolDrainError, SwapRejectedError
from .types import Direction, PoolState, SwapOutcome, SwapRequest, SwapResult

# Fraction of the out-side reserve that must remain after any accepted trade.
MIN_RESERVE_LEFT: float = 1e-6


def _resolve(pool: PoolState, direction: Direction) -> tuple[float, float]:
    if direction is Direction.A_TO_B:
        return pool.reserve_a, pool.reserve_b
    return pool.reserve_b, pool.reserve_a


def simulate_swap(
    pool: PoolState,
    direction: Direction | str,
    amount_in: float,
) -> SwapResult:
    """
    Price one exact-in swap against ``pool``.

    Spot price before the trade (P0) is reserve_out / reserve_in:
      - A2B: reserve_b / reserve_a (B per A)
      - B2A: reserve_a / reserve_b (A per B)
    Effective price is amount_out / amount_in in the same units, and
    slippage% = (P0 - effective) / P0 * 100, unclamped.

    Raises:
        InvalidPoolError: Non-positive reserve(s).
        InvalidDirectionError: Unknown direction token.
        InvalidAmountError: Non-positive amount_in.
        InvalidFeeError: Fee outside [0, 1).
        PoolDrainError: The trade would empty the opposing reserve.
    """
    if not (is_positive(pool.reserve_a) and is_positive(pool.reserve_b)):
        raise InvalidPoolError("reserveA and reserveB must be > 0")

    side = Direction.parse(direction)
    reserve_in, reserve_out = _resolve(pool, side)
    p0 = spot_price(reserve_in, reserve_out)

    out = get_amount_out(amount_in, reserve_in, reserve_out, pool.fee)
    if not (out < reserve_out * (1.0 - MIN_RESERVE_LEFT)):
        raise PoolDrainError("amountOut would drain the pool (invalid trade)")

    if side is Direction.A_TO_B:
        new_a, new_b = pool.reserve_a + amount_in, pool.reserve_b - out
    else:
        new_a, new_b = pool.reserve_a - out, pool.reserve_b + amount_in

    effective = out / amount_in
    return SwapResult(
        amount_out=out,
        new_reserve_a=new_a,
        new_reserve_b=new_b,
        effective_price=effective,
        slippage_percent=(p0 - effective) / p0 * 100.0,
    )


def simulate(request: SwapRequest) -> SwapResult:
    """Like ``simulate_swap()`` but takes a ``SwapRequest``."""
    return simulate_swap(request.pool, request.direction, request.amount_in)


def evaluate(
    pool: PoolState,
    direction: Direction | str,
    amount_in: float,
) -> SwapOutcome:
    """Like ``simulate_swap()`` but returns a tagged outcome instead of raising.

    Returns ``SwapOutcome`` with ``accepted=True`` and the result on success,
    or ``accepted=False`` with the ``Rejection`` kind and message.
    """
    try:
        result = simulate_swap(pool, direction, amount_in)
    except SwapRejectedError as exc:
        return SwapOutcome(accepted=False, rejection=exc.kind, reason=exc.message)
    return SwapOutcome(accepted=True, result=result)
