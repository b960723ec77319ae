"""
cpswap: single-swap pricing for two-asset constant-product pools.

Public API:
- `get_amount_out(amount_in, reserve_in, reserve_out, fee) -> float`
- `simulate_swap(pool, direction, amount_in) -> SwapResult` (raises on rejection)
- `evaluate(pool, direction, amount_in) -> SwapOutcome` (tagged result)
"""

from .core import (
    ConfigError,
    Direction,
    InvalidAmountError,
    InvalidDirectionError,
    InvalidFeeError,
    InvalidPoolError,
    PoolDrainError,
    PoolState,
    Rejection,
    SwapOutcome,
    SwapRejectedError,
    SwapRequest,
    SwapResult,
    evaluate,
    get_amount_out,
    simulate,
    simulate_swap,
)

__version__ = "0.1.0"

__all__ = [
    "get_amount_out",
    "simulate_swap",
    "simulate",
    "evaluate",
    "Direction",
    "PoolState",
    "SwapRequest",
    "SwapResult",
    "SwapOutcome",
    "Rejection",
    "SwapRejectedError",
    "InvalidPoolError",
    "InvalidFeeError",
    "InvalidAmountError",
    "InvalidDirectionError",
    "PoolDrainError",
    "ConfigError",
]
