"""
Core swap-pricing algorithms
"""

from .cpmm import constant_product, get_amount_out, spot_price
from .errors import (
    ConfigError,
    InvalidAmountError,
    InvalidDirectionError,
    InvalidFeeError,
    InvalidPoolError,
    PoolDrainError,
    Rejection,
    SwapRejectedError,
)
from .swap import MIN_RESERVE_LEFT, evaluate, simulate, simulate_swap
from .types import Direction, PoolState, SwapOutcome, SwapRequest, SwapResult

__all__ = [
    "get_amount_out",
    "spot_price",
    "constant_product",
    "simulate_swap",
    "simulate",
    "evaluate",
    "MIN_RESERVE_LEFT",
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
