"""Exception types for the swap simulator.

Raised by ``simulate_swap()`` in ``swap.py`` and by the quote function in
``cpmm.py``. Callers that prefer a tagged result over exceptions should use
``evaluate()``, which reports the same failures as a ``Rejection`` kind.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class Rejection(Enum):
    """One member per rejected-input error kind."""
    INVALID_POOL = "invalid_pool"
    INVALID_FEE = "invalid_fee"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_DIRECTION = "invalid_direction"
    POOL_DRAIN = "pool_drain"


class SwapRejectedError(ValueError):
    """Base class for every rejected swap input."""

    kind: Rejection

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidPoolError(SwapRejectedError):
    """Raised when one or both reserves are not positive."""

    kind = Rejection.INVALID_POOL


class InvalidFeeError(SwapRejectedError):
    """Raised when the fee is outside ``[0, 1)``."""

    kind = Rejection.INVALID_FEE


class InvalidAmountError(SwapRejectedError):
    """Raised when ``amount_in`` is not positive."""

    kind = Rejection.INVALID_AMOUNT


class InvalidDirectionError(SwapRejectedError):
    """Raised when a direction token is not recognised."""

    kind = Rejection.INVALID_DIRECTION


class PoolDrainError(SwapRejectedError):
    """Raised when individually valid inputs would empty the opposing reserve."""

    kind = Rejection.POOL_DRAIN


class ConfigError(ValueError):
    """Raised when CLI arguments or demo configuration are malformed."""
