"""
Strict parsing of textual swap arguments.

Turns raw command-line strings into the typed values the core expects.
Every failure is a ``ConfigError`` (or ``InvalidDirectionError`` for the
direction token) raised before the core is called.
"""

from __future__ import annotations

import re
from typing import Mapping, Optional

from ..core.errors import ConfigError
from ..core.types import Direction, PoolState, SwapRequest

# Leading whitespace is tolerated; anything after the number is not.
_NUMBER_RE = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(raw: Optional[str], *, name: str) -> float:
    """Parse ``raw`` as a float; the whole token must be numeric."""
    if raw is None or not raw.strip():
        raise ConfigError(f"Missing value for {name}")
    if _NUMBER_RE.fullmatch(raw) is None:
        raise ConfigError(f"Invalid number for {name}: {raw}")
    return float(raw)


def parse_direction(raw: Optional[str]) -> Direction:
    if raw is None or not raw.strip():
        raise ConfigError("Missing value for --direction")
    return Direction.parse(raw)


def parse_swap_request(values: Mapping[str, Optional[str]]) -> SwapRequest:
    """
    Build a ``SwapRequest`` from option-name -> raw-string pairs.

    Expected keys: ``--reserveA``, ``--reserveB``, ``--fee``,
    ``--direction``, ``--amountIn``. Range checks are left to the core so
    that each violation keeps its own rejection kind.
    """
    reserve_a = parse_number(values.get("--reserveA"), name="--reserveA")
    reserve_b = parse_number(values.get("--reserveB"), name="--reserveB")
    fee = parse_number(values.get("--fee"), name="--fee")
    direction = parse_direction(values.get("--direction"))
    amount_in = parse_number(values.get("--amountIn"), name="--amountIn")
    return SwapRequest(
        pool=PoolState(reserve_a=reserve_a, reserve_b=reserve_b, fee=fee),
        direction=direction,
        amount_in=amount_in,
    )
