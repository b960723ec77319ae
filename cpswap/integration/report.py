"""Text and JSON rendering of swap results.

Pure formatting: every function returns a string and never prices a trade.
Column widths and precisions are fixed so demo tables line up:
amounts/reserves 6 dp, effective price 8 dp, slippage 6 dp.
"""

from __future__ import annotations

import json
from typing import Sequence

from ..core.types import Direction, PoolState, SwapResult

TABLE_WIDTH = 100

CONCLUSIONS = (
    "- Slippage grows non-linearly with trade size (big trades move reserves a lot).",
    "- Effective price is always worse than spot because of fee + price impact.",
    "- Larger pools (more liquidity) mean smaller slippage for the same amountIn.",
)


def format_demo_title(pool: PoolState, direction: Direction) -> str:
    return (
        f"Demo: reserveA={pool.reserve_a:g}, reserveB={pool.reserve_b:g}, "
        f"fee={pool.fee:g}, direction={direction}"
    )


def format_header() -> str:
    header = (
        f"{'Scenario':<10}{'Dir':<6}"
        f"{'amountIn':>12}{'amountOut':>14}{'newResA':>14}{'newResB':>14}"
        f"{'effPrice':>16}{'slip(%)':>14}"
    )
    return header + "\n" + "-" * TABLE_WIDTH


def format_row(name: str, direction: Direction, amount_in: float, result: SwapResult) -> str:
    return (
        f"{name:<10}{str(direction):<6}"
        f"{amount_in:>12.6f}"
        f"{result.amount_out:>14.6f}"
        f"{result.new_reserve_a:>14.6f}"
        f"{result.new_reserve_b:>14.6f}"
        f"{result.effective_price:>16.8f}"
        f"{result.slippage_percent:>14.6f}"
    )


def format_demo(
    pool: PoolState,
    direction: Direction,
    rows: Sequence[tuple[str, float, SwapResult]],
) -> str:
    """Full demo report: title, table and the closing conclusions."""
    lines = [format_demo_title(pool, direction), "", format_header()]
    lines.extend(format_row(name, direction, amount_in, result) for name, amount_in, result in rows)
    lines.extend(["", "Conclusions:", *CONCLUSIONS])
    return "\n".join(lines)


def format_result(result: SwapResult) -> str:
    return "\n".join(
        [
            f"amountOut       = {result.amount_out:.10f}",
            f"new reserveA    = {result.new_reserve_a:.10f}",
            f"new reserveB    = {result.new_reserve_b:.10f}",
            f"effective price = {result.effective_price:.10f}",
            f"slippage (%)    = {result.slippage_percent:.6f}",
        ]
    )


def result_to_json(result: SwapResult) -> str:
    return json.dumps(result.to_dict(), indent=2, sort_keys=True)


def demo_to_json(
    pool: PoolState,
    direction: Direction,
    rows: Sequence[tuple[str, float, SwapResult]],
) -> str:
    doc = {
        "pool": {"reserve_a": pool.reserve_a, "reserve_b": pool.reserve_b, "fee": pool.fee},
        "direction": str(direction),
        "scenarios": [
            {"name": name, "amount_in": amount_in, **result.to_dict()}
            for name, amount_in, result in rows
        ],
    }
    return json.dumps(doc, indent=2, sort_keys=True)
