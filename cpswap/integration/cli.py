"""
Command-line front end for the swap simulator.

Modes (first match wins):
- ``--help``: print usage, exit 0
- no arguments or ``--demo``: run the demo scenarios
- otherwise: price one swap from ``--reserveA/--reserveB/--fee/--direction/--amountIn``

Any rejected input prints ``Error: <message>`` to stderr and exits 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Optional, Sequence

from ..core.errors import ConfigError, SwapRejectedError
from ..core.swap import simulate, simulate_swap
from ..core.types import SwapResult
from . import report
from .args import parse_swap_request
from .scenarios import DemoConfig, load_demo_config

logger = logging.getLogger(__name__)

PROG = "cpswap"

SWAP_OPTIONS = ("--reserveA", "--reserveB", "--fee", "--direction", "--amountIn")


def usage(prog: str = PROG) -> str:
    return (
        "Usage:\n"
        f"  {prog} --reserveA <num> --reserveB <num> --fee <num> --direction A2B|B2A --amountIn <num>\n"
        f"  {prog} --demo [--config PATH]\n\n"
        "Options:\n"
        "  --json           print results as JSON\n"
        "  -v, --verbose    debug logging to stderr\n\n"
        "Note:\n"
        "  If you run without arguments, program runs demo mode by default.\n\n"
        "Examples:\n"
        f"  {prog} --demo\n"
        f"  {prog} --reserveA 10000 --reserveB 10000 --fee 0.003 --direction A2B --amountIn 100\n"
    )


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise ConfigError(message)


def build_parser() -> argparse.ArgumentParser:
    ap = _ArgumentParser(prog=PROG, add_help=False, allow_abbrev=False)
    ap.add_argument("-h", "--help", action="store_true")
    ap.add_argument("--demo", action="store_true")
    ap.add_argument("--config", type=str, default=None)
    ap.add_argument("--json", action="store_true")
    ap.add_argument("-v", "--verbose", action="store_true")
    for opt in SWAP_OPTIONS:
        ap.add_argument(opt, dest=opt, type=str, default=None)
    return ap


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def run_demo(config: DemoConfig) -> list[tuple[str, float, SwapResult]]:
    """Price every demo scenario independently against the configured pool."""
    rows = []
    for scenario in config.scenarios:
        amount_in = scenario.amount_in(config.pool)
        result = simulate_swap(config.pool, config.direction, amount_in)
        logger.debug(
            "scenario %s: amount_in=%s slippage=%.6f%%",
            scenario.name,
            amount_in,
            result.slippage_percent,
        )
        rows.append((scenario.name, amount_in, result))
    return rows


def _main(args: argparse.Namespace) -> int:
    if args.demo or not any(getattr(args, opt) is not None for opt in SWAP_OPTIONS):
        config = load_demo_config(args.config)
        rows = run_demo(config)
        if args.json:
            print(report.demo_to_json(config.pool, config.direction, rows))
        else:
            print(report.format_demo(config.pool, config.direction, rows))
        return 0

    request = parse_swap_request({opt: getattr(args, opt) for opt in SWAP_OPTIONS})
    result = simulate(request)
    print(report.result_to_json(result) if args.json else report.format_result(result))
    return 0


def _bind_swap_values(raw: Sequence[str]) -> list[str]:
    """Rewrite ``--opt value`` as ``--opt=value`` for swap options.

    argparse refuses dash-prefixed values it does not read as negative
    numbers (``-1e-3``); bound values reach the strict number parser instead.
    """
    bound: list[str] = []
    i = 0
    while i < len(raw):
        tok = raw[i]
        if tok in SWAP_OPTIONS and i + 1 < len(raw):
            bound.append(f"{tok}={raw[i + 1]}")
            i += 2
            continue
        bound.append(tok)
        i += 1
    return bound


def main(argv: Optional[Sequence[str]] = None) -> int:
    raw = _bind_swap_values(sys.argv[1:] if argv is None else argv)
    try:
        args = build_parser().parse_args(raw)
        if args.help:
            print(usage())
            return 0
        _configure_logging(args.verbose)
        return _main(args)
    except SwapRejectedError as exc:
        logger.info("swap rejected (%s): %s", exc.kind.value, exc)
        err = str(exc)
    except ValueError as exc:
        err = str(exc)
    print(f"Error: {err}", file=sys.stderr)
    print("Run with --help for usage.", file=sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
