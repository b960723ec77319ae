"""
Demo scenario configuration.

The canned demonstration is data: a pool, a direction and a list of named
trade sizes expressed as fractions of ``reserve_a``. It is read from YAML,
looked up in this order:

1. an explicit path (``--config``),
2. the ``CPSWAP_DEMO_CONFIG`` environment variable,
3. the packaged ``demo.yaml``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..core.errors import ConfigError, InvalidDirectionError
from ..core.types import Direction, PoolState

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CPSWAP_DEMO_CONFIG"


def default_config_path() -> Path:
    # cpswap/integration/scenarios.py -> cpswap/integration/demo.yaml
    return Path(__file__).resolve().parent / "demo.yaml"


@dataclass(frozen=True)
class Scenario:
    name: str
    fraction: float

    def amount_in(self, pool: PoolState) -> float:
        return pool.reserve_a * self.fraction


@dataclass(frozen=True)
class DemoConfig:
    pool: PoolState
    direction: Direction
    scenarios: tuple[Scenario, ...]


def _require_number(value: Any, *, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{name} must be a number")
    return float(value)


def _require_mapping(value: Any, *, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigError(f"{name} must be a mapping")
    return value


def config_from_dict(data: Any) -> DemoConfig:
    """
    Validate a decoded YAML document and build a ``DemoConfig``.

    Only the shape is checked here; reserve and fee ranges are enforced by
    the core when each scenario is simulated.

    Raises:
        ConfigError: If a key is missing or has the wrong type
    """
    root = _require_mapping(data, name="config")
    pool_raw = _require_mapping(root.get("pool"), name="pool")
    pool = PoolState(
        reserve_a=_require_number(pool_raw.get("reserve_a"), name="pool.reserve_a"),
        reserve_b=_require_number(pool_raw.get("reserve_b"), name="pool.reserve_b"),
        fee=_require_number(pool_raw.get("fee"), name="pool.fee"),
    )

    try:
        direction = Direction.parse(root.get("direction"))
    except InvalidDirectionError as exc:
        raise ConfigError(f"direction: {exc}") from None

    items = root.get("scenarios")
    if not isinstance(items, list) or not items:
        raise ConfigError("scenarios must be a non-empty list")

    scenarios = []
    for i, item in enumerate(items):
        entry = _require_mapping(item, name=f"scenarios[{i}]")
        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise ConfigError(f"scenarios[{i}].name must be a non-empty string")
        fraction = _require_number(entry.get("fraction"), name=f"scenarios[{i}].fraction")
        if not fraction > 0.0:
            raise ConfigError(f"scenarios[{i}].fraction must be > 0")
        scenarios.append(Scenario(name=name, fraction=fraction))

    return DemoConfig(pool=pool, direction=direction, scenarios=tuple(scenarios))


def resolve_config_path(path: Optional[str] = None) -> Path:
    if path:
        return Path(path)
    raw = os.environ.get(CONFIG_ENV_VAR)
    if raw is not None and raw.strip():
        return Path(raw.strip())
    return default_config_path()


def load_demo_config(path: Optional[str] = None) -> DemoConfig:
    """Load and validate the demo configuration (see module docstring for lookup order)."""
    resolved = resolve_config_path(path)
    logger.debug("loading demo config from %s", resolved)
    try:
        text = resolved.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read demo config {resolved}: {exc.strerror}") from None
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {resolved}: {exc}") from None
    config = config_from_dict(data)
    logger.debug("demo config has %d scenario(s)", len(config.scenarios))
    return config
