#!/usr/bin/env python3
"""
Viewer configuration.

Defaults below, overridable by environment and then by CLI:
- GRIDPATH_GRID_SIZE / --size=N        grid is N x N (start top-left, end bottom-right)
- GRIDPATH_METRIC    / --metric=NAME   octile | uniform
- GRIDPATH_DELAY_MS  / --delay=MS      ms between animation steps
- GRIDPATH_LOG_LEVEL / --log=LEVEL     logging level name
"""

import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from gridpath.core.costs import COST_MODELS, CostModel, cost_model

GRID_SIZE = 20
CELL_SIZE = 25           # px per cell
MARGIN = 10              # around grid and panel
PANEL_SPACING = 10
BUTTON_PADDING = 20
PANEL_W = 200            # right band: buttons + metrics
ANIMATION_DELAY_MS = 20
FPS = 60
MIN_GRID_SIZE = 2
MAX_GRID_SIZE = 100
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

_ENV_KEYS = {
    "size": "GRIDPATH_GRID_SIZE",
    "metric": "GRIDPATH_METRIC",
    "delay": "GRIDPATH_DELAY_MS",
    "log": "GRIDPATH_LOG_LEVEL",
}


@dataclass(frozen=True)
class Settings:
    grid_size: int = GRID_SIZE
    metric: str = "octile"
    delay_ms: int = ANIMATION_DELAY_MS
    log_level: str = "INFO"

    @property
    def model(self) -> CostModel:
        return cost_model(self.metric)


def _int(name: str, raw: str, lo: int, hi: int) -> int:
    try:
        v = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if not lo <= v <= hi:
        raise ValueError(f"{name} must be in [{lo}, {hi}], got {v}")
    return v


def resolve_settings(argv: Optional[Sequence[str]] = None,
                     environ: Optional[Mapping[str, str]] = None) -> Settings:
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ

    raw = {k: environ[env] for k, env in _ENV_KEYS.items() if environ.get(env)}
    for arg in argv:
        for k in _ENV_KEYS:
            if arg.startswith(f"--{k}="):
                raw[k] = arg.split("=", 1)[1]

    size = _int("grid size", raw["size"], MIN_GRID_SIZE, MAX_GRID_SIZE) if "size" in raw else GRID_SIZE
    delay = _int("delay", raw["delay"], 1, 1000) if "delay" in raw else ANIMATION_DELAY_MS
    metric = raw.get("metric", "octile").lower()
    if metric not in COST_MODELS:
        raise ValueError(f"unknown metric {metric!r} (expected one of {sorted(COST_MODELS)})")
    level = raw.get("log", "INFO").upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"unknown log level {level!r} (expected one of {sorted(LOG_LEVELS)})")

    return Settings(grid_size=size, metric=metric, delay_ms=delay, log_level=level)


def export_env(settings: Settings, environ=None) -> None:
    """Write settings back as env vars, so a separately started viewer picks them up."""
    environ = os.environ if environ is None else environ
    environ[_ENV_KEYS["size"]] = str(settings.grid_size)
    environ[_ENV_KEYS["metric"]] = settings.metric
    environ[_ENV_KEYS["delay"]] = str(settings.delay_ms)
    environ[_ENV_KEYS["log"]] = settings.log_level
