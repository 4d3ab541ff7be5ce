#!/usr/bin/env python3
"""
Session — the state the viewer drives.

Owns the grid, one TracePlayer per algorithm, the status message and the
metrics of the last run. Policy (not a player invariant): only one animation
is live at a time, so any run or wall edit clears both players.
"""

import logging
from typing import Any, Dict, Optional

from gridpath.core.costs import OCTILE, CostModel
from gridpath.core.path import Solution, solve
from gridpath.core.player import (
    GREEN, MAGENTA, Color, PlayerStatus, TracePlayer, base_color,
)
from gridpath.core.search import ALGORITHMS
from gridpath.core.types import Cell, Grid, Role

logger = logging.getLogger(__name__)

PATH_COLORS: Dict[str, Color] = {"Dijkstra": GREEN, "A*": MAGENTA}

MIN_DELAY_MS = 1
MAX_DELAY_MS = 1000


def empty_metrics(algo: Optional[str] = None) -> Dict[str, Any]:
    return {
        "algo": algo,
        "settled": 0,
        "frontier": 0,
        "path_len": 0,
        "total_cost": None,
        "steps": 0,
    }


class Session:
    def __init__(self, grid: Grid, model: CostModel = OCTILE, delay_ms: int = 20):
        self.grid = grid
        self.model = model
        self.players: Dict[str, TracePlayer] = {
            name: TracePlayer(grid, path_color=PATH_COLORS.get(name, GREEN)) for name in ALGORITHMS
        }
        self.live: Optional[str] = None
        self.message = ""
        self.metrics: Dict[str, Any] = empty_metrics()
        self.solution: Optional[Solution] = None
        self.delay_ms = delay_ms
        self.paused = False
        self._last_advance_ms: Optional[int] = None

    # -------------------- grid edits --------------------

    def toggle_wall(self, c: Cell) -> bool:
        changed = self.grid.toggle_wall(c)
        self._clear_runs()
        return changed

    def set_wall(self, c: Cell, value: bool) -> bool:
        changed = self.grid.set_wall(c, value)
        if changed:
            self._clear_runs()
        return changed

    def clear_walls(self) -> None:
        self.grid.clear_walls()
        self._clear_runs()

    def _clear_runs(self) -> None:
        for p in self.players.values():
            p.clear()
        self.live = None
        self.message = ""
        self.metrics = empty_metrics()
        self.solution = None
        self.paused = False

    # -------------------- runs --------------------

    def run(self, algo: str, now_ms: Optional[int] = None) -> Solution:
        """Solve with algo and start its animation; any previous animation is dropped.

        The replay clock starts at now_ms, or at the first tick() when omitted,
        so the first step shows one delay later.
        """
        self._clear_runs()
        sol = solve(self.grid, algo, self.model)

        self.solution = sol
        self.live = algo
        self.players[algo].reset(sol.trace)
        self._last_advance_ms = now_ms
        if not sol.found:
            self.message = f"{algo}: No Path Found!"

        self.metrics = {
            "algo": algo,
            "settled": len(sol.result.settled),
            "frontier": sol.trace.count(Role.FRONTIER),
            "path_len": len(sol.path) if sol.path else 0,
            "total_cost": sol.cost,
            "steps": len(sol.trace),
        }
        logger.debug("run %s (%s): %s", algo, self.model.name, self.metrics)
        return sol

    @property
    def live_player(self) -> Optional[TracePlayer]:
        return self.players[self.live] if self.live else None

    @property
    def status(self) -> PlayerStatus:
        p = self.live_player
        return p.status if p else PlayerStatus.IDLE

    # -------------------- pacing --------------------

    def set_delay(self, delay_ms: int) -> None:
        self.delay_ms = int(max(MIN_DELAY_MS, min(MAX_DELAY_MS, delay_ms)))

    def tick(self, now_ms: int) -> bool:
        """Advance the live player by one step if its interval has elapsed."""
        p = self.live_player
        if p is None or self.paused or p.status is not PlayerStatus.RUNNING:
            return False
        if self._last_advance_ms is None:
            self._last_advance_ms = now_ms
            return False
        if now_ms - self._last_advance_ms < self.delay_ms:
            return False
        self._last_advance_ms = now_ms
        p.advance()
        return True

    def step_once(self) -> bool:
        p = self.live_player
        if p is None or p.status is not PlayerStatus.RUNNING:
            return False
        p.advance()
        return True

    def skip_to_end(self) -> None:
        p = self.live_player
        if p is not None and p.trace is not None:
            p.seek(len(p.trace))

    def color_of(self, c: Cell) -> Color:
        p = self.live_player
        return p.color_of(c) if p else base_color(self.grid, c)
