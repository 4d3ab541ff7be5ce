#!/usr/bin/env python3
"""
Replay of a StepTrace, one step per advance().

The player never looks at the search itself: it folds the trace up to its
cursor into a per-cell color buffer that the viewer paints every frame.
"""

from enum import Enum
from typing import Dict, Optional, Tuple

from gridpath.core.types import Cell, Grid, Role, StepTrace

Color = Tuple[int, int, int]

# Colors
WHITE       = (255, 255, 255)
BLUE        = (  0,   0, 255)
ORANGE      = (255, 200,   0)
CYAN        = (  0, 255, 255)
GREY        = (100, 100, 100)
GREEN       = (  0, 255,   0)
MAGENTA     = (255,   0, 255)

WALL_COLOR      = WHITE
FLOOR_COLOR     = ORANGE     # unexplored
ENDPOINT_COLOR  = BLUE       # start / end, never recolored


class PlayerStatus(Enum):
    IDLE = "idle"           # no trace loaded
    RUNNING = "running"
    FINISHED = "finished"


def base_color(grid: Grid, c: Cell) -> Color:
    if grid.is_fixed(c):
        return ENDPOINT_COLOR
    return WALL_COLOR if grid.is_wall(c) else FLOOR_COLOR


class TracePlayer:
    def __init__(self, grid: Grid, path_color: Color = GREEN):
        self.grid = grid
        self.role_colors: Dict[Role, Color] = {
            Role.FRONTIER: CYAN,
            Role.SETTLED: GREY,
            Role.PATH: path_color,
        }
        self.trace: Optional[StepTrace] = None
        self.cursor = 0
        self._painted: Dict[Cell, Color] = {}

    # -------------------- lifecycle --------------------

    def reset(self, trace: StepTrace) -> None:
        """Load a new trace and rewind to its first step."""
        self.trace = trace
        self.cursor = 0
        self._painted.clear()

    def clear(self) -> None:
        self.trace = None
        self.cursor = 0
        self._painted.clear()

    @property
    def status(self) -> PlayerStatus:
        if self.trace is None:
            return PlayerStatus.IDLE
        if self.cursor >= len(self.trace):
            return PlayerStatus.FINISHED
        return PlayerStatus.RUNNING

    @property
    def finished(self) -> bool:
        return self.status is PlayerStatus.FINISHED

    # -------------------- playback --------------------

    def advance(self) -> PlayerStatus:
        """Apply the next step. A no-op once finished or when idle."""
        if self.status is not PlayerStatus.RUNNING:
            return self.status
        step = self.trace[self.cursor]
        if not self.grid.is_fixed(step.cell):
            self._painted[step.cell] = self.role_colors[step.role]
        self.cursor += 1
        return self.status

    def seek(self, index: int) -> None:
        """Rebuild the buffer as if advance() had been called index times."""
        if self.trace is None:
            return
        self.cursor = 0
        self._painted.clear()
        for _ in range(max(0, min(index, len(self.trace)))):
            self.advance()

    def color_of(self, c: Cell) -> Color:
        painted = self._painted.get(c)
        return painted if painted is not None else base_color(self.grid, c)
