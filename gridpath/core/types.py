#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from math import inf
from typing import Dict, FrozenSet, Iterator, List, Optional, Set, Tuple

Cell = Tuple[int, int]  # (col, row)

# expansion order; fixed so traces are reproducible
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 0), (0, 1), (-1, 0), (0, -1),
    (1, 1), (-1, 1), (1, -1), (-1, -1),
)


class InvariantViolation(AssertionError):
    """Raised when the engine reaches a state a correct search can never produce."""


class Role(Enum):
    FRONTIER = "frontier"   # cost improved, (re)queued
    SETTLED = "settled"     # popped with a final cost
    PATH = "path"           # on the reconstructed path


@dataclass(frozen=True)
class Step:
    cell: Cell
    role: Role


class StepTrace:
    """Immutable, ordered replay log of one run: search steps, then path steps."""

    __slots__ = ("_steps",)

    def __init__(self, steps=()):
        self._steps: Tuple[Step, ...] = tuple(steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, i: int) -> Step:
        return self._steps[i]

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __eq__(self, other) -> bool:
        return isinstance(other, StepTrace) and self._steps == other._steps

    def __hash__(self) -> int:
        return hash(self._steps)

    def __repr__(self) -> str:
        return f"StepTrace({len(self._steps)} steps)"

    def extend(self, steps) -> "StepTrace":
        return StepTrace(self._steps + tuple(steps))

    def count(self, role: Role) -> int:
        return sum(1 for s in self._steps if s.role is role)

    def cells(self, role: Role) -> List[Cell]:
        return [s.cell for s in self._steps if s.role is role]


@dataclass
class SearchResult:
    algo: str
    start: Cell
    end: Cell
    cost: Dict[Cell, float] = field(default_factory=dict)     # best known g
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    settled: List[Cell] = field(default_factory=list)        # expansion order

    def cost_of(self, c: Cell) -> float:
        return self.cost.get(c, inf)

    def parent_of(self, c: Cell) -> Optional[Cell]:
        return self.parent.get(c)

    @property
    def reached_end(self) -> bool:
        return self.cost_of(self.end) < inf


class Grid:
    """N x N wall mask with fixed start and end cells.

    Start and end default to opposite corners and can never become walls:
    toggling them is a silent no-op.
    """

    def __init__(self, size: int, start: Optional[Cell] = None, end: Optional[Cell] = None):
        if size < 2:
            raise ValueError(f"grid size must be >= 2, got {size}")
        self.size = size
        self.start: Cell = tuple(start) if start is not None else (0, 0)
        self.end: Cell = tuple(end) if end is not None else (size - 1, size - 1)
        if not self.in_bounds(self.start):
            raise ValueError(f"start {self.start} out of bounds")
        if not self.in_bounds(self.end):
            raise ValueError(f"end {self.end} out of bounds")
        if self.start == self.end:
            raise ValueError("start and end must differ")
        self._walls: Set[Cell] = set()

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.size and 0 <= y < self.size

    def is_wall(self, c: Cell) -> bool:
        if not self.in_bounds(c):
            raise InvariantViolation(f"cell {c} outside {self.size}x{self.size} grid")
        return c in self._walls

    def is_fixed(self, c: Cell) -> bool:
        return c == self.start or c == self.end

    def toggle_wall(self, c: Cell) -> bool:
        """Flip c between wall and floor. Returns False when nothing changed."""
        c = tuple(c)
        return self.set_wall(c, not self.is_wall(c))

    def set_wall(self, c: Cell, value: bool) -> bool:
        c = tuple(c)
        if self.is_fixed(c) or self.is_wall(c) == value:
            return False
        if value:
            self._walls.add(c)
        else:
            self._walls.discard(c)
        return True

    def clear_walls(self) -> None:
        self._walls.clear()

    def walls(self) -> FrozenSet[Cell]:
        return frozenset(self._walls)

    def cells(self) -> Iterator[Cell]:
        for row in range(self.size):
            for col in range(self.size):
                yield (col, row)

    def neighbors(self, c: Cell) -> List[Cell]:
        """Open 8-connected neighbours of c. Diagonals never check the flanking cells."""
        x, y = c
        out: List[Cell] = []
        for dx, dy in DIRECTIONS:
            n = (x + dx, y + dy)
            if self.in_bounds(n) and n not in self._walls:
                out.append(n)
        return out
