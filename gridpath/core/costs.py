#!/usr/bin/env python3
"""
Movement costs and heuristics for 8-connected grids.

A CostModel bundles the diagonal step cost with the heuristic that stays
admissible for it. Searches only ever take both from the same model:
- OCTILE:  diagonal = sqrt(2), h = octile distance
- UNIFORM: diagonal = 1,       h = Chebyshev distance
"""

from dataclasses import dataclass
from math import sqrt
from typing import Callable, Dict, Tuple

from gridpath.core.types import DIRECTIONS, Cell, InvariantViolation

CARDINAL_COST = 1.0
DIAGONAL_COST = sqrt(2.0)


def _offset(a: Cell, b: Cell) -> Tuple[int, int]:
    dx, dy = b[0] - a[0], b[1] - a[1]
    if (dx, dy) not in DIRECTIONS:
        raise InvariantViolation(f"{a} -> {b} is not a single 8-connected move")
    return dx, dy


def chebyshev(a: Cell, b: Cell) -> float:
    return float(max(abs(a[0] - b[0]), abs(a[1] - b[1])))


def octile(a: Cell, b: Cell) -> float:
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return max(dx, dy) + (DIAGONAL_COST - 1.0) * min(dx, dy)


@dataclass(frozen=True)
class CostModel:
    name: str
    diagonal_cost: float
    heuristic: Callable[[Cell, Cell], float]
    cardinal_cost: float = CARDINAL_COST

    def step_cost(self, a: Cell, b: Cell) -> float:
        dx, dy = _offset(a, b)
        return self.diagonal_cost if dx and dy else self.cardinal_cost

    def distance(self, a: Cell, b: Cell) -> float:
        """Exact shortest cost between a and b on an obstacle-free grid."""
        return self.heuristic(a, b)


OCTILE = CostModel("octile", DIAGONAL_COST, octile)
UNIFORM = CostModel("uniform", CARDINAL_COST, chebyshev)

COST_MODELS: Dict[str, CostModel] = {m.name: m for m in (OCTILE, UNIFORM)}


def cost_model(name: str) -> CostModel:
    try:
        return COST_MODELS[name.lower()]
    except KeyError:
        raise ValueError(f"unknown cost metric {name!r} (expected one of {sorted(COST_MODELS)})") from None


def step_cost(a: Cell, b: Cell) -> float:
    """Cost of one move under the default (octile) model."""
    return OCTILE.step_cost(a, b)
