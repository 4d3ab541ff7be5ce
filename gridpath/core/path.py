#!/usr/bin/env python3
import logging
from dataclasses import dataclass
from math import inf
from typing import List, Optional

from gridpath.core.costs import OCTILE, CostModel
from gridpath.core.search import ALGORITHMS
from gridpath.core.types import (
    Cell, Grid, InvariantViolation, Role, SearchResult, Step, StepTrace,
)

logger = logging.getLogger(__name__)


def reconstruct_path(result: SearchResult, start: Cell, end: Cell,
                     max_hops: Optional[int] = None) -> Optional[List[Cell]]:
    """Walk parents back from end to start. None when end was never reached."""
    if result.cost_of(end) == inf:
        return None
    if max_hops is None:
        # every cell the search touched has a cost entry; a simple path can't be longer
        max_hops = len(result.cost)

    path: List[Cell] = [end]
    cur = end
    while cur != start:
        if len(path) > max_hops:
            raise InvariantViolation(f"predecessor cycle while walking back from {end}")
        prev = result.parent_of(cur)
        if prev is None:
            raise InvariantViolation(f"{cur} has a cost but no predecessor")
        path.append(prev)
        cur = prev
    path.reverse()
    return path


def path_steps(path: List[Cell], start: Cell, end: Cell) -> List[Step]:
    return [Step(c, Role.PATH) for c in path if c != start and c != end]


def path_cost(path: List[Cell], model: CostModel = OCTILE) -> float:
    return sum(model.step_cost(a, b) for a, b in zip(path, path[1:]))


@dataclass
class Solution:
    result: SearchResult
    path: Optional[List[Cell]]
    trace: StepTrace            # search steps followed by path steps
    cost: Optional[float]

    @property
    def found(self) -> bool:
        return self.path is not None


def solve(grid: Grid, algo: str, model: CostModel = OCTILE) -> Solution:
    """Run one algorithm on grid and append the path to its trace."""
    try:
        runner = ALGORITHMS[algo]
    except KeyError:
        raise ValueError(f"unknown algorithm {algo!r}") from None

    result, trace = runner(grid, grid.start, grid.end, model=model)
    path = reconstruct_path(result, grid.start, grid.end, max_hops=grid.size * grid.size)
    if path is None:
        logger.info("%s: no path from %s to %s", algo, grid.start, grid.end)
        return Solution(result, None, trace, None)

    trace = trace.extend(path_steps(path, grid.start, grid.end))
    return Solution(result, path, trace, result.cost_of(grid.end))
