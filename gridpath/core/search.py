#!/usr/bin/env python3
"""
Best-first grid search shared by Dijkstra and A*.

Both algorithms are the same loop with a different priority key:
- Dijkstra: key = g
- A*:       key = g + h(cell, end)

Rules common to both (kept in one place so they cannot drift apart):
- duplicate heap entries are allowed; a pop whose g exceeds the recorded best
  g by more than EPSILON is stale and skipped (lazy deletion)
- goal test happens on pop, never on discovery
- 8 neighbours in DIRECTIONS order; out-of-bounds, walls and already
  settled cells are skipped
- start and end never produce trace steps

Ties in the heap are broken by insertion order (seq), so a run is a pure
function of (grid, start, end, cost model).
"""

import heapq
import logging
from math import inf
from typing import Callable, Dict, List, Optional, Tuple

from gridpath.core.costs import OCTILE, CostModel
from gridpath.core.types import (
    Cell, Grid, InvariantViolation, Role, SearchResult, Step, StepTrace,
)

logger = logging.getLogger(__name__)

EPSILON = 1e-9

Priority = Callable[[float, Cell], float]


def neighbors8(grid: Grid, c: Cell) -> List[Cell]:
    """Traversable 8-connected neighbours of c, in DIRECTIONS order."""
    return grid.neighbors(c)


def best_first(grid: Grid, model: CostModel, priority: Priority, algo: str,
               start: Optional[Cell] = None, end: Optional[Cell] = None) -> Tuple[SearchResult, StepTrace]:
    start = tuple(start) if start is not None else grid.start
    end = tuple(end) if end is not None else grid.end
    for c in (start, end):
        if not grid.in_bounds(c):
            raise InvariantViolation(f"{algo}: endpoint {c} outside grid")
        if grid.is_wall(c):
            raise InvariantViolation(f"{algo}: endpoint {c} is a wall")

    result = SearchResult(algo=algo, start=start, end=end)
    steps: List[Step] = []
    settled = set()
    seq = 0

    def emit(c: Cell, role: Role) -> None:
        if c != start and c != end:
            steps.append(Step(c, role))

    result.cost[start] = 0.0
    open_pq: List[Tuple[float, int, float, Cell]] = [(priority(0.0, start), seq, 0.0, start)]  # (key, seq, g, cell)

    while open_pq:
        _, _, g_u, u = heapq.heappop(open_pq)

        # Ignore stale pops
        if g_u > result.cost[u] + EPSILON or u in settled:
            continue

        settled.add(u)
        result.settled.append(u)
        emit(u, Role.SETTLED)

        if u == end:
            break

        for v in neighbors8(grid, u):
            # settled costs are final; float noise must not re-parent them
            if v in settled:
                continue
            move = model.step_cost(u, v)
            if move < 0:
                raise InvariantViolation(f"negative step cost {move} for {u} -> {v}")
            alt = result.cost[u] + move
            if alt < result.cost.get(v, inf):
                result.cost[v] = alt
                result.parent[v] = u
                seq += 1
                heapq.heappush(open_pq, (priority(alt, v), seq, alt, v))
                emit(v, Role.FRONTIER)

    logger.debug("%s: settled=%d steps=%d cost=%s",
                 algo, len(result.settled), len(steps), result.cost_of(end))
    return result, StepTrace(steps)


def run_uniform_cost(grid: Grid, start: Optional[Cell] = None, end: Optional[Cell] = None,
                     model: CostModel = OCTILE) -> Tuple[SearchResult, StepTrace]:
    """Dijkstra: expand by accumulated cost only."""
    return best_first(grid, model, lambda g, _c: g, "Dijkstra", start, end)


def run_heuristic_guided(grid: Grid, start: Optional[Cell] = None, end: Optional[Cell] = None,
                         model: CostModel = OCTILE) -> Tuple[SearchResult, StepTrace]:
    """A*: expand by g + h, with h taken from the same cost model as the step costs."""
    goal = tuple(end) if end is not None else grid.end

    def f(g: float, c: Cell) -> float:
        h = model.heuristic(c, goal)
        if h < 0:
            raise InvariantViolation(f"negative heuristic {h} at {c}")
        return g + h

    return best_first(grid, model, f, "A*", start, end)


ALGORITHMS: Dict[str, Callable[..., Tuple[SearchResult, StepTrace]]] = {
    "Dijkstra": run_uniform_cost,
    "A*": run_heuristic_guided,
}
