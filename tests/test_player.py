import pytest

from gridpath.core.path import solve
from gridpath.core.player import (
    BLUE, CYAN, GREEN, GREY, MAGENTA, ORANGE, WHITE, PlayerStatus, TracePlayer,
)
from gridpath.core.types import Grid, Role, Step, StepTrace


@pytest.fixture
def grid():
    g = Grid(4)
    g.toggle_wall((3, 0))
    return g


def test_new_player_is_idle_and_shows_base_colors(grid):
    p = TracePlayer(grid)
    assert p.status is PlayerStatus.IDLE
    assert p.advance() is PlayerStatus.IDLE
    assert p.color_of((0, 0)) == BLUE
    assert p.color_of((3, 3)) == BLUE
    assert p.color_of((3, 0)) == WHITE
    assert p.color_of((1, 1)) == ORANGE


def test_advance_applies_one_step_at_a_time(grid):
    trace = StepTrace([
        Step((1, 0), Role.FRONTIER),
        Step((1, 0), Role.SETTLED),
        Step((1, 0), Role.PATH),
    ])
    p = TracePlayer(grid)
    p.reset(trace)
    assert p.status is PlayerStatus.RUNNING
    assert p.color_of((1, 0)) == ORANGE

    assert p.advance() is PlayerStatus.RUNNING
    assert p.color_of((1, 0)) == CYAN
    assert p.advance() is PlayerStatus.RUNNING
    assert p.color_of((1, 0)) == GREY
    assert p.advance() is PlayerStatus.FINISHED
    assert p.color_of((1, 0)) == GREEN
    assert p.cursor == 3


def test_advance_after_finish_is_a_noop(grid):
    p = TracePlayer(grid)
    p.reset(StepTrace([Step((1, 1), Role.SETTLED)]))
    p.advance()
    assert p.finished
    assert p.advance() is PlayerStatus.FINISHED
    assert p.cursor == 1


def test_empty_trace_is_finished_immediately(grid):
    p = TracePlayer(grid)
    p.reset(StepTrace())
    assert p.finished


def test_endpoints_are_never_recolored(grid):
    p = TracePlayer(grid)
    p.reset(StepTrace([Step((0, 0), Role.SETTLED), Step((3, 3), Role.PATH)]))
    p.advance()
    p.advance()
    assert p.color_of((0, 0)) == BLUE
    assert p.color_of((3, 3)) == BLUE


def test_reset_rewinds_and_replaces_trace(grid):
    p = TracePlayer(grid)
    p.reset(StepTrace([Step((1, 1), Role.SETTLED)]))
    p.advance()
    p.reset(StepTrace([Step((2, 2), Role.FRONTIER)]))
    assert p.cursor == 0
    assert p.color_of((1, 1)) == ORANGE
    p.advance()
    assert p.color_of((2, 2)) == CYAN


def test_clear_returns_to_idle(grid):
    p = TracePlayer(grid)
    p.reset(StepTrace([Step((1, 1), Role.SETTLED)]))
    p.advance()
    p.clear()
    assert p.status is PlayerStatus.IDLE
    assert p.color_of((1, 1)) == ORANGE


def test_seek_matches_repeated_advance(grid):
    trace = solve(grid, "Dijkstra").trace
    stepped = TracePlayer(grid)
    stepped.reset(trace)
    for _ in range(7):
        stepped.advance()

    sought = TracePlayer(grid)
    sought.reset(trace)
    sought.seek(7)
    assert sought.cursor == 7
    assert all(sought.color_of(c) == stepped.color_of(c) for c in grid.cells())


def test_full_replay_shows_path_in_player_color(grid):
    sol = solve(grid, "A*")
    p = TracePlayer(grid, path_color=MAGENTA)
    p.reset(sol.trace)
    while p.advance() is PlayerStatus.RUNNING:
        pass
    for c in sol.path[1:-1]:
        assert p.color_of(c) == MAGENTA
    for c in set(sol.trace.cells(Role.SETTLED)) - set(sol.path):
        assert p.color_of(c) == GREY
