from math import sqrt

import pytest

from gridpath.core.costs import (
    DIRECTIONS, OCTILE, UNIFORM, chebyshev, cost_model, octile, step_cost,
)
from gridpath.core.types import InvariantViolation


def test_directions_are_the_eight_unit_offsets():
    assert len(DIRECTIONS) == 8
    assert set(DIRECTIONS) == {
        (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
    }


@pytest.mark.parametrize("b", [(3, 2), (1, 2), (2, 3), (2, 1)])
def test_cardinal_step_costs_one(b):
    assert step_cost((2, 2), b) == 1.0
    assert UNIFORM.step_cost((2, 2), b) == 1.0


@pytest.mark.parametrize("b", [(3, 3), (1, 1), (1, 3), (3, 1)])
def test_diagonal_step_cost_depends_on_model(b):
    assert step_cost((2, 2), b) == pytest.approx(sqrt(2))
    assert UNIFORM.step_cost((2, 2), b) == 1.0


@pytest.mark.parametrize("b", [(2, 2), (4, 2), (0, 0), (3, 4)])
def test_non_adjacent_step_is_rejected(b):
    with pytest.raises(InvariantViolation):
        step_cost((2, 2), b)


def test_octile_distance():
    assert octile((0, 0), (4, 4)) == pytest.approx(4 * sqrt(2))
    assert octile((0, 0), (3, 1)) == pytest.approx(2 + sqrt(2))
    assert octile((5, 2), (5, 2)) == 0.0
    assert octile((1, 7), (4, 3)) == octile((4, 3), (1, 7))


def test_chebyshev_distance():
    assert chebyshev((0, 0), (4, 4)) == 4.0
    assert chebyshev((0, 0), (3, 1)) == 3.0
    assert chebyshev((2, 9), (2, 9)) == 0.0


def test_models_pair_heuristic_with_their_diagonal_cost():
    assert OCTILE.heuristic is octile
    assert OCTILE.diagonal_cost == pytest.approx(sqrt(2))
    assert UNIFORM.heuristic is chebyshev
    assert UNIFORM.diagonal_cost == 1.0


def test_heuristic_never_exceeds_one_step():
    # consistency: h(a) <= cost(a, b) + h(b) for every move
    goal = (6, 2)
    for model in (OCTILE, UNIFORM):
        for x in range(1, 9):
            for y in range(1, 9):
                a = (x, y)
                for dx, dy in DIRECTIONS:
                    b = (x + dx, y + dy)
                    assert model.heuristic(a, goal) <= model.step_cost(a, b) + model.heuristic(b, goal) + 1e-12


def test_cost_model_lookup():
    assert cost_model("octile") is OCTILE
    assert cost_model("UNIFORM") is UNIFORM
    with pytest.raises(ValueError, match="unknown cost metric"):
        cost_model("manhattan")
