import random

import pytest

from gridpath.core.types import Grid


def _random_grid(size, density, seed, start=None, end=None):
    rng = random.Random(seed)
    grid = Grid(size, start, end)
    for c in grid.cells():
        if rng.random() < density:
            grid.set_wall(c, True)
    return grid


@pytest.fixture
def random_grid():
    """Factory: random_grid(size, density, seed) -> Grid with start/end kept open."""
    return _random_grid


@pytest.fixture
def empty_grid():
    return Grid(5)
