import pytest

from gridpath.app.settings import (
    ANIMATION_DELAY_MS, GRID_SIZE, Settings, export_env, resolve_settings,
)
from gridpath.core.costs import OCTILE, UNIFORM


def test_defaults():
    s = resolve_settings([], {})
    assert s == Settings()
    assert s.grid_size == GRID_SIZE
    assert s.delay_ms == ANIMATION_DELAY_MS
    assert s.model is OCTILE


def test_environment_overrides_defaults():
    s = resolve_settings([], {"GRIDPATH_GRID_SIZE": "30", "GRIDPATH_METRIC": "uniform",
                              "GRIDPATH_DELAY_MS": "50", "GRIDPATH_LOG_LEVEL": "debug"})
    assert s.grid_size == 30
    assert s.model is UNIFORM
    assert s.delay_ms == 50
    assert s.log_level == "DEBUG"


def test_cli_overrides_environment():
    s = resolve_settings(["--size=8", "--metric=Octile", "--delay=5", "--unrelated"],
                         {"GRIDPATH_GRID_SIZE": "30", "GRIDPATH_METRIC": "uniform"})
    assert s.grid_size == 8
    assert s.metric == "octile"
    assert s.delay_ms == 5


@pytest.mark.parametrize("argv", [
    ["--size=1"], ["--size=abc"], ["--size=1000"], ["--metric=manhattan"], ["--delay=0"],
    ["--log=BASIC_FORMAT"], ["--log=verbose"],
])
def test_invalid_values_raise(argv):
    with pytest.raises(ValueError):
        resolve_settings(argv, {})


def test_export_env_round_trips():
    env = {}
    chosen = Settings(grid_size=12, metric="uniform", delay_ms=40, log_level="WARNING")
    export_env(chosen, env)
    assert resolve_settings([], env) == chosen


def test_log_level_must_be_a_level_name():
    with pytest.raises(ValueError, match="unknown log level"):
        resolve_settings([], {"GRIDPATH_LOG_LEVEL": "BASIC_FORMAT"})
    assert resolve_settings(["--log=warning"], {}).log_level == "WARNING"
