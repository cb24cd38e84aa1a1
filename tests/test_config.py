"""
Tests for configuration, logging helpers and utilities.
"""
import numpy as np
import pytest

from connectfour.config import GameConfig
from connectfour.debug import DebugLevel, DebugManager, parse_level
from connectfour.utils import Direction, find_winning_run, render_board_ascii, run_cells


def test_config_defaults():
    """Test the default configuration."""
    config = GameConfig()

    assert config.height == 6
    assert config.width == 7
    assert config.debug_level == DebugLevel.WARNING


@pytest.mark.parametrize("height, width", [(0, 7), (6, -2), ("6", 7)])
def test_config_rejects_bad_dimensions(height, width):
    """Test that the config validates board dimensions."""
    with pytest.raises(ValueError):
        GameConfig(height=height, width=width)


def test_config_from_env():
    """Test reading settings from environment variables."""
    config = GameConfig.from_env({
        "CONNECTFOUR_HEIGHT": "8",
        "CONNECTFOUR_WIDTH": "9",
        "CONNECTFOUR_DEBUG_LEVEL": "debug",
    })

    assert (config.height, config.width) == (8, 9)
    assert config.debug_level == DebugLevel.DEBUG


def test_config_from_empty_env():
    """Test that missing variables fall back to defaults."""
    assert GameConfig.from_env({}) == GameConfig()


def test_config_from_env_rejects_garbage():
    """Test that non-numeric sizes and unknown levels are errors."""
    with pytest.raises(ValueError):
        GameConfig.from_env({"CONNECTFOUR_WIDTH": "wide"})
    with pytest.raises(ValueError):
        GameConfig.from_env({"CONNECTFOUR_DEBUG_LEVEL": "loud"})


def test_parse_level():
    """Test level name parsing."""
    assert parse_level("trace") == DebugLevel.TRACE
    assert parse_level(" Info ") == DebugLevel.INFO
    with pytest.raises(ValueError):
        parse_level("verbose")


def test_debug_manager_set_from_string():
    """Test changing the level from a string."""
    manager = DebugManager()

    assert manager.set_from_string("error") is True
    assert manager.level == DebugLevel.ERROR
    assert manager.set_from_string("nonsense") is False
    assert manager.level == DebugLevel.ERROR


def test_debug_manager_component_filter(caplog):
    """Test that component filtering limits output."""
    manager = DebugManager(level=DebugLevel.INFO)
    manager.configure(components=["engine"])

    with caplog.at_level("INFO", logger="connectfour"):
        manager.info("kept", "engine")
        manager.info("dropped", "board")

    messages = [record.getMessage() for record in caplog.records]
    assert "[engine] kept" in messages
    assert not any("dropped" in message for message in messages)


def test_debug_timer():
    """Test that timers report elapsed time."""
    manager = DebugManager()

    manager.start_timer("work")
    elapsed = manager.end_timer("work")

    assert elapsed is not None and elapsed >= 0
    assert manager.end_timer("work") is None


def test_run_cells():
    """Test the cells of runs in each direction."""
    assert run_cells(2, 3, Direction.HORIZONTAL) == [(2, 3), (2, 4), (2, 5), (2, 6)]
    assert run_cells(2, 3, Direction.VERTICAL) == [(2, 3), (3, 3), (4, 3), (5, 3)]
    assert run_cells(2, 3, Direction.DIAGONAL_DOWN_RIGHT) == [(2, 3), (3, 4), (4, 5), (5, 6)]
    assert run_cells(2, 3, Direction.DIAGONAL_DOWN_LEFT) == [(2, 3), (3, 2), (4, 1), (5, 0)]


def test_find_winning_run_on_raw_grid():
    """Test the grid scan directly."""
    grid = np.zeros((6, 7), dtype=np.int8)
    grid[5, 3:7] = 2

    assert find_winning_run(grid, 2) == [(5, 3), (5, 4), (5, 5), (5, 6)]
    assert find_winning_run(grid, 1) is None
    assert find_winning_run(grid, 0) is None


def test_render_wide_board_labels():
    """Test that two-digit column labels keep the cells aligned."""
    grid = np.zeros((1, 11), dtype=np.int8)
    grid[0, 10] = 1

    lines = render_board_ascii(grid).split("\n")

    assert lines[-1] == "|" + " ".join(str(c).center(2) for c in range(11)) + "|"
    assert len(lines[1]) == len(lines[-1])
    assert lines[1].endswith("X |")
