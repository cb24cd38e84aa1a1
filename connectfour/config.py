"""
config.py - Game defaults and configuration

Board dimensions and the log level can be set in code through GameConfig
or read from the environment with GameConfig.from_env().
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from connectfour.debug import DebugLevel, parse_level

DEFAULT_HEIGHT = 6
DEFAULT_WIDTH = 7
CONNECT_N = 4  # Pieces in a row needed to win

# Default player identities, used when the caller does not supply any
DEFAULT_PLAYER_ONE = ("red", "Red")      # (color, name)
DEFAULT_PLAYER_TWO = ("yellow", "Yellow")

ENV_HEIGHT = "CONNECTFOUR_HEIGHT"
ENV_WIDTH = "CONNECTFOUR_WIDTH"
ENV_DEBUG_LEVEL = "CONNECTFOUR_DEBUG_LEVEL"


def validate_dimensions(height: int, width: int) -> None:
    """
    Check that board dimensions are positive integers.

    Raises:
        ValueError: If either dimension is not a positive integer
    """
    for label, value in (("height", height), ("width", width)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Board {label} must be an integer, got {value!r}")
        if value < 1:
            raise ValueError(f"Board {label} must be positive, got {value}")


@dataclass(frozen=True)
class GameConfig:
    """Settings for a game: board size and logging level."""

    height: int = DEFAULT_HEIGHT
    width: int = DEFAULT_WIDTH
    debug_level: DebugLevel = DebugLevel.WARNING

    def __post_init__(self):
        validate_dimensions(self.height, self.width)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'GameConfig':
        """
        Build a config from CONNECTFOUR_* environment variables.

        Unset variables fall back to the defaults.

        Raises:
            ValueError: If a variable is set to an invalid value
        """
        if environ is None:
            environ = os.environ

        def _int(name: str, default: int) -> int:
            raw = environ.get(name)
            if raw is None or not raw.strip():
                return default
            try:
                return int(raw)
            except ValueError:
                raise ValueError(f"{name} must be an integer, got {raw!r}") from None

        level_name = environ.get(ENV_DEBUG_LEVEL)
        debug_level = parse_level(level_name) if level_name else DebugLevel.WARNING

        return cls(
            height=_int(ENV_HEIGHT, DEFAULT_HEIGHT),
            width=_int(ENV_WIDTH, DEFAULT_WIDTH),
            debug_level=debug_level,
        )
