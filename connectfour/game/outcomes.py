"""
outcomes.py - Values reported by GameEngine after a move attempt

attempt_move returns exactly one of PiecePlaced, MoveIgnored or RoundEnded,
and hands the same value to any registered listeners. A presentation layer
draws the piece for PiecePlaced (and for RoundEnded.placement), does
nothing for MoveIgnored, and announces RoundEnded.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from connectfour.game.player import Player
from connectfour.utils import Cell


class IgnoreReason(Enum):
    """Why a move attempt was dropped without changing the game."""
    GAME_OVER = "game_over"
    COLUMN_FULL = "column_full"


@dataclass(frozen=True)
class PiecePlaced:
    """A piece for `player` now sits at (row, column)."""
    row: int
    column: int
    player: Player


@dataclass(frozen=True)
class MoveIgnored:
    column: int
    reason: IgnoreReason


@dataclass(frozen=True)
class Win:
    player: Player
    line: Tuple[Cell, ...] = ()


@dataclass(frozen=True)
class Tie:
    pass


Outcome = Union[Win, Tie]


@dataclass(frozen=True)
class RoundEnded:
    """
    The move that ended the game.

    Attributes:
        outcome: Win for the player who moved, or Tie
        placement: The piece placed by the final move
    """
    outcome: Outcome
    placement: PiecePlaced

    @property
    def winner(self) -> Optional[Player]:
        if isinstance(self.outcome, Win):
            return self.outcome.player
        return None

    @property
    def message(self) -> str:
        """Announcement text for the end of the game."""
        if isinstance(self.outcome, Win):
            return f"{self.outcome.player.name} player won!"
        return "Tie!"


MoveResult = Union[PiecePlaced, MoveIgnored, RoundEnded]
