"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, the player and result
value types, the turn-based game engine and its Gymnasium wrapper.
"""

from connectfour.game.board import Board
from connectfour.game.outcomes import (IgnoreReason, MoveIgnored, PiecePlaced,
                                       RoundEnded, Tie, Win)
from connectfour.game.player import Player
from connectfour.game.rules import GameEngine, GameState

__all__ = ['Board', 'Player', 'GameEngine', 'GameState', 'PiecePlaced',
           'MoveIgnored', 'IgnoreReason', 'RoundEnded', 'Win', 'Tie']
