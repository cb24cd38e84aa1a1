"""
player.py - Player identity for Connect Four

A Player is a display color plus a name. Players compare by identity:
two players created with the same name and color are still two players.
"""

from dataclasses import dataclass

from connectfour.config import DEFAULT_PLAYER_ONE, DEFAULT_PLAYER_TWO


@dataclass(frozen=True, eq=False)
class Player:
    """
    A participant in a game.

    Attributes:
        color: Display color, any string the presentation layer understands
            (e.g. "red" or "#ff0000")
        name: Display name used in announcements
    """
    color: str
    name: str

    def __str__(self):
        return self.name


def default_players():
    """Create the two default players (red moves first)."""
    return Player(*DEFAULT_PLAYER_ONE), Player(*DEFAULT_PLAYER_TWO)
