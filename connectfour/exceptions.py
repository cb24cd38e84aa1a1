"""
exceptions.py - Errors raised by the connectfour package

Full columns and moves after the game has ended are not errors; they come
back from GameEngine.attempt_move as MoveIgnored results.
"""


class ConnectFourError(Exception):
    """Base class for connectfour errors."""


class InvalidColumnError(ConnectFourError, ValueError):
    """A column index outside [0, width) was given."""

    def __init__(self, column, width: int):
        self.column = column
        self.width = width
        super().__init__(f"Column {column!r} is out of range (expected 0 to {width - 1})")


class CellOccupiedError(ConnectFourError):
    """A piece was placed on a cell that already has an owner."""

    def __init__(self, row: int, column: int):
        self.row = row
        self.column = column
        super().__init__(f"Cell ({row}, {column}) is already occupied")


class GameNotFoundError(ConnectFourError, KeyError):
    """No game is registered under the given id."""

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(game_id)

    def __str__(self):
        return f"No game with id '{self.game_id}'"
