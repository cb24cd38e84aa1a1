"""
board.py - Board representation for Connect Four

This module implements the Board class, which tracks which player owns each
cell and works out where a dropped piece lands. Turn order and game
outcomes are handled by GameEngine in rules.py.
"""

from typing import List, Optional, Sequence

import numpy as np

from connectfour.config import CONNECT_N, DEFAULT_HEIGHT, DEFAULT_WIDTH, validate_dimensions
from connectfour.debug import debug
from connectfour.exceptions import CellOccupiedError, InvalidColumnError
from connectfour.game.player import Player
from connectfour.utils import EMPTY, Cell, find_winning_run, render_board_ascii

# Drawn for the first and second player to own a cell
PIECE_SYMBOLS = "XO"


class Board:
    """
    A height x width grid of cells, each empty or owned by a player.

    The grid stores small integer tokens: EMPTY for an open cell, and
    1, 2, ... for players, either in the seat order given at creation or
    in the order they first placed a piece. An occupied cell is never
    cleared or given to another player.
    """

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH,
                 players: Sequence[Player] = ()):
        """
        Create an empty board.

        Args:
            height: Number of rows (positive)
            width: Number of columns (positive)
            players: Players whose tokens are fixed up front, in seat order
                (the first gets token 1, the second token 2)

        Raises:
            ValueError: If either dimension is not a positive integer
        """
        validate_dimensions(height, width)
        debug.debug(f"Creating {height}x{width} board", "board")
        self.height = height
        self.width = width
        self.grid = np.zeros((height, width), dtype=np.int8)
        self._owners: List[Player] = list(players)
        self._seated = bool(self._owners)

    def _check_column(self, column: int) -> None:
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            raise InvalidColumnError(column, self.width)
        if not 0 <= column < self.width:
            raise InvalidColumnError(column, self.width)

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self.height:
            raise IndexError(f"Row {row} is out of range (expected 0 to {self.height - 1})")

    def token_for(self, player: Player) -> Optional[int]:
        """Grid value used for a player, or None if they own no cells yet."""
        for index, owner in enumerate(self._owners):
            if owner is player:
                return index + 1
        return None

    def find_landing_row(self, column: int) -> Optional[int]:
        """
        Find where a piece dropped into a column would come to rest.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The lowest empty row in the column, or None if the column is full

        Raises:
            InvalidColumnError: If the column is outside the board
        """
        self._check_column(column)
        for row in range(self.height - 1, -1, -1):
            if self.grid[row, column] == EMPTY:
                return row
        return None

    def place(self, row: int, column: int, player: Player) -> None:
        """
        Record that a player owns a cell.

        Callers normally pass the row returned by find_landing_row.

        Raises:
            InvalidColumnError: If the column is outside the board
            IndexError: If the row is outside the board
            CellOccupiedError: If the cell already has an owner
            ValueError: If the board has fixed seats and the player holds none
        """
        self._check_column(column)
        self._check_row(row)
        if self.grid[row, column] != EMPTY:
            raise CellOccupiedError(row, column)

        token = self.token_for(player)
        if token is None:
            if self._seated:
                raise ValueError(f"{player.name} has no seat on this board")
            self._owners.append(player)
            token = len(self._owners)

        debug.trace(f"Placing {player.name} at ({row}, {column})", "board")
        self.grid[row, column] = token

    def owner_at(self, row: int, column: int) -> Optional[Player]:
        """The player owning a cell, or None if it is empty."""
        self._check_column(column)
        self._check_row(row)
        token = int(self.grid[row, column])
        if token == EMPTY:
            return None
        return self._owners[token - 1]

    def is_full(self) -> bool:
        """True if every cell on the board is occupied."""
        return bool(np.all(self.grid != EMPTY))

    def is_column_full(self, column: int) -> bool:
        """True if no more pieces fit in the column."""
        return self.find_landing_row(column) is None

    def valid_columns(self) -> List[int]:
        """Columns that still have at least one empty cell."""
        return [col for col in range(self.width) if self.grid[0, col] == EMPTY]

    @property
    def pieces_placed(self) -> int:
        return int(np.count_nonzero(self.grid))

    def find_run(self, player: Player) -> Optional[List[Cell]]:
        """
        Find a four-in-a-row owned entirely by a player.

        Returns:
            The four (row, col) cells of the first run found, or None
        """
        token = self.token_for(player)
        if token is None:
            return None
        return find_winning_run(self.grid, token, CONNECT_N)

    def has_run(self, player: Player) -> bool:
        return self.find_run(player) is not None

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the grid.

        Returns:
            2D numpy array of tokens (see token_for)
        """
        return self.grid.copy()

    def render(self) -> str:
        symbols = {index + 1: PIECE_SYMBOLS[index % len(PIECE_SYMBOLS)]
                   for index in range(len(self._owners))}
        return render_board_ascii(self.grid, symbols)

    def __str__(self) -> str:
        return self.render()
