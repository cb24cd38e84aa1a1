"""
utils.py - Constants and helper functions shared across connectfour

Grid coordinates are (row, col) with row 0 at the top of the board and
row height-1 at the bottom, where pieces come to rest first.
"""

from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

import numpy as np

from connectfour.config import CONNECT_N

EMPTY = 0  # Grid value of an unoccupied cell

Cell = Tuple[int, int]


class Direction(Enum):
    """Directions a run of pieces can extend from its anchor cell."""
    HORIZONTAL = auto()           # Increasing column
    VERTICAL = auto()             # Increasing row (downward)
    DIAGONAL_DOWN_RIGHT = auto()  # Row and column both increasing
    DIAGONAL_DOWN_LEFT = auto()   # Row increasing, column decreasing


# Step (row, col) for each direction, in the order runs are checked
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def is_valid_position(row: int, col: int, height: int, width: int) -> bool:
    """
    Check if a position is inside a board of the given size.

    Args:
        row: Row index
        col: Column index
        height: Number of rows
        width: Number of columns

    Returns:
        True if the position is on the board, False otherwise
    """
    return 0 <= row < height and 0 <= col < width


def run_cells(row: int, col: int, direction: Direction, length: int = CONNECT_N) -> List[Cell]:
    """
    List the cells of a run anchored at (row, col).

    Cells are not bounds-checked; a run may extend off the board.

    Args:
        row: Anchor row
        col: Anchor column
        direction: Direction the run extends in
        length: Number of cells in the run

    Returns:
        List of (row, col) cells, anchor first
    """
    dr, dc = DIRECTION_VECTORS[direction]
    return [(row + dr * i, col + dc * i) for i in range(length)]


def find_winning_run(grid: np.ndarray, value: int, length: int = CONNECT_N) -> Optional[List[Cell]]:
    """
    Scan the whole grid for a run of cells that all hold the given value.

    Every cell is tried as an anchor, row by row, and each anchor is checked
    horizontally, vertically and along both downward diagonals. A run only
    counts if all of its cells are on the board.

    Args:
        grid: 2D array of cell values
        value: Cell value to look for (never EMPTY)
        length: Number of cells in a winning run

    Returns:
        The cells of the first winning run found, or None if there is none
    """
    if value == EMPTY:
        return None

    height, width = grid.shape
    for row in range(height):
        for col in range(width):
            if grid[row, col] != value:
                continue
            for direction in DIRECTION_VECTORS:
                cells = run_cells(row, col, direction, length)
                if all(is_valid_position(r, c, height, width) and grid[r, c] == value
                       for r, c in cells):
                    return cells
    return None


def render_board_ascii(grid: np.ndarray, symbols: Dict[int, str] = None) -> str:
    """
    Render a grid as ASCII art with column numbers underneath.

    Args:
        grid: 2D array of cell values (EMPTY for empty cells)
        symbols: Character to draw for each non-empty value

    Returns:
        ASCII representation of the board
    """
    if symbols is None:
        symbols = {1: "X", 2: "O"}

    height, width = grid.shape
    # Column labels may be wider than one character on large boards
    cell_width = len(str(width - 1))
    separator = "|" + "-" * ((cell_width + 1) * width - 1) + "|"

    lines = [separator]
    for row in range(height):
        cells = []
        for col in range(width):
            value = int(grid[row, col])
            char = " " if value == EMPTY else symbols.get(value, "?")
            cells.append(char.center(cell_width))
        lines.append("|" + " ".join(cells) + "|")
    lines.append(separator)
    lines.append("|" + " ".join(str(col).center(cell_width) for col in range(width)) + "|")

    return "\n".join(lines)
