"""
rules.py - Turn sequencing and game outcomes for Connect Four

GameEngine is the single entry point for playing a game: the presentation
layer calls attempt_move with a column and renders whatever result comes
back. The engine never draws anything itself.
"""

from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

from connectfour.config import DEFAULT_HEIGHT, DEFAULT_WIDTH
from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.game.outcomes import (IgnoreReason, MoveIgnored, MoveResult, Outcome,
                                       PiecePlaced, RoundEnded, Tie, Win)
from connectfour.game.player import Player, default_players

Listener = Callable[[MoveResult], None]


class GameState(Enum):
    IN_PROGRESS = auto()
    FINISHED = auto()


class GameEngine:
    """
    Runs one game of Connect Four between two players.

    Players alternate strictly, starting with the first player given. The
    game finishes when a move fills the board (tie) or completes four in a
    row (win); after that every move attempt is ignored.

    Not thread-safe: callers sharing an engine must serialize attempt_move
    and new_game (see connectfour.service.GameService).
    """

    def __init__(self, player1: Player = None, player2: Player = None,
                 height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH):
        """
        Create an engine and start its first game.

        Args:
            player1: Player who moves first (default: red)
            player2: Player who moves second (default: yellow)
            height: Board rows
            width: Board columns
        """
        self._listeners: List[Listener] = []
        self.new_game(player1, player2, height, width)

    def new_game(self, player1: Player = None, player2: Player = None,
                 height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH) -> None:
        """
        Discard the current board and start over.

        Listeners stay registered across games.

        Raises:
            ValueError: If the dimensions are invalid or both players are
                the same object
        """
        if player1 is None or player2 is None:
            default_one, default_two = default_players()
            player1 = player1 or default_one
            player2 = player2 or default_two
        if player1 is player2:
            raise ValueError("A game needs two different players")

        self.board = Board(height, width, players=(player1, player2))
        self._players = (player1, player2)
        self.current_player = player1
        self.game_over = False
        self.outcome: Optional[Outcome] = None
        self.moves_made = 0
        debug.info(f"New {height}x{width} game: {player1.name} vs {player2.name}", "engine")

    @property
    def players(self) -> Tuple[Player, Player]:
        return self._players

    @property
    def state(self) -> GameState:
        return GameState.FINISHED if self.game_over else GameState.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        if isinstance(self.outcome, Win):
            return self.outcome.player
        return None

    def add_listener(self, listener: Listener) -> None:
        """Call `listener` with the result of every move attempt."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _notify(self, result: MoveResult) -> MoveResult:
        for listener in list(self._listeners):
            listener(result)
        return result

    def attempt_move(self, column: int) -> MoveResult:
        """
        Drop the current player's piece into a column.

        Args:
            column: Column to play (0-indexed)

        Returns:
            MoveIgnored if the game is over or the column is full,
            RoundEnded if this move ended the game, otherwise PiecePlaced

        Raises:
            InvalidColumnError: If the column is outside the board
        """
        row = self.board.find_landing_row(column)

        if self.game_over:
            debug.debug(f"Ignoring move in column {column}: game is over", "engine")
            return self._notify(MoveIgnored(column, IgnoreReason.GAME_OVER))
        if row is None:
            debug.debug(f"Ignoring move in column {column}: column is full", "engine")
            return self._notify(MoveIgnored(column, IgnoreReason.COLUMN_FULL))

        player = self.current_player
        self.board.place(row, column, player)
        self.moves_made += 1
        placement = PiecePlaced(row, column, player)
        debug.debug(f"{player.name} played column {column}, landed on row {row}", "engine")

        # A move that fills the board is a tie even if it also completes a run
        if self.board.is_full():
            return self._finish(Tie(), placement)

        line = self.board.find_run(player)
        if line is not None:
            return self._finish(Win(player, tuple(line)), placement)

        self.current_player = self._other(player)
        return self._notify(placement)

    def _finish(self, outcome: Outcome, placement: PiecePlaced) -> RoundEnded:
        self.game_over = True
        self.outcome = outcome
        result = RoundEnded(outcome, placement)
        debug.info(f"Game over after {self.moves_made} moves: {result.message}", "engine")
        return self._notify(result)

    def _other(self, player: Player) -> Player:
        first, second = self._players
        return second if player is first else first

    def check_for_win(self) -> bool:
        """
        Check whether the current player has four in a row anywhere.

        Every cell is tried as the start of a horizontal, vertical and two
        downward diagonal runs; only runs fully on the board count.
        """
        return self.board.has_run(self.current_player)

    def valid_moves(self) -> List[int]:
        """Columns that would accept a piece (empty once the game is over)."""
        if self.game_over:
            return []
        return self.board.valid_columns()

    def render(self) -> str:
        return self.board.render()
