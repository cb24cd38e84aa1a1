"""
service.py - Hosting several Connect Four games at once

GameEngine has no locking of its own. GameService keeps one engine per game
id and lets only one caller at a time touch a given game, so moves for the
same game are applied one after another in the order they acquire its lock.
Different games never block each other.
"""

import itertools
import threading
from dataclasses import dataclass, field
from typing import Dict, List

from connectfour.config import DEFAULT_HEIGHT, DEFAULT_WIDTH
from connectfour.debug import debug
from connectfour.exceptions import GameNotFoundError
from connectfour.game.outcomes import MoveResult
from connectfour.game.player import Player
from connectfour.game.rules import GameEngine


@dataclass
class HostedGame:
    game_id: str
    engine: GameEngine
    lock: threading.Lock = field(default_factory=threading.Lock)


class GameService:
    """Registry of running games keyed by id."""

    def __init__(self) -> None:
        self._games: Dict[str, HostedGame] = {}
        self._game_id_seq = itertools.count(1)
        self._lock = threading.Lock()

    def create_game(self, player1: Player = None, player2: Player = None,
                    height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH) -> str:
        """Start a new game and return its id."""
        engine = GameEngine(player1, player2, height, width)
        with self._lock:
            game_id = f"game-{next(self._game_id_seq)}"
            self._games[game_id] = HostedGame(game_id, engine)
        debug.info(f"Created {game_id}", "service")
        return game_id

    def _get(self, game_id: str) -> HostedGame:
        with self._lock:
            hosted = self._games.get(game_id)
        if hosted is None:
            raise GameNotFoundError(game_id)
        return hosted

    def get_engine(self, game_id: str) -> GameEngine:
        return self._get(game_id).engine

    def attempt_move(self, game_id: str, column: int) -> MoveResult:
        """
        Play a column in one game.

        Raises:
            GameNotFoundError: If no game has this id
            InvalidColumnError: If the column is outside that game's board
        """
        hosted = self._get(game_id)
        with hosted.lock:
            return hosted.engine.attempt_move(column)

    def restart(self, game_id: str, player1: Player = None, player2: Player = None,
                height: int = None, width: int = None) -> None:
        """
        Start a fresh game under an existing id.

        Players and dimensions not given are kept from the current game.
        """
        hosted = self._get(game_id)
        with hosted.lock:
            engine = hosted.engine
            current_one, current_two = engine.players
            engine.new_game(
                current_one if player1 is None else player1,
                current_two if player2 is None else player2,
                engine.board.height if height is None else height,
                engine.board.width if width is None else width,
            )
        debug.info(f"Restarted {game_id}", "service")

    def close_game(self, game_id: str) -> None:
        with self._lock:
            if self._games.pop(game_id, None) is None:
                raise GameNotFoundError(game_id)
        debug.info(f"Closed {game_id}", "service")

    def game_ids(self) -> List[str]:
        with self._lock:
            return list(self._games)
