"""
Tests for GameService.
"""
import threading

import pytest

from connectfour.exceptions import GameNotFoundError, InvalidColumnError
from connectfour.game.outcomes import PiecePlaced, RoundEnded
from connectfour.game.player import Player
from connectfour.service import GameService


def test_create_game_assigns_ids():
    """Test that each game gets its own id."""
    service = GameService()

    first = service.create_game()
    second = service.create_game()

    assert first == "game-1"
    assert second == "game-2"
    assert service.game_ids() == ["game-1", "game-2"]


def test_games_are_independent():
    """Test that moves in one game do not affect another."""
    service = GameService()
    a, b = Player("red", "A"), Player("yellow", "B")
    first = service.create_game(a, b)
    second = service.create_game()

    result = service.attempt_move(first, 2)

    assert result == PiecePlaced(5, 2, a)
    assert service.get_engine(first).moves_made == 1
    assert service.get_engine(second).moves_made == 0


def test_unknown_game():
    """Test that unknown ids raise GameNotFoundError."""
    service = GameService()

    with pytest.raises(GameNotFoundError):
        service.attempt_move("game-99", 0)
    with pytest.raises(KeyError):
        service.get_engine("game-99")


def test_invalid_column_propagates():
    """Test that engine errors reach the caller."""
    service = GameService()
    game_id = service.create_game(width=4)

    with pytest.raises(InvalidColumnError):
        service.attempt_move(game_id, 4)


def test_close_game():
    """Test that closed games are forgotten."""
    service = GameService()
    game_id = service.create_game()

    service.close_game(game_id)

    assert service.game_ids() == []
    with pytest.raises(GameNotFoundError):
        service.close_game(game_id)


def test_restart_keeps_players_and_size():
    """Test that restart starts over with the same setup by default."""
    service = GameService()
    a, b = Player("red", "A"), Player("yellow", "B")
    game_id = service.create_game(a, b, height=5, width=5)
    for column in (0, 0, 1, 1, 2, 2):
        service.attempt_move(game_id, column)

    service.restart(game_id)
    engine = service.get_engine(game_id)

    assert engine.players == (a, b)
    assert engine.board.grid.shape == (5, 5)
    assert engine.moves_made == 0
    assert engine.current_player is a


def test_restart_with_new_players():
    """Test that restart can swap in new players."""
    service = GameService()
    game_id = service.create_game()
    c = Player("green", "C")

    service.restart(game_id, player1=c)

    assert service.get_engine(game_id).players[0] is c


def test_concurrent_moves_are_serialized():
    """Test that moves from many threads are applied one at a time."""
    service = GameService()
    game_id = service.create_game(height=20, width=20)
    barrier = threading.Barrier(8)
    results = []
    results_lock = threading.Lock()

    def worker(column):
        barrier.wait()
        for _ in range(10):
            result = service.attempt_move(game_id, column)
            with results_lock:
                results.append(result)

    threads = [threading.Thread(target=worker, args=(column * 2,)) for column in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    engine = service.get_engine(game_id)
    placed = [r for r in results if isinstance(r, (PiecePlaced, RoundEnded))]
    assert engine.moves_made == len(placed)
    assert engine.board.pieces_placed == len(placed)


def test_restart_rejects_invalid_size():
    """Test that restart validates explicit dimensions instead of keeping the old ones."""
    service = GameService()
    game_id = service.create_game()

    with pytest.raises(ValueError):
        service.restart(game_id, height=0)
    with pytest.raises(ValueError):
        service.restart(game_id, width=0)
