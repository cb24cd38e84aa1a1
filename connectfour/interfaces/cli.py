"""
cli.py - Command-line interface for Connect Four

Terminal front end for the game engine: two people share the keyboard and
take turns entering columns. Also offers a position checker and a small
benchmark. All rules live in GameEngine; this module only reads input and
prints the results the engine reports.
"""

import argparse
import random
import sys
from typing import Callable, List, Optional

import numpy as np

from connectfour.config import DEFAULT_PLAYER_ONE, DEFAULT_PLAYER_TWO, GameConfig
from connectfour.debug import debug, parse_level
from connectfour.exceptions import InvalidColumnError
from connectfour.game.board import Board
from connectfour.game.outcomes import IgnoreReason, MoveIgnored, MoveResult, RoundEnded
from connectfour.game.player import Player
from connectfour.game.rules import GameEngine

# ANSI codes for player colors the terminal can show
ANSI_COLORS = {
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
}
ANSI_RESET = "\033[0m"

QUIT_COMMANDS = ("q", "quit")
RESTART_COMMANDS = ("r", "restart")


def colorize(player: Player) -> str:
    """Player name wrapped in their color, when the terminal knows it."""
    code = ANSI_COLORS.get(player.color.strip().lower())
    if code is None:
        return player.name
    return f"{code}{player.name}{ANSI_RESET}"


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        self.input = input_fn
        self.output = output_fn
        self.config = GameConfig()
        self.engine: Optional[GameEngine] = None
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four')
        parser.add_argument('--height', type=int, default=None, help='Board rows (default 6)')
        parser.add_argument('--width', type=int, default=None, help='Board columns (default 7)')
        parser.add_argument('--debug-level', default=None,
                            help='none, error, warning, info, debug or trace')
        parser.add_argument('--log-file', default=None, help='Also write log output to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', help='Play a two-player game in the terminal')

        check_parser = subparsers.add_parser('check', help='Analyze a board position')
        check_parser.add_argument('position',
                                  help='Comma-separated cell values (0 empty, 1, 2), row by row from the top')

        benchmark_parser = subparsers.add_parser('benchmark', help='Time random games')
        benchmark_parser.add_argument('--games', type=int, default=100, help='Number of games to play')
        benchmark_parser.add_argument('--seed', type=int, default=None, help='Random seed')

        return parser

    def parse_args(self, argv: List[str] = None) -> None:
        """Parse command-line arguments and apply config and logging settings."""
        self.args = self.build_parser().parse_args(argv)

        env_config = GameConfig.from_env()
        self.config = GameConfig(
            height=env_config.height if self.args.height is None else self.args.height,
            width=env_config.width if self.args.width is None else self.args.width,
            debug_level=parse_level(self.args.debug_level) if self.args.debug_level else env_config.debug_level,
        )
        debug.configure(level=self.config.debug_level, log_file=self.args.log_file)

    def run(self, argv: List[str] = None) -> int:
        """Run the command given on the command line. Returns an exit code."""
        try:
            self.parse_args(argv)
        except ValueError as exc:
            self.output(f"Error: {exc}")
            return 2

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'check':
            return self.check_position()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            self.output("Please specify a command. Use --help for options.")
            return 1
        return 0

    # Interactive play

    def ask_player(self, label: str, default: tuple) -> Player:
        """Ask for a player's name and color, falling back to the defaults."""
        default_color, default_name = default
        name = self.input(f"{label} name [{default_name}]: ").strip() or default_name
        color = self.input(f"{label} color [{default_color}]: ").strip() or default_color
        return Player(color=color, name=name)

    def show_result(self, result: MoveResult) -> None:
        """Print the outcome of a move attempt (registered as an engine listener)."""
        if isinstance(result, MoveIgnored):
            if result.reason is IgnoreReason.COLUMN_FULL:
                self.output(f"Column {result.column} is full, pick another.")
            return

        placement = result.placement if isinstance(result, RoundEnded) else result
        self.output(self.engine.render())
        self.output(f"{colorize(placement.player)} played column {placement.column}.")

        if isinstance(result, RoundEnded):
            self.output(result.message)

    def play_game(self) -> None:
        """Play Connect Four with two people at the same terminal."""
        self.output("Starting a new Connect Four game!")
        player1 = self.ask_player("Player 1", DEFAULT_PLAYER_ONE)
        player2 = self.ask_player("Player 2", DEFAULT_PLAYER_TWO)

        self.engine = GameEngine(player1, player2, self.config.height, self.config.width)
        self.engine.add_listener(self.show_result)
        self.output(self.engine.render())

        while True:
            if self.engine.game_over:
                answer = self.input("Play again? [y/N]: ").strip().lower()
                if answer not in ("y", "yes"):
                    return
                self.restart()
                continue

            move = self.read_column()
            if move is None:
                continue
            if move == "quit":
                self.output("Quitting game.")
                return
            if move == "restart":
                self.restart()
                continue

            self.engine.attempt_move(move)

    def restart(self) -> None:
        player1, player2 = self.engine.players
        self.engine.new_game(player1, player2, self.config.height, self.config.width)
        self.output("Game restarted.")
        self.output(self.engine.render())

    def read_column(self):
        """
        Read one command from the current player.

        Returns:
            A column index, "quit", "restart", or None for unusable input
        """
        last_column = self.config.width - 1
        prompt = f"{colorize(self.engine.current_player)}'s move (0-{last_column}, q to quit, r to restart): "
        user_input = self.input(prompt).strip().lower()

        if user_input in QUIT_COMMANDS:
            return "quit"
        if user_input in RESTART_COMMANDS:
            return "restart"

        try:
            column = int(user_input)
        except ValueError:
            self.output("Invalid input. Please enter a column number or command.")
            return None

        if not 0 <= column <= last_column:
            self.output(f"Column must be between 0 and {last_column}.")
            return None
        return column

    # Position analysis

    def check_position(self) -> int:
        """Report wins, fullness and playable columns for a given position."""
        height, width = self.config.height, self.config.width
        try:
            values = [int(v) for v in self.args.position.split(',')]
            if len(values) != height * width:
                raise ValueError(f"Position must have {height * width} values, got {len(values)}")
            if any(v not in (0, 1, 2) for v in values):
                raise ValueError("Cell values must be 0, 1 or 2")
        except ValueError as exc:
            self.output(f"Error parsing position: {exc}")
            return 2

        players = (Player(*DEFAULT_PLAYER_ONE), Player(*DEFAULT_PLAYER_TWO))
        board = Board(height, width, players=players)
        board.grid[:, :] = np.array(values, dtype=np.int8).reshape(height, width)

        self.output("Loaded position:")
        self.output(board.render())

        has_win = False
        for player in players:
            line = board.find_run(player)
            if line is not None:
                self.output(f"Win for {player.name}: {line}")
                has_win = True
        if not has_win:
            self.output("No win detected for either player")

        if board.is_full():
            self.output("Board is full")
        else:
            self.output(f"Empty cells: {board.height * board.width - board.pieces_placed}")
            self.output(f"Playable columns: {board.valid_columns()}")
        return 0

    # Benchmark

    def benchmark(self) -> None:
        """Play random games and report timings."""
        rng = random.Random(self.args.seed)
        games = max(1, self.args.games)
        engine = GameEngine(height=self.config.height, width=self.config.width)
        outcomes = {"win": 0, "tie": 0}
        total_moves = 0

        debug.start_timer("benchmark")
        for _ in range(games):
            engine.new_game(*engine.players, self.config.height, self.config.width)
            result = None
            while not engine.game_over:
                result = engine.attempt_move(rng.choice(engine.valid_moves()))
            outcomes["win" if result.winner is not None else "tie"] += 1
            total_moves += engine.moves_made
        elapsed = debug.end_timer("benchmark", "cli")

        self.output(f"Played {games} games ({total_moves} moves) in {elapsed:.4f} seconds")
        self.output(f"{elapsed / total_moves * 1000:.4f} ms per move; "
                    f"{outcomes['win']} wins, {outcomes['tie']} ties")


def main(argv: List[str] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    try:
        return cli.run(argv)
    except InvalidColumnError as exc:
        debug.error(str(exc), "cli")
        return 1
    except (KeyboardInterrupt, EOFError):
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())
