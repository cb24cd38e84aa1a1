"""
env.py - Gymnasium environment wrapping GameEngine

The environment lets external drivers (scripts, agents, test harnesses)
play through the standard reset/step interface. Both seats are driven by
the same caller, one column per step, in turn order.
"""

from typing import Dict, Optional, Sequence, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.config import GameConfig
from connectfour.debug import debug
from connectfour.game.outcomes import MoveIgnored, RoundEnded, Win
from connectfour.game.player import Player
from connectfour.game.rules import GameEngine


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Observations are the board grid: 0 for empty, 1 for the first player,
    2 for the second. Rewards are from the first player's point of view.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, config: GameConfig = None, players: Sequence[Player] = None,
                 render_mode: Optional[str] = None):
        """
        Args:
            config: Board dimensions (defaults to 6x7)
            players: The two players, first mover first (defaults to red/yellow)
            render_mode: "ascii", "human" or None
        """
        debug.debug("Initializing ConnectFourEnv", "env")
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.config = config or GameConfig()
        players = tuple(players) if players else (None, None)
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(self.config.width)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(self.config.height, self.config.width), dtype=np.int8
        )

        self.engine = GameEngine(*players, height=self.config.height, width=self.config.width)
        self.last_move = None

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Start a new game.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.engine.new_game(*self.engine.players, height=self.config.height, width=self.config.width)
        self.last_move = None

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play a column for whoever's turn it is.

        A full column (or a move after the game ended) changes nothing,
        costs reward_invalid_move and truncates the episode.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        result = self.engine.attempt_move(int(action))

        reward = self.reward_step
        terminated = False
        truncated = False

        if isinstance(result, MoveIgnored):
            debug.warning(f"Invalid action {action}: {result.reason.value}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        placement = result.placement if isinstance(result, RoundEnded) else result
        self.last_move = (placement.row, placement.column)

        if isinstance(result, RoundEnded):
            terminated = True
            if isinstance(result.outcome, Win):
                first_player = self.engine.players[0]
                reward = self.reward_win if result.winner is first_player else self.reward_lose
            else:
                reward = self.reward_draw
            debug.info(f"Episode finished: {result.message}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.engine.render()
        if self.render_mode == "human":
            print(self.engine.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.engine.board.get_state()

    def _get_info(self) -> Dict:
        outcome = self.engine.outcome
        valid_moves = self.engine.valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.engine.players.index(self.engine.current_player) + 1,
            'game_state': self.engine.state.name,
            'moves_made': self.engine.moves_made,
            'winning_line': list(outcome.line) if isinstance(outcome, Win) else [],
            'last_move': self.last_move,
        }
