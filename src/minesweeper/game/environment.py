"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface for driving a game session.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import CellState, FlagResult, OpenResult, OBS_BOMB, OBS_FLAGGED
from .grid import Position
from .session import BoardConfig, GameSession


# ============================================================================
# Rewards
# ============================================================================

REWARD_SAFE_OPEN = 1.0
REWARD_WIN = 10.0
REWARD_BOMB = -10.0
REWARD_FLAG = 0.0
REWARD_INVALID = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array of shape (height, width) where:
        - -1 = unopened cell
        - -2 = flagged cell
        - 0-8 = opened cell with adjacent bomb count
        - 9 = opened bomb

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < cells opens cell (i % width, i // width); action
        i >= cells toggles the flag on cell i - cells.

    Rewards:
        - +1 for opening a safe cell
        - +10 for winning the game (flagging every bomb)
        - -10 for hitting a bomb
        - 0 for toggling a flag
        - -0.1 for invalid action (no effect)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 8x8 with 5 bombs).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.session = GameSession(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_BOMB,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # One open action and one flag action per cell
        self._num_cells = self.config.num_cells
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible bomb layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session.new_game(rng=self.np_random)
        self._steps = 0

        return self.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Open or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        is_flag, pos = self.decode_action(action)
        self._steps += 1

        if is_flag:
            reward = self._flag_reward(self.session.toggle_flag(pos))
        else:
            reward = self._open_reward(self.session.open(pos))

        observation = self.session.board.get_observation()
        terminated = not self.session.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def decode_action(self, action: int) -> Tuple[bool, Position]:
        """Split an action index into (is_flag, (x, y))."""
        action = int(action)
        is_flag = action >= self._num_cells
        index = action - self._num_cells if is_flag else action
        return is_flag, (index % self.config.width, index // self.config.width)

    def encode_action(self, pos: Position, flag: bool = False) -> int:
        """Build the action index for opening or flagging pos."""
        x, y = pos
        index = y * self.config.width + x
        return index + self._num_cells if flag else index

    def _open_reward(self, result: Optional[OpenResult]) -> float:
        if result is None:
            return REWARD_INVALID
        if result == OpenResult.BOMB_HIT:
            return REWARD_BOMB
        return REWARD_SAFE_OPEN

    def _flag_reward(self, result: Optional[FlagResult]) -> float:
        if result is None:
            return REWARD_INVALID
        if self.session.is_won:
            return REWARD_WIN
        return REWARD_FLAG

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.session.board
        return {
            "steps": self._steps,
            "opened": board.opened_count,
            "flags": board.flag_count,
            "bombs": board.bomb_count,
            "game_state": self.session.game_state.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.session.board.render_text()
        if self.render_mode == "human":
            print(self.session.board.render_text())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        states = list(self.session.board.states)
        open_mask = np.array(
            [state == CellState.UNOPENED for state in states], dtype=bool
        )
        flag_mask = np.array(
            [state != CellState.OPENED for state in states], dtype=bool
        )
        if not self.session.is_playing:
            open_mask[:] = False
            flag_mask[:] = False
        return np.concatenate([open_mask, flag_mask])


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel play.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(config=config)

    return gym.vector.AsyncVectorEnv([make_env for _ in range(n_envs)])
