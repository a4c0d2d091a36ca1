"""
Random agent for Minesweeper.

Serves as a baseline by selecting random valid actions.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that opens or flags cells uniformly at random.

    This provides a baseline for exercising the environment. It almost
    never wins, since winning needs every bomb flagged and nothing else.
    """

    def __init__(
        self,
        board_width: int = 8,
        board_height: int = 8,
        flag_probability: float = 0.1,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_width: Number of columns in the board.
            board_height: Number of rows in the board.
            flag_probability: Chance of choosing a flag action over an open.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_width, board_height)
        if not 0.0 <= flag_probability <= 1.0:
            raise ValueError("flag_probability must be between 0 and 1")
        self.flag_probability = flag_probability
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: 2D array of cell observations.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        open_indices = np.where(valid_actions[:self.total_cells])[0]
        flag_indices = np.where(valid_actions[self.total_cells:])[0]

        use_flag = len(flag_indices) > 0 and (
            len(open_indices) == 0 or self.rng.random() < self.flag_probability
        )
        if use_flag:
            return int(self.rng.choice(flag_indices)) + self.total_cells

        if len(open_indices) == 0:
            # No valid actions, return any action (will be invalid)
            return 0

        return int(self.rng.choice(open_indices))
