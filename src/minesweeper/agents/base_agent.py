"""
Base agent interface for Minesweeper players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from ..game.cell import OBS_FLAGGED, OBS_UNOPENED


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    Agents pick an action for MinesweeperEnv: indices below
    width * height open a cell, the rest toggle a flag.
    """

    def __init__(self, board_width: int, board_height: int) -> None:
        """
        Initialize the agent.

        Args:
            board_width: Number of columns in the board.
            board_height: Number of rows in the board.
        """
        self.board_width = board_width
        self.board_height = board_height
        self.total_cells = board_width * board_height

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell observations.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index.
        """
        pass

    def action_to_position(self, action: int) -> Tuple[bool, Tuple[int, int]]:
        """Convert action index to (is_flag, (x, y))."""
        is_flag = action >= self.total_cells
        index = action - self.total_cells if is_flag else action
        return is_flag, (index % self.board_width, index // self.board_width)

    def position_to_action(self, x: int, y: int, flag: bool = False) -> int:
        """Convert (x, y) position to an open or flag action index."""
        index = y * self.board_width + x
        return index + self.total_cells if flag else index

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Args:
            observation: 2D array of cell observations.

        Returns:
            Boolean mask where True = valid action.
        """
        flat_obs = observation.flatten()
        can_open = flat_obs == OBS_UNOPENED
        can_flag = can_open | (flat_obs == OBS_FLAGGED)
        return np.concatenate([can_open, can_flag])

    def reset(self) -> None:
        """Reset agent state for new episode."""
        pass
