"""
Base agent interface for the diamond game.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for diamond game agents.

    All agents must implement the select_action method to choose
    which cell to reveal, or whether to cash out, based on the current
    observation.
    """

    def __init__(self, max_board_size: int = 12) -> None:
        """
        Initialize the agent.

        Args:
            max_board_size: Side length of the padded observation.
        """
        self.max_board_size = max_board_size
        self.cash_out_action = max_board_size * max_board_size

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index (row * max_board_size + col), or the cash-out
            action.
        """
        pass

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return action // self.max_board_size, action % self.max_board_size

    def position_to_action(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat action index."""
        return row * self.max_board_size + col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Cash-out is considered valid once any diamond is visible.

        Args:
            observation: 2D array of cell states.

        Returns:
            Boolean mask where True = valid action.
        """
        flat_obs = observation.flatten()
        # Hidden cells (value -1) can be revealed
        reveal_mask = flat_obs == -1
        found_any = bool(np.isin(flat_obs, (0, 1, 2)).any())
        return np.append(reveal_mask, found_any)

    @staticmethod
    def diamonds_visible(observation: np.ndarray) -> int:
        """Count revealed diamonds on the current board."""
        return int(np.isin(observation, (0, 1, 2)).sum())

    def reset(self) -> None:
        """Reset agent state for new episode."""
        pass
