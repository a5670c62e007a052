"""
Random agent for the diamond game.

Serves as a baseline by revealing random cells and cashing out at random.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that reveals cells uniformly at random.

    Before each reveal it cashes out with a fixed probability whenever
    cashing out is allowed.
    """

    def __init__(
        self,
        max_board_size: int = 12,
        cash_out_chance: float = 0.1,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            max_board_size: Side length of the padded observation.
            cash_out_chance: Probability of cashing out on a given turn.
            seed: Random seed for reproducibility.
        """
        super().__init__(max_board_size)
        self.cash_out_chance = cash_out_chance
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random reveal action, or the cash-out action.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        can_cash_out = bool(valid_actions[self.cash_out_action])
        if can_cash_out and self.rng.random() < self.cash_out_chance:
            return self.cash_out_action

        valid_indices = np.where(valid_actions[:self.cash_out_action])[0]

        if len(valid_indices) == 0:
            # Nothing left to reveal
            return self.cash_out_action

        return int(self.rng.choice(valid_indices))
