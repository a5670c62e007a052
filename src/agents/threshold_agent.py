"""
Threshold agent for the diamond game.

Reveals random cells until it has found a target number of diamonds in
the game, then cashes out.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


class ThresholdAgent(BaseAgent):
    """
    Agent that banks the score after a fixed number of diamonds.

    Diamonds are counted across boards. When the cell the agent just
    revealed shows up hidden again, the board was cleared and replaced,
    and the agent adds the diamonds of the cleared board (including
    that last reveal) to its running total.
    """

    def __init__(
        self,
        max_board_size: int = 12,
        target_diamonds: int = 5,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the threshold agent.

        Args:
            max_board_size: Side length of the padded observation.
            target_diamonds: Diamonds to find before cashing out.
            seed: Random seed for reproducibility.
        """
        super().__init__(max_board_size)
        self.target_diamonds = target_diamonds
        self.rng = np.random.default_rng(seed)
        self._banked_boards = 0
        self._last_visible = 0
        self._last_reveal: Optional[int] = None

    def _board_was_cleared(self, observation: np.ndarray) -> bool:
        """Check if the previous reveal's cell is no longer a revealed diamond."""
        if self._last_reveal is None:
            return False
        row, col = self.action_to_position(self._last_reveal)
        return observation[row, col] < 0

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """Reveal at random until the target is reached, then cash out."""
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        if self._board_was_cleared(observation):
            self._banked_boards += self._last_visible + 1
        visible = self.diamonds_visible(observation)
        self._last_visible = visible

        found = self._banked_boards + visible
        if found >= self.target_diamonds and valid_actions[self.cash_out_action]:
            self._last_reveal = None
            return self.cash_out_action

        valid_indices = np.where(valid_actions[:self.cash_out_action])[0]
        if len(valid_indices) == 0:
            self._last_reveal = None
            return self.cash_out_action
        action = int(self.rng.choice(valid_indices))
        self._last_reveal = action
        return action

    def reset(self) -> None:
        """Forget diamonds counted in the previous game."""
        self._banked_boards = 0
        self._last_visible = 0
        self._last_reveal = None
