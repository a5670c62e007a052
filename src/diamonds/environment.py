"""
Gymnasium environment wrapper for the diamond game.

Provides a standard RL interface for agents that decide when to keep
revealing and when to cash out.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import DEFAULT_CONFIG, GameConfig
from .session import GameSession, SessionState

OFF_BOARD = -3
INVALID_ACTION_PENALTY = -0.1


# ============================================================================
# Diamond Environment
# ============================================================================

class DiamondEnv(gym.Env):
    """
    Gymnasium environment for the diamond game.

    Observation:
        2D array of shape (max_board_size, max_board_size) where:
        - -3 = outside the current board
        - -1 = hidden cell
        - 0/1/2 = revealed diamond / rare diamond / super diamond
        - 9 = revealed bomb

    Actions:
        Discrete action space of size max_board_size ** 2 + 1.
        Action i < max_board_size ** 2 reveals the cell at
        (i // max_board_size, i % max_board_size); the last action
        cashes out.

    Rewards:
        - points earned by a diamond reveal (score delta)
        - minus the unbanked score when a bomb is hit
        - 0 for cashing out (the score was already paid out step by step)
        - -0.1 for an invalid action
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        start_level: int = 1,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the diamond environment.

        Args:
            config: Game rules (default: original rules).
            start_level: Level of the first board in every episode.
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or DEFAULT_CONFIG
        self.start_level = start_level
        self.render_mode = render_mode
        self.max_size = self.config.max_board_size

        self.observation_space = spaces.Box(
            low=OFF_BOARD,
            high=9,
            shape=(self.max_size, self.max_size),
            dtype=np.int8,
        )

        # One action per cell of the largest board, plus cash out
        self.cash_out_action = self.max_size * self.max_size
        self.action_space = spaces.Discrete(self.cash_out_action + 1)

        self.session = GameSession(
            self.config, rng=self.np_random, start_level=start_level
        )
        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new game.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session = GameSession(
            self.config, rng=self.np_random, start_level=self.start_level
        )
        self._steps = 0

        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal, or the cash-out action.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1

        if action == self.cash_out_action:
            reward = self._cash_out()
        else:
            reward = self._reveal(*self._action_to_position(action))

        terminated = not self.session.is_playing
        truncated = False

        return self._get_observation(), reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return action // self.max_size, action % self.max_size

    def _reveal(self, row: int, col: int) -> float:
        """Reveal a cell and return the score change."""
        score_before = self.session.score
        result = self.session.reveal(row, col)
        if result is None:
            return INVALID_ACTION_PENALTY
        if result.hit_bomb:
            return float(-score_before)
        return float(result.score - score_before)

    def _cash_out(self) -> float:
        """Bank the score; invalid when nothing has been found yet."""
        if self.session.cash_out() is None:
            return INVALID_ACTION_PENALTY
        return 0.0

    def _get_observation(self) -> np.ndarray:
        """Pad the current board's observation to the fixed shape."""
        obs = np.full((self.max_size, self.max_size), OFF_BOARD, dtype=np.int8)
        board_obs = self.session.board.get_observation()
        size = board_obs.shape[0]
        obs[:size, :size] = board_obs
        return obs

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        session = self.session
        return {
            "steps": self._steps,
            "level": session.level,
            "board_size": session.board.config.size,
            "boss": session.is_boss_level,
            "score": session.score,
            "diamonds_found": session.total_diamonds,
            "multiplier": session.multiplier,
            "game_state": session.state.name,
            "banked": session.score if session.state == SessionState.CASHED_OUT else 0,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board and score line as text."""
        session = self.session
        header = (
            f"Level {session.level}{' BOSS' if session.is_boss_level else ''} | "
            f"Score {session.score} | x{session.multiplier:.2f}"
        )
        return header + "\n" + session.board.render_ansi()

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.session.is_playing:
            return mask
        for row, col in self.session.board.get_valid_actions():
            mask[row * self.max_size + col] = True
        mask[self.cash_out_action] = self.session.can_cash_out()
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[GameConfig] = None,
    start_level: int = 1,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel rollouts.

    Args:
        n_envs: Number of parallel environments.
        config: Game rules.
        start_level: Level of the first board in every episode.

    Returns:
        Vectorized environment.
    """
    def make_env() -> DiamondEnv:
        return DiamondEnv(config=config, start_level=start_level)

    return gym.vector.AsyncVectorEnv([make_env for _ in range(n_envs)])
