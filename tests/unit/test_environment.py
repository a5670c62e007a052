"""
Unit tests for the Gymnasium environment.
"""
import numpy as np
import pytest
from diamonds import CellType, DiamondEnv, GameConfig, RarityOdds
from diamonds.environment import INVALID_ACTION_PENALTY, OFF_BOARD

NO_RARITY = RarityOdds(super_chance=0.0, rare_chance=0.0)


def cell_action(env: DiamondEnv, wanted) -> int:
    """Flat action of the first hidden cell whose type satisfies ``wanted``."""
    for row, grid_row in enumerate(env.session.board.grid):
        for col, cell in enumerate(grid_row):
            if cell.is_hidden and wanted(cell.type):
                return row * env.max_size + col
    raise AssertionError("no matching cell")


@pytest.fixture
def env() -> DiamondEnv:
    """Environment reset with a fixed seed."""
    env = DiamondEnv(config=GameConfig(normal_odds=NO_RARITY), render_mode="ansi")
    env.reset(seed=11)
    return env


class TestSpaces:
    """Test observation and action spaces."""

    def test_action_space(self, env: DiamondEnv) -> None:
        """One action per cell of a 12x12 board plus cash out."""
        assert env.action_space.n == 145
        assert env.cash_out_action == 144

    def test_observation_padding(self, env: DiamondEnv) -> None:
        """Level 1 fills the top-left 5x5 block; the rest is off board."""
        obs, _ = env.reset(seed=3)
        assert obs.shape == (12, 12)
        assert obs.dtype == np.int8
        assert (obs[:5, :5] == -1).all()
        assert (obs[5:, :] == OFF_BOARD).all()
        assert (obs[:, 5:] == OFF_BOARD).all()
        assert env.observation_space.contains(obs)

    def test_reset_info(self, env: DiamondEnv) -> None:
        """Info describes the first level."""
        _, info = env.reset(seed=0)
        assert info["level"] == 1
        assert info["board_size"] == 5
        assert info["boss"] is False
        assert info["score"] == 0
        assert info["game_state"] == "PLAYING"


class TestStep:
    """Test rewards and termination."""

    def test_diamond_reward_is_score_delta(self, env: DiamondEnv) -> None:
        """Revealing a diamond pays the points it earned."""
        obs, reward, terminated, truncated, info = env.step(
            cell_action(env, lambda t: t.is_diamond)
        )
        assert reward == 15.0
        assert info["score"] == 15
        assert terminated is False
        assert truncated is False
        assert (obs[:5, :5] == 0).sum() == 1

    def test_bomb_takes_back_score(self, env: DiamondEnv) -> None:
        """Hitting a bomb costs the unbanked score and ends the episode."""
        env.step(cell_action(env, lambda t: t.is_diamond))
        _, reward, terminated, _, info = env.step(
            cell_action(env, lambda t: t is CellType.BOMB)
        )
        assert reward == -15.0
        assert terminated is True
        assert info["game_state"] == "LOST"
        assert info["banked"] == 0

    def test_cash_out(self, env: DiamondEnv) -> None:
        """Cashing out ends the episode and banks the score."""
        env.step(cell_action(env, lambda t: t.is_diamond))
        _, reward, terminated, _, info = env.step(env.cash_out_action)
        assert reward == 0.0
        assert terminated is True
        assert info["banked"] == 15

    def test_early_cash_out_is_invalid(self, env: DiamondEnv) -> None:
        """Cashing out before any diamond is penalized."""
        _, reward, terminated, _, _ = env.step(env.cash_out_action)
        assert reward == INVALID_ACTION_PENALTY
        assert terminated is False

    def test_off_board_action_is_invalid(self, env: DiamondEnv) -> None:
        """Cells outside the current board cannot be revealed."""
        _, reward, terminated, _, _ = env.step(11)
        assert reward == INVALID_ACTION_PENALTY
        assert terminated is False

    def test_repeated_reveal_is_invalid(self, env: DiamondEnv) -> None:
        """Revealing the same cell twice is penalized."""
        action = cell_action(env, lambda t: t.is_diamond)
        env.step(action)
        _, reward, _, _, _ = env.step(action)
        assert reward == INVALID_ACTION_PENALTY


class TestActionMask:
    """Test the valid action mask."""

    def test_initial_mask(self, env: DiamondEnv) -> None:
        """All 25 cells are valid; cash out is not."""
        mask = env.get_action_mask()
        assert mask.shape == (145,)
        assert mask[:144].sum() == 25
        assert mask[env.cash_out_action] == False  # noqa: E712

    def test_mask_after_diamond(self, env: DiamondEnv) -> None:
        """Revealed cell is masked out and cash out opens up."""
        action = cell_action(env, lambda t: t.is_diamond)
        env.step(action)
        mask = env.get_action_mask()
        assert mask[action] == False  # noqa: E712
        assert mask[env.cash_out_action] == True  # noqa: E712

    def test_mask_empty_after_game(self, env: DiamondEnv) -> None:
        """No action is valid once the episode is over."""
        env.step(cell_action(env, lambda t: t is CellType.BOMB))
        assert not env.get_action_mask().any()


class TestReproducibility:
    """Test seeding and rendering."""

    def test_same_seed_same_board(self) -> None:
        """Two environments reset with the same seed deal the same board."""
        first, second = DiamondEnv(), DiamondEnv()
        first.reset(seed=42)
        second.reset(seed=42)
        assert [[c.type for c in row] for row in first.session.board.grid] == \
            [[c.type for c in row] for row in second.session.board.grid]

    def test_render_ansi(self, env: DiamondEnv) -> None:
        """Text render has a header line and one line per board row."""
        text = env.render()
        lines = text.split("\n")
        assert lines[0] == "Level 1 | Score 0 | x1.00"
        assert len(lines) == 6
        assert lines[1] == ". . . . ."

    def test_render_without_mode(self) -> None:
        """No render mode renders nothing."""
        env = DiamondEnv()
        env.reset(seed=0)
        assert env.render() is None
