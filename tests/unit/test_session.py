"""
Unit tests for the game session.
"""
import numpy as np
import pytest
from diamonds import (
    CLASSIC,
    CellType,
    GameConfig,
    GameSession,
    InvalidArgument,
    RarityOdds,
    SessionState,
)
from diamonds.tracker import GameOutcome

NO_RARITY = RarityOdds(super_chance=0.0, rare_chance=0.0)
PLAIN = GameConfig(normal_odds=NO_RARITY, boss_odds=NO_RARITY)

# 2x2 boards with one bomb and three diamonds on every level
TINY = GameConfig(
    base_board_size=2,
    max_board_size=2,
    base_bomb_ratio=0.25,
    bomb_ratio_step=0.0,
    normal_odds=NO_RARITY,
    boss_odds=NO_RARITY,
)


class TestSessionStart:
    """Test a freshly started session."""

    def test_first_board(self, session: GameSession) -> None:
        """Level 1 is a 5x5 board with 3 bombs."""
        assert session.level == 1
        assert session.board.config.size == 5
        assert session.board.config.bomb_count == 3
        assert session.is_boss_level is False

    def test_counters_start_at_zero(self, session: GameSession) -> None:
        """No score and no diamonds at the start."""
        assert session.state == SessionState.PLAYING
        assert session.score == 0
        assert session.diamonds_found == 0
        assert session.multiplier == 1.0
        assert session.risk == pytest.approx(0.1)

    def test_start_level(self, rng: np.random.Generator) -> None:
        """Starting on level 5 deals a boss board."""
        session = GameSession(rng=rng, start_level=5)
        assert session.is_boss_level is True
        assert session.board.config.size == 7

    def test_invalid_start_level(self) -> None:
        """Start level below 1 is rejected."""
        with pytest.raises(InvalidArgument):
            GameSession(start_level=0)


class TestSessionReveal:
    """Test reveals through the session."""

    def test_diamond_scores(self, rng: np.random.Generator, diamond_positions) -> None:
        """Plain diamonds score 15 then 17 on level 1."""
        session = GameSession(PLAIN, rng=rng)
        first, second = diamond_positions(session.board)[:2]
        result = session.reveal(*first)
        assert result.cell_type is CellType.DIAMOND
        assert result.points == 15
        assert result.score == 15
        result = session.reveal(*second)
        assert result.points == 17
        assert session.score == 32

    def test_latest_reveal_scoring(self, rng: np.random.Generator, diamond_positions) -> None:
        """Without cumulative scoring the score is the latest reveal's."""
        config = GameConfig(
            normal_odds=NO_RARITY, boss_odds=NO_RARITY, cumulative_score=False
        )
        session = GameSession(config, rng=rng)
        for position in diamond_positions(session.board)[:2]:
            session.reveal(*position)
        assert session.score == 17
        assert CLASSIC.cumulative_score is False

    def test_multiplier_follows_diamonds(
        self, session: GameSession, diamond_positions
    ) -> None:
        """Display multiplier is 1.2 to the power of diamonds found."""
        for position in diamond_positions(session.board)[:2]:
            session.reveal(*position)
        assert session.diamonds_found == 2
        assert session.multiplier == pytest.approx(1.44)

    def test_bomb_ends_game(
        self, session: GameSession, diamond_positions, bomb_positions
    ) -> None:
        """A bomb loses the game and keeps the unbanked score unchanged."""
        session.reveal(*diamond_positions(session.board)[0])
        score = session.score
        result = session.reveal(*bomb_positions(session.board)[0])
        assert result.hit_bomb is True
        assert result.points == 0
        assert result.score == score
        assert session.state == SessionState.LOST
        assert session.consecutive == 0

    def test_no_reveal_after_loss(
        self, session: GameSession, diamond_positions, bomb_positions
    ) -> None:
        """Reveals are ignored once the game is lost."""
        session.reveal(*bomb_positions(session.board)[0])
        assert session.reveal(*diamond_positions(session.board)[0]) is None

    def test_invalid_reveal_returns_none(self, session: GameSession) -> None:
        """Off-board or repeated reveals do nothing."""
        assert session.reveal(5, 0) is None
        assert session.score == 0

    def test_rare_diamonds_counted(self, rng: np.random.Generator, diamond_positions) -> None:
        """Rare diamonds found are tracked for the outcome."""
        all_rare = RarityOdds(super_chance=0.0, rare_chance=1.0)
        session = GameSession(GameConfig(normal_odds=all_rare), rng=rng)
        for position in diamond_positions(session.board)[:3]:
            assert session.reveal(*position).cell_type is CellType.RARE_DIAMOND
        assert session.rare_diamonds == 3


class TestLevelClear:
    """Test moving on to the next level."""

    def test_clearing_board_advances_level(
        self, rng: np.random.Generator, diamond_positions
    ) -> None:
        """Finding every diamond deals the next level and keeps the score."""
        session = GameSession(TINY, rng=rng)
        positions = diamond_positions(session.board)
        assert len(positions) == 3
        results = [session.reveal(*position) for position in positions]
        assert [r.level_cleared for r in results] == [False, False, True]
        assert session.level == 2
        assert session.is_playing is True
        assert session.diamonds_found == 0
        assert session.total_diamonds == 3
        assert session.consecutive == 3
        assert session.score == results[-1].score
        assert (session.board.get_observation() == -1).all()

    def test_streak_spans_boards(self, rng: np.random.Generator, diamond_positions) -> None:
        """Best streak counts diamonds across cleared boards."""
        session = GameSession(TINY, rng=rng)
        for _ in range(2):
            for position in diamond_positions(session.board):
                session.reveal(*position)
        assert session.total_diamonds == 6
        assert session.consecutive == 6
        assert session.cash_out().consecutive_streak == 6


class TestCashOut:
    """Test banking the score."""

    def test_cannot_cash_out_without_diamonds(self, session: GameSession) -> None:
        """Cashing out needs at least one diamond."""
        assert session.can_cash_out() is False
        assert session.cash_out() is None
        assert session.is_playing is True

    def test_cash_out_returns_outcome(
        self, rng: np.random.Generator, diamond_positions
    ) -> None:
        """Outcome carries the score and diamond counters."""
        session = GameSession(PLAIN, rng=rng)
        for position in diamond_positions(session.board)[:2]:
            session.reveal(*position)
        outcome = session.cash_out()
        assert outcome == GameOutcome(
            final_score=32, diamonds_found=2, consecutive_streak=2, rare_diamonds=0
        )
        assert session.state == SessionState.CASHED_OUT

    def test_cash_out_only_once(self, session: GameSession, diamond_positions) -> None:
        """A cashed-out game cannot be banked or played again."""
        position = diamond_positions(session.board)[0]
        session.reveal(*position)
        session.cash_out()
        assert session.cash_out() is None
        assert session.reveal(*diamond_positions(session.board)[0]) is None

    def test_cannot_cash_out_after_loss(
        self, session: GameSession, diamond_positions, bomb_positions
    ) -> None:
        """A lost game has nothing to bank."""
        session.reveal(*diamond_positions(session.board)[0])
        session.reveal(*bomb_positions(session.board)[0])
        assert session.cash_out() is None

    def test_new_game_resets(self, session: GameSession, diamond_positions) -> None:
        """new_game starts over from the start level."""
        session.reveal(*diamond_positions(session.board)[0])
        session.cash_out()
        session.new_game()
        assert session.is_playing is True
        assert session.score == 0
        assert session.total_diamonds == 0
        assert session.level == 1
