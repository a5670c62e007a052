"""
Game session state.

A ``GameSession`` holds everything that lives for the duration of one
game: the current level and board, the diamond counters and the score.
It drives the difficulty curve, board generator and scoring engine, and
hands a ``GameOutcome`` to the profile layer on cash-out.
"""
import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

import numpy as np

from .board import Board, BoardConfig
from .cell import CellType
from .config import DEFAULT_CONFIG, GameConfig
from .difficulty import level_layout
from .errors import InvalidArgument
from .scoring import display_multiplier, risk_level, score_for_reveal
from .tracker import GameOutcome

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Possible states of a game session."""

    PLAYING = auto()
    LOST = auto()
    CASHED_OUT = auto()


@dataclass(frozen=True)
class RevealResult:
    """
    Result of a single reveal.

    Attributes:
        cell_type: What was under the cell.
        points: Score earned by this reveal (0 for a bomb).
        score: Session score after the reveal.
        level_cleared: Whether the reveal found the last diamond and the
            session moved on to the next level.
    """

    cell_type: CellType
    points: int
    score: int
    level_cleared: bool = False

    @property
    def hit_bomb(self) -> bool:
        """Check if the reveal ended the game."""
        return self.cell_type is CellType.BOMB


class GameSession:
    """Tracks one game from the first board until a bust or a cash-out."""

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        rng: Optional[np.random.Generator] = None,
        start_level: int = 1,
    ) -> None:
        """
        Initialize a session and deal the first board.

        Args:
            config: Game rules.
            rng: Random source shared by every board of the session.
            start_level: Level of the first board.
        """
        if start_level < 1:
            raise InvalidArgument(f"Level must be at least 1, got {start_level}")
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()
        self._start_level = start_level
        self.new_game()

    def new_game(self) -> None:
        """Reset all counters and deal a board for the starting level."""
        self._level = self._start_level
        self._score = 0
        self._total_diamonds = 0
        self._rare_diamonds = 0
        self._best_streak = 0
        self._consecutive = 0
        self._state = SessionState.PLAYING
        self._deal_board()

    def _deal_board(self) -> None:
        size, bombs, boss = level_layout(self._level, self.config)
        self._board = Board(
            BoardConfig(size, bombs, boss), rng=self.rng, rules=self.config
        )
        self._diamonds_found = 0
        logger.debug(
            "Level %d: %dx%d board, %d bombs%s",
            self._level, size, size, bombs, " (boss)" if boss else "",
        )

    # ========================================================================
    # Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> Optional[RevealResult]:
        """
        Reveal a cell on the current board.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Result of the reveal, or None if the session is over or the
            cell cannot be revealed.
        """
        if self._state != SessionState.PLAYING:
            return None

        cell_type = self._board.reveal(row, col)
        if cell_type is None:
            return None

        if cell_type is CellType.BOMB:
            self._state = SessionState.LOST
            self._consecutive = 0
            logger.debug("Bomb at (%d, %d) on level %d", row, col, self._level)
            return RevealResult(cell_type, points=0, score=self._score)

        self._diamonds_found += 1
        self._total_diamonds += 1
        self._consecutive += 1
        self._best_streak = max(self._best_streak, self._consecutive)
        if cell_type.is_rare:
            self._rare_diamonds += 1

        points = score_for_reveal(
            self._diamonds_found, self._level, cell_type, self.config
        )
        if self.config.cumulative_score:
            self._score += points
        else:
            self._score = points

        cleared = self._board.is_won
        if cleared:
            self._level += 1
            self._deal_board()
        return RevealResult(cell_type, points=points, score=self._score,
                            level_cleared=cleared)

    def can_cash_out(self) -> bool:
        """Check if the player may bank the current score."""
        return self._state == SessionState.PLAYING and self._total_diamonds > 0

    def cash_out(self) -> Optional[GameOutcome]:
        """
        End the game and bank the score.

        Returns:
            Outcome for the profile layer, or None if cashing out is not
            allowed right now.
        """
        if not self.can_cash_out():
            return None
        self._state = SessionState.CASHED_OUT
        return self.outcome()

    def outcome(self) -> GameOutcome:
        """Summary of the game so far."""
        return GameOutcome(
            final_score=self._score,
            diamonds_found=self._total_diamonds,
            consecutive_streak=self._best_streak,
            rare_diamonds=self._rare_diamonds,
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> SessionState:
        """Current session state."""
        return self._state

    @property
    def is_playing(self) -> bool:
        """Check if the game is still in progress."""
        return self._state == SessionState.PLAYING

    @property
    def board(self) -> Board:
        """Board of the current level."""
        return self._board

    @property
    def level(self) -> int:
        """Current level (1-based)."""
        return self._level

    @property
    def is_boss_level(self) -> bool:
        """Check if the current board is a boss board."""
        return self._board.config.is_boss

    @property
    def score(self) -> int:
        """Current, not yet banked, score."""
        return self._score

    @property
    def diamonds_found(self) -> int:
        """Diamonds found on the current board."""
        return self._diamonds_found

    @property
    def total_diamonds(self) -> int:
        """Diamonds found across every board of this game."""
        return self._total_diamonds

    @property
    def consecutive(self) -> int:
        """Current run of diamonds without a bomb."""
        return self._consecutive

    @property
    def rare_diamonds(self) -> int:
        """Rare and super diamonds found this game."""
        return self._rare_diamonds

    @property
    def multiplier(self) -> float:
        """Multiplier shown to the player."""
        return display_multiplier(self._diamonds_found, self.config)

    @property
    def risk(self) -> float:
        """Danger indicator in [0, 1]."""
        return risk_level(self.multiplier)
