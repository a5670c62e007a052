"""
Board module for the diamond game.

Implements board generation (bomb placement and rarity upgrades),
cell revealing, and game state management for a single level.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellType
from .config import DEFAULT_CONFIG, GameConfig
from .errors import InvalidArgument

logger = logging.getLogger(__name__)

Grid = List[List[Cell]]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of a board."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a diamond board.

    Attributes:
        size: Number of rows and columns.
        bomb_count: Total bombs to place.
        is_boss: Whether boss-level rarity odds apply.
    """

    size: int = 5
    bomb_count: int = 3
    is_boss: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise InvalidArgument("Board size must be positive")
        if self.bomb_count < 0:
            raise InvalidArgument("Number of bombs cannot be negative")
        max_bombs = self.size * self.size - 1
        if self.bomb_count > max_bombs:
            raise InvalidArgument(f"Too many bombs (max {max_bombs})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.size * self.size

    @property
    def diamond_count(self) -> int:
        """Number of non-bomb cells on the board."""
        return self.total_cells - self.bomb_count


# ============================================================================
# Board Generation (Low-level)
# ============================================================================

def _place_bombs_rejection(
    grid: Grid, bomb_count: int, rng: np.random.Generator
) -> None:
    """Draw random coordinates until enough distinct cells hold a bomb."""
    size = len(grid)
    placed = 0
    while placed < bomb_count:
        row = int(rng.integers(0, size))
        col = int(rng.integers(0, size))
        cell = grid[row][col]
        if cell.type is not CellType.BOMB:
            cell.type = CellType.BOMB
            placed += 1


def _place_bombs_sampled(
    grid: Grid, bomb_count: int, rng: np.random.Generator
) -> None:
    """Pick bomb positions without replacement, for dense boards."""
    size = len(grid)
    positions = rng.choice(size * size, size=bomb_count, replace=False)
    for position in positions:
        row, col = divmod(int(position), size)
        grid[row][col].type = CellType.BOMB


def _upgrade_diamonds(
    grid: Grid, is_boss: bool, rng: np.random.Generator, config: GameConfig
) -> None:
    """Roll one uniform sample per plain diamond and upgrade its rarity."""
    odds = config.boss_odds if is_boss else config.normal_odds
    for row in grid:
        for cell in row:
            if cell.type is not CellType.DIAMOND:
                continue
            sample = rng.random()
            if sample < odds.super_chance:
                cell.type = CellType.SUPER_DIAMOND
            elif sample < odds.rare_threshold:
                cell.type = CellType.RARE_DIAMOND


def generate_board(
    size: int,
    bomb_count: int,
    is_boss: bool = False,
    rng: Optional[np.random.Generator] = None,
    config: GameConfig = DEFAULT_CONFIG,
) -> Grid:
    """
    Generate a fresh grid of unrevealed cells.

    Bombs are placed first; only cells still holding a plain diamond
    afterwards are eligible for a rarity upgrade.

    Args:
        size: Number of rows and columns (at least 1).
        bomb_count: Bombs to place, 0 <= bomb_count < size^2.
        is_boss: Use boss-level rarity odds.
        rng: Random source. A fresh unseeded generator when omitted.
        config: Game rules supplying the rarity odds.

    Returns:
        size x size grid of cells.

    Raises:
        InvalidArgument: If size or bomb_count is out of range.
    """
    BoardConfig(size, bomb_count, is_boss)
    rng = rng if rng is not None else np.random.default_rng()

    grid = [[Cell() for _ in range(size)] for _ in range(size)]

    # Rejection sampling slows down as the board fills up
    if bomb_count * 2 > size * size:
        _place_bombs_sampled(grid, bomb_count, rng)
    else:
        _place_bombs_rejection(grid, bomb_count, rng)

    _upgrade_diamonds(grid, is_boss, rng, config)

    logger.debug(
        "Generated %dx%d board with %d bombs (boss=%s)",
        size, size, bomb_count, is_boss,
    )
    return grid


def count_types(grid: Grid) -> Dict[CellType, int]:
    """Count cells of each type on a grid."""
    counts = {cell_type: 0 for cell_type in CellType}
    for row in grid:
        for cell in row:
            counts[cell.type] += 1
    return counts


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Diamond game board for a single level.

    Holds the grid of cells, applies reveals and tracks whether the
    level is still being played, cleared (WON) or busted (LOST).
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[np.random.Generator] = field(default=None, repr=False)
    rules: GameConfig = field(default=DEFAULT_CONFIG, repr=False)
    _grid: Grid = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.PLAYING
    _diamonds_revealed: int = 0

    def __post_init__(self) -> None:
        """Generate the grid after dataclass creation."""
        if self.rng is None:
            self.rng = np.random.default_rng()
        if not self._grid:
            self._init_grid()

    def _init_grid(self) -> None:
        self._grid = generate_board(
            self.config.size,
            self.config.bomb_count,
            self.config.is_boss,
            rng=self.rng,
            config=self.rules,
        )

    @classmethod
    def from_grid(cls, grid: Grid, is_boss: bool = False) -> "Board":
        """
        Build a board around an existing grid.

        Args:
            grid: Square grid of cells.
            is_boss: Whether the grid belongs to a boss level.

        Returns:
            Board in PLAYING state over the given cells.
        """
        size = len(grid)
        if size == 0 or any(len(row) != size for row in grid):
            raise InvalidArgument("Grid must be square and non-empty")
        bombs = sum(1 for row in grid for cell in row if cell.is_bomb)
        revealed = sum(
            1 for row in grid for cell in row
            if cell.revealed and cell.is_diamond
        )
        return cls(
            config=BoardConfig(size, bombs, is_boss),
            _grid=grid,
            _diamonds_revealed=revealed,
        )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> Optional[CellType]:
        """
        Reveal a cell at the given position.

        Revealing a bomb loses the level; revealing the last diamond wins it.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Type of the revealed cell, or None if the reveal was not allowed.
        """
        if not self._can_reveal(row, col):
            return None

        cell = self._grid[row][col]
        cell.reveal()

        if cell.is_bomb:
            self._game_state = GameState.LOST
        else:
            self._diamonds_revealed += 1
            self._check_win_condition()
        return cell.type

    def _can_reveal(self, row: int, col: int) -> bool:
        """Check if a cell can be revealed."""
        if self._game_state != GameState.PLAYING:
            return False
        if not self._is_valid_position(row, col):
            return False
        return self._grid[row][col].is_hidden

    def _check_win_condition(self) -> None:
        """Check if all diamonds are revealed."""
        if self._diamonds_revealed >= self.config.diamond_count:
            self._game_state = GameState.WON

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.size and 0 <= col < self.config.size

    def reveal_all(self) -> None:
        """Uncover every cell, e.g. to show the board after a bust."""
        for grid_row in self._grid:
            for cell in grid_row:
                cell.reveal()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if the level is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if every diamond was found."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if a bomb was revealed."""
        return self._game_state == GameState.LOST

    @property
    def diamonds_revealed(self) -> int:
        """Number of diamonds uncovered so far."""
        return self._diamonds_revealed

    @property
    def diamonds_remaining(self) -> int:
        """Number of diamonds still hidden."""
        return self.config.diamond_count - self._diamonds_revealed

    @property
    def grid(self) -> Grid:
        """The underlying grid of cells."""
        return self._grid

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D numpy array where:
                -1 = hidden
                0 = revealed diamond
                1 = revealed rare diamond
                2 = revealed super diamond
                9 = revealed bomb
        """
        size = self.config.size
        obs = np.zeros((size, size), dtype=np.int8)
        for row in range(size):
            for col in range(size):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions of hidden cells.
        """
        if not self.is_playing:
            return []
        actions = []
        for row in range(self.config.size):
            for col in range(self.config.size):
                if self._grid[row][col].is_hidden:
                    actions.append((row, col))
        return actions

    def render_ansi(self) -> str:
        """Render board as a text grid."""
        return "\n".join(
            " ".join(cell.to_symbol() for cell in grid_row)
            for grid_row in self._grid
        )

    def reset(self) -> None:
        """Regenerate the board with the same configuration."""
        self._init_grid()
        self._game_state = GameState.PLAYING
        self._diamonds_revealed = 0
