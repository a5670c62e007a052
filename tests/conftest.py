"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from diamonds import (
    Board,
    BoardConfig,
    Cell,
    CellType,
    GameOutcome,
    GameSession,
    PlayerData,
    default_achievements,
    default_daily_missions,
)


# ============================================================================
# Random Source Fixtures
# ============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so boards are reproducible."""
    return np.random.default_rng(1234)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board(rng: np.random.Generator) -> Board:
    """Create a level-1 sized board: 5x5 with 3 bombs."""
    return Board(BoardConfig(5, 3), rng=rng)


@pytest.fixture
def tiny_board() -> Board:
    """
    2x2 board with a known layout:

        B d
        r S
    """
    grid = [
        [Cell(CellType.BOMB), Cell(CellType.DIAMOND)],
        [Cell(CellType.RARE_DIAMOND), Cell(CellType.SUPER_DIAMOND)],
    ]
    return Board.from_grid(grid)


@pytest.fixture
def safe_board(rng: np.random.Generator) -> Board:
    """Create a board with no bombs."""
    return Board(BoardConfig(4, 0), rng=rng)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden diamond cell."""
    return Cell()


@pytest.fixture
def bomb_cell() -> Cell:
    """Create a cell containing a bomb."""
    return Cell(CellType.BOMB)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def session(rng: np.random.Generator) -> GameSession:
    """Fresh session at level 1."""
    return GameSession(rng=rng)


def find_cells(board: Board, wanted) -> list:
    """Positions of cells whose type satisfies ``wanted``."""
    return [
        (row, col)
        for row, grid_row in enumerate(board.grid)
        for col, cell in enumerate(grid_row)
        if wanted(cell.type) and cell.is_hidden
    ]


@pytest.fixture
def diamond_positions():
    """Helper returning hidden diamond positions on a board."""
    return lambda board: find_cells(board, lambda t: t.is_diamond)


@pytest.fixture
def bomb_positions():
    """Helper returning hidden bomb positions on a board."""
    return lambda board: find_cells(board, lambda t: t is CellType.BOMB)


# ============================================================================
# Profile Fixtures
# ============================================================================

@pytest.fixture
def new_player() -> PlayerData:
    """Profile of a player who has never played."""
    return PlayerData.new()


@pytest.fixture
def achievements() -> list:
    """Locked achievement catalog."""
    return default_achievements()


@pytest.fixture
def missions() -> list:
    """Fresh daily missions."""
    return default_daily_missions()


@pytest.fixture
def good_outcome() -> GameOutcome:
    """A cashed-out game with 1000 points and 10 diamonds."""
    return GameOutcome(
        final_score=1000, diamonds_found=10, consecutive_streak=10, rare_diamonds=0
    )
