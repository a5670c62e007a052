"""
Cell module for the diamond game.

Represents individual cells on the game board with their content
(diamond variant or bomb) and whether they have been revealed.
"""
import uuid
from dataclasses import dataclass, field
from enum import Enum


# ============================================================================
# Constants
# ============================================================================

class CellType(Enum):
    """Possible contents of a cell."""

    DIAMOND = "diamond"
    RARE_DIAMOND = "rare_diamond"
    SUPER_DIAMOND = "super_diamond"
    BOMB = "bomb"

    @property
    def is_diamond(self) -> bool:
        """Check if this type is any diamond variant."""
        return self is not CellType.BOMB

    @property
    def is_rare(self) -> bool:
        """Check if this type is a rare or super diamond."""
        return self in (CellType.RARE_DIAMOND, CellType.SUPER_DIAMOND)


# Observation codes for revealed cells
OBSERVATION_CODES = {
    CellType.DIAMOND: 0,
    CellType.RARE_DIAMOND: 1,
    CellType.SUPER_DIAMOND: 2,
    CellType.BOMB: 9,
}
HIDDEN = -1


def _new_cell_id() -> str:
    return uuid.uuid4().hex[:9]


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the diamond grid.

    Attributes:
        type: Content of the cell.
        revealed: Whether the player has uncovered this cell.
        id: Opaque token for keying rendered lists. Not compared.
    """

    type: CellType = CellType.DIAMOND
    revealed: bool = False
    id: str = field(default_factory=_new_cell_id, compare=False)

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if it was already revealed.
        """
        if self.revealed:
            return False
        self.revealed = True
        return True

    @property
    def is_bomb(self) -> bool:
        """Check if cell holds a bomb."""
        return self.type is CellType.BOMB

    @property
    def is_diamond(self) -> bool:
        """Check if cell holds any diamond variant."""
        return self.type.is_diamond

    @property
    def is_hidden(self) -> bool:
        """Check if cell is still hidden."""
        return not self.revealed

    def to_observation(self) -> int:
        """
        Convert cell to observation value for agents.

        Returns:
            -1: Hidden cell
            0: Revealed diamond
            1: Revealed rare diamond
            2: Revealed super diamond
            9: Revealed bomb
        """
        if not self.revealed:
            return HIDDEN
        return OBSERVATION_CODES[self.type]

    def to_symbol(self) -> str:
        """Single character used by the text renderer."""
        if not self.revealed:
            return "."
        return {
            CellType.DIAMOND: "d",
            CellType.RARE_DIAMOND: "r",
            CellType.SUPER_DIAMOND: "S",
            CellType.BOMB: "*",
        }[self.type]
