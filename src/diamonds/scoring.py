"""
Scoring engine for the diamond game.

Scores grow exponentially with the number of diamonds found in the
current game, so every additional reveal is worth more and risks more.
"""
import math

from .cell import CellType
from .config import DEFAULT_CONFIG, GameConfig
from .errors import InvalidArgument


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def base_score(cell_type: CellType, config: GameConfig = DEFAULT_CONFIG) -> int:
    """Base points of a diamond variant before multipliers."""
    if cell_type is CellType.SUPER_DIAMOND:
        return config.super_score
    if cell_type is CellType.RARE_DIAMOND:
        return config.rare_score
    return config.diamond_score


def streak_multiplier(
    diamonds_found: int, config: GameConfig = DEFAULT_CONFIG
) -> float:
    """Multiplier for the reveal that brings the count to diamonds_found."""
    return config.streak_base ** (diamonds_found - 1)


def score_for_reveal(
    diamonds_found: int,
    level: int,
    cell_type: CellType = CellType.DIAMOND,
    config: GameConfig = DEFAULT_CONFIG,
) -> int:
    """
    Score earned by a single diamond reveal.

    Args:
        diamonds_found: Diamonds found this game, including this one.
        level: Current level (1-based).
        cell_type: Type of the revealed diamond.
        config: Game rules.

    Returns:
        round(base * streak_multiplier + level * level_bonus).

    Raises:
        InvalidArgument: If diamonds_found or level is below 1, or the
            cell is a bomb.
    """
    if diamonds_found < 1:
        raise InvalidArgument("A reveal counts at least one diamond")
    if level < 1:
        raise InvalidArgument(f"Level must be at least 1, got {level}")
    if cell_type is CellType.BOMB:
        raise InvalidArgument("Bombs do not score")

    level_bonus = level * config.level_bonus
    multiplier = streak_multiplier(diamonds_found, config)
    return round_half_up(base_score(cell_type, config) * multiplier + level_bonus)


def display_multiplier(
    diamonds_found: int, config: GameConfig = DEFAULT_CONFIG
) -> float:
    """Multiplier shown to the player, one step ahead of the next reveal's."""
    return config.streak_base ** diamonds_found


def risk_level(multiplier: float) -> float:
    """Danger indicator in [0, 1] derived from the display multiplier."""
    return min(multiplier / 10, 1.0)
