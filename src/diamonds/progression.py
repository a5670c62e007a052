"""
Progression engine: XP earned per game and the player level curve.
"""
import math

from .config import DEFAULT_CONFIG, GameConfig


def xp_earned(
    final_score: int, diamonds_found: int, config: GameConfig = DEFAULT_CONFIG
) -> int:
    """XP banked at cash-out for a score and the diamonds found."""
    return final_score // config.xp_score_divisor + diamonds_found * config.xp_per_diamond


def player_level(xp: int, config: GameConfig = DEFAULT_CONFIG) -> int:
    """Player level for an XP total; level 1 at zero XP."""
    return math.floor(math.sqrt(max(xp, 0) / config.xp_per_level)) + 1


def xp_for_next_level(level: int, config: GameConfig = DEFAULT_CONFIG) -> int:
    """XP total at which the given level is left behind."""
    return level * level * config.xp_per_level


def level_progress(xp: int, config: GameConfig = DEFAULT_CONFIG) -> float:
    """
    Fraction of the way from the current level to the next.

    Returns:
        Value in [0, 1) suitable for a progress bar.
    """
    level = player_level(xp, config)
    floor_xp = xp_for_next_level(level - 1, config)
    ceiling_xp = xp_for_next_level(level, config)
    return (max(xp, 0) - floor_xp) / (ceiling_xp - floor_xp)
