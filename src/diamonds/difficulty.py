"""
Difficulty curve for the diamond game.

Maps a level to its board size, boss status and bomb count.
"""
import math
from typing import Tuple

from .config import DEFAULT_CONFIG, GameConfig
from .errors import InvalidArgument


def _check_level(level: int) -> None:
    if level < 1:
        raise InvalidArgument(f"Level must be at least 1, got {level}")


def board_size(level: int, config: GameConfig = DEFAULT_CONFIG) -> int:
    """
    Side length of the board for a level.

    Grows by one every ``levels_per_size_step`` levels and stops at
    ``max_board_size``.
    """
    _check_level(level)
    size = config.base_board_size + (level - 1) // config.levels_per_size_step
    return min(size, config.max_board_size)


def is_boss_level(level: int, config: GameConfig = DEFAULT_CONFIG) -> bool:
    """Every ``boss_level_interval``-th level is a boss level."""
    _check_level(level)
    return level % config.boss_level_interval == 0 and level > 0


def bomb_count(
    level: int,
    size: int,
    is_boss: bool,
    config: GameConfig = DEFAULT_CONFIG,
) -> int:
    """
    Number of bombs for a level on a board of the given size.

    Args:
        level: Current level (1-based).
        size: Board side length.
        is_boss: Whether the level is a boss level.
        config: Game rules.

    Returns:
        floor(size^2 * ratio) where the ratio grows per level up to a cap.
    """
    _check_level(level)
    if size < 1:
        raise InvalidArgument(f"Board size must be positive, got {size}")

    if is_boss:
        base_ratio = config.boss_bomb_ratio
        max_ratio = config.max_boss_bomb_ratio
    else:
        base_ratio = config.base_bomb_ratio
        max_ratio = config.max_bomb_ratio

    ratio = min(base_ratio + (level - 1) * config.bomb_ratio_step, max_ratio)
    return math.floor(size * size * ratio)


def level_layout(
    level: int, config: GameConfig = DEFAULT_CONFIG
) -> Tuple[int, int, bool]:
    """Return (board size, bomb count, is boss) for a level."""
    size = board_size(level, config)
    boss = is_boss_level(level, config)
    return size, bomb_count(level, size, boss, config), boss
