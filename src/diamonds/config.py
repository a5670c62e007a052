"""
Rule configuration for the diamond game.

Every tunable constant of the game lives on ``GameConfig`` so that
difficulty, scoring and progression can be rebalanced without touching
the engine code.
"""
from dataclasses import dataclass

from .errors import InvalidArgument


# ============================================================================
# Rarity Odds
# ============================================================================

@dataclass(frozen=True)
class RarityOdds:
    """
    Probabilities of upgrading a plain diamond.

    Attributes:
        super_chance: Probability of a SUPER_DIAMOND.
        rare_chance: Probability of a RARE_DIAMOND (exclusive of super).
    """

    super_chance: float
    rare_chance: float

    def __post_init__(self) -> None:
        """Validate odds after initialization."""
        if self.super_chance < 0 or self.rare_chance < 0:
            raise InvalidArgument("Rarity odds cannot be negative")
        if self.super_chance + self.rare_chance > 1:
            raise InvalidArgument("Rarity odds cannot exceed 1 in total")

    @property
    def rare_threshold(self) -> float:
        """Upper bound of a uniform sample that still yields RARE."""
        return self.super_chance + self.rare_chance


# ============================================================================
# Game Configuration
# ============================================================================

@dataclass(frozen=True)
class GameConfig:
    """
    Rules of the game.

    Attributes:
        base_board_size: Board size at level 1.
        max_board_size: Largest board the difficulty curve produces.
        levels_per_size_step: Levels between board size increases.
        base_bomb_ratio: Bomb ratio at level 1 on normal levels.
        boss_bomb_ratio: Bomb ratio at level 1 on boss levels.
        max_bomb_ratio: Bomb ratio cap on normal levels.
        max_boss_bomb_ratio: Bomb ratio cap on boss levels.
        bomb_ratio_step: Ratio added per level.
        boss_level_interval: Every Nth level is a boss level.
        normal_odds: Rarity odds on normal levels.
        boss_odds: Rarity odds on boss levels.
        diamond_score: Base score of a plain diamond.
        rare_score: Base score of a rare diamond.
        super_score: Base score of a super diamond.
        level_bonus: Score added per level on every reveal.
        streak_base: Base of the exponential streak multiplier.
        xp_score_divisor: Score points per XP point.
        xp_per_diamond: XP granted per diamond found.
        xp_per_level: XP scale of the square-root level curve.
        cumulative_score: Sum reveal scores within a game when True,
            otherwise the current score is the latest reveal's score.
    """

    base_board_size: int = 5
    max_board_size: int = 12
    levels_per_size_step: int = 2
    base_bomb_ratio: float = 0.15
    boss_bomb_ratio: float = 0.25
    max_bomb_ratio: float = 0.35
    max_boss_bomb_ratio: float = 0.45
    bomb_ratio_step: float = 0.02
    boss_level_interval: int = 5
    normal_odds: RarityOdds = RarityOdds(super_chance=0.01, rare_chance=0.05)
    boss_odds: RarityOdds = RarityOdds(super_chance=0.05, rare_chance=0.15)
    diamond_score: int = 10
    rare_score: int = 25
    super_score: int = 100
    level_bonus: int = 5
    streak_base: float = 1.2
    xp_score_divisor: int = 10
    xp_per_diamond: int = 5
    xp_per_level: int = 100
    cumulative_score: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.base_board_size < 1:
            raise InvalidArgument("Board size must be positive")
        if self.max_board_size < self.base_board_size:
            raise InvalidArgument("Max board size is below the base size")
        if self.levels_per_size_step < 1:
            raise InvalidArgument("Levels per size step must be positive")
        if self.boss_level_interval < 1:
            raise InvalidArgument("Boss level interval must be positive")
        for ratio in (
            self.base_bomb_ratio,
            self.boss_bomb_ratio,
            self.max_bomb_ratio,
            self.max_boss_bomb_ratio,
        ):
            if not 0 <= ratio < 1:
                raise InvalidArgument("Bomb ratios must be in [0, 1)")
        if self.bomb_ratio_step < 0:
            raise InvalidArgument("Bomb ratio step cannot be negative")
        if self.streak_base <= 0:
            raise InvalidArgument("Streak base must be positive")
        if self.xp_score_divisor < 1 or self.xp_per_level < 1:
            raise InvalidArgument("XP divisors must be positive")


DEFAULT_CONFIG = GameConfig()

# Preset variants
CLASSIC = GameConfig(cumulative_score=False)
GENEROUS = GameConfig(
    normal_odds=RarityOdds(super_chance=0.03, rare_chance=0.12),
    max_bomb_ratio=0.25,
)
