"""
Player profile and the updates applied to it between games.

The profile is owned by the caller (who also persists it); every
function here returns a new ``PlayerData`` instead of mutating one.
"""
import datetime
import logging
from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence

from .config import DEFAULT_CONFIG, GameConfig
from .errors import InvalidArgument
from .progression import player_level, xp_earned
from .tracker import (
    Achievement,
    DailyMission,
    GameOutcome,
    claim_mission_reward,
    default_achievements,
    default_daily_missions,
    evaluate_achievements,
    evaluate_daily_missions,
    record_game_started,
)

logger = logging.getLogger(__name__)

HIGH_SCORE_LIMIT = 10
DEFAULT_SKIN = "default"


# ============================================================================
# Skins
# ============================================================================

@dataclass(frozen=True)
class Skin:
    """Cosmetic diamond skin unlocked by lifetime score."""

    id: str
    name: str
    icon: str
    unlock_score: int

    def is_unlocked(self, total_score: int) -> bool:
        """Check if the skin is available at a lifetime score."""
        return total_score >= self.unlock_score


SKINS = (
    Skin(DEFAULT_SKIN, "Classic Diamond", "\U0001F48E", 0),
    Skin("ruby", "Ruby Red", "\u2666\uFE0F", 10000),
    Skin("emerald", "Emerald Green", "\U0001F49A", 25000),
    Skin("sapphire", "Sapphire Blue", "\U0001F499", 50000),
    Skin("rainbow", "Rainbow Crystal", "\U0001F308", 100000),
    Skin("star", "Stellar Diamond", "\u2B50", 250000),
)


def skin_catalog() -> List[Skin]:
    """All skins ordered by unlock score."""
    return list(SKINS)


def unlocked_skin_ids(total_score: int, already: Sequence[str] = ()) -> List[str]:
    """
    Skins available at a lifetime score.

    Args:
        total_score: Player's lifetime score.
        already: Skins unlocked earlier; they stay unlocked.

    Returns:
        ``already`` in order followed by newly unlocked skin ids.
    """
    unlocked = list(already)
    for skin in SKINS:
        if skin.is_unlocked(total_score) and skin.id not in unlocked:
            unlocked.append(skin.id)
    return unlocked


# ============================================================================
# Player Data
# ============================================================================

@dataclass
class PlayerData:
    """
    Persistent player profile.

    Attributes:
        total_score: Lifetime banked score plus mission rewards.
        games_played: Games started.
        diamonds_collected: Lifetime diamonds from cashed-out games.
        xp: Lifetime experience points.
        level: Player level derived from xp.
        unlocked_skins: Skin ids the player may select.
        current_skin: Selected skin id.
        achievements: Achievement progress.
        daily_missions: Today's missions.
        diamond_collection: Ids of collected special diamonds.
    """

    total_score: int = 0
    games_played: int = 0
    diamonds_collected: int = 0
    xp: int = 0
    level: int = 1
    unlocked_skins: List[str] = field(default_factory=lambda: [DEFAULT_SKIN])
    current_skin: str = DEFAULT_SKIN
    achievements: List[Achievement] = field(default_factory=default_achievements)
    daily_missions: List[DailyMission] = field(default_factory=default_daily_missions)
    diamond_collection: List[str] = field(default_factory=list)

    @classmethod
    def new(cls) -> "PlayerData":
        """Profile of a player who has never played."""
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "PlayerData":
        """
        Rebuild a profile from ``to_dict`` output.

        Missing keys fall back to the defaults of a new profile.
        """
        defaults = cls()
        achievements = payload.get("achievements")
        missions = payload.get("daily_missions")
        return cls(
            total_score=int(payload.get("total_score", defaults.total_score)),
            games_played=int(payload.get("games_played", defaults.games_played)),
            diamonds_collected=int(
                payload.get("diamonds_collected", defaults.diamonds_collected)
            ),
            xp=int(payload.get("xp", defaults.xp)),
            level=int(payload.get("level", defaults.level)),
            unlocked_skins=list(payload.get("unlocked_skins", defaults.unlocked_skins)),
            current_skin=str(payload.get("current_skin", defaults.current_skin)),
            achievements=(
                [Achievement(**item) for item in achievements]
                if achievements is not None else defaults.achievements
            ),
            daily_missions=(
                [DailyMission(**item) for item in missions]
                if missions is not None else defaults.daily_missions
            ),
            diamond_collection=list(payload.get("diamond_collection", [])),
        )


# ============================================================================
# Profile Updates
# ============================================================================

def apply_cash_out(
    player: PlayerData,
    outcome: GameOutcome,
    config: GameConfig = DEFAULT_CONFIG,
) -> PlayerData:
    """
    Bank a cashed-out game into the profile.

    Adds score, diamonds and XP, recomputes the player level, unlocks
    skins, and evaluates achievements and daily missions.
    """
    total_score = player.total_score + outcome.final_score
    xp = player.xp + xp_earned(outcome.final_score, outcome.diamonds_found, config)
    achievements = evaluate_achievements(
        player.achievements, outcome, lifetime_diamonds=player.diamonds_collected
    )
    logger.info(
        "Cashed out %d points with %d diamonds",
        outcome.final_score, outcome.diamonds_found,
    )
    return replace(
        player,
        total_score=total_score,
        diamonds_collected=player.diamonds_collected + outcome.diamonds_found,
        xp=xp,
        level=player_level(xp, config),
        unlocked_skins=unlocked_skin_ids(total_score, player.unlocked_skins),
        achievements=achievements,
        daily_missions=evaluate_daily_missions(player.daily_missions, outcome),
    )


def apply_game_started(player: PlayerData) -> PlayerData:
    """Count a new game in the profile and its daily missions."""
    return replace(
        player,
        games_played=player.games_played + 1,
        daily_missions=record_game_started(player.daily_missions),
    )


def apply_mission_claim(player: PlayerData, mission_id: str) -> PlayerData:
    """Pay a completed mission's reward into the total score."""
    missions, total_score = claim_mission_reward(
        player.daily_missions, mission_id, player.total_score
    )
    return replace(
        player,
        total_score=total_score,
        daily_missions=missions,
        unlocked_skins=unlocked_skin_ids(total_score, player.unlocked_skins),
    )


def select_skin(player: PlayerData, skin_id: str) -> PlayerData:
    """
    Switch the selected skin.

    Raises:
        InvalidArgument: If the skin is unknown or still locked.
    """
    if skin_id not in player.unlocked_skins:
        raise InvalidArgument(f"Skin {skin_id!r} is not unlocked")
    return replace(player, current_skin=skin_id)


def refresh_daily_missions(
    player: PlayerData,
    last_day: Optional[datetime.date],
    today: datetime.date,
) -> PlayerData:
    """Hand out fresh daily missions when the calendar day changed."""
    if last_day == today:
        return player
    return replace(player, daily_missions=default_daily_missions())


def update_high_scores(
    scores: Sequence[int], final_score: int, limit: int = HIGH_SCORE_LIMIT
) -> List[int]:
    """Insert a score into a descending top-``limit`` list."""
    return sorted([*scores, final_score], reverse=True)[:limit]
