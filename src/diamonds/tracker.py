"""
Mission and achievement tracking.

All evaluators are pure: they take the current collections and a game
outcome and return new collections, leaving the caller's lists intact.
"""
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Sequence, Tuple


# ============================================================================
# Data Classes
# ============================================================================

@dataclass(frozen=True)
class GameOutcome:
    """
    Summary of a finished game, produced at cash-out.

    Attributes:
        final_score: Score banked by the player.
        diamonds_found: Diamonds found in the game.
        consecutive_streak: Longest run of diamonds without a bomb.
        rare_diamonds: Rare and super diamonds found in the game.
    """

    final_score: int = 0
    diamonds_found: int = 0
    consecutive_streak: int = 0
    rare_diamonds: int = 0


@dataclass(frozen=True)
class Achievement:
    """A one-way unlockable goal measured against a best-ever value."""

    id: str
    title: str
    description: str
    icon: str
    target: int
    progress: int = 0
    unlocked: bool = False


@dataclass(frozen=True)
class DailyMission:
    """A daily goal that pays a score reward once completed and claimed."""

    id: str
    title: str
    description: str
    target: int
    reward: int
    progress: int = 0
    completed: bool = False


# ============================================================================
# Catalogs
# ============================================================================

def default_achievements() -> List[Achievement]:
    """Fresh, locked copy of the achievement catalog."""
    return [
        Achievement("first_diamond", "First Steps",
                    "Find your first diamond", "\U0001F48E", target=1),
        Achievement("diamond_master", "Diamond Master",
                    "Find 15 diamonds in a single game", "\U0001F451", target=15),
        Achievement("high_scorer", "High Scorer",
                    "Reach 50,000 points in one game", "\U0001F3C6", target=50000),
        Achievement("lucky_streak", "Lucky Streak",
                    "Find 5 diamonds in a row without bombs", "\U0001F340", target=5),
        # No evaluator feeds this one yet; it stays locked at 0.
        Achievement("bomb_dodger", "Bomb Dodger",
                    "Play 10 games without hitting a bomb", "\U0001F6E1\uFE0F", target=10),
        Achievement("collector", "Collector",
                    "Collect 100 diamonds total", "\U0001F4B0", target=100),
    ]


def default_daily_missions() -> List[DailyMission]:
    """Fresh copy of the daily missions with no progress."""
    return [
        # Binary: a single game with 10+ diamonds completes it
        DailyMission("diamonds_10", "Diamond Hunter",
                     "Find 10 diamonds without hitting a bomb",
                     target=1, reward=500),
        DailyMission("score_100k", "High Roller",
                     "Earn 100,000 points in total today",
                     target=100000, reward=1000),
        DailyMission("games_5", "Persistent Player",
                     "Play 5 games today",
                     target=5, reward=300),
        DailyMission("rare_diamonds_3", "Rare Collector",
                     "Find 3 rare or super diamonds",
                     target=3, reward=750),
    ]


# ============================================================================
# Achievements
# ============================================================================

_ACHIEVEMENT_METRICS: Dict[str, Callable[[GameOutcome, int], int]] = {
    "first_diamond": lambda o, lifetime: 1 if o.diamonds_found > 0 else 0,
    "diamond_master": lambda o, lifetime: o.diamonds_found,
    "high_scorer": lambda o, lifetime: o.final_score,
    "lucky_streak": lambda o, lifetime: o.consecutive_streak,
    "collector": lambda o, lifetime: lifetime + o.diamonds_found,
}


def evaluate_achievements(
    current: Sequence[Achievement],
    outcome: GameOutcome,
    lifetime_diamonds: int = 0,
) -> List[Achievement]:
    """
    Merge a game outcome into the achievement list.

    Args:
        current: Achievements as stored in the player profile.
        outcome: Result of the game just cashed out.
        lifetime_diamonds: Diamonds collected before this game.

    Returns:
        New list; locked achievements get max-merged progress and unlock
        once progress reaches their target.
    """
    updated = []
    for achievement in current:
        metric = _ACHIEVEMENT_METRICS.get(achievement.id)
        if achievement.unlocked or metric is None:
            updated.append(achievement)
            continue
        progress = max(achievement.progress, metric(outcome, lifetime_diamonds))
        updated.append(replace(
            achievement,
            progress=progress,
            unlocked=progress >= achievement.target,
        ))
    return updated


def newly_unlocked(
    before: Sequence[Achievement], after: Sequence[Achievement]
) -> List[Achievement]:
    """Achievements unlocked in ``after`` that were locked in ``before``."""
    was_unlocked = {a.id for a in before if a.unlocked}
    return [a for a in after if a.unlocked and a.id not in was_unlocked]


# ============================================================================
# Daily Missions
# ============================================================================

def _complete(mission: DailyMission, progress: int) -> DailyMission:
    return replace(mission, progress=progress, completed=progress >= mission.target)


def evaluate_daily_missions(
    current: Sequence[DailyMission], outcome: GameOutcome
) -> List[DailyMission]:
    """
    Merge a cashed-out game into the daily missions.

    ``diamonds_10`` is binary (one qualifying game completes it),
    ``score_100k`` and ``rare_diamonds_3`` accumulate up to their target,
    and ``games_5`` is driven by ``record_game_started`` instead.
    """
    updated = []
    for mission in current:
        if mission.completed:
            updated.append(mission)
            continue
        progress = mission.progress
        if mission.id == "diamonds_10":
            if outcome.diamonds_found >= 10:
                progress = max(progress, 1)
        elif mission.id == "score_100k":
            progress = min(progress + outcome.final_score, mission.target)
        elif mission.id == "rare_diamonds_3":
            progress = min(progress + outcome.rare_diamonds, mission.target)
        updated.append(_complete(mission, progress))
    return updated


def record_game_started(current: Sequence[DailyMission]) -> List[DailyMission]:
    """Count a new game towards the ``games_5`` mission."""
    updated = []
    for mission in current:
        if mission.id == "games_5" and not mission.completed:
            mission = _complete(mission, min(mission.progress + 1, mission.target))
        updated.append(mission)
    return updated


def claim_mission_reward(
    current: Sequence[DailyMission], mission_id: str, total_score: int
) -> Tuple[List[DailyMission], int]:
    """
    Pay out a completed mission and re-arm it.

    Args:
        current: Daily missions as stored in the player profile.
        mission_id: Mission to claim.
        total_score: Player's total score before the claim.

    Returns:
        (missions, total_score). Unchanged when the mission is unknown or
        not completed; otherwise the reward is added once and the mission
        is reset to zero progress.
    """
    updated = list(current)
    for index, mission in enumerate(updated):
        if mission.id != mission_id:
            continue
        if not mission.completed:
            break
        updated[index] = replace(mission, progress=0, completed=False)
        return updated, total_score + mission.reward
    return updated, total_score
