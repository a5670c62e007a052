"""
Diamond game module.

Provides the core game logic: board generation, difficulty curve,
scoring, progression, missions and achievements, plus the session,
player profile and Gymnasium environment built on top of them.
"""
from .errors import InvalidArgument
from .config import GameConfig, RarityOdds, DEFAULT_CONFIG, CLASSIC, GENEROUS
from .cell import Cell, CellType
from .board import Board, BoardConfig, GameState, generate_board, count_types
from .difficulty import board_size, bomb_count, is_boss_level, level_layout
from .scoring import score_for_reveal, display_multiplier, risk_level
from .progression import xp_earned, player_level, xp_for_next_level, level_progress
from .tracker import (
    Achievement,
    DailyMission,
    GameOutcome,
    default_achievements,
    default_daily_missions,
    evaluate_achievements,
    evaluate_daily_missions,
    record_game_started,
    claim_mission_reward,
)
from .player import (
    PlayerData,
    Skin,
    skin_catalog,
    apply_cash_out,
    apply_game_started,
    apply_mission_claim,
    update_high_scores,
)
from .session import GameSession, RevealResult, SessionState
from .environment import DiamondEnv, make_vec_env

__all__ = [
    "InvalidArgument",
    "GameConfig",
    "RarityOdds",
    "DEFAULT_CONFIG",
    "CLASSIC",
    "GENEROUS",
    "Cell",
    "CellType",
    "Board",
    "BoardConfig",
    "GameState",
    "generate_board",
    "count_types",
    "board_size",
    "bomb_count",
    "is_boss_level",
    "level_layout",
    "score_for_reveal",
    "display_multiplier",
    "risk_level",
    "xp_earned",
    "player_level",
    "xp_for_next_level",
    "level_progress",
    "Achievement",
    "DailyMission",
    "GameOutcome",
    "default_achievements",
    "default_daily_missions",
    "evaluate_achievements",
    "evaluate_daily_missions",
    "record_game_started",
    "claim_mission_reward",
    "PlayerData",
    "Skin",
    "skin_catalog",
    "apply_cash_out",
    "apply_game_started",
    "apply_mission_claim",
    "update_high_scores",
    "GameSession",
    "RevealResult",
    "SessionState",
    "DiamondEnv",
    "make_vec_env",
]
