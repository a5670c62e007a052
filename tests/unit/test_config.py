"""
Unit tests for rule configuration.
"""
import pytest
from diamonds import CLASSIC, DEFAULT_CONFIG, GENEROUS, GameConfig, InvalidArgument, RarityOdds


class TestRarityOdds:
    """Test rarity odds validation."""

    def test_rare_threshold(self) -> None:
        """Rare band starts where the super band ends."""
        assert RarityOdds(0.01, 0.05).rare_threshold == pytest.approx(0.06)

    @pytest.mark.parametrize("super_chance,rare_chance", [(-0.1, 0.1), (0.6, 0.5)])
    def test_invalid_odds(self, super_chance: float, rare_chance: float) -> None:
        """Negative odds or a total above 1 are rejected."""
        with pytest.raises(InvalidArgument):
            RarityOdds(super_chance, rare_chance)


class TestGameConfig:
    """Test rule validation and presets."""

    def test_defaults(self) -> None:
        """Default rules match the standard game."""
        assert DEFAULT_CONFIG.base_board_size == 5
        assert DEFAULT_CONFIG.max_board_size == 12
        assert DEFAULT_CONFIG.boss_level_interval == 5
        assert DEFAULT_CONFIG.cumulative_score is True

    @pytest.mark.parametrize("kwargs", [
        {"base_board_size": 0},
        {"base_board_size": 6, "max_board_size": 5},
        {"levels_per_size_step": 0},
        {"boss_level_interval": 0},
        {"max_bomb_ratio": 1.0},
        {"base_bomb_ratio": -0.1},
        {"bomb_ratio_step": -0.01},
        {"streak_base": 0},
        {"xp_per_level": 0},
    ])
    def test_invalid_config(self, kwargs: dict) -> None:
        """Out-of-range rules are rejected."""
        with pytest.raises(InvalidArgument):
            GameConfig(**kwargs)

    def test_presets(self) -> None:
        """Presets only change what they are named for."""
        assert CLASSIC.cumulative_score is False
        assert CLASSIC.base_board_size == DEFAULT_CONFIG.base_board_size
        assert GENEROUS.normal_odds.rare_chance > DEFAULT_CONFIG.normal_odds.rare_chance
        assert GENEROUS.max_bomb_ratio < DEFAULT_CONFIG.max_bomb_ratio

    def test_config_is_frozen(self) -> None:
        """Rules cannot be changed after creation."""
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.level_bonus = 10
