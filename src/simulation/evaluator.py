"""
Evaluation module for diamond game agents.

Plays batches of seeded games and aggregates how often an agent banks
its score, how much it banks and how far it gets.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from agents.base_agent import BaseAgent
from diamonds.config import DEFAULT_CONFIG, GameConfig
from diamonds.environment import DiamondEnv


# ============================================================================
# Episode Statistics
# ============================================================================

@dataclass
class EpisodeStats:
    """Statistics for a single game."""

    total_reward: float = 0.0
    steps: int = 0
    cashed_out: bool = False
    banked_score: int = 0
    diamonds_found: int = 0
    level_reached: int = 1


@dataclass
class EvaluationStats:
    """Accumulated statistics over many games."""

    episodes: List[EpisodeStats] = field(default_factory=list)

    def add(self, episode: EpisodeStats) -> None:
        """Record a finished game."""
        self.episodes.append(episode)

    def to_dict(self) -> Dict[str, float]:
        """Summarize as averages for reporting."""
        if not self.episodes:
            return {
                "cash_out_rate": 0.0,
                "avg_banked": 0.0,
                "avg_diamonds": 0.0,
                "avg_level": 0.0,
                "avg_steps": 0.0,
                "best_banked": 0,
            }
        banked = np.array([e.banked_score for e in self.episodes])
        return {
            "cash_out_rate": float(np.mean([e.cashed_out for e in self.episodes])),
            "avg_banked": float(banked.mean()),
            "avg_diamonds": float(np.mean([e.diamonds_found for e in self.episodes])),
            "avg_level": float(np.mean([e.level_reached for e in self.episodes])),
            "avg_steps": float(np.mean([e.steps for e in self.episodes])),
            "best_banked": int(banked.max()),
        }


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare multiple agents.

    Every agent plays the same sequence of seeded games so results are
    comparable and reproducible.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        num_episodes: int = 100,
        start_level: int = 1,
        max_steps: int = 500,
        seed: int = 0,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            config: Game rules for evaluation.
            num_episodes: Number of games per agent.
            start_level: Level of the first board.
            max_steps: Maximum actions per game.
            seed: Seed of the first game; game i uses seed + i.
        """
        self.config = config or DEFAULT_CONFIG
        self.num_episodes = num_episodes
        self.start_level = start_level
        self.max_steps = max_steps
        self.seed = seed

    def run_episode(
        self, agent: BaseAgent, env: DiamondEnv, seed: Optional[int] = None
    ) -> EpisodeStats:
        """Play one game with an agent."""
        stats = EpisodeStats()
        observation, info = env.reset(seed=seed)
        agent.reset()

        for _ in range(self.max_steps):
            valid_actions = env.get_action_mask()
            action = agent.select_action(observation, valid_actions)
            observation, reward, terminated, truncated, info = env.step(action)

            stats.total_reward += float(reward)
            stats.steps += 1
            stats.level_reached = info["level"]
            stats.diamonds_found = info["diamonds_found"]

            if terminated or truncated:
                break

        stats.cashed_out = info["game_state"] == "CASHED_OUT"
        stats.banked_score = info["banked"]
        return stats

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with evaluation metrics.
        """
        env = DiamondEnv(config=self.config, start_level=self.start_level)
        stats = EvaluationStats()
        for episode in range(self.num_episodes):
            stats.add(self.run_episode(agent, env, seed=self.seed + episode))
        return stats.to_dict()

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        return {name: self.evaluate(agent) for name, agent in agents.items()}
