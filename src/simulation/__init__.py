"""
Simulation module for diamond game agents.

Provides batch evaluation and agent comparison.
"""
from .evaluator import (
    EpisodeStats,
    EvaluationStats,
    Evaluator,
)

__all__ = [
    "EpisodeStats",
    "EvaluationStats",
    "Evaluator",
]
