"""
Diamond game agents module.

Provides simple policies for playing the diamond game:
- RandomAgent: Baseline random reveals with random cash-outs
- ThresholdAgent: Random reveals, cash out after N diamonds
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .threshold_agent import ThresholdAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "ThresholdAgent",
]
