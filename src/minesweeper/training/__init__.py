"""
Training module for Minesweeper agents.

Provides episode running and agent evaluation.
"""
from .evaluator import (
    EpisodeStats,
    Evaluator,
)

__all__ = [
    "EpisodeStats",
    "Evaluator",
]
