"""
Minesweeper agents module.

Provides baseline players for the Gymnasium environment:
- BaseAgent: Abstract interface
- RandomAgent: Baseline random selection
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
