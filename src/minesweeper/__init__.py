"""
Minesweeper: authoritative board model and game session.
"""
from .game import Board, BoardConfig, GameSession, GameState, new_board

__all__ = ["Board", "BoardConfig", "GameSession", "GameState", "new_board"]
