"""
Minesweeper game module.

Provides the board model (grid, cell types and states, reveal and flag
logic), the game session that drives it, and a Gymnasium environment.
"""
from .grid import Grid, NeighbourKind, Position, Size
from .cell import CellKind, CellState, CellType, FlagResult, OpenResult
from .board import Board, RELOCATION_ATTEMPTS, new_board
from .session import (
    BoardConfig,
    GameSession,
    GameState,
    DEFAULT,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
)
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "Grid",
    "NeighbourKind",
    "Position",
    "Size",
    "CellKind",
    "CellState",
    "CellType",
    "FlagResult",
    "OpenResult",
    "Board",
    "RELOCATION_ATTEMPTS",
    "new_board",
    "BoardConfig",
    "GameSession",
    "GameState",
    "DEFAULT",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "MinesweeperEnv",
    "make_vec_env",
]
