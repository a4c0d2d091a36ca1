"""
Cell module for Minesweeper game.

Describes what a cell contains (its type) and what the player has done
to it (its state), plus the results reported by player actions.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

MAX_ADJACENT_BOMBS = 8

OBS_UNOPENED = -1
OBS_FLAGGED = -2
OBS_BOMB = 9


class CellState(Enum):
    """Possible visual states of a cell."""

    UNOPENED = auto()
    FLAGGED = auto()
    OPENED = auto()


class CellKind(Enum):
    """Tag for the content of a cell."""

    EMPTY = auto()
    BOMB = auto()
    ADJACENT = auto()


class FlagResult(Enum):
    """Outcome of toggling a flag."""

    FLAG_PLACED = auto()
    FLAG_REMOVED = auto()


class OpenResult(Enum):
    """Outcome of opening a cell."""

    BOMB_HIT = auto()
    OPEN_SPACE_UNCOVERED = auto()
    UNSAFE_SPACE_UNCOVERED = auto()


# ============================================================================
# Cell Type
# ============================================================================

@dataclass(frozen=True)
class CellType:
    """
    Content of a single cell.

    Attributes:
        kind: Empty, bomb, or adjacent to bombs.
        adjacent_bombs: Neighbouring bomb count, 1-8 for ADJACENT, else 0.
    """

    kind: CellKind = CellKind.EMPTY
    adjacent_bombs: int = 0

    def __post_init__(self) -> None:
        """Validate the count against the kind."""
        if self.kind == CellKind.ADJACENT:
            if not 1 <= self.adjacent_bombs <= MAX_ADJACENT_BOMBS:
                raise ValueError(
                    f"Adjacent bomb count must be 1-{MAX_ADJACENT_BOMBS}, "
                    f"got {self.adjacent_bombs}"
                )
        elif self.adjacent_bombs != 0:
            raise ValueError(f"{self.kind.name} cell cannot carry a count")

    @classmethod
    def empty(cls) -> "CellType":
        return EMPTY

    @classmethod
    def bomb(cls) -> "CellType":
        return BOMB

    @classmethod
    def adjacent(cls, count: int) -> "CellType":
        """Cell next to count bombs."""
        return cls(CellKind.ADJACENT, count)

    @classmethod
    def from_count(cls, count: int) -> "CellType":
        """Classify a non-bomb cell by its neighbouring bomb count."""
        if count == 0:
            return EMPTY
        return cls.adjacent(count)

    @property
    def is_bomb(self) -> bool:
        return self.kind == CellKind.BOMB

    @property
    def is_empty(self) -> bool:
        return self.kind == CellKind.EMPTY

    @property
    def is_adjacent(self) -> bool:
        return self.kind == CellKind.ADJACENT

    def __str__(self) -> str:
        if self.kind == CellKind.ADJACENT:
            return f"AdjacentCount({self.adjacent_bombs})"
        return self.kind.name.capitalize()


EMPTY = CellType(CellKind.EMPTY)
BOMB = CellType(CellKind.BOMB)


# ============================================================================
# Observation Encoding
# ============================================================================

def to_observation(cell_type: CellType, cell_state: CellState) -> int:
    """
    Convert a cell to its observation value for agents.

    Returns:
        -1: Unopened cell
        -2: Flagged cell
        0-8: Opened cell with adjacent bomb count
        9: Opened bomb
    """
    if cell_state == CellState.UNOPENED:
        return OBS_UNOPENED
    if cell_state == CellState.FLAGGED:
        return OBS_FLAGGED
    if cell_type.is_bomb:
        return OBS_BOMB
    return cell_type.adjacent_bombs


def to_symbol(cell_type: CellType, cell_state: CellState) -> str:
    """Single-character text rendering of a cell."""
    if cell_state == CellState.UNOPENED:
        return "."
    if cell_state == CellState.FLAGGED:
        return "F"
    if cell_type.is_bomb:
        return "*"
    if cell_type.is_empty:
        return " "
    return str(cell_type.adjacent_bombs)
