"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper.game import Board, BoardConfig, GameSession


# ============================================================================
# Random Source Fixtures
# ============================================================================

class ScriptedRng:
    """
    Stand-in generator that replays fixed positions.

    Each position is consumed as two integers() calls, x then y, the same
    order the board draws them in.
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]) -> None:
        self._values = [value for pos in positions for value in pos]
        self.calls = 0

    def integers(self, low: int, high: int) -> int:
        value = self._values[self.calls]
        self.calls += 1
        assert low <= value < high, f"scripted value {value} outside [{low}, {high})"
        return value


@pytest.fixture
def scripted_rng():
    """Factory for generators that return the given positions in order."""
    return ScriptedRng


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no bombs for flood-fill testing."""
    return Board.from_bomb_positions((5, 5), [])


@pytest.fixture
def scenario_board() -> Board:
    """3x3 board with bombs on the right column and two more corners."""
    return Board.from_bomb_positions(
        (3, 3), [(0, 0), (1, 2), (2, 0), (2, 1), (2, 2)]
    )


@pytest.fixture
def corner_bomb_board() -> Board:
    """
    5x5 board with a single bomb in the bottom-right corner.

    Layout (x across, y down):
        . . . . .
        . . . . .
        . . . . .
        . . . 1 1
        . . . 1 B
    """
    return Board.from_bomb_positions((5, 5), [(4, 4)])


@pytest.fixture
def walled_board() -> Board:
    """
    5x3 board whose middle column of bombs splits it in two.

    Layout:
        . 2 B 2 .
        . 3 B 3 .
        . 2 B 2 .
    """
    return Board.from_bomb_positions((5, 3), [(2, 0), (2, 1), (2, 2)])


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def default_config() -> BoardConfig:
    """Default 8x8 configuration with 5 bombs."""
    return BoardConfig()


@pytest.fixture
def seeded_session(default_config: BoardConfig) -> GameSession:
    """Session whose boards are reproducible."""
    return GameSession(default_config, rng=1234)
