"""
Session module for Minesweeper game.

Drives a Board the way a game front-end does: first-click rescue,
loss and win handling, new games and resizing.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .board import Board, RandomSource
from .cell import FlagResult, OpenResult
from .grid import Position, Size


# ============================================================================
# Constants
# ============================================================================

MIN_BOARD_SIDE = 2
MAX_BOARD_SIDE = 30
MIN_BOMBS = 1
MAX_BOMBS = 100


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    More bombs than cells is allowed; placement then saturates the board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_bombs: Bomb placement draws.
    """

    width: int = 8
    height: int = 8
    num_bombs: int = 5

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are in range."""
        for value in (self.width, self.height):
            if not MIN_BOARD_SIDE <= value <= MAX_BOARD_SIDE:
                raise ValueError(
                    f"Board dimensions must be {MIN_BOARD_SIDE}-"
                    f"{MAX_BOARD_SIDE}, got {self.width}x{self.height}"
                )
        if not MIN_BOMBS <= self.num_bombs <= MAX_BOMBS:
            raise ValueError(
                f"Number of bombs must be {MIN_BOMBS}-{MAX_BOMBS}, "
                f"got {self.num_bombs}"
            )

    @classmethod
    def clamped(cls, width: int, height: int, num_bombs: int) -> "BoardConfig":
        """Build a config with each value forced into its valid range."""
        return cls(
            width=_clamp(width, MIN_BOARD_SIDE, MAX_BOARD_SIDE),
            height=_clamp(height, MIN_BOARD_SIDE, MAX_BOARD_SIDE),
            num_bombs=_clamp(num_bombs, MIN_BOMBS, MAX_BOMBS),
        )

    @property
    def size(self) -> Size:
        return (self.width, self.height)

    @property
    def num_cells(self) -> int:
        return self.width * self.height


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


# Preset difficulty levels
DEFAULT = BoardConfig(8, 8, 5)
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

PRESETS = {
    "default": DEFAULT,
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One game of Minesweeper at a time on a configurable board.

    Passes player actions to the board and turns their results into
    win/loss transitions. Once the game is over further actions have
    no effect until new_game() or resize().
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: RandomSource = None,
    ) -> None:
        """
        Start a session with a fresh board.

        Args:
            config: Board configuration (default: 8x8 with 5 bombs).
            rng: Generator or seed shared by every board this session makes.
        """
        self.config = config or BoardConfig()
        self.board = Board.with_bombs(
            self.config.size, self.config.num_bombs, rng
        )
        self._rng = self.board.rng
        self._game_state = GameState.PLAYING

    # ========================================================================
    # Game Actions
    # ========================================================================

    def open(self, pos: Position) -> Optional[OpenResult]:
        """
        Open a cell.

        A bomb on the first open of the game is moved away and the cell
        is reported by what it holds afterwards. Any later bomb loses the
        game and uncovers the board.

        Returns:
            The open result, or None if nothing happened.
        """
        if not self.is_playing:
            return None

        is_first_click = not self.board.has_opened_any
        result = self.board.open(pos)

        if result == OpenResult.BOMB_HIT:
            if is_first_click:
                self.board.handle_first_click_bomb(pos)
                return self._result_after_relocation(pos)
            self._game_state = GameState.LOST
            self.board.uncover_all()

        return result

    def _result_after_relocation(self, pos: Position) -> OpenResult:
        cell_type = self.board.cell_type(pos)
        if cell_type.is_empty:
            return OpenResult.OPEN_SPACE_UNCOVERED
        return OpenResult.UNSAFE_SPACE_UNCOVERED

    def toggle_flag(self, pos: Position) -> Optional[FlagResult]:
        """
        Toggle flag on a cell.

        Placing the last correct flag wins the game and uncovers the board.

        Returns:
            The flag result, or None if nothing happened.
        """
        if not self.is_playing:
            return None

        result = self.board.toggle_flag(pos)
        if result == FlagResult.FLAG_PLACED and self.board.are_all_bombs_flagged():
            self._game_state = GameState.WON
            self.board.uncover_all()

        return result

    def new_game(self, rng: RandomSource = None) -> None:
        """Replace the board with a fresh one of the same configuration."""
        if rng is not None:
            self._rng = rng
        self.board = Board.with_bombs(
            self.config.size, self.config.num_bombs, self._rng
        )
        self._rng = self.board.rng
        self._game_state = GameState.PLAYING

    def resize(self, config: BoardConfig) -> None:
        """Switch to a new configuration and start a new game on it."""
        self.config = config
        self.new_game()

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST
