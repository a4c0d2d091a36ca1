"""
Board module for Minesweeper game.

Implements the game board with bomb placement, adjacency counts,
flood-fill reveal, first-click bomb relocation and the win check.
"""
from typing import Iterable, List, Optional, Union

import numpy as np

from .cell import (
    BOMB,
    EMPTY,
    CellState,
    CellType,
    FlagResult,
    OpenResult,
    to_observation,
    to_symbol,
)
from .grid import Grid, NeighbourKind, Position, Size


# ============================================================================
# Constants
# ============================================================================

# Random draws allowed when looking for a new home for a first-click bomb.
RELOCATION_ATTEMPTS = 32

RandomSource = Union[None, int, np.random.Generator]


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """
    Normalise a seed or generator into a generator.

    Anything exposing an ``integers`` method is used as-is.
    """
    if rng is not None and hasattr(rng, "integers"):
        return rng
    return np.random.default_rng(rng)


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Owns two grids of the same size: what each cell contains (types) and
    what the player has done to it (states). Every algorithm reads both
    grids together by position.
    """

    def __init__(self, size: Size, rng: RandomSource = None) -> None:
        """
        Create a board with no bombs and every cell unopened.

        Args:
            size: (width, height) of the board.
            rng: Generator or seed used for bomb placement and relocation.
        """
        width, height = size
        if width < 1 or height < 1:
            raise ValueError("Board dimensions must be positive")

        self.types: Grid[CellType] = Grid.new(size, EMPTY)
        self.states: Grid[CellState] = Grid.new(size, CellState.UNOPENED)
        self.rng = make_rng(rng)
        self._has_opened_any = False

        self._check_invariants()

    @classmethod
    def with_bombs(
        cls, size: Size, bomb_count: int, rng: RandomSource = None
    ) -> "Board":
        """
        Create a board with bombs placed uniformly at random.

        Positions are drawn with replacement, so two draws landing on the
        same cell leave the board with fewer bombs than requested.

        Args:
            size: (width, height) of the board.
            bomb_count: Number of placement draws.
            rng: Generator or seed for reproducible layouts.
        """
        board = cls(size, rng)
        for _ in range(bomb_count):
            board.types.set(board._random_position(), BOMB)
        board.rebuild_adjacency()
        return board

    @classmethod
    def from_bomb_positions(
        cls,
        size: Size,
        positions: Iterable[Position],
        rng: RandomSource = None,
    ) -> "Board":
        """Create a board with bombs at exactly the given positions."""
        board = cls(size, rng)
        for pos in positions:
            board.types.set(pos, BOMB)
        board.rebuild_adjacency()
        return board

    def _check_invariants(self) -> None:
        assert self.types.size == self.states.size, (
            f"type grid {self.types.size} and state grid "
            f"{self.states.size} differ in size"
        )

    def _random_position(self) -> Position:
        x = int(self.rng.integers(0, self.width))
        y = int(self.rng.integers(0, self.height))
        return (x, y)

    # ========================================================================
    # Adjacency
    # ========================================================================

    def rebuild_adjacency(self) -> None:
        """Recount neighbouring bombs for every non-bomb cell."""
        for pos, cell_type in self.types.iter_with_positions():
            if cell_type.is_bomb:
                continue
            count = sum(
                1 for neighbour in self.types.iter_neighbours(pos)
                if neighbour.is_bomb
            )
            self.types.set(pos, CellType.from_count(count))

    # ========================================================================
    # Player Actions
    # ========================================================================

    def toggle_flag(self, pos: Position) -> Optional[FlagResult]:
        """
        Toggle flag on a cell.

        Returns:
            FLAG_PLACED or FLAG_REMOVED, or None if the position is out of
            bounds or the cell is already opened.
        """
        state = self.states.get(pos)
        if state == CellState.UNOPENED:
            self.states.set(pos, CellState.FLAGGED)
            return FlagResult.FLAG_PLACED
        if state == CellState.FLAGGED:
            self.states.set(pos, CellState.UNOPENED)
            return FlagResult.FLAG_REMOVED
        return None

    def open(self, pos: Position) -> Optional[OpenResult]:
        """
        Open an unopened cell.

        Opening an empty cell also uncovers the connected empty region.
        A BOMB_HIT on the very first open of the game should be passed to
        handle_first_click_bomb by the caller rather than treated as a loss.

        Returns:
            The result for the cell's type, or None if the position is out
            of bounds or the cell is flagged or already opened.
        """
        if self.states.get(pos) != CellState.UNOPENED:
            return None

        self.states.set(pos, CellState.OPENED)
        self._has_opened_any = True

        cell_type = self.types.get(pos)
        if cell_type.is_bomb:
            return OpenResult.BOMB_HIT
        if cell_type.is_empty:
            self.flood_uncover_empty(pos)
            return OpenResult.OPEN_SPACE_UNCOVERED
        return OpenResult.UNSAFE_SPACE_UNCOVERED

    def flood_uncover_empty(self, start: Position) -> int:
        """
        Open the region reachable orthogonally from start.

        Bombs and cells that are not unopened are skipped. Counted cells on
        the border are opened but do not spread further, and nothing
        spreads at all unless start itself is empty.

        Returns:
            Number of cells opened.
        """
        start_type = self.types.get(start)
        if start_type is None:
            return 0
        starting_from_blank = start_type.is_empty

        opened = 0
        pending: List[Position] = [start]
        while pending:
            pos = pending.pop()
            for neighbour in self.types.iter_neighbour_positions(
                pos, NeighbourKind.ORTHOGONAL
            ):
                neighbour_type = self.types.get(neighbour)
                if neighbour_type.is_bomb:
                    continue
                if self.states.get(neighbour) != CellState.UNOPENED:
                    continue

                self.states.set(neighbour, CellState.OPENED)
                opened += 1

                if starting_from_blank and neighbour_type.is_empty:
                    pending.append(neighbour)

        if opened:
            self._has_opened_any = True
        return opened

    def handle_first_click_bomb(self, pos: Position) -> Optional[Position]:
        """
        Rescue a first click that landed on a bomb.

        Does nothing unless pos holds a bomb.

        Returns:
            Where the bomb went, or None if it could not be placed.
        """
        cell_type = self.types.get(pos)
        if cell_type is None or not cell_type.is_bomb:
            return None
        return self.move_bomb(pos)

    def move_bomb(self, pos: Position) -> Optional[Position]:
        """
        Move the bomb at pos to a random empty cell.

        After up to RELOCATION_ATTEMPTS failed draws the bomb is dropped
        and the board keeps one fewer bomb. If pos ends up empty the region
        around it is uncovered as if it had been opened normally.

        Returns:
            The new bomb position, or None if none was found.
        """
        if not self.types.in_bounds(pos):
            return None

        self.types.set(pos, EMPTY)

        new_pos = None
        for _ in range(RELOCATION_ATTEMPTS):
            candidate = self._random_position()
            if candidate != pos and self.types.get(candidate).is_empty:
                self.types.set(candidate, BOMB)
                new_pos = candidate
                break

        self.rebuild_adjacency()

        if self.types.get(pos).is_empty:
            self.flood_uncover_empty(pos)

        return new_pos

    def uncover_all(self) -> None:
        """Open every cell that is not flagged."""
        self.states.map_in_place(
            lambda state: state if state == CellState.FLAGGED
            else CellState.OPENED
        )
        if self.opened_count:
            self._has_opened_any = True

    # ========================================================================
    # Win Check
    # ========================================================================

    def are_all_bombs_flagged(self) -> bool:
        """Check that flags sit on exactly the bomb cells."""
        self._check_invariants()
        return all(
            (state == CellState.FLAGGED) == cell_type.is_bomb
            for cell_type, state in zip(self.types, self.states)
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def size(self) -> Size:
        return self.types.size

    @property
    def width(self) -> int:
        return self.types.width

    @property
    def height(self) -> int:
        return self.types.height

    @property
    def has_opened_any(self) -> bool:
        """Whether any cell has been opened since the board was created."""
        return self._has_opened_any

    def in_bounds(self, pos: Position) -> bool:
        return self.types.in_bounds(pos)

    def cell_type(self, pos: Position) -> Optional[CellType]:
        """Get cell type at position, or None if invalid."""
        return self.types.get(pos)

    def cell_state(self, pos: Position) -> Optional[CellState]:
        """Get cell state at position, or None if invalid."""
        return self.states.get(pos)

    def bomb_positions(self) -> List[Position]:
        return [pos for pos, cell_type in self.types.iter_with_positions()
                if cell_type.is_bomb]

    @property
    def bomb_count(self) -> int:
        return sum(1 for cell_type in self.types if cell_type.is_bomb)

    @property
    def flag_count(self) -> int:
        return sum(1 for state in self.states if state == CellState.FLAGGED)

    @property
    def opened_count(self) -> int:
        return sum(1 for state in self.states if state == CellState.OPENED)

    @property
    def remaining_bombs(self) -> int:
        """Bombs minus flags; negative when over-flagged."""
        return self.bomb_count - self.flag_count

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = unopened
                -2 = flagged
                0-8 = opened with adjacent count
                9 = opened bomb
        """
        cells = Grid.new_with(
            self.size, lambda pos: (self.types.get(pos), self.states.get(pos))
        )
        return cells.to_array(lambda cell: to_observation(*cell))

    def bomb_mask(self) -> np.ndarray:
        """Boolean array of shape (height, width), True where bombs are."""
        return self.types.to_array(lambda cell_type: cell_type.is_bomb,
                                   dtype=bool)

    def render_text(self) -> str:
        """Render board as ASCII text, one line per row."""
        lines = []
        for y in range(self.height):
            symbols = [
                to_symbol(self.types.get((x, y)), self.states.get((x, y)))
                for x in range(self.width)
            ]
            lines.append(" ".join(symbols))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Board(size={self.size}, bombs={self.bomb_count}, "
            f"opened={self.opened_count}, flags={self.flag_count})"
        )


def new_board(
    size: Size, bomb_count: int, rng: RandomSource = None
) -> Board:
    """Create a randomly generated board ready for play."""
    return Board.with_bombs(size, bomb_count, rng)
