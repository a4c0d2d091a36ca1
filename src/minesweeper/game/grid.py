"""
Grid module for Minesweeper game.

A fixed-size, row-major 2D container addressed by (x, y) positions.
Out-of-bounds access never raises; it yields None or does nothing.
"""
from enum import Enum, auto
from typing import (
    Any, Callable, Generic, Iterator, List, Optional, Tuple, TypeVar,
)

import numpy as np


T = TypeVar("T")

Position = Tuple[int, int]
Size = Tuple[int, int]


# ============================================================================
# Neighbour Offsets
# ============================================================================

class NeighbourKind(Enum):
    """Which neighbours of a cell to visit."""

    ORTHOGONAL = auto()
    FULL = auto()


# up, down, left, right
ORTHOGONAL_DELTAS: Tuple[Position, ...] = (
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
)

# up-left, up, up-right, left, right, down-left, down, down-right
FULL_DELTAS: Tuple[Position, ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)

_DELTAS = {
    NeighbourKind.ORTHOGONAL: ORTHOGONAL_DELTAS,
    NeighbourKind.FULL: FULL_DELTAS,
}


# ============================================================================
# Grid Class
# ============================================================================

class Grid(Generic[T]):
    """
    Dense two-dimensional storage of one value per cell.

    The size is fixed at construction; resizing means building a new grid.
    """

    def __init__(self, size: Size, data: List[T]) -> None:
        """
        Wrap pre-built row-major storage.

        Prefer Grid.new or Grid.new_with over calling this directly.

        Args:
            size: (width, height) of the grid.
            data: Row-major values, exactly width * height of them.
        """
        width, height = size
        if width < 0 or height < 0:
            raise ValueError("Grid dimensions cannot be negative")
        if len(data) != width * height:
            raise ValueError(
                f"Grid of size {width}x{height} needs {width * height} "
                f"values, got {len(data)}"
            )
        self._size = (width, height)
        self._data = data

    @classmethod
    def new(cls, size: Size, value: T) -> "Grid[T]":
        """Create a grid with every cell set to the same value."""
        width, height = size
        return cls(size, [value] * (width * height))

    @classmethod
    def new_with(cls, size: Size, value_fn: Callable[[Position], T]) -> "Grid[T]":
        """
        Create a grid by calling value_fn once per position.

        Positions are visited in row-major order.
        """
        width, height = size
        data = [value_fn((x, y)) for y in range(height) for x in range(width)]
        return cls(size, data)

    # ========================================================================
    # Dimensions
    # ========================================================================

    @property
    def size(self) -> Size:
        return self._size

    @property
    def width(self) -> int:
        return self._size[0]

    @property
    def height(self) -> int:
        return self._size[1]

    def __len__(self) -> int:
        return len(self._data)

    def in_bounds(self, pos: Position) -> bool:
        """Check if position is within grid bounds."""
        x, y = pos
        return 0 <= x < self._size[0] and 0 <= y < self._size[1]

    def _index(self, pos: Position) -> int:
        x, y = pos
        return x + y * self._size[0]

    # ========================================================================
    # Access
    # ========================================================================

    def get(self, pos: Position) -> Optional[T]:
        """Get the value at position, or None if out of bounds."""
        if not self.in_bounds(pos):
            return None
        return self._data[self._index(pos)]

    def get_mut(self, pos: Position) -> Optional[T]:
        """
        Get the stored object at position for in-place mutation.

        Values are held by reference, so this is the same object get()
        returns. Immutable values should go through set() or update().
        """
        return self.get(pos)

    def set(self, pos: Position, value: T) -> None:
        """Set the value at position. Does nothing if out of bounds."""
        if self.in_bounds(pos):
            self._data[self._index(pos)] = value

    def update(self, pos: Position, fn: Callable[[T], T]) -> Optional[T]:
        """
        Replace the value at position with fn(value).

        Returns:
            The new value, or None if out of bounds.
        """
        if not self.in_bounds(pos):
            return None
        index = self._index(pos)
        self._data[index] = fn(self._data[index])
        return self._data[index]

    def fill(self, value: T) -> None:
        """Set every cell to value."""
        for index in range(len(self._data)):
            self._data[index] = value

    def map_in_place(self, fn: Callable[[T], T]) -> None:
        """Replace every value with fn(value), in row-major order."""
        for index, value in enumerate(self._data):
            self._data[index] = fn(value)

    # ========================================================================
    # Iteration
    # ========================================================================

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def positions(self) -> Iterator[Position]:
        """Yield every position in row-major order."""
        width, height = self._size
        for y in range(height):
            for x in range(width):
                yield (x, y)

    def iter_with_positions(self) -> Iterator[Tuple[Position, T]]:
        """Yield (position, value) pairs in row-major order."""
        return zip(self.positions(), self._data)

    def iter_neighbour_positions(
        self, pos: Position, kind: NeighbourKind = NeighbourKind.FULL
    ) -> Iterator[Position]:
        """Yield in-bounds neighbour positions in a fixed order."""
        x, y = pos
        for delta_x, delta_y in _DELTAS[kind]:
            neighbour = (x + delta_x, y + delta_y)
            if self.in_bounds(neighbour):
                yield neighbour

    def iter_neighbours(
        self, pos: Position, kind: NeighbourKind = NeighbourKind.FULL
    ) -> Iterator[T]:
        """Yield values of in-bounds neighbours in a fixed order."""
        for neighbour in self.iter_neighbour_positions(pos, kind):
            yield self._data[self._index(neighbour)]

    # ========================================================================
    # Conversion
    # ========================================================================

    def to_array(
        self, fn: Callable[[T], Any], dtype: Any = np.int8
    ) -> np.ndarray:
        """
        Convert grid to a numpy array of shape (height, width).

        Args:
            fn: Maps each stored value to an array element.
            dtype: Element type of the resulting array.
        """
        width, height = self._size
        flat = np.fromiter((fn(value) for value in self._data), dtype=dtype,
                           count=len(self._data))
        return flat.reshape((height, width))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._size == other._size and self._data == other._data

    def __repr__(self) -> str:
        return f"Grid(size={self._size})"
