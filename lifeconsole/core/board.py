"""Board state for Conway's Game of Life.

A board is an immutable snapshot of a square grid of cells. State lives in a
dense numpy boolean array indexed [y, x], so every coordinate in the grid has
exactly one cell and lookups never have to search.
"""

import numpy as np
from typing import Iterable, Iterator, NamedTuple, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


class Cell(NamedTuple):
    """A single grid position and its state."""
    x: int
    y: int
    alive: bool


class Board:
    """Square grid of cells for one generation.

    Attributes:
        size: Cells per side
        state: Read-only 2D numpy boolean array (True=alive, False=dead)
    """

    def __init__(self, size: int, initial_state: Optional[np.ndarray] = None):
        """Create a board of the given size.

        Args:
            size: Cells per side
            initial_state: Optional (size, size) boolean array; copied

        Raises:
            ValueError: If size is invalid or initial_state shape/dtype doesn't match
        """
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")

        if initial_state is not None:
            if initial_state.shape != (size, size):
                raise ValueError(f"Initial state shape {initial_state.shape} doesn't match board size {(size, size)}")
            if initial_state.dtype != bool:
                raise ValueError("Initial state must be boolean array")
            state = initial_state.copy()
        else:
            state = np.zeros((size, size), dtype=bool)

        state.flags.writeable = False
        self._size = size
        self._state = state

    @classmethod
    def from_cells(cls, size: int, alive: Iterable[Tuple[int, int]]) -> 'Board':
        """Create a board where only the given (x, y) coordinates are alive.

        Raises:
            IndexError: If a coordinate lies outside the board
        """
        state = np.zeros((size, size), dtype=bool)
        for x, y in alive:
            if not (0 <= x < size and 0 <= y < size):
                raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {size}x{size} board")
            state[y, x] = True
        return cls(size, state)

    @classmethod
    def from_pattern(cls, pattern: np.ndarray, size: int, x: int = 0, y: int = 0) -> 'Board':
        """Create a board with a pattern placed at (x, y).

        Args:
            pattern: 2D boolean array; pattern[row, col]
            size: Cells per side of the new board
            x: Column of the pattern's top-left cell
            y: Row of the pattern's top-left cell

        Returns:
            Board: New board containing the pattern, all other cells dead

        Raises:
            ValueError: If the pattern does not fit on the board
        """
        if pattern.dtype != bool:
            pattern = pattern.astype(bool)

        height, width = pattern.shape
        if x < 0 or y < 0 or x + width > size or y + height > size:
            raise ValueError(f"Pattern {width}x{height} at ({x}, {y}) doesn't fit a {size}x{size} board")

        state = np.zeros((size, size), dtype=bool)
        state[y:y+height, x:x+width] = pattern
        return cls(size, state)

    @property
    def size(self) -> int:
        return self._size

    @property
    def state(self) -> np.ndarray:
        return self._state

    def to_array(self) -> np.ndarray:
        """Get a writable copy of the board state."""
        return self._state.copy()

    def get_cell(self, x: int, y: int) -> Cell:
        """Get the cell at coordinates.

        Args:
            x: X coordinate (column)
            y: Y coordinate (row)

        Returns:
            The cell at (x, y)

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self.size}x{self.size} board")
        return Cell(x, y, bool(self._state[y, x]))

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell, row by row."""
        for y in range(self.size):
            for x in range(self.size):
                yield Cell(x, y, bool(self._state[y, x]))

    def alive_cells(self) -> list[Tuple[int, int]]:
        """Get (x, y) coordinates of all alive cells, row by row."""
        rows, cols = np.nonzero(self._state)
        return [(int(x), int(y)) for y, x in zip(rows, cols)]

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.sum(self._state))

    def density(self) -> float:
        """Get fraction of cells that are alive."""
        return self.count_alive() / (self.size * self.size)

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self._state)

    def __getitem__(self, key: Tuple[int, int]) -> bool:
        """Access cell state using board[x, y] syntax."""
        x, y = key
        return self.get_cell(x, y).alive

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self.size == other.size and np.array_equal(self._state, other._state)

    def __str__(self) -> str:
        return "\n".join(
            "".join("X" if alive else "." for alive in row)
            for row in self._state
        )

    def __repr__(self) -> str:
        return f"Board({self.size}x{self.size}, alive={self.count_alive()}, density={self.density() * 100:.1f}%)"


def init_board(size: int, alive_probability_denominator: int,
               rng: Optional[np.random.Generator] = None) -> Board:
    """Create a randomly seeded board.

    Each cell is independently alive with probability
    1/alive_probability_denominator: a number is drawn uniformly from
    1..denominator and the cell lives if it comes up 1.

    Args:
        size: Cells per side
        alive_probability_denominator: Seeding odds denominator (>= 1)
        rng: Random generator; a freshly seeded one is used if omitted

    Returns:
        New random board

    Raises:
        ValueError: If size or denominator is invalid
    """
    if alive_probability_denominator < 1:
        raise ValueError(f"Alive probability denominator must be at least 1, got {alive_probability_denominator}")
    if size < 1:
        raise ValueError(f"Board size must be positive, got {size}")

    if rng is None:
        rng = np.random.default_rng()

    draws = rng.integers(1, alive_probability_denominator, size=(size, size), endpoint=True)
    board = Board(size, draws == 1)
    logger.debug(f"Seeded {board!r} with 1/{alive_probability_denominator} odds")
    return board


def get_cell(board: Board, x: int, y: int) -> Cell:
    """Get the cell at (x, y) on board."""
    return board.get_cell(x, y)
