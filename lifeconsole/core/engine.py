"""Conway's Game of Life generation engine.

Derives the next board from the current one. Every cell's next state is
computed against the same snapshot, so the update is simultaneous: each
generation is a pure function of the one before.

Neighbors are the up-to-eight cells around a cell horizontally, vertically
and diagonally. The board does not wrap: positions off the edge simply do not
exist, so edge cells have five neighbors and corner cells three.
"""

import numpy as np
from typing import Dict, Tuple
import logging

from .board import Board
from .rules import should_live, rule_table

logger = logging.getLogger(__name__)

NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


def count_neighbors(board: Board, x: int, y: int) -> int:
    """Count living neighbors of a cell using the Moore neighborhood.

    Args:
        board: The board containing the cell
        x: X coordinate of cell (column)
        y: Y coordinate of cell (row)

    Returns:
        Number of living neighbors (0-8)
    """
    state = board.state
    count = 0

    for dx, dy in NEIGHBOR_OFFSETS:
        nx, ny = x + dx, y + dy

        # Off-board positions are not neighbors; no wraparound
        if 0 <= nx < board.size and 0 <= ny < board.size:
            if state[ny, nx]:
                count += 1

    return count


def count_all_neighbors(board: Board) -> np.ndarray:
    """Count living neighbors for every cell at once.

    The state is padded with a ring of dead cells and the eight shifted
    views are summed. The padding stands in for the missing off-board
    positions, so edge and corner counts match count_neighbors.

    Returns:
        (size, size) integer array of neighbor counts, indexed [y, x]
    """
    size = board.size
    padded = np.pad(board.state.astype(np.uint8), 1, mode='constant', constant_values=0)

    counts = np.zeros((size, size), dtype=np.uint8)
    for dx, dy in NEIGHBOR_OFFSETS:
        counts += padded[1 + dy:1 + dy + size, 1 + dx:1 + dx + size]

    return counts


def next_generation(board: Board) -> Board:
    """Apply one generation of Conway's rules to the entire board.

    Args:
        board: Current board (not modified)

    Returns:
        New board of the same size with the next generation
    """
    counts = count_all_neighbors(board)
    alive = board.state

    # Birth on exactly 3; survival on 2 or 3
    next_state = (counts == 3) | (alive & (counts == 2))
    return Board(board.size, next_state)


class LifeEngine:
    """Conway's Game of Life rules engine.

    Stateless object wrapper over the module functions, convenient for code
    that wants to hold an engine.
    """

    def count_neighbors(self, board: Board, x: int, y: int) -> int:
        return count_neighbors(board, x, y)

    def update_cell(self, board: Board, x: int, y: int) -> bool:
        """Apply Conway's rules to determine next state of a cell.

        Args:
            board: Current board
            x: X coordinate of cell (column)
            y: Y coordinate of cell (row)

        Returns:
            Next state of the cell (True=alive, False=dead)
        """
        return should_live(board[x, y], count_neighbors(board, x, y))

    def next_generation(self, board: Board) -> Board:
        """Produce the successor board."""
        successor = next_generation(board)
        logger.debug(f"Next generation: {successor!r}")
        return successor

    def rule_table(self) -> Dict[Tuple[bool, int], bool]:
        """Get the rule table for all (current_state, neighbor_count) pairs."""
        return rule_table()


# Singleton instance for convenience
default_engine = LifeEngine()
