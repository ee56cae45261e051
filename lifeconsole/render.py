"""Plain-text rendering of boards.

Alive cells are drawn as asterisks and dead cells as blanks, two characters
per cell so the grid looks roughly square in a terminal.
"""

import sys
from typing import Optional, TextIO

from .core.board import Board

ALIVE_GLYPH = " *"
DEAD_GLYPH = "  "


def format_row(board: Board, y: int) -> str:
    return "".join(ALIVE_GLYPH if alive else DEAD_GLYPH for alive in board.state[y])


def format_board(board: Board) -> str:
    """Turn a board back into rows and columns of glyphs.

    The frame starts with a blank line, has one newline-terminated line per
    row from y=0 down, and ends with another blank line.
    """
    rows = "".join(format_row(board, y) + "\n" for y in range(board.size))
    return "\n" + rows + "\n"


def render(board: Board, stream: Optional[TextIO] = None) -> None:
    """Write one frame to stream (stdout by default).

    Raises:
        OSError: If the stream cannot be written, e.g. BrokenPipeError
    """
    if stream is None:
        stream = sys.stdout
    stream.write(format_board(board))
    stream.flush()
