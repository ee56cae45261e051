"""John Conway's Game of Life, rendered to a text console."""

from .config import BOARD_SIZE, LIFE_DENOMINATOR, TIMEOUT_MS, LifeConfig
from .core.board import Board, Cell, get_cell, init_board
from .core.engine import next_generation
from .driver import run, start
from .render import format_board, render

__version__ = "0.1.0"

__all__ = [
    'BOARD_SIZE',
    'TIMEOUT_MS',
    'LIFE_DENOMINATOR',
    'LifeConfig',
    'Board',
    'Cell',
    'get_cell',
    'init_board',
    'next_generation',
    'format_board',
    'render',
    'run',
    'start',
]
