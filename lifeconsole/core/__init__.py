"""Board model and generation engine."""

from .board import Board, Cell, get_cell, init_board
from .engine import LifeEngine, count_all_neighbors, count_neighbors, default_engine, next_generation
from .rules import BIRTH_SET, SURVIVAL_SET, should_live

__all__ = [
    'Board',
    'Cell',
    'get_cell',
    'init_board',
    'LifeEngine',
    'count_neighbors',
    'count_all_neighbors',
    'next_generation',
    'default_engine',
    'SURVIVAL_SET',
    'BIRTH_SET',
    'should_live',
]
