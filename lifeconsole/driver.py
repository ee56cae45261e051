"""
Console Game of Life driver.

Seeds a random board, then renders and advances it on a fixed timer. After
Life has started it doesn't stop: the loop runs until the process is killed,
unless the caller passes a stop event or a frame limit.
"""

import os
import sys
import time
import logging
import threading
from typing import Callable, Optional, TextIO

import numpy as np

from .config import LifeConfig
from .core.board import Board, init_board
from .core.engine import next_generation
from .render import render

logger = logging.getLogger(__name__)


def run(config: Optional[LifeConfig] = None,
        stop: Optional[threading.Event] = None,
        stream: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
        max_generations: Optional[int] = None,
        rng: Optional[np.random.Generator] = None) -> Board:
    """Run the render → wait → advance loop.

    Args:
        config: Run parameters (default LifeConfig.standard())
        stop: Optional event; the loop exits once it is set
        stream: Output stream for frames (default stdout)
        sleep: Delay function taking seconds
        max_generations: Optional cap on rendered frames
        rng: Random generator used to seed the first board

    Returns:
        The last board rendered. Only reached when stop or max_generations ends the loop.

    Raises:
        ValueError: If max_generations is given and less than 1
    """
    if max_generations is not None and max_generations < 1:
        raise ValueError(f"max_generations must be at least 1, got {max_generations}")
    if config is None:
        config = LifeConfig.standard()

    board = init_board(config.board_size, config.life_denominator, rng=rng)
    logger.debug(f"Starting Life with {config!r}")

    generation = 0
    while True:
        render(board, stream)
        generation += 1

        if max_generations is not None and generation >= max_generations:
            break
        if stop is not None and stop.is_set():
            break

        sleep(config.timeout_seconds)
        board = next_generation(board)

    logger.debug(f"Stopped after {generation} generations")
    return board


def _silence_stdout() -> None:
    # Point stdout at devnull so the interpreter's final flush doesn't raise again
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    os.close(devnull)


def start() -> None:
    """Begin the Game with the default constants. Never returns on its own."""
    run()


def main() -> None:
    """Process entry point."""
    logging.basicConfig(level=logging.WARNING, format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        start()
    except OSError as e:
        _silence_stdout()
        logger.error(f"Output failed, stopping: {e}")
        sys.exit(1)
