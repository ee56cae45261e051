"""Tunable constants for the console Game of Life.

There is no configuration file and no command line: these module-level
constants are the only knobs. Adjust BOARD_SIZE for the best fit for your
terminal, and TIMEOUT_MS to slow down or speed up the animation.
"""

from typing import Optional


BOARD_SIZE: int = 25         # Cells per side of the square board
TIMEOUT_MS: int = 750        # Delay between generations (milliseconds)
LIFE_DENOMINATOR: int = 6    # ~1 in LIFE_DENOMINATOR cells start alive


class LifeConfig:
    """Parameters for one simulation run.

    Defaults to the module constants; individual values can be overridden
    for tests or demos.
    """

    def __init__(self,
                 board_size: Optional[int] = None,
                 timeout_ms: Optional[int] = None,
                 life_denominator: Optional[int] = None):
        """Initialize run parameters.

        Args:
            board_size: Cells per side (default BOARD_SIZE)
            timeout_ms: Delay between generations in ms (default TIMEOUT_MS)
            life_denominator: Seeding odds denominator (default LIFE_DENOMINATOR)

        Raises:
            ValueError: If any value is out of range
        """
        self.board_size: int = board_size if board_size is not None else BOARD_SIZE
        self.timeout_ms: int = timeout_ms if timeout_ms is not None else TIMEOUT_MS
        self.life_denominator: int = life_denominator if life_denominator is not None else LIFE_DENOMINATOR

        if self.board_size < 1:
            raise ValueError(f"Board size must be positive, got {self.board_size}")
        if self.timeout_ms < 0:
            raise ValueError(f"Timeout cannot be negative, got {self.timeout_ms}")
        if self.life_denominator < 1:
            raise ValueError(f"Life denominator must be at least 1, got {self.life_denominator}")

    @classmethod
    def standard(cls) -> 'LifeConfig':
        """Create the default configuration."""
        return cls(BOARD_SIZE, TIMEOUT_MS, LIFE_DENOMINATOR)

    @property
    def timeout_seconds(self) -> float:
        """Delay between generations in seconds, as time.sleep expects."""
        return self.timeout_ms / 1000.0

    def __repr__(self) -> str:
        return (f"LifeConfig(board_size={self.board_size}, timeout_ms={self.timeout_ms}, "
                f"life_denominator={self.life_denominator})")
