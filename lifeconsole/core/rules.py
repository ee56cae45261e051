"""
Conway's Game of Life transition rule.

A living cell dies from loneliness (fewer than two live neighbors) or
overcrowding (four or more). Otherwise it lives on. A dead cell is born
when it has exactly three live neighbors.
"""

from typing import Dict, Set, Tuple


SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors


def should_live(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        return live_neighbors in SURVIVAL_SET
    else:
        return live_neighbors in BIRTH_SET


def should_die(alive: bool, live_neighbors: int) -> bool:
    return not should_live(alive, live_neighbors)


def rule_table() -> Dict[Tuple[bool, int], bool]:
    """Map every (current_state, neighbor_count) pair to the next state."""
    return {
        (alive, neighbors): should_live(alive, neighbors)
        for alive in (False, True)
        for neighbors in range(9)
    }
