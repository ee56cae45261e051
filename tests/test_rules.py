"""Tests for the Conway transition rule.

Checks birth, survival, underpopulation and overcrowding for every
neighbor count, both on the bare rule and through the engine.
"""

import pytest
from lifeconsole.core.board import Board
from lifeconsole.core.engine import NEIGHBOR_OFFSETS, next_generation, default_engine
from lifeconsole.core.rules import BIRTH_SET, SURVIVAL_SET, rule_table, should_die, should_live


def board_with_neighbors(center_alive: bool, live_neighbors: int) -> Board:
    """3x3 board whose center has the given state and neighbor count."""
    alive = [(1 + dx, 1 + dy) for dx, dy in NEIGHBOR_OFFSETS[:live_neighbors]]
    if center_alive:
        alive.append((1, 1))
    return Board.from_cells(3, alive)


class TestRuleSets:
    """Test the standard rule constants."""

    def test_standard_sets(self):
        assert SURVIVAL_SET == {2, 3}
        assert BIRTH_SET == {3}

    def test_rule_table_complete(self):
        table = rule_table()
        assert len(table) == 18
        assert {key for key, value in table.items() if value} == {(False, 3), (True, 2), (True, 3)}
        assert default_engine.rule_table() == table


class TestBirth:
    """Dead cells are born with exactly 3 neighbors."""

    @pytest.mark.parametrize("neighbors, expected", [
        (0, False), (1, False), (2, False), (3, True), (4, False),
        (5, False), (6, False), (7, False), (8, False),
    ])
    def test_dead_cell(self, neighbors, expected):
        assert should_live(False, neighbors) is expected
        assert should_die(False, neighbors) is not expected

        board = board_with_neighbors(False, neighbors)
        assert next_generation(board)[1, 1] is expected


class TestSurvival:
    """Live cells survive with 2 or 3 neighbors and die otherwise."""

    @pytest.mark.parametrize("neighbors, expected", [
        (0, False), (1, False),  # underpopulation
        (2, True), (3, True),
        (4, False), (5, False), (6, False), (7, False), (8, False),  # overcrowding
    ])
    def test_live_cell(self, neighbors, expected):
        assert should_live(True, neighbors) is expected

        board = board_with_neighbors(True, neighbors)
        assert next_generation(board)[1, 1] is expected
        assert default_engine.update_cell(board, 1, 1) is expected
