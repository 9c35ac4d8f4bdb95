"""Flood-fill labelling and largest-region reduction."""

from __future__ import annotations

import pytest

from sokoban.engine.gamegenerator.connectivity import (
    CellStats,
    cell_stats,
    count_components,
    mark_components,
    reduce_components,
)
from sokoban.models.board import Board, Cell, Position


def test_mark_components_labels_in_discovery_order() -> None:
    board = Board.from_text(".X.\nXX.\n.X.")

    counts = mark_components(board)

    assert counts == [1, 3, 1]
    assert board.render() == "0X1\nXX1\n2X1"


@pytest.mark.parametrize(
    "before, after",
    [
        (".X.\nXX.\n.X.", "XX.\nXX.\nXX."),
        (".X.\n.X.\n.X.", ".XX\n.XX\n.XX"),
        ("..X\nXXX\nX..", "..X\nXXX\nXXX"),
        ("XX\nXX", "XX\nXX"),
        ("...\n...\n...", "...\n...\n..."),
    ],
    ids=["largest_wins", "tie_first_wins", "tie_first_row", "no_floor", "single_region"],
)
def test_reduce_components(before: str, after: str) -> None:
    board = Board.from_text(before)

    reduced = reduce_components(board)

    assert reduced.render() == after
    assert board.render() == before
    assert count_components(reduced) == (0 if "." not in after else 1)


def test_count_components_leaves_board_alone() -> None:
    board = Board.from_text(".X.\nXXX\n.X.")

    assert count_components(board) == 4
    assert board.render() == ".X.\nXXX\n.X."


def test_cell_stats_bounding_box() -> None:
    board = Board.from_text("XXXX\nX..X\nX.XX\nXXXX")

    floor = cell_stats(board, Cell.FLOOR)

    assert floor.count == 3
    assert floor.min == Position(1, 1)
    assert floor.max == Position(2, 2)
    assert floor.span == (2, 2)


def test_cell_stats_absent_cell() -> None:
    stats = cell_stats(Board.filled(3), Cell.GOAL)

    assert stats == CellStats()
    assert stats.span == (0, 0)
