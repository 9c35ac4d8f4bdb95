"""Piece/goal fillers."""

from __future__ import annotations

import random
from itertools import islice

import pytest

from sokoban.engine.gamegenerator import filled
from sokoban.engine.gamegenerator.filled import RandomFiller, SerialFiller
from sokoban.models.board import Board, Cell


def _assert_filled_from(board: Board, layout: Board) -> None:
    assert board.count(Cell.PIECE) == 1
    assert board.count(Cell.GOAL) == 1
    assert board.count(Cell.FLOOR) == layout.count(Cell.FLOOR) - 2
    assert board.positions(Cell.WALL) == layout.positions(Cell.WALL)


@pytest.mark.parametrize(
    "text",
    ["..\nXX", "..\n.X", "...\n.X.\n...", "X...\n....\n..X.\n...."],
    ids=["k2", "k3", "k8", "k14"],
)
def test_serial_filler_emits_k_times_k_minus_one(text: str) -> None:
    layout = Board.from_text(text)
    k = layout.count(Cell.FLOOR)

    boards = list(SerialFiller(layout))

    assert len(boards) == k * (k - 1)
    assert len({b.key() for b in boards}) == len(boards)
    for board in boards:
        _assert_filled_from(board, layout)


def test_serial_filler_order() -> None:
    boards = [b.render() for b in SerialFiller(Board.from_text("..\n.X"))]

    assert boards == [
        "#@\n.X",
        "#.\n@X",
        "@#\n.X",
        ".#\n@X",
        "@.\n#X",
        ".@\n#X",
    ]


def test_serial_filler_leaves_layout_untouched() -> None:
    layout = Board.from_text("..\n.X")
    list(SerialFiller(layout))

    assert layout.render() == "..\n.X"


def test_symmetry_filtered_fillers() -> None:
    assert len(list(filled.serial(Board.from_text("..\nXX")))) == 1
    assert len(list(filled.serial(Board.from_text("..\n.X")))) == 3


@pytest.mark.parametrize("text", [".X\nXX", "XX\nXX"], ids=["one_floor", "no_floor"])
def test_fillers_need_two_floor_cells(text: str) -> None:
    layout = Board.from_text(text)

    assert list(SerialFiller(layout)) == []
    assert next(RandomFiller(layout, random.Random(0)), None) is None


def test_random_filler_places_distinct_cells() -> None:
    layout = Board.from_text("X...\n....\n..X.\n....")

    boards = list(islice(RandomFiller(layout, random.Random(8)), 25))

    for board in boards:
        _assert_filled_from(board, layout)
    assert len({b.key() for b in boards}) > 1


def test_random_filler_is_reproducible() -> None:
    layout = Board.from_text("...\n.X.\n...")

    first = list(islice(RandomFiller(layout, random.Random(4)), 5))
    second = list(islice(RandomFiller(layout, random.Random(4)), 5))

    assert first == second
