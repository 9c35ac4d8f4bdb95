"""Piece and goal placement on an empty layout."""

from __future__ import annotations

import random
from collections.abc import Iterator

from sokoban.engine.gamegenerator.symmetry import DEFAULT_PATIENCE, SymmetryFilter
from sokoban.models.board import Board, Cell, Position


def place(board: Board, piece: Position, goal: Position) -> Board:
    """Return a copy of *board* with the piece and goal set."""
    filled = board.copy()
    filled.set(piece.x, piece.y, Cell.PIECE)
    filled.set(goal.x, goal.y, Cell.GOAL)
    return filled


class SerialFiller(Iterator[Board]):
    """Every (piece, goal) placement over distinct floor cells.

    Both cells run in row-major order with the piece in the outer loop,
    giving ``k * (k - 1)`` boards for ``k`` floor cells.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.floors = board.positions(Cell.FLOOR)
        self._pairs = (
            (piece, goal)
            for piece in self.floors
            for goal in self.floors
            if piece != goal
        )

    def __next__(self) -> Board:
        piece, goal = next(self._pairs)
        return place(self.board, piece, goal)


class RandomFiller(Iterator[Board]):
    """Endless random placements; empty when fewer than two floor cells."""

    def __init__(self, board: Board, rng: random.Random | None = None) -> None:
        self.board = board
        self.rng = rng if rng is not None else random.Random()
        self.floors = board.positions(Cell.FLOOR)

    def __next__(self) -> Board:
        if len(self.floors) < 2:
            raise StopIteration
        pair = self.rng.sample(self.floors, 2)
        self.rng.shuffle(pair)
        piece, goal = pair
        return place(self.board, piece, goal)


# -- symmetry-filtered fillers ------------------------------------------------


def serial(board: Board) -> SymmetryFilter:
    return SymmetryFilter(SerialFiller(board))


def randomized(board: Board, rng: random.Random | None = None) -> SymmetryFilter:
    return SymmetryFilter(RandomFiller(board, rng), patience=DEFAULT_PATIENCE)
