"""Composes layout sources and fillers into streams of playable boards.

Three kinds of stage plug together here:

* a *source* builds a board stream from a size (``empty.serial``),
* a *filler* builds a board stream from one empty board (``filled.serial``),
* a *wrapper* takes any board stream and forwards part of it
  (``SymmetryFilter``, ``SolvableFilter``).

The four public factories wire them up explicitly.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterator
from functools import partial

from sokoban.engine.gamegenerator import empty, filled
from sokoban.engine.gamesolver.solver import Solver
from sokoban.models.board import Board

logger = logging.getLogger(__name__)

BoardSource = Callable[[int], Iterator[Board]]
BoardFiller = Callable[[Board], Iterator[Board]]


class SolvableFilter(Iterator[Board]):
    """Forwards only boards the solver can win."""

    def __init__(self, source: Iterator[Board]) -> None:
        self.source = source
        self.rejected = 0

    def __next__(self) -> Board:
        for board in self.source:
            if Solver.explore_space(board).solvable:
                return board
            self.rejected += 1
        raise StopIteration


class ExhaustiveConnector(Iterator[Board]):
    """Every filled board of every empty board, one filler at a time."""

    def __init__(self, base: Iterator[Board], make_filler: BoardFiller) -> None:
        self.base = base
        self.make_filler = make_filler
        self.filler: Iterator[Board] = iter(())
        self.layouts = 0

    def __next__(self) -> Board:
        while True:
            board = next(self.filler, None)
            if board is not None:
                return board
            layout = next(self.base, None)
            if layout is None:
                logger.debug("Exhaustive pipeline done after %d layouts", self.layouts)
                raise StopIteration
            self.layouts += 1
            self.filler = self.make_filler(layout)


class ConsumingConnector(Iterator[Board]):
    """One filled board per empty board; each pull takes a fresh layout."""

    def __init__(self, base: Iterator[Board], make_filler: BoardFiller) -> None:
        self.base = base
        self.make_filler = make_filler

    def __next__(self) -> Board:
        for layout in self.base:
            board = next(self.make_filler(layout), None)
            if board is not None:
                return board
        raise StopIteration


# -- public factories ---------------------------------------------------------


def serial(size: int) -> ExhaustiveConnector:
    """Every symmetry-distinct playable board of *size*."""
    return ExhaustiveConnector(empty.serial(size), filled.serial)


def randomized(size: int, rng: random.Random | None = None) -> ConsumingConnector:
    """Random playable boards, one per distinct random layout."""
    rng = rng if rng is not None else random.Random()
    return ConsumingConnector(
        empty.randomized(size, rng), partial(filled.randomized, rng=rng)
    )


def solvable_serial(size: int) -> SolvableFilter:
    return SolvableFilter(serial(size))


def solvable_randomized(size: int, rng: random.Random | None = None) -> SolvableFilter:
    return SolvableFilter(randomized(size, rng))
