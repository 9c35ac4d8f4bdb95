"""One-shot board generation for callers that only need a single board."""

from __future__ import annotations

import random

from sokoban.engine.gamegenerator import pipeline
from sokoban.engine.gamegenerator.empty import MIN_FLOOR_CELLS_SINGLE, RandomEmptyBoards
from sokoban.models.board import Board


class GameGenerator:
    """Pulls single boards out of the randomized pipelines."""

    @staticmethod
    def empty(size: int, rng: random.Random | None = None) -> Board | None:
        """Return a random empty layout with at least three floor cells."""
        boards = RandomEmptyBoards(size, rng, min_floor=MIN_FLOOR_CELLS_SINGLE)
        return next(boards, None)

    @staticmethod
    def generate(
        size: int, rng: random.Random | None = None, solvable: bool = True
    ) -> Board | None:
        """Return a random playable board, or ``None`` if *size* has none."""
        if solvable:
            boards = pipeline.solvable_randomized(size, rng)
        else:
            boards = pipeline.randomized(size, rng)
        return next(boards, None)
