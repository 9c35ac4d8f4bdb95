"""Floor/wall layouts ("empty boards") without piece or goal.

Each layout comes from a seed whose bit ``y * size + x`` marks a floor
cell. Only the largest floor region of a seed survives, and the result must
pass ``is_valid_layout`` to be emitted.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator

from sokoban.engine.gamegenerator.connectivity import cell_stats, reduce_components
from sokoban.engine.gamegenerator.symmetry import DEFAULT_PATIENCE, SymmetryFilter
from sokoban.models.board import Board, Cell

logger = logging.getLogger(__name__)

MIN_SIZE = 2
MIN_FLOOR_CELLS = 2
MIN_FLOOR_CELLS_SINGLE = 3
MIN_WALL_CELLS = 1
DEFAULT_MAX_ATTEMPTS = 100_000


def make_board(size: int, seed: int) -> Board:
    """Convert *seed* into a raw floor/wall grid."""
    cells = [
        [Cell.FLOOR if (seed >> (y * size + x)) & 1 else Cell.WALL for x in range(size)]
        for y in range(size)
    ]
    return Board(size=size, cells=cells)


def is_valid_layout(board: Board, min_floor: int = MIN_FLOOR_CELLS) -> bool:
    """Check cell counts and that the floor reaches near both corners."""
    size = board.size
    if size < MIN_SIZE:
        return False

    floor = cell_stats(board, Cell.FLOOR)
    if floor.count < min_floor or board.count(Cell.WALL) < MIN_WALL_CELLS:
        return False

    low, high = 1, size - 2
    return (
        floor.min is not None
        and floor.max is not None
        and floor.min.x <= low
        and floor.min.y <= low
        and floor.max.x >= high
        and floor.max.y >= high
    )


def layout_from_seed(size: int, seed: int, min_floor: int = MIN_FLOOR_CELLS) -> Board | None:
    board = reduce_components(make_board(size, seed))
    return board if is_valid_layout(board, min_floor) else None


class SerialEmptyBoards(Iterator[Board]):
    """Every valid layout of the given size, in increasing seed order."""

    def __init__(self, size: int, min_floor: int = MIN_FLOOR_CELLS) -> None:
        self.size = size
        self.min_floor = min_floor
        self.seed = 0
        self.combinations = 1 << (size * size) if size >= MIN_SIZE else 0

    def __next__(self) -> Board:
        while self.seed < self.combinations:
            board = layout_from_seed(self.size, self.seed, self.min_floor)
            self.seed += 1
            if board is not None:
                return board
        raise StopIteration


class RandomEmptyBoards(Iterator[Board]):
    """Valid layouts drawn from uniformly random seeds.

    Ends after ``max_attempts`` consecutive rejected seeds within one pull.
    """

    def __init__(
        self,
        size: int,
        rng: random.Random | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        min_floor: int = MIN_FLOOR_CELLS,
    ) -> None:
        self.size = size
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts
        self.min_floor = min_floor
        self._exhausted = size < MIN_SIZE

    def __next__(self) -> Board:
        if self._exhausted:
            raise StopIteration

        for _ in range(self.max_attempts):
            seed = self.rng.getrandbits(self.size * self.size)
            board = layout_from_seed(self.size, seed, self.min_floor)
            if board is not None:
                return board

        logger.warning(
            "No valid %d×%d layout after %d random seeds",
            self.size,
            self.size,
            self.max_attempts,
        )
        self._exhausted = True
        raise StopIteration


# -- symmetry-filtered sources ------------------------------------------------


def serial(size: int) -> SymmetryFilter:
    """All symmetry-distinct layouts of *size*; finishes when seeds run out."""
    return SymmetryFilter(SerialEmptyBoards(size))


def randomized(size: int, rng: random.Random | None = None) -> SymmetryFilter:
    """Symmetry-distinct random layouts; ends once duplicates keep coming."""
    return SymmetryFilter(RandomEmptyBoards(size, rng), patience=DEFAULT_PATIENCE)
