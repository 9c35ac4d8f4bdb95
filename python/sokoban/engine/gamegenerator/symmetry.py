"""Square (D4) symmetries of a board and the orbit-deduplicating filter."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from sokoban.models.board import Board

logger = logging.getLogger(__name__)

DEFAULT_PATIENCE = 1_000


def rotate(board: Board) -> Board:
    """Counter-clockwise quarter turn."""
    n = board.size
    return Board(
        size=n,
        cells=[[board.cells[x][n - 1 - y] for x in range(n)] for y in range(n)],
    )


def reflect_x(board: Board) -> Board:
    """Mirror over the vertical axis."""
    return Board(size=board.size, cells=[row[::-1] for row in board.cells])


def all_symmetries(board: Board) -> list[Board]:
    """Return the 8 D4 images: e, a, a², a³, b, ab, a²b, a³b."""
    e = board.copy()
    a = rotate(e)
    a2 = rotate(a)
    a3 = rotate(a2)
    b = reflect_x(e)
    ab = rotate(b)
    a2b = rotate(ab)
    a3b = rotate(a2b)
    return [e, a, a2, a3, b, ab, a2b, a3b]


class SymmetryFilter(Iterator[Board]):
    """Wraps a board iterator, dropping boards symmetric to an earlier one.

    ``patience`` caps the number of consecutive rejections; once reached
    the filter treats its source as exhausted. Leave it ``None`` for finite
    sources.
    """

    def __init__(self, source: Iterator[Board], patience: int | None = None) -> None:
        self.source = source
        self.patience = patience
        self.accepted: list[tuple[Board, list[Board]]] = []
        self._seen: set[tuple] = set()
        self._exhausted = False

    def accept(self, board: Board) -> bool:
        """Record *board* unless it is in the orbit of an accepted board."""
        if board.key() in self._seen:
            return False
        orbit = all_symmetries(board)
        self.accepted.append((board.copy(), orbit))
        self._seen.update(image.key() for image in orbit)
        return True

    def __next__(self) -> Board:
        if self._exhausted:
            raise StopIteration
        rejected = 0
        for board in self.source:
            if self.accept(board):
                return board
            rejected += 1
            if self.patience is not None and rejected >= self.patience:
                logger.warning(
                    "Symmetry filter gave up after %d consecutive duplicates "
                    "(%d boards accepted)",
                    rejected,
                    len(self.accepted),
                )
                break
        self._exhausted = True
        raise StopIteration
