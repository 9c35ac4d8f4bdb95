"""Slide physics for the single piece."""

from __future__ import annotations

from sokoban.models.board import Board, Cell, Direction, Position
from sokoban.models.results import MoveResult


def move_piece(board: Board, direction: Direction) -> MoveResult | None:
    """Slide the piece in *direction* as far as it goes, in place.

    The piece stops before a wall or the board edge, or on the goal (which
    wins). Returns ``None`` when the board has no piece; a blocked move
    returns ``cells_moved == 0``.
    """
    start = board.find(Cell.PIECE)
    if start is None:
        return None

    dx, dy = direction.delta
    x, y = start
    moved = 0
    victory = False

    while True:
        nx, ny = x + dx, y + dy
        if not board.in_bounds(nx, ny):
            break
        target = board.get(nx, ny)
        if target == Cell.WALL:
            break
        x, y = nx, ny
        moved += 1
        if target == Cell.GOAL:
            victory = True
            break

    board.set(start.x, start.y, Cell.FLOOR)
    board.set(x, y, Cell.PIECE)
    return MoveResult(cells_moved=moved, position=Position(x, y), victory=victory)
