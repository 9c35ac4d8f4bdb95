"""Flood-fill component labelling and layout statistics."""

from __future__ import annotations

from dataclasses import dataclass

from sokoban.models.board import Board, Cell, Position, Tile, Zone

_NEIGHBORS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class CellStats:
    """Count and bounding box of one cell kind on a board."""

    count: int = 0
    min: Position | None = None
    max: Position | None = None

    @property
    def span(self) -> tuple[int, int]:
        if self.min is None or self.max is None:
            return (0, 0)
        return (1 + self.max.x - self.min.x, 1 + self.max.y - self.min.y)


def cell_stats(board: Board, cell: Tile) -> CellStats:
    positions = board.positions(cell)
    if not positions:
        return CellStats()
    xs = [p.x for p in positions]
    ys = [p.y for p in positions]
    return CellStats(
        count=len(positions),
        min=Position(min(xs), min(ys)),
        max=Position(max(xs), max(ys)),
    )


# -- component labelling ------------------------------------------------------


def _paint(board: Board, x: int, y: int, zone: Zone) -> int:
    """Relabel the floor region containing (x, y) as *zone*; return its size."""
    pending = [(x, y)]
    board.set(x, y, zone)
    painted = 0

    while pending:
        i, j = pending.pop()
        painted += 1
        for di, dj in _NEIGHBORS:
            k, l = i + di, j + dj
            if board.in_bounds(k, l) and board.get(k, l) == Cell.FLOOR:
                board.set(k, l, zone)
                pending.append((k, l))

    return painted


def mark_components(board: Board) -> list[int]:
    """Replace Floor cells with Zone labels in place.

    Zones are numbered in row-major discovery order. Returns the cell
    count of each zone, indexed by zone id.
    """
    counts: list[int] = []
    for y in range(board.size):
        for x in range(board.size):
            if board.get(x, y) == Cell.FLOOR:
                counts.append(_paint(board, x, y, Zone(len(counts))))
    return counts


def count_components(board: Board) -> int:
    return len(mark_components(board.copy()))


def reduce_components(board: Board) -> Board:
    """Return a copy of *board* keeping only its largest floor region.

    Ties go to the region discovered first. Every other region becomes Wall.
    """
    reduced = board.copy()
    counts = mark_components(reduced)
    if not counts:
        return reduced

    keep = 0
    for idx, count in enumerate(counts):
        if count > counts[keep]:
            keep = idx

    for row in reduced.cells:
        for x, tile in enumerate(row):
            if isinstance(tile, Zone):
                row[x] = Cell.FLOOR if tile.id == keep else Cell.WALL
    return reduced
