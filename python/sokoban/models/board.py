"""Board model for the single-box puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple


class Cell(StrEnum):
    """Cell kinds; the value doubles as the text symbol."""

    FLOOR = "."
    WALL = "X"
    PIECE = "#"
    GOAL = "@"


@dataclass(frozen=True)
class Zone:
    """Connected-component label, only used while reducing a layout."""

    id: int

    @property
    def symbol(self) -> str:
        return str(self.id % 10)


Tile = Cell | Zone


class Position(NamedTuple):
    x: int
    y: int


class Direction(StrEnum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


def symbol(tile: Tile) -> str:
    if isinstance(tile, Zone):
        return tile.symbol
    return tile.value


@dataclass
class Board:
    """Square grid of cells, stored row-major as ``cells[y][x]``."""

    size: int
    cells: list[list[Tile]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def filled(cls, size: int, cell: Tile = Cell.FLOOR) -> Board:
        return cls(size=size, cells=[[cell] * size for _ in range(size)])

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Parse a board from its text form.

        Example::

            Board.from_text('''
                #.
                X@
            ''')
        """
        rows = ["".join(line.split()) for line in text.strip().splitlines()]
        rows = [row for row in rows if row]
        if not rows:
            raise ValueError("Board text is empty.")

        size = len(rows)
        cells: list[list[Tile]] = []
        for y, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(
                    f"Expected {size} cells in row {y} of a {size}×{size} "
                    f"board, got {len(row)}."
                )
            try:
                cells.append([Cell(ch) for ch in row])
            except ValueError:
                raise ValueError(f"Unknown cell symbol in row {y}: {row!r}.") from None
        return cls(size=size, cells=cells)

    # -- queries --------------------------------------------------------------

    def get(self, x: int, y: int) -> Tile:
        return self.cells[y][x]

    def set(self, x: int, y: int, cell: Tile) -> None:
        self.cells[y][x] = cell

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def positions(self, cell: Tile) -> list[Position]:
        """Return every position holding *cell*, in row-major order."""
        return [
            Position(x, y)
            for y, row in enumerate(self.cells)
            for x, value in enumerate(row)
            if value == cell
        ]

    def find(self, cell: Tile) -> Position | None:
        for y, row in enumerate(self.cells):
            for x, value in enumerate(row):
                if value == cell:
                    return Position(x, y)
        return None

    def count(self, cell: Tile) -> int:
        return sum(row.count(cell) for row in self.cells)

    def key(self) -> tuple[tuple[Tile, ...], ...]:
        """Hashable snapshot of the grid, equal for equal boards."""
        return tuple(tuple(row) for row in self.cells)

    def copy(self) -> Board:
        return Board(size=self.size, cells=[row[:] for row in self.cells])

    # -- rendering ------------------------------------------------------------

    def render(self) -> str:
        return "\n".join("".join(symbol(c) for c in row) for row in self.cells)

    def __str__(self) -> str:
        return self.render()
