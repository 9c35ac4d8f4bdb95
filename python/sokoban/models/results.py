"""Value objects returned by the move engine and the solver."""

from __future__ import annotations

from dataclasses import dataclass, field

from sokoban.models.board import Direction, Position


@dataclass(frozen=True)
class MoveResult:
    cells_moved: int
    position: Position
    victory: bool


@dataclass
class ExploreResult:
    """Outcome of a full search; the default value means "no solution"."""

    solvable: bool = False
    move_count: int = 0
    solution: list[Direction] = field(default_factory=list)
