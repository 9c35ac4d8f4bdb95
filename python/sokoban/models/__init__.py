from sokoban.models.board import Board, Cell, Direction, Position, Tile, Zone
from sokoban.models.results import ExploreResult, MoveResult

__all__ = [
    "Board",
    "Cell",
    "Direction",
    "ExploreResult",
    "MoveResult",
    "Position",
    "Tile",
    "Zone",
]
