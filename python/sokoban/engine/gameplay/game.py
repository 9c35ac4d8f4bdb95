"""Core gameplay logic: applies slides and tracks the win condition."""

from __future__ import annotations

import random

from sokoban.engine.gamegenerator import GameGenerator
from sokoban.engine.gameplay.moves import move_piece
from sokoban.engine.gamestate import GameState
from sokoban.models.board import Board, Direction
from sokoban.models.results import MoveResult


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        board = GameGenerator.generate(size, rng)
        if board is None:
            raise ValueError(f"No playable {size}×{size} board could be generated.")
        self.size = size
        self.state = GameState(board)

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.size = board.size
        obj.state = GameState(board)
        return obj

    # -- movement -------------------------------------------------------------

    def move(self, direction: Direction) -> MoveResult | None:
        """Slide the piece in *direction*.

        Moves after a win, and moves that leave the piece in place, are not
        counted. Returns ``None`` when the board has no piece.
        """
        if self.state.won:
            return None
        result = move_piece(self.state.board, direction)
        if result is not None and result.cells_moved > 0:
            self.state.record_move(result.cells_moved, result.victory)
        return result

    def restart(self) -> None:
        self.state.reset()

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.won
