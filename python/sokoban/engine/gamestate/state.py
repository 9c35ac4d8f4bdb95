"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time

from sokoban.models.board import Board


class GameState:
    """Holds the current board, counters, and elapsed time."""

    def __init__(self, board: Board) -> None:
        self.initial = board.copy()
        self.board = board
        self.moves: int = 0
        self.cells_travelled: int = 0
        self.won: bool = False
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.time()
            self._running = True

    # -- moves ----------------------------------------------------------------

    def record_move(self, cells: int, victory: bool) -> None:
        self.moves += 1
        self.cells_travelled += cells
        if victory:
            self.won = True
            self.pause()

    def reset(self) -> None:
        """Put the starting board back and zero the counters."""
        self.board = self.initial.copy()
        self.moves = 0
        self.cells_travelled = 0
        self.won = False
        self._elapsed_banked = 0.0
        self._start_time = time.time()
        self._running = True
