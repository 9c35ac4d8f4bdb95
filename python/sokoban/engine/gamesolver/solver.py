"""Breadth-first solver for single-box boards."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sokoban.engine.gameplay.moves import move_piece
from sokoban.models.board import Board, Cell, Direction
from sokoban.models.results import ExploreResult

logger = logging.getLogger(__name__)

SEARCH_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


@dataclass
class _SearchNode:
    board: Board
    reached_by: Direction | None = None
    parent: int | None = None


class _SearchTree:
    """Arena of search nodes; parents are referenced by index."""

    def __init__(self, root: Board) -> None:
        self.nodes = [_SearchNode(board=root)]
        self._keys = {root.key()}

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, idx: int) -> _SearchNode:
        return self.nodes[idx]

    def __contains__(self, board: Board) -> bool:
        return board.key() in self._keys

    def push(self, node: _SearchNode) -> int:
        self.nodes.append(node)
        self._keys.add(node.board.key())
        return len(self.nodes) - 1

    def trace_moves(self, idx: int) -> list[Direction]:
        """Directions leading from the root to node *idx*."""
        moves: list[Direction] = []
        node = self.nodes[idx]
        while node.reached_by is not None and node.parent is not None:
            moves.append(node.reached_by)
            node = self.nodes[node.parent]
        moves.reverse()
        return moves


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def explore_space(board: Board) -> ExploreResult:
        """Search every distinct reachable board until the goal is hit.

        Boards are expanded in insertion order, so the first winning move
        found ends a shortest solution. *board* is not modified.
        """
        if board.find(Cell.PIECE) is None:
            return ExploreResult()

        tree = _SearchTree(board.copy())
        idx = 0

        while idx < len(tree):
            node = tree[idx]
            for direction in SEARCH_ORDER:
                if direction == node.reached_by:
                    continue

                candidate = node.board.copy()
                result = move_piece(candidate, direction)
                if result is None or result.cells_moved == 0 or candidate in tree:
                    continue

                new_idx = tree.push(
                    _SearchNode(board=candidate, reached_by=direction, parent=idx)
                )
                if result.victory:
                    solution = tree.trace_moves(new_idx)
                    logger.debug(
                        "Solved in %d moves after %d states", len(solution), len(tree)
                    )
                    return ExploreResult(
                        solvable=True, move_count=len(solution), solution=solution
                    )
            idx += 1

        logger.debug("Unsolvable: exhausted %d states", len(tree))
        return ExploreResult()

    @staticmethod
    def solve(board: Board) -> list[Direction]:
        """Return a shortest move sequence for *board*, or ``[]`` if unsolvable."""
        return Solver.explore_space(board).solution

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the first move of a shortest solution, or ``None``."""
        moves = Solver.solve(board)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        return Solver.explore_space(board).solvable
