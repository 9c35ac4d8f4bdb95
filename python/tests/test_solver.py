"""Solver test suite.

Known boards are written in text form. Every solution the solver returns is
replayed through the real game engine to verify it wins, and its length is
checked against an independent breadth-first search over piece positions.
"""

from __future__ import annotations

import random
from collections import deque
from itertools import islice

import pytest

from sokoban.engine.gamegenerator import solvable_randomized
from sokoban.engine.gameplay.game import GamePlay
from sokoban.engine.gameplay.moves import move_piece
from sokoban.engine.gamesolver.solver import Solver
from sokoban.models.board import Board, Cell, Direction
from sokoban.models.results import ExploreResult

# -- fixtures -----------------------------------------------------------------

SOLVABLE: list[tuple[str, str, int]] = [
    ("adjacent_goal", "#@\nXX", 1),
    ("right_then_down", "#.\nX@", 2),
    ("left_then_down", ".#\n@X", 2),
    ("around_pillar", "#..\n.X.\n..@", 2),
]

UNSOLVABLE: list[tuple[str, str]] = [
    ("boxed_in", "#X\nX@"),
    ("goal_in_open_centre", "#..\n.@.\n..."),
    ("goal_behind_wall", "#.X\n..X\nXX@"),
]


def _ids(case: tuple) -> str:
    return case[0]


# -- helpers ------------------------------------------------------------------


def _shortest_by_positions(board: Board) -> int | None:
    """Reference BFS keyed on piece position alone."""
    start = board.find(Cell.PIECE)
    assert start is not None
    goal = board.find(Cell.GOAL)
    assert goal is not None

    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        pos, dist = queue.popleft()
        for direction in Direction:
            probe = board.copy()
            probe.set(start.x, start.y, Cell.FLOOR)
            probe.set(pos.x, pos.y, Cell.PIECE)
            result = move_piece(probe, direction)
            assert result is not None
            if result.victory:
                return dist + 1
            if result.position not in seen:
                seen.add(result.position)
                queue.append((result.position, dist + 1))
    return None


def _assert_solve(board: Board) -> ExploreResult:
    """Solve *board* and replay the solution through ``GamePlay``."""
    result = Solver.explore_space(board)

    assert result.solvable
    assert result.move_count == len(result.solution) > 0
    assert all(isinstance(m, Direction) for m in result.solution)

    game = GamePlay.from_board(board.copy())
    for i, direction in enumerate(result.solution):
        assert not game.is_won, f"Won early at move {i}"
        outcome = game.move(direction)
        assert outcome is not None and outcome.cells_moved > 0, (
            f"Move {i} ({direction.value}) did not travel"
        )

    assert game.is_won, f"Board not solved after {result.move_count} moves"
    assert game.state.moves == result.move_count
    return result


# -- tests --------------------------------------------------------------------


def test_two_by_two_scenario() -> None:
    board = Board.from_text("#.\nX@")

    result = Solver.explore_space(board)

    assert result == ExploreResult(
        solvable=True, move_count=2, solution=[Direction.RIGHT, Direction.DOWN]
    )


@pytest.mark.parametrize("case", SOLVABLE, ids=_ids)
def test_solves_known_boards(case: tuple[str, str, int]) -> None:
    _, text, moves = case
    result = _assert_solve(Board.from_text(text))
    assert result.move_count == moves


@pytest.mark.parametrize("case", UNSOLVABLE, ids=_ids)
def test_unsolvable_boards_report_default(case: tuple[str, str]) -> None:
    _, text = case
    result = Solver.explore_space(Board.from_text(text))

    assert result == ExploreResult()
    assert not result.solvable
    assert result.move_count == 0
    assert result.solution == []


def test_board_without_piece_is_unsolvable() -> None:
    assert Solver.explore_space(Board.from_text("..\n.@")) == ExploreResult()


def test_input_board_is_not_modified() -> None:
    board = Board.from_text("#..\n.X.\n..@")
    before = board.copy()

    Solver.explore_space(board)

    assert board == before


def test_hint_and_is_solvable() -> None:
    board = Board.from_text("#.\nX@")

    assert Solver.hint(board) == Direction.RIGHT
    assert Solver.is_solvable(board)
    assert Solver.hint(Board.from_text("#X\nX@")) is None
    assert Solver.solve(Board.from_text("#X\nX@")) == []


@pytest.mark.parametrize("size", [3, 4, 5])
def test_random_boards_get_shortest_solutions(size: int) -> None:
    rng = random.Random(size * 101)
    for board in islice(solvable_randomized(size, rng), 8):
        result = _assert_solve(board)
        assert result.move_count == _shortest_by_positions(board)
