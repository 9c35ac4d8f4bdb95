#!/usr/bin/env python3
"""Sliding Box puzzle generator, solver, and game.

Usage::

    python main.py play -s 4            # Rich terminal game
    python main.py single -s 5          # one random solvable board + solution
    python main.py solve "#. X@"        # solve a board given as text rows
    python main.py fill -s 4            # one layout and all its placements
    python main.py range serial 2 3     # enumerate empty layouts
    python main.py stats --iterations 100
"""

import logging
import random
import sys
import time
from enum import StrEnum
from itertools import islice
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from frontend.cli.rich.app import render_board  # noqa: E402
from frontend.cli.stats import StatsCollector  # noqa: E402
from sokoban.engine.gamegenerator import (  # noqa: E402
    GameGenerator,
    empty,
    filled,
    randomized,
    serial,
    solvable_randomized,
    solvable_serial,
)
from sokoban.engine.gamesolver import Solver  # noqa: E402
from sokoban.models.board import Board  # noqa: E402
from sokoban.models.results import ExploreResult  # noqa: E402

console = Console()


class Method(StrEnum):
    serial = "serial"
    random = "random"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def _rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed)


def _print_result(result: ExploreResult) -> None:
    if not result.solvable:
        console.print("[red]Unsolvable.[/red]")
        return
    moves = " ".join(d.value for d in result.solution)
    console.print(
        f"[green]Solvable[/green] in [bold]{result.move_count}[/bold] moves: {moves}"
    )


def _abort(message: str) -> NoReturn:
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(code=1)


# -- CLI ----------------------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding Box puzzle tools.")

SizeOption = typer.Option(4, "-s", "--size", min=2, help="Board size (N×N).")
SeedOption = typer.Option(
    None, "--seed", envvar="SOKOBAN_SEED", help="Random seed for reproducible runs."
)


@app.callback()
def _setup(
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        envvar="SOKOBAN_LOG_LEVEL",
        help="Logging level (debug, info, warning, error).",
    ),
) -> None:
    _configure_logging(log_level)


@app.command()
def play(
    size: int = typer.Option(4, "-s", "--size", min=3, max=8, help="Initial size (3-8)."),
    seed: Optional[int] = SeedOption,
) -> None:
    """Play random solvable boards in the terminal."""
    from frontend.cli.rich.app import run

    run(size=size, seed=seed)


@app.command()
def single(size: int = SizeOption, seed: Optional[int] = SeedOption) -> None:
    """Print one random solvable board and its shortest solution."""
    board = GameGenerator.generate(size, _rng(seed))
    if board is None:
        _abort(f"No playable {size}×{size} board exists.")
    console.print(render_board(board))
    _print_result(Solver.explore_space(board))


@app.command()
def solve(
    board_text: str = typer.Argument(
        ..., help="Board rows separated by spaces or newlines, e.g. '#. X@'."
    ),
) -> None:
    """Solve a board written in text form."""
    try:
        board = Board.from_text(board_text.replace(" ", "\n"))
    except ValueError as exc:
        _abort(str(exc))
    console.print(render_board(board))
    _print_result(Solver.explore_space(board))


@app.command()
def fill(size: int = SizeOption, seed: Optional[int] = SeedOption) -> None:
    """Print one empty layout and all its symmetry-distinct placements."""
    start = time.perf_counter()
    layout = GameGenerator.empty(size, _rng(seed))
    if layout is None:
        _abort(f"No {size}×{size} layout exists.")

    console.rule("EMPTY BOARD")
    console.print(render_board(layout))
    console.rule("FILLED BOARDS")
    for idx, board in enumerate(filled.serial(layout)):
        console.print(f"[dim]-- [{idx} ({time.perf_counter() - start:.3f}s)] --[/dim]")
        console.print(render_board(board))


@app.command("range")
def range_(
    method: Method = typer.Argument(..., help="serial (exhaustive) or random."),
    min_size: int = typer.Argument(..., min=2),
    max_size: int = typer.Argument(..., min=2),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", min=1, help="Stop after this many boards per size."
    ),
    seed: Optional[int] = SeedOption,
) -> None:
    """Enumerate empty layouts for every size in [MIN_SIZE, MAX_SIZE]."""
    rng = _rng(seed)
    start = time.perf_counter()
    for size in range(min_size, max_size + 1):
        console.rule(f"SIZE {size}")
        boards = empty.serial(size) if method == Method.serial else empty.randomized(size, rng)
        for idx, board in enumerate(islice(boards, limit)):
            console.print(f"[dim]-- [{idx} ({time.perf_counter() - start:.3f}s)] --[/dim]")
            console.print(board.render(), highlight=False)


@app.command()
def stats(
    min_size: int = typer.Option(4, "--min-size", min=2),
    max_size: int = typer.Option(7, "--max-size", min=2),
    iterations: int = typer.Option(1000, "--iterations", "-i", min=1),
    seed: Optional[int] = SeedOption,
) -> None:
    """Compare solvability and move counts across the four pipelines."""
    rng = _rng(seed)
    console.print(f"sizes: {min_size} to {max_size}. Iterations: {iterations}.")
    overall = time.perf_counter()

    for size in range(min_size, max_size + 1):
        console.rule(f"SIZE {size:02d} [{time.perf_counter() - overall:.2f}s]")
        phase = time.perf_counter()
        pipelines = [
            ("SERIAL", serial(size)),
            ("RANDOM", randomized(size, rng)),
            ("SOLVABLE SERIAL", solvable_serial(size)),
            ("SOLVABLE RANDOM", solvable_randomized(size, rng)),
        ]
        solved = {name: StatsCollector() for name, _ in pipelines}
        moves = {name: StatsCollector() for name, _ in pipelines}

        for name, boards in pipelines:
            for board in islice(boards, iterations):
                result = Solver.explore_space(board)
                solved[name].observe(float(result.solvable))
                moves[name].observe(result.move_count)

        console.print(f"Duration: {time.perf_counter() - phase:.2f}s")
        for name, _ in pipelines:
            console.print(
                f"[{name:>15}] solved: {solved[name]}; moves: {moves[name]}",
                highlight=False,
                markup=False,
            )


if __name__ == "__main__":
    app()
