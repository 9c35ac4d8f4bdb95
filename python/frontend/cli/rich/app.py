"""Rich terminal frontend: coloured boards, panels, and the play loop.

Includes a small menu for choosing the board size, then plays random
solvable boards with hint and auto-solve available.
"""

from __future__ import annotations

import random
import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from frontend.cli.input_handler import Action, get_key, get_key_timeout
from sokoban.engine.gameplay.game import GamePlay
from sokoban.engine.gamesolver import Solver
from sokoban.models.board import Board, Cell, Tile, Zone, symbol

console = Console()

MIN_SIZE = 3
MAX_SIZE = 8

_STYLES: dict[Cell, str] = {
    Cell.FLOOR: "grey42",
    Cell.WALL: "bold grey70 on grey23",
    Cell.PIECE: "bold cyan",
    Cell.GOAL: "bold magenta",
}


# -- board rendering ----------------------------------------------------------


def cell_markup(tile: Tile) -> str:
    style = "bold yellow" if isinstance(tile, Zone) else _STYLES[tile]
    return f"[{style}]{symbol(tile)}[/{style}]"


def render_board(board: Board) -> Table:
    """Return a Rich Table drawing *board* one cell per column."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=1, justify="center")
    for row in board.cells:
        table.add_row(*(cell_markup(tile) for tile in row))
    return table


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    hint = Solver.hint(game.state.board)
    if hint is None:
        return "[red]No solution from here, press R to restart.[/red]"
    game.move(hint)
    return f"[cyan]Hint:[/cyan] moved [bold]{hint.value}[/bold]"


def _auto_solve(game: GamePlay) -> str:
    moves = Solver.solve(game.state.board)
    if not moves:
        return "[red]No solution from here, press R to restart.[/red]"

    for i, direction in enumerate(moves):
        game.move(direction)
        console.clear()

        progress = Text()
        progress.append(f"  Solving… move {i + 1}/{len(moves)} ", style="bold cyan")
        progress.append(f"({direction.value})", style="dim")

        panel = Panel(
            Align.center(render_board(game.state.board)),
            title=f"[bold cyan]Auto-Solve  {game.size}×{game.size}[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(progress))
        sys.stdout.flush()
        time.sleep(0.25)

    return f"[bold green]Solved in {len(moves)} moves![/bold green]"


# -- screens ------------------------------------------------------------------


def _draw_menu(sel_size: int) -> None:
    console.clear()

    sizes = Text()
    for s in range(MIN_SIZE, MAX_SIZE + 1):
        if s > MIN_SIZE:
            sizes.append("  ")
        style = "bold green on #313244" if s == sel_size else "dim"
        sizes.append(f" {s}×{s} ", style=style)

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(Text("  ← →  change size", style="dim")),
        Text(""),
        Align.center(opts),
        Text(""),
    )
    console.print()
    console.print(
        Align.center(
            Panel(
                body,
                title="[bold]S L I D I N G   B O X[/bold]",
                border_style="bright_blue",
                padding=(1, 4),
            )
        )
    )


def _stats_text(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Cells: ", style="dim")
    stats.append(str(game.state.cells_travelled), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")
    return stats


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    controls = Text()
    for key, label in (
        ("↑↓←→/WASD", "move"),
        ("H", "hint"),
        ("V", "solve"),
        ("R", "restart"),
        ("N", "new"),
        ("Q", "back"),
    ):
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f" {label} ", style="dim")

    legend = Text()
    legend.append("#", style="bold cyan")
    legend.append(" box   ", style="dim")
    legend.append("@", style="bold magenta")
    legend.append(" goal", style="dim")

    panel = Panel(
        Group(Align.center(render_board(game.state.board)), Align.center(legend)),
        title=f"[bold cyan]Sliding Box  {game.size}×{game.size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    # Saved cursor lets _update_time() repaint just the stats line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats_text(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _update_time(game: GamePlay) -> None:
    """Overwrite the stats line in place, bypassing Rich to avoid flicker."""
    plain = _stats_text(game).plain
    pad = max(0, (console.width - len(plain)) // 2)
    sys.stdout.write(f"\033[u\033[K{' ' * pad}\033[33;1m{plain}\033[0m")
    sys.stdout.flush()


def _draw_win(game: GamePlay) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("BOX ON GOAL!", style="bold green")
    congrats.append("  ★\n", style="bold yellow")

    optimal = Solver.explore_space(game.state.initial).move_count
    best = Text(f"  Shortest solution: {optimal} moves", style="dim")

    panel = Panel(
        Group(
            Align.center(render_board(game.state.board)),
            Align.center(congrats),
            Align.center(_stats_text(game)),
            Align.center(best),
        ),
        title=f"[bold green]Sliding Box  {game.size}×{game.size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press N for a new board, Q to go back.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _play_game(size: int, rng: random.Random) -> None:
    game = GamePlay(size, rng)
    status = ""

    while True:
        if game.is_won:
            _draw_win(game)
            action = get_key()
            if action == Action.NEW:
                game = GamePlay(size, rng)
            elif action == Action.RESTART:
                game.restart()
            elif action == Action.QUIT:
                return
            continue

        _draw_game(game, status)
        status = ""

        # Poll so the clock keeps ticking while idle.
        while (action := get_key_timeout(0.5)) is None:
            _update_time(game)

        if action.direction is not None:
            result = game.move(action.direction)
            if result is not None and result.cells_moved == 0:
                status = "[dim]Blocked.[/dim]"
        elif action == Action.HINT:
            status = _apply_hint(game)
        elif action == Action.SOLVE:
            status = _auto_solve(game)
        elif action == Action.RESTART:
            game.restart()
        elif action == Action.NEW:
            game = GamePlay(size, rng)
        elif action == Action.QUIT:
            return


def _menu_loop(sel_size: int, rng: random.Random) -> None:
    while True:
        _draw_menu(sel_size)
        action = get_key()

        if action == Action.QUIT:
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        if action == Action.LEFT:
            sel_size = max(MIN_SIZE, sel_size - 1)
        elif action == Action.RIGHT:
            sel_size = min(MAX_SIZE, sel_size + 1)
        elif action == Action.ENTER:
            _play_game(sel_size, rng)


# -- public entry point -------------------------------------------------------


def run(size: int = 4, seed: int | None = None) -> None:
    """Launch the Rich game with its size menu."""
    _menu_loop(min(max(size, MIN_SIZE), MAX_SIZE), random.Random(seed))
