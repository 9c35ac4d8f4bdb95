"""Smoke tests for the non-interactive CLI commands."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from frontend.cli.stats import StatsCollector
from main import app

runner = CliRunner()


def test_solve_prints_solution() -> None:
    result = runner.invoke(app, ["solve", "#. X@"])

    assert result.exit_code == 0, result.output
    assert "2 moves" in result.output
    assert "right down" in result.output


def test_solve_reports_unsolvable() -> None:
    result = runner.invoke(app, ["solve", "#X X@"])

    assert result.exit_code == 0, result.output
    assert "Unsolvable" in result.output


def test_solve_rejects_malformed_board() -> None:
    result = runner.invoke(app, ["solve", "#.. X@"])

    assert result.exit_code == 1


@pytest.mark.parametrize(
    "args",
    [
        ["single", "-s", "3", "--seed", "1"],
        ["fill", "-s", "3", "--seed", "4"],
        ["range", "random", "3", "4", "--limit", "3", "--seed", "2"],
        ["stats", "--min-size", "3", "--max-size", "3", "-i", "5", "--seed", "0"],
    ],
    ids=["single", "fill", "range", "stats"],
)
def test_commands_run(args: list[str]) -> None:
    result = runner.invoke(app, args)

    assert result.exit_code == 0, result.output


def test_range_serial_lists_layouts() -> None:
    result = runner.invoke(app, ["range", "serial", "2", "2"])

    assert result.exit_code == 0, result.output
    assert "..\nXX" in result.output
    assert "..\n.X" in result.output


def test_stats_collector() -> None:
    stats = StatsCollector()
    for sample in (3, 1, 2):
        stats.observe(sample)

    assert (stats.min, stats.avg, stats.max, stats.n) == (1, 2.0, 3, 3)
    assert str(stats) == "[1.000; 2.000; 3.000]"
