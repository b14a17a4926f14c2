"""
Tests for the command line entry point.
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main
from main import EXIT_INVALID_INPUT, EXIT_NOT_SOLVED, EXIT_SOLVED


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run in a scratch directory so config.json and solver.log stay local."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_board(directory: Path, cells, taps=None) -> str:
    data = {"cells": [{"x": x, "y": y, "value": v} for (x, y), v in cells.items()]}
    if taps is not None:
        data["taps"] = taps
    path = directory / "board.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_solves_board(workdir, capsys):
    path = write_board(workdir, {(1, 1): 1, (1, 2): 1}, taps=2)

    assert main.main([path]) == EXIT_SOLVED
    out = capsys.readouterr().out
    assert "The board was solved" in out
    assert "000: X = 1 Y = 1" in out


def test_reports_unsolved_board(workdir, capsys):
    path = write_board(workdir, {(0, 0): 4})

    assert main.main([path, "--taps", "1"]) == EXIT_NOT_SOLVED
    assert "NOT solved" in capsys.readouterr().out


def test_all_strategy_lists_every_solution(workdir, capsys):
    path = write_board(workdir, {(1, 1): 1, (1, 2): 1})

    assert main.main([path, "--taps", "2", "--strategy", "all"]) == EXIT_SOLVED
    out = capsys.readouterr().out
    assert "Solution 1:" in out
    assert "Solution 2:" in out


def test_first_tap_option(workdir, capsys):
    path = write_board(workdir, {(1, 1): 1, (1, 2): 1})

    assert main.main([path, "-t", "2", "-s", "all", "-f", "1,2"]) == EXIT_SOLVED
    out = capsys.readouterr().out
    assert "000: X = 1 Y = 2" in out
    assert "Solution 2:" not in out


def test_invalid_input_exit_codes(workdir):
    assert main.main([str(workdir / "missing.json")]) == EXIT_INVALID_INPUT

    path = write_board(workdir, {(1, 1): 1})
    assert main.main([path, "--taps", "-1"]) == EXIT_INVALID_INPUT
    assert main.main([path, "--taps", "1", "--first-tap", "0,0"]) == EXIT_INVALID_INPUT


def test_bad_position_argument(workdir):
    path = write_board(workdir, {(1, 1): 1})
    with pytest.raises(SystemExit):
        main.main([path, "--first-tap", "one"])


def test_save_defaults(workdir):
    path = write_board(workdir, {(1, 1): 1})

    assert main.main([path, "--taps", "2", "--strategy", "all", "--save-defaults"]) == EXIT_SOLVED
    saved = json.loads((workdir / "config.json").read_text(encoding="utf-8"))
    assert saved["strategy_name"] == "all"
    assert saved["max_taps"] == 2


def test_bad_config_values_do_not_crash(workdir, capsys):
    (workdir / "config.json").write_text(json.dumps({"max_taps": "3"}), encoding="utf-8")
    path = write_board(workdir, {(1, 1): 1, (1, 2): 1})

    assert main.main([path]) == EXIT_SOLVED
    assert "The board was solved" in capsys.readouterr().out


def test_help_lists_strategies(capsys):
    with pytest.raises(SystemExit):
        main.parse_args(["--help"])
    out = capsys.readouterr().out
    assert "first: " in out
    assert "all: " in out
