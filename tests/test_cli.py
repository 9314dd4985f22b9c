"""
Tests for the typer CLI.
"""

import io
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

import lanes.board
from lanes import __version__
from lanes.cli import main as cli_main
from lanes.core import constants
from lanes.core.exceptions import SaveError
from lanes.core.store import TaskStore


runner = CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Leave pytest's logging handlers alone."""
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: None)


def test_version():
    result = runner.invoke(cli_main.app, ["version"])

    assert result.exit_code == 0
    assert f"Lanes v{__version__}" in result.stdout


def test_show_prints_saved_board():
    store = TaskStore()
    store.append(constants.COLUMN_BACKLOG, "Write docs")
    store.append(constants.COLUMN_DONE, "Ship it")
    store.save()

    result = runner.invoke(cli_main.app, ["show"])

    assert result.exit_code == 0
    assert "Write docs" in result.stdout
    assert "Ship it" in result.stdout
    assert "Backlog (1)" in result.stdout


def test_show_without_board_file():
    result = runner.invoke(cli_main.app, ["show"])

    assert result.exit_code == 0
    assert "Done (0)" in result.stdout


def test_default_command_runs_board(monkeypatch):
    calls = []
    monkeypatch.setattr(lanes.board, "run_board", lambda **kwargs: calls.append(kwargs))

    result = runner.invoke(cli_main.app, [])

    assert result.exit_code == 0
    assert len(calls) == 1


def test_board_command_runs_board(monkeypatch):
    calls = []
    monkeypatch.setattr(lanes.board, "run_board", lambda **kwargs: calls.append(kwargs))

    result = runner.invoke(cli_main.app, ["board"])

    assert result.exit_code == 0
    assert len(calls) == 1


@pytest.fixture
def stderr(monkeypatch):
    """Capture what the CLI prints to its stderr console."""
    buffer = io.StringIO()
    monkeypatch.setattr(cli_main, "error_console", Console(file=buffer, width=200, color_system=None))
    return buffer


def test_save_failure_exits_with_error(monkeypatch, stderr):
    def failing_board(**kwargs):
        raise SaveError(constants.DATA_PATH, "Permission denied")

    monkeypatch.setattr(lanes.board, "run_board", failing_board)

    result = runner.invoke(cli_main.app, ["board"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, SaveError)
    assert "Could not save board: Permission denied" in stderr.getvalue()
    assert "Could not save board" not in result.stdout


def test_save_failure_message_is_not_markup(monkeypatch, stderr):
    """Brackets in the path or OS message are printed as-is."""
    def failing_board(**kwargs):
        raise SaveError(Path("/data/[work]/tasks.json"), "bad [/x] reason")

    monkeypatch.setattr(lanes.board, "run_board", failing_board)

    result = runner.invoke(cli_main.app, ["board"])

    assert result.exit_code == 1
    assert "Could not save board: bad [/x] reason" in stderr.getvalue()
    assert "/data/[work]/tasks.json" in stderr.getvalue()
