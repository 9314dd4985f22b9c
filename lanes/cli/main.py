"""
FILE: lanes/cli/main.py
PURPOSE: Typer-based CLI entry point
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - board() - Launch the interactive board (default)
  - show() - Print the board once as a table
  - version() - Show version
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output)
  - lanes.board (interactive mode)
  - lanes.core.store (TaskStore)
  - lanes.core.exceptions (error handling)
NOTES:
  - Running 'lanes' with no command launches the board
  - Error messages go to stderr
  - Exit codes: 0=success, 1=error
  - A failed save on quit is fatal: the in-memory board is lost
"""

import logging
import sys

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

import typer
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..core.store import TaskStore
from ..core.exceptions import LanesError, SaveError
from ..logging_setup import setup_logging


# Typer app setup
app = typer.Typer(
    name="lanes",
    help="Three-column kanban board for the terminal",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _run_board() -> None:
    # Import here to avoid loading terminal input for one-shot commands
    from ..board import run_board

    setup_logging()
    try:
        run_board(console=console)
    except SaveError as e:
        logger.error("Board lost: %s", e)
        error_console.print(f"[red]Could not save board:[/red] {escape(str(e.reason))}")
        error_console.print(f"[dim]Changes from this session were not written to {escape(str(e.path))}[/dim]")
        raise typer.Exit(1)
    except LanesError as e:
        logger.error("Board failed: %s", e)
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.callback(invoke_without_command=True)
def default_command(ctx: typer.Context):
    """
    Default callback - launches the board when no command is specified.

    If a subcommand is invoked, this does nothing.
    """
    if ctx.invoked_subcommand is None:
        _run_board()


@app.command()
def board():
    """
    Launch the interactive board.

    Keys:
    - arrows: move between tasks and columns
    - i: type a new task (Enter to add, Esc to cancel)
    - k / j: move task to the next / previous column
    - Del: delete task
    - q: save and quit
    """
    _run_board()


@app.command()
def show():
    """Print the saved board once, without entering interactive mode."""
    from ..board.controller import BoardController
    from ..board.render import create_board_table

    setup_logging(console_level=logging.ERROR)
    store = TaskStore()
    store.load()
    console.print(create_board_table(BoardController(store).view()))


@app.command()
def version():
    """Show Lanes version."""
    console.print(f"Lanes v{__version__}")


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
