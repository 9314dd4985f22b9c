"""
FILE: lanes/board/render.py
PURPOSE: Build rich renderables from a BoardView
EXPORTS:
  - create_board_layout(view) -> Layout
  - create_column_panel(column, selected_index) -> Panel
  - create_status_panel(view) -> Panel
  - create_board_table(view) -> Table
DEPENDENCIES:
  - rich (Layout, Panel, Table, Text, box)
  - lanes.board.view (BoardView, ColumnView)
  - lanes.core.constants (MODE_EDIT, HELP_LINE)
NOTES:
  - Consumes the BoardView only; knows nothing about task movement rules
  - Active column: double border, cyan text
  - Selected row is marked with '-> ' and bold white
  - Bottom panel shows the help line (navigate) or the edit buffer (edit)
"""

from typing import Optional

from rich import box
from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.constants import MODE_EDIT, HELP_LINE
from .view import BoardView, ColumnView


HIGHLIGHT_SYMBOL = "-> "
STATUS_HEIGHT = 3


def create_column_panel(column: ColumnView, selected_index: Optional[int] = None) -> Panel:
    """
    Render one column as a bordered list of tasks.

    Args:
        column: Column to render
        selected_index: Row to highlight (only used for the active column)
    """
    body = Text()
    pad = " " * len(HIGHLIGHT_SYMBOL)

    for i, task_text in enumerate(column.tasks):
        if column.active and i == selected_index:
            body.append(HIGHLIGHT_SYMBOL + task_text, style="bold white")
        else:
            body.append(pad + task_text)
        if i < len(column.tasks) - 1:
            body.append("\n")

    return Panel(
        body,
        title=f" {column.title} ",
        title_align="left",
        box=box.DOUBLE if column.active else box.SQUARE,
        style="cyan" if column.active else "",
        border_style="cyan" if column.active else "white",
    )


def create_status_panel(view: BoardView) -> Panel:
    """Help line in navigate mode, edit buffer plus cursor in edit mode."""
    if view.mode == MODE_EDIT:
        text = Text(view.edit_buffer or "")
        text.append("█", style="blink")
        return Panel(text, title=" New task ", title_align="left", box=box.SQUARE)

    return Panel(Text(HELP_LINE, justify="center", style="dim"), box=box.SQUARE)


def create_board_layout(view: BoardView) -> Layout:
    """Three columns side by side above the status panel."""
    body = Layout(name="body")
    body.split_row(*[
        Layout(create_column_panel(column, view.selected_index), name=column.column_id, ratio=1)
        for column in view.columns
    ])

    layout = Layout()
    layout.split_column(
        body,
        Layout(create_status_panel(view), name="status", size=STATUS_HEIGHT),
    )
    return layout


def create_board_table(view: BoardView) -> Table:
    """
    Render the board as a static table for one-shot printing.

    Each row holds the n-th task of every column; shorter columns are
    padded with blanks.
    """
    table = Table(box=box.SQUARE, expand=True, show_lines=False)
    for column in view.columns:
        table.add_column(f"{column.title} ({len(column.tasks)})", style="cyan", ratio=1)

    rows = max((len(column.tasks) for column in view.columns), default=0)
    for r in range(rows):
        table.add_row(*[
            Text(column.tasks[r]) if r < len(column.tasks) else Text("")
            for column in view.columns
        ])
    return table
