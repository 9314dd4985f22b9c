"""
FILE: lanes/board/view.py
PURPOSE: Read-only projection of the board for rendering
EXPORTS:
  - ColumnView (frozen dataclass)
  - BoardView (frozen dataclass)
DEPENDENCIES:
  - dataclasses, typing (stdlib)
NOTES:
  - Plain data only: renderers never see Board, Task or the controller
  - selected_index is None in edit mode or when the active column is empty
  - edit_buffer is None outside edit mode
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ColumnView:
    """One column as the renderer sees it."""

    column_id: str
    title: str
    tasks: Tuple[str, ...]
    active: bool


@dataclass(frozen=True)
class BoardView:
    """Whole-board snapshot: three columns plus cursor or edit text."""

    columns: Tuple[ColumnView, ...]
    mode: str
    selected_index: Optional[int] = None
    edit_buffer: Optional[str] = None

    @property
    def active_column(self) -> ColumnView:
        for column in self.columns:
            if column.active:
                return column
        raise ValueError("BoardView has no active column")
