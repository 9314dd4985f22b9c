"""
FILE: lanes/board/controller.py
PURPOSE: Keyboard-driven state machine for the kanban board
EXPORTS:
  - ControllerState (dataclass)
  - BoardController (class)
    - handle_key(key) -> bool
    - quit() -> bool
    - view() -> BoardView
DEPENDENCIES:
  - lanes.core.store (TaskStore)
  - lanes.core.constants (columns, modes, key names, command chars)
  - lanes.board.view (BoardView, ColumnView)
NOTES:
  - Two modes: navigate (initial) and edit
  - Keys that mean nothing in the current mode are ignored
  - handle_key() returns False once the board has been saved for quitting
  - Cursor stays within [0, len-1] of the active column (0 when empty)
  - Empty edit buffers are not committed
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.store import TaskStore
from ..core.constants import (
    COLUMNS,
    COLUMN_BACKLOG,
    COLUMN_TITLES,
    MODE_NAVIGATE,
    MODE_EDIT,
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_BACKSPACE,
    KEY_ESCAPE,
    KEY_ENTER,
    KEY_DELETE,
    CMD_INSERT,
    CMD_QUIT,
    CMD_PROMOTE,
    CMD_DEMOTE,
)
from .keys import is_printable
from .view import BoardView, ColumnView


logger = logging.getLogger(__name__)


@dataclass
class ControllerState:
    """
    Interaction state of the board.

    Attributes:
        mode: 'navigate' or 'edit'
        active_column: Column id the cursor is in
        selected_index: Cursor row within the active column
        edit_buffer: Text being typed (edit mode only)
    """
    mode: str = MODE_NAVIGATE
    active_column: str = COLUMN_BACKLOG
    selected_index: int = 0
    edit_buffer: str = ""


class BoardController:
    """
    Applies abstract key events to a TaskStore and the controller state.

    The controller is the only thing that mutates the store while the
    board is running; one key is processed to completion at a time.
    """

    def __init__(self, store: TaskStore, state: Optional[ControllerState] = None):
        self.store = store
        self.state = state if state is not None else ControllerState()
        self._navigate_handlers = {
            KEY_UP: self._select_previous,
            KEY_DOWN: self._select_next,
            KEY_LEFT: self._column_left,
            KEY_RIGHT: self._column_right,
            KEY_DELETE: self._delete_selected,
            CMD_PROMOTE: self._promote_selected,
            CMD_DEMOTE: self._demote_selected,
            CMD_INSERT: self._enter_edit,
        }

    # -------------------- queries --------------------

    def _active_tasks(self):
        return self.store.board.column(self.state.active_column)

    def _column_position(self) -> int:
        return COLUMNS.index(self.state.active_column)

    def view(self) -> BoardView:
        """Build the read-only projection handed to the renderer."""
        state = self.state
        columns = tuple(
            ColumnView(
                column_id=column_id,
                title=COLUMN_TITLES[column_id],
                tasks=tuple(self.store.board.texts(column_id)),
                active=column_id == state.active_column,
            )
            for column_id in COLUMNS
        )

        if state.mode == MODE_EDIT:
            return BoardView(columns=columns, mode=state.mode, edit_buffer=state.edit_buffer)

        selected = state.selected_index if self._active_tasks() else None
        return BoardView(columns=columns, mode=state.mode, selected_index=selected)

    # -------------------- dispatch --------------------

    def handle_key(self, key: str) -> bool:
        """
        Apply one key event.

        Args:
            key: Abstract key name ('up', 'enter', ...) or a single character

        Returns:
            False if the board was saved and the program should exit,
            True otherwise

        Raises:
            SaveError: If quitting and the board cannot be written
        """
        if self.state.mode == MODE_EDIT:
            self._handle_edit_key(key)
            return True

        if key == CMD_QUIT:
            return self.quit()

        handler = self._navigate_handlers.get(key)
        if handler:
            handler()
        return True

    def quit(self) -> bool:
        """
        Save the board for exit.

        Any uncommitted edit text is dropped. Always returns False so
        callers can use it as the loop condition.
        """
        self.state.mode = MODE_NAVIGATE
        self.state.edit_buffer = ""
        self.store.save()
        logger.info("Board saved on quit")
        return False

    # -------------------- navigate mode --------------------

    def _select_previous(self) -> None:
        if self.state.selected_index > 0:
            self.state.selected_index -= 1

    def _select_next(self) -> None:
        if self.state.selected_index < len(self._active_tasks()) - 1:
            self.state.selected_index += 1

    def _column_left(self) -> None:
        position = self._column_position()
        if position > 0:
            self.state.active_column = COLUMNS[position - 1]
            self.state.selected_index = 0

    def _column_right(self) -> None:
        position = self._column_position()
        if position < len(COLUMNS) - 1:
            self.state.active_column = COLUMNS[position + 1]
            self.state.selected_index = 0

    def _clamp_selection(self) -> None:
        last = len(self._active_tasks()) - 1
        self.state.selected_index = max(0, min(self.state.selected_index, last))

    def _shift_selected(self, offset: int) -> None:
        """Move the selected task offset columns along the board, if possible."""
        if not self._active_tasks():
            return
        target = self._column_position() + offset
        if target < 0 or target >= len(COLUMNS):
            return
        self.store.move(self.state.active_column, self.state.selected_index, COLUMNS[target])
        self._clamp_selection()

    def _promote_selected(self) -> None:
        self._shift_selected(1)

    def _demote_selected(self) -> None:
        self._shift_selected(-1)

    def _delete_selected(self) -> None:
        if not self._active_tasks():
            return
        self.store.remove(self.state.active_column, self.state.selected_index)
        if self.state.selected_index > 0:
            self.state.selected_index -= 1

    def _enter_edit(self) -> None:
        self.state.mode = MODE_EDIT
        self.state.edit_buffer = ""

    # -------------------- edit mode --------------------

    def _handle_edit_key(self, key: str) -> None:
        state = self.state
        if key == KEY_ENTER:
            self._commit_edit()
        elif key == KEY_ESCAPE:
            state.edit_buffer = ""
            state.mode = MODE_NAVIGATE
        elif key == KEY_BACKSPACE:
            state.edit_buffer = state.edit_buffer[:-1]
        elif is_printable(key):
            state.edit_buffer += key

    def _commit_edit(self) -> None:
        text = self.state.edit_buffer
        self.state.edit_buffer = ""
        self.state.mode = MODE_NAVIGATE
        if not text:
            return
        self.store.append(self.state.active_column, text)
        self._clamp_selection()
