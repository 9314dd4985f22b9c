"""
FILE: lanes/core/store.py
PURPOSE: Task collection manager and JSON persistence
EXPORTS:
  - TaskStore (class)
    - append(column, text) -> Task
    - remove(column, index) -> Task
    - move(src_column, index, dst_column) -> Task
    - load() -> Board
    - save(board) -> None
DEPENDENCIES:
  - json, os, tempfile, logging, pathlib (stdlib)
  - lanes.core.models (Task, Board)
  - lanes.core.exceptions (TaskIndexError, SaveError)
NOTES:
  - Board file stored at ~/.lanes/tasks.json by default
  - load() never raises: missing or corrupt file -> empty board
  - save() writes a temp file then renames it over the destination
  - Returns domain objects (Task, Board), never raw dicts
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from . import constants
from .models import Task, Board
from .exceptions import TaskIndexError, SaveError


logger = logging.getLogger(__name__)


class TaskStore:
    """
    Owns the board's three task lists and their file on disk.

    All mutation of the board goes through this class so that every task
    stays in exactly one column.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None, board: Optional[Board] = None):
        self.path = Path(path) if path is not None else constants.DATA_PATH
        self.board = board if board is not None else Board()

    # -------------------- task operations --------------------

    def append(self, column: str, text: str) -> Task:
        """
        Add a new task at the end of a column.

        Args:
            column: Column id to append to
            text: Task text (may be any string)

        Returns:
            The newly created Task
        """
        task = Task(text=text, column=column)
        self.board.column(column).append(task)
        logger.debug("Appended task to %s (now %d tasks)", column, len(self.board.column(column)))
        return task

    def remove(self, column: str, index: int) -> Task:
        """
        Remove and return the task at index in column.

        Raises:
            TaskIndexError: If there is no task at that position
        """
        tasks = self.board.column(column)
        if index < 0 or index >= len(tasks):
            raise TaskIndexError(column, index)
        task = tasks.pop(index)
        logger.debug("Removed task %d from %s", index, column)
        return task

    def move(self, src_column: str, index: int, dst_column: str) -> Task:
        """
        Move a task to the end of another column.

        Args:
            src_column: Column the task is in
            index: Position of the task in src_column
            dst_column: Column to append the task to

        Returns:
            The moved Task, with its column tag updated

        Raises:
            TaskIndexError: If there is no task at that position
        """
        # Validate destination before touching the source list
        destination = self.board.column(dst_column)
        task = self.remove(src_column, index)
        task.column = dst_column
        destination.append(task)
        logger.debug("Moved task from %s[%d] to %s", src_column, index, dst_column)
        return task

    # -------------------- persistence --------------------

    def load(self) -> Board:
        """
        Read the board file and make it the current board.

        Returns:
            The loaded Board, or an empty Board if the file is missing
            or cannot be parsed
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            board = Board.from_dict(data)
        except FileNotFoundError:
            logger.info("No board file at %s, starting empty", self.path)
            self.board = Board()
            return self.board
        except (OSError, UnicodeDecodeError, ValueError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError; deep nesting hits RecursionError
            logger.warning("Could not read board file %s (%s), starting empty", self.path, e)
            board = Board()

        logger.info("Loaded board from %s (%s)", self.path, board)
        self.board = board
        return board

    def save(self, board: Optional[Board] = None) -> None:
        """
        Write the board to disk.

        Args:
            board: Board to write (defaults to the store's current board)

        Raises:
            SaveError: If the directory or file cannot be created or written
        """
        if board is None:
            board = self.board

        payload = json.dumps(board.to_dict(), indent=2, ensure_ascii=False)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error("Saving board to %s failed: %s", self.path, e)
            raise SaveError(self.path, e.strerror or str(e)) from e

        logger.info("Saved board to %s (%s)", self.path, board)
