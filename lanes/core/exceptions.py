"""
FILE: lanes/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - LanesError (base exception)
  - ColumnNotFoundError
  - TaskIndexError
  - SaveError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from LanesError for easy catching
  - TaskIndexError is also an IndexError, SaveError is also an OSError
  - Core raises these, the CLI layer catches and displays
"""


class LanesError(Exception):
    """Base exception for all Lanes errors."""
    pass


class ColumnNotFoundError(LanesError):
    """Column id is not one of the board's columns."""

    def __init__(self, column_id: str):
        self.column_id = column_id
        super().__init__(f"Column {column_id!r} not found")


class TaskIndexError(LanesError, IndexError):
    """No task at the given position in a column."""

    def __init__(self, column_id: str, index: int):
        self.column_id = column_id
        self.index = index
        super().__init__(f"No task at index {index} in {column_id}")


class SaveError(LanesError, OSError):
    """Board could not be written to disk."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not save board to {path}: {reason}")
