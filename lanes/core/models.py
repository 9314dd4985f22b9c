"""
FILE: lanes/core/models.py
PURPOSE: Domain models for tasks and the board
EXPORTS:
  - Task (dataclass)
  - Board (dataclass)
DEPENDENCIES:
  - dataclasses (stdlib)
  - typing (stdlib)
  - lanes.core.constants (COLUMNS)
  - lanes.core.exceptions (ColumnNotFoundError)
NOTES:
  - Task identity is positional (index within its column)
  - Board keeps one ordered list per column, insertion order preserved
  - to_dict()/from_dict() convert to and from the persisted document
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from .constants import COLUMNS
from .exceptions import ColumnNotFoundError


@dataclass
class Task:
    """A short free-text task living in one column."""

    text: str
    column: str

    def to_record(self) -> Dict[str, str]:
        """Serialize task to its persisted record."""
        return {"status": self.column, "text": self.text}


def _empty_columns() -> Dict[str, List[Task]]:
    return {column_id: [] for column_id in COLUMNS}


@dataclass
class Board:
    """Three ordered task lists, one per column."""

    columns: Dict[str, List[Task]] = field(default_factory=_empty_columns)

    def column(self, column_id: str) -> List[Task]:
        """
        Return the live task list for a column.

        Raises:
            ColumnNotFoundError: If column_id is not a board column
        """
        try:
            return self.columns[column_id]
        except KeyError:
            raise ColumnNotFoundError(column_id) from None

    def texts(self, column_id: str) -> List[str]:
        return [task.text for task in self.column(column_id)]

    def is_empty(self) -> bool:
        return not any(self.columns.values())

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        """Serialize board to the persisted document shape."""
        return {
            column_id: [task.to_record() for task in self.columns[column_id]]
            for column_id in COLUMNS
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Board":
        """
        Build a board from a persisted document.

        The array a record appears in decides its column. Missing arrays
        load as empty columns.

        Raises:
            ValueError: If the document or one of its records has the wrong shape
        """
        if not isinstance(data, Mapping):
            raise ValueError("Board document must be an object")

        board = cls()
        for column_id in COLUMNS:
            records = data.get(column_id, [])
            if not isinstance(records, list):
                raise ValueError(f"Column {column_id!r} must be an array")
            for record in records:
                if not isinstance(record, Mapping) or not isinstance(record.get("text"), str):
                    raise ValueError(f"Malformed task record in {column_id!r}: {record!r}")
                board.columns[column_id].append(Task(text=record["text"], column=column_id))
        return board

    def __str__(self) -> str:
        return ", ".join(f"{column_id}: {len(self.columns[column_id])} tasks" for column_id in COLUMNS)
