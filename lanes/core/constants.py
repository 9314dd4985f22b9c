"""
FILE: lanes/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - COLUMNS: Column ids in board order
  - COLUMN_TITLES: User-facing column titles
  - DATA_DIR, DATA_PATH, LOG_PATH: File locations
  - TICK_RATE: Display refresh interval for the board
  - KEY_* / CMD_*: Abstract key names and navigate-mode command characters
DEPENDENCIES:
  - pathlib (stdlib)
NOTES:
  - Single source of truth for column ids and key names
  - Paths are module-level so tests can monkeypatch them
"""

from pathlib import Path


# Column ids (board order: backlog -> in_progress -> done)
COLUMN_BACKLOG = "backlog"
COLUMN_IN_PROGRESS = "in_progress"
COLUMN_DONE = "done"
COLUMNS = (COLUMN_BACKLOG, COLUMN_IN_PROGRESS, COLUMN_DONE)

COLUMN_TITLES = {
    COLUMN_BACKLOG: "Backlog",
    COLUMN_IN_PROGRESS: "In Progress",
    COLUMN_DONE: "Done",
}

# Interaction modes
MODE_NAVIGATE = "navigate"
MODE_EDIT = "edit"

# File locations (cross-platform)
DATA_DIR = Path.home() / ".lanes"
DATA_PATH = DATA_DIR / "tasks.json"
LOG_PATH = DATA_DIR / "lanes.log"

# Seconds between display refresh ticks
TICK_RATE = 0.2

# Abstract key names (printable keys are passed as single characters)
KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_BACKSPACE = "backspace"
KEY_ESCAPE = "escape"
KEY_ENTER = "enter"
KEY_DELETE = "delete"
KEY_INTERRUPT = "interrupt"
KEY_TICK = "tick"

# Navigate-mode command characters
CMD_INSERT = "i"
CMD_QUIT = "q"
CMD_PROMOTE = "k"
CMD_DEMOTE = "j"

HELP_LINE = "<i> to insert, <j, k> to move task, <del> to delete a task and <q> to quit."
