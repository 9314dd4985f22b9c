"""
FILE: lanes/board/__init__.py
PURPOSE: Interactive keyboard-driven board
EXPORTS:
  - run_board() (from board.main)
DEPENDENCIES:
  - prompt_toolkit (raw keyboard input)
  - rich (live rendering)
  - lanes.core.store (persistence)
NOTES:
  - Entry point for interactive mode
"""

from .main import run_board

__all__ = ["run_board"]
