"""
FILE: lanes/board/keys.py
PURPOSE: Translate prompt_toolkit key presses into abstract key names
EXPORTS:
  - translate(key_press) -> str | None
  - expand(key_press) -> list[str]
  - is_printable(key) -> bool
DEPENDENCIES:
  - prompt_toolkit (KeyPress, Keys)
  - lanes.core.constants (KEY_* names)
NOTES:
  - Named keys become strings like 'up' or 'enter'
  - Printable keys become their single character
  - Bracketed paste expands to one key per printable character
  - Anything else (function keys, mouse, etc.) is dropped
"""

from typing import List, Optional

from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys

from ..core.constants import (
    KEY_UP,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_BACKSPACE,
    KEY_ESCAPE,
    KEY_ENTER,
    KEY_DELETE,
    KEY_INTERRUPT,
)


# Keys.Backspace is an alias of ControlH, Keys.Enter of ControlM
_NAMED_KEYS = {
    Keys.Up: KEY_UP,
    Keys.Down: KEY_DOWN,
    Keys.Left: KEY_LEFT,
    Keys.Right: KEY_RIGHT,
    Keys.ControlH: KEY_BACKSPACE,
    Keys.Escape: KEY_ESCAPE,
    Keys.ControlM: KEY_ENTER,
    Keys.ControlJ: KEY_ENTER,
    Keys.Delete: KEY_DELETE,
    Keys.ControlC: KEY_INTERRUPT,
}


def is_printable(key: str) -> bool:
    """True for a single printable character (space included)."""
    return len(key) == 1 and key.isprintable()


def translate(key_press: KeyPress) -> Optional[str]:
    """
    Convert a prompt_toolkit KeyPress into an abstract key.

    Args:
        key_press: KeyPress as produced by Input.read_keys()

    Returns:
        Key name, single printable character, or None if the key
        has no meaning on the board
    """
    key = key_press.key
    if isinstance(key, Keys):
        return _NAMED_KEYS.get(key)

    if is_printable(key):
        return key

    return None


def expand(key_press: KeyPress) -> List[str]:
    """
    Convert a KeyPress into the abstract keys it stands for.

    A bracketed paste carries its whole text in one KeyPress; it becomes
    one key per printable character (newlines and tabs are dropped).
    Every other KeyPress yields at most one key.
    """
    if key_press.key == Keys.BracketedPaste:
        return [ch for ch in key_press.data if is_printable(ch)]

    key = translate(key_press)
    return [key] if key is not None else []
