"""
FILE: lanes/logging_setup.py
PURPOSE: Logging configuration for the CLI
EXPORTS:
  - setup_logging(log_path, file_level, console_level) -> None
DEPENDENCIES:
  - logging, sys, pathlib (stdlib)
  - lanes.core.constants (LOG_PATH)
NOTES:
  - File handler gets everything from DEBUG up
  - Console handler is optional: the interactive board owns the
    terminal, so it only logs to file
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from .core import constants


LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_path: Optional[Union[str, Path]] = None,
    file_level: int = logging.DEBUG,
    console_level: Optional[int] = None,
) -> None:
    """
    Configure root logging.

    Args:
        log_path: Log file (defaults to ~/.lanes/lanes.log)
        file_level: Minimum level written to the log file
        console_level: If given, also log to stderr from this level up

    Call this once, before the first log record is emitted. If the log
    file cannot be opened, file logging is skipped.
    """
    log_path = Path(log_path) if log_path is not None else constants.LOG_PATH

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if console_level is not None:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(console_level)
        ch.setFormatter(fmt)
        root.addHandler(ch)

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
    except OSError as e:
        if console_level is not None:
            logging.getLogger(__name__).warning("File logging disabled: %s", e)
        return

    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
