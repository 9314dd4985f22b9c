"""
Tests for logging configuration.
"""

import logging

import pytest

from lanes.logging_setup import setup_logging


@pytest.fixture
def root_handlers():
    """Restore the root logger after setup_logging replaces its handlers."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)


def test_file_logging_writes_to_default_path(root_handlers, temp_data_dir):
    setup_logging()
    logging.getLogger("lanes.test").info("hello log")
    for h in root_handlers.handlers:
        h.flush()

    log_file = temp_data_dir / "lanes.log"
    assert "INFO lanes.test: hello log" in log_file.read_text(encoding="utf-8")


def test_console_handler_only_when_requested(root_handlers, tmp_path):
    setup_logging(log_path=tmp_path / "a.log")
    assert [type(h) for h in root_handlers.handlers] == [logging.FileHandler]

    setup_logging(log_path=tmp_path / "b.log", console_level=logging.ERROR)
    kinds = sorted(type(h).__name__ for h in root_handlers.handlers)
    assert kinds == ["FileHandler", "StreamHandler"]


def test_unwritable_log_path_skips_file_handler(root_handlers, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("file")

    setup_logging(log_path=blocker / "lanes.log")

    assert root_handlers.handlers == []
