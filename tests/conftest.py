"""Shared pytest configuration and fixtures for tests."""

import sys
import io
from pathlib import Path

import pytest

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lanes.core import constants
from lanes.core.store import TaskStore


@pytest.fixture(autouse=True)
def temp_data_dir(monkeypatch, tmp_path):
    """Keep every test away from the real ~/.lanes directory."""
    data_dir = tmp_path / "lanes"
    monkeypatch.setattr(constants, "DATA_DIR", data_dir)
    monkeypatch.setattr(constants, "DATA_PATH", data_dir / "tasks.json")
    monkeypatch.setattr(constants, "LOG_PATH", data_dir / "lanes.log")
    yield data_dir


@pytest.fixture
def store(tmp_path):
    """Empty store backed by a file in a temp directory."""
    return TaskStore(tmp_path / "board.json")
