import sys
from pathlib import Path

import pytest

# This file lives at <project_root>/tests/conftest.py
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = str(PROJECT_ROOT / "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from cfgkit.logging import Logger

@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch) -> Path:
    # keep component logs out of the working directory
    path = tmp_path / "logs"
    monkeypatch.setattr(Logger, "log_dir", str(path))
    monkeypatch.setattr(Logger, "default_level", "info")
    return path
