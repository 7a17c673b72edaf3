"""Root test configuration: session-level cleanup and environment isolation"""

import os
import shutil
from pathlib import Path

import pytest


_PROJECT_ROOT = Path(__file__).parent.parent

_CLEANUP_DIRS = [".mdblog", "dist"]


@pytest.fixture(scope="session", autouse=True)
def cleanup_artifacts():
    """Remove state and output directories created during the test session."""
    yield
    for name in _CLEANUP_DIRS:
        p = _PROJECT_ROOT / name
        if p.exists():
            shutil.rmtree(p)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MDBLOG_* variables from the outer environment out of every test."""
    for name in list(os.environ):
        if name.startswith("MDBLOG_"):
            monkeypatch.delenv(name)
