"""Shared fixtures for pmdetect tests."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def write():
    """Create a file (and its parent dirs). Dicts are written as JSON."""

    def _write(path: Path, content="") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, dict):
            content = json.dumps(content)
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def no_ci(monkeypatch):
    monkeypatch.delenv("CI", raising=False)
