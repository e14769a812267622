"""Shared fixtures: a small directory tree to browse."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """A fake home directory holding a ``docs`` subdirectory and ``a.txt``."""
    user = tmp_path / "user"
    (user / "docs").mkdir(parents=True)
    (user / "a.txt").write_text("hello")
    return user
