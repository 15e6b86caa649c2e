"""Shared pytest fixtures for agent project layouts."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that creates a project root containing the given directories."""

    def _make(*dirs: str) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        for name in dirs:
            (root / name).mkdir(parents=True, exist_ok=True)
        return root

    return _make
