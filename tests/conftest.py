"""Shared fixtures for the file tree tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create `root/a.txt` and `root/b/c.txt`."""
    root = tmp_path / "root"
    (root / "b").mkdir(parents=True)
    (root / "a.txt").write_text("alpha", encoding="utf-8")
    (root / "b" / "c.txt").write_text("gamma", encoding="utf-8")
    return root
