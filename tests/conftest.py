"""Shared fixtures for finditem tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """root/a.txt (10 B), root/sub/b.log (2 KB), root/.git/config (5 B)."""
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / ".git").mkdir()
    (root / "a.txt").write_bytes(b"x" * 10)
    (root / "sub" / "b.log").write_bytes(b"x" * 2048)
    (root / ".git" / "config").write_bytes(b"x" * 5)
    return root
