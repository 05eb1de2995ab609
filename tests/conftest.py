"""Shared fixtures building small directory trees."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Folder with ``a.txt`` (100 bytes) and ``sub/b.png`` (50 bytes)."""
    root = tmp_path / "x"
    root.mkdir()
    (root / "a.txt").write_bytes(b"a" * 100)
    sub = root / "sub"
    sub.mkdir()
    (sub / "b.png").write_bytes(b"b" * 50)
    return root


@pytest.fixture
def hidden_tree(sample_tree: Path) -> Path:
    """``sample_tree`` plus hidden entries at several levels."""
    (sample_tree / ".cache").write_bytes(b"c" * 1000)
    hidden_dir = sample_tree / ".git"
    hidden_dir.mkdir()
    (hidden_dir / "HEAD").write_bytes(b"h" * 40)
    (sample_tree / "sub" / ".DS_Store").write_bytes(b"d" * 7)
    return sample_tree
