"""Tests for file utility functions."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from declutter.errors import NotDirectoryError, NotFoundError
from declutter.utils.files import (
    directory_size,
    entry_size,
    entry_sort_key,
    is_hidden,
    iter_visible_entries,
    require_directory,
)


class TestIsHidden:
    """Test is_hidden function."""

    def test_dot_prefix_is_hidden(self) -> None:
        """Names starting with a dot are hidden."""
        assert is_hidden(".cache")
        assert is_hidden(".")

    def test_regular_names_are_visible(self) -> None:
        """Dots elsewhere in a name do not hide it."""
        assert not is_hidden("a.txt")
        assert not is_hidden("archive.tar.gz")
        assert not is_hidden("")


class TestEntrySortKey:
    """Test entry_sort_key ordering."""

    def test_directories_first(self) -> None:
        """Directories sort before files regardless of name."""
        names = [(False, "aaa"), (True, "zzz")]
        ordered = sorted(names, key=lambda item: entry_sort_key(*item))
        assert ordered == [(True, "zzz"), (False, "aaa")]

    def test_case_insensitive_names(self) -> None:
        """Names compare case-insensitively within a kind."""
        names = [(False, "beta"), (False, "Alpha"), (False, "alpha2")]
        ordered = sorted(names, key=lambda item: entry_sort_key(*item))
        assert [name for _, name in ordered] == ["Alpha", "alpha2", "beta"]


class TestRequireDirectory:
    """Test require_directory validation."""

    def test_missing_path(self, tmp_path: Path) -> None:
        """Raises NotFoundError for a missing path."""
        with pytest.raises(NotFoundError):
            require_directory(tmp_path / "missing")

    def test_file_path(self, tmp_path: Path) -> None:
        """Raises NotDirectoryError for a file."""
        target = tmp_path / "file.txt"
        target.write_text("x")
        with pytest.raises(NotDirectoryError):
            require_directory(target)

    def test_directory_path(self, tmp_path: Path) -> None:
        """Returns the directory unchanged."""
        assert require_directory(tmp_path) == tmp_path


class TestIterVisibleEntries:
    """Test iter_visible_entries."""

    def test_skips_hidden(self, hidden_tree: Path) -> None:
        """Hidden entries are never yielded."""
        names = {entry.name for entry in iter_visible_entries(hidden_tree)}
        assert names == {"a.txt", "sub"}

    def test_unreadable_directory_yields_nothing(self, tmp_path: Path) -> None:
        """A missing directory is treated as empty."""
        assert list(iter_visible_entries(tmp_path / "missing")) == []


class TestDirectorySize:
    """Test directory_size aggregation."""

    def test_recursive_sum(self, sample_tree: Path) -> None:
        """Sums files at every level."""
        assert directory_size(sample_tree) == 150

    def test_hidden_entries_excluded(self, hidden_tree: Path) -> None:
        """Hidden files and hidden folders contribute nothing."""
        assert directory_size(hidden_tree) == 150

    def test_empty_directory(self, tmp_path: Path) -> None:
        """Empty directory has size zero."""
        assert directory_size(tmp_path) == 0

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Missing directory contributes zero instead of failing."""
        assert directory_size(tmp_path / "gone") == 0

    def test_deep_nesting(self, tmp_path: Path) -> None:
        """Sizes are collected from deeply nested folders."""
        current = tmp_path
        for index in range(6):
            current = current / f"level{index}"
            current.mkdir()
            (current / "data.bin").write_bytes(b"x" * 10)
        assert directory_size(tmp_path) == 60


class TestEntrySize:
    """Test entry_size fallbacks."""

    def test_stat_failure_returns_zero(self) -> None:
        """An entry removed between listing and stat counts as empty."""
        entry = MagicMock()
        entry.path = "/gone/file.txt"
        entry.stat.side_effect = FileNotFoundError("gone")
        assert entry_size(entry) == 0

    def test_reads_size_without_following_links(self) -> None:
        """Uses lstat semantics by default."""
        entry = MagicMock()
        entry.stat.return_value.st_size = 42
        assert entry_size(entry) == 42
        entry.stat.assert_called_once_with(follow_symlinks=False)

    def test_follows_links_when_asked(self) -> None:
        """Top-level callers can size the link target."""
        entry = MagicMock()
        entry.stat.return_value.st_size = 7
        assert entry_size(entry, follow_symlinks=True) == 7
        entry.stat.assert_called_once_with(follow_symlinks=True)
