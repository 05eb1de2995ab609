"""Recursive file and folder counts used for delete confirmations."""

from __future__ import annotations

from pathlib import Path

from declutter.models import CountResult
from declutter.utils.files import is_directory_entry, iter_visible_entries, require_directory


def _count(path: Path) -> CountResult:
    files = 0
    folders = 0
    for entry in iter_visible_entries(path):
        if is_directory_entry(entry):
            folders += 1
            nested = _count(Path(entry.path))
            files += nested.file_count
            folders += nested.folder_count
        else:
            files += 1
    return CountResult(files, folders)


def count_contents(path: Path) -> CountResult:
    """Count visible files and folders beneath ``path``, folders included."""
    return _count(require_directory(Path(path)))
