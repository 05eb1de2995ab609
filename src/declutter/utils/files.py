"""Utility helpers for walking and sizing the filesystem."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, Tuple

from declutter.errors import NotDirectoryError, NotFoundError

LOGGER = logging.getLogger(__name__)

HIDDEN_PREFIX = "."


def is_hidden(name: str) -> bool:
    """Return True for entries whose name starts with a dot."""
    return name.startswith(HIDDEN_PREFIX)


def entry_sort_key(is_directory: bool, name: str) -> Tuple[bool, str]:
    """Sort key placing directories first, then names case-insensitively."""
    return (not is_directory, name.lower())


def require_directory(path: Path) -> Path:
    """Validate that ``path`` exists and is a directory."""
    if not path.exists():
        raise NotFoundError("Folder does not exist")
    if not path.is_dir():
        raise NotDirectoryError("Path is not a directory")
    return path


def is_directory_entry(entry: os.DirEntry, follow_symlinks: bool = False) -> bool:
    """Recursive walks leave ``follow_symlinks`` off so they stay finite."""
    try:
        return entry.is_dir(follow_symlinks=follow_symlinks)
    except OSError:
        return False


def entry_size(entry: os.DirEntry, follow_symlinks: bool = False) -> int:
    """Return the size of a non-directory entry, or 0 if it cannot be read."""
    try:
        return int(entry.stat(follow_symlinks=follow_symlinks).st_size)
    except OSError as exc:
        LOGGER.debug("Skipping unreadable entry %s: %s", entry.path, exc)
        return 0


def iter_visible_entries(path: Path) -> Iterator[os.DirEntry]:
    """Yield non-hidden entries of ``path``, yielding nothing if it cannot be read."""
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                if not is_hidden(entry.name):
                    yield entry
    except OSError as exc:
        LOGGER.debug("Skipping unreadable directory %s: %s", path, exc)


def directory_size(path: Path) -> int:
    """Recursively sum the sizes of all visible files beneath ``path``.

    Unreadable entries contribute zero so a single permission error or a file
    removed mid-walk never fails the whole computation.
    """
    total = 0
    for entry in iter_visible_entries(path):
        if is_directory_entry(entry):
            total += directory_size(Path(entry.path))
        else:
            total += entry_size(entry)
    return total
