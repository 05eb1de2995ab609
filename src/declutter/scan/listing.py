"""Flat one-level directory listings for the main browsing view."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from declutter.errors import ReadError
from declutter.models import Category, FileEntry
from declutter.scan.classifier import classify, extension_of
from declutter.utils.files import (
    directory_size,
    entry_size,
    entry_sort_key,
    is_directory_entry,
    is_hidden,
    require_directory,
)

LOGGER = logging.getLogger(__name__)


def _make_entry(entry: os.DirEntry) -> FileEntry:
    # Immediate children follow links; directory_size below them does not.
    if is_directory_entry(entry, follow_symlinks=True):
        return FileEntry(
            path=entry.path,
            name=entry.name,
            category=Category.FOLDER,
            size=directory_size(Path(entry.path)),
            is_directory=True,
        )
    return FileEntry(
        path=entry.path,
        name=entry.name,
        category=classify(extension_of(entry.name)),
        size=entry_size(entry, follow_symlinks=True),
        is_directory=False,
    )


def list_entries(path: Path, include_folders: bool = False) -> List[FileEntry]:
    """List the visible immediate children of ``path``.

    Folders are dropped unless ``include_folders`` is set, in which case they
    carry their recursive size. Symlinked children are described by their
    target. Results are ordered folders first, then by case-insensitive name.
    """
    path = require_directory(Path(path))
    entries: List[FileEntry] = []
    try:
        with os.scandir(path) as scanned:
            for child in scanned:
                if is_hidden(child.name):
                    continue
                if not include_folders and is_directory_entry(child, follow_symlinks=True):
                    continue
                entries.append(_make_entry(child))
    except OSError as exc:
        raise ReadError(f"Failed to read directory: {exc}") from exc

    entries.sort(key=lambda item: entry_sort_key(item.is_directory, item.name))
    LOGGER.debug("Listed %d entries in %s", len(entries), path)
    return entries
