"""Filesystem mutations: rename with undo and recoverable batch delete."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Iterable

from send2trash import send2trash

from declutter.config import DeletePolicy
from declutter.errors import DeleteError, RenameError
from declutter.models import MutationResult

LOGGER = logging.getLogger(__name__)

MISSING_REASON = "does not exist"


def rename(old_path: Path, new_path: Path) -> None:
    """Rename ``old_path`` to ``new_path`` exactly as requested."""
    try:
        os.rename(old_path, new_path)
    except OSError as exc:
        raise RenameError(f"Failed to rename file: {exc}") from exc
    LOGGER.info("Renamed %s -> %s", old_path, new_path)


def undo_rename(current_path: Path, original_path: Path) -> None:
    """Move ``current_path`` back to ``original_path``.

    No history is kept here; the caller supplies both ends of the inverse.
    """
    try:
        os.rename(current_path, original_path)
    except OSError as exc:
        raise RenameError(f"Failed to undo rename: {exc}") from exc
    LOGGER.info("Restored %s -> %s", current_path, original_path)


def _remove_permanently(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        os.remove(path)


def delete_path(path: Path, policy: DeletePolicy = DeletePolicy.TRASH) -> None:
    """Remove a single path according to ``policy``."""
    try:
        if policy is DeletePolicy.TRASH:
            send2trash(str(path))
        else:
            _remove_permanently(path)
    except OSError as exc:
        raise DeleteError(str(exc)) from exc


def delete_batch(
    paths: Iterable[str], policy: DeletePolicy = DeletePolicy.TRASH
) -> MutationResult:
    """Delete every path in order, recording a per-item outcome.

    A failing item never stops the rest of the batch.
    """
    result = MutationResult()
    for raw_path in paths:
        path = Path(raw_path)
        if not os.path.lexists(path):
            result.record_failure(raw_path, MISSING_REASON)
            continue
        try:
            delete_path(path, policy)
        except Exception as exc:
            LOGGER.warning("Failed to delete %s: %s", raw_path, exc)
            result.record_failure(raw_path, str(exc))
        else:
            LOGGER.info("Deleted %s (%s)", raw_path, policy.value)
            result.record_success(raw_path)
    return result
