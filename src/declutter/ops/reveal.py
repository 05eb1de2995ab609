"""Reveal paths in the platform file manager."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import List

from declutter.errors import NotFoundError, RevealError

LOGGER = logging.getLogger(__name__)


def _reveal_command(path: Path) -> List[str]:
    if sys.platform == "darwin":
        return ["open", "-R", str(path)]
    if sys.platform == "win32":
        return ["explorer", f"/select,{path}"]
    # xdg-open cannot select an item, so open the containing folder
    target = path if path.is_dir() else path.parent
    return ["xdg-open", str(target)]


def reveal(path: Path) -> None:
    """Show ``path`` in Finder, Explorer or the desktop file manager."""
    path = Path(path).expanduser()
    if not os.path.lexists(path):
        raise NotFoundError(f"File not found: {path}")

    command = _reveal_command(path)
    try:
        subprocess.Popen(command)
    except OSError as exc:
        LOGGER.error("Unable to reveal %s: %s", path, exc)
        raise RevealError(f"Failed to reveal in explorer: {exc}") from exc
