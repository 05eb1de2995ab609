"""Application configuration defaults."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class DeletePolicy(str, Enum):
    """How batch deletion disposes of entries."""

    TRASH = "trash"
    PERMANENT = "permanent"


def _get_default_log_dir() -> Path:
    """Get the platform log directory."""
    if sys.platform == "win32":
        appdata = os.environ.get("LOCALAPPDATA", os.path.expanduser("~"))
        return Path(appdata) / "Declutter" / "logs"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Logs" / "Declutter"
    return Path.home() / ".local" / "share" / "declutter" / "logs"


@dataclass(slots=True)
class AppConfig:
    delete_policy: DeletePolicy = DeletePolicy.TRASH
    max_depth: int = 3
    include_folders: bool = False
    preview_chars: int = 5000
    log_dir: Path | None = None

    def __post_init__(self) -> None:
        # Accept plain strings from the CLI and HTTP payloads
        self.delete_policy = DeletePolicy(self.delete_policy)
        if self.max_depth < 0:
            raise ValueError("max_depth must be non-negative")
        if self.preview_chars < 0:
            raise ValueError("preview_chars must be non-negative")
        if self.log_dir is None:
            self.log_dir = _get_default_log_dir()

    def resolve_log_file(self) -> Path:
        if self.log_dir is None:
            self.log_dir = _get_default_log_dir()
        return Path(self.log_dir) / "declutter.log"
