"""Core Declutter data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple


class Category(str, Enum):
    """Coarse content classification of a directory entry."""

    IMAGE = "image"
    PDF = "pdf"
    TEXT = "text"
    OTHER = "other"
    FOLDER = "folder"


@dataclass(slots=True)
class FileEntry:
    """One row of a flat directory listing."""

    path: str
    name: str
    category: Category
    size: int
    is_directory: bool


@dataclass(slots=True)
class DirectoryNode:
    """Depth-bounded snapshot of a directory subtree.

    ``children`` is ``None`` once the depth bound is reached; ``size`` is the
    full recursive total either way.
    """

    name: str
    is_directory: bool
    size: int
    children: Optional[List["DirectoryNode"]] = None


@dataclass(slots=True)
class FileMetadata:
    path: str
    name: str
    category: Category
    size: int
    extension: str


class CountResult(NamedTuple):
    file_count: int
    folder_count: int


@dataclass(slots=True)
class MutationResult:
    """Per-item outcome of a batch mutation."""

    succeeded: List[str] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)

    def record_success(self, path: str) -> None:
        self.succeeded.append(path)

    def record_failure(self, path: str, reason: str) -> None:
        self.failed.append((path, reason))

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)
