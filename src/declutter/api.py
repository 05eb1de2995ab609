"""Operations exposed to the desktop UI.

Each function takes plain text paths, touches the live filesystem and returns
a fresh value or raises a :class:`~declutter.errors.DeclutterError`. Nothing
is cached between calls.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from declutter.config import DeletePolicy
from declutter.models import CountResult, DirectoryNode, FileEntry, FileMetadata, MutationResult
from declutter.ops import dialog, mutator, preview
from declutter.ops.dialog import FolderPicker
from declutter.ops.reveal import reveal
from declutter.scan.counter import count_contents
from declutter.scan.listing import list_entries
from declutter.scan.metadata import file_metadata
from declutter.scan.tree import DEFAULT_MAX_DEPTH, build_tree


async def select_folder(picker: FolderPicker) -> Optional[str]:
    return await dialog.select_folder(picker)


def list_files(folder_path: str, include_folders: bool = False) -> List[FileEntry]:
    return list_entries(Path(folder_path), include_folders=include_folders)


def list_directory_tree(folder_path: str, max_depth: Optional[int] = None) -> DirectoryNode:
    depth = DEFAULT_MAX_DEPTH if max_depth is None else max_depth
    if depth < 0:
        raise ValueError("max_depth must be non-negative")
    return build_tree(Path(folder_path), 0, depth)


def get_folder_contents_count(folder_path: str) -> CountResult:
    return count_contents(Path(folder_path))


def get_file_metadata(file_path: str) -> FileMetadata:
    return file_metadata(Path(file_path))


def rename_file(old_path: str, new_path: str) -> None:
    mutator.rename(Path(old_path), Path(new_path))


def undo_rename(current_path: str, original_path: str) -> None:
    mutator.undo_rename(Path(current_path), Path(original_path))


def read_text_preview(file_path: str, max_chars: int) -> str:
    return preview.read_preview(Path(file_path), max_chars)


def delete_files(
    file_paths: Iterable[str], policy: DeletePolicy = DeletePolicy.TRASH
) -> MutationResult:
    """Delete each path, reporting per-item failures in the result.

    An unknown ``policy`` raises ``ValueError`` before any path is touched.
    """
    return mutator.delete_batch(file_paths, DeletePolicy(policy))


def reveal_in_explorer(path: str) -> None:
    reveal(Path(path))
