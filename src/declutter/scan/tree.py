"""Depth-bounded directory tree snapshots for folder previews."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

from declutter.models import DirectoryNode
from declutter.utils.files import (
    directory_size,
    entry_size,
    entry_sort_key,
    is_directory_entry,
    iter_visible_entries,
    require_directory,
)

DEFAULT_MAX_DEPTH = 3


def _node_name(path: Path) -> str:
    return path.name or str(path)


def _sort_nodes(nodes: List[DirectoryNode]) -> None:
    nodes.sort(key=lambda node: entry_sort_key(node.is_directory, node.name))


def _build_directory(path: Path, name: str, current_depth: int, max_depth: int) -> DirectoryNode:
    if current_depth >= max_depth:
        # Past the bound: report the full size without materializing children
        return DirectoryNode(name=name, is_directory=True, size=directory_size(path))

    children: List[DirectoryNode] = []
    for entry in iter_visible_entries(path):
        children.append(_build_entry(entry, current_depth + 1, max_depth))
    _sort_nodes(children)
    return DirectoryNode(
        name=name,
        is_directory=True,
        size=sum(child.size for child in children),
        children=children,
    )


def _build_entry(entry: os.DirEntry, current_depth: int, max_depth: int) -> DirectoryNode:
    if is_directory_entry(entry):
        return _build_directory(Path(entry.path), entry.name, current_depth, max_depth)
    return DirectoryNode(name=entry.name, is_directory=False, size=entry_size(entry))


def build_tree(
    path: Path, current_depth: int = 0, max_depth: int = DEFAULT_MAX_DEPTH
) -> DirectoryNode:
    """Build a snapshot of ``path`` expanding children down to ``max_depth``.

    Children are ordered directories first, then by case-insensitive name.
    Hidden entries are skipped at every level.
    """
    path = require_directory(Path(path))
    return _build_directory(path, _node_name(path), current_depth, max_depth)
