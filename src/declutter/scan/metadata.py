"""Single path descriptors."""

from __future__ import annotations

from pathlib import Path

from declutter.errors import NotFoundError, ReadError
from declutter.models import Category, FileMetadata
from declutter.scan.classifier import classify, extension_of
from declutter.utils.files import directory_size


def file_metadata(path: Path) -> FileMetadata:
    """Describe ``path``; directories report their aggregated size."""
    path = Path(path)
    if not path.exists():
        raise NotFoundError("File does not exist")

    name = path.name
    extension = extension_of(name)
    if path.is_dir():
        return FileMetadata(
            path=str(path),
            name=name,
            category=Category.FOLDER,
            size=directory_size(path),
            extension=extension,
        )

    try:
        size = path.stat().st_size
    except OSError as exc:
        raise ReadError(f"Failed to get metadata: {exc}") from exc

    return FileMetadata(
        path=str(path),
        name=name,
        category=classify(extension),
        size=size,
        extension=extension,
    )
