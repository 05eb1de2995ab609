"""Text previews for the file inspector."""

from __future__ import annotations

from pathlib import Path

from declutter.errors import NotFoundError, ReadError


def read_preview(path: Path, max_chars: int) -> str:
    """Return at most ``max_chars`` characters of a UTF-8 text file.

    Counting is by decoded character, so multi-byte sequences are never split.
    Line endings are returned as stored.
    """
    if max_chars < 0:
        raise ValueError("max_chars must be non-negative")

    path = Path(path)
    if not path.exists():
        raise NotFoundError("File does not exist")

    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read(max_chars)
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(f"Failed to read file: {exc}") from exc
