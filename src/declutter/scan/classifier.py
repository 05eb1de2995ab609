"""Extension based content classification."""

from __future__ import annotations

from pathlib import PurePath

from declutter.models import Category

IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "webp", "bmp", "svg", "ico"})
PDF_EXTENSIONS = frozenset({"pdf"})
TEXT_EXTENSIONS = frozenset(
    {
        "txt", "md", "json", "xml", "html", "css", "js", "ts", "rs", "py", "java",
        "c", "cpp", "h", "hpp", "go", "rb", "php", "sh", "yaml", "yml", "toml",
        "ini", "cfg", "conf", "log", "csv",
    }
)


def classify(extension: str) -> Category:
    """Map a file extension (with or without the dot) to a category."""
    normalized = extension.lower().lstrip(".")
    if normalized in IMAGE_EXTENSIONS:
        return Category.IMAGE
    if normalized in PDF_EXTENSIONS:
        return Category.PDF
    if normalized in TEXT_EXTENSIONS:
        return Category.TEXT
    return Category.OTHER


def extension_of(name: str) -> str:
    """Return the raw extension of ``name`` without its dot, or an empty string."""
    suffix = PurePath(name).suffix
    return suffix[1:] if suffix else ""
