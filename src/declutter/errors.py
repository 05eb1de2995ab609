"""Error kinds surfaced by Declutter operations."""

from __future__ import annotations


class DeclutterError(Exception):
    """Base error carrying a classification and a human-readable detail."""

    kind = "Error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class NotFoundError(DeclutterError):
    kind = "NotFound"


class NotDirectoryError(DeclutterError):
    kind = "NotADirectory"


class RenameError(DeclutterError):
    kind = "RenameFailed"


class DeleteError(DeclutterError):
    kind = "DeleteFailed"


class ReadError(DeclutterError):
    kind = "ReadFailed"


class RevealError(DeclutterError):
    kind = "RevealFailed"
