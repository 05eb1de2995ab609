"""Native folder selection."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

LOGGER = logging.getLogger(__name__)

FolderPicker = Callable[[], Optional[str]]


class WebviewFolderPicker:
    """Blocking folder picker backed by a pywebview window."""

    def __init__(self, window: Any) -> None:
        self.window = window

    def __call__(self) -> Optional[str]:
        import webview

        selection = self.window.create_file_dialog(webview.FileDialog.FOLDER)
        if not selection:
            return None
        if isinstance(selection, str):
            return selection
        return str(selection[0])


async def select_folder(picker: FolderPicker) -> Optional[str]:
    """Run ``picker`` off the event loop and return its choice, or None on cancel."""
    chosen = await asyncio.to_thread(picker)
    if chosen is None:
        LOGGER.debug("Folder selection cancelled")
        return None
    return str(chosen)
