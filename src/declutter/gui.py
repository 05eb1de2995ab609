"""Desktop GUI launcher for Declutter using pywebview.

This module opens a native window around the FastAPI interface and attaches
the native folder picker to it, so the web UI can ask the user for a folder
without blocking the server.
"""

from __future__ import annotations

import logging
import socket
import sys
import threading
import time
from pathlib import Path

from declutter.config import AppConfig
from declutter.ops.dialog import WebviewFolderPicker

logger = logging.getLogger(__name__)


def _get_log_file_path(config: AppConfig | None = None) -> Path:
    """Get path to log file, creating its directory."""
    log_file = (config or AppConfig()).resolve_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    return log_file


def _setup_logging(log_file: Path) -> None:
    """Configure logging to both console and file."""
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # File handler - always logs DEBUG level for troubleshooting
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)


def _find_free_port() -> int:
    """Find a free port on localhost."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        s.listen(1)
        port = s.getsockname()[1]
    return port


def _wait_for_server(host: str, port: int, timeout: float = 30.0) -> bool:
    """Wait for the server to become available."""
    start_time = time.time()
    while time.time() - start_time < timeout:
        try:
            with socket.create_connection((host, port), timeout=1.0):
                return True
        except OSError:
            time.sleep(0.1)
    return False


class ServerThread(threading.Thread):
    """Thread that runs the uvicorn server."""

    def __init__(self, host: str, port: int) -> None:
        super().__init__(daemon=True)
        self.host = host
        self.port = port
        self.server = None

    def run(self) -> None:
        import uvicorn

        from declutter.web.app import app

        config = uvicorn.Config(
            app,
            host=self.host,
            port=self.port,
            log_level="warning",
            access_log=False,
        )
        self.server = uvicorn.Server(config)
        self.server.run()

    def stop(self) -> None:
        """Signal the server to stop."""
        if self.server:
            self.server.should_exit = True


def main() -> None:
    """Launch the Declutter desktop application."""
    _setup_logging(_get_log_file_path())
    logger.info("Declutter starting up...")
    logger.info("Platform: %s, Python: %s", sys.platform, sys.version)

    try:
        import webview

        logger.debug("pywebview version: %s", getattr(webview, "__version__", "unknown"))
    except ImportError as exc:
        logger.error(
            "pywebview is not installed. Install the gui extras with: pip install 'declutter[gui]'"
        )
        raise SystemExit(1) from exc

    from declutter.web.app import app as web_app

    try:
        host = "127.0.0.1"
        port = _find_free_port()
        url = f"http://{host}:{port}"

        logger.info("Starting Declutter server on %s", url)
        server_thread = ServerThread(host, port)
        server_thread.start()

        if not _wait_for_server(host, port):
            logger.error("Server failed to start within timeout")
            raise SystemExit(1)

        logger.info("Server ready, launching window...")
        window = webview.create_window(
            title="Declutter",
            url=url,
            width=1100,
            height=750,
            min_size=(800, 600),
            resizable=True,
            text_select=True,
        )
        web_app.state.folder_picker = WebviewFolderPicker(window)

        def on_closed() -> None:
            logger.info("Window closed, shutting down server...")
            web_app.state.folder_picker = None
            server_thread.stop()

        window.events.closed += on_closed

        # Blocks until the window is closed
        webview.start(private_mode=False)
        logger.info("Declutter closed normally.")

    except SystemExit:
        raise
    except Exception as e:
        logger.exception("Fatal error during Declutter startup: %s", e)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
