"""Tests for the desktop launcher helpers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from declutter import gui
from declutter.config import AppConfig
from declutter.ops.dialog import WebviewFolderPicker


class TestHelpers:
    """Tests for gui helper functions."""

    def test_find_free_port(self) -> None:
        """Returns a usable port number."""
        port = gui._find_free_port()
        assert 0 < port < 65536

    def test_wait_for_server_timeout(self) -> None:
        """Gives up when nothing is listening."""
        port = gui._find_free_port()
        assert gui._wait_for_server("127.0.0.1", port, timeout=0.3) is False

    def test_log_file_path_created(self, tmp_path: Path) -> None:
        """Creates the log directory."""
        log_dir = tmp_path / "logs"
        log_file = gui._get_log_file_path(AppConfig(log_dir=log_dir))
        assert log_file == log_dir / "declutter.log"
        assert log_dir.is_dir()

    def test_setup_logging_adds_handlers(self, tmp_path: Path) -> None:
        """Adds a file handler and a console handler to the root logger."""
        root_logger = logging.getLogger()
        before = list(root_logger.handlers)
        try:
            gui._setup_logging(tmp_path / "declutter.log")
            added = [h for h in root_logger.handlers if h not in before]
            assert any(isinstance(h, logging.FileHandler) for h in added)
            assert len(added) == 2
        finally:
            for handler in [h for h in root_logger.handlers if h not in before]:
                root_logger.removeHandler(handler)
                handler.close()


class TestServerThread:
    """Tests for ServerThread."""

    def test_stop_without_server(self) -> None:
        """Stopping before start is a no-op."""
        thread = gui.ServerThread("127.0.0.1", 0)
        thread.stop()
        assert thread.daemon

    def test_stop_signals_server(self) -> None:
        """Stopping sets should_exit on the server."""
        thread = gui.ServerThread("127.0.0.1", 0)
        thread.server = MagicMock(should_exit=False)
        thread.stop()
        assert thread.server.should_exit is True


class TestMain:
    """Tests for the launcher entry point."""

    @patch("declutter.gui._get_log_file_path", MagicMock(return_value=Path("unused.log")))
    @patch("declutter.gui._setup_logging")
    def test_missing_webview(self, mock_logging: MagicMock) -> None:
        """Exits when pywebview is not installed."""
        with patch.dict(sys.modules, {"webview": None}):
            with pytest.raises(SystemExit):
                gui.main()

    @patch("declutter.gui._get_log_file_path", MagicMock(return_value=Path("unused.log")))
    @patch("declutter.gui._setup_logging")
    @patch("declutter.gui._wait_for_server", return_value=True)
    @patch("declutter.gui.ServerThread")
    def test_attaches_folder_picker(
        self,
        mock_thread_class: MagicMock,
        mock_wait: MagicMock,
        mock_logging: MagicMock,
    ) -> None:
        """The window's folder picker is attached to the web app."""
        from declutter.web.app import app as web_app

        window = MagicMock()
        seen_pickers = []

        def fake_start(**kwargs: object) -> None:
            seen_pickers.append(web_app.state.folder_picker)

        fake_webview = SimpleNamespace(
            create_window=MagicMock(return_value=window),
            start=MagicMock(side_effect=fake_start),
        )
        try:
            with patch.dict(sys.modules, {"webview": fake_webview}):
                gui.main()
        finally:
            web_app.state.folder_picker = None

        assert isinstance(seen_pickers[0], WebviewFolderPicker)
        assert seen_pickers[0].window is window
        mock_thread_class.return_value.start.assert_called_once()
