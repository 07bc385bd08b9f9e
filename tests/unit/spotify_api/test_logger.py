"""
Unit tests for logging setup.
"""

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import Mock, patch

import colorlog
import pytest

from spotify_api.logger import setup_logging

real_get_logger = logging.getLogger


def run_setup_logging(root: Mock):
    """Call setup_logging() with the root logger replaced by root.

    Named loggers still resolve to real loggers.
    """

    def get_logger(name=None):
        return root if name is None else real_get_logger(name)

    with patch("spotify_api.logger.logging.getLogger", side_effect=get_logger):
        setup_logging()


@pytest.fixture
def root_logger():
    """Stand-in root logger with no handlers attached."""
    root = Mock(spec=logging.Logger)
    root.hasHandlers.return_value = False
    yield root

    for call in root.addHandler.call_args_list:
        call.args[0].close()


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_console_handler(self, root_logger, monkeypatch):
        monkeypatch.setenv("SPOTIFY_LOG_LEVEL", "debug")
        monkeypatch.delenv("SPOTIFY_LOG_FILE", raising=False)

        run_setup_logging(root_logger)

        root_logger.setLevel.assert_called_once_with("DEBUG")
        assert root_logger.addHandler.call_count == 1
        handler = root_logger.addHandler.call_args.args[0]
        assert isinstance(handler, logging.StreamHandler)
        assert isinstance(handler.formatter, colorlog.ColoredFormatter)

    def test_rotating_file_handler(self, root_logger, monkeypatch, tmp_path):
        log_file = tmp_path / "spotify.log"
        monkeypatch.setenv("SPOTIFY_LOG_FILE", str(log_file))
        monkeypatch.setenv("LOG_FILE_MAX_BYTES", "1024")
        monkeypatch.setenv("LOG_FILE_BACKUP_COUNT", "2")

        run_setup_logging(root_logger)

        handlers = [call.args[0] for call in root_logger.addHandler.call_args_list]
        file_handlers = [h for h in handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 1024
        assert file_handlers[0].backupCount == 2

    def test_existing_handlers_kept(self, root_logger, monkeypatch):
        monkeypatch.delenv("SPOTIFY_LOG_FILE", raising=False)
        root_logger.hasHandlers.return_value = True

        run_setup_logging(root_logger)

        root_logger.addHandler.assert_not_called()

    def test_httpx_logger_quieted(self, root_logger, monkeypatch):
        monkeypatch.delenv("SPOTIFY_LOG_FILE", raising=False)

        run_setup_logging(root_logger)

        assert logging.getLogger("httpx").level == logging.WARNING

    def test_getlogger_restored_after_setup(self, root_logger, monkeypatch):
        """Test the root logger seen by other code is real once setup returns."""
        monkeypatch.delenv("SPOTIFY_LOG_FILE", raising=False)

        run_setup_logging(root_logger)

        assert logging.getLogger() is logging.root
