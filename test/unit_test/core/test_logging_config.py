"""Unit tests for the logging configuration module.

Covers log levels, formats, the optional file handler and per-module levels.
"""

import logging
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from rockmundo.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    get_logger,
    setup_logging,
)


def console_handler() -> logging.Handler:
    return next(
        h
        for h in logging.getLogger().handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    )


def file_handlers() -> list:
    return [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]


@pytest.fixture(autouse=True)
def _close_file_handlers():
    yield
    for handler in file_handlers():
        logging.getLogger().removeHandler(handler)
        handler.close()


class TestSetupLoggingLevels:
    @pytest.mark.parametrize(
        "log_level,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("error", logging.ERROR),
            ("critical", logging.CRITICAL),
        ],
    )
    def test_console_level(self, log_level, expected):
        setup_logging(log_level=log_level, enable_file=False)
        assert console_handler().level == expected

    def test_root_logger_captures_everything(self):
        setup_logging(log_level="ERROR", enable_file=False)
        assert logging.getLogger().level == logging.DEBUG


class TestSetupLoggingFormats:
    @pytest.mark.parametrize(
        "log_format,expected",
        [("simple", SIMPLE_FORMAT), ("detailed", DETAILED_FORMAT), ("json", JSON_FORMAT)],
    )
    def test_named_formats(self, log_format, expected):
        setup_logging(log_format=log_format, enable_file=False)
        assert console_handler().formatter._fmt == expected

    def test_unknown_format_falls_back_to_detailed(self):
        setup_logging(log_format="fancy", enable_file=False)
        assert console_handler().formatter._fmt == DETAILED_FORMAT


class TestSetupLoggingFileHandling:
    def test_file_handler_when_enabled_in_settings(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_dir = Path(tmpdir) / "logs"
            with patch("rockmundo.core.logging_config.LOG_FILE_DIR", str(log_dir)), patch(
                "rockmundo.core.logging_config.ENABLE_FILE_LOGGING", True
            ):
                setup_logging(log_level="ERROR", enable_file=True)

                [handler] = file_handlers()
                assert handler.level == logging.DEBUG
                assert (log_dir / "rockmundo.log").exists()

    def test_no_file_handler_when_disabled_in_settings(self):
        with patch("rockmundo.core.logging_config.ENABLE_FILE_LOGGING", False):
            setup_logging(enable_file=True)
        assert file_handlers() == []

    def test_caller_can_opt_out_of_file_logging(self):
        with patch("rockmundo.core.logging_config.ENABLE_FILE_LOGGING", True):
            setup_logging(enable_file=False)
        assert file_handlers() == []


class TestHandlerManagement:
    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)
        assert len(logging.getLogger().handlers) == 1

    @pytest.mark.parametrize("module_name,level", sorted(MODULE_LOG_LEVELS.items()))
    def test_module_levels(self, module_name, level):
        setup_logging(enable_file=False)
        assert logging.getLogger(module_name).level == getattr(logging, level)


class TestGetLogger:
    def test_returns_named_logger(self):
        logger = get_logger("rockmundo.game.festivals")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "rockmundo.game.festivals"
        assert logger is get_logger("rockmundo.game.festivals")

    def test_service_logger_inherits_module_level(self):
        setup_logging(enable_file=False)
        logger = get_logger("rockmundo.server.services.jam_sessions")
        assert logger.getEffectiveLevel() == logging.DEBUG
