"""Unit tests for logging configuration."""

import logging
from collections.abc import Iterator

import pytest

from nullsafe.shared.logging_config import PACKAGE_LOGGER, configure_logging, get_logger


@pytest.fixture(autouse=True)
def clean_package_logger() -> Iterator[None]:
    """Restore the package logger after each test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    logger.handlers.clear()
    yield
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_explicit_level(self) -> None:
        """Test explicit level is applied."""
        logger = configure_logging("WARNING")
        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.WARNING

    def test_level_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test level defaults to the configured setting."""
        monkeypatch.setenv("NULLSAFE_LOG_LEVEL", "DEBUG")
        assert configure_logging().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        """Test unknown level name falls back to INFO."""
        assert configure_logging("chatty").level == logging.INFO

    def test_single_handler(self) -> None:
        """Test repeated calls do not stack handlers."""
        configure_logging("INFO")
        logger = configure_logging("DEBUG")
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.DEBUG

    def test_formatter(self) -> None:
        """Test handler uses the structured format."""
        handler = configure_logging("INFO").handlers[0]
        assert handler.formatter is not None
        assert handler.formatter._fmt == "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def test_root_logger_untouched(self) -> None:
        """Test the root logger gets no handler from the package."""
        root_handlers = list(logging.getLogger().handlers)
        configure_logging("INFO")
        assert logging.getLogger().handlers == root_handlers


class TestGetLogger:
    """Tests for get_logger."""

    def test_named_logger(self) -> None:
        """Test logger is returned by name."""
        logger = get_logger("nullsafe.domain.optional")
        assert logger is logging.getLogger("nullsafe.domain.optional")
