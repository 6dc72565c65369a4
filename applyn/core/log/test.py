"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import _resolve_level, get_logger, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Named loggers are plain stdlib loggers."""
        logger = get_logger("cli")
        assert logger.name == "cli"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        assert get_logger().name == "applyn"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "level,expected",
        [
            (logging.WARNING, logging.WARNING),
            ("debug", logging.DEBUG),
            (" Error ", logging.ERROR),
            ("not-a-level", logging.INFO),
        ],
    )
    def test_resolve_level(self, level, expected) -> None:
        assert _resolve_level(level) == expected

    @pytest.mark.unit
    def test_setup_logging_accepts_level_name(self) -> None:
        """Configuring with a level name does not raise."""
        setup_logging(level="debug", stream=StringIO())
        get_logger("test_setup").debug("test message")
