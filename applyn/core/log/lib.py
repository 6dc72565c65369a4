"""Logger helpers shared by applyn modules and the CLI."""

import logging
import sys
from typing import Optional

__all__ = ["get_logger", "setup_logging"]

DEFAULT_LOGGER_NAME = "applyn"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: int | str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give INFO."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: int | str = logging.INFO, stream=sys.stderr) -> None:
    """Install a root handler for the `python .` entry point.

    Args:
        level: Numeric level or level name, typically from APPLYN_LOG_LEVEL.
        stream: Destination for log records; stdout stays free for JSON output.
    """
    logging.basicConfig(level=_resolve_level(level), format=LOG_FORMAT, stream=stream)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the named logger, or the package logger when no name is given."""
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)
