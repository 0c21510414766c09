"""Logging configuration using loguru.

Logs are stored in the logs/ folder and kept for 1 week.
Output goes to file only by default so command output stays clean.
"""

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    import loguru

# Remove default handler
logger.remove()

# Define log directory (default ~/.local/share/themepaint/logs, overridable via THEMEPAINT_LOG_DIR)
_default_log_dir = Path.home() / ".local" / "share" / "themepaint" / "logs"
LOG_DIR = Path(os.environ.get("THEMEPAINT_LOG_DIR", str(_default_log_dir))).expanduser().resolve()
LOG_DIR.mkdir(parents=True, exist_ok=True)

STDERR_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"


class _LoggingState:
    """Internal state tracker for logging configuration.

    Note: stderr handler is NOT added by default.
    Logs go to file only unless the CLI asks for verbose output.
    """

    def __init__(self) -> None:
        """Initialize logging state without stderr handler."""
        self.stderr_handler_id: int | None = None


_state = _LoggingState()

# Configure file handler with rotation and retention
logger.add(
    LOG_DIR / "themepaint_{time:YYYY-MM-DD}.log",
    level="DEBUG",
    format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
    rotation="00:00",  # New file at midnight
    retention="1 week",  # Keep logs for 1 week
    compression="gz",  # Compress old logs
    backtrace=True,
    diagnose=False,
)


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logger.bind(name=name)


def enable_stderr(level: str = "INFO") -> int:
    """Mirror log output to stderr.

    Any previously added stderr handler is replaced.

    Args:
        level: Minimum log level for the stderr sink.

    Returns:
        The sink ID of the stderr handler.
    """
    disable_stderr()
    _state.stderr_handler_id = logger.add(sys.stderr, level=level, format=STDERR_FORMAT, colorize=True)
    return _state.stderr_handler_id


def disable_stderr() -> None:
    """Remove the stderr handler if one is installed."""
    if _state.stderr_handler_id is not None:
        logger.remove(_state.stderr_handler_id)
        _state.stderr_handler_id = None
