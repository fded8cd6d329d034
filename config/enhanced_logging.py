"""
Enhanced Logging Utility Module
Colored console logging with relative file paths and line numbers,
optional dated log files, and truncation of oversized messages.
"""

import datetime
import logging
import os
import sys
import time
from functools import wraps
from pathlib import Path
from typing import Optional

from config.settings import settings

# ======== Color Configuration ========
COLORS = {
    # Log levels
    "DEBUG": "\033[38;5;39m",  # Blue
    "INFO": "\033[38;5;34m",  # Green
    "WARNING": "\033[38;5;214m",  # Orange
    "ERROR": "\033[38;5;196m",  # Red
    "CRITICAL": "\033[48;5;196;38;5;231m",  # White on Red
    # Components
    "TIMESTAMP": "\033[38;5;246m",  # Dark Gray
    "PATH": "\033[1;38;5;93m",  # Bold Purple
    "FILE": "\033[1;38;5;63m",  # Bold Blue
    "MSG_CONTENT": "\033[38;5;255m",  # White
    "RESET": "\033[0m",
}

CONSOLE_FORMAT = (
    "%(color_timestamp)s%(asctime)s%(color_reset)s "
    "%(color_path)s%(directory)s/%(color_reset)s"
    "%(color_file)s%(filename)s:%(lineno)d%(color_reset)s "
    "%(color_level)s[%(levelname).1s]%(color_reset)s "
    "%(color_msg_content)s%(message)s%(color_reset)s"
)

FILE_FORMAT = "%(asctime)s %(directory)s/%(filename)s:%(lineno)d [%(levelname).1s] %(message)s"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_root_logger_initialized = False


def _decorate_record(record: logging.LogRecord) -> None:
    """Attach path, color and truncation attributes used by the formats above."""
    if getattr(record, "_cards_decorated", False):
        return

    cwd = os.getcwd()
    if record.pathname.startswith(cwd):
        rel_pathname = record.pathname[len(cwd) + 1 :]
    else:
        rel_pathname = record.pathname
    record.directory = os.path.dirname(rel_pathname) or "."

    for color_name, color_code in COLORS.items():
        setattr(record, f"color_{color_name.lower()}", color_code)
    record.color_level = COLORS.get(record.levelname, COLORS["INFO"])

    limit = settings.max_log_message_length
    if isinstance(record.msg, str) and len(record.msg) > limit:
        record.msg = record.msg[: limit - 3] + "..."

    record._cards_decorated = True


class ColoredFormatter(logging.Formatter):
    """Formatter that applies colors and strips them when not on a TTY."""

    def __init__(self, fmt=None, datefmt=None, use_colors=True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and self._should_use_colors()

    def _should_use_colors(self):
        """Check if the terminal supports colors"""
        stream = sys.stderr
        return hasattr(stream, "isatty") and stream.isatty()

    def format(self, record):
        _decorate_record(record)
        result = super().format(record)

        if not self.use_colors:
            for color_code in COLORS.values():
                result = result.replace(color_code, "")

        return result


class PlainFormatter(logging.Formatter):
    """File formatter sharing the path attributes of the console output."""

    def format(self, record):
        _decorate_record(record)
        return super().format(record)


def _create_log_file(log_dir: Path) -> Optional[Path]:
    """Create ``log_dir/<date>/cards_log_<time>.log``; None if not writable."""
    now = datetime.datetime.now()
    daily_log_dir = log_dir / now.strftime("%Y-%m-%d")
    try:
        daily_log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(
            f"Warning: Cannot create log directory ({e}). Using console logging only.",
            file=sys.stderr,
        )
        return None
    return daily_log_dir / f"cards_log_{now.strftime('%H-%M-%S')}.log"


def setup_logger(level=None):
    """
    Set up the root logger with colored console output and, when
    ``settings.log_path`` is set, a plain-text file handler.

    Args:
        level: Logging level (defaults to settings.log_level)

    Returns:
        logging.Logger: The root logger instance
    """
    global _root_logger_initialized

    if _root_logger_initialized:
        return logging.getLogger()

    if level is None:
        level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove handlers installed by an earlier setup in this process
    for handler in root_logger.handlers[:]:
        if getattr(handler, "_cards_handler", False):
            root_logger.removeHandler(handler)

    if settings.log_path:
        log_file = _create_log_file(Path(settings.log_path))
        if log_file:
            try:
                file_handler = logging.FileHandler(log_file)
            except OSError:
                print(
                    "Warning: Cannot create file handler. Using console logging only.",
                    file=sys.stderr,
                )
            else:
                file_handler.setLevel(level)
                file_handler.setFormatter(PlainFormatter(FILE_FORMAT, datefmt=DATE_FORMAT))
                file_handler._cards_handler = True
                root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    console_handler._cards_handler = True
    root_logger.addHandler(console_handler)

    _root_logger_initialized = True

    root_logger.debug("Enhanced logger initialized")
    return root_logger


def get_logger(name=None):
    """
    Get a named logger instance.
    Does not touch the root logger; applications opt in with setup_logger().

    Args:
        name (str, optional): Name for the logger. Defaults to None.

    Returns:
        logging.Logger: Named logger instance
    """
    return logging.getLogger(name)


def log_execution_time(func):
    """
    Decorator that logs function execution time at DEBUG.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        start_time = time.perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            execution_time = time.perf_counter() - start_time
            logger.debug(f"Failed {func.__name__} after {execution_time:.6f}s: {e}")
            raise
        execution_time = time.perf_counter() - start_time
        logger.debug(f"Completed {func.__name__} in {execution_time:.6f}s")
        return result

    return wrapper
