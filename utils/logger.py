# utils/logger.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Logging utility for expression transformations with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for expression processing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class BoolExpLogger:
    """Centralized logger for expression processing with structured output."""

    def __init__(self, name: str = "boolexps", level: LogLevel = LogLevel.INFO):
        """Initialize the expression logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(BoolExpFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    def is_debug_enabled(self) -> bool:
        """Return True if DEBUG messages would be emitted."""
        return self.logger.isEnabledFor(logging.DEBUG)

    # Specialized methods for expression processing events.
    # Expressions are rendered only when DEBUG output is enabled.
    def transformation_result(self, name: str, before: object, after: object):
        """Log the outcome of a named transformation."""
        if self.is_debug_enabled():
            self.debug(f"{name}: {before} → {after}")

    def deserialization_failed(self, reason: str):
        """Log why a piece of JSON text was rejected."""
        self.debug(f"Deserialization failed: {reason}")

    def equivalence_result(
        self, left: object, right: object, result: bool, reason: Optional[str] = None
    ):
        """Log an equivalence verdict."""
        if self.is_debug_enabled():
            reason_str = f" ({reason})" if reason else ""
            self.debug(f"{left} ≡ {right}: {result}{reason_str}")


class BoolExpFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[BoolExpLogger] = None


def get_logger(name: str = "boolexps") -> BoolExpLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "boolexps")

    Returns:
        BoolExpLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = BoolExpLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
