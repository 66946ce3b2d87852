"""
Secure Logging Module
=====================

Provides security-aware logging with secret filtering.

Security Features:
- Automatic secret/sensitive data filtering
- Hex-encoded salts and derived keys are redacted
- Structured logging support
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Final, Optional, Pattern

if TYPE_CHECKING:
    from credguard.core.config import LoggingConfig


# Patterns for sensitive data detection
_SENSITIVE_PATTERNS: Final[list[tuple[str, Pattern[str]]]] = [
    ("password", re.compile(r'(?i)(password|passwd|pwd)\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    ("salt", re.compile(r'(?i)(salt)\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    ("secret", re.compile(r'(?i)(secret|private[_-]?key)\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    ("credential", re.compile(r'(?i)(credential|password_hash)\s*[=:]\s*["\']?[^\s"\']+["\']?')),
    # Hex encoded secrets (salts are 32 chars at the default size)
    ("hex_secret", re.compile(r'(?i)(?:0x)?[a-f0-9]{32,}')),
]

_REDACTED_TEXT: Final[str] = "[REDACTED]"

_CONSOLE_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

PACKAGE_LOGGER: Final[str] = "credguard"


class SecureLogFilter(logging.Filter):
    """
    Log filter that removes sensitive information from log messages.

    Replaces password assignments, salts and long hex strings with
    [REDACTED]. Records are never dropped, only sanitized.
    """

    def __init__(self, name: str = "", additional_patterns: Optional[list[Pattern[str]]] = None) -> None:
        super().__init__(name)
        self._additional_patterns = additional_patterns or []

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Filter log record by redacting sensitive information.

        Args:
            record: The log record to filter

        Returns:
            Always True (record is always kept, just sanitized)
        """
        if record.msg and isinstance(record.msg, str):
            record.msg = self._sanitize(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._sanitize(v) if isinstance(v, str) else v
                               for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(
                    self._sanitize(arg) if isinstance(arg, str) else arg
                    for arg in record.args
                )

        return True

    def _sanitize(self, text: str) -> str:
        """Remove sensitive data from text."""
        result = text

        for name, pattern in _SENSITIVE_PATTERNS:
            result = pattern.sub(f"{name}={_REDACTED_TEXT}", result)

        for pattern in self._additional_patterns:
            result = pattern.sub(_REDACTED_TEXT, result)

        return result


class StructuredLogFormatter(logging.Formatter):
    """Formatter that outputs logs in JSON format for easy parsing."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_secure_logger(
    name: str,
    level: str = "INFO",
    enable_console: bool = True,
    enable_json: bool = False,
) -> logging.Logger:
    """
    Create a secure logger with automatic secret filtering.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Whether to output to stderr
        enable_json: Whether to emit JSON lines instead of plain text

    Returns:
        Configured secure logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper()))

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        if enable_json:
            console_handler.setFormatter(StructuredLogFormatter())
        else:
            console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        console_handler.addFilter(SecureLogFilter())
        logger.addHandler(console_handler)
    else:
        logger.addHandler(logging.NullHandler())

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def configure_logging(config: LoggingConfig, name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Apply a logging configuration to the ``credguard`` package logger.

    Module loggers are its children (``logging.getLogger(__name__)``) and
    propagate to it, so the level and the secure filter set here cover every
    record credguard emits. Call once at application startup.

    Args:
        config: Logging configuration to apply
        name: Logger to configure (empty string for the root logger)

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, config.level.upper()))

    logger.handlers.clear()

    if config.enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(config.format, datefmt=config.date_format))
        console_handler.addFilter(SecureLogFilter())
        logger.addHandler(console_handler)
        if name:
            logger.propagate = False
    else:
        logger.addHandler(logging.NullHandler())
        logger.propagate = True

    return logger


def configure_root_logger(config: LoggingConfig) -> None:
    """
    Configure the root logger with secure defaults.

    Covers credguard's loggers as long as configure_logging has not given
    the package logger its own console handler.
    """
    configure_logging(config, name="")
