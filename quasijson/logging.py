"""
Public API for logging functionality.

Loggers configure themselves from environment variables on first use.

Quick Start:
    >>> from quasijson.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Hello world")

Environment Variables:
    - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    - LOG_USE_RICH: Enable rich formatting (true/false)
    - LOG_FILE_PATH: Optional log file path
    - LOG_MAX_INPUT_CHARS: Truncation limit for inputs echoed into log lines
"""

from quasijson._core.logging import (
    RichLogger,
    clear_logging_config,
    configure_logging,
    get_logger,
    is_logging_configured,
    log_summary,
)

__all__ = [
    'clear_logging_config',
    'configure_logging',
    'get_logger',
    'is_logging_configured',
    'log_summary',
    'RichLogger',
]
