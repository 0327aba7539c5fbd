from typing import Optional

# Environment
from quasijson._core.environment import settings

# Errors
from quasijson._core.error import (
    JSONRepairError,
    MissingFieldSeparatorsError,
    NullInputError,
    PostRepairSyntaxError,
    RepairErrorKind,
    UnrecoverableCorruptionError,
)

# Repair pipeline
from quasijson.repair import JSONFormatter, RepairResult, format_json, repair_json_text


def init(
    log_level: Optional[str] = None,
    log_rich: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> None:
    """
    Initialize quasijson with optional logging overrides.

    Call once at startup to override the settings read from the environment.
    If not called, logging configures itself on first use.

    Args:
        log_level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR').
            If None, uses the LOG_LEVEL env var or 'INFO'.
        log_rich: Enable rich formatting. If None, uses LOG_USE_RICH.
        log_file: Also write logs to this file.

    Example:
        >>> import quasijson
        >>> quasijson.init(log_level='DEBUG', log_rich=False)
    """
    from quasijson.logging import configure_logging

    configure_logging(
        level=log_level, use_rich=log_rich, file_path=log_file, force=True
    )


__all__ = [
    'init',
    # Repair
    'JSONFormatter',
    'RepairResult',
    'format_json',
    'repair_json_text',
    # Errors
    'JSONRepairError',
    'MissingFieldSeparatorsError',
    'NullInputError',
    'PostRepairSyntaxError',
    'RepairErrorKind',
    'UnrecoverableCorruptionError',
    # Environment
    'settings',
]
