import json
import logging
import time
from contextlib import contextmanager
from logging import StreamHandler
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from rich.logging import RichHandler

from quasijson._core.environment import settings
from quasijson._core.utils import Timer

# --- Global State ---
_log_stats: Dict[str, Dict[str, int]] = {}
_session_start_time: float = time.monotonic()
_logging_configured = False
DEFAULT_LOG_LEVEL = 'INFO'
_LEVEL_NAMES = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def truncate_for_log(value: Any, limit: Optional[int] = None) -> str:
    """Render ``value`` for a log line, cut to ``settings.log_max_input_chars``."""
    limit = settings.log_max_input_chars if limit is None else limit
    text = value if isinstance(value, str) else repr(value)
    if len(text) <= limit:
        return text
    return f'{text[:limit]}... ({len(text) - limit} more chars)'


class RichLogger(logging.Logger):
    """
    Logger class that counts emitted records per level and adds a few
    high-level helpers used by the repair pipeline.
    """

    def _log(
        self,
        level,
        msg,
        args,
        exc_info=None,
        extra=None,
        stack_info=False,
        stacklevel=1,
        **kwargs,
    ):
        stats = _log_stats.setdefault(
            self.name, {name: 0 for name in _LEVEL_NAMES}
        )
        level_name = logging.getLevelName(level)
        if level_name in stats:
            stats[level_name] += 1
        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel)

    def success(self, message: str, *args, **kwargs):
        """Log an INFO message prefixed with a checkmark."""
        self.info(f'✅ {message}', *args, **kwargs)

    def warning_highlight(self, message: str, *args, **kwargs):
        self.warning(f'⚠️  {message}', *args, **kwargs)

    def log_json(
        self,
        data: Union[Dict, List],
        level: Union[int, str] = logging.INFO,
        title: Optional[str] = None,
    ):
        """Pretty-print and log a JSON object or list."""
        level_num = (
            getattr(logging, level.upper(), logging.INFO)
            if isinstance(level, str)
            else level
        )
        if not self.isEnabledFor(level_num):
            return
        try:
            json_str = json.dumps(data, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            self.error(f'Failed to serialize JSON data: {e}')
            return
        if title:
            self.log(level_num, f'{title}:')
        self.log(level_num, f'\n{json_str}')

    @contextmanager
    def log_operation(self, operation_name: str, level: int = logging.DEBUG):
        """Context manager logging the start, end and duration of an operation."""
        if not self.isEnabledFor(level):
            yield Timer()
            return

        self.log(level, f'🔹 Starting | {operation_name}')
        timer = Timer()
        try:
            yield timer
        except Exception:
            timer.stop()
            self.log(
                level,
                f'❌ Failed   | {operation_name} after {timer.elapsed_time:.4f}s',
            )
            raise
        timer.stop()
        self.log(
            level, f'✅ Completed | {operation_name} in {timer.elapsed_time:.4f}s'
        )


def configure_logging(
    level: Optional[str] = None,
    use_rich: Optional[bool] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configures the logging system.

    Direct arguments win over the global settings, which are loaded from
    environment variables or a .env file.

    Args:
        level: Override the log level (e.g., 'DEBUG').
        use_rich: Override the use of rich formatting.
        format_string: Override the log format string.
        file_path: Override the log file path.
        force: If True, will overwrite an existing configuration.
    """
    global _logging_configured, _session_start_time
    init_logger = logging.getLogger(__name__)

    if _logging_configured and not force:
        init_logger.debug('Logging already configured. Skipping reconfiguration.')
        return

    if not _logging_configured:
        _session_start_time = time.monotonic()

    default_level = 'DEBUG' if settings.debug else settings.log_level
    final_level = (level or default_level).upper()
    final_use_rich = use_rich if use_rich is not None else settings.log_use_rich
    final_format_string = format_string or settings.log_format_string
    final_file_path = file_path or settings.log_file_path

    logging.setLoggerClass(RichLogger)
    root_logger = logging.getLogger()
    root_logger.setLevel(final_level)

    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    if final_use_rich:
        handler = RichHandler(rich_tracebacks=True, show_path=False, markup=False)
        formatter = logging.Formatter('%(message)s', datefmt='[%X]')
    else:
        handler = StreamHandler()
        formatter = logging.Formatter(
            final_format_string
            or '%(asctime)s | %(name)-24s | %(levelname)-8s | %(message)s'
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    if final_file_path:
        try:
            Path(final_file_path).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(final_file_path, mode='a')
            file_handler.setFormatter(
                logging.Formatter(
                    final_format_string
                    or '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
                )
            )
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.error(
                f'Failed to configure file handler at {final_file_path}: {e}'
            )

    _logging_configured = True
    init_logger.debug(
        f'Logging configured. Level: {final_level}, Rich: {final_use_rich}'
    )


def is_logging_configured() -> bool:
    return _logging_configured


def clear_logging_config() -> None:
    """Drop root handlers and forget the configuration (useful for testing)."""
    global _logging_configured
    logging.getLogger().handlers.clear()
    _logging_configured = False


def get_logger(name: str) -> RichLogger:
    """
    Gets a logger instance. If logging is not yet configured,
    it applies a default configuration first.
    """
    if not _logging_configured:
        configure_logging()
    logging.setLoggerClass(RichLogger)
    return logging.getLogger(name)


def log_summary():
    """Logs a summary of all logging activity during the session."""
    logger = get_logger('quasijson.summary')
    total_runtime = time.monotonic() - _session_start_time
    logger.info('--- Logging Summary ---')
    logger.info(f'Total Session Runtime: {total_runtime:.2f} seconds')
    grand_total = sum(sum(stats.values()) for stats in _log_stats.values())
    for logger_name, stats in _log_stats.items():
        total = sum(stats.values())
        if total > 0:
            logger.info(f"Logger '{logger_name}': {total} messages")
            for level, count in stats.items():
                if count > 0:
                    logger.info(f'    - {level}: {count}')
    logger.info(f'Grand Total Messages: {grand_total}')


__all__ = [
    'clear_logging_config',
    'configure_logging',
    'get_logger',
    'is_logging_configured',
    'log_summary',
    'truncate_for_log',
    'RichLogger',
]
