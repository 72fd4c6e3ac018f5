"""Logging configuration for Handle Agent.

This module defines the logging infrastructure shared by the CLI and the
desktop front end:
- Standard application logging with optional rotation
- Structured JSON logging for machine parsing
- Timing helpers for generation and command runs

Front ends should call ``configure_logging`` once at startup.
"""

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Callable, Iterator, Optional, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
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

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data)


def timing_decorator(func: F) -> F:
    """Decorator to measure and log function execution time at DEBUG.

    Args:
        func: Function to measure

    Returns:
        Wrapped function that logs execution time
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start_time = time.perf_counter()
        success = False
        try:
            result = func(*args, **kwargs)
            success = True
            return result
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger = logging.getLogger(f"{func.__module__}.{func.__name__}")
            logger.debug(f"Function {func.__name__} took {duration_ms:.2f}ms (success={success})")

    return cast(F, wrapper)


@contextmanager
def log_performance(operation: str, logger: Optional[logging.Logger] = None) -> Iterator[None]:
    """Context manager that logs how long ``operation`` took.

    Example:
        with log_performance("suggest"):
            suggestions = generate_suggestions(name, salt)
    """
    if logger is None:
        logger = logging.getLogger()

    start_time = time.perf_counter()
    success = False
    try:
        yield
        success = True
    finally:
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{operation} completed in {duration_ms:.2f}ms (success={success})",
            extra={
                "extra_fields": {
                    "event_type": "performance",
                    "operation": operation,
                    "duration_ms": duration_ms,
                    "success": success,
                }
            },
        )


def configure_logging(
    log_file: Optional[Path] = None,
    level: int = logging.INFO,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
    use_json: bool = False,
    console_output: bool = True,
) -> None:
    """Configure root logging handlers with optional JSON formatting.

    Parameters
    ----------
    log_file: Path, optional
        If provided, logs will be written to this file with rotation.  The
        directory will be created if it does not exist.
    level: int
        Logging level (e.g. ``logging.INFO`` or ``logging.DEBUG``).
    max_bytes: int
        Maximum size of each log file before rotation.
    backup_count: int
        Number of rotated log files to keep.
    use_json: bool
        If True, use JSON structured logging format.
    console_output: bool
        If True, enable console output handler.
    """
    # Prevent duplicate handlers if configure_logging is called multiple times
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(level)

    if use_json:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    if console_output:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def configure_from_settings(
    log_dir: Optional[Path],
    level_name: str = "INFO",
    use_json: bool = False,
    console_output: bool = True,
    file_name: str = "handle_agent.log",
) -> None:
    """Configure logging from CLI/config style settings.

    A ``log_dir`` of ``None`` disables the log file.
    """
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    log_file = log_dir / file_name if log_dir is not None else None
    configure_logging(
        log_file=log_file,
        level=level,
        use_json=use_json,
        console_output=console_output,
    )
    logging.getLogger(__name__).debug(f"Logging configured: level={level_name}, file={log_file}")
