"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Automatic redaction of sensitive fields
- Context binding support
- Dual output (stdout + optional file logging)

Nothing is configured on import. configure_logging() installs the handlers
and processors, reading sqlforge.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- SQLFORGE_LOG_TO_FILE: Enable file logging. Default: disabled
- SQLFORGE_LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from sqlforge.utils.logging import configure_logging, get_logger
    >>> configure_logging()
    >>> logger = get_logger(__name__)
    >>> logger.debug("sql.rendered", statement="select", table="users")
"""

import logging
import os
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, MutableMapping, Optional, Union

import structlog
from pydantic import ValidationError
from structlog.types import EventDict, Processor

from sqlforge.config import get_settings

# Sensitive key patterns for redaction
SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*api_key.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r"^DATABASE_URL$", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Redact sensitive values from a dictionary before logging.

    Args:
        data: Dictionary that may contain sensitive data

    Returns:
        New dictionary with sensitive values replaced by [REDACTED]

    Example:
        >>> sanitize_for_logging({"password": "secret123", "user": "admin"})
        {'password': '[REDACTED]', 'user': 'admin'}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(pattern.match(key) for pattern in SENSITIVE_PATTERNS):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor that redacts sensitive fields in event_dict."""
    return sanitize_for_logging(dict(event_dict))


def _get_log_level() -> int:
    """Get log level from settings, falling back to the raw environment."""
    try:
        return get_settings().log_level_value
    except ValidationError:
        # Invalid settings must not prevent logging from coming up
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()
        return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    try:
        return get_settings().log_to_file
    except ValidationError:
        return os.getenv("SQLFORGE_LOG_TO_FILE", "").lower() in ("1", "true", "yes")


def _get_log_dir() -> str:
    try:
        return get_settings().log_file_dir
    except ValidationError:
        return os.getenv("SQLFORGE_LOG_FILE_DIR", "logs")


def _get_log_file_path(log_dir: Path) -> Path:
    """Get the log file path with date-based naming."""
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: sqlforge-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"sqlforge-{date_str}.log"


# Handlers installed by configure_logging, replaced on the next call
_installed_handlers: List[logging.Handler] = []


def configure_logging(
    level: Optional[int] = None,
    log_to_file: Optional[bool] = None,
    log_file_dir: Optional[Union[str, Path]] = None,
) -> None:
    """Configure structlog with JSON rendering and redaction.

    Importing sqlforge never touches logging; applications (and the test
    suite) call this once at startup, before the first event is logged.
    Arguments left as None are read from settings.

    Sets up:
    - ISO-8601 timestamps
    - Logger name and level
    - Redaction processor
    - JSON renderer
    - Dual output (stdout + optional file)

    Calling it again replaces the handlers installed by the previous call.
    """
    if level is None:
        level = _get_log_level()
    if log_to_file is None:
        log_to_file = _should_log_to_file()

    root = logging.getLogger()
    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()
    root.setLevel(level)

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    _installed_handlers.append(stdout_handler)

    if log_to_file:
        log_dir = Path(log_file_dir if log_file_dir is not None else _get_log_dir())
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path(log_dir)),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)

    processors: List[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(default=repr),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a structlog logger.

    The returned proxy follows whatever configuration the application
    installed, via configure_logging or its own structlog.configure call.

    Args:
        name: Logger name (typically __name__ of the calling module)
    """
    return structlog.get_logger(name)


def bind_context(name: Optional[str] = None, **kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(__name__, statement="insert", table="users")
        >>> logger.error("sql.shape_invalid", column_count=2, value_count=1)
    """
    if name is None:
        return structlog.get_logger().bind(**kwargs)
    return structlog.get_logger(name).bind(**kwargs)
