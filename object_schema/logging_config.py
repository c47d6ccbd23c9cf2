"""Logging configuration for object-schema.

The engine modules only create module-level loggers; applications that want
output call ``setup_logging()`` once. Unspecified arguments fall back to
``SchemaSettings`` (``OBJECT_SCHEMA_LOG_LEVEL``, ``OBJECT_SCHEMA_LOG_FORMAT``,
``OBJECT_SCHEMA_LOG_FILE``).
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .exceptions import ObjectSchemaError
from .settings import get_settings

_RESERVED_ATTRS = frozenset(
    [
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "taskName", "asctime",
    ]
)


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def __init__(self, include_context: bool = True):
        """
        Initialize JSON formatter.

        Args:
            include_context: Whether to include module/function/line fields
        """
        super().__init__()
        self.include_context = include_context

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON string."""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.include_context:
            log_data["module"] = record.module
            log_data["function"] = record.funcName
            log_data["line"] = record.lineno

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Extra fields passed through ``extra=`` or a LoggerAdapter
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Format log records in human-readable format with colors (optional)."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def __init__(self, use_colors: bool = False, include_context: bool = False):
        if include_context:
            fmt = "[%(levelname)s] %(asctime)s - %(name)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s"
        else:
            fmt = "[%(levelname)s] %(asctime)s - %(name)s - %(message)s"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")
        self.use_colors = use_colors and sys.stdout.isatty()

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)

        if self.use_colors:
            color = self.COLORS.get(record.levelname, "")
            reset = self.COLORS["RESET"]
            return f"{color}{formatted}{reset}"

        return formatted


def setup_logging(
    level: Optional[int] = None,
    format_type: Optional[str] = None,
    log_file: Optional[Path] = None,
    use_colors: bool = False,
    include_context: bool = False,
) -> None:
    """
    Configure root logging.

    Args:
        level: Logging level (defaults to OBJECT_SCHEMA_LOG_LEVEL or INFO)
        format_type: Format type ('json', 'human', 'simple')
        log_file: Optional path to a rotating log file (always JSON)
        use_colors: Use ANSI colors in console output
        include_context: Include module/function context in logs

    Examples:
        >>> setup_logging()
        >>> setup_logging(level=logging.DEBUG, format_type="json")
    """
    settings = get_settings()

    if level is None:
        level = logging.getLevelName(settings.log_level)

    if format_type is None:
        format_type = settings.log_format

    if log_file is None and settings.log_file:
        log_file = Path(settings.log_file)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)

    formatter: logging.Formatter
    if format_type == "json":
        formatter = JSONFormatter(include_context=include_context)
    elif format_type == "simple":
        formatter = logging.Formatter("%(levelname)s: %(message)s")
    else:
        formatter = HumanReadableFormatter(use_colors=use_colors, include_context=include_context)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        # 10MB max, 5 backups
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(JSONFormatter(include_context=True))
        root_logger.addHandler(file_handler)


def get_logger(name: str, extra: Optional[Dict[str, Any]] = None) -> Union[logging.Logger, logging.LoggerAdapter]:
    """
    Get a logger with optional extra context.

    Example:
        >>> logger = get_logger(__name__, extra={"schema": "package"})
        >>> logger.info("Merging manifests")
    """
    logger = logging.getLogger(name)

    if extra:
        return logging.LoggerAdapter(logger, extra)

    return logger


def log_exception(logger: Union[logging.Logger, logging.LoggerAdapter], message: str, exc: Exception) -> None:
    """
    Log an exception with full context.

    ``ObjectSchemaError`` instances contribute their structured ``to_dict()``
    fields (prefixed with ``error_``) so JSON logs can be filtered by key or
    error code.
    """
    extra: Dict[str, Any] = {
        "exception_type": type(exc).__name__,
        "exception_message": str(exc),
    }
    if isinstance(exc, ObjectSchemaError):
        extra["error_code"] = exc.error_code
        extra["error_key"] = exc.key
        extra["error_details"] = exc.details

    logger.error(f"{message}: {exc}", exc_info=exc, extra=extra)
