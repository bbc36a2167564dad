"""
Shared Logger

Centralized logging configuration for the application.
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

# Set by the request logging middleware for the duration of a request
correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    """Attach the current request correlation ID to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id_var.get() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "correlation_id": getattr(record, "correlation_id", "-"),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra_data = getattr(record, "extra_data", None)
        if extra_data is not None:
            log_data["extra"] = extra_data

        return json.dumps(log_data, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored console log formatter."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format with colors without leaking them into other handlers."""
        original = record.levelname
        color = self.COLORS.get(original, self.RESET)
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class ContextLogger:
    """Logger with context support."""

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        """
        Initialize context logger.

        Args:
            name: Logger name
            context: Default context to include in all logs
        """
        self._logger = logging.getLogger(name)
        self._context = context or {}

    @property
    def name(self) -> str:
        return self._logger.name

    def with_context(self, **kwargs) -> "ContextLogger":
        """Create new logger with additional context."""
        return ContextLogger(self._logger.name, {**self._context, **kwargs})

    def _log(self, level: int, message: str, **kwargs) -> None:
        extra = {**self._context, **kwargs}
        self._logger.log(level, message, extra={"extra_data": extra})

    def debug(self, message: str, **kwargs) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log exception with traceback."""
        self._logger.exception(message, extra={"extra_data": {**self._context, **kwargs}})


LOG_LINE_FORMAT = "%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s"


def configure_logging(
    level: str = "INFO",
    format_type: str = "colored",
    log_file: str | None = None,
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 'colored', 'json', or 'plain'
        log_file: Optional file path for file logging
    """
    log_level = getattr(logging, level.upper())
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.addFilter(CorrelationIdFilter())

    if format_type == "json":
        console_handler.setFormatter(JSONFormatter())
    elif format_type == "colored":
        console_handler.setFormatter(ColoredFormatter(LOG_LINE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    else:
        console_handler.setFormatter(logging.Formatter(LOG_LINE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.addFilter(CorrelationIdFilter())
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    # SQLAlchemy echoes through its own logger when DB_ECHO is set
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str, context: dict[str, Any] | None = None) -> ContextLogger:
    """
    Get a context-aware logger.

    Args:
        name: Logger name (typically __name__)
        context: Default context
    """
    return ContextLogger(name, context)


def get_service_logger(service_name: str) -> ContextLogger:
    """Get logger for use cases and domain services."""
    return get_logger(f"service.{service_name}", {"component": "service", "service": service_name})
