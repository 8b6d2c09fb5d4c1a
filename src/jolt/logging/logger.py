# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""
Logger implementation for the Jolt framework.

This module provides the default logger implementation based on Python's
standard logging module, enhanced with structured logging capabilities.
"""

from __future__ import annotations

import contextlib
import datetime
import enum
import json
import logging
import sys
import uuid
from contextvars import ContextVar
from logging import StreamHandler
from typing import TYPE_CHECKING, Any

from jolt.logging.config import LoggingSettings
from jolt.logging.level import LogLevel

if TYPE_CHECKING:
    from collections.abc import Generator

    from jolt.logging.protocols import LoggerProtocol

# Context variable for storing log context data
_log_context: ContextVar[dict[str, Any]] = ContextVar("jolt_log_context", default={})

_CONTEXT_ATTRIBUTE = "jolt_context"


class JoltJsonEncoder(json.JSONEncoder):
    """JSON encoder that falls back to strings for unserializable objects."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, (datetime.datetime, datetime.date)):
            return obj.isoformat()
        if isinstance(obj, uuid.UUID):
            return str(obj)
        if isinstance(obj, enum.Enum):
            return obj.value
        if isinstance(obj, type):
            return f"{obj.__module__}.{obj.__qualname__}"
        if hasattr(obj, "model_dump"):  # Pydantic v2 models
            return obj.model_dump()
        if isinstance(obj, BaseException):
            return str(obj)
        return str(obj)


class StructuredFormatter(logging.Formatter):
    """Formatter that supports structured logging with context data."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
            include_level: Whether to include log level in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with its structured context."""
        extra: dict[str, Any] = dict(_log_context.get())
        extra.update(getattr(record, _CONTEXT_ATTRIBUTE, None) or {})

        if self.json_format:
            return self._format_json(record, extra)
        return self._format_text(super().format(record), extra)

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "name": record.name,
            **extra,
        }
        if self.include_level:
            log_data["level"] = record.levelname
        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, cls=JoltJsonEncoder, ensure_ascii=False)

    def _format_text(self, message: str, extra: dict[str, Any]) -> str:
        if not extra:
            return message
        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        return f"{message} {ctx_str}"

    def _format_value(self, value: Any) -> str:
        """Format a value for text output."""
        if isinstance(value, str):
            if " " in value:
                return f'"{value}"'
            return value
        if isinstance(value, type):
            return f"{value.__module__}.{value.__qualname__}"
        if isinstance(value, enum.Enum):
            return value.name
        if isinstance(value, (datetime.datetime, datetime.date)):
            return value.isoformat()
        if isinstance(value, BaseException):
            return json.dumps({"type": type(value).__name__, "message": str(value)})
        try:
            return json.dumps(value, cls=JoltJsonEncoder)
        except (TypeError, ValueError):
            return str(value)


class JoltLogger:
    """Default logger implementation for the Jolt framework.

    Wraps a standard library logger. Keyword arguments given to the log
    methods are attached to the record as structured context.
    """

    def __init__(
        self,
        name: str,
        level: str | LogLevel | None = None,
        settings: LoggingSettings | None = None,
    ) -> None:
        """
        Initialize a new logger.

        Args:
            name: Logger name
            level: Log level; defaults to the configured level
            settings: Optional logger settings (loads from environment if None)
        """
        self.name = name
        self._settings = settings or LoggingSettings.load()
        self._logger = logging.getLogger(name)
        self._bound_context: dict[str, Any] = {}
        self._configure(level or self._settings.level)

    @property
    def settings(self) -> LoggingSettings:
        return self._settings

    def _configure(self, level: str | LogLevel) -> None:
        """Install handlers and formatter according to the settings."""
        if isinstance(level, LogLevel):
            level = level.value
        self._logger.setLevel(LogLevel.from_string(level).to_stdlib_level())

        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)

        formatter = StructuredFormatter(
            json_format=self._settings.json_format,
            include_timestamp=self._settings.include_timestamp,
            include_level=self._settings.include_level,
        )

        if self._settings.console_enabled:
            console = StreamHandler(sys.stdout)
            console.setFormatter(formatter)
            self._logger.addHandler(console)

        if self._settings.file_enabled and self._settings.file_path:
            file_handler = logging.FileHandler(self._settings.file_path)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

        self._logger.propagate = False

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        exc_info = kwargs.pop("exc_info", None)
        combined_context = {**self._bound_context, **kwargs}
        self._logger.log(
            level,
            message,
            exc_info=exc_info,
            extra={_CONTEXT_ATTRIBUTE: combined_context},
        )

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        """Set the logger's level."""
        self._logger.setLevel(level.to_stdlib_level())

    def is_enabled_for(self, level: LogLevel) -> bool:
        return self._logger.isEnabledFor(level.to_stdlib_level())

    @contextlib.contextmanager
    def context(self, **kwargs: Any) -> Generator[None]:
        """
        Add contextual information to every log message emitted inside the block.

        Args:
            **kwargs: Context key-value pairs
        """
        token = _log_context.set({**_log_context.get(), **kwargs})
        try:
            yield
        finally:
            _log_context.reset(token)

    def bind(self, **kwargs: Any) -> LoggerProtocol:
        """Create a logger sharing this logger's handlers with extra bound context."""
        bound = object.__new__(type(self))
        bound.name = self.name
        bound._settings = self._settings
        bound._logger = self._logger
        bound._bound_context = {**self._bound_context, **kwargs}
        return bound


def get_logger(
    name: str,
    level: LogLevel | None = None,
    settings: LoggingSettings | None = None,
) -> JoltLogger:
    """Get a logger for the specified name.

    Args:
        name: Logger name (typically __name__)
        level: Optional log level override
        settings: Optional settings; loaded from the environment when omitted

    Returns:
        Configured logger instance
    """
    return JoltLogger(name, level=level, settings=settings)
