# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""
Default collaborators registered by the Jolt bootstrap.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from jolt.errors import JoltError
from jolt.logging import JoltLogger, get_logger


@runtime_checkable
class ErrorHandlerProtocol(Protocol):
    """Receives errors reported by application components."""

    def on_error(self, exception: BaseException, message: str | None = None) -> None: ...


class LoggingErrorHandler:
    """Reports errors to the framework log."""

    def __init__(self) -> None:
        self._logger: JoltLogger = get_logger("jolt.errors")

    def on_error(self, exception: BaseException, message: str | None = None) -> None:
        context = {"error_type": type(exception).__name__}
        if isinstance(exception, JoltError):
            context.update(code=exception.code.code, category=exception.category.name)
            context.update(exception.context)
        self._logger.error(
            message or str(exception),
            exc_info=(type(exception), exception, exception.__traceback__),
            **context,
        )
