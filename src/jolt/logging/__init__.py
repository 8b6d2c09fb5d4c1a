# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework

"""
Public API for the Jolt logging system.
"""

from __future__ import annotations

from jolt.logging.config import LoggingSettings
from jolt.logging.level import LogLevel
from jolt.logging.logger import JoltLogger, StructuredFormatter, get_logger
from jolt.logging.protocols import LoggerProtocol

__all__ = [
    "JoltLogger",
    "LogLevel",
    "LoggerProtocol",
    "LoggingSettings",
    "StructuredFormatter",
    "get_logger",
]
