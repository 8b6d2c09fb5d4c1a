# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""
Service lifetime management for the Jolt DI container.
"""

from enum import Enum


class ServiceLifetime(str, Enum):
    """Enum representing the supported service lifetimes."""

    SINGLETON = "singleton"
    """Service is created once per provider and reused afterwards."""

    TRANSIENT = "transient"
    """Service is created each time it's requested."""
