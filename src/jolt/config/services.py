# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""
Configuration for the Jolt service container.

Settings are environment-driven through pydantic-settings and are handed to a
``ServiceProvider`` when it is built.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    """
    Settings for service providers.
    Loads from environment variables prefixed with ``JOLT_SERVICES_``.
    """

    model_config = SettingsConfigDict(
        env_prefix="JOLT_SERVICES_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    detect_cycles: bool = Field(
        default=True,
        description="Raise CircularDependencyError when a service depends on itself",
    )
    trace_activations: bool = Field(
        default=False,
        description="Log every activation with its selected initializer at debug level",
    )

    @classmethod
    def load(cls) -> ServiceSettings:
        """Load service settings from the environment or defaults."""
        return cls()
