# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""
Application bootstrap for Jolt DI.

A startup class receives the service collection to register the application's
services, then the finished provider to perform any initial work. There is no
process-wide provider: ``use_startup`` returns the provider and callers pass it
on explicitly.

Example:
    ```python
    class Startup:
        def __init__(self, errors: ErrorHandlerProtocol) -> None:
            self.errors = errors

        def configure_services(self, services: ServiceCollection) -> None:
            services.add_singleton(NavigationProtocol, BrowserNavigation)

        def configure(self, provider: ServiceProvider) -> None:
            provider.resolve(NavigationProtocol).start()

    provider = use_startup(Startup)
    ```
"""

from __future__ import annotations

from typing import Any

from jolt.config import ServiceSettings
from jolt.di.collection import ServiceCollection
from jolt.di.defaults import ErrorHandlerProtocol, LoggingErrorHandler
from jolt.di.protocols import StartupProtocol
from jolt.di.provider import ServiceProvider
from jolt.di.type_utils import type_full_name
from jolt.logging import get_logger

logger = get_logger(__name__)


def add_default_services(services: ServiceCollection) -> ServiceCollection:
    """Register the framework's default services that are not yet registered."""
    if ErrorHandlerProtocol not in services:
        services.add_singleton(ErrorHandlerProtocol, LoggingErrorHandler)
    return services


def default_services() -> ServiceCollection:
    return add_default_services(ServiceCollection())


def use_startup(
    startup_type: type[Any],
    services: ServiceCollection | None = None,
    settings: ServiceSettings | None = None,
) -> ServiceProvider:
    """
    Run an application startup class and return the resulting provider.

    The startup object itself is activated from the base services, so its
    initializer may depend on any of them.

    Args:
        startup_type: Class with ``configure_services`` and ``configure`` methods
        services: Base registrations; the framework defaults when omitted
        settings: Settings for the providers that are built

    Returns:
        The provider built after ``configure_services`` ran
    """
    base = services if services is not None else default_services()
    collection = base.copy_without_instances()

    startup = collection.build_service_provider(settings).create_instance(startup_type)
    if not isinstance(startup, StartupProtocol):
        raise TypeError(
            f"{type_full_name(startup_type)} must define configure_services() and configure()"
        )

    startup.configure_services(collection)
    provider = collection.build_service_provider(settings)
    logger.info(
        "Service provider configured",
        startup=type_full_name(startup_type),
        services=len(provider),
    )
    startup.configure(provider)
    return provider
