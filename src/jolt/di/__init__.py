# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework

"""
Dependency injection for the Jolt framework.

Register services on a ``ServiceCollection``, build a ``ServiceProvider`` and
activate objects with ``ActivatorUtilities.create_instance``.
"""

from __future__ import annotations

from jolt.di.activator import ActivatorUtilities, create_instance
from jolt.di.collection import ServiceCollection
from jolt.di.defaults import ErrorHandlerProtocol, LoggingErrorHandler
from jolt.di.descriptor import ServiceDescriptor
from jolt.di.errors import (
    AmbiguousConstructorError,
    CircularDependencyError,
    DIError,
    DuplicateRegistrationError,
    NoPublicConstructorError,
    NoSuitableArgumentError,
    ServiceNotRegisteredError,
    TypeMismatchError,
)
from jolt.di.initializers import (
    Initializer,
    InitializerParameter,
    InitializerTable,
    describe,
    discover_initializers,
    initializer,
)
from jolt.di.lifetime import ServiceLifetime
from jolt.di.overrides import ActivationOverrides, RawValue, TypedValue
from jolt.di.protocols import ServiceProviderProtocol, StartupProtocol
from jolt.di.provider import ServiceProvider
from jolt.di.resolver import ConstructorArgumentResolver
from jolt.di.startup import add_default_services, default_services, use_startup

__all__ = [
    "ActivationOverrides",
    "ActivatorUtilities",
    "AmbiguousConstructorError",
    "CircularDependencyError",
    "ConstructorArgumentResolver",
    "DIError",
    "DuplicateRegistrationError",
    "ErrorHandlerProtocol",
    "Initializer",
    "InitializerParameter",
    "InitializerTable",
    "LoggingErrorHandler",
    "NoPublicConstructorError",
    "NoSuitableArgumentError",
    "RawValue",
    "ServiceCollection",
    "ServiceDescriptor",
    "ServiceLifetime",
    "ServiceNotRegisteredError",
    "ServiceProvider",
    "ServiceProviderProtocol",
    "StartupProtocol",
    "TypeMismatchError",
    "TypedValue",
    "add_default_services",
    "create_instance",
    "default_services",
    "describe",
    "discover_initializers",
    "initializer",
    "use_startup",
]
