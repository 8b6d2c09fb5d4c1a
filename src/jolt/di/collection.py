# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""
Service collection for Jolt DI.

The collection is the mutable builder side of the container: services are
registered here and then snapshotted into an immutable ``ServiceProvider``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from jolt.config import ServiceSettings
from jolt.di.descriptor import ServiceDescriptor
from jolt.di.errors import DuplicateRegistrationError
from jolt.di.initializers import Initializer, InitializerTable
from jolt.di.lifetime import ServiceLifetime
from jolt.di.provider import ServiceProvider
from jolt.di.type_utils import type_full_name
from jolt.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class ServiceCollection:
    """
    A collection of service registrations.

    Example:
        ```python
        services = ServiceCollection()
        services.add_singleton(NavigationProtocol, BrowserNavigation)
        services.add_transient(HomePage)
        provider = services.build_service_provider()
        ```
    """

    def __init__(self) -> None:
        self._descriptors: dict[type[Any], ServiceDescriptor[Any]] = {}
        self._initializers = InitializerTable()

    def add_singleton(
        self,
        contract: type[T],
        implementation: type[Any] | None = None,
        instance: T | None = None,
    ) -> ServiceCollection:
        """
        Register a service with one instance per provider.

        Args:
            contract: The type callers ask for
            implementation: The type to activate; defaults to the type of
                ``instance`` or to ``contract`` itself
            instance: A ready-made instance to hand out instead of activating one

        Raises:
            DuplicateRegistrationError: ``contract`` is already registered
        """
        if implementation is None:
            implementation = type(instance) if instance is not None else contract
        return self._add(
            ServiceDescriptor(implementation, contract, ServiceLifetime.SINGLETON, instance)
        )

    def add_transient(
        self, contract: type[T], implementation: type[Any] | None = None
    ) -> ServiceCollection:
        """
        Register a service that is activated anew on every resolution.

        Raises:
            DuplicateRegistrationError: ``contract`` is already registered
        """
        return self._add(
            ServiceDescriptor(implementation or contract, contract, ServiceLifetime.TRANSIENT)
        )

    def _add(self, descriptor: ServiceDescriptor[Any]) -> ServiceCollection:
        if descriptor.contract in self._descriptors:
            raise DuplicateRegistrationError(descriptor.contract)
        self._descriptors[descriptor.contract] = descriptor
        logger.debug(
            "Registered service",
            contract=type_full_name(descriptor.contract),
            implementation=type_full_name(descriptor.implementation),
            lifetime=descriptor.lifetime.value,
        )
        return self

    def remove_services(self, contract: type[Any]) -> ServiceCollection:
        """Remove the registration for ``contract``, if there is one."""
        if self._descriptors.pop(contract, None) is not None:
            logger.debug("Removed service", contract=type_full_name(contract))
        return self

    def add_initializer(
        self, target: type[Any], initializer: Initializer | None = None
    ) -> ServiceCollection:
        """
        Declare an explicit initializer for ``target``.

        Once a type has an entry, only its declared initializers are used;
        calling this with no initializer declares a type with none.
        """
        self._initializers.add(target, initializer)
        return self

    def get_descriptor(self, contract: type[Any]) -> ServiceDescriptor[Any] | None:
        return self._descriptors.get(contract)

    def copy_without_instances(self) -> ServiceCollection:
        """Copy this collection, dropping every instance created by a provider."""
        copy = ServiceCollection()
        copy._descriptors = {
            contract: descriptor.copy_without_instance()
            for contract, descriptor in self._descriptors.items()
        }
        copy._initializers = self._initializers.copy()
        return copy

    def build_service_provider(
        self, settings: ServiceSettings | None = None
    ) -> ServiceProvider:
        """Snapshot the current registrations into a new provider."""
        provider = ServiceProvider(
            {
                contract: descriptor.copy_without_instance()
                for contract, descriptor in self._descriptors.items()
            },
            self._initializers,
            settings,
        )
        logger.debug("Built service provider", services=len(provider))
        return provider

    @property
    def initializers(self) -> InitializerTable:
        return self._initializers

    def __contains__(self, contract: object) -> bool:
        return contract in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[ServiceDescriptor[Any]]:
        return iter(list(self._descriptors.values()))
