# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""
Immutable service provider.

A ``ServiceProvider`` is a read-only snapshot of a ``ServiceCollection``. The
only state that changes after construction is each singleton descriptor's
cached instance, filled once on first resolution.
"""

from __future__ import annotations

import contextlib
import threading
from collections.abc import Generator, Mapping
from contextvars import ContextVar
from types import MappingProxyType
from typing import Any, TypeVar

from jolt.config import ServiceSettings
from jolt.di.activator import ActivatorUtilities
from jolt.di.descriptor import ServiceDescriptor
from jolt.di.errors import CircularDependencyError, ServiceNotRegisteredError
from jolt.di.initializers import InitializerTable
from jolt.di.type_utils import type_full_name
from jolt.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)

# Contracts currently being activated in this context, outermost first
_RESOLUTION_CHAIN: ContextVar[tuple[type[Any], ...]] = ContextVar(
    "jolt_resolution_chain", default=()
)


class ServiceProvider:
    """Resolves registered services by contract type."""

    __slots__ = ("_activation_lock", "_descriptors", "_initializers", "_settings")

    def __init__(
        self,
        descriptors: Mapping[type[Any], ServiceDescriptor[Any]],
        initializers: InitializerTable | None = None,
        settings: ServiceSettings | None = None,
    ) -> None:
        self._descriptors: Mapping[type[Any], ServiceDescriptor[Any]] = MappingProxyType(
            dict(descriptors)
        )
        self._initializers = (
            initializers.copy() if initializers is not None else InitializerTable()
        )
        self._settings = settings or ServiceSettings.load()
        self._activation_lock = threading.RLock()

    @property
    def contracts(self) -> tuple[type[Any], ...]:
        return tuple(self._descriptors)

    @property
    def initializers(self) -> InitializerTable:
        return self._initializers

    @property
    def settings(self) -> ServiceSettings:
        return self._settings

    @property
    def activation_lock(self) -> threading.RLock:
        """Re-entrant lock held while any singleton of this provider is created."""
        return self._activation_lock

    def get_descriptor(self, contract: type[Any]) -> ServiceDescriptor[Any] | None:
        return self._descriptors.get(contract)

    def get_service(self, contract: type[T]) -> T | None:
        """
        Get the service registered for ``contract``.

        Returns:
            The service instance, or None if the contract is not registered

        Raises:
            CircularDependencyError: The service depends on itself
        """
        descriptor = self._descriptors.get(contract)
        if descriptor is None:
            return None
        if not self._settings.detect_cycles:
            return descriptor.get_or_create_instance(self)
        with self._resolving(contract):
            return descriptor.get_or_create_instance(self)

    def resolve(self, contract: type[T]) -> T:
        """
        Get the service registered for ``contract``.

        Raises:
            ServiceNotRegisteredError: The contract is not registered
        """
        service = self.get_service(contract)
        if service is None:
            raise ServiceNotRegisteredError(contract)
        return service

    def create_instance(self, target: type[T], overrides: Any = None) -> T:
        """Activate ``target`` with this provider's services and the given overrides."""
        return ActivatorUtilities.create_instance(self, target, overrides)

    @contextlib.contextmanager
    def _resolving(self, contract: type[Any]) -> Generator[None]:
        chain = _RESOLUTION_CHAIN.get()
        if contract in chain:
            cycle = [*chain, contract]
            logger.error(
                "Circular dependency detected",
                chain=[type_full_name(t) for t in cycle],
            )
            raise CircularDependencyError(cycle)
        token = _RESOLUTION_CHAIN.set((*chain, contract))
        try:
            yield
        finally:
            _RESOLUTION_CHAIN.reset(token)

    def __contains__(self, contract: object) -> bool:
        return contract in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        contracts = ", ".join(type_full_name(c) for c in self._descriptors)
        return f"ServiceProvider([{contracts}])"
