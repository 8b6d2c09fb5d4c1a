# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""
Service descriptor for the Jolt DI container.

A descriptor binds a contract type to an implementation type and a lifetime,
and keeps track of the singleton instance once it has been created.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from jolt.di.activator import ActivatorUtilities
from jolt.di.lifetime import ServiceLifetime
from jolt.di.type_utils import type_full_name

if TYPE_CHECKING:
    from jolt.di.protocols import ServiceProviderProtocol

T = TypeVar("T")

_EMPTY: Any = object()


class ServiceDescriptor(Generic[T]):
    """Describes a single registered service and caches its singleton instance."""

    __slots__ = ("contract", "implementation", "lifetime", "_instance", "_cached", "_lock")

    def __init__(
        self,
        implementation: type[Any],
        contract: type[T],
        lifetime: ServiceLifetime,
        instance: T | None = None,
    ) -> None:
        """Initialize a service descriptor.

        Args:
            implementation: The type that implements the service
            contract: The type the service is resolved as
            lifetime: Singleton or transient
            instance: A ready-made singleton instance, if one was supplied

        Raises:
            ValueError: If either type is missing, or an instance is given for a
                transient service
        """
        if implementation is None:
            raise ValueError("implementation must not be None")
        if contract is None:
            raise ValueError("contract must not be None")
        lifetime = ServiceLifetime(lifetime)
        if instance is not None and lifetime is not ServiceLifetime.SINGLETON:
            raise ValueError(
                f"An instance can only be supplied for singleton services, not for "
                f"{type_full_name(contract)}"
            )

        self.contract = contract
        self.implementation = implementation
        self.lifetime = lifetime
        self._instance = instance
        self._cached: Any = _EMPTY
        self._lock = threading.RLock()

    @property
    def is_singleton(self) -> bool:
        return self.lifetime is ServiceLifetime.SINGLETON

    @property
    def has_instance(self) -> bool:
        """Whether this descriptor currently holds a singleton instance."""
        return self._instance is not None or self._cached is not _EMPTY

    def copy_without_instance(self) -> ServiceDescriptor[T]:
        """Copy the configuration, leaving behind any instance created by a provider."""
        return ServiceDescriptor(
            implementation=self.implementation,
            contract=self.contract,
            lifetime=self.lifetime,
            instance=self._instance,
        )

    def get_or_create_instance(self, provider: ServiceProviderProtocol) -> T:
        """
        Return the service instance for this registration.

        Singletons are activated on first use and cached for the lifetime of
        this descriptor; transients are activated on every call. The fill is
        guarded by the provider's ``activation_lock`` when it has one, else
        by this descriptor's own lock.
        """
        if not self.is_singleton:
            return ActivatorUtilities.create_instance(provider, self.implementation)

        if self._instance is not None:
            return self._instance

        # singleton fills on one provider are serialized under one re-entrant lock
        lock = getattr(provider, "activation_lock", None)
        if lock is None:
            lock = self._lock
        with lock:
            if self._cached is _EMPTY:
                self._cached = ActivatorUtilities.create_instance(
                    provider, self.implementation
                )
            return self._cached

    def __repr__(self) -> str:
        return (
            f"ServiceDescriptor(contract={type_full_name(self.contract)}, "
            f"implementation={type_full_name(self.implementation)}, "
            f"lifetime={self.lifetime.value})"
        )
