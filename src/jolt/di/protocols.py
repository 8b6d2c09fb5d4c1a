# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""
Protocol definitions for the Jolt DI system.

These are the narrow seams external collaborators (navigation, the UI tree
builder, application startup classes) depend on.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class ServiceProviderProtocol(Protocol):
    """Anything that can provide services by contract type."""

    def get_service(self, contract: type[T]) -> T | None:
        """Return the service registered for ``contract``, or None."""
        ...


class ServiceCollectionProtocol(Protocol):
    """A mutable set of service registrations."""

    def add_singleton(
        self,
        contract: type[Any],
        implementation: type[Any] | None = None,
        instance: Any = None,
    ) -> ServiceCollectionProtocol: ...

    def add_transient(
        self, contract: type[Any], implementation: type[Any] | None = None
    ) -> ServiceCollectionProtocol: ...

    def remove_services(self, contract: type[Any]) -> ServiceCollectionProtocol: ...

    def build_service_provider(self) -> ServiceProviderProtocol: ...


@runtime_checkable
class StartupProtocol(Protocol):
    """
    Application startup object.

    ``configure_services`` is called exactly once with the service collection,
    then ``configure`` with the provider built from it.
    """

    def configure_services(self, services: ServiceCollectionProtocol) -> None: ...

    def configure(self, provider: ServiceProviderProtocol) -> None: ...
