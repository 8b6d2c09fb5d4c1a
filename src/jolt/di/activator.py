# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""
Object activation for Jolt DI.

``ActivatorUtilities`` picks the initializer of a type and invokes it with
arguments drawn from overrides and a service provider.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from jolt.di.errors import AmbiguousConstructorError, NoPublicConstructorError
from jolt.di.initializers import Initializer, InitializerTable
from jolt.di.overrides import ActivationOverrides
from jolt.di.resolver import ConstructorArgumentResolver
from jolt.di.type_utils import type_full_name
from jolt.logging import get_logger

if TYPE_CHECKING:
    from jolt.di.protocols import ServiceProviderProtocol

T = TypeVar("T")

logger = get_logger(__name__)


class ActivatorUtilities:
    """Creates instances of arbitrary types using a service provider."""

    @staticmethod
    def select_initializer(target: type[Any], initializers: list[Initializer]) -> Initializer:
        """
        Choose the initializer used to activate ``target``.

        A single initializer is always used. When there are several, the
        parameterless one is preferred.

        Raises:
            NoPublicConstructorError: ``initializers`` is empty
            AmbiguousConstructorError: Several initializers, none parameterless
        """
        if not initializers:
            raise NoPublicConstructorError(target)
        if len(initializers) == 1:
            return initializers[0]
        for candidate in initializers:
            if candidate.is_parameterless:
                return candidate
        raise AmbiguousConstructorError(target, [str(c) for c in initializers])

    @staticmethod
    def create_instance(
        provider: ServiceProviderProtocol,
        target: type[T],
        overrides: Any = None,
    ) -> T:
        """
        Create an instance of ``target``.

        Args:
            provider: Source of registered services
            target: The type to activate
            overrides: Per-call values taking priority over services; an
                ``ActivationOverrides``, a mapping, or a structured object

        Returns:
            The new instance
        """
        if provider is None:
            raise ValueError("provider must not be None")
        if target is None:
            raise ValueError("target must not be None")

        table = getattr(provider, "initializers", None)
        if not isinstance(table, InitializerTable):
            table = InitializerTable()

        selected = ActivatorUtilities.select_initializer(target, table.describe(target))
        resolver = ConstructorArgumentResolver(
            provider, ActivationOverrides.coerce(overrides)
        )
        arguments = resolver.resolve(target, selected)

        settings = getattr(provider, "settings", None)
        if settings is not None and settings.trace_activations:
            logger.debug(
                "Activating service",
                target=type_full_name(target),
                initializer=str(selected),
            )
        return selected.invoke(arguments)


create_instance = ActivatorUtilities.create_instance
