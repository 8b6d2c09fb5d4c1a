# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""
Argument resolution for initializer parameters.

Each parameter is resolved independently, trying in order:

1. a typed override with a matching name (must be type compatible),
2. a raw override with a matching name,
3. the service registered for the parameter type,
4. the parameter's default value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from jolt.di.errors import NoSuitableArgumentError, TypeMismatchError
from jolt.di.overrides import ActivationOverrides, RawValue, TypedValue
from jolt.di.type_utils import is_assignable, service_type_of, type_full_name
from jolt.logging import get_logger

if TYPE_CHECKING:
    from jolt.di.initializers import Initializer, InitializerParameter
    from jolt.di.protocols import ServiceProviderProtocol

logger = get_logger(__name__)

_UNRESOLVED: Final[Any] = object()


class ConstructorArgumentResolver:
    """Resolves the arguments of one initializer call."""

    def __init__(
        self,
        provider: ServiceProviderProtocol,
        overrides: ActivationOverrides | None = None,
    ) -> None:
        if provider is None:
            raise ValueError("provider must not be None")
        self.provider = provider
        self.overrides = overrides

    @property
    def has_overrides(self) -> bool:
        return self.overrides is not None

    def resolve(self, target: type[Any], initializer: Initializer) -> list[Any]:
        """Return one argument per initializer parameter, in declaration order."""
        return [
            self.resolve_parameter(target, parameter)
            for parameter in initializer.parameters
        ]

    def resolve_parameter(
        self, target: type[Any], parameter: InitializerParameter
    ) -> Any:
        """
        Resolve a single parameter.

        Raises:
            TypeMismatchError: A typed override matched by name but its declared
                type is incompatible with the parameter
            NoSuitableArgumentError: Nothing could supply a required parameter
        """
        value = self._from_overrides(target, parameter)
        if value is not _UNRESOLVED:
            return value

        value = self._from_services(parameter)
        if value is not _UNRESOLVED:
            return value

        if parameter.is_optional:
            logger.debug(
                "Using default value",
                target=type_full_name(target),
                parameter=parameter.name,
            )
            return parameter.default

        raise NoSuitableArgumentError(
            target, parameter.name, parameter.declared_type, self.has_overrides
        )

    def _from_overrides(self, target: type[Any], parameter: InitializerParameter) -> Any:
        if self.overrides is None:
            return _UNRESOLVED

        match self.overrides.lookup(parameter.name):
            case TypedValue(value=value, declared_type=declared_type):
                if value is not None and not is_assignable(
                    declared_type, parameter.declared_type
                ):
                    raise TypeMismatchError(
                        target, parameter.name, parameter.declared_type, declared_type
                    )
                return value
            case RawValue(value=value):
                return value
            case _:
                return _UNRESOLVED

    def _from_services(self, parameter: InitializerParameter) -> Any:
        service_type = service_type_of(parameter.declared_type)
        if service_type is None:
            return _UNRESOLVED
        service = self.provider.get_service(service_type)
        if service is None:
            return _UNRESOLVED
        return service
