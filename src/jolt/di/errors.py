# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""
Error classes for the Jolt DI system.

Every error carries an ``ErrorCode`` in the ``DI`` category and a context
dictionary naming the types and parameters involved.
"""

from __future__ import annotations

from typing import Any, Final

from jolt.di.type_utils import type_full_name
from jolt.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, JoltError

__all__ = [
    "AmbiguousConstructorError",
    "CircularDependencyError",
    "DIError",
    "DuplicateRegistrationError",
    "NoPublicConstructorError",
    "NoSuitableArgumentError",
    "ServiceNotRegisteredError",
    "TypeMismatchError",
]

ERROR_CODE_PREFIX: Final[str] = "DI"

DI: Final = ErrorCategory.get_or_create("DI")

DI_ERROR: Final = ErrorCode.get_or_create(f"{ERROR_CODE_PREFIX}_ERROR", DI)
DI_DUPLICATE_REGISTRATION: Final = ErrorCode.get_or_create(
    f"{ERROR_CODE_PREFIX}_DUPLICATE_REGISTRATION", DI
)
DI_NO_PUBLIC_CONSTRUCTOR: Final = ErrorCode.get_or_create(
    f"{ERROR_CODE_PREFIX}_NO_PUBLIC_CONSTRUCTOR", DI
)
DI_AMBIGUOUS_CONSTRUCTOR: Final = ErrorCode.get_or_create(
    f"{ERROR_CODE_PREFIX}_AMBIGUOUS_CONSTRUCTOR", DI
)
DI_TYPE_MISMATCH: Final = ErrorCode.get_or_create(
    f"{ERROR_CODE_PREFIX}_TYPE_MISMATCH", DI
)
DI_NO_SUITABLE_ARGUMENT: Final = ErrorCode.get_or_create(
    f"{ERROR_CODE_PREFIX}_NO_SUITABLE_ARGUMENT", DI
)
DI_SERVICE_NOT_REGISTERED: Final = ErrorCode.get_or_create(
    f"{ERROR_CODE_PREFIX}_SERVICE_NOT_REGISTERED", DI
)
DI_CIRCULAR_DEPENDENCY: Final = ErrorCode.get_or_create(
    f"{ERROR_CODE_PREFIX}_CIRCULAR_DEPENDENCY", DI
)


class DIError(JoltError):
    """Base class for all DI-related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = DI_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        **context: Any,
    ) -> None:
        """Initialize a DI error.

        Args:
            message: Human-readable error message
            code: Error code in the DI category
            severity: How severe this error is
            **context: Additional context information
        """
        super().__init__(message, code=code, severity=severity, context=context)


class DuplicateRegistrationError(DIError):
    """Raised when trying to register a contract that is already registered."""

    def __init__(self, contract: type[Any]) -> None:
        self.contract = contract
        super().__init__(
            f"Already a service registered with type {type_full_name(contract)}.",
            code=DI_DUPLICATE_REGISTRATION,
            contract=type_full_name(contract),
        )


class ServiceNotRegisteredError(DIError):
    """Raised by ``resolve`` when no service is registered for a contract."""

    def __init__(self, contract: type[Any]) -> None:
        self.contract = contract
        super().__init__(
            f"No service registered for {type_full_name(contract)}.",
            code=DI_SERVICE_NOT_REGISTERED,
            contract=type_full_name(contract),
        )


class NoPublicConstructorError(DIError):
    """Raised when a type exposes no public initializer."""

    def __init__(self, target: type[Any]) -> None:
        self.target = target
        super().__init__(
            f"Unable to create {type_full_name(target)}. Make sure this class is "
            "concrete and has a public initializer.",
            code=DI_NO_PUBLIC_CONSTRUCTOR,
            target=type_full_name(target),
        )


class AmbiguousConstructorError(DIError):
    """Raised when a type has several initializers and none without parameters."""

    def __init__(self, target: type[Any], candidates: list[str]) -> None:
        self.target = target
        self.candidates = candidates
        super().__init__(
            f"Unable to create {type_full_name(target)}. More than 1 initializer "
            f"was found for this type ({', '.join(candidates)}), but no "
            "parameterless initializer.",
            code=DI_AMBIGUOUS_CONSTRUCTOR,
            target=type_full_name(target),
            candidates=candidates,
        )


class TypeMismatchError(DIError):
    """Raised when an override matches a parameter by name but has an incompatible type."""

    def __init__(
        self,
        target: type[Any],
        parameter_name: str,
        expected: Any,
        actual: Any,
    ) -> None:
        self.target = target
        self.parameter_name = parameter_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Unable to create {type_full_name(target)}. Value was provided for "
            f"parameter {parameter_name}, but the value was of type "
            f"{type_full_name(actual)} which is incompatible with the initializer "
            f"argument of type {type_full_name(expected)}.",
            code=DI_TYPE_MISMATCH,
            target=type_full_name(target),
            parameter=parameter_name,
            expected_type=type_full_name(expected),
            actual_type=type_full_name(actual),
        )


class NoSuitableArgumentError(DIError):
    """Raised when no resolution tier produced a value for a required parameter."""

    def __init__(
        self,
        target: type[Any],
        parameter_name: str,
        parameter_type: Any,
        overrides_supplied: bool,
    ) -> None:
        self.target = target
        self.parameter_name = parameter_name
        self.parameter_type = parameter_type
        self.overrides_supplied = overrides_supplied
        if overrides_supplied:
            source = (
                "could not be resolved from the service collection, nor from the "
                "object provided with additional values."
            )
        else:
            source = "could not be resolved from the service collection."
        super().__init__(
            f"Unable to create {type_full_name(target)}. The required parameter "
            f"{parameter_name} of type {type_full_name(parameter_type)} {source} "
            "You could set a default value if the parameter is optional.",
            code=DI_NO_SUITABLE_ARGUMENT,
            target=type_full_name(target),
            parameter=parameter_name,
            parameter_type=type_full_name(parameter_type),
            overrides_supplied=overrides_supplied,
        )


class CircularDependencyError(DIError):
    """Raised when a service depends on itself, directly or transitively."""

    def __init__(self, dependency_chain: list[type[Any]]) -> None:
        self.dependency_chain = dependency_chain
        names = [type_full_name(t) for t in dependency_chain]
        start = names.index(names[-1])
        super().__init__(
            f"Circular dependency detected: {' -> '.join(names[start:])}",
            code=DI_CIRCULAR_DEPENDENCY,
            dependency_chain=names,
            circular_dependency=names[start:],
        )
