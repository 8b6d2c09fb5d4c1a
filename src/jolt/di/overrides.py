# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""
Per-call activation overrides.

Overrides are caller-supplied values that take priority over registered
services during a single ``create_instance`` call. Each value is either a
``TypedValue``, which remembers the type it was declared with and is checked
against the receiving parameter, or a ``RawValue`` from an unstructured bag,
which is used as-is.
"""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from jolt.di.type_utils import get_type_hints_safe

__all__ = ["ActivationOverrides", "OverrideValue", "RawValue", "TypedValue"]


@dataclass(frozen=True)
class TypedValue:
    """An override value exposed by a structured object with a declared type."""

    value: Any
    declared_type: Any


@dataclass(frozen=True)
class RawValue:
    """An override value from an unstructured bag; no type is known."""

    value: Any


OverrideValue = TypedValue | RawValue


class ActivationOverrides:
    """
    Ordered, immutable mapping from parameter name to an override value.

    Name lookups are case-insensitive. When a typed and a raw value share a
    name, the typed value wins.

    Example:
        ```python
        overrides = ActivationOverrides.from_mapping({"count": 5})
        overrides = ActivationOverrides.from_object(PageArguments(title="Home"))
        overrides = ActivationOverrides().with_typed("count", 5, int)
        ```
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, OverrideValue] | None = None) -> None:
        self._values: dict[str, OverrideValue] = {}
        for name, value in (values or {}).items():
            if not isinstance(value, (TypedValue, RawValue)):
                raise TypeError(
                    f"Override {name!r} must be a TypedValue or RawValue, "
                    f"got {type(value).__name__}"
                )
            self._values[name] = value

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> ActivationOverrides:
        """Build overrides from an unstructured bag of values."""
        return cls({str(name): RawValue(value) for name, value in values.items()})

    @classmethod
    def from_object(cls, source: Any) -> ActivationOverrides:
        """
        Build overrides from a structured object.

        Pydantic models and dataclasses expose their declared field types.
        For other objects, annotated attributes are typed and the remaining
        instance attributes are raw. Public properties are typed by their
        getter's return annotation. Annotations that cannot be resolved
        give raw values.
        """
        if isinstance(source, BaseModel):
            return cls(
                {
                    name: TypedValue(getattr(source, name), field.annotation)
                    for name, field in type(source).model_fields.items()
                }
            )

        values: dict[str, OverrideValue] = {}
        hints = get_type_hints_safe(type(source))

        if dataclasses.is_dataclass(source) and not isinstance(source, type):
            for field in dataclasses.fields(source):
                value = getattr(source, field.name)
                if field.name in hints:
                    values[field.name] = TypedValue(value, hints[field.name])
                else:
                    values[field.name] = RawValue(value)
            values.update(_property_values(source, values))
            return cls(values)

        values.update(_property_values(source, values))
        for name, declared_type in hints.items():
            if not name.startswith("_") and hasattr(source, name):
                values[name] = TypedValue(getattr(source, name), declared_type)
        for name, value in getattr(source, "__dict__", {}).items():
            if not name.startswith("_") and name not in values:
                values[name] = RawValue(value)
        return cls(values)

    @classmethod
    def coerce(cls, overrides: Any) -> ActivationOverrides | None:
        """Normalise whatever a caller passed as overrides."""
        if overrides is None or isinstance(overrides, ActivationOverrides):
            return overrides
        if isinstance(overrides, Mapping):
            return cls.from_mapping(overrides)
        return cls.from_object(overrides)

    def with_typed(
        self, name: str, value: Any, declared_type: Any
    ) -> ActivationOverrides:
        """Return a copy with a typed value added or replaced."""
        return ActivationOverrides({**self._values, name: TypedValue(value, declared_type)})

    def with_raw(self, name: str, value: Any) -> ActivationOverrides:
        """Return a copy with a raw value added or replaced."""
        return ActivationOverrides({**self._values, name: RawValue(value)})

    def lookup(self, name: str) -> OverrideValue | None:
        """Find the override for a parameter name, ignoring case."""
        wanted = name.casefold()
        raw: RawValue | None = None
        for candidate, value in self._values.items():
            if candidate.casefold() != wanted:
                continue
            if isinstance(value, TypedValue):
                return value
            if raw is None:
                raw = value
        return raw

    def names(self) -> tuple[str, ...]:
        return tuple(self._values)

    def items(self) -> Iterator[tuple[str, OverrideValue]]:
        yield from self._values.items()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActivationOverrides):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ActivationOverrides({self._values!r})"


def _property_values(
    source: Any, known: Mapping[str, OverrideValue]
) -> dict[str, OverrideValue]:
    """Public properties of ``source``, typed by the getter's return annotation."""
    values: dict[str, OverrideValue] = {}
    for name, member in inspect.getmembers(type(source), lambda m: isinstance(m, property)):
        if name.startswith("_") or name in known or member.fget is None:
            continue
        hints = get_type_hints_safe(member.fget)
        value = getattr(source, name)
        if "return" in hints:
            values[name] = TypedValue(value, hints["return"])
        else:
            values[name] = RawValue(value)
    return values
