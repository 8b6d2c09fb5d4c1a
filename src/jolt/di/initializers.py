# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""
Initializer descriptions for Jolt DI.

An initializer is one public way of constructing a type: an ordered parameter
list plus the callable that builds the instance. Initializers are discovered
by reflection (``__init__`` plus classmethods marked with ``@initializer``)
or declared explicitly in an ``InitializerTable``; a table entry always takes
precedence over discovery for its type.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from jolt.di.type_utils import get_type_hints_safe, is_abstract_or_protocol

__all__ = [
    "Initializer",
    "InitializerParameter",
    "InitializerTable",
    "describe",
    "discover_initializers",
    "initializer",
]

_INITIALIZER_MARKER = "__jolt_initializer__"

_SKIPPED_KINDS = (
    inspect.Parameter.VAR_POSITIONAL,
    inspect.Parameter.VAR_KEYWORD,
)


@dataclass(frozen=True)
class InitializerParameter:
    """One formal parameter of an initializer.

    Attributes:
        name: Parameter name as declared.
        declared_type: Annotation of the parameter; ``Any`` when unannotated.
        is_optional: Whether the parameter carries a default.
        default: The default value, meaningful only when ``is_optional``.
        keyword_only: Whether the parameter must be passed by keyword.
    """

    name: str
    declared_type: Any = Any
    is_optional: bool = False
    default: Any = None
    keyword_only: bool = False

    @classmethod
    def from_signature(
        cls, parameter: inspect.Parameter, hints: Mapping[str, Any]
    ) -> InitializerParameter:
        annotation = hints.get(parameter.name, parameter.annotation)
        if annotation is inspect.Parameter.empty or isinstance(annotation, str):
            annotation = Any
        has_default = parameter.default is not inspect.Parameter.empty
        return cls(
            name=parameter.name,
            declared_type=annotation,
            is_optional=has_default,
            default=parameter.default if has_default else None,
            keyword_only=parameter.kind is inspect.Parameter.KEYWORD_ONLY,
        )


@dataclass(frozen=True)
class Initializer:
    """A public initializer routine of a target type."""

    target: type
    parameters: tuple[InitializerParameter, ...]
    factory: Callable[..., Any]
    name: str = "__init__"

    @property
    def is_parameterless(self) -> bool:
        return not self.parameters

    def invoke(self, arguments: Sequence[Any]) -> Any:
        """Call the factory with one resolved argument per parameter."""
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for parameter, value in zip(self.parameters, arguments, strict=True):
            if parameter.keyword_only:
                kwargs[parameter.name] = value
            else:
                args.append(value)
        return self.factory(*args, **kwargs)

    def __str__(self) -> str:
        params = ", ".join(p.name for p in self.parameters)
        return f"{self.target.__qualname__}.{self.name}({params})"


def initializer(method: Any) -> classmethod:
    """
    Mark a classmethod as an additional public initializer of its class.

    May be applied above or instead of ``@classmethod``.

    Example:
        ```python
        class Page:
            def __init__(self, navigation: NavigationProtocol) -> None: ...

            @initializer
            @classmethod
            def blank(cls) -> Page: ...
        ```
    """
    if not isinstance(method, classmethod):
        method = classmethod(method)
    setattr(method.__func__, _INITIALIZER_MARKER, True)
    return method


def describe(
    target: type,
    parameters: Iterable[InitializerParameter | tuple[Any, ...]] = (),
    factory: Callable[..., Any] | None = None,
    name: str = "__init__",
) -> Initializer:
    """
    Build an explicit initializer description.

    Parameters may be given as ``InitializerParameter`` objects or as tuples of
    ``(name, type)`` for required and ``(name, type, default)`` for optional
    parameters. The factory defaults to the target type itself.
    """
    described: list[InitializerParameter] = []
    for parameter in parameters:
        if isinstance(parameter, InitializerParameter):
            described.append(parameter)
        elif len(parameter) == 2:
            described.append(InitializerParameter(parameter[0], parameter[1]))
        elif len(parameter) == 3:
            described.append(
                InitializerParameter(
                    parameter[0], parameter[1], is_optional=True, default=parameter[2]
                )
            )
        else:
            raise ValueError(f"Invalid parameter description: {parameter!r}")
    return Initializer(target, tuple(described), factory or target, name)


def discover_initializers(target: type) -> list[Initializer]:
    """
    Reflect the public initializers of a class.

    Abstract classes and protocols expose none. Otherwise ``__init__`` comes
    first, followed by ``@initializer`` classmethods in definition order.
    """
    if not inspect.isclass(target):
        raise TypeError(f"{target!r} is not a class")
    if is_abstract_or_protocol(target):
        return []

    found = [_describe_init(target)]
    for name, method in _marked_classmethods(target):
        bound = getattr(target, name)
        hints = get_type_hints_safe(method.__func__)
        found.append(
            Initializer(target, _parameters_of(inspect.signature(bound), hints), bound, name)
        )
    return found


def _describe_init(target: type) -> Initializer:
    if target.__init__ is object.__init__ and target.__new__ is object.__new__:
        return Initializer(target, (), target)
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        # builtins without introspectable signatures construct with no arguments
        return Initializer(target, (), target)
    hints = {}
    if target.__init__ is not object.__init__:
        hints = get_type_hints_safe(target.__init__)
    return Initializer(target, _parameters_of(signature, hints), target)


def _parameters_of(
    signature: inspect.Signature, hints: Mapping[str, Any]
) -> tuple[InitializerParameter, ...]:
    return tuple(
        InitializerParameter.from_signature(parameter, hints)
        for parameter in signature.parameters.values()
        if parameter.kind not in _SKIPPED_KINDS
    )


def _marked_classmethods(target: type) -> Iterator[tuple[str, classmethod]]:
    marked: dict[str, classmethod] = {}
    for klass in reversed(target.__mro__):
        for name, attribute in vars(klass).items():
            if isinstance(attribute, classmethod) and getattr(
                attribute.__func__, _INITIALIZER_MARKER, False
            ):
                marked[name] = attribute
            elif name in marked:
                # overridden by a plain attribute in a subclass
                del marked[name]
    yield from marked.items()


class InitializerTable:
    """
    Explicit factory table keyed by target type.

    Types with an entry use exactly the declared initializers (an empty entry
    means the type has no public initializer); every other type falls back to
    reflective discovery.
    """

    def __init__(
        self, entries: Mapping[type, Sequence[Initializer]] | None = None
    ) -> None:
        self._entries: dict[type, list[Initializer]] = {
            target: list(initializers) for target, initializers in (entries or {}).items()
        }

    def add(self, target: type, initializer: Initializer | None = None) -> None:
        """Declare an initializer for ``target``; with None only declares the entry."""
        entry = self._entries.setdefault(target, [])
        if initializer is not None:
            if initializer.target is not target:
                raise ValueError(
                    f"Initializer {initializer} does not construct {target.__qualname__}"
                )
            entry.append(initializer)

    def describe(self, target: type) -> list[Initializer]:
        """Return the public initializers of ``target``."""
        if target in self._entries:
            return list(self._entries[target])
        return discover_initializers(target)

    def copy(self) -> InitializerTable:
        return InitializerTable(self._entries)

    def __contains__(self, target: object) -> bool:
        return target in self._entries

    def __len__(self) -> int:
        return len(self._entries)
