# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: jolt framework
"""
Type utility functions for Jolt DI.

This module provides helpers for working with types during activation:
naming types in diagnostics, detecting abstract contracts, unwrapping
optional annotations and checking assignment compatibility.
"""

from __future__ import annotations

import inspect
import sys
import types
from collections.abc import Iterator
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

_UNION_ORIGINS = (Union, types.UnionType)
_NONE_TYPE = type(None)

# int is accepted where float is, and both where complex is (PEP 484 numeric tower)
_NUMERIC_PROMOTIONS: dict[type, tuple[type, ...]] = {
    int: (float, complex),
    float: (complex,),
}


def type_full_name(t: Any) -> str:
    """Return the fully qualified name of a type for diagnostics."""
    if t is None:
        return "None"
    if t is inspect.Parameter.empty:
        return "<unannotated>"
    if isinstance(t, type) and get_origin(t) is None:
        if t.__module__ == "builtins":
            return t.__qualname__
        return f"{t.__module__}.{t.__qualname__}"
    return repr(t).replace("typing.", "")


def is_abstract_or_protocol(t: type[Any]) -> bool:
    """
    Check if a type is abstract or a protocol.

    Args:
        t: The type to check

    Returns:
        True if the type is abstract or a protocol, False otherwise
    """
    if inspect.isabstract(t):
        return True
    return bool(getattr(t, "_is_protocol", False))


def get_type_hints_safe(obj: Any) -> dict[str, Any]:
    """
    Safely get type hints for a callable or class.

    When some annotations cannot be evaluated (typically names imported only
    under ``TYPE_CHECKING``), the remaining ones are still resolved and only
    the failing names are left out.
    """
    try:
        return get_type_hints(obj, include_extras=True)
    except Exception:
        pass

    hints: dict[str, Any] = {}
    for annotations, globalns, localns in _annotation_namespaces(obj):
        for name, annotation in annotations.items():
            try:
                hints[name] = _evaluate_annotation(annotation, globalns, localns)
            except Exception:
                # unresolvable here; a base class annotation must not leak through
                hints.pop(name, None)
    return hints


def _annotation_namespaces(
    obj: Any,
) -> Iterator[tuple[dict[str, Any], dict[str, Any], dict[str, Any] | None]]:
    if isinstance(obj, type):
        # base classes first so subclasses override their annotations
        for base in reversed(obj.__mro__):
            module = sys.modules.get(base.__module__)
            yield _own_annotations(base), getattr(module, "__dict__", {}), dict(vars(base))
        return
    func = inspect.unwrap(obj) if callable(obj) else obj
    yield _own_annotations(func), getattr(func, "__globals__", {}), None


def _own_annotations(obj: Any) -> dict[str, Any]:
    try:
        return dict(inspect.get_annotations(obj))
    except (TypeError, NameError):
        return {}


def _evaluate_annotation(
    annotation: Any, globalns: dict[str, Any], localns: dict[str, Any] | None
) -> Any:
    if isinstance(annotation, str):
        annotation = eval(annotation, globalns, localns)  # noqa: S307
    if annotation is None:
        return _NONE_TYPE
    return annotation


def strip_annotated(t: Any) -> Any:
    """Remove ``Annotated[...]`` wrappers."""
    while get_origin(t) is Annotated:
        t = get_args(t)[0]
    return t


def is_unannotated(t: Any) -> bool:
    # unresolved forward references carry no usable type
    return t is Any or t is inspect.Parameter.empty or t is None or isinstance(t, str)


def service_type_of(t: Any) -> Any | None:
    """
    Return the type to look up in a service provider for a parameter type.

    ``Annotated`` wrappers are removed and ``X | None`` becomes ``X``. Other
    unions, unannotated parameters and non-hashable annotations give None.
    """
    t = strip_annotated(t)
    if is_unannotated(t) or isinstance(t, str):
        return None
    if get_origin(t) in _UNION_ORIGINS:
        members = [arg for arg in get_args(t) if arg is not _NONE_TYPE]
        if len(members) != 1:
            return None
        return service_type_of(members[0])
    try:
        hash(t)
    except TypeError:
        return None
    return t


def is_assignable(source: Any, target: Any) -> bool:
    """
    Check whether a value declared as ``source`` may be passed where ``target`` is expected.

    Args:
        source: The declared type of the value
        target: The declared type of the receiving parameter

    Returns:
        True if the types are assignment-compatible
    """
    source = strip_annotated(source)
    target = strip_annotated(target)

    if is_unannotated(target) or is_unannotated(source) or target is object:
        return True
    if source == target:
        return True

    if get_origin(source) in _UNION_ORIGINS:
        return all(is_assignable(arg, target) for arg in get_args(source))
    if get_origin(target) in _UNION_ORIGINS:
        return any(is_assignable(source, arg) for arg in get_args(target))

    source = get_origin(source) or source
    target = get_origin(target) or target

    if not isinstance(source, type) or not isinstance(target, type):
        return source == target

    if target in _NUMERIC_PROMOTIONS.get(source, ()):
        return True

    try:
        return issubclass(source, target)
    except TypeError:
        # Protocols with data members cannot be checked nominally
        return bool(getattr(target, "_is_protocol", False))
