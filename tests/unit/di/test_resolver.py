from dataclasses import dataclass
from typing import Optional, Protocol

import pytest
from pydantic import BaseModel

from jolt.di import (
    ActivationOverrides,
    ActivatorUtilities,
    ConstructorArgumentResolver,
    InitializerParameter,
    NoSuitableArgumentError,
    ServiceCollection,
    TypeMismatchError,
)


class ILogger(Protocol):
    def log(self, message: str) -> None: ...


class ConsoleLogger:
    def log(self, message: str) -> None:
        print(message)


class Counter:
    def __init__(self, Count: int) -> None:
        self.count = Count


class LowerCounter:
    def __init__(self, count: int) -> None:
        self.count = count


class Service:
    def __init__(self, logger: ILogger) -> None:
        self.logger = logger


class ConcreteService:
    def __init__(self, logger: ConsoleLogger) -> None:
        self.logger = logger


class WithDefault:
    def __init__(self, x: float = 42) -> None:
        self.x = x


class OptionalLogger:
    def __init__(self, logger: Optional[ILogger] = None) -> None:
        self.logger = logger


class Partial:
    def __init__(self, logger: ILogger, title: str, retries: int = 3) -> None:
        self.logger = logger
        self.title = title
        self.retries = retries


class Untyped:
    def __init__(self, value) -> None:
        self.value = value


@dataclass
class StringCount:
    Count: str


@dataclass
class IntCount:
    count: int


class LoggerOverride(BaseModel):
    model_config = {"arbitrary_types_allowed": True}

    logger: ConsoleLogger


@pytest.fixture
def empty_provider():
    return ServiceCollection().build_service_provider()


@pytest.fixture
def logger_provider():
    return ServiceCollection().add_singleton(ILogger, ConsoleLogger).build_service_provider()


def test_raw_override_matches_case_insensitively(empty_provider):
    """``{count: 5}`` satisfies a parameter named ``Count``."""
    counter = ActivatorUtilities.create_instance(empty_provider, Counter, {"count": 5})
    assert counter.count == 5


def test_typed_override_with_wrong_type_fails(empty_provider):
    """A typed value matched by name but of the wrong type is a hard failure."""
    with pytest.raises(TypeMismatchError) as exc:
        ActivatorUtilities.create_instance(empty_provider, LowerCounter, StringCount("5"))
    err = exc.value
    assert err.parameter_name == "count"
    assert err.expected is int
    assert err.actual is str
    assert "parameter count" in str(err)


def test_type_mismatch_does_not_fall_through_to_raw_value(empty_provider):
    overrides = ActivationOverrides().with_typed("count", "5", str).with_raw("COUNT", 5)
    with pytest.raises(TypeMismatchError):
        ActivatorUtilities.create_instance(empty_provider, LowerCounter, overrides)


def test_type_mismatch_does_not_fall_through_to_services():
    provider = ServiceCollection().add_singleton(ConsoleLogger).build_service_provider()
    overrides = ActivationOverrides().with_typed("logger", 5, int)
    with pytest.raises(TypeMismatchError):
        ActivatorUtilities.create_instance(provider, ConcreteService, overrides)


def test_typed_override_with_compatible_type(empty_provider):
    counter = ActivatorUtilities.create_instance(empty_provider, LowerCounter, IntCount(7))
    assert counter.count == 7


def test_typed_override_numeric_promotion(empty_provider):
    instance = ActivatorUtilities.create_instance(
        empty_provider, WithDefault, ActivationOverrides().with_typed("x", 3, int)
    )
    assert instance.x == 3


def test_typed_none_value_skips_type_check(empty_provider):
    overrides = ActivationOverrides().with_typed("count", None, str)
    counter = ActivatorUtilities.create_instance(empty_provider, LowerCounter, overrides)
    assert counter.count is None


def test_override_takes_priority_over_service(logger_provider):
    mine = ConsoleLogger()
    service = ActivatorUtilities.create_instance(
        logger_provider, Service, LoggerOverride(logger=mine)
    )
    assert service.logger is mine


def test_service_lookup(logger_provider):
    service = ActivatorUtilities.create_instance(logger_provider, Service)
    assert service.logger is logger_provider.resolve(ILogger)


def test_optional_parameter_resolves_service(logger_provider):
    instance = ActivatorUtilities.create_instance(logger_provider, OptionalLogger)
    assert instance.logger is logger_provider.resolve(ILogger)


def test_optional_parameter_falls_back_to_none(empty_provider):
    instance = ActivatorUtilities.create_instance(empty_provider, OptionalLogger)
    assert instance.logger is None


def test_default_value_is_used(empty_provider):
    """With no registrations, ``x: float = 42`` binds 42."""
    instance = ActivatorUtilities.create_instance(empty_provider, WithDefault)
    assert instance.x == 42


def test_each_parameter_resolves_independently(logger_provider):
    partial = ActivatorUtilities.create_instance(logger_provider, Partial, {"Title": "Home"})
    assert partial.logger is logger_provider.resolve(ILogger)
    assert partial.title == "Home"
    assert partial.retries == 3


def test_unannotated_parameter_accepts_raw_override(empty_provider):
    assert ActivatorUtilities.create_instance(empty_provider, Untyped, {"value": 1}).value == 1


def test_missing_argument_without_overrides(empty_provider):
    with pytest.raises(NoSuitableArgumentError) as exc:
        ActivatorUtilities.create_instance(empty_provider, Service)
    err = exc.value
    assert err.parameter_name == "logger"
    assert err.overrides_supplied is False
    assert "could not be resolved from the service collection." in str(err)
    assert "nor from the object provided" not in str(err)


def test_missing_argument_with_overrides(empty_provider):
    with pytest.raises(NoSuitableArgumentError) as exc:
        ActivatorUtilities.create_instance(empty_provider, Service, {"other": 1})
    assert exc.value.overrides_supplied is True
    assert "nor from the object provided with additional values" in str(exc.value)


def test_resolve_parameter_directly(logger_provider):
    resolver = ConstructorArgumentResolver(
        logger_provider, ActivationOverrides.from_mapping({"name": "jolt"})
    )
    assert resolver.resolve_parameter(Service, InitializerParameter("NAME", str)) == "jolt"
    assert resolver.resolve_parameter(
        Service, InitializerParameter("logger", ILogger)
    ) is logger_provider.resolve(ILogger)
    assert resolver.resolve_parameter(
        Service, InitializerParameter("missing", int, is_optional=True, default=None)
    ) is None


def test_resolver_requires_provider():
    with pytest.raises(ValueError):
        ConstructorArgumentResolver(None)


class CountProperty:
    @property
    def count(self) -> str:
        return "5"


class IntCountProperty:
    @property
    def Count(self) -> int:
        return 5


def test_property_override_with_wrong_type_fails(empty_provider):
    with pytest.raises(TypeMismatchError) as exc:
        ActivatorUtilities.create_instance(empty_provider, LowerCounter, CountProperty())
    assert exc.value.actual is str


def test_property_override_with_compatible_type(empty_provider):
    counter = ActivatorUtilities.create_instance(empty_provider, LowerCounter, IntCountProperty())
    assert counter.count == 5
