from typing import Protocol

import pytest

from jolt.di import (
    ErrorHandlerProtocol,
    LoggingErrorHandler,
    ServiceCollection,
    ServiceProvider,
    add_default_services,
    default_services,
    use_startup,
)


class INavigation(Protocol):
    def go(self, url: str) -> None: ...


class FakeNavigation:
    def __init__(self) -> None:
        self.visited: list[str] = []

    def go(self, url: str) -> None:
        self.visited.append(url)


class RecordingStartup:
    """Startup that records every call made to it."""

    calls: list[tuple[str, object]] = []

    def __init__(self, errors: ErrorHandlerProtocol) -> None:
        self.errors = errors

    def configure_services(self, services: ServiceCollection) -> None:
        type(self).calls.append(("configure_services", services))
        services.add_singleton(INavigation, FakeNavigation)

    def configure(self, provider: ServiceProvider) -> None:
        type(self).calls.append(("configure", provider))
        provider.resolve(INavigation).go("/home")


class NotAStartup:
    pass


@pytest.fixture(autouse=True)
def reset_calls():
    RecordingStartup.calls = []


def test_default_services_register_error_handler():
    provider = default_services().build_service_provider()
    assert isinstance(provider.resolve(ErrorHandlerProtocol), LoggingErrorHandler)


def test_add_default_services_keeps_existing_registration():
    class QuietHandler:
        def on_error(self, exception, message=None):
            pass

    services = ServiceCollection().add_singleton(ErrorHandlerProtocol, QuietHandler)
    add_default_services(services)
    assert services.get_descriptor(ErrorHandlerProtocol).implementation is QuietHandler


def test_use_startup_configures_once_then_configures_provider():
    provider = use_startup(RecordingStartup)

    assert [name for name, _ in RecordingStartup.calls] == ["configure_services", "configure"]
    assert RecordingStartup.calls[1][1] is provider
    assert provider.resolve(INavigation).visited == ["/home"]
    assert ErrorHandlerProtocol in provider


def test_use_startup_does_not_modify_base_services():
    base = default_services()
    use_startup(RecordingStartup, base)
    assert INavigation not in base


def test_use_startup_with_custom_base_services():
    supplied = FakeNavigation()
    base = add_default_services(ServiceCollection())

    class Startup:
        def configure_services(self, services):
            services.remove_services(INavigation).add_singleton(INavigation, instance=supplied)

        def configure(self, provider):
            pass

    provider = use_startup(Startup, base)
    assert provider.resolve(INavigation) is supplied


def test_use_startup_rejects_non_startup_types():
    with pytest.raises(TypeError):
        use_startup(NotAStartup)
