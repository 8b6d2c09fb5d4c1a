import pytest

from jolt.di import ServiceCollection, ServiceDescriptor, ServiceLifetime


class Clock:
    pass


@pytest.fixture
def provider():
    return ServiceCollection().build_service_provider()


def test_descriptor_requires_types():
    with pytest.raises(ValueError):
        ServiceDescriptor(None, Clock, ServiceLifetime.SINGLETON)
    with pytest.raises(ValueError):
        ServiceDescriptor(Clock, None, ServiceLifetime.SINGLETON)


def test_instance_only_for_singletons():
    with pytest.raises(ValueError):
        ServiceDescriptor(Clock, Clock, ServiceLifetime.TRANSIENT, Clock())


def test_lifetime_accepts_strings():
    descriptor = ServiceDescriptor(Clock, Clock, "transient")
    assert descriptor.lifetime is ServiceLifetime.TRANSIENT
    assert not descriptor.is_singleton


def test_singleton_is_cached(provider):
    descriptor = ServiceDescriptor(Clock, Clock, ServiceLifetime.SINGLETON)
    assert not descriptor.has_instance
    first = descriptor.get_or_create_instance(provider)
    assert descriptor.has_instance
    assert descriptor.get_or_create_instance(provider) is first


def test_transient_is_never_cached(provider):
    descriptor = ServiceDescriptor(Clock, Clock, ServiceLifetime.TRANSIENT)
    first = descriptor.get_or_create_instance(provider)
    assert descriptor.get_or_create_instance(provider) is not first
    assert not descriptor.has_instance


def test_copy_without_instance_clears_cache(provider):
    descriptor = ServiceDescriptor(Clock, Clock, ServiceLifetime.SINGLETON)
    created = descriptor.get_or_create_instance(provider)
    copy = descriptor.copy_without_instance()
    assert not copy.has_instance
    assert copy.get_or_create_instance(provider) is not created


def test_copy_without_instance_keeps_supplied_instance(provider):
    supplied = Clock()
    descriptor = ServiceDescriptor(Clock, Clock, ServiceLifetime.SINGLETON, supplied)
    assert descriptor.copy_without_instance().get_or_create_instance(provider) is supplied
