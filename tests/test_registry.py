from __future__ import annotations

from typing import Annotated, Protocol, get_args, get_origin

from autowire.lifetime import Lifetime
from autowire.markers import Component
from autowire.registry import Descriptor, Registry
from autowire.resolution import ContractKind


class Cache(Protocol):
    def get(self, key: str) -> object: ...


class MemoryCache:
    pass


class RedisCache:
    pass


class DiskCache:
    pass


def _descriptor(implementation: type, key: str | None = None) -> Descriptor:
    return Descriptor(
        contract_type=Cache,
        key=key,
        implementation=implementation,
        lifetime=Lifetime.SCOPED,
    )


def test_registry_preserves_insertion_order() -> None:
    first = _descriptor(MemoryCache, key="memory")
    second = _descriptor(RedisCache, key="redis")
    registry = Registry([first])

    registry.add(second)

    assert list(registry) == [first, second]
    assert registry.descriptors == (first, second)
    assert len(registry) == 2
    assert second in registry


def test_find_conflicting_implementation_matches_contract_and_key() -> None:
    registry = Registry([_descriptor(MemoryCache, key="memory")])

    assert registry.find_conflicting_implementation(Cache, "memory") is MemoryCache
    assert registry.find_conflicting_implementation(Cache, "redis") is None
    assert registry.find_conflicting_implementation(MemoryCache, "memory") is None


def test_none_key_only_matches_none() -> None:
    registry = Registry([_descriptor(MemoryCache)])

    assert registry.find_conflicting_implementation(Cache, None) is MemoryCache
    assert registry.find_conflicting_implementation(Cache, "") is None


def test_empty_string_key_does_not_match_none() -> None:
    registry = Registry([_descriptor(MemoryCache, key="")])

    assert registry.find_conflicting_implementation(Cache, None) is None
    assert registry.find_conflicting_implementation(Cache, "") is MemoryCache


def test_earliest_registration_is_reported() -> None:
    registry = Registry()
    registry.add(_descriptor(MemoryCache))
    registry.add(_descriptor(RedisCache))

    assert registry.find_conflicting_implementation(Cache, None) is MemoryCache


def test_for_contract_returns_keyed_and_unkeyed_descriptors() -> None:
    registry = Registry(
        [
            _descriptor(MemoryCache),
            _descriptor(RedisCache, key="redis"),
            Descriptor(
                contract_type=DiskCache,
                key=None,
                implementation=DiskCache,
                lifetime=Lifetime.TRANSIENT,
            ),
        ],
    )

    assert [descriptor.implementation for descriptor in registry.for_contract(Cache)] == [
        MemoryCache,
        RedisCache,
    ]


def test_dependency_key_without_key_is_contract() -> None:
    assert _descriptor(MemoryCache).dependency_key is Cache


def test_dependency_key_with_key_is_annotated_component() -> None:
    dependency_key = _descriptor(RedisCache, key="redis").dependency_key

    assert get_origin(dependency_key) is Annotated
    assert get_args(dependency_key) == (Cache, Component("redis"))
    assert dependency_key == Annotated[Cache, Component("redis")]


def test_descriptor_defaults_to_class_contract_kind() -> None:
    assert _descriptor(MemoryCache).contract_kind is ContractKind.CLASS


def test_registry_repr_reports_size() -> None:
    assert repr(Registry([_descriptor(MemoryCache)])) == "Registry(1 descriptors)"
