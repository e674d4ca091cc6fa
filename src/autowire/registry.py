from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Annotated, Any

from autowire.lifetime import Lifetime
from autowire.markers import Component
from autowire.resolution import ContractKind


@dataclass(frozen=True, slots=True, kw_only=True)
class Descriptor:
    """A single registration handed to the host container."""

    contract_type: Any
    """The type the implementation is resolved by."""
    key: str | None
    """Optional key; ``None`` is distinct from the empty string."""
    implementation: type[Any]
    """The concrete class the host container instantiates."""
    lifetime: Lifetime
    contract_kind: ContractKind = ContractKind.CLASS

    @property
    def dependency_key(self) -> Any:
        """Return the key a host container should register this descriptor under.

        Unkeyed descriptors use the contract itself. Keyed descriptors use
        ``Annotated[contract, Component(key)]``.
        """
        if self.key is None:
            return self.contract_type
        return Annotated[self.contract_type, Component(self.key)]

    def matches(self, contract_type: Any, key: str | None) -> bool:
        """Return whether this descriptor occupies the given contract and key."""
        return self.contract_type == contract_type and self.key == key


class Registry:
    """Ordered, append-only collection of descriptors owned by the caller.

    The registry is not synchronized. Registration passes that share one
    registry must be serialized by the caller.
    """

    def __init__(self, descriptors: Iterable[Descriptor] = ()) -> None:
        self._descriptors: list[Descriptor] = list(descriptors)

    def add(self, descriptor: Descriptor) -> None:
        """Append a descriptor without any conflict check."""
        self._descriptors.append(descriptor)

    def find(self, contract_type: Any, key: str | None = None) -> Descriptor | None:
        """Return the earliest descriptor registered for a contract and key."""
        for descriptor in self._descriptors:
            if descriptor.matches(contract_type, key):
                return descriptor
        return None

    def find_conflicting_implementation(
        self,
        contract_type: Any,
        key: str | None,
    ) -> type[Any] | None:
        """Return the implementation already registered for a contract and key.

        The earliest matching registration is reported. Keys compare by exact
        string equality and ``None`` only matches ``None``.
        """
        descriptor = self.find(contract_type, key)
        if descriptor is None:
            return None
        return descriptor.implementation

    def for_contract(self, contract_type: Any) -> list[Descriptor]:
        """Return every descriptor registered for a contract, keyed or not."""
        return [
            descriptor
            for descriptor in self._descriptors
            if descriptor.contract_type == contract_type
        ]

    @property
    def descriptors(self) -> tuple[Descriptor, ...]:
        return tuple(self._descriptors)

    def __iter__(self) -> Iterator[Descriptor]:
        return iter(tuple(self._descriptors))

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, descriptor: object) -> bool:
        return descriptor in self._descriptors

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._descriptors)} descriptors)"
