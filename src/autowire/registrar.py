from __future__ import annotations

import logging
from collections.abc import Iterable
from types import ModuleType
from typing import Any

from autowire.candidates import Candidate
from autowire.defaults import DEFAULT_COLLAPSE_INHERITED_INTERFACES
from autowire.exceptions import AutoWireDuplicateRegistrationError
from autowire.policies import DEFAULT_INTERFACE_POLICY, InterfacePolicy
from autowire.registry import Descriptor, Registry
from autowire.resolution import derive_key, resolve_contract
from autowire.scanning import scan_modules

logger = logging.getLogger(__name__)


class Registrar:
    """Turn candidates into descriptors and append them to a registry.

    Each candidate is resolved, keyed and checked against the registry so far,
    in order. The first failure aborts the batch. Descriptors appended before
    the failing candidate stay in the registry.

    Examples:
        .. code-block:: python

            registry = Registry()
            Registrar(registry).register_modules("myapp.services")

    """

    def __init__(
        self,
        registry: Registry | None = None,
        *,
        interface_policy: InterfacePolicy = DEFAULT_INTERFACE_POLICY,
        collapse_inherited_interfaces: bool = DEFAULT_COLLAPSE_INHERITED_INTERFACES,
    ) -> None:
        """Initialize a registrar.

        Args:
            registry: Registry to append to. A new empty one is created when omitted.
            interface_policy: Policy deciding which bases are interfaces when
                candidates are built from classes or modules.
            collapse_inherited_interfaces: Ignore direct interfaces that another
                direct interface already extends.

        """
        self._registry = Registry() if registry is None else registry
        self._interface_policy = interface_policy
        self._collapse_inherited_interfaces = collapse_inherited_interfaces

    @property
    def registry(self) -> Registry:
        return self._registry

    def register_candidate(self, candidate: Candidate) -> Descriptor:
        """Register one candidate and return the appended descriptor.

        Raises:
            AutoWireAmbiguousContractError: If the contract cannot be inferred.
            AutoWireDuplicateRegistrationError: If the contract and key are
                already registered.

        """
        resolved = resolve_contract(
            candidate,
            collapse_inherited_interfaces=self._collapse_inherited_interfaces,
        )
        key = derive_key(candidate)

        existing = self._registry.find_conflicting_implementation(resolved.contract_type, key)
        if existing is not None:
            raise AutoWireDuplicateRegistrationError(
                candidate.implementation,
                existing,
                resolved.contract_type,
                key,
            )

        descriptor = Descriptor(
            contract_type=resolved.contract_type,
            key=key,
            implementation=candidate.implementation,
            lifetime=candidate.lifetime,
            contract_kind=resolved.kind,
        )
        self._registry.add(descriptor)
        logger.debug(
            "Registered %s as %r key=%r lifetime=%s",
            candidate.implementation.__qualname__,
            resolved.contract_type,
            key,
            candidate.lifetime.value,
        )
        return descriptor

    def register_candidates(self, candidates: Iterable[Candidate]) -> list[Descriptor]:
        """Register candidates in order, stopping at the first failure."""
        descriptors = [self.register_candidate(candidate) for candidate in candidates]
        logger.info(
            "Auto-registration pass appended %d descriptors (registry size %d)",
            len(descriptors),
            len(self._registry),
        )
        return descriptors

    def register(self, *implementations: type[Any]) -> list[Descriptor]:
        """Register marked classes directly, in the order given."""
        return self.register_candidates(
            Candidate.from_class(implementation, interface_policy=self._interface_policy)
            for implementation in implementations
        )

    def register_modules(
        self,
        *modules: ModuleType | str,
        recursive: bool = True,
    ) -> list[Descriptor]:
        """Scan modules for marked classes and register them."""
        return self.register_candidates(
            scan_modules(*modules, recursive=recursive, interface_policy=self._interface_policy),
        )


def register_auto_injectable(registry: Registry, *modules: ModuleType | str) -> Registry:
    """Register every marked class found in ``modules`` into ``registry``.

    Returns:
        The same registry, for chaining.

    """
    Registrar(registry).register_modules(*modules)
    return registry


__all__ = ["Registrar", "register_auto_injectable"]
