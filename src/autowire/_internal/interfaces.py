from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from autowire._internal.type_checks import definition_of
from autowire.policies import InterfacePolicy


def declared_bases(cls: type[Any]) -> tuple[Any, ...]:
    """Return the bases written in the class statement, keeping generic parameters.

    ``__orig_bases__`` is looked up in the class's own namespace because the
    attribute is otherwise inherited from the nearest generic ancestor.
    """
    return vars(cls).get("__orig_bases__", cls.__bases__)


def implemented_interfaces(cls: type[Any], *, policy: InterfacePolicy) -> tuple[Any, ...]:
    """Return every interface reachable from ``cls``, in declaration order.

    Interfaces keep the form they were declared with, so ``Repository[User]``
    stays parameterized. Duplicates are dropped, first occurrence wins.

    Args:
        cls: Class whose hierarchy is walked.
        policy: Policy deciding which bases are interfaces.

    """
    found: list[Any] = []
    _collect_interfaces(cls, policy=policy, found=found)
    return tuple(found)


def base_classes(cls: type[Any], *, policy: InterfacePolicy) -> tuple[type[Any], ...]:
    """Return the direct bases of ``cls`` that are not interfaces."""
    bases: list[type[Any]] = []
    for base in declared_bases(cls):
        definition = definition_of(base)
        if not policy.is_relevant(definition) or policy.is_interface(definition):
            continue
        if definition not in bases:
            bases.append(definition)
    return tuple(bases)


def inherited_interfaces(cls: type[Any], *, policy: InterfacePolicy) -> tuple[Any, ...]:
    """Return the interfaces ``cls`` receives through its base classes."""
    found: list[Any] = []
    for base in base_classes(cls, policy=policy):
        _extend_unique(found, implemented_interfaces(base, policy=policy))
    return tuple(found)


def most_derived(interfaces: Iterable[Any]) -> tuple[Any, ...]:
    """Drop interfaces that another interface in the same group already extends.

    ``(IFoo, IBar)`` where ``IFoo`` extends ``IBar`` becomes ``(IFoo,)``.
    Ancestry is checked through the MRO, since ``issubclass`` rejects
    protocols that are not runtime checkable.
    """
    forms = tuple(interfaces)
    kept: list[Any] = []
    for form in forms:
        definition = definition_of(form)
        extended = any(
            definition is not definition_of(other) and definition in definition_of(other).__mro__
            for other in forms
        )
        if not extended:
            kept.append(form)
    return tuple(kept)


def _collect_interfaces(cls: type[Any], *, policy: InterfacePolicy, found: list[Any]) -> None:
    for base in declared_bases(cls):
        definition = definition_of(base)
        if not policy.is_relevant(definition):
            continue
        if policy.is_interface(definition) and base not in found:
            found.append(base)
        _collect_interfaces(definition, policy=policy, found=found)


def _extend_unique(target: list[Any], values: Iterable[Any]) -> None:
    for value in values:
        if value not in target:
            target.append(value)


__all__ = [
    "base_classes",
    "declared_bases",
    "implemented_interfaces",
    "inherited_interfaces",
    "most_derived",
]
