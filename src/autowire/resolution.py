from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from autowire._internal.interfaces import most_derived
from autowire._internal.type_checks import definition_of, is_generic_definition, is_parameterized
from autowire.candidates import Candidate
from autowire.defaults import DEFAULT_COLLAPSE_INHERITED_INTERFACES
from autowire.exceptions import AutoWireAmbiguousContractError


class ContractKind(str, Enum):
    """Shape of a resolved contract type."""

    CLASS = "class"
    """A plain, non-generic class."""

    GENERIC_DEFINITION = "generic_definition"
    """An unbound generic class such as ``Repository``; matches every closed form."""

    CLOSED_GENERIC = "closed_generic"
    """A parameterized form such as ``Repository[User]``, only from explicit overrides."""


@dataclass(frozen=True, slots=True)
class ResolvedContract:
    contract_type: Any
    kind: ContractKind


def resolve_contract(
    candidate: Candidate,
    *,
    collapse_inherited_interfaces: bool = DEFAULT_COLLAPSE_INHERITED_INTERFACES,
) -> ResolvedContract:
    """Decide which contract a candidate is registered under.

    An explicit ``provides`` override always wins and is returned unchanged.
    Otherwise the interfaces introduced by the class itself decide: none means
    the class registers as itself, one means that interface, more than one is
    ambiguous. An inferred parameterized interface is normalized to its generic
    definition, so one registration serves every closed form.

    Args:
        candidate: Candidate to resolve.
        collapse_inherited_interfaces: Drop direct interfaces that another
            direct interface already extends before counting them.

    Raises:
        AutoWireAmbiguousContractError: If two or more direct interfaces remain
            and no override was given.

    """
    if candidate.provides is not None:
        return ResolvedContract(contract_type=candidate.provides, kind=_kind_of(candidate.provides))

    direct = candidate.direct_interfaces
    if collapse_inherited_interfaces:
        direct = most_derived(direct)

    if not direct:
        inferred: Any = candidate.implementation
    elif len(direct) == 1:
        inferred = direct[0]
    else:
        raise AutoWireAmbiguousContractError(candidate.implementation)

    contract_type = definition_of(inferred)
    return ResolvedContract(contract_type=contract_type, kind=_kind_of(contract_type))


def derive_key(candidate: Candidate) -> str | None:
    """Return the registration key of a candidate.

    Keyed candidates always use the implementation's class name.
    """
    if candidate.keyed:
        return candidate.implementation.__name__
    return candidate.key


def _kind_of(contract_type: Any) -> ContractKind:
    if is_parameterized(contract_type):
        if getattr(contract_type, "__parameters__", ()):
            return ContractKind.GENERIC_DEFINITION
        return ContractKind.CLOSED_GENERIC
    if is_generic_definition(contract_type):
        return ContractKind.GENERIC_DEFINITION
    return ContractKind.CLASS


__all__ = ["ContractKind", "ResolvedContract", "derive_key", "resolve_contract"]
