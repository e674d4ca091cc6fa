from autowire.candidates import Candidate
from autowire.exceptions import (
    AutoWireAmbiguousContractError,
    AutoWireDuplicateRegistrationError,
    AutoWireError,
    AutoWireInvalidMarkerError,
    AutoWireRegistrationError,
)
from autowire.lifetime import Lifetime
from autowire.markers import AutoInjectMarker, Component, auto_inject, get_marker, keyed_auto_inject
from autowire.policies import InterfacePolicy
from autowire.registrar import Registrar, register_auto_injectable
from autowire.registry import Descriptor, Registry
from autowire.resolution import ContractKind, ResolvedContract, derive_key, resolve_contract
from autowire.scanning import iter_marked_classes, scan_modules

__all__ = [
    "AutoInjectMarker",
    "AutoWireAmbiguousContractError",
    "AutoWireDuplicateRegistrationError",
    "AutoWireError",
    "AutoWireInvalidMarkerError",
    "AutoWireRegistrationError",
    "Candidate",
    "Component",
    "ContractKind",
    "Descriptor",
    "InterfacePolicy",
    "Lifetime",
    "Registrar",
    "Registry",
    "ResolvedContract",
    "auto_inject",
    "derive_key",
    "get_marker",
    "iter_marked_classes",
    "keyed_auto_inject",
    "register_auto_injectable",
    "resolve_contract",
    "scan_modules",
]
