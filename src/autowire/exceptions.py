from __future__ import annotations

from typing import Any, get_origin


class AutoWireError(Exception):
    """Represent a base class for all AutoWire-specific failures.

    Catch this type when you want to handle any AutoWire error path without
    matching each concrete exception class individually.
    """


class AutoWireInvalidMarkerError(AutoWireError):
    """Signal invalid use of ``auto_inject`` or ``keyed_auto_inject``.

    Raised when a marker decorates something that is not a class, when a class
    is marked twice in its own body, when the lifetime or key has the wrong
    type, or when a candidate is built from a class that carries no marker.

    Typical fixes include decorating the concrete class once, passing a
    ``Lifetime`` member and a ``str`` key, or marking the class before handing
    it to ``Registrar.register``.
    """


class AutoWireRegistrationError(AutoWireError):
    """Signal a failure of the registration engine.

    Both subclasses are fatal to the current registration batch. Descriptors
    appended before the failing class stay in the registry.
    """


class AutoWireAmbiguousContractError(AutoWireRegistrationError):
    """Signal that a contract cannot be inferred for an implementation.

    Raised when a class introduces two or more interfaces of its own and no
    explicit ``provides`` override was given.

    Typical fix is passing ``provides=...`` to the marker.
    """

    def __init__(self, implementation: type[Any]) -> None:
        self.implementation = implementation
        super().__init__(
            f"The class '{_qualified_name(implementation)}' implements multiple interfaces, "
            "but no explicit contract is specified with 'provides'. "
            "Please provide a contract to avoid ambiguity.",
        )


class AutoWireDuplicateRegistrationError(AutoWireRegistrationError):
    """Signal that a contract and key pair is already registered.

    Raised when the registry already holds a descriptor with the same
    contract type and an equal key. ``None`` only equals ``None``.

    Typical fixes include giving one of the implementations a distinct key,
    switching it to ``keyed_auto_inject`` or registering it under another
    contract.
    """

    def __init__(
        self,
        new_implementation: type[Any],
        existing_implementation: type[Any],
        contract_type: Any,
        key: str | None,
    ) -> None:
        self.new_implementation = new_implementation
        self.existing_implementation = existing_implementation
        self.contract_type = contract_type
        self.key = key
        super().__init__(
            "A conflict occurred while registering services. "
            f"The class '{_qualified_name(new_implementation)}' is trying to register as "
            f"'{_qualified_name(contract_type)}' with key {key!r}, but it conflicts with an "
            f"existing registration: '{_qualified_name(existing_implementation)}'. "
            "Duplicate registrations are not allowed.",
        )


def _qualified_name(value: Any) -> str:
    if get_origin(value) is not None:
        return repr(value)
    module = getattr(value, "__module__", None)
    qualname = getattr(value, "__qualname__", None)
    if module is None or qualname is None:
        return repr(value)
    return f"{module}.{qualname}"
