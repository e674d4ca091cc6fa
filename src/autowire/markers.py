from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NamedTuple, TypeVar, overload

from autowire._internal.type_checks import is_runtime_class
from autowire.defaults import DEFAULT_LIFETIME
from autowire.exceptions import AutoWireInvalidMarkerError
from autowire.lifetime import Lifetime

C = TypeVar("C", bound=type[Any])

MARKER_ATTRIBUTE = "__autowire_marker__"


class Component(NamedTuple):
    """Differentiate keyed registrations of the same contract.

    Keyed descriptors expose their dependency key as
    ``Annotated[contract, Component(key)]`` so host containers treat each key
    as a distinct dependency.
    """

    value: Any


@dataclass(frozen=True, slots=True)
class AutoInjectMarker:
    """Registration metadata attached to a class by ``auto_inject``.

    The marker lives in the class's own namespace, so subclasses of a marked
    class are not registered unless they are decorated themselves.
    """

    lifetime: Lifetime = DEFAULT_LIFETIME
    key: str | None = None
    provides: Any | None = None
    """Explicit contract override. ``None`` lets the contract be inferred."""
    keyed: bool = False
    """True when the class was marked with ``keyed_auto_inject``."""


@overload
def auto_inject(
    cls: C,
    *,
    key: str | None = None,
    lifetime: Lifetime = DEFAULT_LIFETIME,
    provides: Any | None = None,
) -> C: ...


@overload
def auto_inject(
    cls: None = None,
    *,
    key: str | None = None,
    lifetime: Lifetime = DEFAULT_LIFETIME,
    provides: Any | None = None,
) -> Callable[[C], C]: ...


def auto_inject(
    cls: C | None = None,
    *,
    key: str | None = None,
    lifetime: Lifetime = DEFAULT_LIFETIME,
    provides: Any | None = None,
) -> C | Callable[[C], C]:
    """Mark a class for automatic registration.

    Args:
        cls: Class to mark in bare decorator form, ``None`` when called with
            arguments.
        key: Optional key distinguishing this implementation from siblings
            registered under the same contract.
        lifetime: Lifetime recorded on the descriptor.
        provides: Explicit contract type. Required when the class introduces
            more than one interface of its own.

    Returns:
        The class itself in bare form, or a decorator in call form.

    Raises:
        AutoWireInvalidMarkerError: If the target is not a class, is already
            marked, or the arguments have the wrong types.

    Examples:
        .. code-block:: python

            @auto_inject(lifetime=Lifetime.SINGLETON)
            class SqlUserRepository(UserRepository): ...

    """
    if isinstance(cls, str):
        msg = f"Pass the key as a keyword argument: auto_inject(key={cls!r})."
        raise AutoWireInvalidMarkerError(msg)
    _validate_arguments(key=key, lifetime=lifetime)
    marker = AutoInjectMarker(lifetime=lifetime, key=key, provides=provides)
    if cls is None:
        return lambda decorated: _attach(decorated, marker)
    return _attach(cls, marker)


@overload
def keyed_auto_inject(
    cls: C,
    *,
    lifetime: Lifetime = DEFAULT_LIFETIME,
    provides: Any | None = None,
) -> C: ...


@overload
def keyed_auto_inject(
    cls: None = None,
    *,
    lifetime: Lifetime = DEFAULT_LIFETIME,
    provides: Any | None = None,
) -> Callable[[C], C]: ...


def keyed_auto_inject(
    cls: C | None = None,
    *,
    lifetime: Lifetime = DEFAULT_LIFETIME,
    provides: Any | None = None,
) -> C | Callable[[C], C]:
    """Mark a class for registration keyed by its own class name.

    The key is always ``cls.__name__``; no caller-supplied key is accepted.

    Examples:
        .. code-block:: python

            @keyed_auto_inject
            class SmtpSender(Sender): ...

            # registered under Sender with key "SmtpSender"

    """
    _validate_arguments(key=None, lifetime=lifetime)
    marker = AutoInjectMarker(lifetime=lifetime, provides=provides, keyed=True)
    if cls is None:
        return lambda decorated: _attach(decorated, marker)
    return _attach(cls, marker)


def get_marker(cls: type[Any]) -> AutoInjectMarker | None:
    """Return the marker declared on ``cls`` itself, ignoring base classes."""
    marker = vars(cls).get(MARKER_ATTRIBUTE)
    if isinstance(marker, AutoInjectMarker):
        return marker
    return None


def is_marked(cls: object) -> bool:
    """Return whether ``cls`` is a class carrying its own marker."""
    return is_runtime_class(cls) and get_marker(cls) is not None


def _attach(cls: C, marker: AutoInjectMarker) -> C:
    if not is_runtime_class(cls):
        msg = f"Auto-inject markers can only decorate classes, got {cls!r}."
        raise AutoWireInvalidMarkerError(msg)
    if get_marker(cls) is not None:
        msg = f"Class '{cls.__qualname__}' is already marked for automatic registration."
        raise AutoWireInvalidMarkerError(msg)
    setattr(cls, MARKER_ATTRIBUTE, marker)
    return cls


def _validate_arguments(*, key: object, lifetime: object) -> None:
    if not isinstance(lifetime, Lifetime):
        msg = f"Lifetime must be a Lifetime member, got {lifetime!r}."
        raise AutoWireInvalidMarkerError(msg)
    if key is not None and not isinstance(key, str):
        msg = f"Key must be a string or None, got {key!r}."
        raise AutoWireInvalidMarkerError(msg)


__all__ = [
    "MARKER_ATTRIBUTE",
    "AutoInjectMarker",
    "Component",
    "auto_inject",
    "get_marker",
    "is_marked",
    "keyed_auto_inject",
]
