from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from typing_extensions import Self

from autowire._internal.interfaces import implemented_interfaces, inherited_interfaces
from autowire.defaults import DEFAULT_LIFETIME
from autowire.exceptions import AutoWireInvalidMarkerError
from autowire.lifetime import Lifetime
from autowire.markers import AutoInjectMarker, get_marker
from autowire.policies import DEFAULT_INTERFACE_POLICY, InterfacePolicy


@dataclass(frozen=True, slots=True, kw_only=True)
class Candidate:
    """An implementation class together with its registration metadata.

    Candidates are immutable snapshots. The interface relations are computed
    once when the candidate is built and never walked again by the engine.
    """

    implementation: type[Any]
    """The class that will be registered."""

    interfaces: tuple[Any, ...] = ()
    """Every interface the class implements, transitively, in declared form."""

    inherited_interfaces: tuple[Any, ...] = ()
    """Interfaces the class receives through its base classes."""

    provides: Any | None = None
    """Explicit contract override, or ``None`` to infer it."""

    lifetime: Lifetime = DEFAULT_LIFETIME
    key: str | None = None

    keyed: bool = False
    """True when the class used ``keyed_auto_inject``."""

    @property
    def direct_interfaces(self) -> tuple[Any, ...]:
        """Interfaces introduced by the class itself, in declaration order."""
        return tuple(
            interface
            for interface in self.interfaces
            if interface not in self.inherited_interfaces
        )

    @classmethod
    def from_class(
        cls,
        implementation: type[Any],
        *,
        marker: AutoInjectMarker | None = None,
        interface_policy: InterfacePolicy = DEFAULT_INTERFACE_POLICY,
    ) -> Self:
        """Build a candidate from a marked class.

        Args:
            implementation: Class to snapshot.
            marker: Marker to use instead of the one declared on the class.
            interface_policy: Policy deciding which bases are interfaces.

        Raises:
            AutoWireInvalidMarkerError: If no marker is given and the class
                does not declare one itself.

        """
        if marker is None:
            marker = get_marker(implementation)
        if marker is None:
            msg = (
                f"Class '{implementation.__qualname__}' is not marked with "
                "auto_inject or keyed_auto_inject."
            )
            raise AutoWireInvalidMarkerError(msg)

        return cls(
            implementation=implementation,
            interfaces=implemented_interfaces(implementation, policy=interface_policy),
            inherited_interfaces=inherited_interfaces(implementation, policy=interface_policy),
            provides=marker.provides,
            lifetime=marker.lifetime,
            key=marker.key,
            keyed=marker.keyed,
        )
