from __future__ import annotations

import inspect
from abc import ABC, ABCMeta
from dataclasses import dataclass
from typing import Any, TypeGuard

from autowire._internal.type_checks import is_runtime_class
from autowire.defaults import DEFAULT_IGNORED_INTERFACE_BASES


@dataclass(frozen=True, slots=True)
class InterfacePolicy:
    """Decide which classes in an implementation's hierarchy count as interfaces.

    Protocol classes are interfaces. An ``ABCMeta`` class is an interface when
    it lists ``ABC`` directly among its bases, or when it is abstract and its
    own namespace declares nothing but abstract members. A partly implemented
    abstract class, such as a template-method base, is a base type: the
    interfaces it implements are inherited by its subclasses, not introduced.
    """

    ignored_bases: tuple[type[Any], ...] = DEFAULT_IGNORED_INTERFACE_BASES
    include_protocols: bool = True
    include_abcs: bool = True

    def is_interface(self, candidate: object) -> TypeGuard[type[Any]]:
        """Return true when a class should be treated as a contract interface.

        Args:
            candidate: Class taken from an implementation's bases, already
                stripped of any generic parameters.

        """
        if not self.is_relevant(candidate):
            return False
        if getattr(candidate, "_is_protocol", False):
            return self.include_protocols
        if not self.include_abcs or not isinstance(candidate, ABCMeta):
            return False
        if ABC in candidate.__bases__:
            return True
        return inspect.isabstract(candidate) and not _defines_concrete_members(candidate)

    def is_relevant(self, candidate: object) -> TypeGuard[type[Any]]:
        """Return true when a base takes part in interface analysis at all."""
        return is_runtime_class(candidate) and candidate not in self.ignored_bases


def _defines_concrete_members(cls: type[Any]) -> bool:
    for name, value in vars(cls).items():
        if name.startswith("__") and name.endswith("__"):
            continue
        is_member = inspect.isfunction(value) or isinstance(
            value,
            property | classmethod | staticmethod,
        )
        if not is_member:
            continue
        if not getattr(value, "__isabstractmethod__", False):
            return True
    return False


DEFAULT_INTERFACE_POLICY = InterfacePolicy()
