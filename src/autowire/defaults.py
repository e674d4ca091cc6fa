from abc import ABC
from typing import Any, Generic, Protocol

from autowire.lifetime import Lifetime

DEFAULT_LIFETIME = Lifetime.SCOPED

DEFAULT_IGNORED_INTERFACE_BASES: tuple[type[Any], ...] = (
    object,
    ABC,
    Generic,  # type: ignore[arg-type]
    Protocol,  # type: ignore[arg-type]
)

DEFAULT_COLLAPSE_INHERITED_INTERFACES = True
