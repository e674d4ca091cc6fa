from __future__ import annotations

import types
from typing import Any, TypeGuard, get_origin


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_parameterized(candidate: object) -> bool:
    """Return true when candidate is a subscripted generic such as ``Repository[User]``."""
    return get_origin(candidate) is not None


def is_generic_definition(candidate: object) -> bool:
    """Return true when candidate is a generic class that still declares type parameters."""
    return is_runtime_class(candidate) and bool(getattr(candidate, "__parameters__", ()))


def definition_of(candidate: Any) -> Any:
    """Return the unbound generic definition of a parameterized form, or the form itself."""
    origin = get_origin(candidate)
    if origin is None:
        return candidate
    return origin


__all__ = ["definition_of", "is_generic_definition", "is_parameterized", "is_runtime_class"]
