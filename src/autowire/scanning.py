from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from collections.abc import Iterable, Iterator
from types import ModuleType
from typing import Any

from autowire._internal.type_checks import is_runtime_class
from autowire.candidates import Candidate
from autowire.markers import get_marker
from autowire.policies import DEFAULT_INTERFACE_POLICY, InterfacePolicy

logger = logging.getLogger(__name__)


def iter_marked_classes(module: ModuleType) -> Iterator[type[Any]]:
    """Yield the registrable classes defined in a module, in definition order.

    A class qualifies when it is defined in ``module`` (not imported into it),
    declares its own marker and is concrete. Abstract classes and protocols
    are skipped even when marked. A class bound to several names is yielded
    once, at its first binding.
    """
    seen: set[type[Any]] = set()
    for value in list(vars(module).values()):
        if not is_runtime_class(value) or value.__module__ != module.__name__:
            continue
        if value in seen:
            continue
        seen.add(value)
        if get_marker(value) is None:
            continue
        if inspect.isabstract(value) or getattr(value, "_is_protocol", False):
            logger.debug("Skipping abstract class %s.%s", module.__name__, value.__qualname__)
            continue
        yield value


def scan_modules(
    *modules: ModuleType | str,
    recursive: bool = True,
    interface_policy: InterfacePolicy = DEFAULT_INTERFACE_POLICY,
) -> Iterator[Candidate]:
    """Yield candidates for every marked class found in the given modules.

    Args:
        modules: Module objects or dotted module names. Names are imported.
        recursive: Also scan every sub-module of packages.
        interface_policy: Policy used to precompute each candidate's interfaces.

    Yields:
        One candidate per class, in module order then definition order. A class
        reachable from several modules is yielded once.

    """
    seen: set[type[Any]] = set()
    for module in _iter_modules(modules, recursive=recursive):
        logger.debug("Scanning module %s for auto-inject classes", module.__name__)
        for cls in iter_marked_classes(module):
            if cls in seen:
                continue
            seen.add(cls)
            yield Candidate.from_class(cls, interface_policy=interface_policy)


def _iter_modules(
    modules: Iterable[ModuleType | str],
    *,
    recursive: bool,
) -> Iterator[ModuleType]:
    seen_names: set[str] = set()
    for entry in modules:
        module = importlib.import_module(entry) if isinstance(entry, str) else entry
        for found in _walk(module, recursive=recursive):
            if found.__name__ in seen_names:
                continue
            seen_names.add(found.__name__)
            yield found


def _walk(module: ModuleType, *, recursive: bool) -> Iterator[ModuleType]:
    yield module
    package_path = getattr(module, "__path__", None)
    if not recursive or package_path is None:
        return
    for module_info in pkgutil.walk_packages(package_path, prefix=f"{module.__name__}."):
        yield importlib.import_module(module_info.name)


__all__ = ["iter_marked_classes", "scan_modules"]
