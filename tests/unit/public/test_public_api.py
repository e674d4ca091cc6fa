from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

import autowire


def _class_defined_public_methods(cls: type[Any]) -> list[tuple[str, Callable[..., Any]]]:
    methods: list[tuple[str, Callable[..., Any]]] = []
    for name, member in vars(cls).items():
        if name.startswith("_"):
            continue
        if isinstance(member, staticmethod | classmethod):
            member = member.__func__
        if inspect.isfunction(member):
            methods.append((name, member))
    return sorted(methods, key=lambda item: item[0])


def test_all_names_are_importable_from_package_root() -> None:
    missing = [name for name in autowire.__all__ if not hasattr(autowire, name)]

    assert missing == []
    assert sorted(autowire.__all__) == autowire.__all__


def test_exported_objects_and_public_methods_have_docstrings() -> None:
    undocumented: list[str] = []

    for export_name in autowire.__all__:
        exported = getattr(autowire, export_name)
        if not inspect.getdoc(exported):
            undocumented.append(export_name)
        if not inspect.isclass(exported):
            continue
        for method_name, method in _class_defined_public_methods(exported):
            if not inspect.getdoc(method):
                undocumented.append(f"{export_name}.{method_name}")

    assert undocumented == []
