"""Shared pytest fixtures for autowire tests."""

import pytest

from autowire.registrar import Registrar
from autowire.registry import Registry


@pytest.fixture()
def registry() -> Registry:
    """Empty registry owned by the test."""
    return Registry()


@pytest.fixture()
def registrar(registry: Registry) -> Registrar:
    """Registrar appending to the ``registry`` fixture."""
    return Registrar(registry)
