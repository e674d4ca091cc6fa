"""Keyed registrations: several implementations of one contract.

``auto_inject(key=...)`` takes an explicit key. ``keyed_auto_inject`` always
uses the class name as the key. Each keyed descriptor exposes a
``dependency_key`` a host container can register it under.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import get_args

from autowire import Registrar, auto_inject, keyed_auto_inject


class Notifier(ABC):
    @abstractmethod
    def notify(self, message: str) -> str: ...


@auto_inject(key="default")
class LogNotifier(Notifier):
    def notify(self, message: str) -> str:
        return f"log: {message}"


@keyed_auto_inject
class EmailNotifier(Notifier):
    def notify(self, message: str) -> str:
        return f"email: {message}"


def main() -> None:
    registrar = Registrar()
    registrar.register(LogNotifier, EmailNotifier)

    keys = [descriptor.key for descriptor in registrar.registry.for_contract(Notifier)]
    print(f"keys={keys}")  # => keys=['default', 'EmailNotifier']

    email = registrar.registry.find(Notifier, "EmailNotifier")
    assert email is not None
    _, component = get_args(email.dependency_key)
    print(f"component={component.value}")  # => component=EmailNotifier


if __name__ == "__main__":
    main()
