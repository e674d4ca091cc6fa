"""Quickstart: mark implementations and build a registry from them.

Each marked class is bound to the single interface it introduces, or to
itself when it introduces none.
"""

from __future__ import annotations

from typing import Protocol

from autowire import Descriptor, Lifetime, Registrar, Registry, auto_inject


class Clock(Protocol):
    def now(self) -> float: ...


@auto_inject(lifetime=Lifetime.SINGLETON)
class SystemClock(Clock):
    def now(self) -> float:
        return 0.0


@auto_inject
class ReportService:
    def __init__(self, clock: Clock) -> None:
        self.clock = clock


def describe(descriptor: Descriptor) -> str:
    return (
        f"{descriptor.contract_type.__name__} -> {descriptor.implementation.__name__} "
        f"({descriptor.lifetime.value})"
    )


def main() -> None:
    registry = Registry()
    clock, report = Registrar(registry).register(SystemClock, ReportService)

    print(describe(clock))  # => Clock -> SystemClock (singleton)
    print(describe(report))  # => ReportService -> ReportService (scoped)
    print(f"registered={len(registry)}")  # => registered=2


if __name__ == "__main__":
    main()
