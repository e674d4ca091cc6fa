"""Errors: ambiguous contracts and duplicate registrations.

Both errors stop the registration pass immediately. Descriptors appended
before the failing class stay in the registry.
"""

from __future__ import annotations

from typing import Protocol

from autowire import (
    AutoWireAmbiguousContractError,
    AutoWireDuplicateRegistrationError,
    Registrar,
    Registry,
    auto_inject,
)


class Reader(Protocol):
    def read(self) -> bytes: ...


class Writer(Protocol):
    def write(self, data: bytes) -> None: ...


@auto_inject
class FileStream(Reader, Writer):
    def read(self) -> bytes:
        return b""

    def write(self, data: bytes) -> None:
        pass


@auto_inject
class DiskReader(Reader):
    def read(self) -> bytes:
        return b""


@auto_inject
class NetworkReader(Reader):
    def read(self) -> bytes:
        return b""


def main() -> None:
    try:
        Registrar().register(FileStream)
    except AutoWireAmbiguousContractError as error:
        print(f"ambiguous={error.implementation.__name__}")  # => ambiguous=FileStream

    registry = Registry()
    try:
        Registrar(registry).register(DiskReader, NetworkReader)
    except AutoWireDuplicateRegistrationError as error:
        print(
            f"duplicate={error.new_implementation.__name__} "
            f"existing={error.existing_implementation.__name__}",
        )  # => duplicate=NetworkReader existing=DiskReader

    print(f"kept={len(registry)}")  # => kept=1


if __name__ == "__main__":
    main()
