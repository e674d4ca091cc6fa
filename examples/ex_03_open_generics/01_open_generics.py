"""Open generics: one registration for every closed form of a generic contract.

An inferred ``Repository[User]`` contract is registered as ``Repository``.
An explicit ``provides=`` override is kept exactly as written.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from autowire import Registrar, auto_inject

T = TypeVar("T")


class User:
    pass


class Order:
    pass


class Repository(ABC, Generic[T]):
    @abstractmethod
    def get(self, identifier: int) -> T: ...


@auto_inject
class UserRepository(Repository[User]):
    def get(self, identifier: int) -> User:
        return User()


@auto_inject(provides=Repository[Order])
class OrderRepository(Repository[Order]):
    def get(self, identifier: int) -> Order:
        return Order()


def main() -> None:
    users, orders = Registrar().register(UserRepository, OrderRepository)

    print(f"inferred={users.contract_type.__name__}")  # => inferred=Repository
    print(f"inferred_kind={users.contract_kind.value}")  # => inferred_kind=generic_definition
    print(f"override_is_closed={orders.contract_type == Repository[Order]}")  # => override_is_closed=True
    print(f"override_kind={orders.contract_kind.value}")  # => override_kind=closed_generic


if __name__ == "__main__":
    main()
