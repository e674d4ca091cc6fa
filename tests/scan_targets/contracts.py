from abc import ABC, abstractmethod
from typing import Protocol


class Clock(Protocol):
    def now(self) -> float: ...


class Notifier(ABC):
    @abstractmethod
    def notify(self, message: str) -> None: ...
