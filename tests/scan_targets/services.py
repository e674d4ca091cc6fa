from abc import abstractmethod

from autowire import Lifetime, auto_inject, keyed_auto_inject
from scan_targets.contracts import Clock, Notifier


@auto_inject(lifetime=Lifetime.SINGLETON)
class SystemClock(Clock):
    def now(self) -> float:
        return 0.0


@keyed_auto_inject
class EmailNotifier(Notifier):
    def notify(self, message: str) -> None:
        pass


@keyed_auto_inject
class SmsNotifier(Notifier):
    def notify(self, message: str) -> None:
        pass


@auto_inject
class AbstractNotifier(Notifier):
    @abstractmethod
    def channel(self) -> str: ...


class UnmarkedService:
    pass


class DerivedClock(SystemClock):
    pass
