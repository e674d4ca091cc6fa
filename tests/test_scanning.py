from __future__ import annotations

import logging
import types

import pytest

import scan_targets.services as services_module
from autowire.lifetime import Lifetime
from autowire.markers import auto_inject
from autowire.policies import InterfacePolicy
from autowire.scanning import iter_marked_classes, scan_modules
from scan_targets.contracts import Clock, Notifier
from scan_targets.nested.handlers import AuditHandler
from scan_targets.services import EmailNotifier, SmsNotifier, SystemClock


def test_iter_marked_classes_skips_abstract_unmarked_and_derived_classes() -> None:
    assert list(iter_marked_classes(services_module)) == [
        SystemClock,
        EmailNotifier,
        SmsNotifier,
    ]


def test_iter_marked_classes_ignores_classes_imported_from_other_modules() -> None:
    import scan_targets.nested.handlers as handlers_module

    assert list(iter_marked_classes(handlers_module)) == [AuditHandler]


def test_iter_marked_classes_reads_ad_hoc_modules() -> None:
    module = types.ModuleType("adhoc_services")

    @auto_inject
    class Worker:
        pass

    Worker.__module__ = module.__name__
    module.Worker = Worker  # type: ignore[attr-defined]

    assert list(iter_marked_classes(module)) == [Worker]


def test_iter_marked_classes_yields_aliased_class_once() -> None:
    module = types.ModuleType("aliased_services")

    @auto_inject
    class Worker:
        pass

    Worker.__module__ = module.__name__
    module.Worker = Worker  # type: ignore[attr-defined]
    module.DefaultWorker = Worker  # type: ignore[attr-defined]

    assert list(iter_marked_classes(module)) == [Worker]


def test_scan_modules_walks_packages_in_name_order() -> None:
    candidates = list(scan_modules("scan_targets"))

    assert [candidate.implementation for candidate in candidates] == [
        AuditHandler,
        SystemClock,
        EmailNotifier,
        SmsNotifier,
    ]


def test_scan_modules_without_recursion_only_reads_given_module() -> None:
    assert list(scan_modules("scan_targets", recursive=False)) == []


def test_scan_modules_yields_each_class_once() -> None:
    candidates = list(scan_modules(services_module, "scan_targets.services"))

    assert [candidate.implementation for candidate in candidates] == [
        SystemClock,
        EmailNotifier,
        SmsNotifier,
    ]


def test_scanned_candidates_carry_marker_metadata() -> None:
    clock, email, _ = scan_modules(services_module)

    assert clock.interfaces == (Clock,)
    assert clock.lifetime is Lifetime.SINGLETON
    assert email.interfaces == (Notifier,)
    assert email.keyed is True


def test_scan_modules_uses_interface_policy() -> None:
    (clock, *_) = scan_modules(
        services_module,
        interface_policy=InterfacePolicy(include_protocols=False),
    )

    assert clock.interfaces == ()


def test_scan_modules_propagates_import_errors() -> None:
    with pytest.raises(ModuleNotFoundError):
        list(scan_modules("scan_targets_missing"))


def test_scanned_modules_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="autowire.scanning")

    list(scan_modules("scan_targets.services"))

    messages = [record.getMessage() for record in caplog.records]
    assert "Scanning module scan_targets.services for auto-inject classes" in messages
    assert "Skipping abstract class scan_targets.services.AbstractNotifier" in messages
