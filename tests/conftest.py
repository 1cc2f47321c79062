"""Shared fixtures and test doubles for the FileLu Rclone helper suite."""

from __future__ import annotations

import os
from typing import Callable

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from filelu_rclone.config.loader import clear_cache, get_catalog  # noqa: E402
from filelu_rclone.domain.errors import ClipboardError  # noqa: E402
from filelu_rclone.domain.models.command import CommandCatalog  # noqa: E402
from filelu_rclone.domain.models.parameters import CommandParameters  # noqa: E402
from filelu_rclone.domain.ports.clipboard_port import ClipboardPort  # noqa: E402
from filelu_rclone.domain.ports.scheduler_port import SchedulerPort, TimerHandle  # noqa: E402


# ── Doubles ───────────────────────────────────────────────────────────────


class FakeClipboard(ClipboardPort):
    """Records copies; raises ClipboardError while ``fail`` is set."""

    name = "fake"

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.copied: list[str] = []

    def copy(self, text: str) -> None:
        if self.fail:
            raise ClipboardError("clipboard disabled for test")
        self.copied.append(text)


class _ManualHandle(TimerHandle):
    def __init__(self, due: int, callback: Callable[[], None]) -> None:
        self.due = due
        self._callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False

    def fire(self) -> None:
        if self._active:
            self._active = False
            self._callback()


class ManualScheduler(SchedulerPort):
    """Virtual-clock scheduler; timers fire only inside ``advance``."""

    def __init__(self) -> None:
        self.now = 0
        self._handles: list[_ManualHandle] = []

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        handle = _ManualHandle(self.now + delay_ms, callback)
        self._handles.append(handle)
        return handle

    @property
    def pending(self) -> list[_ManualHandle]:
        return [h for h in self._handles if h.active]

    def advance(self, ms: int) -> None:
        target = self.now + ms
        while True:
            due = sorted((h for h in self.pending if h.due <= target), key=lambda h: h.due)
            if not due:
                break
            handle = due[0]
            self.now = handle.due
            handle.fire()
        self.now = target


# ── Fixtures ──────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _fresh_catalog_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture()
def catalog() -> CommandCatalog:
    return get_catalog().to_catalog()


@pytest.fixture()
def params() -> CommandParameters:
    return CommandParameters()


@pytest.fixture()
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture(scope="session")
def qapp():
    """Create a QApplication for widget tests."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
