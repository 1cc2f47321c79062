"""Qt scheduler — single-shot QTimers driven by the Qt event loop."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer

from filelu_rclone.domain.ports.scheduler_port import SchedulerPort, TimerHandle

logger = logging.getLogger(__name__)


class _QtTimerHandle(TimerHandle):
    def __init__(self, timer: QTimer, callback: Callable[[], None]) -> None:
        self._timer = timer
        self._callback = callback
        self._done = False
        timer.timeout.connect(self._fire)

    @property
    def active(self) -> bool:
        return not self._done

    def cancel(self) -> None:
        if self._done:
            return
        self._done = True
        self._timer.stop()
        self._timer.deleteLater()

    def _fire(self) -> None:
        if self._done:
            return
        self._done = True
        self._timer.deleteLater()
        self._callback()


class QtScheduler(SchedulerPort):
    """Schedule callbacks on the Qt event loop.

    Timers are parented to *owner* so they die with it; handles must still
    be cancelled on teardown so no callback fires against a closed view.
    """

    def __init__(self, owner: Optional[QObject] = None) -> None:
        self._owner = owner

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        timer = QTimer(self._owner)
        timer.setSingleShot(True)
        timer.setInterval(delay_ms)
        handle = _QtTimerHandle(timer, callback)
        timer.start()
        logger.debug("Scheduled callback in %d ms", delay_ms)
        return handle
