"""Port: Scheduler — run a callback once after a delay, with cancellation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class TimerHandle(ABC):
    """Handle to one scheduled callback."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from firing. Safe to call more than once."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """True while the callback is still pending."""


class SchedulerPort(ABC):
    """Contract for single-shot timers driven by the host event loop."""

    @abstractmethod
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        """Run *callback* once after *delay_ms* milliseconds."""
