"""Use Case: Copy a rendered command and drive the copy feedback.

The controller owns the copy signal state. On a successful copy it flags
the command, shows the notification and (re)arms two independent timers
through an injected SchedulerPort:

- after ``copied_delay_ms`` the copied slot is cleared;
- after ``notification_delay_ms`` the notification is hidden.

There is a single copied slot: copying another command before expiry
overwrites the slot and restarts both timers. Failed copies leave the
state untouched and never raise.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from filelu_rclone.domain.models.copy_signal import CopySignalState
from filelu_rclone.domain.ports.clipboard_port import ClipboardPort
from filelu_rclone.domain.ports.scheduler_port import SchedulerPort, TimerHandle

logger = logging.getLogger(__name__)

COPIED_DELAY_MS = 1500
NOTIFICATION_DELAY_MS = 2000

StateListener = Callable[[CopySignalState], None]
FailureListener = Callable[[str], None]


class CopyInteractionController:
    """Copy commands to the clipboard and manage the transient copied signal."""

    def __init__(
        self,
        clipboard: ClipboardPort,
        scheduler: SchedulerPort,
        copied_delay_ms: int = COPIED_DELAY_MS,
        notification_delay_ms: int = NOTIFICATION_DELAY_MS,
    ) -> None:
        self._clipboard = clipboard
        self._scheduler = scheduler
        self._copied_delay_ms = copied_delay_ms
        self._notification_delay_ms = notification_delay_ms

        self._state = CopySignalState()
        self._copied_timer: Optional[TimerHandle] = None
        self._notification_timer: Optional[TimerHandle] = None

        self._state_listeners: list[StateListener] = []
        self._failure_listeners: list[FailureListener] = []

    # -- Public API ----------------------------------------------------------

    @property
    def state(self) -> CopySignalState:
        return self._state

    def is_copied(self, command: str) -> bool:
        return self._state.is_copied(command)

    def on_state_changed(self, listener: StateListener) -> None:
        self._state_listeners.append(listener)

    def on_copy_failed(self, listener: FailureListener) -> None:
        self._failure_listeners.append(listener)

    def attempt_copy(self, command: str) -> bool:
        """Copy *command* to the clipboard.

        Returns:
            ``True`` if the clipboard accepted the text. On ``False`` the
            copied slot and notification are left as they were.
        """
        if not self._clipboard.write_text(command):
            for listener in list(self._failure_listeners):
                listener(command)
            return False

        self._cancel_timers()
        self._state.active_copied_command = command
        self._state.notification_visible = True
        self._copied_timer = self._scheduler.schedule(
            self._copied_delay_ms, self._clear_copied
        )
        self._notification_timer = self._scheduler.schedule(
            self._notification_delay_ms, self._hide_notification
        )
        logger.debug("Copied %r via %s", command, self._clipboard.name)
        self._emit()
        return True

    def teardown(self) -> None:
        """Cancel pending timers; call when the owning view goes away."""
        self._cancel_timers()

    # -- Internal ------------------------------------------------------------

    def _clear_copied(self) -> None:
        self._copied_timer = None
        self._state.active_copied_command = None
        self._emit()

    def _hide_notification(self) -> None:
        self._notification_timer = None
        self._state.notification_visible = False
        self._emit()

    def _cancel_timers(self) -> None:
        for timer in (self._copied_timer, self._notification_timer):
            if timer is not None and timer.active:
                timer.cancel()
                logger.debug("Cancelled pending copy-feedback timer")
        self._copied_timer = None
        self._notification_timer = None

    def _emit(self) -> None:
        for listener in list(self._state_listeners):
            listener(self._state)
