"""Infrastructure layer — external framework adapters."""

from filelu_rclone.infrastructure.clipboard import (
    QtClipboard,
    SystemClipboard,
    UnavailableClipboard,
    detect_clipboard,
)
from filelu_rclone.infrastructure.scheduling.qt_scheduler import QtScheduler

__all__ = [
    "QtClipboard",
    "QtScheduler",
    "SystemClipboard",
    "UnavailableClipboard",
    "detect_clipboard",
]
