"""Clipboard adapters and startup capability probing."""

from __future__ import annotations

import logging

from filelu_rclone.domain.errors import ClipboardError
from filelu_rclone.domain.ports.clipboard_port import ClipboardPort
from filelu_rclone.infrastructure.clipboard.qt_clipboard import QtClipboard
from filelu_rclone.infrastructure.clipboard.system_clipboard import SystemClipboard, detect_backend
from filelu_rclone.infrastructure.clipboard.unavailable_clipboard import UnavailableClipboard

logger = logging.getLogger(__name__)


def detect_clipboard(prefer_qt: bool = True) -> ClipboardPort:
    """Pick the clipboard variant once, at startup.

    Order: Qt (when an application instance exists), then an OS tool, then
    the unavailable variant so callers always get a usable port.
    """
    if prefer_qt and QtClipboard.is_available():
        logger.debug("Using Qt clipboard")
        return QtClipboard()
    try:
        command = detect_backend()
    except ClipboardError as exc:
        logger.debug("No clipboard backend: %s", exc)
        return UnavailableClipboard(str(exc))
    logger.debug("Using system clipboard: %s", " ".join(command))
    return SystemClipboard(command)


__all__ = [
    "QtClipboard",
    "SystemClipboard",
    "UnavailableClipboard",
    "detect_clipboard",
]
