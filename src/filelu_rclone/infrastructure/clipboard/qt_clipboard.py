"""Qt clipboard — implements ClipboardPort through QGuiApplication.clipboard()."""

from __future__ import annotations

from PySide6.QtGui import QGuiApplication

from filelu_rclone.domain.errors import ClipboardError
from filelu_rclone.domain.ports.clipboard_port import ClipboardPort


class QtClipboard(ClipboardPort):
    """Direct clipboard write; requires a running Qt application."""

    name = "qt"

    @staticmethod
    def is_available() -> bool:
        return QGuiApplication.instance() is not None

    def copy(self, text: str) -> None:
        if not self.is_available():
            raise ClipboardError("No Qt application is running.")
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            raise ClipboardError("Qt clipboard is not available.")
        clipboard.setText(text)
