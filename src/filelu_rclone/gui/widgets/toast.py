"""Floating "Command Copied!" notification pinned to the bottom-right corner."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QWidget

from filelu_rclone.gui.theme import Theme

_MARGIN = 20


class ToastNotification(QLabel):
    """Overlay label; visibility is driven by the copy controller state."""

    def __init__(self, text: str = "Command Copied!", parent: QWidget | None = None) -> None:
        super().__init__(text, parent)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.setStyleSheet(Theme.toast())
        self.hide()

    def set_shown(self, shown: bool) -> None:
        if shown:
            self.reposition()
            self.show()
            self.raise_()
        else:
            self.hide()

    def reposition(self) -> None:
        parent = self.parentWidget()
        if parent is None:
            return
        self.adjustSize()
        self.move(
            parent.width() - self.width() - _MARGIN,
            parent.height() - self.height() - _MARGIN,
        )
