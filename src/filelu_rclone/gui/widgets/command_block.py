"""Command block — title, rendered command and a copy button."""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from filelu_rclone.gui.theme import Theme

COPIED_TEXT = "Command copied to clipboard!"


class CommandBlockWidget(QFrame):
    """Shows one rendered command and asks for it to be copied."""

    copy_requested = Signal(str)

    def __init__(self, key: str, title: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("commandBlock")
        self._key = key
        self._title = title
        self._command = ""
        self._copied = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(8)

        self._title_label = QLabel(title)
        self._title_label.setObjectName("commandTitle")
        layout.addWidget(self._title_label)

        row = QHBoxLayout()
        self._command_label = QLabel()
        self._command_label.setObjectName("commandText")
        self._command_label.setTextFormat(Qt.TextFormat.PlainText)
        self._command_label.setWordWrap(True)
        self._command_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        row.addWidget(self._command_label, stretch=1)

        self._copy_btn = QPushButton("📋")
        self._copy_btn.setToolTip("Copy command")
        self._copy_btn.setAccessibleName(f"Copy {title} command")
        self._copy_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self._copy_btn.clicked.connect(self._on_copy_clicked)
        row.addWidget(self._copy_btn, alignment=Qt.AlignmentFlag.AlignTop)
        layout.addLayout(row)

        self._copied_label = QLabel(COPIED_TEXT)
        self._copied_label.setObjectName("copiedLabel")
        self._copied_label.setVisible(False)
        layout.addWidget(self._copied_label)

        self.setStyleSheet(Theme.command_block())
        self._copy_btn.setStyleSheet(Theme.button_primary())

    # ── Public API ────────────────────────────────────────────────────────

    @property
    def key(self) -> str:
        return self._key

    @property
    def title(self) -> str:
        return self._title

    @property
    def command(self) -> str:
        return self._command

    @property
    def is_copied(self) -> bool:
        return self._copied

    def set_command(self, command: str) -> None:
        self._command = command
        self._command_label.setText(command)

    def set_copied(self, copied: bool) -> None:
        if copied == self._copied:
            return
        self._copied = copied
        self._copied_label.setVisible(copied)
        self._copy_btn.setStyleSheet(Theme.button_copied() if copied else Theme.button_primary())

    # ── Slots ─────────────────────────────────────────────────────────────

    def _on_copy_clicked(self) -> None:
        self.copy_requested.emit(self._command)
