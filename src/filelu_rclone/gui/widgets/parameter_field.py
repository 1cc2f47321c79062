"""Labelled single-line input bound to one parameter."""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QLabel, QLineEdit, QVBoxLayout, QWidget

from filelu_rclone.gui.theme import Theme


class ParameterField(QWidget):
    """Label, line edit and an optional note underneath."""

    value_changed = Signal(str)

    def __init__(
        self,
        label: str,
        value: str = "",
        placeholder: str = "",
        note: str = "",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self._label = QLabel(label)
        layout.addWidget(self._label)

        self._edit = QLineEdit(value)
        if placeholder:
            self._edit.setPlaceholderText(placeholder)
        self._label.setBuddy(self._edit)
        self._edit.textChanged.connect(self.value_changed)
        layout.addWidget(self._edit)

        if note:
            note_label = QLabel(note)
            note_label.setWordWrap(True)
            note_label.setStyleSheet(Theme.note())
            layout.addWidget(note_label)

    @property
    def line_edit(self) -> QLineEdit:
        return self._edit

    def value(self) -> str:
        return self._edit.text()

    def set_value(self, value: str) -> None:
        self._edit.setText(value)
