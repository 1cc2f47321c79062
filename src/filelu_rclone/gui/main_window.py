"""Main application window for the FileLu Rclone helper.

Layout
──────
┌──────────────────────────────────────────────────────────┐
│  Header  (title, subtitle)                               │
├──────────────────────────────────────────────────────────┤
│  1. Rclone Configuration Setup                           │
│     [Remote Name] [FileLu Rclone Key]                    │
│     rclone config                              [📋]      │
│     hint                                                 │
├──────────────────────────────────────────────────────────┤
│  2. File Management Command Examples                     │
│     [Local Folder Path] [FileLu Remote Path]             │
│     ┌──────────────┐ ┌──────────────┐                    │
│     │ command      │ │ command      │  (2 columns)       │
│     └──────────────┘ └──────────────┘                    │
│     sync warning                                         │
├──────────────────────────────────────────────────────────┤
│  Status bar                                  [toast]     │
└──────────────────────────────────────────────────────────┘
"""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from filelu_rclone.application.use_cases.copy_command import CopyInteractionController
from filelu_rclone.bootstrap import Container
from filelu_rclone.domain.models.command import CatalogSection
from filelu_rclone.domain.models.copy_signal import CopySignalState
from filelu_rclone.domain.models.parameters import CommandParameters
from filelu_rclone.domain.ports.scheduler_port import SchedulerPort
from filelu_rclone.gui.theme import Theme
from filelu_rclone.gui.widgets.command_block import CommandBlockWidget
from filelu_rclone.gui.widgets.parameter_field import ParameterField
from filelu_rclone.gui.widgets.toast import ToastNotification
from filelu_rclone.infrastructure.scheduling.qt_scheduler import QtScheduler

logger = logging.getLogger(__name__)

_EXAMPLE_COLUMNS = 2


class FileLuMainWindow(QMainWindow):
    """Parameter inputs plus live-rendered, copyable rclone commands."""

    def __init__(
        self,
        container: Container | None = None,
        scheduler: SchedulerPort | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("FileLu Rclone Client")
        self.setMinimumSize(900, 700)
        self.toast = ToastNotification(parent=self)

        # State
        self._container = container or Container()
        self._params = self._container.new_parameters()
        self._render_uc = self._container.render_commands()
        self._controller = self._container.copy_controller(scheduler or QtScheduler(self))
        self._notes = self._container.config.notes
        self._blocks: dict[str, CommandBlockWidget] = {}

        # --- Widgets -------------------------------------------------------
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(32, 24, 32, 32)
        layout.setSpacing(24)
        layout.addWidget(self._build_header())
        layout.addWidget(self._build_setup_section())
        layout.addWidget(self._build_examples_section())
        layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(content)
        self.setCentralWidget(scroll)

        # --- Status bar ----------------------------------------------------
        self.statusBar().showMessage(f"Clipboard: {self._container.clipboard.name}")

        # --- Wiring --------------------------------------------------------
        self._unsubscribe = self._params.subscribe(self._on_parameter_changed)
        self._controller.on_state_changed(self._apply_copy_state)
        self._controller.on_copy_failed(self._on_copy_failed)

        self._refresh_commands()

    # ── Public API ────────────────────────────────────────────────────────

    @property
    def parameters(self) -> CommandParameters:
        return self._params

    @property
    def controller(self) -> CopyInteractionController:
        return self._controller

    def block(self, key: str) -> CommandBlockWidget:
        return self._blocks[key]

    def blocks(self) -> list[CommandBlockWidget]:
        return list(self._blocks.values())

    # ── Sections ──────────────────────────────────────────────────────────

    def _build_header(self) -> QWidget:
        header = QWidget()
        layout = QVBoxLayout(header)
        layout.setAlignment(Qt.AlignmentFlag.AlignHCenter)

        icon = QLabel("📁")
        icon.setAlignment(Qt.AlignmentFlag.AlignCenter)
        icon.setStyleSheet("font-size: 36pt;")
        title = QLabel("FileLu Rclone Client")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet(
            f"font-size: 24pt; font-weight: 800; color: {Theme.palette().accent_subtle};"
        )
        subtitle = QLabel(
            "A simple interface for configuring and managing FileLu storage via Rclone CLI."
        )
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        subtitle.setStyleSheet(Theme.note())

        layout.addWidget(icon)
        layout.addWidget(title)
        layout.addWidget(subtitle)
        return header

    def _build_setup_section(self) -> QGroupBox:
        box = QGroupBox("1. Rclone Configuration Setup")
        layout = QVBoxLayout(box)
        layout.setSpacing(12)

        if self._notes.setup_intro:
            intro = QLabel(self._notes.setup_intro)
            intro.setWordWrap(True)
            intro.setStyleSheet(Theme.note())
            layout.addWidget(intro)

        self.remote_field = ParameterField(
            "Remote Name", self._params.remote_alias, placeholder="e.g., filelu"
        )
        self.remote_field.value_changed.connect(self._params.set_remote_alias)
        layout.addWidget(self.remote_field)

        self.key_field = ParameterField(
            "FileLu Rclone Key",
            self._params.credential_placeholder,
            note=self._notes.credential_warning,
        )
        self.key_field.value_changed.connect(self._params.set_credential_placeholder)
        layout.addWidget(self.key_field)

        for tpl in self._render_uc.catalog.section(CatalogSection.SETUP):
            layout.addWidget(self._make_block(tpl.key, tpl.title))

        self._hint_label = QLabel()
        self._hint_label.setWordWrap(True)
        self._hint_label.setTextFormat(Qt.TextFormat.PlainText)
        self._hint_label.setStyleSheet(Theme.note(Theme.palette().warning))
        layout.addWidget(self._hint_label)
        return box

    def _build_examples_section(self) -> QGroupBox:
        box = QGroupBox("2. File Management Command Examples")
        layout = QVBoxLayout(box)
        layout.setSpacing(16)

        paths = QHBoxLayout()
        self.local_path_field = ParameterField(
            "Local Folder Path (Source)", self._params.local_path
        )
        self.local_path_field.value_changed.connect(self._params.set_local_path)
        self.remote_path_field = ParameterField(
            "FileLu Remote Path (Destination)", self._params.remote_path
        )
        self.remote_path_field.value_changed.connect(self._params.set_remote_path)
        paths.addWidget(self.local_path_field)
        paths.addWidget(self.remote_path_field)
        layout.addLayout(paths)

        grid = QGridLayout()
        grid.setSpacing(16)
        examples = self._render_uc.catalog.section(CatalogSection.EXAMPLES)
        for index, tpl in enumerate(examples):
            row, col = divmod(index, _EXAMPLE_COLUMNS)
            grid.addWidget(self._make_block(tpl.key, tpl.title), row, col)
        layout.addLayout(grid)

        if self._notes.sync_warning:
            warning = QLabel(f"Caution: {self._notes.sync_warning}")
            warning.setWordWrap(True)
            warning.setStyleSheet(Theme.warning_box())
            layout.addWidget(warning)
        return box

    def _make_block(self, key: str, title: str) -> CommandBlockWidget:
        block = CommandBlockWidget(key, title)
        block.copy_requested.connect(self._controller.attempt_copy)
        self._blocks[key] = block
        return block

    # ── Slots ─────────────────────────────────────────────────────────────

    def _on_parameter_changed(self, _field: str) -> None:
        self._refresh_commands()

    def _refresh_commands(self) -> None:
        for cmd in self._render_uc.execute(self._params):
            block = self._blocks.get(cmd.key)
            if block is not None:
                block.set_command(cmd.command)
        self._hint_label.setText(self._notes.setup_hint_for(self._params.remote_alias))
        self._apply_copy_state(self._controller.state)

    def _apply_copy_state(self, state: CopySignalState) -> None:
        for block in self._blocks.values():
            block.set_copied(state.is_copied(block.command))
        self.toast.set_shown(state.notification_visible)

    def _on_copy_failed(self, _command: str) -> None:
        self.statusBar().showMessage("Copy failed: clipboard is not available", 3000)

    # ── Qt events ─────────────────────────────────────────────────────────

    def resizeEvent(self, event) -> None:  # noqa: N802, D102
        super().resizeEvent(event)
        self.toast.reposition()

    def closeEvent(self, event) -> None:  # noqa: N802, D102
        self._controller.teardown()
        self._unsubscribe()
        super().closeEvent(event)
