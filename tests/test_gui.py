"""GUI test suite for the FileLu Rclone helper.

Tests cover:
1. Theme system (dark palette, stylesheet generation)
2. Widget construction (command block, parameter field, toast)
3. Main window integration (live re-render, copy feedback, teardown)

Requires: QT_QPA_PLATFORM=offscreen (set in conftest).
"""

from __future__ import annotations

import pytest


# ---------------------------------------------------------------------------
# 1. Theme system tests (no Qt required)
# ---------------------------------------------------------------------------


class TestThemeSystem:
    """Tests for the centralized theme module."""

    def test_default_palette_is_dark(self):
        from filelu_rclone.gui.theme import Theme

        p = Theme.palette()
        assert p.bg_primary == "#111827"
        assert p.accent == "#6366F1"

    def test_palette_has_status_colors(self):
        from filelu_rclone.gui.theme import Theme

        p = Theme.palette()
        assert p.success == "#16A34A"
        assert p.warning == "#EAB308"
        assert p.error == "#EF4444"

    def test_global_stylesheet_is_nonempty(self):
        from filelu_rclone.gui.theme import Theme

        ss = Theme.global_stylesheet()
        assert "QMainWindow" in ss
        assert "QScrollBar" in ss
        assert len(ss) > 100

    def test_form_inputs_stylesheet(self):
        from filelu_rclone.gui.theme import Theme

        assert "QLineEdit" in Theme.form_inputs()

    def test_command_block_stylesheet_targets_object_names(self):
        from filelu_rclone.gui.theme import Theme

        ss = Theme.command_block()
        assert "#commandBlock" in ss
        assert "#copiedLabel" in ss

    def test_copied_button_uses_success_color(self):
        from filelu_rclone.gui.theme import Theme

        assert Theme.palette().success in Theme.button_copied()

    def test_note_color_override(self):
        from filelu_rclone.gui.theme import Theme

        assert Theme.palette().text_muted in Theme.note()
        assert "#123456" in Theme.note("#123456")

    def test_apply_theme(self, qapp):
        from filelu_rclone.gui.theme import Theme, apply_theme

        apply_theme(qapp)
        assert qapp.styleSheet() == Theme.global_stylesheet()


# ---------------------------------------------------------------------------
# 2. Widgets
# ---------------------------------------------------------------------------


class TestCommandBlockWidget:
    def test_emits_current_command(self, qapp):
        from filelu_rclone.gui.widgets.command_block import CommandBlockWidget

        block = CommandBlockWidget("about", "Get Account Storage Info")
        block.set_command("rclone about filelu:")
        received: list[str] = []
        block.copy_requested.connect(received.append)
        block._copy_btn.click()
        assert received == ["rclone about filelu:"]

    def test_copied_indicator(self, qapp):
        from filelu_rclone.gui.widgets.command_block import CommandBlockWidget

        block = CommandBlockWidget("about", "Get Account Storage Info")
        assert not block.is_copied
        assert block._copied_label.isHidden()
        block.set_copied(True)
        assert block.is_copied
        assert not block._copied_label.isHidden()
        block.set_copied(False)
        assert block._copied_label.isHidden()


class TestParameterField:
    def test_value_changed_signal(self, qapp):
        from filelu_rclone.gui.widgets.parameter_field import ParameterField

        field = ParameterField("Remote Name", "filelu")
        seen: list[str] = []
        field.value_changed.connect(seen.append)
        field.set_value("box")
        assert field.value() == "box"
        assert seen == ["box"]


class TestToast:
    def test_hidden_by_default(self, qapp):
        from filelu_rclone.gui.widgets.toast import ToastNotification

        toast = ToastNotification()
        assert toast.text() == "Command Copied!"
        assert toast.isHidden()
        toast.set_shown(True)
        assert not toast.isHidden()
        toast.set_shown(False)
        assert toast.isHidden()


# ---------------------------------------------------------------------------
# 3. Main window
# ---------------------------------------------------------------------------


@pytest.fixture()
def window(qapp, clipboard, scheduler):
    from filelu_rclone.bootstrap import Container
    from filelu_rclone.gui.main_window import FileLuMainWindow

    win = FileLuMainWindow(Container(clipboard=clipboard), scheduler=scheduler)
    yield win
    win.close()


class TestMainWindow:
    def test_builds_all_blocks_with_defaults(self, window):
        assert window.windowTitle() == "FileLu Rclone Client"
        assert [b.key for b in window.blocks()] == [
            "config", "about", "copy", "sync", "mount", "list",
        ]
        assert window.block("config").command == "rclone config"
        assert window.block("mount").command == (
            "rclone mount filelu: /mnt/filelu --vfs-cache-mode full"
        )
        assert window.remote_field.value() == "filelu"
        assert window.toast.isHidden()

    def test_status_bar_names_clipboard(self, window):
        assert window.statusBar().currentMessage() == "Clipboard: fake"

    def test_remote_edit_rerenders_everything(self, window):
        window.remote_field.line_edit.setText("lu")
        assert window.parameters.remote_alias == "lu"
        assert window.block("about").command == "rclone about lu:"
        assert window.block("copy").command == (
            "rclone copy /path/to/local/folder lu:/backup/my-files"
        )
        assert window.block("config").command == "rclone config"
        assert "'lu'" in window._hint_label.text()

    def test_path_edits_rerender(self, window):
        window.local_path_field.line_edit.setText("/home/me/Photos 2024")
        window.remote_path_field.line_edit.setText("/photos")
        assert window.block("sync").command == (
            "rclone sync /home/me/Photos 2024 filelu:/photos --progress --dry-run"
        )
        assert window.block("list").command == "rclone ls filelu:/photos"

    def test_key_edit_does_not_change_commands(self, window):
        before = [b.command for b in window.blocks()]
        window.key_field.line_edit.setText("SECRET")
        assert window.parameters.credential_placeholder == "SECRET"
        assert [b.command for b in window.blocks()] == before

    def test_copy_sets_and_reverts_feedback(self, window, clipboard, scheduler):
        block = window.block("copy")
        block._copy_btn.click()

        assert clipboard.copied == [block.command]
        assert block.is_copied
        assert not window.block("about").is_copied
        assert not window.toast.isHidden()

        scheduler.advance(1500)
        assert not block.is_copied
        assert not window.toast.isHidden()

        scheduler.advance(500)
        assert window.toast.isHidden()

    def test_copying_another_block_moves_indicator(self, window, scheduler):
        window.block("about")._copy_btn.click()
        scheduler.advance(700)
        window.block("list")._copy_btn.click()
        assert not window.block("about").is_copied
        assert window.block("list").is_copied

    def test_edit_after_copy_clears_indicator(self, window):
        window.block("about")._copy_btn.click()
        window.remote_field.line_edit.setText("other")
        assert not window.block("about").is_copied

    def test_failed_copy_reports_in_status_bar(self, window, clipboard):
        clipboard.fail = True
        window.block("about")._copy_btn.click()
        assert not window.block("about").is_copied
        assert window.toast.isHidden()
        assert "Copy failed" in window.statusBar().currentMessage()

    def test_close_cancels_timers(self, window, scheduler):
        window.block("about")._copy_btn.click()
        assert scheduler.pending
        window.close()
        assert scheduler.pending == []

    def test_public_accessors_are_typed(self, window):
        from typing import get_type_hints

        from filelu_rclone.application.use_cases.copy_command import CopyInteractionController
        from filelu_rclone.domain.models.parameters import CommandParameters
        from filelu_rclone.gui.main_window import FileLuMainWindow

        assert get_type_hints(FileLuMainWindow.parameters.fget)["return"] is CommandParameters
        assert (
            get_type_hints(FileLuMainWindow.controller.fget)["return"]
            is CopyInteractionController
        )
        assert isinstance(window.parameters, CommandParameters)
        assert isinstance(window.controller, CopyInteractionController)
