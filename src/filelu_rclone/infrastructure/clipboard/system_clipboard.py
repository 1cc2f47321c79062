"""System clipboard — implements ClipboardPort using OS command-line tools.

This is the fallback path used when no Qt application is running (e.g. the
terminal interface). Each copy spawns a short-lived helper process that is
always reaped, whether the write succeeds or not. The tool's output streams
are discarded; xclip and wl-copy fork a child that outlives the call.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from typing import Optional

from filelu_rclone.domain.errors import ClipboardError
from filelu_rclone.domain.ports.clipboard_port import ClipboardPort

_COPY_TIMEOUT_S = 5.0


def detect_backend() -> list[str]:
    """Return the clipboard command appropriate for this OS.

    Returns:
        CLI command tokens (e.g. ``['xclip', '-selection', 'clipboard']``).

    Raises:
        ClipboardError: No supported clipboard tool found.
    """
    if sys.platform == "darwin":
        return ["pbcopy"]

    if sys.platform.startswith("linux"):
        candidates = [
            ["xclip", "-selection", "clipboard"],
            ["xsel", "--clipboard", "--input"],
        ]
        if os.environ.get("WAYLAND_DISPLAY"):
            candidates.insert(0, ["wl-copy"])
        for cmd in candidates:
            if shutil.which(cmd[0]):
                return cmd
        raise ClipboardError("No clipboard tool found. Install wl-clipboard, xclip or xsel.")

    if sys.platform == "win32":
        return ["clip"]

    raise ClipboardError(f"Unsupported platform: {sys.platform}")


class SystemClipboard(ClipboardPort):
    """Clipboard adapter using OS-level subprocess commands."""

    name = "system"

    def __init__(self, command: Optional[list[str]] = None) -> None:
        self._command = command

    @property
    def command(self) -> list[str]:
        """Backend command, detected on first use."""
        if self._command is None:
            self._command = detect_backend()
        return self._command

    def copy(self, text: str) -> None:
        """Copy text to system clipboard via subprocess."""
        cmd = self.command
        try:
            subprocess.run(
                cmd,
                input=text.encode("utf-8"),
                check=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=_COPY_TIMEOUT_S,
            )
        except FileNotFoundError as exc:
            raise ClipboardError(f"Clipboard tool not found: {cmd[0]}") from exc
        except subprocess.TimeoutExpired as exc:
            raise ClipboardError(f"Clipboard tool timed out: {cmd[0]}") from exc
        except subprocess.CalledProcessError as exc:
            raise ClipboardError(f"Clipboard copy failed: {exc}") from exc
