"""Null clipboard used when no copy capability could be found."""

from __future__ import annotations

from filelu_rclone.domain.errors import ClipboardError
from filelu_rclone.domain.ports.clipboard_port import ClipboardPort


class UnavailableClipboard(ClipboardPort):
    """Every copy fails with the reason recorded at detection time."""

    name = "unavailable"

    def __init__(self, reason: str = "No clipboard backend available.") -> None:
        self.reason = reason

    def copy(self, text: str) -> None:
        raise ClipboardError(self.reason)
