"""Transient UI state driven by successful clipboard copies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class CopySignalState:
    """Single-slot "just copied" flag plus the global notification toggle.

    Only one command can be flagged at a time; a newer copy overwrites the
    slot rather than queueing behind it.
    """

    active_copied_command: Optional[str] = None
    notification_visible: bool = False

    def is_copied(self, command: str) -> bool:
        return self.active_copied_command == command

    @property
    def is_idle(self) -> bool:
        return self.active_copied_command is None
