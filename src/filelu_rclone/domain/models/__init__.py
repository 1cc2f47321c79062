"""Domain models."""

from filelu_rclone.domain.models.command import CommandCatalog, CommandTemplate, RenderedCommand
from filelu_rclone.domain.models.copy_signal import CopySignalState
from filelu_rclone.domain.models.parameters import CommandParameters

__all__ = [
    "CommandCatalog",
    "CommandParameters",
    "CommandTemplate",
    "CopySignalState",
    "RenderedCommand",
]
