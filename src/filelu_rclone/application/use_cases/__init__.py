"""Use cases."""

from filelu_rclone.application.use_cases.copy_command import CopyInteractionController
from filelu_rclone.application.use_cases.render_commands import RenderCommandsUseCase

__all__ = ["CopyInteractionController", "RenderCommandsUseCase"]
