"""Domain errors — custom exceptions for the FileLu Rclone helper.

These exceptions are raised by domain services and adapters and caught by
application or presentation layers. They carry no infrastructure dependencies.
"""


class FileLuRcloneError(Exception):
    """Base exception for all FileLu Rclone helper errors."""


class ClipboardError(FileLuRcloneError):
    """Raised when the clipboard cannot perform a write (copy-unavailable)."""


class ConfigurationError(FileLuRcloneError):
    """Raised when the command catalog configuration is invalid."""


class CommandNotFoundError(FileLuRcloneError):
    """Raised when a command selector matches no rendered command."""
