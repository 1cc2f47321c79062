"""FileLu Rclone command helper — build and copy rclone invocations."""

__version__ = "0.1.0"
