"""PySide6 desktop interface."""
