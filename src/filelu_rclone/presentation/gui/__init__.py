"""GUI presentation layer — delegates to the ``filelu_rclone.gui`` package."""

from __future__ import annotations


def launch(catalog_path: str | None = None) -> None:
    """Launch the FileLu Rclone helper window."""
    from filelu_rclone.gui.app import main

    main(catalog_path)
