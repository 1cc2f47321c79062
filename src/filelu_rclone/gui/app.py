"""Application entry point for the FileLu Rclone helper GUI.

Launch with:
    filelu-rclone-gui          (after pip install -e .)
    python -m filelu_rclone.gui.app
"""

from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication, QMessageBox

from filelu_rclone.bootstrap import Container
from filelu_rclone.domain.errors import ConfigurationError
from filelu_rclone.gui.main_window import FileLuMainWindow


def main(catalog_path: str | None = None) -> None:
    """Create the QApplication, show the main window, and enter the event loop."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("FileLu Rclone Client")
    app.setOrganizationName("filelu-rclone")

    # Apply centralized theme
    from filelu_rclone.gui.theme import apply_theme

    apply_theme(app)

    # The container is built after QApplication so the Qt clipboard is detected.
    try:
        container = Container(catalog_path=catalog_path)
    except (FileNotFoundError, ConfigurationError) as exc:
        QMessageBox.critical(None, "Invalid command catalog", str(exc))
        sys.exit(1)

    window = FileLuMainWindow(container)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
