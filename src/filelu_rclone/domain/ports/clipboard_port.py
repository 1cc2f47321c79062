"""Port: Clipboard — copy text to the system clipboard."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from filelu_rclone.domain.errors import ClipboardError

logger = logging.getLogger(__name__)


class ClipboardPort(ABC):
    """Contract for clipboard operations."""

    name: str = "clipboard"

    @abstractmethod
    def copy(self, text: str) -> None:
        """Copy the given text to the system clipboard.

        Raises:
            ClipboardError: If no clipboard backend is available or the
                write fails.
        """
        ...

    def write_text(self, text: str) -> bool:
        """Copy *text* and report success; never raises.

        Returns:
            ``True`` when the write succeeded, ``False`` otherwise.
        """
        try:
            self.copy(text)
        except ClipboardError as exc:
            logger.warning("Copy via %s failed: %s", self.name, exc)
            return False
        except Exception:
            logger.warning("Copy via %s raised unexpectedly", self.name, exc_info=True)
            return False
        return True
