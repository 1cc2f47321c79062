"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.  All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path

from filelu_rclone.application.use_cases.copy_command import CopyInteractionController
from filelu_rclone.application.use_cases.render_commands import RenderCommandsUseCase
from filelu_rclone.config.loader import load_catalog
from filelu_rclone.config.models import CatalogConfig
from filelu_rclone.domain.models.command import CommandCatalog
from filelu_rclone.domain.models.parameters import CommandParameters
from filelu_rclone.domain.ports.clipboard_port import ClipboardPort
from filelu_rclone.domain.ports.scheduler_port import SchedulerPort
from filelu_rclone.infrastructure.clipboard import detect_clipboard


class Container:
    """Simple dependency injection container.

    Wires the catalog configuration and the detected clipboard to the
    use cases.

    Usage::

        container = Container()
        params = container.new_parameters()
        commands = container.render_commands().execute(params)
    """

    def __init__(
        self,
        catalog_path: str | Path | None = None,
        clipboard: ClipboardPort | None = None,
        prefer_qt_clipboard: bool = True,
    ) -> None:
        # -- Infrastructure singletons ---------------------------------------
        self._config: CatalogConfig = load_catalog(Path(catalog_path) if catalog_path else None)
        self._catalog: CommandCatalog = self._config.to_catalog()
        self._clipboard = clipboard
        self._prefer_qt_clipboard = prefer_qt_clipboard

    # -- Port accessors ------------------------------------------------------

    @property
    def config(self) -> CatalogConfig:
        return self._config

    @property
    def catalog(self) -> CommandCatalog:
        return self._catalog

    @property
    def clipboard(self) -> ClipboardPort:
        """The clipboard variant, probed once on first access."""
        if self._clipboard is None:
            self._clipboard = detect_clipboard(prefer_qt=self._prefer_qt_clipboard)
        return self._clipboard

    def new_parameters(self) -> CommandParameters:
        """Return a parameter store seeded with the configured defaults."""
        return self._config.to_parameters()

    # -- Use Case factories --------------------------------------------------

    def render_commands(self) -> RenderCommandsUseCase:
        """Create a use case for rendering the command catalog."""
        return RenderCommandsUseCase(catalog=self._catalog)

    def copy_controller(self, scheduler: SchedulerPort) -> CopyInteractionController:
        """Create a copy controller that reverts its signals via *scheduler*."""
        return CopyInteractionController(
            clipboard=self.clipboard,
            scheduler=scheduler,
            copied_delay_ms=self._config.timing.copied_ms,
            notification_delay_ms=self._config.timing.notification_ms,
        )
