"""Use Case: Render Commands.

Binds the current parameters into the template catalog and resolves
single commands by index, key or title.
"""

from __future__ import annotations

from filelu_rclone.domain.errors import CommandNotFoundError
from filelu_rclone.domain.models.command import CatalogSection, CommandCatalog, RenderedCommand
from filelu_rclone.domain.models.parameters import CommandParameters
from filelu_rclone.domain.rendering import render_catalog


class RenderCommandsUseCase:
    """Produce the ordered ``(title, command)`` list for a parameter set."""

    def __init__(self, catalog: CommandCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> CommandCatalog:
        return self._catalog

    def execute(
        self,
        params: CommandParameters,
        section: CatalogSection | None = None,
    ) -> tuple[RenderedCommand, ...]:
        """Render the catalog (or one section of it) with *params*."""
        return render_catalog(self._catalog, params, section)

    def find(self, selector: str, params: CommandParameters) -> RenderedCommand:
        """Resolve one rendered command.

        Args:
            selector: 1-based position in the full list, a template key,
                or an exact title.
            params: Current parameter values.

        Raises:
            CommandNotFoundError: Nothing matches *selector*.
        """
        commands = self.execute(params)
        if selector.isdigit():
            index = int(selector)
            if 1 <= index <= len(commands):
                return commands[index - 1]
            raise CommandNotFoundError(
                f"No command #{index} (choose 1-{len(commands)})"
            )
        for cmd in commands:
            if selector in (cmd.key, cmd.title):
                return cmd
        raise CommandNotFoundError(f"Unknown command: {selector!r}")
