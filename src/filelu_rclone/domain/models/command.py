"""Command templates, the ordered catalog that holds them, and rendered output."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

REMOTE_PLACEHOLDER = "{remoteName}"
LOCAL_PATH_TOKEN = "{localPath}"
REMOTE_PATH_TOKEN = "{remotePath}"


class CatalogSection(str, Enum):
    """Display sections of the catalog, in display order."""

    SETUP = "setup"
    EXAMPLES = "examples"


class CommandTemplate(BaseModel):
    """One catalog entry: a titled command pattern.

    ``pattern`` may contain any number of ``{remoteName}`` placeholders and,
    for path-bearing commands, the ``{localPath}`` / ``{remotePath}`` slots.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    title: str = Field(min_length=1)
    pattern: str
    description: Optional[str] = None

    @property
    def is_path_bearing(self) -> bool:
        return LOCAL_PATH_TOKEN in self.pattern or REMOTE_PATH_TOKEN in self.pattern

    @property
    def placeholder_count(self) -> int:
        return self.pattern.count(REMOTE_PLACEHOLDER)


class CommandCatalog(BaseModel):
    """Fixed, ordered list of command templates split into display sections."""

    model_config = ConfigDict(frozen=True)

    setup: tuple[CommandTemplate, ...] = ()
    examples: tuple[CommandTemplate, ...] = ()

    @model_validator(mode="after")
    def _check_unique(self) -> "CommandCatalog":
        templates = self.setup + self.examples
        if not templates:
            raise ValueError("catalog must contain at least one template")
        for attr in ("key", "title"):
            seen: set[str] = set()
            for tpl in templates:
                value = getattr(tpl, attr)
                if value in seen:
                    raise ValueError(f"duplicate template {attr}: {value!r}")
                seen.add(value)
        return self

    def entries(self) -> Iterator[tuple[CatalogSection, CommandTemplate]]:
        """Yield ``(section, template)`` pairs in display order."""
        for tpl in self.setup:
            yield CatalogSection.SETUP, tpl
        for tpl in self.examples:
            yield CatalogSection.EXAMPLES, tpl

    def section(self, section: CatalogSection) -> tuple[CommandTemplate, ...]:
        return self.setup if section == CatalogSection.SETUP else self.examples

    def __len__(self) -> int:
        return len(self.setup) + len(self.examples)


class RenderedCommand(BaseModel):
    """A template bound to the current parameters. Derived, never stored."""

    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    command: str
    section: CatalogSection = CatalogSection.EXAMPLES
