"""Pydantic models for the command catalog configuration.

These models validate and type the JSON file that defines the command
templates, the parameter defaults and the copy-feedback timings.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from filelu_rclone.domain.models.command import CommandCatalog, CommandTemplate
from filelu_rclone.domain.models.parameters import (
    DEFAULT_CREDENTIAL_PLACEHOLDER,
    DEFAULT_LOCAL_PATH,
    DEFAULT_REMOTE_ALIAS,
    DEFAULT_REMOTE_PATH,
    CommandParameters,
)
from filelu_rclone.domain.rendering import substitute_remote


# ---------------------------------------------------------------------------
# Meta
# ---------------------------------------------------------------------------


class MetaData(BaseModel):
    """Descriptive information about the catalog."""

    name: str = "FileLu Rclone Commands"
    tool: str = "rclone"
    description: Optional[str] = None


# ---------------------------------------------------------------------------
# Defaults & timing
# ---------------------------------------------------------------------------


class ParameterDefaults(BaseModel):
    """Initial values of the parameter store."""

    remote_alias: str = DEFAULT_REMOTE_ALIAS
    credential_placeholder: str = DEFAULT_CREDENTIAL_PLACEHOLDER
    local_path: str = DEFAULT_LOCAL_PATH
    remote_path: str = DEFAULT_REMOTE_PATH


class TimingConfig(BaseModel):
    """Delays (ms) after which copy feedback reverts."""

    copied_ms: int = Field(default=1500, ge=0)
    notification_ms: int = Field(default=2000, ge=0)


class Notes(BaseModel):
    """Help texts shown next to the commands. ``{remoteName}`` is substituted."""

    setup_intro: str = ""
    setup_hint: str = ""
    credential_warning: str = ""
    sync_warning: str = ""

    def setup_hint_for(self, remote_alias: str) -> str:
        return substitute_remote(self.setup_hint, remote_alias)


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class TemplateSpec(BaseModel):
    """One template entry as written in the JSON file."""

    key: str = Field(min_length=1)
    title: str = Field(min_length=1)
    pattern: str
    description: Optional[str] = None

    def to_template(self) -> CommandTemplate:
        return CommandTemplate(
            key=self.key,
            title=self.title,
            pattern=self.pattern,
            description=self.description,
        )


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class CatalogConfig(BaseModel):
    """Complete catalog configuration."""

    metadata: MetaData = Field(default_factory=MetaData)
    defaults: ParameterDefaults = Field(default_factory=ParameterDefaults)
    timing: TimingConfig = Field(default_factory=TimingConfig)
    notes: Notes = Field(default_factory=Notes)
    setup: list[TemplateSpec] = Field(default_factory=list)
    examples: list[TemplateSpec] = Field(default_factory=list)

    def to_catalog(self) -> CommandCatalog:
        """Build the immutable domain catalog.

        Raises:
            pydantic.ValidationError: Duplicate keys/titles or an empty catalog.
        """
        return CommandCatalog(
            setup=tuple(entry.to_template() for entry in self.setup),
            examples=tuple(entry.to_template() for entry in self.examples),
        )

    def to_parameters(self) -> CommandParameters:
        """Return a fresh parameter store seeded with the configured defaults."""
        return CommandParameters(**self.defaults.model_dump())
