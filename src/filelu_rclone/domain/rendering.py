"""Template rendering rules.

Rendering is a pure function of (template, parameters):

1. Path slots are filled first, in a single pass, with the raw path text.
   Paths are neither quoted nor escaped, so shell metacharacters survive
   byte-for-byte.
2. Every remaining ``{remoteName}`` occurrence is then replaced with the
   remote alias. Because paths are already baked in at this point, a path
   containing the literal placeholder is substituted as well.

Empty values are accepted and produce degenerate commands such as
``rclone about :``.
"""

from __future__ import annotations

import logging
import re

from filelu_rclone.domain.models.command import (
    LOCAL_PATH_TOKEN,
    REMOTE_PATH_TOKEN,
    REMOTE_PLACEHOLDER,
    CatalogSection,
    CommandCatalog,
    CommandTemplate,
    RenderedCommand,
)
from filelu_rclone.domain.models.parameters import CommandParameters

logger = logging.getLogger(__name__)

_PATH_SLOT_RE = re.compile(re.escape(LOCAL_PATH_TOKEN) + "|" + re.escape(REMOTE_PATH_TOKEN))


def bind_paths(pattern: str, local_path: str, remote_path: str) -> str:
    """Interpolate the path slots of *pattern* as literal text."""
    values = {LOCAL_PATH_TOKEN: local_path, REMOTE_PATH_TOKEN: remote_path}
    # A function replacement keeps backslashes in paths literal.
    return _PATH_SLOT_RE.sub(lambda m: values[m.group(0)], pattern)


def substitute_remote(pattern: str, remote_alias: str) -> str:
    """Replace every ``{remoteName}`` occurrence with *remote_alias*."""
    return pattern.replace(REMOTE_PLACEHOLDER, remote_alias)


def render_template(template: CommandTemplate, params: CommandParameters) -> str:
    """Return the concrete command string for *template*."""
    bound = template.pattern
    if template.is_path_bearing:
        bound = bind_paths(bound, params.local_path, params.remote_path)
    return substitute_remote(bound, params.remote_alias)


def render_catalog(
    catalog: CommandCatalog,
    params: CommandParameters,
    section: CatalogSection | None = None,
) -> tuple[RenderedCommand, ...]:
    """Render every catalog entry, in catalog order.

    Args:
        catalog: The template catalog.
        params: Current parameter values.
        section: Restrict output to one display section.

    Returns:
        A fresh tuple of rendered commands.
    """
    rendered = tuple(
        RenderedCommand(
            key=tpl.key,
            title=tpl.title,
            command=render_template(tpl, params),
            section=entry_section,
        )
        for entry_section, tpl in catalog.entries()
        if section is None or entry_section == section
    )
    logger.debug("Rendered %d commands for remote %r", len(rendered), params.remote_alias)
    return rendered
