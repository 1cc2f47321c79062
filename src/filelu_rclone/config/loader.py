"""Configuration loader for the command catalog.

Loads the JSON catalog file and returns a validated CatalogConfig instance.
Uses module-level caching so each file is only parsed once per process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from filelu_rclone.config.models import CatalogConfig
from filelu_rclone.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Module-level cache
_config_cache: dict[str, CatalogConfig] = {}

# Default catalog path, next to this module
DEFAULT_CATALOG_PATH = Path(__file__).parent / "catalog_default.json"


def load_catalog(path: Optional[Path] = None) -> CatalogConfig:
    """Load and validate a catalog from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a custom JSON catalog file.
        If ``None``, the built-in ``catalog_default.json`` is used.

    Returns
    -------
    CatalogConfig
        Validated configuration instance.

    Raises
    ------
    FileNotFoundError
        If the specified path does not exist.
    ConfigurationError
        If the file is not valid JSON, does not match the schema, or
        describes an inconsistent catalog (duplicates, no templates).
    """
    config_path = Path(path) if path else DEFAULT_CATALOG_PATH
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        config = CatalogConfig.model_validate(raw)
        # Builds the domain catalog once so duplicates fail at load time.
        config.to_catalog()
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{config_path.name}: invalid JSON ({exc})") from exc
    except ValidationError as exc:
        raise ConfigurationError(f"{config_path.name}: {exc}") from exc

    logger.debug("Loaded catalog %s", config_path)
    _config_cache[cache_key] = config
    return config


def get_catalog() -> CatalogConfig:
    """Get the built-in catalog configuration (cached).

    This is the main entry point used by the rest of the application.
    """
    return load_catalog()


def clear_cache() -> None:
    """Clear the catalog cache — useful for testing."""
    _config_cache.clear()
