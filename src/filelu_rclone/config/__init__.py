"""Command catalog configuration package."""

from filelu_rclone.config.loader import get_catalog, load_catalog
from filelu_rclone.config.models import CatalogConfig

__all__ = ["CatalogConfig", "get_catalog", "load_catalog"]
