"""Configuration loading and validation for catalog-sync."""

from .manager import ConfigManager, load_settings
from .schema import (
    CatalogSyncConfig,
    ExtractionConfig,
    PathsConfig,
    ResolvedPaths,
    ToolsConfig,
)

__all__ = [
    "CatalogSyncConfig",
    "ConfigManager",
    "ExtractionConfig",
    "PathsConfig",
    "ResolvedPaths",
    "ToolsConfig",
    "load_settings",
]
