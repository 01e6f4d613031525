"""
Translation catalog synchronization.

This package implements the extract -> merge -> compile pipeline over a
directory of gettext catalogs, plus statistics and consistency reporting.
"""

from .catalogs import Catalog, compiled_catalog_path, discover_catalogs
from .pipeline import CatalogSyncPipeline, PipelineState, SyncReport
from .run_config import RunConfig, RunFlags, RunMode, configure

__all__ = [
    "Catalog",
    "CatalogSyncPipeline",
    "PipelineState",
    "RunConfig",
    "RunFlags",
    "RunMode",
    "SyncReport",
    "compiled_catalog_path",
    "configure",
    "discover_catalogs",
]
