"""Core utilities: exceptions, process execution and version information."""

from .exceptions import (
    CatalogSyncError,
    CompileError,
    ConfigError,
    ExtractionError,
    LanguageNotFound,
    MergeError,
    Stage,
    ToolError,
)

__all__ = [
    "CatalogSyncError",
    "CompileError",
    "ConfigError",
    "ExtractionError",
    "LanguageNotFound",
    "MergeError",
    "Stage",
    "ToolError",
]
