"""Configuration schema for catalog-sync using nested Pydantic models."""

from __future__ import annotations

import re
from pathlib import Path
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResolvedPaths(NamedTuple):
    """Project paths made absolute against the project root."""

    root: Path
    catalog_dir: Path
    template_file: Path
    locale_root: Path


class PathsConfig(BaseModel):
    """Locations of catalogs, template and compiled output."""

    model_config = ConfigDict(extra="forbid")

    catalog_dir: Path = Field(
        default=Path("po"),
        description="Directory holding one <lang>.po catalog per language",
    )
    template_file: Path = Field(
        default=Path("po/template.pot"),
        description="Template regenerated by extraction and used as the merge source",
    )
    locale_root: Path = Field(
        default=Path("share/locale"),
        description="Root under which <lang>/LC_MESSAGES/<domain>.mo files are written",
    )

    def resolve(self, root: Path) -> ResolvedPaths:
        """
        Resolve configured paths relative to the project root.

        Args:
            root: Project root directory

        Returns:
            ResolvedPaths with absolute locations
        """
        root = root.resolve()
        return ResolvedPaths(
            root=root,
            catalog_dir=(root / self.catalog_dir).resolve(),
            template_file=(root / self.template_file).resolve(),
            locale_root=(root / self.locale_root).resolve(),
        )


class ExtractionConfig(BaseModel):
    """Options passed to the message extractor."""

    model_config = ConfigDict(extra="forbid")

    sources: list[str] = Field(
        default_factory=lambda: ["src/**/*.py"],
        description="Glob patterns, relative to the project root, of files to scan",
        min_length=1,
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns of files to leave out of extraction",
    )
    language: str = Field(
        default="Python",
        description="Source language passed to xgettext --language",
        min_length=1,
    )
    keywords: list[str] = Field(
        default_factory=lambda: ["_", "gettext", "ngettext:1,2", "pgettext:1c,2"],
        description="Keyword specs passed to xgettext --keyword",
    )
    add_comments: str | None = Field(
        default="TRANSLATORS",
        description="Comment tag whose comments are copied into the template",
    )
    from_code: str = Field(
        default="UTF-8",
        description="Encoding of the source files",
    )
    package_name: str | None = Field(
        default=None,
        description="Value for the Project-Id-Version header",
    )


class ToolsConfig(BaseModel):
    """Executables used for each pipeline stage."""

    model_config = ConfigDict(extra="forbid")

    xgettext: str = Field(default="xgettext", min_length=1)
    msgmerge: str = Field(default="msgmerge", min_length=1)
    msgfmt: str = Field(default="msgfmt", min_length=1)


class CatalogSyncConfig(BaseModel):
    """Top-level catalog-sync configuration."""

    model_config = ConfigDict(extra="forbid")

    domain: str = Field(
        default="messages",
        description="gettext text domain; base name of the compiled .mo files",
    )
    paths: PathsConfig = Field(default_factory=PathsConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)

    @field_validator("domain")
    @classmethod
    def validate_domain(cls, v: str) -> str:
        """Domain becomes a file name, so it must not contain path separators."""
        if not re.fullmatch(r"[A-Za-z0-9][A-Za-z0-9_.-]*", v):
            raise ValueError(
                "Domain must start with a letter or digit and contain only "
                "letters, digits, '.', '_' or '-'"
            )
        return v
