"""
Run configuration for a catalog-sync invocation.

Command-line switches are turned into a single immutable ``RunConfig`` before
any stage runs. The run mode is an enum, so a contradictory combination of
switches can only ever surface as a ``ConfigError`` here and never reaches the
pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import NamedTuple

from ..config.schema import CatalogSyncConfig, ResolvedPaths
from ..utils.core.exceptions import ConfigError, LanguageNotFound
from .catalogs import Catalog, compiled_catalog_path, discover_catalogs

logger = logging.getLogger(__name__)

LANGUAGE_SEPARATORS = ("/", "\\")


class RunMode(Enum):
    """Which pipeline stages an invocation executes."""

    FULL = "full"
    EXTRACT_AND_MERGE_ONLY = "extract-and-merge-only"
    COMPILE_ONLY = "compile-only"

    @property
    def extracts(self) -> bool:
        return self is not RunMode.COMPILE_ONLY

    @property
    def merges(self) -> bool:
        return self is not RunMode.COMPILE_ONLY

    @property
    def compiles(self) -> bool:
        return self is not RunMode.EXTRACT_AND_MERGE_ONLY


class RunFlags(NamedTuple):
    """Raw switches as given on the command line."""

    no_mo: bool = False
    only_mo: bool = False
    lang: str | None = None
    dry_run: bool = False


@dataclass(frozen=True)
class RunConfig:
    """Everything a pipeline run needs, resolved once up front."""

    mode: RunMode
    catalogs: tuple[Catalog, ...]
    paths: ResolvedPaths
    settings: CatalogSyncConfig
    language: str | None = None
    dry_run: bool = False

    @property
    def domain(self) -> str:
        return self.settings.domain

    def compiled_path(self, catalog: Catalog) -> Path:
        """Location of the compiled form of a catalog for this run."""
        return compiled_catalog_path(self.paths.locale_root, catalog.language, self.domain)


def resolve_mode(no_mo: bool, only_mo: bool) -> RunMode:
    """
    Map the mode switches onto a run mode.

    Raises:
        ConfigError: If both switches are given
    """
    match (no_mo, only_mo):
        case (True, True):
            raise ConfigError(
                "--no-mo and --only-mo are mutually exclusive",
                user_message="Use either --no-mo or --only-mo, not both.",
            )
        case (True, False):
            return RunMode.EXTRACT_AND_MERGE_ONLY
        case (False, True):
            return RunMode.COMPILE_ONLY
        case _:
            return RunMode.FULL


def configure(flags: RunFlags, settings: CatalogSyncConfig, root: Path) -> RunConfig:
    """
    Validate the switches and resolve the catalogs this run will touch.

    Mode validation happens before anything is read from disk.

    Args:
        flags: Command-line switches
        settings: Project configuration
        root: Project root that relative configured paths are anchored at

    Returns:
        Immutable run configuration

    Raises:
        ConfigError: On contradictory switches, a language code containing a
            path separator or a missing catalog directory
        LanguageNotFound: If the language filter matches no catalog
    """
    mode = resolve_mode(flags.no_mo, flags.only_mo)

    language = flags.lang
    if language is not None and any(sep in language for sep in LANGUAGE_SEPARATORS):
        raise ConfigError(f"Invalid language code: '{language}' (must be a catalog name, not a path)")

    paths = settings.paths.resolve(root)
    if not paths.catalog_dir.is_dir():
        raise ConfigError(f"Catalog directory does not exist: {paths.catalog_dir}")

    catalogs = discover_catalogs(paths.catalog_dir)

    if language is not None:
        selected = [catalog for catalog in catalogs if catalog.language == language]
        if not selected:
            raise LanguageNotFound(
                requested=language,
                available=[catalog.language for catalog in catalogs],
                catalog_dir=str(paths.catalog_dir),
                template_file=str(paths.template_file),
            )
        catalogs = selected
    elif not catalogs:
        logger.warning(f"No catalogs found in: {paths.catalog_dir}")

    logger.debug(
        f"Configured {mode.value} run over {len(catalogs)} catalog(s)"
        + (f" (language filter: {language})" if language else "")
    )

    return RunConfig(
        mode=mode,
        catalogs=tuple(catalogs),
        paths=paths,
        settings=settings,
        language=language,
        dry_run=flags.dry_run,
    )
