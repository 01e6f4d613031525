"""
Catalog discovery and compiled-catalog path derivation.

A catalog is a ``<lang>.po`` file directly inside the catalog directory; the
file stem is its language code. The compiled form of a catalog always lives
at ``<locale_root>/<lang>/LC_MESSAGES/<domain>.mo``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CATALOG_SUFFIX = ".po"
COMPILED_SUFFIX = ".mo"


@dataclass(frozen=True)
class Catalog:
    """A per-language message catalog."""

    language: str
    po_file: Path

    @classmethod
    def from_path(cls, po_file: Path) -> Catalog:
        """Build a catalog from its file, deriving the language from the file name."""
        return cls(language=po_file.stem, po_file=po_file)


def compiled_catalog_path(locale_root: Path, language: str, domain: str) -> Path:
    """
    Get the deterministic location of a language's compiled catalog.

    Args:
        locale_root: Root directory of compiled catalogs
        language: Language code (e.g., 'de', 'pt_BR')
        domain: gettext text domain

    Returns:
        Path to the .mo file
    """
    return locale_root / language / "LC_MESSAGES" / f"{domain}{COMPILED_SUFFIX}"


def discover_catalogs(catalog_dir: Path) -> list[Catalog]:
    """
    Find all catalogs in the catalog directory.

    Args:
        catalog_dir: Directory holding <lang>.po files

    Returns:
        Catalogs sorted by language code
    """
    catalogs: list[Catalog] = []

    if not catalog_dir.is_dir():
        logger.warning(f"Catalog directory does not exist: {catalog_dir}")
        return catalogs

    for po_file in sorted(catalog_dir.glob(f"*{CATALOG_SUFFIX}")):
        if po_file.is_file() and not po_file.name.startswith("."):
            catalogs.append(Catalog.from_path(po_file))

    logger.debug(f"Discovered {len(catalogs)} catalog(s) in {catalog_dir}")
    return catalogs
