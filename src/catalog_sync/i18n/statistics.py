"""Per-language translation progress, read from catalogs with polib."""

from __future__ import annotations

from dataclasses import dataclass
from typing import override

import polib

from .catalogs import Catalog


@dataclass(frozen=True)
class CatalogStatistics:
    """Entry counts of one catalog. Obsolete entries are not part of the total."""

    language: str
    translated: int
    fuzzy: int
    untranslated: int
    obsolete: int

    @property
    def total(self) -> int:
        return self.translated + self.fuzzy + self.untranslated

    @property
    def percent_translated(self) -> float:
        if self.total == 0:
            return 100.0
        return (self.translated / self.total) * 100.0

    @override
    def __str__(self) -> str:
        return (
            f"{self.language}: {self.translated}/{self.total} translated "
            f"({self.percent_translated:.1f}%), "
            f"{self.fuzzy} fuzzy, "
            f"{self.untranslated} untranslated, "
            f"{self.obsolete} obsolete"
        )


def load_catalog(catalog: Catalog) -> polib.POFile:
    """
    Parse a catalog.

    Raises:
        OSError: If the file cannot be read or is not valid PO syntax
        ValueError: If the file cannot be decoded
    """
    return polib.pofile(str(catalog.po_file), wrapwidth=0)


def catalog_statistics(catalog: Catalog) -> CatalogStatistics:
    """
    Count translated, fuzzy, untranslated and obsolete entries of a catalog.

    Args:
        catalog: Catalog to inspect

    Returns:
        CatalogStatistics for the catalog's language

    Raises:
        OSError: If the catalog cannot be parsed
        ValueError: If the catalog cannot be decoded
    """
    po = load_catalog(catalog)

    translated = fuzzy = untranslated = obsolete = 0
    for entry in po:
        if entry.obsolete:
            obsolete += 1
        elif "fuzzy" in entry.flags:
            fuzzy += 1
        elif entry.translated():
            translated += 1
        else:
            untranslated += 1

    return CatalogStatistics(
        language=catalog.language,
        translated=translated,
        fuzzy=fuzzy,
        untranslated=untranslated,
        obsolete=obsolete,
    )
