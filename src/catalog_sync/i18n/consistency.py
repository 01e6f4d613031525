"""
Consistency check between the template and the catalogs.

After a merge every catalog should carry exactly the template's message ids.
A catalog that is missing ids, or still has active entries for ids that left
the template, was edited by hand or not merged since the last extraction.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import polib

from ..utils.core.exceptions import CatalogSyncError, Stage
from .catalogs import Catalog
from .statistics import load_catalog

logger = logging.getLogger(__name__)

MessageKey = tuple[str | None, str]


class IssueKind(Enum):
    MISSING = "missing"
    UNEXPECTED = "unexpected"
    UNREADABLE = "unreadable"


@dataclass(frozen=True)
class CatalogIssue:
    """A problem found in one catalog."""

    language: str
    kind: IssueKind
    message_ids: tuple[str, ...] = ()
    detail: str = ""

    def describe(self) -> str:
        match self.kind:
            case IssueKind.MISSING:
                header = f"{self.language}: {len(self.message_ids)} id(s) missing from the catalog"
            case IssueKind.UNEXPECTED:
                header = f"{self.language}: {len(self.message_ids)} id(s) not in the template"
            case IssueKind.UNREADABLE:
                return f"{self.language}: catalog could not be parsed: {self.detail}"
        return "\n".join([header, *(f"    {msgid}" for msgid in self.message_ids)])


def _format_key(key: MessageKey) -> str:
    context, msgid = key
    return f"[{context}] {msgid}" if context else msgid


def active_message_keys(po: Iterable[polib.POEntry]) -> set[MessageKey]:
    """Keys (context, msgid) of every entry that is not obsolete."""
    return {(entry.msgctxt, entry.msgid) for entry in po if not entry.obsolete}


def check_catalog(catalog: Catalog, template_keys: set[MessageKey]) -> list[CatalogIssue]:
    """
    Compare one catalog's ids against the template's.

    Args:
        catalog: Catalog to check
        template_keys: Message keys present in the template

    Returns:
        Issues found, empty when the catalog is in sync
    """
    try:
        po = load_catalog(catalog)
    except (OSError, ValueError) as e:
        return [CatalogIssue(catalog.language, IssueKind.UNREADABLE, detail=str(e))]

    catalog_keys = active_message_keys(po)
    issues: list[CatalogIssue] = []

    missing = template_keys - catalog_keys
    if missing:
        issues.append(
            CatalogIssue(
                catalog.language,
                IssueKind.MISSING,
                tuple(sorted(_format_key(key) for key in missing)),
            )
        )

    unexpected = catalog_keys - template_keys
    if unexpected:
        issues.append(
            CatalogIssue(
                catalog.language,
                IssueKind.UNEXPECTED,
                tuple(sorted(_format_key(key) for key in unexpected)),
            )
        )

    return issues


def check_catalogs(template: Path, catalogs: Sequence[Catalog]) -> list[CatalogIssue]:
    """
    Check every catalog against the template.

    Args:
        template: Template file
        catalogs: Catalogs to check

    Returns:
        All issues, grouped by language in catalog order

    Raises:
        CatalogSyncError: If the template is missing or cannot be parsed
    """
    if not template.exists():
        raise CatalogSyncError(f"Template not found: {template}", stage=Stage.CHECK)

    try:
        template_po = polib.pofile(str(template), wrapwidth=0)
    except (OSError, ValueError) as e:
        raise CatalogSyncError(
            f"Template could not be parsed: {template}: {e}", stage=Stage.CHECK
        ) from e

    template_keys = active_message_keys(template_po)
    logger.debug(f"Template has {len(template_keys)} message id(s)")

    issues: list[CatalogIssue] = []
    for catalog in catalogs:
        catalog_issues = check_catalog(catalog, template_keys)
        if catalog_issues:
            logger.debug(f"{catalog.language}: {len(catalog_issues)} issue(s)")
        issues.extend(catalog_issues)
    return issues
