"""
Merging catalogs against the template.

``msgmerge`` updates a catalog in place: translations of ids still in the
template are kept, new ids are appended untranslated and ids gone from the
template are marked obsolete. Fuzzy matching is off and no backup file is
written.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..utils.core.exceptions import MergeError
from ..utils.core.process import ToolRunner, format_command, run_tool
from .catalogs import Catalog

logger = logging.getLogger(__name__)

MERGE_OPTIONS = (
    "--update",
    "--no-fuzzy-matching",
    "--no-wrap",
    "--backup=none",
    "--quiet",
)


def build_merge_command(executable: str, po_file: Path, template: Path) -> list[str]:
    """Build the msgmerge command line for one catalog."""
    return [executable, *MERGE_OPTIONS, str(po_file), str(template)]


def merge(
    catalog: Catalog,
    template: Path,
    executable: str = "msgmerge",
    runner: ToolRunner = run_tool,
    dry_run: bool = False,
) -> None:
    """
    Merge a catalog against the template, updating the catalog in place.

    Args:
        catalog: Catalog to update
        template: Template providing the current set of message ids
        executable: msgmerge executable
        runner: Executes the merger
        dry_run: Log the command instead of running it

    Raises:
        MergeError: If the template is missing or the merger fails
    """
    command = build_merge_command(executable, catalog.po_file, template)

    if dry_run:
        logger.info(f"DRY RUN: Would run {format_command(command)}")
        return

    if not template.exists():
        raise MergeError(
            f"Template not found: {template}",
            language=catalog.language,
            command=command,
        )

    logger.info(f"Merging {catalog.language} ({catalog.po_file.name})")

    try:
        result = runner(command)
    except FileNotFoundError as e:
        raise MergeError(
            f"Merger not found: {executable}. Install the gettext tools to merge catalogs.",
            language=catalog.language,
            command=command,
        ) from e

    if not result.ok:
        logger.error(f"Failed to merge {catalog.po_file}:\n{result.stderr.rstrip()}")
        raise MergeError(
            f"{executable} exited with status {result.returncode} for language '{catalog.language}'",
            language=catalog.language,
            command=command,
            returncode=result.returncode,
            stderr=result.stderr,
        )
