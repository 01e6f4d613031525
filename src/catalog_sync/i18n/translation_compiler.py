"""
Compilation of catalogs to binary .mo files.

Each catalog is compiled with ``msgfmt --check-format`` so that a translation
whose format directives disagree with its msgid is rejected instead of being
shipped. The output location is derived from the language code alone, and
its parent directories are created on demand.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..utils.core.exceptions import CompileError
from ..utils.core.process import ToolRunner, format_command, run_tool
from .catalogs import Catalog

logger = logging.getLogger(__name__)


def build_compile_command(executable: str, po_file: Path, mo_file: Path) -> list[str]:
    """Build the msgfmt command line for one catalog."""
    return [executable, "--check-format", f"--output-file={mo_file}", str(po_file)]


def compile_catalog(
    catalog: Catalog,
    mo_file: Path,
    executable: str = "msgfmt",
    runner: ToolRunner = run_tool,
    dry_run: bool = False,
) -> Path:
    """
    Compile a single catalog to .mo format.

    Args:
        catalog: Catalog to compile
        mo_file: Destination of the compiled catalog
        executable: msgfmt executable
        runner: Executes the compiler
        dry_run: Log the command instead of running it

    Returns:
        Path of the compiled catalog

    Raises:
        CompileError: If the compiler is missing or rejects the catalog
    """
    command = build_compile_command(executable, catalog.po_file, mo_file)

    if dry_run:
        logger.info(f"DRY RUN: Would run {format_command(command)}")
        return mo_file

    _ = mo_file.parent.mkdir(parents=True, exist_ok=True)

    try:
        result = runner(command)
    except FileNotFoundError as e:
        raise CompileError(
            f"Compiler not found: {executable}. Install gettext tools to compile .po files.",
            language=catalog.language,
            command=command,
        ) from e

    if not result.ok:
        logger.error(f"Failed to compile {catalog.po_file}:\n{result.stderr.rstrip()}")
        raise CompileError(
            f"{executable} exited with status {result.returncode} for language '{catalog.language}'",
            language=catalog.language,
            command=command,
            returncode=result.returncode,
            stderr=result.stderr,
        )

    logger.info(f"Compiled {catalog.po_file} -> {mo_file}")
    return mo_file
