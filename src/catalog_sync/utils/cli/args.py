"""
Command-line argument parsing for catalog-sync.

The mode switches are parsed as independent flags on purpose: rejecting
``--no-mo`` together with ``--only-mo`` is left to run configuration so the
error is reported like every other configuration error (exit status 1).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NamedTuple, NoReturn, override

from ..core.version import get_version

USAGE_ERROR_EXIT_CODE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    @override
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(USAGE_ERROR_EXIT_CODE, f"{self.prog}: error: {message}\n")


class ParsedArgs(NamedTuple):
    """Container for parsed catalog-sync arguments."""

    no_mo: bool
    only_mo: bool
    lang: str | None
    config_file: Path | None
    catalog_dir: Path | None
    template_file: Path | None
    locale_root: Path | None
    dry_run: bool
    verbose: bool
    log_file: Path | None


class CheckArgs(NamedTuple):
    """Container for parsed catalog-sync-check arguments."""

    lang: str | None
    config_file: Path | None
    catalog_dir: Path | None
    template_file: Path | None
    verbose: bool


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    _ = parser.add_argument(
        "--lang",
        type=str,
        metavar="CODE",
        help='Restrict the run to one language (e.g., "de", "pt_BR")',
    )
    _ = parser.add_argument(
        "--config",
        dest="config_file",
        type=Path,
        metavar="PATH",
        help="Path to the configuration file (default: ./catalog-sync.yml if present)",
    )
    _ = parser.add_argument(
        "--catalog-dir",
        type=Path,
        metavar="PATH",
        help="Directory holding the <lang>.po catalogs (overrides the configuration)",
    )
    _ = parser.add_argument(
        "--template",
        dest="template_file",
        type=Path,
        metavar="PATH",
        help="Template file (overrides the configuration)",
    )
    _ = parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for catalog-sync.

    Returns:
        Configured ArgumentParser instance
    """
    parser = _ArgumentParser(
        prog="catalog-sync",
        description="Extract translatable messages, merge them into every catalog and compile the catalogs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                  # Extract, merge and compile every catalog
  %(prog)s --no-mo          # Extract and merge, skip compilation
  %(prog)s --only-mo        # Only compile catalogs
  %(prog)s --lang=de        # Only process the German catalog
  %(prog)s --dry-run        # Show the commands without running them

New languages are not created automatically: copy the template to
<catalog-dir>/<ll>.po, <ll> being the ISO 639-1 code, and re-run.
""",
    )

    _ = parser.add_argument(
        "--no-mo",
        action="store_true",
        help="Skip compiling catalogs to .mo files",
    )
    _ = parser.add_argument(
        "--only-mo",
        action="store_true",
        help="Only compile catalogs; skip extraction and merging",
    )
    _add_common_arguments(parser)
    _ = parser.add_argument(
        "--locale-root",
        type=Path,
        metavar="PATH",
        help="Root directory for compiled catalogs (overrides the configuration)",
    )
    _ = parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be done without running any tool",
    )
    _ = parser.add_argument(
        "--log-file",
        type=Path,
        metavar="PATH",
        help="Also write a detailed log to this file",
    )
    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_version()}"
    )

    return parser


def parse_arguments(args: list[str] | None = None) -> ParsedArgs:
    """
    Parse catalog-sync command-line arguments.

    Args:
        args: List of arguments to parse (defaults to sys.argv[1:])

    Returns:
        ParsedArgs with the raw switch values

    Raises:
        SystemExit: If argument parsing fails (status 1) or --help is requested
    """
    parsed = create_argument_parser().parse_args(args)

    return ParsedArgs(
        no_mo=bool(parsed.no_mo),
        only_mo=bool(parsed.only_mo),
        lang=parsed.lang,
        config_file=parsed.config_file,
        catalog_dir=parsed.catalog_dir,
        template_file=parsed.template_file,
        locale_root=parsed.locale_root,
        dry_run=bool(parsed.dry_run),
        verbose=bool(parsed.verbose),
        log_file=parsed.log_file,
    )


def create_check_argument_parser() -> argparse.ArgumentParser:
    """Create the argument parser for catalog-sync-check."""
    parser = _ArgumentParser(
        prog="catalog-sync-check",
        description="Verify that every catalog carries exactly the template's message ids",
    )
    _add_common_arguments(parser)
    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_version()}"
    )
    return parser


def parse_check_arguments(args: list[str] | None = None) -> CheckArgs:
    """Parse catalog-sync-check command-line arguments."""
    parsed = create_check_argument_parser().parse_args(args)

    return CheckArgs(
        lang=parsed.lang,
        config_file=parsed.config_file,
        catalog_dir=parsed.catalog_dir,
        template_file=parsed.template_file,
        verbose=bool(parsed.verbose),
    )
