"""
Main entry point for catalog-sync.

Parses the command line, sets up logging, loads the project configuration and
runs the extract -> merge -> compile pipeline. Exit status is 0 on success and
1 on any configuration error, tool failure or interruption.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config.manager import ConfigManager, load_settings
from .i18n.pipeline import CatalogSyncPipeline
from .i18n.run_config import RunFlags, resolve_mode
from .utils.cli.args import parse_arguments
from .utils.cli.log_setup import setup_logging
from .utils.core.exceptions import CatalogSyncError, ToolError
from .utils.core.process import ToolRunner, format_command, run_tool

logger = logging.getLogger(__name__)


def _absolute(path: Path | None) -> Path | None:
    return path.resolve() if path is not None else None


def report_error(error: CatalogSyncError, verbose: bool = False) -> None:
    """Log a pipeline error with its stage and language context."""
    context = f"[{error.stage.value}"
    if error.language:
        context += f" {error.language}"
    context += "]"
    logger.error(f"{context} {error.user_message}")

    if isinstance(error, ToolError) and error.command:
        logger.error(f"Command: {format_command(error.command)}")
    if verbose:
        logger.exception("Full traceback:")


def main(argv: list[str] | None = None, runner: ToolRunner = run_tool) -> int:
    """
    Run catalog-sync.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        runner: Executes external tools

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        # Contradictory switches are rejected before any file is read.
        _ = resolve_mode(args.no_mo, args.only_mo)

        settings, root = load_settings(args.config_file)
        settings = ConfigManager.apply_overrides(
            settings,
            catalog_dir=_absolute(args.catalog_dir),
            template_file=_absolute(args.template_file),
            locale_root=_absolute(args.locale_root),
        )

        pipeline = CatalogSyncPipeline(runner=runner)
        _ = pipeline.configure(
            RunFlags(
                no_mo=args.no_mo,
                only_mo=args.only_mo,
                lang=args.lang,
                dry_run=args.dry_run,
            ),
            settings,
            root,
        )
        _ = pipeline.run()
        return 0

    except CatalogSyncError as e:
        report_error(e, args.verbose)
        return 1
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return 1
