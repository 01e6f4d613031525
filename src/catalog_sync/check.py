"""
Entry point for catalog-sync-check.

Intended for CI: fails when any catalog has drifted from the template, i.e.
when someone forgot to run catalog-sync after changing translatable strings.
"""

from __future__ import annotations

import logging

from .config.manager import ConfigManager, load_settings
from .i18n.consistency import check_catalogs
from .i18n.run_config import RunFlags, configure
from .main import report_error
from .utils.cli.args import parse_check_arguments
from .utils.cli.log_setup import setup_logging
from .utils.core.exceptions import CatalogSyncError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """
    Check catalogs against the template.

    Returns:
        Exit code (0 when every catalog is in sync, 1 otherwise)
    """
    args = parse_check_arguments(argv)
    setup_logging(args.verbose)

    try:
        settings, root = load_settings(args.config_file)
        settings = ConfigManager.apply_overrides(
            settings,
            catalog_dir=args.catalog_dir.resolve() if args.catalog_dir else None,
            template_file=args.template_file.resolve() if args.template_file else None,
        )
        config = configure(RunFlags(lang=args.lang), settings, root)
        issues = check_catalogs(config.paths.template_file, config.catalogs)
    except CatalogSyncError as e:
        report_error(e, args.verbose)
        return 1

    if issues:
        for issue in issues:
            logger.error(issue.describe())
        languages = sorted({issue.language for issue in issues})
        logger.error(
            f"{len(languages)} catalog(s) out of sync with {config.paths.template_file.name}: "
            f"{', '.join(languages)}. Run catalog-sync to update them."
        )
        return 1

    logger.info(f"All {len(config.catalogs)} catalog(s) are in sync with the template")
    return 0
