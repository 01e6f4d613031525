"""
The catalog synchronization pipeline.

A run goes ``CONFIGURED -> EXTRACTING -> MERGING -> COMPILING -> DONE``, with
stages skipped according to the run mode. Catalogs are handled one at a time
in discovery order. The first failure moves the pipeline to ``FAILED`` and is
re-raised; work already finished for other languages is kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import override

from ..config.schema import CatalogSyncConfig
from ..utils.core.exceptions import CatalogSyncError
from ..utils.core.process import ToolRunner, run_tool
from .catalogs import Catalog
from .extractor import extract
from .merger import merge
from .run_config import RunConfig, RunFlags, configure
from .statistics import CatalogStatistics, catalog_statistics
from .translation_compiler import compile_catalog

logger = logging.getLogger(__name__)


class PipelineState(Enum):
    """Lifecycle of a pipeline run."""

    IDLE = "idle"
    CONFIGURED = "configured"
    EXTRACTING = "extracting"
    MERGING = "merging"
    COMPILING = "compiling"
    DONE = "done"
    FAILED = "failed"


@dataclass
class SyncReport:
    """What a pipeline run did."""

    template: Path | None = None
    merged: list[str] = field(default_factory=list)
    compiled: dict[str, Path] = field(default_factory=dict)
    statistics: dict[str, CatalogStatistics] = field(default_factory=dict)

    @property
    def extracted(self) -> bool:
        return self.template is not None

    @override
    def __str__(self) -> str:
        return (
            f"Sync Results: "
            f"template {'updated' if self.extracted else 'unchanged'}, "
            f"{len(self.merged)} merged, "
            f"{len(self.compiled)} compiled"
        )


class CatalogSyncPipeline:
    """
    Runs extraction, merging and compilation for one run configuration.

    The pipeline is single use: configure it (or pass a ready ``RunConfig``),
    call ``run()`` once and inspect ``state`` or the returned report.
    """

    def __init__(
        self, config: RunConfig | None = None, runner: ToolRunner = run_tool
    ) -> None:
        self._config: RunConfig | None = config
        self.runner: ToolRunner = runner
        self.report: SyncReport = SyncReport()
        self._state: PipelineState = (
            PipelineState.IDLE if config is None else PipelineState.CONFIGURED
        )

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def config(self) -> RunConfig:
        if self._config is None:
            raise RuntimeError("Pipeline has not been configured")
        return self._config

    def configure(
        self, flags: RunFlags, settings: CatalogSyncConfig, root: Path
    ) -> RunConfig:
        """
        Resolve the run configuration from command-line switches.

        Raises:
            ConfigError: If the switches are invalid (the pipeline stays idle)
            RuntimeError: If the pipeline is not idle
        """
        if self._state is not PipelineState.IDLE:
            raise RuntimeError(f"Pipeline cannot be configured from state {self._state.value}")
        self._config = configure(flags, settings, root)
        self._state = PipelineState.CONFIGURED
        return self._config

    def run(self) -> SyncReport:
        """
        Execute every stage enabled by the run mode.

        Returns:
            SyncReport describing the work done

        Raises:
            CatalogSyncError: On the first stage failure
            RuntimeError: If the pipeline has already run
        """
        if self._state is not PipelineState.CONFIGURED:
            raise RuntimeError(f"Pipeline cannot run from state {self._state.value}")

        mode = self.config.mode
        logger.info(
            f"Starting {mode.value} run for {len(self.config.catalogs)} catalog(s)"
            + (" (dry run)" if self.config.dry_run else "")
        )

        try:
            if mode.extracts:
                self._extract()
            if mode.merges:
                self._merge_all()
            if mode.compiles:
                self._compile_all()
        except (CatalogSyncError, KeyboardInterrupt):
            self._state = PipelineState.FAILED
            raise

        self._state = PipelineState.DONE
        self._log_statistics()
        logger.info(str(self.report))
        return self.report

    def _extract(self) -> None:
        self._state = PipelineState.EXTRACTING
        self.report.template = extract(self.config, runner=self.runner)

    def _merge_all(self) -> None:
        self._state = PipelineState.MERGING
        template = self.config.paths.template_file
        for catalog in self.config.catalogs:
            merge(
                catalog,
                template,
                executable=self.config.settings.tools.msgmerge,
                runner=self.runner,
                dry_run=self.config.dry_run,
            )
            self.report.merged.append(catalog.language)

    def _compile_all(self) -> None:
        self._state = PipelineState.COMPILING
        for catalog in self.config.catalogs:
            self.report.compiled[catalog.language] = compile_catalog(
                catalog,
                self.config.compiled_path(catalog),
                executable=self.config.settings.tools.msgfmt,
                runner=self.runner,
                dry_run=self.config.dry_run,
            )

    def _log_statistics(self) -> None:
        if self.config.dry_run:
            return
        for catalog in self.config.catalogs:
            stats = self._statistics_for(catalog)
            if stats is not None:
                self.report.statistics[catalog.language] = stats
                logger.info(str(stats))

    def _statistics_for(self, catalog: Catalog) -> CatalogStatistics | None:
        try:
            return catalog_statistics(catalog)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read statistics for {catalog.po_file}: {e}")
            return None
