"""
Global test fixtures for catalog-sync tests.

The ``project`` fixture lays out a small project the way catalog-sync expects
it with default settings: catalogs in ``po/``, the template at
``po/template.pot`` and Python sources under ``src/``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from catalog_sync.config.schema import CatalogSyncConfig
from catalog_sync.i18n.run_config import RunConfig, RunFlags, configure
from tests.utils.test_helpers import FakeRunner, write_catalog, write_template


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project root with German and French catalogs, a template and one source file."""
    _ = write_template(tmp_path / "po" / "template.pot", ["Hello"])
    _ = write_catalog(tmp_path / "po" / "de.po", {"Hello": "Hallo"})
    _ = write_catalog(tmp_path / "po" / "fr.po", {"Hello": "Bonjour"})

    source = tmp_path / "src" / "demo" / "app.py"
    _ = source.parent.mkdir(parents=True)
    _ = source.write_text(
        'from gettext import gettext as _\n\nprint(_("Hello"))\nprint(_("Goodbye"))\n',
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def settings() -> CatalogSyncConfig:
    """Default settings."""
    return CatalogSyncConfig()


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Runner imitating the gettext tools."""
    return FakeRunner()


@pytest.fixture
def full_config(project: Path, settings: CatalogSyncConfig) -> RunConfig:
    """Run configuration for a default, full run over the sample project."""
    return configure(RunFlags(), settings, project)
