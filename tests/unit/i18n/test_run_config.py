"""
Tests for run configuration.

This module tests how command-line switches are validated and turned into an
immutable RunConfig, including the language filter and its error reporting.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path
from unittest.mock import patch

import pytest

from catalog_sync.config.schema import CatalogSyncConfig
from catalog_sync.i18n.run_config import (
    RunConfig,
    RunFlags,
    RunMode,
    configure,
    resolve_mode,
)
from catalog_sync.utils.core.exceptions import ConfigError, LanguageNotFound
from tests.utils.test_helpers import write_catalog


class TestResolveMode:
    """Test mapping of the mode switches onto a run mode."""

    def test_no_switches_is_full_run(self) -> None:
        """Test that no switches select every stage."""
        assert resolve_mode(no_mo=False, only_mo=False) is RunMode.FULL

    def test_no_mo_skips_compilation(self) -> None:
        """Test that --no-mo selects extraction and merging only."""
        mode = resolve_mode(no_mo=True, only_mo=False)

        assert mode is RunMode.EXTRACT_AND_MERGE_ONLY
        assert mode.extracts and mode.merges
        assert not mode.compiles

    def test_only_mo_compiles_only(self) -> None:
        """Test that --only-mo selects compilation only."""
        mode = resolve_mode(no_mo=False, only_mo=True)

        assert mode is RunMode.COMPILE_ONLY
        assert mode.compiles
        assert not mode.extracts
        assert not mode.merges

    def test_both_switches_rejected(self) -> None:
        """Test that --no-mo together with --only-mo is a configuration error."""
        with pytest.raises(ConfigError) as exc_info:
            _ = resolve_mode(no_mo=True, only_mo=True)

        assert "mutually exclusive" in str(exc_info.value)


class TestConfigure:
    """Test the configure function."""

    def test_full_run_selects_all_catalogs(
        self, project: Path, settings: CatalogSyncConfig
    ) -> None:
        """Test that without a filter every catalog is selected in language order."""
        config = configure(RunFlags(), settings, project)

        assert config.mode is RunMode.FULL
        assert [catalog.language for catalog in config.catalogs] == ["de", "fr"]
        assert config.language is None
        assert config.dry_run is False

    def test_language_filter_narrows_catalogs(
        self, project: Path, settings: CatalogSyncConfig
    ) -> None:
        """Test that --lang keeps only the matching catalog."""
        config = configure(RunFlags(lang="fr"), settings, project)

        assert len(config.catalogs) == 1
        assert config.catalogs[0].language == "fr"
        assert config.catalogs[0].po_file == (project / "po" / "fr.po").resolve()
        assert config.language == "fr"

    def test_unknown_language_lists_available_codes(
        self, project: Path, settings: CatalogSyncConfig
    ) -> None:
        """Test that an unknown language reports every discovered language code."""
        _ = write_catalog(project / "po" / "pt_BR.po", {"Hello": "Olá"})

        with pytest.raises(LanguageNotFound) as exc_info:
            _ = configure(RunFlags(lang="xx"), settings, project)

        error = exc_info.value
        assert error.requested == "xx"
        assert error.available == ("de", "fr", "pt_BR")
        for code in ("de", "fr", "pt_BR"):
            assert code in str(error)

    def test_unknown_language_explains_bootstrap(
        self, project: Path, settings: CatalogSyncConfig
    ) -> None:
        """Test that the error tells the operator how to add a new language."""
        with pytest.raises(LanguageNotFound) as exc_info:
            _ = configure(RunFlags(lang="it"), settings, project)

        message = str(exc_info.value)
        assert "ISO 639-1" in message
        assert "template.pot" in message
        assert "<ll>.po" in message

    def test_language_not_found_is_config_error(
        self, project: Path, settings: CatalogSyncConfig
    ) -> None:
        """Test that LanguageNotFound is handled like any configuration error."""
        with pytest.raises(ConfigError):
            _ = configure(RunFlags(lang="it"), settings, project)

    @pytest.mark.parametrize("code", ["de-DE", "d", "de.po", ""])
    def test_unmatched_code_lists_available(
        self, project: Path, settings: CatalogSyncConfig, code: str
    ) -> None:
        """Test that any code without a catalog reports the available languages."""
        with pytest.raises(LanguageNotFound) as exc_info:
            _ = configure(RunFlags(lang=code), settings, project)

        assert exc_info.value.requested == code
        assert exc_info.value.available == ("de", "fr")

    @pytest.mark.parametrize("code", ["../de", "po/de", "..\\de"])
    def test_path_like_language_code_rejected(
        self, project: Path, settings: CatalogSyncConfig, code: str
    ) -> None:
        """Test that a language code pointing outside the catalog directory is rejected."""
        with pytest.raises(ConfigError) as exc_info:
            _ = configure(RunFlags(lang=code), settings, project)

        assert not isinstance(exc_info.value, LanguageNotFound)

    @pytest.mark.parametrize("code", ["de", "ast", "pt_BR", "pt-BR", "sr@latin", "zh_Hans"])
    def test_locale_style_codes_accepted(
        self, tmp_path: Path, settings: CatalogSyncConfig, code: str
    ) -> None:
        """Test that common locale code forms are accepted."""
        _ = write_catalog(tmp_path / "po" / f"{code}.po", {"Hello": "x"})

        config = configure(RunFlags(lang=code), settings, tmp_path)

        assert config.catalogs[0].language == code

    def test_missing_catalog_directory(
        self, tmp_path: Path, settings: CatalogSyncConfig
    ) -> None:
        """Test that a missing catalog directory is a configuration error."""
        with pytest.raises(ConfigError) as exc_info:
            _ = configure(RunFlags(), settings, tmp_path)

        assert "Catalog directory does not exist" in str(exc_info.value)

    def test_contradictory_switches_do_no_file_io(
        self, project: Path, settings: CatalogSyncConfig
    ) -> None:
        """Test that --no-mo with --only-mo fails before touching the file system."""
        with (
            patch("catalog_sync.i18n.run_config.discover_catalogs") as mock_discover,
            patch.object(Path, "is_dir") as mock_is_dir,
            patch.object(Path, "resolve") as mock_resolve,
        ):
            with pytest.raises(ConfigError):
                _ = configure(RunFlags(no_mo=True, only_mo=True, lang="de"), settings, project)

            mock_discover.assert_not_called()
            mock_is_dir.assert_not_called()
            mock_resolve.assert_not_called()

    def test_dry_run_flag_carried(self, project: Path, settings: CatalogSyncConfig) -> None:
        """Test that the dry-run switch ends up in the run configuration."""
        config = configure(RunFlags(dry_run=True), settings, project)

        assert config.dry_run is True


class TestRunConfig:
    """Test the RunConfig container."""

    def test_is_immutable(self, full_config: RunConfig) -> None:
        """Test that a run configuration cannot be changed after it is built."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            full_config.mode = RunMode.COMPILE_ONLY  # pyright: ignore[reportAttributeAccessIssue]

    def test_compiled_path_is_deterministic(self, full_config: RunConfig, project: Path) -> None:
        """Test that the compiled path depends only on language, locale root and domain."""
        de = full_config.catalogs[0]

        expected = (project / "share" / "locale").resolve() / "de" / "LC_MESSAGES" / "messages.mo"
        assert full_config.compiled_path(de) == expected
        assert full_config.compiled_path(de) == full_config.compiled_path(de)

    def test_domain_from_settings(self, project: Path) -> None:
        """Test that the domain comes from the project settings."""
        config = configure(RunFlags(), CatalogSyncConfig(domain="demo"), project)

        assert config.domain == "demo"
        assert config.compiled_path(config.catalogs[0]).name == "demo.mo"
