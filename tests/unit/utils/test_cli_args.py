"""Tests for command-line argument parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from catalog_sync.utils.cli.args import (
    create_argument_parser,
    parse_arguments,
    parse_check_arguments,
)


class TestParseArguments:
    """Test cases for catalog-sync argument parsing."""

    def test_defaults(self) -> None:
        """Test that no switches select a plain full run."""
        args = parse_arguments([])

        assert args.no_mo is False
        assert args.only_mo is False
        assert args.lang is None
        assert args.config_file is None
        assert args.catalog_dir is None
        assert args.template_file is None
        assert args.locale_root is None
        assert args.dry_run is False
        assert args.verbose is False
        assert args.log_file is None

    def test_all_switches(self) -> None:
        """Test that every switch is carried into ParsedArgs."""
        args = parse_arguments(
            [
                "--no-mo",
                "--lang=pt_BR",
                "--config",
                "i18n.yml",
                "--catalog-dir",
                "translations",
                "--template",
                "translations/app.pot",
                "--locale-root",
                "build/locale",
                "--dry-run",
                "--verbose",
                "--log-file",
                "sync.log",
            ]
        )

        assert args.no_mo is True
        assert args.lang == "pt_BR"
        assert args.config_file == Path("i18n.yml")
        assert args.catalog_dir == Path("translations")
        assert args.template_file == Path("translations/app.pot")
        assert args.locale_root == Path("build/locale")
        assert args.dry_run is True
        assert args.verbose is True
        assert args.log_file == Path("sync.log")

    def test_contradictory_modes_parse(self) -> None:
        """Test that --no-mo with --only-mo is left for run configuration to reject."""
        args = parse_arguments(["--no-mo", "--only-mo"])

        assert args.no_mo is True
        assert args.only_mo is True

    def test_unknown_argument(self) -> None:
        """Test that unknown switches exit with status 1 like other configuration errors."""
        with pytest.raises(SystemExit) as exc_info:
            _ = parse_arguments(["--bogus"])

        assert exc_info.value.code == 1

    def test_missing_switch_value(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that a switch without its value exits with status 1 and prints usage."""
        with pytest.raises(SystemExit) as exc_info:
            _ = parse_arguments(["--lang"])

        assert exc_info.value.code == 1
        assert "usage: catalog-sync" in capsys.readouterr().err

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that --version prints the program name."""
        with pytest.raises(SystemExit) as exc_info:
            _ = parse_arguments(["--version"])

        assert exc_info.value.code == 0
        assert "catalog-sync" in capsys.readouterr().out

    def test_help_mentions_bootstrap(self) -> None:
        """Test that the help text explains how to add a language."""
        help_text = create_argument_parser().format_help()

        assert "ISO 639-1" in help_text
        assert "--only-mo" in help_text


class TestParseCheckArguments:
    """Test cases for catalog-sync-check argument parsing."""

    def test_defaults(self) -> None:
        """Test default values."""
        args = parse_check_arguments([])

        assert args.lang is None
        assert args.config_file is None
        assert args.verbose is False

    def test_no_mode_switches(self) -> None:
        """Test that the check command has no mode switches."""
        with pytest.raises(SystemExit) as exc_info:
            _ = parse_check_arguments(["--no-mo"])

        assert exc_info.value.code == 1

    def test_lang_and_paths(self) -> None:
        """Test the shared arguments."""
        args = parse_check_arguments(["--lang", "de", "--catalog-dir", "po", "--template", "po/x.pot"])

        assert args.lang == "de"
        assert args.catalog_dir == Path("po")
        assert args.template_file == Path("po/x.pot")
