"""Configuration manager for catalog-sync.

This module loads the optional ``catalog-sync.yml`` project file, validates it
with the Pydantic schema and applies command-line overrides on top of it.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..utils.core.exceptions import ConfigError
from .schema import CatalogSyncConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("catalog-sync.yml")


class ConfigManager:
    """Loads and validates catalog-sync configuration files."""

    @staticmethod
    def load_config(config_path: Path) -> CatalogSyncConfig:
        """
        Load and validate configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            CatalogSyncConfig: Validated configuration object

        Raises:
            FileNotFoundError: If the config file doesn't exist
            yaml.YAMLError: If the YAML syntax is invalid
            ValidationError: If the configuration fails Pydantic validation
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config_data: object = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if raw_config_data is None:
            config_data: dict[str, object] = {}
        elif isinstance(raw_config_data, dict):
            config_data = raw_config_data
        else:
            raise ValueError(
                f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}"
            )

        return CatalogSyncConfig.model_validate(config_data)

    @staticmethod
    def apply_overrides(
        config: CatalogSyncConfig,
        catalog_dir: Path | None = None,
        template_file: Path | None = None,
        locale_root: Path | None = None,
    ) -> CatalogSyncConfig:
        """
        Return a copy of the configuration with command-line path overrides applied.

        Args:
            config: Loaded configuration
            catalog_dir: Replacement catalog directory, if given
            template_file: Replacement template file, if given
            locale_root: Replacement compiled output root, if given

        Returns:
            Updated configuration (the original is left unchanged)
        """
        updates: dict[str, Path] = {}
        if catalog_dir is not None:
            updates["catalog_dir"] = catalog_dir
        if template_file is not None:
            updates["template_file"] = template_file
        if locale_root is not None:
            updates["locale_root"] = locale_root

        if not updates:
            return config

        paths = config.paths.model_copy(update=updates)
        return config.model_copy(update={"paths": paths})


def load_settings(
    config_file: Path | None, working_dir: Path | None = None
) -> tuple[CatalogSyncConfig, Path]:
    """
    Load project settings and determine the project root.

    An explicitly requested file must exist. Without one, ``catalog-sync.yml`` in
    the working directory is used when present, otherwise built-in defaults apply.
    Relative paths in the configuration are anchored at the file's directory.

    Args:
        config_file: Explicit configuration file, or None
        working_dir: Directory to look in for the default file (defaults to cwd)

    Returns:
        Tuple of (configuration, project root)

    Raises:
        ConfigError: If the file is missing, malformed or fails validation
    """
    base_dir = working_dir if working_dir is not None else Path.cwd()

    if config_file is None:
        candidate = base_dir / DEFAULT_CONFIG_FILE
        if not candidate.exists():
            logger.debug(f"No {DEFAULT_CONFIG_FILE} in {base_dir}, using defaults")
            return CatalogSyncConfig(), base_dir
        config_file = candidate
    elif not config_file.is_absolute():
        config_file = base_dir / config_file

    try:
        config = ConfigManager.load_config(config_file)
    except FileNotFoundError as e:
        raise ConfigError(str(e)) from e
    except yaml.YAMLError as e:
        raise ConfigError(str(e)) from e
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_file}:\n{e}") from e
    except ValueError as e:
        raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e

    logger.debug(f"Loaded configuration from {config_file}")
    return config, config_file.parent
