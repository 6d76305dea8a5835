"""
Configuration loader for the translator.

Handles loading from multiple sources with proper priority:
CLI Args > Environment Variables > Config File > Defaults
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigError
from .models import TranslatorConfig


class ConfigLoader:
    """
    Loads and merges configuration from multiple sources.

    Priority order (highest to lowest):
    1. CLI arguments (passed to merge_cli_args)
    2. Environment variables (AZSQL_*)
    3. Configuration file
    4. Default values
    """

    DEFAULT_CONFIG_DIR = Path.home() / ".config" / "azure-sql-properties"
    DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
    ENV_PREFIX = "AZSQL_"
    CONFIG_PATH_ENV = "AZSQL_CONFIG_PATH"

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to configuration file. If None, uses
                AZSQL_CONFIG_PATH or the default location.
        """
        self.config_path = (
            Path(config_path) if config_path else self._get_config_path_from_env()
        )

    @classmethod
    def _get_config_path_from_env(cls) -> Path:
        env_path = os.environ.get(cls.CONFIG_PATH_ENV)
        if env_path:
            return Path(env_path).expanduser()
        return cls.DEFAULT_CONFIG_FILE

    def load(self) -> TranslatorConfig:
        """
        Load configuration from all sources and merge.

        Raises:
            ConfigError: If configuration is invalid
        """
        config_dict: Dict[str, Any] = {}

        if self.config_path.exists():
            config_dict.update(self._load_file(self.config_path))

        config_dict.update(self._load_from_env())

        try:
            return TranslatorConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigError(
                f"Configuration validation failed: {e}",
                config_path=str(self.config_path),
                cause=e,
            ) from e

    def _load_file(self, path: Path) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Raises:
            ConfigError: If file cannot be read or parsed
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML in {path}: {e}", config_path=str(path), cause=e
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Cannot read config file {path}: {e}", config_path=str(path), cause=e
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                "Configuration file must contain a mapping", config_path=str(path)
            )
        return data

    def _load_from_env(self) -> Dict[str, Any]:
        """
        Load configuration from environment variables.

        AZSQL_SUBSCRIPTION_ID -> subscription_id, AZSQL_STRICT_MODE -> strict_mode, ...
        """
        config: Dict[str, Any] = {}

        for key, value in os.environ.items():
            if not key.startswith(self.ENV_PREFIX) or key == self.CONFIG_PATH_ENV:
                continue
            config[key[len(self.ENV_PREFIX) :].lower()] = self._convert_env_value(value)

        return config

    def _convert_env_value(self, value: str) -> Any:
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False
        return value

    def merge_cli_args(
        self, config: TranslatorConfig, cli_args: Dict[str, Any]
    ) -> TranslatorConfig:
        """
        Merge CLI arguments into configuration. None values are ignored.

        Raises:
            ConfigError: If the merged configuration is invalid
        """
        filtered_args = {k: v for k, v in cli_args.items() if v is not None}
        if not filtered_args:
            return config

        try:
            return TranslatorConfig.model_validate(
                {**config.model_dump(), **filtered_args}
            )
        except ValidationError as e:
            raise ConfigError(f"Invalid command line option: {e}", cause=e) from e


def load_config(
    config_path: Optional[Path] = None,
    cli_args: Optional[Dict[str, Any]] = None,
) -> TranslatorConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Optional path to configuration file
        cli_args: Optional CLI arguments to merge

    Returns:
        Validated TranslatorConfig
    """
    loader = ConfigLoader(config_path)
    config = loader.load()
    if cli_args:
        config = loader.merge_cli_args(config, cli_args)
    return config
