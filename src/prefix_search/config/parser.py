"""
YAML configuration parser for Prefix Search.

This module locates the configuration file in the platform config directory,
creates it with empty defaults on first run, and loads and validates the
category mapping on every invocation.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Union
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from ..exceptions import ConfigurationError
from ..models.config import PrefixSearchConfig


logger = logging.getLogger(__name__)

APP_NAME = 'prefix-search'
CONFIG_FILE_NAME = 'config.yaml'
CONFIG_ENV_VAR = 'PREFIX_SEARCH_CONFIG'


@dataclass
class ConfigParseResult:
    """
    Result of configuration parsing operation.

    Attributes:
        config: The parsed and validated configuration
        warnings: List of non-fatal warnings
        config_path: Path to the configuration file used
        created: Whether the file was created with defaults during this load
    """
    config: PrefixSearchConfig
    warnings: List[str]
    config_path: Path
    created: bool


def get_config_dir() -> Path:
    """
    Get the platform config directory for the application.

    Honors ``XDG_CONFIG_HOME`` and falls back to ``~/.config``.
    """
    base = os.environ.get('XDG_CONFIG_HOME')
    if not base:
        base = Path.home() / '.config'
    return Path(base) / APP_NAME


def get_default_config_path() -> Path:
    """Get the config file path, honoring the PREFIX_SEARCH_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_config_dir() / CONFIG_FILE_NAME


class ConfigParser:
    """
    YAML configuration parser with first-run bootstrap.

    The configuration maps each category name to a ``dirs`` list. If the file
    does not exist yet it is written with no categories, so the user has a
    file to edit.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration parser.

        Args:
            config_path: Path to the configuration file. Defaults to the
                platform config directory.
        """
        self.config_path = Path(config_path).expanduser() if config_path else get_default_config_path()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load_config(self) -> ConfigParseResult:
        """
        Load and parse the configuration, creating it first if missing.

        Returns:
            ConfigParseResult containing parsed configuration and metadata

        Raises:
            ConfigurationError: If the file cannot be created, read or validated
        """
        created = False
        if not self.config_path.exists():
            self.save_config(self._get_default_config(), self.config_path)
            self.logger.info(f"Created default configuration at {self.config_path}")
            created = True
        elif not self.config_path.is_file():
            raise ConfigurationError(f"Configuration path is not a file: {self.config_path}")

        config_data = self._load_yaml_file(self.config_path)

        try:
            config = PrefixSearchConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed for {self.config_path}: {e}") from e

        warnings = config.validate_configuration()
        for warning in warnings:
            self.logger.debug(warning)

        self.logger.debug(f"Config: {config.to_dict()}")

        return ConfigParseResult(
            config=config,
            warnings=warnings,
            config_path=self.config_path,
            created=created
        )

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load and parse YAML file.

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed YAML data as dictionary

        Raises:
            ConfigurationError: If file cannot be read or parsed
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()

            if not content.strip():
                return {}

            data = yaml.safe_load(content)

            # Comment-only documents load as None
            if data is None:
                return {}

            if not isinstance(data, dict):
                raise ConfigurationError(f"Configuration file must contain a YAML mapping, got {type(data).__name__}")

            return data

        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {file_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e

    def _get_default_config(self) -> PrefixSearchConfig:
        """Get the configuration written on first run: no categories."""
        return PrefixSearchConfig()

    def save_config(self, config: PrefixSearchConfig, output_path: Union[str, Path]) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration to save
            output_path: Path where to save the configuration

        Raises:
            ConfigurationError: If the directory or file cannot be written
        """
        output_path = Path(output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(self._generate_yaml_with_comments(config.to_dict()))
        except OSError as e:
            raise ConfigurationError(f"Cannot write configuration file {output_path}: {e}") from e

        self.logger.info(f"Configuration saved to {output_path}")

    def _generate_yaml_with_comments(self, config_dict: Dict[str, Any]) -> str:
        """
        Generate YAML content with a header explaining the layout.

        Args:
            config_dict: Flattened configuration dictionary

        Returns:
            YAML content with comments
        """
        lines = [
            "# Prefix Search Configuration",
            "# Each top-level key is a search category listing the directories to search:",
            "#",
            "# docs:",
            "#   dirs:",
            "#     - ~/Documents",
            "",
        ]

        if config_dict:
            lines.append(yaml.safe_dump(config_dict, default_flow_style=False, sort_keys=False).rstrip())
            lines.append("")

        return "\n".join(lines)


def load_config(config_path: Optional[Union[str, Path]] = None) -> ConfigParseResult:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to configuration file (optional)

    Returns:
        ConfigParseResult containing parsed configuration

    Raises:
        ConfigurationError: If configuration is invalid or unavailable
    """
    parser = ConfigParser(config_path)
    return parser.load_config()
