"""Configuration management utilities."""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ..core.constants import CONFIG_FILE_NAME
from ..models.config import ProjectConfig
from ..services.exceptions import ConfigError

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads the project's ``genie-docker.yml``."""

    def __init__(self, project_root: Path):
        """Initialize config manager."""
        self.project_root = project_root
        self.config_file = project_root / CONFIG_FILE_NAME

    def load(self, path: Optional[Path] = None) -> ProjectConfig:
        """Load project configuration.

        Args:
            path: Explicit config file; when omitted the project default is
                used and a missing file yields the built-in defaults

        Raises:
            ConfigError: If the file is missing (explicit path only),
                malformed, or fails validation
        """
        config_file = Path(path) if path else self.config_file

        if not config_file.exists():
            if path:
                raise ConfigError(f"Configuration file not found: {config_file}")
            logger.debug(f"No {CONFIG_FILE_NAME} found, using defaults")
            return ProjectConfig()

        try:
            data = yaml.safe_load(config_file.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{config_file} must contain a mapping at the top level")

        try:
            config = ProjectConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e

        logger.debug(f"Loaded configuration from {config_file}")
        return config
