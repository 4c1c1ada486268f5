"""Configuration manager for loading and validating .cartlab.yml"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from cartlab.domain.config import ApiConfig, AppConfig, RetryConfig, TransportConfig
from cartlab.domain.errors import ConfigurationError
from cartlab.infrastructure.retry import parse_schedule

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".cartlab.yml"


class ConfigManager:
    """Manages configuration from .cartlab.yml and environment variables
    
    Configuration priority:
    1. Default values (defined in Pydantic models)
    2. .cartlab.yml file (searched from current directory upwards)
    3. Environment variables (CARTLAB_*)
    4. CLI arguments (handled by CLI layer)
    """

    # Defaults come from the Pydantic models
    DEFAULT_CONFIG = AppConfig().model_dump()

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config manager
        
        Args:
            config_path: Path to .cartlab.yml (searches from current dir if None)
            
        Raises:
            ConfigurationError: If configuration validation fails
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)
        self.config_path = config_path or self._find_config_file()
        try:
            self.config: AppConfig = self._load_config()
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = ".".join(str(x) for x in error["loc"])
                msg = error["msg"]
                errors.append(f"  - {field}: {msg}")
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(errors)
            ) from e

    def _find_config_file(self) -> Optional[Path]:
        """Find .cartlab.yml starting from current directory
        
        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            config_file = parent / CONFIG_FILE_NAME
            if config_file.exists():
                logger.info(f"Found config file: {config_file}")
                return config_file
        logger.debug(f"No {CONFIG_FILE_NAME} found, using defaults")
        return None

    def _load_config(self) -> AppConfig:
        """Load configuration from file and validate with Pydantic
        
        Raises:
            ConfigurationError: If the file is not valid YAML mapping
            ValidationError: If configuration values are invalid
        """
        config_dict = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path and self.config_path.exists():
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    file_config = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigurationError(f"Failed to read {self.config_path}: {e}") from e
            if not isinstance(file_config, dict):
                raise ConfigurationError(f"{self.config_path} must contain a mapping")
            config_dict = self._merge_config(config_dict, file_config)
            config_dict = self._fill_empty_sections(config_dict)
            logger.info(f"Loaded configuration from {self.config_path}")

        config_dict = self._apply_env_overrides(config_dict)
        return AppConfig(**config_dict)

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries"""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result

    def _fill_empty_sections(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Replace null sections (e.g. a bare `retry:` line) with their defaults

        Raises:
            ConfigurationError: If a known section is neither null nor a mapping
        """
        for section, defaults in self.DEFAULT_CONFIG.items():
            value = config.get(section)
            if value is None:
                config[section] = copy.deepcopy(defaults)
            elif not isinstance(value, dict):
                raise ConfigurationError(
                    f"Section '{section}' in {self.config_path} must be a mapping"
                )
        return config

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply CARTLAB_* environment variable overrides"""
        if os.getenv("CARTLAB_API_URL"):
            config["api"]["base_url"] = os.getenv("CARTLAB_API_URL")

        if os.getenv("CARTLAB_TRANSPORT"):
            config["transport"]["kind"] = os.getenv("CARTLAB_TRANSPORT")

        backoff = os.getenv("CARTLAB_RETRY_BACKOFF")
        if backoff is not None:
            try:
                config["retry"]["backoff_intervals"] = list(parse_schedule(backoff))
            except ValueError as e:
                raise ConfigurationError(f"Invalid CARTLAB_RETRY_BACKOFF: {e}") from e

        return config

    def get_api_config(self) -> ApiConfig:
        return self.config.api

    def get_transport_config(self) -> TransportConfig:
        return self.config.transport

    def get_retry_config(self) -> RetryConfig:
        return self.config.retry
