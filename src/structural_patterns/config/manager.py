"""Configuration management with defaults, file and environment overrides."""
import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from structural_patterns.config.schemas import AppConfig
from structural_patterns.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "logging": {
        "level": "${PATTERNS_LOG_LEVEL:WARNING}",
        "destination": "${PATTERNS_LOG_DESTINATION:stdout}",
        "file_path": "${PATTERNS_LOG_FILE:logs/structural_patterns.log}",
        "max_size_mb": 10,
        "backup_count": 5,
    },
    "output": {
        "format": "${PATTERNS_OUTPUT_FORMAT:text}",
    },
}

# Environment variables that override a config path regardless of file contents
ENV_OVERRIDES = {
    "PATTERNS_LOG_LEVEL": ("logging", "level"),
    "PATTERNS_LOG_DESTINATION": ("logging", "destination"),
    "PATTERNS_LOG_FILE": ("logging", "file_path"),
    "PATTERNS_OUTPUT_FORMAT": ("output", "format"),
}


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Applying user configuration file overrides
    - Applying environment variable overrides
    - Variable interpolation
    - Validation into the AppConfig schema
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to a JSON configuration file.

        Raises:
            ConfigurationError: If the file cannot be read or the result is invalid
        """
        self._config_file = config_file
        self._config = copy.deepcopy(DEFAULT_CONFIG)
        self._app_config: Optional[AppConfig] = None

        if config_file:
            self._load_config_file(config_file)

        # Environment variables have the highest priority
        self._load_env_vars()

        self._app_config = self._validate()

    @property
    def app_config(self) -> AppConfig:
        """Validated application configuration."""
        return self._app_config

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from file."""
        try:
            with open(config_path, 'r') as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load configuration: {str(e)}",
                details={"config_file": config_path}
            ) from e

        if not isinstance(user_config, dict):
            raise ConfigurationError(
                "Configuration file must contain a JSON object",
                details={"config_file": config_path}
            )
        logger.debug("Loaded configuration file %s", config_path)
        self.update_config(user_config)

    def _load_env_vars(self) -> None:
        """Load and apply environment variable overrides."""
        for env_var, path in ENV_OVERRIDES.items():
            if env_var in os.environ:
                self._set_nested_value(self._config, path, os.environ[env_var])

    def _set_nested_value(self, config: Dict[str, Any], path: tuple, value: Any) -> None:
        """Set a nested configuration value."""
        current = config
        for key in path[:-1]:
            current = current.setdefault(key, {})
        current[path[-1]] = value

    def _interpolate_values(self, config: Any) -> Any:
        """Interpolate ${VAR} and ${VAR:default} references in configuration values."""
        if isinstance(config, str):
            if config.startswith("${") and config.endswith("}"):
                var_name = config[2:-1]
                if ":" in var_name:
                    var_name, default = var_name.split(":", 1)
                    return os.environ.get(var_name, default)
                return os.environ.get(var_name, config)
            return config
        elif isinstance(config, dict):
            return {k: self._interpolate_values(v) for k, v in config.items()}
        elif isinstance(config, list):
            return [self._interpolate_values(v) for v in config]
        return config

    def _validate(self) -> AppConfig:
        try:
            return AppConfig.model_validate(self.get_config())
        except PydanticValidationError as e:
            raise ConfigurationError(
                "Invalid configuration",
                details={"errors": [err["msg"] for err in e.errors()]}
            ) from e

    def update_config(self, user_config: Dict[str, Any]) -> None:
        """
        Update configuration with user-provided values.

        Args:
            user_config: Configuration dictionary from user config file
        """
        def deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
            for key, value in source.items():
                if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                    deep_update(target[key], value)
                else:
                    target[key] = value

        if self._app_config is None:
            deep_update(self._config, user_config)
            return

        # Validate a candidate first so a rejected update leaves the config intact
        candidate = copy.deepcopy(self._config)
        deep_update(candidate, user_config)
        previous, self._config = self._config, candidate
        try:
            self._app_config = self._validate()
        except ConfigurationError:
            self._config = previous
            raise

    def get_config(self) -> Dict[str, Any]:
        """
        Get the complete configuration with all interpolations applied.

        Returns:
            Dict containing the complete configuration
        """
        return self._interpolate_values(self._config)
