"""Tests for configuration loading and overrides."""

import json
import os
from unittest.mock import patch

import pytest

from structural_patterns.config import (
    ConfigurationManager,
    LogDestination,
    OutputFormat,
)
from structural_patterns.domain.base.exceptions import ConfigurationError


class TestConfigurationManager:
    """Test configuration defaults, file overrides and environment overrides."""

    def test_defaults(self):
        """Test defaults when no file or environment is given."""
        config = ConfigurationManager().app_config

        assert config.logging.level == "WARNING"
        assert config.logging.destination == LogDestination.STDOUT
        assert config.logging.file_path == "logs/structural_patterns.log"
        assert config.output.format == OutputFormat.TEXT

    def test_file_override(self, tmp_path):
        """Test that a JSON file overrides defaults and keeps unspecified keys."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "logging": {"level": "debug"},
            "output": {"format": "yaml"},
        }))

        config = ConfigurationManager(str(config_file)).app_config

        assert config.logging.level == "DEBUG"
        assert config.logging.backup_count == 5
        assert config.output.format == OutputFormat.YAML

    def test_env_override_beats_file(self, tmp_path):
        """Test that environment variables have the highest priority."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"logging": {"level": "ERROR"}}))

        with patch.dict(os.environ, {"PATTERNS_LOG_LEVEL": "INFO"}):
            config = ConfigurationManager(str(config_file)).app_config

        assert config.logging.level == "INFO"

    def test_interpolation(self):
        """Test ${VAR:default} interpolation of default values."""
        with patch.dict(os.environ, {"PATTERNS_LOG_FILE": "/var/log/patterns.log"}):
            manager = ConfigurationManager()

        assert manager.app_config.logging.file_path == "/var/log/patterns.log"

    def test_update_config_revalidates(self):
        """Test that runtime updates are validated."""
        manager = ConfigurationManager()

        manager.update_config({"output": {"format": "json"}})
        assert manager.app_config.output.format == OutputFormat.JSON

        with pytest.raises(ConfigurationError):
            manager.update_config({"logging": {"level": "LOUD"}})
        assert manager.app_config.logging.level == "WARNING"
        assert manager.get_config()["logging"]["level"] == "WARNING"

    def test_invalid_level_rejected(self):
        """Test that an unknown log level fails validation."""
        with patch.dict(os.environ, {"PATTERNS_LOG_LEVEL": "LOUD"}):
            with pytest.raises(ConfigurationError) as exc_info:
                ConfigurationManager()

        assert exc_info.value.details["errors"]

    def test_invalid_destination_rejected(self):
        """Test that an unknown log destination fails validation."""
        with patch.dict(os.environ, {"PATTERNS_LOG_DESTINATION": "syslog"}):
            with pytest.raises(ConfigurationError):
                ConfigurationManager()

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager(str(tmp_path / "missing.json"))

        assert exc_info.value.details["config_file"].endswith("missing.json")

    def test_malformed_file(self, tmp_path):
        """Test that malformed JSON raises a configuration error."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")

        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(config_file))

    def test_non_object_file(self, tmp_path):
        """Test that a JSON list is refused."""
        config_file = tmp_path / "config.json"
        config_file.write_text("[]")

        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(config_file))
