"""Configuration package with clean public API."""

from .schemas import (
    AppConfig,
    LogDestination,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    OutputFormat,
)
from .manager import DEFAULT_CONFIG, ConfigurationManager

__all__ = [
    'AppConfig',
    'LoggingConfig',
    'OutputConfig',
    'LogLevel',
    'LogDestination',
    'OutputFormat',
    'DEFAULT_CONFIG',
    'ConfigurationManager',
]
