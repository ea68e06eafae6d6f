"""Application configuration schema."""
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class OutputFormat(str, Enum):
    """CLI output format enumeration."""
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Logging level")
    destination: LogDestination = Field(LogDestination.STDOUT, description="Where log records go")
    file_path: str = Field("logs/structural_patterns.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(5, description="Number of rotated log files to keep")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        description="stdlib logging format string"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """
        Validate log level.

        Args:
            v: Value to validate

        Returns:
            Upper-cased level name

        Raises:
            ValueError: If level is not a known log level
        """
        level = v.upper()
        if level not in LogLevel.__members__:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation settings."""
        if v < 1:
            raise ValueError("Log rotation settings must be at least 1")
        return v


class OutputConfig(BaseModel):
    """CLI output configuration."""

    format: OutputFormat = Field(OutputFormat.TEXT, description="Default output format")


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
