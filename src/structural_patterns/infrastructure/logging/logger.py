"""Structured logging for the package, built on structlog over stdlib logging."""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

import structlog

from structural_patterns.config.schemas import LogDestination, LoggingConfig

ROOT_LOGGER_NAME = "structural_patterns"


class DetailedFormatter(logging.Formatter):
    """Formatter that adds caller information to every record."""

    def format(self, record):
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the package using structlog.

    Args:
        config: Logging section of the application configuration.
               If None, the schema defaults are used.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        config = LoggingConfig()

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(getattr(logging, config.level.upper()))

    handlers = []

    if config.destination in (LogDestination.FILE, LogDestination.BOTH):
        log_dir = os.path.dirname(config.file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count
        )
        file_handler.setFormatter(DetailedFormatter(config.format))
        handlers.append(file_handler)

    if config.destination in (LogDestination.STDOUT, LogDestination.BOTH):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(DetailedFormatter(config.format))
        handlers.append(console_handler)

    # Replace handlers so repeated setup does not duplicate output
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        package_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = get_logger(ROOT_LOGGER_NAME)
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination.value,
        log_file=config.file_path
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to a stdlib logger of the given name."""
    if not structlog.is_configured():
        setup_logging()
    return structlog.get_logger(name)
