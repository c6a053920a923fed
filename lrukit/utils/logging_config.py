"""
Logging configuration utilities for lrukit.

This module provides pre-configured logging setups for different environments
and a loader that reads the configuration from environment variables.
"""
import os
from typing import Any, Dict, Optional

from lrukit.exceptions import ConfigurationError

from .logging import LogManager, get_log_manager, initialize_logging


class LoggingPresets:
    """Pre-configured logging setups for different environments."""

    @staticmethod
    def development(log_file: Optional[str] = None) -> LogManager:
        """
        Development environment logging: DEBUG, JSON, small rotating file.

        Args:
            log_file: Optional log file path

        Returns:
            Configured log manager
        """
        return initialize_logging(
            log_level="DEBUG",
            log_format="json",
            log_file=log_file,
            max_bytes=5 * 1024 * 1024,  # 5MB
            backup_count=3
        )

    @staticmethod
    def production(log_file: Optional[str] = None) -> LogManager:
        """
        Production environment logging: INFO, JSON, larger rotating file.

        Args:
            log_file: Optional log file path

        Returns:
            Configured log manager
        """
        return initialize_logging(
            log_level="INFO",
            log_format="json",
            log_file=log_file,
            max_bytes=50 * 1024 * 1024,  # 50MB
            backup_count=10
        )

    @staticmethod
    def testing(log_file: Optional[str] = None) -> LogManager:
        return initialize_logging(
            log_level="WARNING",
            log_format="text",
            log_file=log_file,
            max_bytes=1 * 1024 * 1024,  # 1MB
            backup_count=1
        )


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}", e) from e


def configure_from_environment() -> LogManager:
    """
    Configure logging based on environment variables.

    Environment variables:
    - LRUKIT_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LRUKIT_LOG_FORMAT: Log format (json, text)
    - LRUKIT_LOG_FILE: Log file path
    - LRUKIT_LOG_MAX_BYTES: Max file size in bytes
    - LRUKIT_LOG_BACKUP_COUNT: Number of backup files

    Returns:
        Configured log manager

    Raises:
        ConfigurationError: If a numeric variable is not an integer
        ValidationError: If the level or format is not recognised
    """
    log_level = os.getenv("LRUKIT_LOG_LEVEL", "INFO")
    log_format = os.getenv("LRUKIT_LOG_FORMAT", "json")
    log_file = os.getenv("LRUKIT_LOG_FILE")
    max_bytes = _int_from_env("LRUKIT_LOG_MAX_BYTES", 10 * 1024 * 1024)
    backup_count = _int_from_env("LRUKIT_LOG_BACKUP_COUNT", 5)

    return initialize_logging(
        log_level=log_level,
        log_format=log_format,
        log_file=log_file,
        max_bytes=max_bytes,
        backup_count=backup_count
    )


def get_logging_config() -> Dict[str, Any]:
    """
    Get current logging configuration.

    Returns:
        Dictionary with current logging configuration
    """
    manager = get_log_manager()
    if manager is None:
        return {"status": "not_initialized"}
    return manager.describe()
