"""
Tests for the lrukit logging system.
"""

import json
import logging
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from lrukit import LruCache
from lrukit.exceptions import ConfigurationError, ValidationError
from lrukit.utils.logging import (
    initialize_logging,
    shutdown_logging,
    get_logger,
    get_adapter,
    StructuredFormatter
)
from lrukit.utils.logging_config import (
    LoggingPresets,
    configure_from_environment,
    get_logging_config
)


def read_json_lines(path):
    with open(path, 'r', encoding='utf-8') as f:
        return [json.loads(line) for line in f if line.strip()]


class TestLoggingSystem:
    """Test the logging system functionality."""

    def setup_method(self):
        """Set up test environment."""
        shutdown_logging()
        self.temp_dir = tempfile.mkdtemp()
        self.log_file = Path(self.temp_dir) / "logs" / "test.log"

    def teardown_method(self):
        """Clean up test environment."""
        import shutil
        shutdown_logging()
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_basic_logging_initialization(self):
        """Test basic logging initialization."""
        log_manager = initialize_logging(
            log_level="DEBUG",
            log_format="json",
            log_file=str(self.log_file)
        )

        assert log_manager is not None
        assert log_manager.log_level == logging.DEBUG

        logger = get_logger("tests.basic")
        assert logger.name == "lrukit.tests.basic"
        logger.info("Test message", extra={"test_field": "test_value"})

        assert self.log_file.exists()
        log_data = read_json_lines(self.log_file)[-1]
        assert log_data["level"] == "INFO"
        assert log_data["logger"] == "lrukit.tests.basic"
        assert log_data["message"] == "Test message"
        assert log_data["test_field"] == "test_value"

    def test_initialize_twice_returns_same_manager(self):
        first = initialize_logging(log_level="DEBUG")
        second = initialize_logging(log_level="ERROR")
        assert first is second
        assert second.log_level == logging.DEBUG

    def test_invalid_level_is_rejected(self):
        with pytest.raises(ValidationError):
            initialize_logging(log_level="LOUD")

    def test_logger_adapter(self):
        """Test logger adapter functionality."""
        initialize_logging(log_level="DEBUG", log_file=str(self.log_file))

        adapter = get_adapter("tests.adapter", service="test_service")
        adapter.info("Adapter test message")

        user_adapter = adapter.bind(user_id="user-123")
        user_adapter.info("User message")

        first, second = read_json_lines(self.log_file)[-2:]
        assert first["service"] == "test_service"
        assert "user_id" not in first
        assert second["service"] == "test_service"
        assert second["user_id"] == "user-123"

    def test_cache_events_are_written_as_json(self):
        initialize_logging(log_level="DEBUG", log_file=str(self.log_file))

        cache = LruCache(1, name="json-cache")
        cache.put("a", 1)
        cache.put("b", 2)
        cache.reset()

        events = [entry.get("event_type") for entry in read_json_lines(self.log_file)]
        assert events == ["cache_created", "cache_eviction", "cache_reset"]

    def test_text_format(self):
        initialize_logging(log_level="INFO", log_format="text", log_file=str(self.log_file))
        get_logger("tests.text").warning("plain message")

        content = self.log_file.read_text(encoding="utf-8")
        assert "lrukit.tests.text - WARNING - plain message" in content

    def test_exception_is_structured(self):
        initialize_logging(log_level="INFO", log_file=str(self.log_file))
        logger = get_logger("tests.errors")
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            logger.exception("Operation failed")

        log_data = read_json_lines(self.log_file)[-1]
        assert log_data["level"] == "ERROR"
        assert log_data["exception"]["type"] == "RuntimeError"
        assert log_data["exception"]["message"] == "boom"

    def test_shutdown_restores_propagation(self):
        initialize_logging()
        assert logging.getLogger("lrukit").propagate is False
        shutdown_logging()
        assert logging.getLogger("lrukit").propagate is True
        assert get_logging_config() == {"status": "not_initialized"}


class TestLoggingConfig:
    """Test presets and environment configuration."""

    def setup_method(self):
        shutdown_logging()

    def teardown_method(self):
        shutdown_logging()

    def test_presets(self):
        manager = LoggingPresets.development()
        assert manager.log_level == logging.DEBUG
        shutdown_logging()

        manager = LoggingPresets.production()
        assert manager.log_level == logging.INFO
        assert manager.backup_count == 10
        shutdown_logging()

        manager = LoggingPresets.testing()
        assert manager.log_level == logging.WARNING
        assert manager.log_format == "text"

    def test_configure_from_environment(self):
        env = {
            "LRUKIT_LOG_LEVEL": "ERROR",
            "LRUKIT_LOG_FORMAT": "text",
            "LRUKIT_LOG_MAX_BYTES": "2048",
            "LRUKIT_LOG_BACKUP_COUNT": "2",
        }
        with patch.dict("os.environ", env):
            configure_from_environment()

        config = get_logging_config()
        assert config["status"] == "initialized"
        assert config["log_level"] == "ERROR"
        assert config["log_format"] == "text"
        assert config["max_bytes"] == 2048
        assert config["backup_count"] == 2
        assert config["handlers"] == ["StreamHandler"]

    def test_configure_from_environment_rejects_bad_integer(self):
        with patch.dict("os.environ", {"LRUKIT_LOG_MAX_BYTES": "ten"}):
            with pytest.raises(ConfigurationError, match="LRUKIT_LOG_MAX_BYTES"):
                configure_from_environment()


def test_structured_formatter_includes_extra_fields():
    record = logging.LogRecord("lrukit.x", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.extra_fields = {"event_type": "custom"}

    data = json.loads(StructuredFormatter().format(record))
    assert data["message"] == "hello world"
    assert data["event_type"] == "custom"
    assert data["logger"] == "lrukit.x"
