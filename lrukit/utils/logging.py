"""
Structured logging system for lrukit.

Library modules log through ``logging.getLogger(__name__)`` and never touch
handlers themselves. Applications that want lrukit's records formatted call
``initialize_logging`` (or one of the presets in ``logging_config``), which
attaches a console handler and an optional rotating file handler to the
``lrukit`` logger.
"""
import json
import logging
import logging.handlers
import sys
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from typing_extensions import Self

from .validation import validate_log_format, validate_log_level

ROOT_LOGGER_NAME = "lrukit"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset([
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
    'thread', 'threadName', 'processName', 'process', 'exc_info', 'exc_text',
    'stack_info', 'taskName', 'message', 'asctime', 'extra_fields',
])


class StructuredFormatter(logging.Formatter):
    """
    Structured JSON formatter for logs.

    Each record becomes one JSON object with timestamp, level, logger,
    message and source location, plus any structured fields passed through
    ``extra={'extra_fields': {...}}`` or plain ``extra`` keys.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as structured JSON.

        Args:
            record: Log record to format

        Returns:
            JSON formatted log string
        """
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()

        log_entry: Dict[str, Any] = {
            "timestamp": timestamp,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info)
            }

        if hasattr(record, 'extra_fields'):
            log_entry.update(record.extra_fields)

        for key, value in record.__dict__.items():
            if key.startswith('_') or key in _RESERVED_ATTRS:
                continue
            if isinstance(value, (str, int, float, bool, list, dict, type(None))):
                log_entry[key] = value

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class LrukitLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that attaches a fixed set of structured fields to every record.
    """

    def __init__(self, logger, extra_fields=None):
        super().__init__(logger, {})
        self.extra_fields = extra_fields or {}

    def process(self, msg, kwargs):
        if self.extra_fields:
            extra = kwargs.setdefault('extra', {})
            extra['extra_fields'] = {**self.extra_fields, **extra.get('extra_fields', {})}
        return msg, kwargs

    def bind(self, **kwargs) -> Self:
        """Create a new adapter with additional context."""
        return type(self)(self.logger, {**self.extra_fields, **kwargs})


class LogManager:
    """
    Thread-safe manager for the handlers attached to the ``lrukit`` logger.
    """

    def __init__(self,
                 log_level: str = "INFO",
                 log_format: str = "json",
                 log_file: Optional[str] = None,
                 max_bytes: int = 10 * 1024 * 1024,  # 10MB
                 backup_count: int = 5):
        """
        Initialize the log manager.

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_format: Log format ('json' or 'text')
            log_file: Path to log file (optional)
            max_bytes: Maximum size of log file before rotation
            backup_count: Number of backup files to keep

        Raises:
            ValidationError: If the level or format is not recognised
        """
        validate_log_level(log_level)
        validate_log_format(log_format)

        self.log_level = getattr(logging, log_level.upper())
        self.log_format = log_format
        self.log_file = log_file
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self._lock = threading.RLock()
        self._handlers: List[logging.Handler] = []
        self.logger = logging.getLogger(ROOT_LOGGER_NAME)

        self._configure()

    def _build_formatter(self) -> logging.Formatter:
        if self.log_format == "json":
            return StructuredFormatter()
        return logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    def _configure(self):
        with self._lock:
            formatter = self._build_formatter()

            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(self.log_level)
            console_handler.setFormatter(formatter)
            self._handlers.append(console_handler)

            if self.log_file:
                log_path = Path(self.log_file)
                log_path.parent.mkdir(parents=True, exist_ok=True)

                file_handler = logging.handlers.RotatingFileHandler(
                    self.log_file,
                    maxBytes=self.max_bytes,
                    backupCount=self.backup_count,
                    encoding="utf-8"
                )
                file_handler.setLevel(self.log_level)
                file_handler.setFormatter(formatter)
                self._handlers.append(file_handler)

            for handler in self._handlers:
                self.logger.addHandler(handler)
            self.logger.setLevel(self.log_level)
            self.logger.propagate = False

    def get_logger(self, name: str) -> logging.Logger:
        """
        Get a logger under the ``lrukit`` namespace.

        Args:
            name: Logger name; prefixed with ``lrukit.`` if it is not already

        Returns:
            Logger instance
        """
        if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
            name = f"{ROOT_LOGGER_NAME}.{name}"
        return logging.getLogger(name)

    def get_adapter(self, name: str, **extra_fields) -> LrukitLoggerAdapter:
        return LrukitLoggerAdapter(self.get_logger(name), extra_fields)

    def describe(self) -> Dict[str, Any]:
        return {
            "status": "initialized",
            "log_level": logging.getLevelName(self.log_level),
            "log_format": self.log_format,
            "log_file": self.log_file,
            "max_bytes": self.max_bytes,
            "backup_count": self.backup_count,
            "handlers": [type(h).__name__ for h in self._handlers],
        }

    def close(self):
        """Detach and close every handler this manager installed."""
        with self._lock:
            for handler in self._handlers:
                self.logger.removeHandler(handler)
                handler.close()
            self._handlers = []
            self.logger.setLevel(logging.NOTSET)
            self.logger.propagate = True


_log_manager: Optional[LogManager] = None
_log_manager_lock = threading.RLock()


def initialize_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    log_file: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5
) -> LogManager:
    """
    Initialize the global logging system.

    Calling this again after a successful initialization returns the
    existing manager unchanged; call ``shutdown_logging`` first to
    reconfigure.

    Args:
        log_level: Logging level
        log_format: Log format ('json' or 'text')
        log_file: Path to log file
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup files to keep

    Returns:
        Configured log manager instance
    """
    global _log_manager

    with _log_manager_lock:
        if _log_manager is None:
            _log_manager = LogManager(
                log_level=log_level,
                log_format=log_format,
                log_file=log_file,
                max_bytes=max_bytes,
                backup_count=backup_count
            )

    return _log_manager


def shutdown_logging() -> None:
    """Remove the handlers installed by ``initialize_logging``."""
    global _log_manager

    with _log_manager_lock:
        if _log_manager is not None:
            _log_manager.close()
            _log_manager = None


def get_log_manager() -> Optional[LogManager]:
    return _log_manager


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name, initializing logging if needed.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    with _log_manager_lock:
        if _log_manager is None:
            initialize_logging()
        return _log_manager.get_logger(name)


def get_adapter(name: str, **extra_fields) -> LrukitLoggerAdapter:
    """
    Get a logger adapter carrying extra structured fields.

    Args:
        name: Logger name
        **extra_fields: Additional fields to include in all log messages

    Returns:
        Logger adapter instance
    """
    with _log_manager_lock:
        if _log_manager is None:
            initialize_logging()
        return _log_manager.get_adapter(name, **extra_fields)
