from lrukit.exceptions import ValidationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")

def validate_capacity(capacity: int):
    """Ensures capacity is a non-negative integer."""
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ValidationError("Capacity must be an integer.")

    if capacity < 0:
        raise ValidationError("Capacity cannot be negative.")

def validate_log_level(log_level: str):
    """Checks the log level is one of the standard logging level names."""
    if not isinstance(log_level, str):
        raise ValidationError("Log level must be a string.")

    if log_level.upper() not in LOG_LEVELS:
        raise ValidationError(f"Unknown log level '{log_level}'. Expected one of {', '.join(LOG_LEVELS)}.")

def validate_log_format(log_format: str):
    if log_format not in LOG_FORMATS:
        raise ValidationError(f"Unknown log format '{log_format}'. Expected 'json' or 'text'.")
