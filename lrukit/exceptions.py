class LrukitError(Exception):
    """Base class for all lrukit exceptions."""
    pass

class ConfigurationError(LrukitError):
    """Raised when there is an error in the configuration."""
    def __init__(self, message: str, original_exception: Exception = None):
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original: {str(self.original_exception)})"
        return self.message

class ValidationError(LrukitError, ValueError):
    """Raised when input validation fails."""
    pass

class CacheStoreError(LrukitError):
    """Base class for cache store related errors."""
    pass

class CacheOperationError(CacheStoreError):
    """Raised when an internal cache structure is used inconsistently."""
    pass

class StaleHandleError(CacheOperationError):
    """Raised when a handle no longer refers to a live node."""
    def __init__(self, handle):
        super().__init__(f"Handle {handle!r} does not refer to a live entry")
        self.handle = handle
