"""
Error types for the logrange server.

Configuration errors carry the failing file path and the operation that
failed, so the process bootstrap can report them and decide whether to stop.
"""

from typing import Optional


class LograngeError(Exception):
    """Base exception for logrange errors."""
    pass


class ConfigError(LograngeError):
    """A configuration file exists but could not be used."""

    def __init__(self, path: str, operation: str, cause: Optional[BaseException] = None):
        message = f"Could not {operation} config file {path}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)
        self.path = path
        self.operation = operation
        self.cause = cause


class ConfigReadError(ConfigError):
    """Config file exists but reading it failed."""
    def __init__(self, path: str, cause: Optional[BaseException] = None):
        super().__init__(path, "read", cause)


class ConfigParseError(ConfigError):
    """Config file content is not a valid config document."""
    def __init__(self, path: str, cause: Optional[BaseException] = None):
        super().__init__(path, "parse", cause)
