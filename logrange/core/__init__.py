"""
Core types shared across logrange packages.
"""

from .errors import (
    LograngeError,
    ConfigError,
    ConfigReadError,
    ConfigParseError,
)

__all__ = [
    "LograngeError",
    "ConfigError",
    "ConfigReadError",
    "ConfigParseError",
]
