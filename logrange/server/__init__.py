"""
logrange server settings.

The effective config is built once at startup:

    cfg = load_config(config_file)

which is the same as applying read_config_from_file() onto
get_default_config().
"""

from .config import (
    Config,
    get_default_config,
    read_config_from_file,
    load_config,
)

__all__ = [
    "Config",
    "get_default_config",
    "read_config_from_file",
    "load_config",
]
