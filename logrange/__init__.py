"""
logrange server configuration

Settings model for a logrange log-storage node.

Key components:
- core: Error types and JSON decoding helpers
- transport: RPC endpoint descriptors
- cluster: Host registry collaborator contract
- server: Server Config, defaults, override file loading and merging
"""

__version__ = "0.1.0"

from .core import (
    LograngeError,
    ConfigError,
    ConfigReadError,
    ConfigParseError,
)

from .transport import TransportConfig

from .cluster import (
    HostId,
    HostAddr,
    HostInfo,
    HostRegistryConfig,
)

from .server import (
    Config,
    get_default_config,
    read_config_from_file,
    load_config,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "LograngeError",
    "ConfigError",
    "ConfigReadError",
    "ConfigParseError",
    # Transport
    "TransportConfig",
    # Cluster
    "HostId",
    "HostAddr",
    "HostInfo",
    "HostRegistryConfig",
    # Server
    "Config",
    "get_default_config",
    "read_config_from_file",
    "load_config",
]
