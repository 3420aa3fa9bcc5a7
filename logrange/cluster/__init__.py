"""
Cluster membership types consumed by the host registry.
"""

from .model import (
    HostId,
    HostAddr,
    HostInfo,
    HostRegistryConfig,
)

__all__ = [
    "HostId",
    "HostAddr",
    "HostInfo",
    "HostRegistryConfig",
]
