"""
Cluster model types shared with the host registry.

The host registry registers this node in the cluster's shared storage. It
reads its settings through the HostRegistryConfig interface, which the server
Config implements.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
from typing import NewType


# Unique identifier of a host in the cluster. 0 means "assign automatically".
HostId = NewType("HostId", int)

# Address the host's cluster-internal RPC listens on, e.g. "10.0.0.1:9967".
HostAddr = NewType("HostAddr", str)


@dataclass(frozen=True)
class HostInfo:
    """Describes how other hosts reach this one."""
    rpc_addr: HostAddr


class HostRegistryConfig(ABC):
    """Settings the host registry needs to register the local host."""

    @abstractmethod
    def host_id(self) -> HostId:
        """Configured host identifier, 0 to have one assigned."""

    @abstractmethod
    def localhost(self) -> HostInfo:
        """Descriptor of the local host as advertised to the cluster."""

    @abstractmethod
    def lease_ttl(self) -> timedelta:
        """Lease timeout for the host's registration record."""

    @abstractmethod
    def register_timeout(self) -> timedelta:
        """How long to retry registration. Zero means no timeout."""
