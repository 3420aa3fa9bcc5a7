"""
Transport endpoint configuration.

A TransportConfig describes how one RPC interface of the server is reached:
the address it listens on and its TLS settings.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict

from ..core.decode import get_bool, get_str, unknown_keys


@dataclass
class TransportConfig:
    """Endpoint descriptor for an RPC transport."""
    listen_addr: str = ""
    tls_enabled: bool = False
    tls_2way: bool = False
    tls_skip_verify: bool = False
    tls_ca_file: str = ""
    tls_key_file: str = ""
    tls_cert_file: str = ""

    def is_empty(self) -> bool:
        """True if no sub-field is set."""
        return self == TransportConfig()

    def copy(self) -> "TransportConfig":
        return replace(self)

    def to_dict(self) -> dict:
        return {
            "ListenAddr": self.listen_addr,
            "TlsEnabled": self.tls_enabled,
            "Tls2Way": self.tls_2way,
            "TlsSkipVerify": self.tls_skip_verify,
            "TlsCAFile": self.tls_ca_file,
            "TlsKeyFile": self.tls_key_file,
            "TlsCertFile": self.tls_cert_file,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TransportConfig":
        """
        Build a descriptor from its JSON form.

        Absent keys keep their zero value.

        Raises:
            ValueError: if a known key holds a value of the wrong type.
        """
        return cls(
            listen_addr=get_str(data, "ListenAddr"),
            tls_enabled=get_bool(data, "TlsEnabled"),
            tls_2way=get_bool(data, "Tls2Way"),
            tls_skip_verify=get_bool(data, "TlsSkipVerify"),
            tls_ca_file=get_str(data, "TlsCAFile"),
            tls_key_file=get_str(data, "TlsKeyFile"),
            tls_cert_file=get_str(data, "TlsCertFile"),
        )

    @classmethod
    def ignored_keys(cls, data: Dict[str, Any]) -> list:
        return unknown_keys(data, cls().to_dict())

    def __str__(self) -> str:
        parts = [f"{k}={v}" for k, v in self.to_dict().items() if v or k == "ListenAddr"]
        return "{" + ", ".join(parts) + "}"
