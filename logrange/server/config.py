"""Server configuration: defaults, override file loading and merging.

The effective configuration of a logrange server is built at startup from
the hardcoded defaults (get_default_config) and an optional JSON override
file (read_config_from_file). Overrides are applied field by field: a value
in the override file replaces the default only when it is set, i.e. it is
not the zero value of its type.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, Optional

from ..cluster.model import HostAddr, HostId, HostInfo, HostRegistryConfig
from ..core.decode import get_int, get_object, get_str, unknown_keys
from ..core.errors import ConfigParseError, ConfigReadError
from ..transport.config import TransportConfig

logger = logging.getLogger("logrange.server.config")

DEFAULT_JOURNALS_DIR = "/opt/logrange/db/"
DEFAULT_PUBLIC_API_LISTEN_ADDR = "127.0.0.1:9966"
DEFAULT_PRIVATE_API_LISTEN_ADDR = "127.0.0.1:9967"
DEFAULT_HOST_LEASE_TTL_SEC = 5

# largest whole-day span a timedelta holds, in seconds
MAX_DURATION_SEC = timedelta.max.days * 24 * 60 * 60


@dataclass
class Config(HostRegistryConfig):
    """logrange server settings."""
    # local file-system path where journals data is stored
    journals_dir: str = ""
    # unique host identifier, 0 means it is assigned automatically
    host_host_id: HostId = HostId(0)
    # lease timeout for registering the host in the storage
    host_lease_ttl_sec: int = 0
    # how long to try registering the host, 0 means no timeout
    host_register_timeout_sec: int = 0
    public_api_rpc: TransportConfig = field(default_factory=TransportConfig)
    private_api_rpc: TransportConfig = field(default_factory=TransportConfig)

    # ------------------------------------------------------------------
    # HostRegistryConfig
    # ------------------------------------------------------------------
    def host_id(self) -> HostId:
        """Configured host identifier, 0 to have one assigned."""
        return self.host_host_id

    def localhost(self) -> HostInfo:
        """Local host descriptor, advertised with the private API address."""
        # The private API is the cluster-internal one
        return HostInfo(rpc_addr=HostAddr(self.private_api_rpc.listen_addr))

    def lease_ttl(self) -> timedelta:
        """Host registration lease timeout."""
        return timedelta(seconds=self.host_lease_ttl_sec)

    def register_timeout(self) -> timedelta:
        """How long to retry host registration, zero for no timeout."""
        return timedelta(seconds=self.host_register_timeout_sec)

    # ------------------------------------------------------------------
    # Merging
    # ------------------------------------------------------------------
    def apply(self, other: Optional["Config"]) -> None:
        """
        Override this config's fields with the set fields of another one.

        Strings replace when non-empty, integers when positive. A transport
        descriptor replaces the whole descriptor when any of its sub-fields
        is set; descriptors are never merged sub-field by sub-field.

        Args:
            other: The overriding config, or None to leave this one as is
        """
        if other is None:
            return
        if len(other.journals_dir) > 0:
            self.journals_dir = other.journals_dir
        if other.host_host_id > 0:
            self.host_host_id = other.host_host_id
        if not other.public_api_rpc.is_empty():
            self.public_api_rpc = other.public_api_rpc.copy()
        if not other.private_api_rpc.is_empty():
            self.private_api_rpc = other.private_api_rpc.copy()
        if other.host_lease_ttl_sec > 0:
            self.host_lease_ttl_sec = other.host_lease_ttl_sec
        if other.host_register_timeout_sec > 0:
            self.host_register_timeout_sec = other.host_register_timeout_sec

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "JournalsDir": self.journals_dir,
            "HostHostId": self.host_host_id,
            "HostLeaseTTLSec": self.host_lease_ttl_sec,
            "HostRegisterTimeoutSec": self.host_register_timeout_sec,
            "PublicApiRpc": self.public_api_rpc.to_dict(),
            "PrivateApiRpc": self.private_api_rpc.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """
        Build a config from its JSON form.

        Only keys present in data are set, everything else keeps its zero
        value. Keys are matched case-insensitively and unknown keys are
        ignored. Durations must fit a timedelta.

        Raises:
            ValueError: if a known key holds a value of the wrong type or out
                of range.
        """
        public_api_rpc = get_object(data, "PublicApiRpc")
        private_api_rpc = get_object(data, "PrivateApiRpc")
        return cls(
            journals_dir=get_str(data, "JournalsDir"),
            host_host_id=HostId(get_int(data, "HostHostId", unsigned=True)),
            host_lease_ttl_sec=get_int(data, "HostLeaseTTLSec", limit=MAX_DURATION_SEC),
            host_register_timeout_sec=get_int(
                data, "HostRegisterTimeoutSec", limit=MAX_DURATION_SEC
            ),
            public_api_rpc=(
                TransportConfig.from_dict(public_api_rpc)
                if public_api_rpc is not None else TransportConfig()
            ),
            private_api_rpc=(
                TransportConfig.from_dict(private_api_rpc)
                if private_api_rpc is not None else TransportConfig()
            ),
        )

    @classmethod
    def ignored_keys(cls, data: Dict[str, Any]) -> list:
        """List the keys of a JSON document that from_dict does not use."""
        ignored = unknown_keys(data, cls().to_dict())
        for name in ("PublicApiRpc", "PrivateApiRpc"):
            nested = get_object(data, name)
            if nested is not None:
                ignored.extend(f"{name}.{k}" for k in TransportConfig.ignored_keys(nested))
        return ignored

    def __str__(self) -> str:
        return "".join([
            "\n\tJournalsDir=", self.journals_dir,
            "\n\tHostHostId=", str(self.host_host_id),
            "\n\tHostLeaseTTLSec=", str(self.host_lease_ttl_sec),
            "\n\tHostRegisterTimeoutSec=", str(self.host_register_timeout_sec),
            "\n\tPublicApiRpc=", str(self.public_api_rpc),
            "\n\tPrivateApiRpc=", str(self.private_api_rpc),
        ])


def get_default_config() -> Config:
    """Return a new config holding the built-in defaults."""
    return Config(
        journals_dir=DEFAULT_JOURNALS_DIR,
        host_lease_ttl_sec=DEFAULT_HOST_LEASE_TTL_SEC,
        public_api_rpc=TransportConfig(listen_addr=DEFAULT_PUBLIC_API_LISTEN_ADDR),
        private_api_rpc=TransportConfig(listen_addr=DEFAULT_PRIVATE_API_LISTEN_ADDR),
    )


def read_config_from_file(
    filename: str,
    log: Optional[logging.Logger] = None,
) -> Optional[Config]:
    """
    Read an override config from a JSON file.

    Args:
        filename: Path to the file, may be empty
        log: Logger for diagnostics, the module logger if not given

    Returns:
        The config read from the file, holding only the fields the file sets,
        or None if filename is empty or the file does not exist.

    Raises:
        ConfigReadError: if the file exists but cannot be read.
        ConfigParseError: if the file content is not a valid config document.
    """
    log = log or logger
    if filename == "":
        return None

    try:
        os.stat(filename)
    except FileNotFoundError:
        log.warning(
            "There is no file %s for reading logrange config, will use default configuration.",
            filename,
        )
        return None
    except OSError as e:
        # exists but is unreachable, e.g. no search permission on a parent
        log.critical("Could not access configuration file %s: %s", filename, e)
        raise ConfigReadError(filename, e) from e

    try:
        with open(filename, "rb") as f:
            cfg_data = f.read()
    except OSError as e:
        log.critical("Could not read configuration file %s: %s", filename, e)
        raise ConfigReadError(filename, e) from e

    try:
        data = json.loads(cfg_data)
        if not isinstance(data, dict):
            raise ValueError("config document must be a JSON object")
        cfg = Config.from_dict(data)
    except ValueError as e:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors too
        log.critical("Could not unmarshal data from %s, err=%s", filename, e)
        raise ConfigParseError(filename, e) from e

    ignored = Config.ignored_keys(data)
    if ignored:
        log.debug("Ignoring unknown keys in %s: %s", filename, ", ".join(ignored))

    log.info("Configuration read from %s", filename)
    return cfg


def load_config(filename: str = "", log: Optional[logging.Logger] = None) -> Config:
    """
    Build the effective server config.

    Starts from the defaults and applies the override file, if any.
    Errors from read_config_from_file propagate; the caller decides whether
    they stop the process.
    """
    log = log or logger
    cfg = get_default_config()
    cfg.apply(read_config_from_file(filename, log))
    log.info("Effective configuration: %s", cfg)
    return cfg
