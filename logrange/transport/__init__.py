"""
RPC transport settings consumed by the server's public and private APIs.
"""

from .config import TransportConfig

__all__ = ["TransportConfig"]
