"""Protocol package - cached access to protocol information."""

from .cache import CacheStats, ProtocolInfo, ProtocolInfoCache, ProtocolInfoSource, ProtocolLookup

__all__ = [
    "ProtocolInfo",
    "ProtocolInfoSource",
    "ProtocolInfoCache",
    "ProtocolLookup",
    "CacheStats",
]
