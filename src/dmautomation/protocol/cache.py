"""Protocol info cache.

Fetching protocol information from the platform is slow, so lookups are
cached per name and version. The cache is an ordinary object owned by the
caller and fed by an injected source.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Protocol

from ..exceptions import ProtocolNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProtocolInfo:
    """Information about one protocol version."""

    name: str
    version: str
    data: dict[str, Any] = field(default_factory=dict, compare=False)
    """Raw protocol data as returned by the source."""


class ProtocolInfoSource(Protocol):
    """Fetches protocol information from the platform."""

    def get_protocol(self, name: str, version: str) -> ProtocolInfo | None:
        """Fetch a protocol, or None if it does not exist."""
        ...


@dataclass
class ProtocolLookup:
    """Result of a cache lookup."""

    found: bool
    """Whether the protocol exists."""

    info: ProtocolInfo | None = None
    """The protocol info if found=True."""

    reason: str | None = None
    """Why the lookup failed if found=False."""

    from_cache: bool = False
    """Whether the info was served from the cache."""


@dataclass
class CacheStats:
    """Statistics about cache usage."""

    hits: int = 0
    misses: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate hit rate as percentage."""
        total = self.hits + self.misses
        return (self.hits / total * 100) if total > 0 else 0.0


def cache_key(name: str, version: str) -> str:
    return f"{name}.{version}"


class ProtocolInfoCache:
    """Thread-safe cache of protocol information keyed by name and version.

    Only successful lookups are cached; a missing protocol is asked for again
    on the next lookup.
    """

    def __init__(self, source: ProtocolInfoSource) -> None:
        self.source = source
        self.stats = CacheStats()
        self._entries: dict[str, ProtocolInfo] = {}
        self._lock = threading.Lock()

    def get(self, name: str, version: str) -> ProtocolLookup:
        """Get a protocol, fetching and caching it on a miss.

        Args:
            name: Protocol name
            version: Protocol version

        Returns:
            ProtocolLookup with found=False if the protocol does not exist
        """
        key = cache_key(name, version)
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self.stats.hits += 1
                return ProtocolLookup(found=True, info=cached, from_cache=True)

            self.stats.misses += 1
            info = self.source.get_protocol(name, version)
            if info is None:
                logger.debug(f"Protocol {key} not found")
                return ProtocolLookup(
                    found=False, reason=f"Protocol: {name} Version: {version} doesn't exist"
                )

            self._entries[key] = info
            return ProtocolLookup(found=True, info=info)

    def require(self, name: str, version: str) -> ProtocolInfo:
        """Get a protocol or raise.

        Raises:
            ProtocolNotFoundError: If the protocol does not exist
        """
        lookup = self.get(name, version)
        if not lookup.found or lookup.info is None:
            raise ProtocolNotFoundError(name, version)
        return lookup.info

    def invalidate(self, name: str | None = None, version: str | None = None) -> int:
        """Drop cached entries.

        Args:
            name: Only drop entries of this protocol (all protocols if None)
            version: Only drop this version (requires name)

        Returns:
            Number of entries dropped
        """
        with self._lock:
            if name is None:
                dropped = len(self._entries)
                self._entries.clear()
                return dropped

            keys = [
                key
                for key, info in self._entries.items()
                if info.name == name and (version is None or info.version == version)
            ]
            for key in keys:
                del self._entries[key]
            return len(keys)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        with self._lock:
            return cache_key(*item) in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
