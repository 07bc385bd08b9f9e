"""In-memory id-to-object cache for Spotify entities.

This module provides CacheManager for keeping the most recently fetched
object for each entity id so repeated lookups can skip the HTTP call.
Features:
    - One map per entity kind (tracks, albums, ...)
    - Entries replaced wholesale on every write
    - Per-kind opt-in through CacheOptions

There is no expiry and no size bound; entries live until deleted or cleared.
"""

import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)

CACHE_KINDS = ("tracks", "albums", "artists", "playlists", "shows", "episodes", "users")


class CacheManager:
    """Unbounded map of entity id to the last object observed for that id.

    Attributes:
        key: Attribute (or dict key) read from a value to get its cache key
        cache: Dictionary of ids to cached objects
    """

    def __init__(self, key: str = "id"):
        """Initialize cache manager.

        Args:
            key: Name of the attribute holding the id (default: "id")
        """
        self.key = key
        self.cache: Dict[str, Any] = {}

    def _key_of(self, value: Any) -> str:
        if isinstance(value, dict):
            return value[self.key]
        return getattr(value, self.key)

    def get(self, key: str) -> Optional[Any]:
        """Retrieve the cached object for key, or None."""
        return self.cache.get(key)

    def set(self, value: Any, key: Optional[str] = None) -> Any:
        """Store value, replacing any previous entry for the same id.

        Args:
            value: Object to cache
            key: Optional explicit key (read from value when omitted)

        Returns:
            The stored value
        """
        self.cache[key if key is not None else self._key_of(value)] = value
        return value

    def set_many(self, values: Iterable[Any]) -> List[Any]:
        return [self.set(value) for value in values]

    def delete(self, key: str) -> bool:
        """Remove key; returns True if an entry was present."""
        return self.cache.pop(key, None) is not None

    def keys(self) -> List[str]:
        return list(self.cache.keys())

    def clear(self):
        """Clear all cache entries."""
        self.cache.clear()

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics for monitoring."""
        return {"key": self.key, "cached_items": len(self.cache)}

    def __contains__(self, key: object) -> bool:
        return key in self.cache

    def __len__(self) -> int:
        return len(self.cache)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self.cache.values()))


@dataclass
class CacheOptions:
    """Which entity kinds the client caches. All off by default."""

    cache_tracks: bool = False
    cache_albums: bool = False
    cache_artists: bool = False
    cache_playlists: bool = False
    cache_shows: bool = False
    cache_episodes: bool = False
    cache_users: bool = False

    @classmethod
    def all(cls) -> "CacheOptions":
        return cls(**{f.name: True for f in fields(cls)})

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "CacheOptions":
        """Build options from kind names, e.g. ["tracks", "albums"] or ["all"].

        Raises:
            ValueError: If a name is not a known entity kind
        """
        names = [name.strip().lower() for name in names if name and name.strip()]
        if "all" in names:
            return cls.all()

        unknown = [name for name in names if name not in CACHE_KINDS]
        if unknown:
            raise ValueError(
                f"Unknown cache kinds: {', '.join(unknown)}. "
                f"Must be one of: {', '.join(CACHE_KINDS)}, all"
            )
        return cls(**{f"cache_{name}": True for name in names})

    def enabled(self, kind: str) -> bool:
        """Whether caching is on for kind ("tracks", "albums", ...)."""
        return bool(getattr(self, f"cache_{kind}", False))


class ClientCache:
    """One CacheManager per entity kind."""

    def __init__(self):
        self.tracks = CacheManager()
        self.albums = CacheManager()
        self.artists = CacheManager()
        self.playlists = CacheManager()
        self.shows = CacheManager()
        self.episodes = CacheManager()
        self.users = CacheManager()

    def for_kind(self, kind: str) -> CacheManager:
        if kind not in CACHE_KINDS:
            raise KeyError(kind)
        return getattr(self, kind)

    def clear(self):
        for kind in CACHE_KINDS:
            getattr(self, kind).clear()
        logger.debug("Cleared all entity caches")

    def stats(self) -> Dict[str, int]:
        return {kind: len(getattr(self, kind)) for kind in CACHE_KINDS}
