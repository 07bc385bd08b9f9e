"""Spotify Web API client."""

import asyncio
import logging
import time
from typing import Any, Dict, Iterable, Optional, Union

import httpx

from .cache import CacheOptions, ClientCache
from .config import SpotifyConfig
from .exceptions import MissingParamError, SpotifyError, UnexpectedError, handle_error
from .managers import (
    AlbumManager,
    ArtistManager,
    BrowseManager,
    EpisodeManager,
    PlaylistManager,
    ShowManager,
    TrackManager,
    UserManager,
)
from .models import SearchResult
from .rest import API_BASE_URL, RestClient
from .transform import parse_search_result, parse_uri
from .user_client import UserClient

logger = logging.getLogger(__name__)

SEARCH_TYPES = ("track", "album", "artist", "playlist", "show", "episode")


class SpotifyClient:
    """Client for the Spotify Web API.

    Collects one manager per resource and the shared request layer and
    entity cache they use.

    Attributes:
        token: OAuth access token
        market: Default market for market-aware endpoints
        cache_options: Which entity kinds are cached
        cache: Per-kind id -> entity maps
        rest: RestClient used for every request
        tracks, albums, artists, playlists, shows, episodes, users, browse:
            Resource managers
        user: UserClient for the token's owner (/me endpoints)

    Example:
        >>> client = SpotifyClient("access-token", cache_options=CacheOptions(cache_tracks=True))
        >>> track = client.tracks.get("3n3Ppam7vgaVa1iaRUc9Lp")
        >>> results = client.search("oh wonder", types=["track", "artist"], limit=5)
        >>> client.close()
    """

    def __init__(
        self,
        token: str,
        cache_options: Optional[CacheOptions] = None,
        market: str = "US",
        base_url: str = API_BASE_URL,
        timeout: float = 30.0,
    ):
        """Initialize Spotify client.

        Args:
            token: OAuth access token
            cache_options: Entity kinds to cache (default: none)
            market: Default market (default: "US")
            base_url: Web API root URL
            timeout: Read timeout in seconds

        Raises:
            MissingParamError: If token is empty
        """
        if not token:
            raise MissingParamError("missing token")

        self.token = token
        self.market = market
        self.cache_options = cache_options or CacheOptions()
        self.cache = ClientCache()
        self.rest = RestClient(token, base_url=base_url, timeout=timeout)
        self.started_at = time.monotonic()

        self.tracks = TrackManager(self)
        self.albums = AlbumManager(self)
        self.artists = ArtistManager(self)
        self.playlists = PlaylistManager(self)
        self.shows = ShowManager(self)
        self.episodes = EpisodeManager(self)
        self.users = UserManager(self)
        self.browse = BrowseManager(self)
        self.user = UserClient(self)

        logger.info(f"Initialized Spotify client for {self.rest.base_url}")

    @classmethod
    def from_config(cls, config: SpotifyConfig) -> "SpotifyClient":
        """Build a client from a SpotifyConfig (e.g. SpotifyConfig.from_environment())."""
        return cls(
            config.token,
            cache_options=config.cache_options,
            market=config.market,
            base_url=config.base_url,
            timeout=config.timeout,
        )

    def login(self, token: str):
        """Replace the access token, e.g. after a refresh.

        Raises:
            MissingParamError: If token is empty
        """
        if not token:
            raise MissingParamError("missing token")
        self.token = token
        self.rest.set_token(token)
        self.user.profile = None
        self.started_at = time.monotonic()
        logger.info("Spotify client token replaced")

    @property
    def uptime(self) -> float:
        """Seconds since the client was created or last logged in."""
        return time.monotonic() - self.started_at

    def search(
        self,
        query: str,
        types: Optional[Union[str, Iterable[str]]] = None,
        limit: int = 20,
        offset: int = 0,
        market: Optional[str] = None,
        include_external: Optional[str] = None,
    ) -> SearchResult:
        """Search the catalog.

        Args:
            query: Search query (field filters like "artist:" are allowed)
            types: Any of track, album, artist, playlist, show, episode, as
                a list or a single string (default: all)
            limit: Items per type
            offset: Offset per type
            market: Market to search (default: client market)
            include_external: "audio" to include externally hosted audio

        Returns:
            SearchResult with one page per requested type

        Raises:
            MissingParamError: If query is empty
            ValueError: If types contains an unknown type
        """
        if not query:
            raise MissingParamError("missing query")

        if isinstance(types, str):
            types = [types]
        types = list(types) if types else list(SEARCH_TYPES)
        unknown = [t for t in types if t not in SEARCH_TYPES]
        if unknown:
            raise ValueError(
                f"Invalid search types: {', '.join(unknown)}. Must be one of: {', '.join(SEARCH_TYPES)}"
            )

        logger.debug(f"Searching {types} for '{query}'")
        try:
            data = self.rest.request(
                "GET",
                "/search",
                params={
                    "q": query,
                    "type": types,
                    "market": market or self.market,
                    "limit": limit,
                    "offset": offset,
                    "include_external": include_external,
                },
            )
        except (SpotifyError, httpx.HTTPError) as e:
            return handle_error(e, default=SearchResult())

        return parse_search_result(data)

    def request(
        self,
        path: str,
        method: str = "GET",
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """Call any endpoint and return the raw decoded JSON.

        Example:
            >>> client.request("/me/player/recently-played", params={"limit": 10})
        """
        return self.rest.request(method, path, params=params, json=json)

    def get_by_uri(self, uri: str) -> Optional[Any]:
        """Fetch the entity a Spotify URI points to.

        Example:
            >>> album = client.get_by_uri("spotify:album:0sNOF9WDwhWunNAHPD3Baj")

        Raises:
            UnexpectedError: If the URI cannot be resolved
        """
        kind, id = parse_uri(uri)

        managers = {
            "album": self.albums,
            "artist": self.artists,
            "episode": self.episodes,
            "show": self.shows,
            "track": self.tracks,
            "user": self.users,
            "playlist": self.playlists,
        }
        manager = managers.get(kind)
        if manager is None:
            raise UnexpectedError(0, f"We could not resolve your given uri: {uri!r}")

        logger.debug(f"Resolving {uri} via {type(manager).__name__}")
        return manager.get(id)

    # Async wrapper methods for async/await compatibility
    # These allow the synchronous client to be used in async contexts

    async def search_async(self, query: str, **kwargs: Any) -> SearchResult:
        """Async wrapper for search()."""
        return await asyncio.to_thread(self.search, query, **kwargs)

    async def request_async(self, path: str, **kwargs: Any) -> Any:
        """Async wrapper for request()."""
        return await asyncio.to_thread(self.request, path, **kwargs)

    async def get_by_uri_async(self, uri: str) -> Optional[Any]:
        """Async wrapper for get_by_uri()."""
        return await asyncio.to_thread(self.get_by_uri, uri)

    def close(self):
        """Close HTTP client and release resources."""
        self.rest.close()
        logger.info("Closed Spotify client")

    def __enter__(self):
        """Context manager entry.

        Example:
            >>> with SpotifyClient(token) as client:
            ...     track = client.tracks.get("3n3Ppam7vgaVa1iaRUc9Lp")
        """
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - automatically close client."""
        self.close()
