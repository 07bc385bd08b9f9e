"""Spotify Web API client module for catalog and library access."""

__version__ = "1.0.0"

from .auth import (
    AccessToken,
    build_authorize_url,
    get_client_credentials_token,
    get_user_token,
    refresh_user_token,
)
from .cache import CacheManager, CacheOptions, ClientCache
from .client import SpotifyClient
from .config import SpotifyConfig
from .exceptions import (
    MissingParamError,
    SpotifyAuthenticationError,
    SpotifyAuthorizationError,
    SpotifyBadRequestError,
    SpotifyError,
    SpotifyNotFoundError,
    SpotifyRateLimitError,
    UnexpectedError,
    handle_error,
)
from .logger import setup_logging
from .models import (
    Album,
    Artist,
    AudioFeatures,
    Category,
    Episode,
    Image,
    Paging,
    Playlist,
    PlaylistTrack,
    Recommendations,
    SavedAlbum,
    SavedEpisode,
    SavedShow,
    SavedTrack,
    SearchResult,
    Show,
    Track,
    User,
)
from .user_client import UserClient

__all__ = [
    # Client
    "SpotifyClient",
    "UserClient",
    "SpotifyConfig",
    "setup_logging",
    # Cache
    "CacheManager",
    "CacheOptions",
    "ClientCache",
    # Models
    "Album",
    "Artist",
    "AudioFeatures",
    "Category",
    "Episode",
    "Image",
    "Paging",
    "Playlist",
    "PlaylistTrack",
    "Recommendations",
    "SavedAlbum",
    "SavedEpisode",
    "SavedShow",
    "SavedTrack",
    "SearchResult",
    "Show",
    "Track",
    "User",
    # Authentication
    "AccessToken",
    "build_authorize_url",
    "get_client_credentials_token",
    "get_user_token",
    "refresh_user_token",
    # Exceptions
    "SpotifyError",
    "MissingParamError",
    "UnexpectedError",
    "SpotifyBadRequestError",
    "SpotifyAuthenticationError",
    "SpotifyAuthorizationError",
    "SpotifyNotFoundError",
    "SpotifyRateLimitError",
    "handle_error",
]
