"""Configuration management for the Spotify client.

Configuration is read from environment variables (no .env files).
"""
import os
from dataclasses import dataclass, field

from .cache import CacheOptions
from .rest import API_BASE_URL


@dataclass
class SpotifyConfig:
    """Settings for building a SpotifyClient.

    Attributes:
        token: OAuth access token
        market: ISO 3166-1 alpha-2 market used when a call does not name one
        base_url: Web API root URL
        timeout: Read timeout in seconds
        cache_options: Which entity kinds to cache
    """

    token: str
    market: str = "US"
    base_url: str = API_BASE_URL
    timeout: float = 30.0
    cache_options: CacheOptions = field(default_factory=CacheOptions)

    def __post_init__(self):
        """Validate configuration on initialization."""
        if not self.token:
            raise ValueError("token is required")
        if not self.base_url or not self.base_url.startswith(("http://", "https://")):
            raise ValueError("base_url must be a valid HTTP/HTTPS URL")
        if self.timeout <= 0:
            raise ValueError(f"Invalid timeout: {self.timeout}. Must be > 0")
        if len(self.market) != 2 or not self.market.isalpha():
            raise ValueError(f"Invalid market: {self.market!r}. Must be a two-letter country code")
        self.market = self.market.upper()

    @classmethod
    def from_environment(cls) -> 'SpotifyConfig':
        """Load configuration from environment variables.

        Variables:
            SPOTIFY_TOKEN: access token (required)
            SPOTIFY_MARKET: default market (default: US)
            SPOTIFY_API_URL: API root (default: https://api.spotify.com/v1)
            SPOTIFY_TIMEOUT: read timeout in seconds (default: 30)
            SPOTIFY_CACHE: comma list of kinds to cache, or "all"

        Returns:
            SpotifyConfig: Loaded configuration object

        Raises:
            EnvironmentError: If SPOTIFY_TOKEN is missing
            ValueError: If a value is invalid
        """
        token = os.getenv('SPOTIFY_TOKEN')
        if not token:
            raise EnvironmentError(
                "Required environment variable missing: SPOTIFY_TOKEN\n"
                "Example: export SPOTIFY_TOKEN='BQD...'"
            )

        cache = os.getenv('SPOTIFY_CACHE', '')

        return cls(
            token=token,
            market=os.getenv('SPOTIFY_MARKET', 'US'),
            base_url=os.getenv('SPOTIFY_API_URL', API_BASE_URL),
            timeout=float(os.getenv('SPOTIFY_TIMEOUT', '30')),
            cache_options=CacheOptions.from_names(cache.split(',')),
        )
