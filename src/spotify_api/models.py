"""Data models for Spotify Web API responses.

Each model is built once from a single JSON payload (see transform.py) and
never mutated afterwards. Simplified and full upstream variants share one
class; fields missing from the simplified variant are optional.

Entities with an id hash by that id, so they can be used in sets and as
dict keys. Paging, SearchResult and Recommendations hold lists and are not
hashable.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Image:
    """Cover art, avatar or category icon.

    Attributes:
        url: Source URL of the image
        height: Height in pixels (None when unknown)
        width: Width in pixels (None when unknown)
    """

    url: str
    height: Optional[int] = None
    width: Optional[int] = None


@dataclass(frozen=True)
class User:
    """Public or private user profile.

    Attributes:
        id: Spotify user id
        uri: Spotify URI (spotify:user:<id>)
        display_name: Name shown on the profile (optional)
        total_followers: Follower count (optional)
        images: Profile images
        external_urls: Known external URLs, keyed by service
        href: Web API endpoint for the full object
        country: Country code (private profile only)
        email: Email address (private profile only)
        product: Subscription level (private profile only)
    """

    id: str
    uri: str
    display_name: Optional[str] = None
    total_followers: Optional[int] = None
    images: List[Image] = field(default_factory=list)
    external_urls: Dict[str, str] = field(default_factory=dict)
    href: Optional[str] = None
    country: Optional[str] = None
    email: Optional[str] = None
    product: Optional[str] = None

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class Artist:
    """Artist metadata from /artists, search, or embedded in tracks/albums.

    Attributes:
        id: Spotify artist id
        name: Artist name
        uri: Spotify URI
        genres: Genres the artist is associated with (full object only)
        popularity: 0-100 popularity (full object only)
        total_followers: Follower count (full object only)
        images: Artist images (full object only)
        external_urls: Known external URLs
        href: Web API endpoint for the full object
    """

    id: str
    name: str
    uri: str
    genres: List[str] = field(default_factory=list)
    popularity: Optional[int] = None
    total_followers: Optional[int] = None
    images: List[Image] = field(default_factory=list)
    external_urls: Dict[str, str] = field(default_factory=dict)
    href: Optional[str] = None

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class Track:
    """Track metadata.

    album is None for tracks listed inside an album payload.
    """

    id: str
    name: str
    uri: str
    duration_ms: int
    artists: List[Artist] = field(default_factory=list)
    album: Optional["Album"] = None
    explicit: bool = False
    track_number: Optional[int] = None
    disc_number: Optional[int] = None
    popularity: Optional[int] = None
    preview_url: Optional[str] = None
    is_local: bool = False
    is_playable: Optional[bool] = None
    available_markets: List[str] = field(default_factory=list)
    external_ids: Dict[str, str] = field(default_factory=dict)
    external_urls: Dict[str, str] = field(default_factory=dict)
    href: Optional[str] = None

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class Album:
    """Album metadata.

    Attributes:
        id: Spotify album id
        name: Album name
        uri: Spotify URI
        album_type: "album", "single" or "compilation"
        total_tracks: Number of tracks on the album
        release_date: Release date string at release_date_precision
        release_date_precision: "year", "month" or "day"
        artists: Album artists
        images: Cover art in several sizes
        tracks: First page of tracks (full object only)
        genres: Album genres (full object only)
        label: Record label (full object only)
        popularity: 0-100 popularity (full object only)
    """

    id: str
    name: str
    uri: str
    album_type: Optional[str] = None
    total_tracks: Optional[int] = None
    release_date: Optional[str] = None
    release_date_precision: Optional[str] = None
    artists: List[Artist] = field(default_factory=list)
    images: List[Image] = field(default_factory=list)
    tracks: List[Track] = field(default_factory=list)
    genres: List[str] = field(default_factory=list)
    label: Optional[str] = None
    popularity: Optional[int] = None
    available_markets: List[str] = field(default_factory=list)
    external_ids: Dict[str, str] = field(default_factory=dict)
    external_urls: Dict[str, str] = field(default_factory=dict)
    href: Optional[str] = None

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class Episode:
    """Podcast episode metadata. show is None inside a show payload."""

    id: str
    name: str
    uri: str
    duration_ms: int
    description: str = ""
    explicit: bool = False
    release_date: Optional[str] = None
    release_date_precision: Optional[str] = None
    language: Optional[str] = None
    languages: List[str] = field(default_factory=list)
    audio_preview_url: Optional[str] = None
    is_playable: Optional[bool] = None
    images: List[Image] = field(default_factory=list)
    show: Optional["Show"] = None
    external_urls: Dict[str, str] = field(default_factory=dict)
    href: Optional[str] = None

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class Show:
    """Podcast show metadata.

    Attributes:
        id: Spotify show id
        name: Show name
        uri: Spotify URI
        publisher: Publisher name
        description: Plain-text description
        total_episodes: Number of episodes (optional)
        episodes: First page of episodes (full object only)
    """

    id: str
    name: str
    uri: str
    publisher: str = ""
    description: str = ""
    explicit: bool = False
    media_type: Optional[str] = None
    total_episodes: Optional[int] = None
    languages: List[str] = field(default_factory=list)
    images: List[Image] = field(default_factory=list)
    episodes: List[Episode] = field(default_factory=list)
    available_markets: List[str] = field(default_factory=list)
    external_urls: Dict[str, str] = field(default_factory=dict)
    href: Optional[str] = None

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class PlaylistTrack:
    """One entry of a playlist.

    Attributes:
        added_at: ISO timestamp the item was added (None for old playlists)
        added_by: User who added the item (optional)
        is_local: True for local files
        track: Track or Episode; None when the item is no longer available
    """

    added_at: Optional[str] = None
    added_by: Optional[User] = None
    is_local: bool = False
    track: Optional[Union[Track, Episode]] = None


@dataclass(frozen=True)
class Playlist:
    """Playlist metadata. tracks holds the first page (full object only)."""

    id: str
    name: str
    uri: str
    description: Optional[str] = None
    owner: Optional[User] = None
    collaborative: bool = False
    public: Optional[bool] = None
    snapshot_id: Optional[str] = None
    total_followers: Optional[int] = None
    total_tracks: Optional[int] = None
    tracks: List[PlaylistTrack] = field(default_factory=list)
    images: List[Image] = field(default_factory=list)
    external_urls: Dict[str, str] = field(default_factory=dict)
    href: Optional[str] = None

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class Category:
    """Browse category."""

    id: str
    name: str
    icons: List[Image] = field(default_factory=list)
    href: Optional[str] = None

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class AudioFeatures:
    """Audio features of a track (/audio-features)."""

    id: str
    uri: str
    duration_ms: int
    danceability: float
    energy: float
    key: int
    loudness: float
    mode: int
    speechiness: float
    acousticness: float
    instrumentalness: float
    liveness: float
    valence: float
    tempo: float
    time_signature: int
    analysis_url: Optional[str] = None
    track_href: Optional[str] = None

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class Paging(Generic[T]):
    """Paging envelope returned by list endpoints.

    Attributes:
        items: Parsed items of this page
        total: Total number of items available
        limit: Requested page size
        offset: Offset of this page (None for cursor-based pages)
        next: URL of the next page, if any
        previous: URL of the previous page, if any
        href: URL of this page
        cursors: Cursor dict for cursor-based pages (followed artists)
    """

    items: List[T] = field(default_factory=list)
    total: int = 0
    limit: Optional[int] = None
    offset: Optional[int] = None
    next: Optional[str] = None
    previous: Optional[str] = None
    href: Optional[str] = None
    cursors: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class SavedAlbum:
    added_at: str
    album: Album


@dataclass(frozen=True)
class SavedTrack:
    added_at: str
    track: Track


@dataclass(frozen=True)
class SavedEpisode:
    added_at: str
    episode: Episode


@dataclass(frozen=True)
class SavedShow:
    added_at: str
    show: Show


@dataclass(frozen=True)
class SearchResult:
    """Search response; a page is None when its type was not requested."""

    tracks: Optional[Paging[Track]] = None
    artists: Optional[Paging[Artist]] = None
    albums: Optional[Paging[Album]] = None
    playlists: Optional[Paging[Playlist]] = None
    shows: Optional[Paging[Show]] = None
    episodes: Optional[Paging[Episode]] = None


@dataclass(frozen=True)
class Recommendations:
    """Recommendation seeds and the tracks generated from them."""

    seeds: List[Dict[str, Any]] = field(default_factory=list)
    tracks: List[Track] = field(default_factory=list)
