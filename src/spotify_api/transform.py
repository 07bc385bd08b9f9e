"""Transform Spotify Web API JSON payloads into model objects."""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from .exceptions import UnexpectedError
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
    SearchResult,
    Show,
    Track,
    User,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Entity kinds that can appear in a spotify:<kind>:<id> URI
URI_KINDS = ("album", "artist", "episode", "show", "track", "user", "playlist")


def parse_list(items: Optional[List[Any]], parser: Callable[[Dict], Optional[T]]) -> List[T]:
    """Parse a JSON array, skipping null entries.

    Spotify returns null in place of unavailable items (removed tracks in a
    playlist, unknown ids in a batch lookup).

    Examples:
        >>> parse_list([{"url": "a"}, None], parse_image)
        [Image(url='a', height=None, width=None)]
        >>> parse_list(None, parse_image)
        []
    """
    parsed = []
    for item in items or []:
        if item is None:
            continue
        value = parser(item)
        if value is not None:
            parsed.append(value)
    return parsed


def _followers(data: Dict) -> Optional[int]:
    followers = data.get("followers")
    if isinstance(followers, dict):
        return followers.get("total")
    return None


def parse_image(data: Optional[Dict]) -> Optional[Image]:
    if not data:
        return None
    return Image(url=data.get("url", ""), height=data.get("height"), width=data.get("width"))


def parse_user(data: Optional[Dict]) -> Optional[User]:
    """Parse a public or private user object."""
    if not data:
        return None
    return User(
        id=data["id"],
        uri=data.get("uri", f"spotify:user:{data['id']}"),
        display_name=data.get("display_name"),
        total_followers=_followers(data),
        images=parse_list(data.get("images"), parse_image),
        external_urls=data.get("external_urls") or {},
        href=data.get("href"),
        country=data.get("country"),
        email=data.get("email"),
        product=data.get("product"),
    )


def parse_artist(data: Optional[Dict]) -> Optional[Artist]:
    """Parse a simplified or full artist object."""
    if not data:
        return None
    return Artist(
        id=data["id"],
        name=data.get("name", ""),
        uri=data.get("uri", f"spotify:artist:{data['id']}"),
        genres=data.get("genres") or [],
        popularity=data.get("popularity"),
        total_followers=_followers(data),
        images=parse_list(data.get("images"), parse_image),
        external_urls=data.get("external_urls") or {},
        href=data.get("href"),
    )


def parse_track(data: Optional[Dict]) -> Optional[Track]:
    """Parse a simplified or full track object.

    Local files have no id; they are skipped with a warning since they
    cannot be looked up or cached.
    """
    if not data:
        return None
    if not data.get("id"):
        logger.warning(f"Skipping track without id: {data.get('name', 'Unknown')}")
        return None
    return Track(
        id=data["id"],
        name=data.get("name", ""),
        uri=data.get("uri", f"spotify:track:{data['id']}"),
        duration_ms=data.get("duration_ms", 0),
        artists=parse_list(data.get("artists"), parse_artist),
        album=parse_album(data.get("album")),
        explicit=data.get("explicit", False),
        track_number=data.get("track_number"),
        disc_number=data.get("disc_number"),
        popularity=data.get("popularity"),
        preview_url=data.get("preview_url"),
        is_local=data.get("is_local", False),
        is_playable=data.get("is_playable"),
        available_markets=data.get("available_markets") or [],
        external_ids=data.get("external_ids") or {},
        external_urls=data.get("external_urls") or {},
        href=data.get("href"),
    )


def parse_album(data: Optional[Dict]) -> Optional[Album]:
    """Parse a simplified or full album object.

    The full object embeds a paging object of simplified tracks; only its
    items are kept.
    """
    if not data:
        return None
    tracks = data.get("tracks") or {}
    return Album(
        id=data["id"],
        name=data.get("name", ""),
        uri=data.get("uri", f"spotify:album:{data['id']}"),
        album_type=data.get("album_type"),
        total_tracks=data.get("total_tracks"),
        release_date=data.get("release_date"),
        release_date_precision=data.get("release_date_precision"),
        artists=parse_list(data.get("artists"), parse_artist),
        images=parse_list(data.get("images"), parse_image),
        tracks=parse_list(tracks.get("items"), parse_track),
        genres=data.get("genres") or [],
        label=data.get("label"),
        popularity=data.get("popularity"),
        available_markets=data.get("available_markets") or [],
        external_ids=data.get("external_ids") or {},
        external_urls=data.get("external_urls") or {},
        href=data.get("href"),
    )


def parse_episode(data: Optional[Dict]) -> Optional[Episode]:
    if not data:
        return None
    return Episode(
        id=data["id"],
        name=data.get("name", ""),
        uri=data.get("uri", f"spotify:episode:{data['id']}"),
        duration_ms=data.get("duration_ms", 0),
        description=data.get("description", ""),
        explicit=data.get("explicit", False),
        release_date=data.get("release_date"),
        release_date_precision=data.get("release_date_precision"),
        language=data.get("language"),
        languages=data.get("languages") or [],
        audio_preview_url=data.get("audio_preview_url"),
        is_playable=data.get("is_playable"),
        images=parse_list(data.get("images"), parse_image),
        show=parse_show(data.get("show")),
        external_urls=data.get("external_urls") or {},
        href=data.get("href"),
    )


def parse_show(data: Optional[Dict]) -> Optional[Show]:
    if not data:
        return None
    episodes = data.get("episodes") or {}
    return Show(
        id=data["id"],
        name=data.get("name", ""),
        uri=data.get("uri", f"spotify:show:{data['id']}"),
        publisher=data.get("publisher", ""),
        description=data.get("description", ""),
        explicit=data.get("explicit", False),
        media_type=data.get("media_type"),
        total_episodes=data.get("total_episodes"),
        languages=data.get("languages") or [],
        images=parse_list(data.get("images"), parse_image),
        episodes=parse_list(episodes.get("items"), parse_episode),
        available_markets=data.get("available_markets") or [],
        external_urls=data.get("external_urls") or {},
        href=data.get("href"),
    )


def parse_playlist_track(data: Optional[Dict]) -> Optional[PlaylistTrack]:
    """Parse a playlist item; the inner object is a track or an episode."""
    if not data:
        return None
    item = data.get("track")
    if item and item.get("type") == "episode":
        parsed = parse_episode(item)
    else:
        parsed = parse_track(item)
    return PlaylistTrack(
        added_at=data.get("added_at"),
        added_by=parse_user(data.get("added_by")),
        is_local=data.get("is_local", False),
        track=parsed,
    )


def parse_playlist(data: Optional[Dict]) -> Optional[Playlist]:
    """Parse a simplified or full playlist object.

    Simplified playlists carry only {"href", "total"} under tracks.
    """
    if not data:
        return None
    tracks = data.get("tracks") or {}
    return Playlist(
        id=data["id"],
        name=data.get("name", ""),
        uri=data.get("uri", f"spotify:playlist:{data['id']}"),
        description=data.get("description"),
        owner=parse_user(data.get("owner")),
        collaborative=data.get("collaborative", False),
        public=data.get("public"),
        snapshot_id=data.get("snapshot_id"),
        total_followers=_followers(data),
        total_tracks=tracks.get("total"),
        tracks=parse_list(tracks.get("items"), parse_playlist_track),
        images=parse_list(data.get("images"), parse_image),
        external_urls=data.get("external_urls") or {},
        href=data.get("href"),
    )


def parse_category(data: Optional[Dict]) -> Optional[Category]:
    if not data:
        return None
    return Category(
        id=data["id"],
        name=data.get("name", ""),
        icons=parse_list(data.get("icons"), parse_image),
        href=data.get("href"),
    )


def parse_audio_features(data: Optional[Dict]) -> Optional[AudioFeatures]:
    if not data:
        return None
    try:
        return AudioFeatures(
            id=data["id"],
            uri=data.get("uri", f"spotify:track:{data['id']}"),
            duration_ms=data.get("duration_ms", 0),
            danceability=data["danceability"],
            energy=data["energy"],
            key=data["key"],
            loudness=data["loudness"],
            mode=data["mode"],
            speechiness=data["speechiness"],
            acousticness=data["acousticness"],
            instrumentalness=data["instrumentalness"],
            liveness=data["liveness"],
            valence=data["valence"],
            tempo=data["tempo"],
            time_signature=data["time_signature"],
            analysis_url=data.get("analysis_url"),
            track_href=data.get("track_href"),
        )
    except KeyError as e:
        logger.warning(f"Skipping audio features with missing field: {e}")
        return None


def parse_paging(data: Optional[Dict], parser: Callable[[Dict], Optional[T]]) -> Paging[T]:
    """Parse a paging envelope, applying parser to each item.

    Examples:
        >>> page = parse_paging({"items": [{"url": "a"}], "total": 1}, parse_image)
        >>> page.total, len(page.items)
        (1, 1)
    """
    if not data:
        return Paging()
    return Paging(
        items=parse_list(data.get("items"), parser),
        total=data.get("total", 0),
        limit=data.get("limit"),
        offset=data.get("offset"),
        next=data.get("next"),
        previous=data.get("previous"),
        href=data.get("href"),
        cursors=data.get("cursors"),
    )


def parse_saved(data: Optional[Dict], key: str, parser: Callable[[Dict], Optional[T]], factory: Callable[..., Any]):
    """Parse a saved-item wrapper ({"added_at", key: {...}}) from /me/<kind>."""
    if not data:
        return None
    entity = parser(data.get(key))
    if entity is None:
        return None
    return factory(**{"added_at": data.get("added_at", ""), key: entity})


SEARCH_PARSERS = {
    "tracks": parse_track,
    "artists": parse_artist,
    "albums": parse_album,
    "playlists": parse_playlist,
    "shows": parse_show,
    "episodes": parse_episode,
}


def parse_search_result(data: Optional[Dict]) -> SearchResult:
    """Parse /search; only the requested types are present in the payload."""
    data = data or {}
    pages = {
        key: parse_paging(data[key], parser)
        for key, parser in SEARCH_PARSERS.items()
        if data.get(key) is not None
    }
    return SearchResult(**pages)


def parse_recommendations(data: Optional[Dict]) -> Recommendations:
    data = data or {}
    return Recommendations(
        seeds=data.get("seeds") or [],
        tracks=parse_list(data.get("tracks"), parse_track),
    )


def parse_uri(uri: str) -> Tuple[str, str]:
    """Split a Spotify URI into (kind, id).

    Examples:
        >>> parse_uri("spotify:album:0sNOF9WDwhWunNAHPD3Baj")
        ('album', '0sNOF9WDwhWunNAHPD3Baj')
        >>> parse_uri("spotify:user:alice:playlist:37i9dQZF1DX")
        ('playlist', '37i9dQZF1DX')

    Raises:
        UnexpectedError: If the URI is not a spotify:<kind>:<id> URI
    """
    parts = (uri or "").split(":")

    # Legacy user-scoped playlist URIs
    if len(parts) == 5 and parts[0] == "spotify" and parts[1] == "user" and parts[3] == "playlist":
        return "playlist", parts[4]

    if len(parts) != 3 or parts[0] != "spotify" or parts[1] not in URI_KINDS or not parts[2]:
        raise UnexpectedError(0, f"We could not resolve your given uri: {uri!r}")

    return parts[1], parts[2]
