"""
Pytest fixtures for Spotify client unit tests.

All tests run against a mocked httpx.Client; no request leaves the process.
"""

import json
from typing import Any, Dict, Optional
from unittest.mock import Mock

import httpx
import pytest

from spotify_api.cache import CacheOptions
from spotify_api.client import SpotifyClient


def _make_response(
    json_data: Any = None,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
    text: Optional[str] = None,
) -> Mock:
    response = Mock(spec=httpx.Response)
    response.status_code = status_code
    response.headers = headers or {}
    if json_data is None:
        response.content = (text or "").encode()
        response.text = text or ""
        response.json.side_effect = ValueError("Expecting value")
    else:
        body = json.dumps(json_data)
        response.content = body.encode()
        response.text = body
        response.json.return_value = json_data
    return response


@pytest.fixture
def make_response():
    """Factory for mocked httpx.Response objects."""
    return _make_response


@pytest.fixture
def client():
    """SpotifyClient whose HTTP layer is a Mock(spec=httpx.Client)."""
    spotify = SpotifyClient("test-token")
    spotify.rest.client.close()
    spotify.rest.client = Mock(spec=httpx.Client)
    yield spotify


@pytest.fixture
def caching_client():
    """SpotifyClient with every entity cache enabled and a mocked HTTP layer."""
    spotify = SpotifyClient("test-token", cache_options=CacheOptions.all())
    spotify.rest.client.close()
    spotify.rest.client = Mock(spec=httpx.Client)
    yield spotify


@pytest.fixture
def http(client):
    """The mocked httpx.Client behind the client fixture."""
    return client.rest.client


def sent(http_mock: Mock, index: int = -1) -> Dict[str, Any]:
    """Unpack a recorded http.request call into method/url/params/json."""
    call = http_mock.request.call_args_list[index]
    return {
        "method": call.args[0],
        "url": call.args[1],
        "params": call.kwargs.get("params"),
        "json": call.kwargs.get("json"),
        "headers": call.kwargs.get("headers"),
    }


@pytest.fixture
def last_request():
    """Helper returning the method/url/params/json of a recorded request."""
    return sent


@pytest.fixture
def artist_json() -> Dict[str, Any]:
    return {
        "id": "4Z8W4fKeB5YxbusRsdQVPb",
        "name": "Radiohead",
        "uri": "spotify:artist:4Z8W4fKeB5YxbusRsdQVPb",
        "type": "artist",
        "genres": ["alternative rock", "art rock"],
        "popularity": 79,
        "followers": {"href": None, "total": 8000000},
        "images": [{"url": "https://i.scdn.co/image/artist", "height": 640, "width": 640}],
        "external_urls": {"spotify": "https://open.spotify.com/artist/4Z8W4fKeB5YxbusRsdQVPb"},
        "href": "https://api.spotify.com/v1/artists/4Z8W4fKeB5YxbusRsdQVPb",
    }


@pytest.fixture
def track_json(artist_json) -> Dict[str, Any]:
    return {
        "id": "6LgJvl0Xdtc73RJ1mmpotq",
        "name": "Paranoid Android",
        "uri": "spotify:track:6LgJvl0Xdtc73RJ1mmpotq",
        "type": "track",
        "duration_ms": 387000,
        "explicit": False,
        "track_number": 2,
        "disc_number": 1,
        "popularity": 70,
        "preview_url": None,
        "is_local": False,
        "artists": [{"id": artist_json["id"], "name": "Radiohead", "uri": artist_json["uri"]}],
        "album": {
            "id": "6dVIqQ8qmQ5GBnJ9shOYGE",
            "name": "OK Computer",
            "uri": "spotify:album:6dVIqQ8qmQ5GBnJ9shOYGE",
            "album_type": "album",
            "total_tracks": 12,
            "release_date": "1997-05-21",
            "release_date_precision": "day",
            "images": [],
        },
        "external_ids": {"isrc": "GBAYE9700104"},
    }


@pytest.fixture
def album_json(track_json) -> Dict[str, Any]:
    simplified_track = {k: v for k, v in track_json.items() if k != "album"}
    return {
        "id": "6dVIqQ8qmQ5GBnJ9shOYGE",
        "name": "OK Computer",
        "uri": "spotify:album:6dVIqQ8qmQ5GBnJ9shOYGE",
        "album_type": "album",
        "total_tracks": 12,
        "release_date": "1997-05-21",
        "release_date_precision": "day",
        "label": "XL Recordings",
        "popularity": 80,
        "artists": track_json["artists"],
        "images": [{"url": "https://i.scdn.co/image/album", "height": 300, "width": 300}],
        "tracks": {"items": [simplified_track], "total": 12, "limit": 50, "offset": 0},
    }


@pytest.fixture
def user_json() -> Dict[str, Any]:
    return {
        "id": "wizzler",
        "display_name": "Wizzler",
        "uri": "spotify:user:wizzler",
        "followers": {"total": 12},
        "images": [],
    }


@pytest.fixture
def episode_json() -> Dict[str, Any]:
    return {
        "id": "512ojhOuo1ktJprKbVcKyQ",
        "name": "Episode One",
        "uri": "spotify:episode:512ojhOuo1ktJprKbVcKyQ",
        "type": "episode",
        "duration_ms": 1686230,
        "description": "First episode",
        "release_date": "2020-01-01",
        "release_date_precision": "day",
        "language": "en",
        "languages": ["en"],
        "images": [],
    }


@pytest.fixture
def show_json(episode_json) -> Dict[str, Any]:
    return {
        "id": "38bS44xjbVVZ3No3ByF1dJ",
        "name": "Some Podcast",
        "uri": "spotify:show:38bS44xjbVVZ3No3ByF1dJ",
        "publisher": "Some Publisher",
        "description": "A podcast",
        "media_type": "audio",
        "total_episodes": 100,
        "languages": ["en"],
        "episodes": {"items": [episode_json], "total": 100},
    }


@pytest.fixture
def playlist_json(track_json, episode_json, user_json) -> Dict[str, Any]:
    return {
        "id": "37i9dQZF1DXcBWIGoYBM5M",
        "name": "Today's Top Hits",
        "uri": "spotify:playlist:37i9dQZF1DXcBWIGoYBM5M",
        "description": "The hottest tracks",
        "collaborative": False,
        "public": True,
        "snapshot_id": "snap-1",
        "owner": user_json,
        "followers": {"total": 30000000},
        "images": [{"url": "https://i.scdn.co/image/playlist", "height": None, "width": None}],
        "tracks": {
            "total": 3,
            "items": [
                {"added_at": "2024-01-01T00:00:00Z", "added_by": user_json, "is_local": False, "track": track_json},
                {"added_at": "2024-01-02T00:00:00Z", "added_by": None, "is_local": False, "track": episode_json},
                {"added_at": "2024-01-03T00:00:00Z", "added_by": None, "is_local": False, "track": None},
            ],
        },
    }
