"""
Unit tests for SpotifyClient.

Tests cover:
- Client initialization and configuration
- Token replacement and uptime
- Search across types
- URI dispatch to managers
- Raw requests and async wrappers
"""

from unittest.mock import Mock, patch

import httpx
import pytest

from spotify_api.cache import CacheOptions
from spotify_api.client import SEARCH_TYPES, SpotifyClient
from spotify_api.config import SpotifyConfig
from spotify_api.exceptions import (
    MissingParamError,
    SpotifyAuthenticationError,
    SpotifyNotFoundError,
    UnexpectedError,
)
from spotify_api.managers import TrackManager
from spotify_api.models import Album, SearchResult, Track, User
from spotify_api.rest import API_BASE_URL
from spotify_api.user_client import UserClient


class TestSpotifyClientInit:
    """Tests for SpotifyClient initialization."""

    def test_init_defaults(self):
        """Test client initialization with defaults."""
        with SpotifyClient("abc") as client:
            assert client.token == "abc"
            assert client.market == "US"
            assert client.cache_options == CacheOptions()
            assert client.rest.base_url == API_BASE_URL
            assert isinstance(client.tracks, TrackManager)
            assert isinstance(client.user, UserClient)
            assert client.user.client is client

    def test_init_requires_token(self):
        with pytest.raises(MissingParamError, match="missing token"):
            SpotifyClient("")

    def test_from_config(self):
        """Test building a client from SpotifyConfig."""
        config = SpotifyConfig(
            token="cfg-token",
            market="gb",
            base_url="http://localhost:9000/v1",
            timeout=5.0,
            cache_options=CacheOptions(cache_tracks=True),
        )

        with SpotifyClient.from_config(config) as client:
            assert client.token == "cfg-token"
            assert client.market == "GB"
            assert client.rest.base_url == "http://localhost:9000/v1"
            assert client.cache_options.cache_tracks is True

    def test_close_closes_http_client(self, client):
        client.close()
        client.rest.client.close.assert_called_once()

    def test_context_manager(self, client):
        with client as c:
            assert c is client
        client.rest.client.close.assert_called_once()


class TestLogin:
    """Tests for login() and uptime."""

    def test_login_replaces_token(self, client, http, make_response, last_request):
        client.user.profile = User(id="old", uri="spotify:user:old")
        http.request.return_value = make_response({"id": "me"})

        client.login("fresh-token")
        client.request("/me")

        assert client.token == "fresh-token"
        assert client.user.profile is None
        assert last_request(http)["headers"] == {"Authorization": "Bearer fresh-token"}

    def test_login_requires_token(self, client):
        with pytest.raises(MissingParamError):
            client.login("")
        assert client.token == "test-token"

    def test_uptime(self, client):
        with patch("spotify_api.client.time.monotonic", return_value=client.started_at + 12.5):
            assert client.uptime == pytest.approx(12.5)

    def test_login_resets_uptime(self, client):
        with patch("spotify_api.client.time.monotonic", return_value=client.started_at + 100):
            client.login("fresh-token")
            assert client.uptime == 0


class TestSearch:
    """Tests for search()."""

    def test_search_params(self, client, http, make_response, last_request, track_json):
        """Test query, type list and market are sent."""
        http.request.return_value = make_response(
            {"tracks": {"items": [track_json], "total": 1, "limit": 5, "offset": 0}}
        )

        result = client.search("paranoid android", types=["track"], limit=5)

        request = last_request(http)
        assert request["url"] == f"{API_BASE_URL}/search"
        assert request["params"] == {
            "q": "paranoid android",
            "type": "track",
            "market": "US",
            "limit": "5",
            "offset": "0",
        }
        assert isinstance(result, SearchResult)
        assert result.tracks.total == 1
        assert result.tracks.items[0].name == "Paranoid Android"
        assert result.albums is None

    def test_search_defaults_to_all_types(self, client, http, make_response, last_request):
        http.request.return_value = make_response({})

        client.search("hello", market="SE", include_external="audio")

        params = last_request(http)["params"]
        assert params["type"] == ",".join(SEARCH_TYPES)
        assert params["market"] == "SE"
        assert params["include_external"] == "audio"

    def test_search_single_type_string(self, client, http, make_response, last_request):
        """Test a single type passed as a string is not split into characters."""
        http.request.return_value = make_response({"albums": {"items": [], "total": 0}})

        result = client.search("ok computer", types="album")

        assert last_request(http)["params"]["type"] == "album"
        assert result.albums.total == 0

    def test_search_requires_query(self, client, http):
        with pytest.raises(MissingParamError, match="missing query"):
            client.search("")
        http.request.assert_not_called()

    def test_search_invalid_type(self, client, http):
        with pytest.raises(ValueError, match="Invalid search types: song"):
            client.search("hello", types=["track", "song"])
        http.request.assert_not_called()

    def test_search_not_found_returns_empty(self, client, http, make_response):
        http.request.return_value = make_response(
            {"error": {"status": 404, "message": "Not found"}}, status_code=404
        )
        assert client.search("hello") == SearchResult()

    def test_search_auth_error_propagates(self, client, http, make_response):
        http.request.return_value = make_response(
            {"error": {"status": 401, "message": "The access token expired"}}, status_code=401
        )
        with pytest.raises(SpotifyAuthenticationError):
            client.search("hello")

    def test_search_transport_error_wrapped(self, client, http):
        http.request.side_effect = httpx.ConnectTimeout("timed out")
        with pytest.raises(UnexpectedError):
            client.search("hello")


class TestGetByUri:
    """Tests for get_by_uri()."""

    def test_album_uri(self, client, http, make_response, last_request, album_json):
        http.request.return_value = make_response(album_json)

        album = client.get_by_uri("spotify:album:6dVIqQ8qmQ5GBnJ9shOYGE")

        assert isinstance(album, Album)
        assert last_request(http)["url"] == f"{API_BASE_URL}/albums/6dVIqQ8qmQ5GBnJ9shOYGE"

    def test_track_uri(self, client, http, make_response, last_request, track_json):
        http.request.return_value = make_response(track_json)

        track = client.get_by_uri("spotify:track:6LgJvl0Xdtc73RJ1mmpotq")

        assert isinstance(track, Track)
        assert last_request(http)["url"] == f"{API_BASE_URL}/tracks/6LgJvl0Xdtc73RJ1mmpotq"

    def test_user_uri(self, client, http, make_response, last_request, user_json):
        http.request.return_value = make_response(user_json)

        user = client.get_by_uri("spotify:user:wizzler")

        assert isinstance(user, User)
        assert last_request(http)["url"] == f"{API_BASE_URL}/users/wizzler"

    def test_legacy_playlist_uri(self, client, http, make_response, last_request, playlist_json):
        http.request.return_value = make_response(playlist_json)

        client.get_by_uri("spotify:user:wizzler:playlist:37i9dQZF1DXcBWIGoYBM5M")

        assert last_request(http)["url"] == f"{API_BASE_URL}/playlists/37i9dQZF1DXcBWIGoYBM5M"

    def test_unresolvable_uri(self, client, http):
        with pytest.raises(UnexpectedError, match="could not resolve"):
            client.get_by_uri("spotify:genre:rock")
        http.request.assert_not_called()


class TestRawRequest:
    """Tests for request()."""

    def test_request_passthrough(self, client, http, make_response, last_request):
        http.request.return_value = make_response({"items": []})

        data = client.request("/me/player/recently-played", params={"limit": 10})

        assert data == {"items": []}
        request = last_request(http)
        assert request["method"] == "GET"
        assert request["params"] == {"limit": "10"}

    def test_request_errors_propagate(self, client, http, make_response):
        """Test raw requests do not resolve not-found to a default."""
        http.request.return_value = make_response(
            {"error": {"status": 404, "message": "Not found"}}, status_code=404
        )
        with pytest.raises(SpotifyNotFoundError) as exc_info:
            client.request("/tracks/missing")
        assert exc_info.value.status == 404


class TestAsyncWrappers:
    """Tests for async wrappers."""

    @pytest.mark.asyncio
    async def test_search_async(self, client, http, make_response):
        http.request.return_value = make_response({"artists": {"items": [], "total": 0}})

        result = await client.search_async("nobody", types=["artist"])

        assert result.artists.total == 0

    @pytest.mark.asyncio
    async def test_request_async(self, client, http, make_response):
        http.request.return_value = make_response({"id": "me"})

        data = await client.request_async("/me", method="GET")

        assert data == {"id": "me"}

    @pytest.mark.asyncio
    async def test_get_by_uri_async(self, client):
        client.tracks.get = Mock(return_value="track")

        result = await client.get_by_uri_async("spotify:track:abc")

        assert result == "track"
        client.tracks.get.assert_called_once_with("abc")
