"""Current-user endpoints (/me): profile, follows, top items and library."""

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Union

import httpx

from .exceptions import SpotifyError, handle_error
from .managers.base import BaseManager
from .models import (
    Artist,
    Paging,
    Playlist,
    SavedAlbum,
    SavedEpisode,
    SavedShow,
    SavedTrack,
    Track,
    User,
)
from .transform import (
    parse_album,
    parse_artist,
    parse_episode,
    parse_paging,
    parse_playlist,
    parse_saved,
    parse_show,
    parse_track,
    parse_user,
)

if TYPE_CHECKING:
    from .client import SpotifyClient

logger = logging.getLogger(__name__)

TIME_RANGES = ("short_term", "medium_term", "long_term")

# /me/<kind> -> (wrapper key, item parser, saved model)
LIBRARY_KINDS: Dict[str, tuple] = {
    "albums": ("album", parse_album, SavedAlbum),
    "tracks": ("track", parse_track, SavedTrack),
    "episodes": ("episode", parse_episode, SavedEpisode),
    "shows": ("show", parse_show, SavedShow),
}


class UserClient(BaseManager):
    """Endpoints of the user who owns the access token.

    Requires a user token (authorization code flow), not a client
    credentials token.

    Attributes:
        client: SpotifyClient used for requests
        profile: Current user's profile once info() has run

    Example:
        >>> user = UserClient("user-token")  # or UserClient(client)
        >>> me = user.info()
        >>> user.add_tracks("id1", "id2")
        True
    """

    def __init__(self, client: Union["SpotifyClient", str]):
        if isinstance(client, str):
            from .client import SpotifyClient

            client = SpotifyClient(client)
        super().__init__(client)
        self.profile: Optional[User] = None

    def info(self) -> User:
        """Fetch the current user's profile and keep it on self.profile."""
        try:
            data = self.fetch("/me")
        except httpx.HTTPError as e:
            return handle_error(e)
        self.profile = parse_user(data)
        logger.info(f"Current user: {self.profile.id}")
        return self.profile

    def _user_id(self) -> str:
        if self.profile is None:
            self.info()
        return self.profile.id

    def _page(self, path: str, parser: Callable[[Dict], Any], params: Dict[str, Any], key: Optional[str] = None) -> Paging:
        try:
            data = self.fetch(path, params=params)
        except (SpotifyError, httpx.HTTPError) as e:
            return handle_error(e, default=Paging())
        data = data or {}
        if key is not None:
            data = data.get(key)
        return parse_paging(data, parser)

    def _contains(self, path: str, params: Dict[str, Any]) -> List[bool]:
        try:
            return self.fetch(path, params=params) or []
        except (SpotifyError, httpx.HTTPError) as e:
            return handle_error(e, default=[])

    # -----------------
    # Playlists
    # -----------------

    def get_playlists(self, limit: int = 20, offset: int = 0) -> Paging[Playlist]:
        """Playlists owned or followed by the current user."""
        return self._page("/me/playlists", parse_playlist, {"limit": limit, "offset": offset})

    def create_playlist(
        self,
        name: str,
        public: bool = True,
        collaborative: bool = False,
        description: Optional[str] = None,
    ) -> Playlist:
        """Create a playlist owned by the current user."""
        return self.client.playlists.create(
            self._user_id(), name, public=public, collaborative=collaborative, description=description
        )

    def follow_playlist(self, id: str, public: bool = True) -> bool:
        """Follow a playlist, i.e. add it to the user's library."""
        self._require(id, "id")
        self.fetch(f"/playlists/{id}/followers", method="PUT", json={"public": public})
        logger.info(f"Followed playlist {id}")
        return True

    def unfollow_playlist(self, id: str) -> bool:
        self._require(id, "id")
        self.fetch(f"/playlists/{id}/followers", method="DELETE")
        logger.info(f"Unfollowed playlist {id}")
        return True

    def follows_playlist(self, id: str) -> bool:
        """Whether the current user follows the playlist."""
        self._require(id, "id")
        result = self.client.playlists.users_follow(id, [self._user_id()])
        return bool(result and result[0])

    # -----------------
    # Top items
    # -----------------

    @staticmethod
    def _affinity_params(time_range: str, limit: int, offset: int) -> Dict[str, Any]:
        if time_range not in TIME_RANGES:
            raise ValueError(
                f"Invalid time_range: {time_range}. Must be one of: {', '.join(TIME_RANGES)}"
            )
        return {"time_range": time_range, "limit": limit, "offset": offset}

    def get_top_tracks(self, time_range: str = "medium_term", limit: int = 20, offset: int = 0) -> Paging[Track]:
        return self._page("/me/top/tracks", parse_track, self._affinity_params(time_range, limit, offset))

    def get_top_artists(self, time_range: str = "medium_term", limit: int = 20, offset: int = 0) -> Paging[Artist]:
        return self._page("/me/top/artists", parse_artist, self._affinity_params(time_range, limit, offset))

    # -----------------
    # Following
    # -----------------

    def get_following_artists(self, after: Optional[str] = None, limit: int = 20) -> Paging[Artist]:
        """Artists the user follows (cursor-based page, see Paging.cursors)."""
        return self._page(
            "/me/following",
            parse_artist,
            {"type": "artist", "after": after, "limit": limit},
            key="artists",
        )

    def _follow(self, kind: str, ids, method: str) -> bool:
        ids = self._require_ids(ids)
        self.fetch("/me/following", method=method, params={"type": kind, "ids": ids})
        logger.info(f"{'Followed' if method == 'PUT' else 'Unfollowed'} {len(ids)} {kind}s")
        return True

    def follow_artists(self, *ids: str) -> bool:
        return self._follow("artist", ids, "PUT")

    def unfollow_artists(self, *ids: str) -> bool:
        return self._follow("artist", ids, "DELETE")

    def follow_users(self, *ids: str) -> bool:
        return self._follow("user", ids, "PUT")

    def unfollow_users(self, *ids: str) -> bool:
        return self._follow("user", ids, "DELETE")

    def follows_artists(self, *ids: str) -> List[bool]:
        """Whether the user follows each artist, in the order given."""
        ids = self._require_ids(ids)
        return self._contains("/me/following/contains", {"type": "artist", "ids": ids})

    def follows_users(self, *ids: str) -> List[bool]:
        ids = self._require_ids(ids)
        return self._contains("/me/following/contains", {"type": "user", "ids": ids})

    # -----------------
    # Library
    # -----------------

    def _get_saved(self, kind: str, limit: int, offset: int, market: Optional[str]) -> Paging:
        key, parser, factory = LIBRARY_KINDS[kind]
        return self._page(
            f"/me/{kind}",
            lambda item: parse_saved(item, key, parser, factory),
            {"limit": limit, "offset": offset, "market": self._market(market)},
        )

    def _save(self, kind: str, ids, method: str) -> bool:
        ids = self._require_ids(ids)
        self.fetch(f"/me/{kind}", method=method, params={"ids": ids})
        logger.info(f"{'Saved' if method == 'PUT' else 'Removed'} {len(ids)} {kind} in library")
        return True

    def _has_saved(self, kind: str, ids) -> List[bool]:
        ids = self._require_ids(ids)
        return self._contains(f"/me/{kind}/contains", {"ids": ids})

    def get_albums(self, limit: int = 20, offset: int = 0, market: Optional[str] = None) -> Paging[SavedAlbum]:
        """Saved albums of the current user."""
        return self._get_saved("albums", limit, offset, market)

    def add_albums(self, *ids: str) -> bool:
        return self._save("albums", ids, "PUT")

    def delete_albums(self, *ids: str) -> bool:
        return self._save("albums", ids, "DELETE")

    def has_albums(self, *ids: str) -> List[bool]:
        return self._has_saved("albums", ids)

    def get_tracks(self, limit: int = 20, offset: int = 0, market: Optional[str] = None) -> Paging[SavedTrack]:
        """Saved ("liked") tracks of the current user."""
        return self._get_saved("tracks", limit, offset, market)

    def add_tracks(self, *ids: str) -> bool:
        return self._save("tracks", ids, "PUT")

    def delete_tracks(self, *ids: str) -> bool:
        return self._save("tracks", ids, "DELETE")

    def has_tracks(self, *ids: str) -> List[bool]:
        return self._has_saved("tracks", ids)

    def get_episodes(self, limit: int = 20, offset: int = 0, market: Optional[str] = None) -> Paging[SavedEpisode]:
        return self._get_saved("episodes", limit, offset, market)

    def add_episodes(self, *ids: str) -> bool:
        return self._save("episodes", ids, "PUT")

    def delete_episodes(self, *ids: str) -> bool:
        return self._save("episodes", ids, "DELETE")

    def has_episodes(self, *ids: str) -> List[bool]:
        return self._has_saved("episodes", ids)

    def get_shows(self, limit: int = 20, offset: int = 0, market: Optional[str] = None) -> Paging[SavedShow]:
        return self._get_saved("shows", limit, offset, market)

    def add_shows(self, *ids: str) -> bool:
        return self._save("shows", ids, "PUT")

    def delete_shows(self, *ids: str) -> bool:
        return self._save("shows", ids, "DELETE")

    def has_shows(self, *ids: str) -> List[bool]:
        return self._has_saved("shows", ids)
