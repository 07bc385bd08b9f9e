"""Playlist endpoints."""

import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx

from ..exceptions import MissingParamError, SpotifyError, handle_error
from ..models import Image, Playlist, PlaylistTrack
from ..transform import parse_image, parse_list, parse_playlist, parse_playlist_track
from .base import BaseManager

logger = logging.getLogger(__name__)


class PlaylistManager(BaseManager):
    """Manages playlists (/playlists, /users/{id}/playlists)."""

    kind = "playlists"

    def search(self, query: str, limit: int = 20, offset: int = 0, market: Optional[str] = None) -> List[Playlist]:
        return self._search(query, "playlist", limit=limit, offset=offset, market=market)

    def get(self, id: str, force: Optional[bool] = None, market: Optional[str] = None) -> Optional[Playlist]:
        """Get a playlist by Spotify id.

        Args:
            id: Spotify playlist id
            force: If True, skip the cache and fetch. Defaults to fetching
                unless playlist caching is enabled.
            market: Market to fetch for (default: client market)

        Returns:
            Playlist with its first page of items, or None if not found

        Example:
            >>> playlist = client.playlists.get("37i9dQZF1DXcBWIGoYBM5M")
        """
        return self._get_entity(
            f"/playlists/{id}", id, parse_playlist, force=force, params={"market": self._market(market)}
        )

    def get_tracks(
        self, id: str, limit: int = 100, offset: int = 0, market: Optional[str] = None
    ) -> List[PlaylistTrack]:
        """Get one page of a playlist's items (tracks and episodes)."""
        self._require(id, "id")
        return self._list(
            f"/playlists/{id}/tracks",
            parse_playlist_track,
            params={"limit": limit, "offset": offset, "market": self._market(market)},
        )

    def get_images(self, id: str) -> List[Image]:
        """Get the cover images of a playlist."""
        self._require(id, "id")
        try:
            return parse_list(self.fetch(f"/playlists/{id}/images"), parse_image)
        except (SpotifyError, httpx.HTTPError) as e:
            return handle_error(e, default=[])

    def create(
        self,
        user_id: str,
        name: str,
        public: bool = True,
        collaborative: bool = False,
        description: Optional[str] = None,
    ) -> Playlist:
        """Create a playlist owned by user_id.

        Returns:
            The created Playlist

        Raises:
            MissingParamError: If user_id or name is empty
            SpotifyError: If the API rejects the request
        """
        self._require(user_id, "user id")
        self._require(name, "name")

        body: Dict[str, Any] = {"name": name, "public": public, "collaborative": collaborative}
        if description is not None:
            body["description"] = description

        playlist = parse_playlist(self.fetch(f"/users/{user_id}/playlists", method="POST", json=body))
        logger.info(f"Created playlist {playlist.id} for user {user_id}")
        return self._store(playlist)

    def edit(
        self,
        id: str,
        name: Optional[str] = None,
        public: Optional[bool] = None,
        collaborative: Optional[bool] = None,
        description: Optional[str] = None,
    ) -> bool:
        """Change a playlist's details. Only the given fields are sent.

        The cached copy, if any, is dropped since it is now stale.
        """
        self._require(id, "id")

        body = {
            key: value
            for key, value in (
                ("name", name),
                ("public", public),
                ("collaborative", collaborative),
                ("description", description),
            )
            if value is not None
        }
        if not body:
            raise MissingParamError("missing playlist details to edit")

        self.fetch(f"/playlists/{id}", method="PUT", json=body)
        self.client.cache.playlists.delete(id)
        logger.info(f"Edited playlist {id}: {sorted(body)}")
        return True

    def add_items(self, id: str, uris: Iterable[str], position: Optional[int] = None) -> Optional[str]:
        """Add track or episode URIs to a playlist.

        The cached copy, if any, is dropped since its items and snapshot changed.

        Args:
            id: Spotify playlist id
            uris: Spotify URIs to add (max 100 per call upstream)
            position: Zero-based insert position (default: append)

        Returns:
            New snapshot id of the playlist
        """
        self._require(id, "id")
        uris = self._require_ids(uris)

        body: Dict[str, Any] = {"uris": uris}
        if position is not None:
            body["position"] = position

        data = self.fetch(f"/playlists/{id}/tracks", method="POST", json=body)
        self.client.cache.playlists.delete(id)
        logger.info(f"Added {len(uris)} items to playlist {id}")
        return (data or {}).get("snapshot_id")

    def remove_items(self, id: str, uris: Iterable[str], snapshot_id: Optional[str] = None) -> Optional[str]:
        """Remove every occurrence of the given URIs from a playlist."""
        self._require(id, "id")
        uris = self._require_ids(uris)

        body: Dict[str, Any] = {"tracks": [{"uri": uri} for uri in uris]}
        if snapshot_id:
            body["snapshot_id"] = snapshot_id

        data = self.fetch(f"/playlists/{id}/tracks", method="DELETE", json=body)
        self.client.cache.playlists.delete(id)
        logger.info(f"Removed {len(uris)} items from playlist {id}")
        return (data or {}).get("snapshot_id")

    def reorder_items(
        self,
        id: str,
        range_start: int,
        insert_before: int,
        range_length: int = 1,
        snapshot_id: Optional[str] = None,
    ) -> Optional[str]:
        """Move range_length items starting at range_start to insert_before."""
        self._require(id, "id")

        body: Dict[str, Any] = {
            "range_start": range_start,
            "insert_before": insert_before,
            "range_length": range_length,
        }
        if snapshot_id:
            body["snapshot_id"] = snapshot_id

        data = self.fetch(f"/playlists/{id}/tracks", method="PUT", json=body)
        self.client.cache.playlists.delete(id)
        return (data or {}).get("snapshot_id")

    def users_follow(self, id: str, user_ids: Iterable[str]) -> List[bool]:
        """Check whether each user follows the playlist."""
        self._require(id, "id")
        user_ids = self._require_ids(user_ids)
        try:
            return self.fetch(f"/playlists/{id}/followers/contains", params={"ids": user_ids}) or []
        except (SpotifyError, httpx.HTTPError) as e:
            return handle_error(e, default=[])
