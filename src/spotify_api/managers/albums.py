"""Album endpoints."""

from typing import Iterable, List, Optional

from ..models import Album, Track
from ..transform import parse_album, parse_track
from .base import BaseManager


class AlbumManager(BaseManager):
    """Manages albums (/albums)."""

    kind = "albums"

    def search(self, query: str, limit: int = 20, offset: int = 0, market: Optional[str] = None) -> List[Album]:
        return self._search(query, "album", limit=limit, offset=offset, market=market)

    def get(self, id: str, force: Optional[bool] = None, market: Optional[str] = None) -> Optional[Album]:
        """Get an album by Spotify id.

        Args:
            id: Spotify album id
            force: If True, skip the cache and fetch
            market: Market to fetch for (default: client market)

        Returns:
            Album with its first page of tracks, or None if not found
        """
        return self._get_entity(
            f"/albums/{id}", id, parse_album, force=force, params={"market": self._market(market)}
        )

    def get_multiple(self, ids: Iterable[str], market: Optional[str] = None) -> List[Album]:
        return self._get_entities(
            "/albums", "albums", ids, parse_album, params={"market": self._market(market)}
        )

    def get_tracks(
        self, id: str, limit: int = 20, offset: int = 0, market: Optional[str] = None
    ) -> List[Track]:
        """Get one page of an album's tracks.

        Example:
            >>> tracks = client.albums.get_tracks("4aawyAB9vmqN3uQ7FjRGTy", limit=50)
        """
        self._require(id, "id")
        return self._list(
            f"/albums/{id}/tracks",
            parse_track,
            params={"limit": limit, "offset": offset, "market": self._market(market)},
        )
