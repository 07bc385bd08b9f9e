"""Artist endpoints."""

from typing import Iterable, List, Optional

from ..models import Album, Artist, Track
from ..transform import parse_album, parse_artist, parse_track
from .base import BaseManager

# Album groups accepted by /artists/{id}/albums
ALBUM_GROUPS = ("album", "single", "appears_on", "compilation")


class ArtistManager(BaseManager):
    """Manages artists (/artists)."""

    kind = "artists"

    def search(self, query: str, limit: int = 20, offset: int = 0, market: Optional[str] = None) -> List[Artist]:
        """Search artists by query.

        Example:
            >>> artists = client.artists.search("alec benjamin", limit=1)
        """
        return self._search(query, "artist", limit=limit, offset=offset, market=market)

    def get(self, id: str, force: Optional[bool] = None) -> Optional[Artist]:
        """Get an artist by Spotify id.

        Args:
            id: Spotify artist id
            force: If True, skip the cache and fetch

        Returns:
            Artist, or None if not found
        """
        return self._get_entity(f"/artists/{id}", id, parse_artist, force=force)

    def get_multiple(self, ids: Iterable[str]) -> List[Artist]:
        return self._get_entities("/artists", "artists", ids, parse_artist)

    def get_albums(
        self,
        id: str,
        include_groups: Optional[Iterable[str]] = None,
        limit: int = 20,
        offset: int = 0,
        market: Optional[str] = None,
    ) -> List[Album]:
        """Get one page of an artist's albums.

        Args:
            id: Spotify artist id
            include_groups: Subset of album, single, appears_on, compilation
                (default: all groups)
            limit: Page size
            offset: Page offset
            market: Market to fetch for (default: client market)

        Raises:
            ValueError: If include_groups contains an unknown group
        """
        self._require(id, "id")

        groups = list(include_groups) if include_groups else None
        if groups:
            unknown = [g for g in groups if g not in ALBUM_GROUPS]
            if unknown:
                raise ValueError(
                    f"Invalid include_groups: {', '.join(unknown)}. "
                    f"Must be one of: {', '.join(ALBUM_GROUPS)}"
                )

        return self._list(
            f"/artists/{id}/albums",
            parse_album,
            params={
                "include_groups": groups,
                "limit": limit,
                "offset": offset,
                "market": self._market(market),
            },
        )

    def get_top_tracks(self, id: str, market: Optional[str] = None) -> List[Track]:
        """Get an artist's top tracks in a market."""
        self._require(id, "id")
        return self._list(
            f"/artists/{id}/top-tracks", parse_track, params={"market": self._market(market)}, key="tracks"
        )

    def get_related_artists(self, id: str) -> List[Artist]:
        self._require(id, "id")
        return self._list(f"/artists/{id}/related-artists", parse_artist, key="artists")
