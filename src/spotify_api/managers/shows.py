"""Show endpoints."""

from typing import Iterable, List, Optional

from ..models import Episode, Show
from ..transform import parse_episode, parse_show
from .base import BaseManager


class ShowManager(BaseManager):
    """Manages podcast shows (/shows)."""

    kind = "shows"

    def search(self, query: str, limit: int = 20, offset: int = 0, market: Optional[str] = None) -> List[Show]:
        return self._search(query, "show", limit=limit, offset=offset, market=market)

    def get(self, id: str, force: Optional[bool] = None, market: Optional[str] = None) -> Optional[Show]:
        """Get a show by Spotify id.

        Args:
            id: Spotify show id
            force: If True, skip the cache and fetch
            market: Market to fetch for; shows are unavailable without one

        Returns:
            Show, or None if not found
        """
        return self._get_entity(
            f"/shows/{id}", id, parse_show, force=force, params={"market": self._market(market)}
        )

    def get_multiple(self, ids: Iterable[str], market: Optional[str] = None) -> List[Show]:
        return self._get_entities(
            "/shows", "shows", ids, parse_show, params={"market": self._market(market)}
        )

    def get_episodes(
        self, id: str, limit: int = 20, offset: int = 0, market: Optional[str] = None
    ) -> List[Episode]:
        """Get one page of a show's episodes."""
        self._require(id, "id")
        return self._list(
            f"/shows/{id}/episodes",
            parse_episode,
            params={"limit": limit, "offset": offset, "market": self._market(market)},
        )
