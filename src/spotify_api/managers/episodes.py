"""Episode endpoints."""

from typing import Iterable, List, Optional

from ..models import Episode
from ..transform import parse_episode
from .base import BaseManager


class EpisodeManager(BaseManager):
    """Manages podcast episodes (/episodes)."""

    kind = "episodes"

    def search(self, query: str, limit: int = 20, offset: int = 0, market: Optional[str] = None) -> List[Episode]:
        return self._search(query, "episode", limit=limit, offset=offset, market=market)

    def get(self, id: str, force: Optional[bool] = None, market: Optional[str] = None) -> Optional[Episode]:
        """Get an episode by Spotify id, or None if not found."""
        return self._get_entity(
            f"/episodes/{id}", id, parse_episode, force=force, params={"market": self._market(market)}
        )

    def get_multiple(self, ids: Iterable[str], market: Optional[str] = None) -> List[Episode]:
        return self._get_entities(
            "/episodes", "episodes", ids, parse_episode, params={"market": self._market(market)}
        )
