"""User profile endpoints."""

from typing import List, Optional

from ..models import Playlist, User
from ..transform import parse_playlist, parse_user
from .base import BaseManager


class UserManager(BaseManager):
    """Manages public user profiles (/users)."""

    kind = "users"

    def get(self, id: str, force: Optional[bool] = None) -> Optional[User]:
        """Get a user's public profile, or None if not found."""
        return self._get_entity(f"/users/{id}", id, parse_user, force=force)

    def get_playlists(self, id: str, limit: int = 20, offset: int = 0) -> List[Playlist]:
        """Get one page of a user's public playlists."""
        self._require(id, "id")
        return self._list(
            f"/users/{id}/playlists", parse_playlist, params={"limit": limit, "offset": offset}
        )
