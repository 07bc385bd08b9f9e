"""Per-resource managers for the Spotify Web API."""

from .albums import AlbumManager
from .artists import ArtistManager
from .base import BaseManager
from .browse import BrowseManager
from .episodes import EpisodeManager
from .playlists import PlaylistManager
from .shows import ShowManager
from .tracks import TrackManager
from .users import UserManager

__all__ = [
    "BaseManager",
    "AlbumManager",
    "ArtistManager",
    "BrowseManager",
    "EpisodeManager",
    "PlaylistManager",
    "ShowManager",
    "TrackManager",
    "UserManager",
]
