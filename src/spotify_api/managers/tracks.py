"""Track endpoints."""

import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx

from ..exceptions import SpotifyError, handle_error
from ..models import AudioFeatures, Track
from ..transform import parse_audio_features, parse_list, parse_track
from .base import BaseManager

logger = logging.getLogger(__name__)


class TrackManager(BaseManager):
    """Manages tracks (/tracks, /audio-features, /audio-analysis)."""

    kind = "tracks"

    def search(self, query: str, limit: int = 20, offset: int = 0, market: Optional[str] = None) -> List[Track]:
        """Search tracks by query.

        Example:
            >>> tracks = client.tracks.search("oh wonder", limit=5)
        """
        return self._search(query, "track", limit=limit, offset=offset, market=market)

    def get(self, id: str, force: Optional[bool] = None, market: Optional[str] = None) -> Optional[Track]:
        """Get a track by Spotify id.

        Args:
            id: Spotify track id
            force: If True, skip the cache and fetch. Defaults to fetching
                unless track caching is enabled.
            market: Market to fetch for (default: client market)

        Returns:
            Track, or None if the id does not exist

        Example:
            >>> track = client.tracks.get("3n3Ppam7vgaVa1iaRUc9Lp")
        """
        return self._get_entity(
            f"/tracks/{id}", id, parse_track, force=force, params={"market": self._market(market)}
        )

    def get_multiple(self, ids: Iterable[str], market: Optional[str] = None) -> List[Track]:
        """Get several tracks in one request; unknown ids are dropped."""
        return self._get_entities(
            "/tracks", "tracks", ids, parse_track, params={"market": self._market(market)}
        )

    def get_audio_features(self, id: str) -> Optional[AudioFeatures]:
        """Get audio features (tempo, energy, key, ...) of a track."""
        self._require(id, "id")
        try:
            return parse_audio_features(self.fetch(f"/audio-features/{id}"))
        except (SpotifyError, httpx.HTTPError) as e:
            return handle_error(e)

    def get_multiple_audio_features(self, ids: Iterable[str]) -> List[AudioFeatures]:
        ids = self._require_ids(ids)
        try:
            data = self.fetch("/audio-features", params={"ids": ids})
        except (SpotifyError, httpx.HTTPError) as e:
            return handle_error(e, default=[])
        return parse_list((data or {}).get("audio_features"), parse_audio_features)

    def get_audio_analysis(self, id: str) -> Optional[Dict[str, Any]]:
        """Get the raw audio analysis (bars, beats, sections, segments, tatums)."""
        self._require(id, "id")
        try:
            return self.fetch(f"/audio-analysis/{id}")
        except (SpotifyError, httpx.HTTPError) as e:
            return handle_error(e)
