"""Browse and recommendation endpoints."""

import logging
from typing import Any, Iterable, List, Optional, Tuple

import httpx

from ..exceptions import MissingParamError, SpotifyError, handle_error
from ..models import Album, Category, Playlist, Recommendations
from ..transform import parse_album, parse_category, parse_list, parse_playlist, parse_recommendations
from .base import BaseManager

logger = logging.getLogger(__name__)

# Seeds accepted by /recommendations across all three seed kinds
MAX_RECOMMENDATION_SEEDS = 5

# Tunable attribute prefixes for /recommendations (min_energy, target_tempo, ...)
TUNABLE_PREFIXES = ("min_", "max_", "target_")


class BrowseManager(BaseManager):
    """Manages /browse and /recommendations."""

    def get_new_releases(
        self, country: Optional[str] = None, limit: int = 20, offset: int = 0
    ) -> List[Album]:
        """Get newly released albums featured in Spotify's browse tab."""
        return self._list(
            "/browse/new-releases",
            parse_album,
            params={"country": self._market(country), "limit": limit, "offset": offset},
            key="albums",
        )

    def get_featured_playlists(
        self,
        country: Optional[str] = None,
        locale: Optional[str] = None,
        timestamp: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[Optional[str], List[Playlist]]:
        """Get featured playlists.

        Returns:
            (message, playlists) where message is the localized headline
        """
        try:
            data = self.fetch(
                "/browse/featured-playlists",
                params={
                    "country": self._market(country),
                    "locale": locale,
                    "timestamp": timestamp,
                    "limit": limit,
                    "offset": offset,
                },
            )
        except (SpotifyError, httpx.HTTPError) as e:
            return handle_error(e, default=(None, []))

        data = data or {}
        playlists = parse_list((data.get("playlists") or {}).get("items"), parse_playlist)
        return data.get("message"), playlists

    def get_categories(
        self,
        country: Optional[str] = None,
        locale: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Category]:
        return self._list(
            "/browse/categories",
            parse_category,
            params={"country": self._market(country), "locale": locale, "limit": limit, "offset": offset},
            key="categories",
        )

    def get_category(
        self, id: str, country: Optional[str] = None, locale: Optional[str] = None
    ) -> Optional[Category]:
        """Get a single browse category, or None if not found."""
        self._require(id, "id")
        try:
            return parse_category(
                self.fetch(
                    f"/browse/categories/{id}",
                    params={"country": self._market(country), "locale": locale},
                )
            )
        except (SpotifyError, httpx.HTTPError) as e:
            return handle_error(e)

    def get_category_playlists(
        self, id: str, country: Optional[str] = None, limit: int = 20, offset: int = 0
    ) -> List[Playlist]:
        self._require(id, "id")
        return self._list(
            f"/browse/categories/{id}/playlists",
            parse_playlist,
            params={"country": self._market(country), "limit": limit, "offset": offset},
            key="playlists",
        )

    def get_recommendations(
        self,
        seed_artists: Iterable[str] = (),
        seed_genres: Iterable[str] = (),
        seed_tracks: Iterable[str] = (),
        limit: int = 20,
        market: Optional[str] = None,
        **tunables: Any,
    ) -> Recommendations:
        """Get track recommendations from up to five seeds.

        Args:
            seed_artists: Spotify artist ids
            seed_genres: Genre names from get_available_genre_seeds()
            seed_tracks: Spotify track ids
            limit: Number of tracks to return
            market: Market to fetch for (default: client market)
            **tunables: min_*, max_* and target_* attributes
                (e.g. target_energy=0.8, min_tempo=120)

        Raises:
            MissingParamError: If no seed is given
            ValueError: If more than five seeds or an unknown tunable is given

        Example:
            >>> recs = client.browse.get_recommendations(seed_genres=["house"], target_energy=0.9)
        """
        seeds = {
            "seed_artists": list(seed_artists),
            "seed_genres": list(seed_genres),
            "seed_tracks": list(seed_tracks),
        }
        total_seeds = sum(len(values) for values in seeds.values())
        if total_seeds == 0:
            raise MissingParamError("missing recommendation seeds")
        if total_seeds > MAX_RECOMMENDATION_SEEDS:
            raise ValueError(
                f"Too many seeds: {total_seeds}. At most {MAX_RECOMMENDATION_SEEDS} are allowed"
            )

        unknown = [name for name in tunables if not name.startswith(TUNABLE_PREFIXES)]
        if unknown:
            raise ValueError(f"Unknown recommendation attributes: {', '.join(sorted(unknown))}")

        params = {key: values or None for key, values in seeds.items()}
        params.update(tunables)
        params.update({"limit": limit, "market": self._market(market)})

        try:
            data = self.fetch("/recommendations", params=params)
        except (SpotifyError, httpx.HTTPError) as e:
            return handle_error(e, default=Recommendations())

        recommendations = parse_recommendations(data)
        logger.info(f"Retrieved {len(recommendations.tracks)} recommendations")
        return recommendations

    def get_available_genre_seeds(self) -> List[str]:
        try:
            data = self.fetch("/recommendations/available-genre-seeds")
        except (SpotifyError, httpx.HTTPError) as e:
            return handle_error(e, default=[])
        return (data or {}).get("genres", [])
