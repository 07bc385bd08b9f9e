"""Base class shared by the per-resource managers."""

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Optional

import httpx

from ..exceptions import MissingParamError, SpotifyError, handle_error
from ..transform import parse_list

if TYPE_CHECKING:
    from ..client import SpotifyClient

logger = logging.getLogger(__name__)


class BaseManager:
    """Maps one REST resource onto request builders and response parsers.

    Attributes:
        client: Owning SpotifyClient (request layer, cache, options)
        kind: Cache kind this manager reads and writes, if any
    """

    kind: Optional[str] = None

    def __init__(self, client: "SpotifyClient"):
        self.client = client

    def fetch(
        self,
        path: str,
        method: str = "GET",
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """Issue a single request through the client's request layer."""
        return self.client.rest.request(method, path, params=params, json=json)

    def _market(self, market: Optional[str]) -> str:
        return market or self.client.market

    @staticmethod
    def _require(value: Any, name: str):
        if not value:
            raise MissingParamError(f"missing {name}")

    @staticmethod
    def _require_ids(ids: Iterable[str]) -> List[str]:
        ids = [i for i in ids if i]
        if not ids:
            raise MissingParamError("missing ids")
        return ids

    def _caching(self) -> bool:
        return self.kind is not None and self.client.cache_options.enabled(self.kind)

    def _cached(self, id: str, force: Optional[bool]) -> Optional[Any]:
        """Return the cached entity for id unless forced.

        force defaults to "not caching this kind", so a disabled cache
        always goes to the network.
        """
        if force is None:
            force = not self._caching()
        if force or self.kind is None:
            return None

        existing = self.client.cache.for_kind(self.kind).get(id)
        if existing is not None:
            logger.debug(f"Cache hit for {self.kind} {id}")
        return existing

    def _store(self, entity: Any, replace: bool = True) -> Any:
        """Write entity to the cache when caching is on for this kind.

        With replace=False an entry already cached for the id is kept; search
        results are simplified objects and must not overwrite full ones.
        """
        if entity is None or not self._caching():
            return entity
        cache = self.client.cache.for_kind(self.kind)
        if replace or entity.id not in cache:
            cache.set(entity)
        return entity

    def _get_entity(
        self,
        path: str,
        id: str,
        parser: Callable[[Dict], Any],
        force: Optional[bool] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Optional[Any]:
        """Cache-aware single entity lookup used by every get()."""
        self._require(id, "id")

        existing = self._cached(id, force)
        if existing is not None:
            return existing

        try:
            entity = parser(self.fetch(path, params=params))
        except (SpotifyError, httpx.HTTPError) as e:
            return handle_error(e)

        logger.info(f"Retrieved {self.kind or 'entity'} {id}")
        return self._store(entity)

    def _get_entities(
        self,
        path: str,
        key: str,
        ids: Iterable[str],
        parser: Callable[[Dict], Any],
        params: Optional[Dict[str, Any]] = None,
    ) -> List[Any]:
        """Batch lookup (e.g. /tracks?ids=a,b); unknown ids are dropped."""
        ids = self._require_ids(ids)

        try:
            data = self.fetch(path, params={"ids": ids, **(params or {})})
        except (SpotifyError, httpx.HTTPError) as e:
            return handle_error(e, default=[])

        entities = parse_list((data or {}).get(key), parser)
        for entity in entities:
            self._store(entity)

        logger.info(f"Retrieved {len(entities)} of {len(ids)} {key}")
        return entities

    def _list(
        self,
        path: str,
        parser: Callable[[Dict], Any],
        params: Optional[Dict[str, Any]] = None,
        key: Optional[str] = None,
    ) -> List[Any]:
        """Fetch one page and return its parsed items.

        Args:
            path: Endpoint path
            parser: Item parser
            params: Query parameters
            key: Envelope key when the page is nested (e.g. "playlists")
        """
        try:
            data = self.fetch(path, params=params)
        except (SpotifyError, httpx.HTTPError) as e:
            return handle_error(e, default=[])

        data = data or {}
        if key is not None:
            data = data.get(key) or {}
        items = data.get("items") if isinstance(data, dict) else data
        return parse_list(items, parser)

    def _search(
        self,
        query: str,
        kind: str,
        limit: int = 20,
        offset: int = 0,
        market: Optional[str] = None,
    ) -> List[Any]:
        """Search a single type and return the items of its page."""
        result = self.client.search(query, types=[kind], limit=limit, offset=offset, market=market)
        page = getattr(result, f"{kind}s")
        items = page.items if page else []
        for item in items:
            self._store(item, replace=False)
        return items
