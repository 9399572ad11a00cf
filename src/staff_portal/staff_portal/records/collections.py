from __future__ import annotations

from typing import Callable, Mapping

from ..api.repository import EntityRepository, Record
from ..cache.query_cache import QueryCache, QueryState
from ..core.exceptions import AuthorizationError


class Collections:
    """Reads collections through the QueryCache of the current credential.

    `cache_for` resolves the cache on every access, so one Collections object
    serves every user of the process without mixing their snapshots.
    """

    def __init__(self, cache_for: Callable[[], QueryCache], repositories: Mapping[str, EntityRepository]):
        self._cache_for = cache_for
        self._repositories = dict(repositories)

    @property
    def cache(self) -> QueryCache:
        return self._cache_for()

    def repository(self, key: str) -> EntityRepository:
        return self._repositories[key]

    def read(self, key: str) -> QueryState:
        state = self.cache.read(key, self._repositories[key].list_all)
        # A rejected credential ends the session; it is not a failed read.
        if state.is_error and isinstance(state.error, AuthorizationError):
            raise state.error
        return state

    def items(self, key: str) -> list[Record]:
        """Collection data, empty while unavailable (failed or never loaded)."""
        return list(self.read(key).data_or([]))
