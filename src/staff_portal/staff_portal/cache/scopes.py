from __future__ import annotations

import hashlib
import logging
import threading
import time
from typing import Callable, Optional

from .query_cache import QueryCache

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Optional[str]]


def fingerprint(token: Optional[str]) -> str:
    """Stable, non-reversible scope name for a credential."""
    if not token:
        return "anonymous"
    return hashlib.sha256(token.encode("utf-8")).hexdigest()[:32]


class CacheScopes:
    """One QueryCache per credential.

    Snapshots fetched with one user's token are only ever served back to
    requests carrying that same token.
    """

    def __init__(
        self,
        *,
        token_provider: TokenProvider,
        stale_after: float = 0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._token_provider = token_provider
        self._stale_after = stale_after
        self._clock = clock
        self._lock = threading.Lock()
        self._caches: dict[str, QueryCache] = {}

    def for_token(self, token: Optional[str]) -> QueryCache:
        scope = fingerprint(token)
        with self._lock:
            cache = self._caches.get(scope)
            if cache is None:
                cache = QueryCache(stale_after=self._stale_after, clock=self._clock)
                self._caches[scope] = cache
            return cache

    def current(self) -> QueryCache:
        return self.for_token(self._token_provider())

    def discard(self, token: Optional[str]) -> None:
        """Drop the scope of one credential (logout, rejected token)."""
        scope = fingerprint(token)
        with self._lock:
            cache = self._caches.pop(scope, None)
        if cache is not None:
            cache.clear()
            logger.debug("cache scope dropped scope=%s", scope[:8])

    def __len__(self) -> int:
        with self._lock:
            return len(self._caches)
