from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Future
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterable, Optional, TypeVar

from ..core.enums import QueryStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")
Listener = Callable[[str], None]


@dataclass(frozen=True)
class QueryState:
    """Snapshot of one cache key handed to callers."""

    key: str
    status: QueryStatus = QueryStatus.IDLE
    data: Any = None
    error: Optional[BaseException] = None
    stale: bool = False

    @property
    def is_error(self) -> bool:
        return self.status == QueryStatus.ERROR

    def data_or(self, default: Any) -> Any:
        return default if self.data is None else self.data


@dataclass
class _Entry:
    state: QueryState
    generation: int = 0
    updated_at: Optional[float] = None
    inflight: Optional[Future] = None
    listeners: list[Listener] = field(default_factory=list)


class QueryCache:
    """Process-wide store of collection snapshots keyed by collection name.

    Reads are fetch-if-stale and concurrent reads of one key share a single
    in-flight fetch. Mutations invalidate keys only when they succeed.
    """

    def __init__(self, *, stale_after: float = 0, clock: Callable[[], float] = time.monotonic):
        self._stale_after = float(stale_after or 0)
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, _Entry] = {}

    def _entry(self, key: str) -> _Entry:
        entry = self._entries.get(key)
        if entry is None:
            entry = _Entry(state=QueryState(key=key))
            self._entries[key] = entry
        return entry

    def _is_fresh(self, entry: _Entry) -> bool:
        if entry.state.status != QueryStatus.SUCCESS or entry.state.stale:
            return False
        if self._stale_after and entry.updated_at is not None:
            return self._clock() - entry.updated_at < self._stale_after
        return True

    def peek(self, key: str) -> QueryState:
        with self._lock:
            entry = self._entries.get(key)
            return entry.state if entry else QueryState(key=key)

    def read(self, key: str, fetch: Callable[[], Any]) -> QueryState:
        with self._lock:
            entry = self._entry(key)
            if self._is_fresh(entry):
                return entry.state

            future = entry.inflight
            owner = future is None
            if owner:
                future = Future()
                entry.inflight = future
                entry.state = replace(entry.state, status=QueryStatus.PENDING)
                generation = entry.generation

        if not owner:
            try:
                future.result()
            except BaseException:
                # The owner recorded the failure in the entry.
                pass
            return self.peek(key)

        logger.debug("cache fetch key=%s", key)
        try:
            data = fetch()
        except BaseException as e:
            with self._lock:
                entry.inflight = None
                entry.state = replace(entry.state, status=QueryStatus.ERROR, error=e)
            # Waiters must never block on a fetch that will not finish.
            future.set_exception(e)
            if not isinstance(e, Exception):
                raise
            logger.warning("cache fetch failed key=%s: %s", key, e)
            return self.peek(key)

        with self._lock:
            entry.inflight = None
            entry.updated_at = self._clock()
            entry.state = QueryState(
                key=key,
                status=QueryStatus.SUCCESS,
                data=data,
                # Invalidated while the fetch was outstanding: next read fetches again.
                stale=entry.generation != generation,
            )
        future.set_result(data)
        return self.peek(key)

    def invalidate(self, key: str) -> None:
        with self._lock:
            entry = self._entry(key)
            entry.generation += 1
            entry.state = replace(entry.state, stale=True)
            listeners = list(entry.listeners)

        logger.debug("cache invalidate key=%s", key)
        for listener in listeners:
            listener(key)

    def mutate(self, operation: Callable[[], T], *, invalidates: Iterable[str] = ()) -> T:
        result = operation()
        for key in dict.fromkeys(invalidates):
            self.invalidate(key)
        return result

    def subscribe(self, key: str, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._entry(key).listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                listeners = self._entry(key).listeners
                if listener in listeners:
                    listeners.remove(listener)

        return unsubscribe

    def clear(self) -> None:
        """Drop every snapshot (listeners survive)."""
        with self._lock:
            for key, entry in self._entries.items():
                entry.generation += 1
                entry.updated_at = None
                entry.state = QueryState(key=key)
