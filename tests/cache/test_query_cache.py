from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.staff_portal.staff_portal.cache.query_cache import QueryCache
from src.staff_portal.staff_portal.core.enums import QueryStatus
from src.staff_portal.staff_portal.core.exceptions import ApiError


def test_read_fetches_once_then_serves_snapshot():
    cache = QueryCache()
    calls = []

    def fetch():
        calls.append(1)
        return [{"id": 1}]

    first = cache.read("staff", fetch)
    second = cache.read("staff", fetch)

    assert first.status == QueryStatus.SUCCESS
    assert second.data == [{"id": 1}]
    assert len(calls) == 1


def test_concurrent_reads_share_one_fetch():
    cache = QueryCache()
    started = threading.Event()
    release = threading.Event()
    calls = []

    def fetch():
        calls.append(1)
        started.set()
        release.wait(timeout=5)
        return ["x"]

    with ThreadPoolExecutor(max_workers=4) as pool:
        first = pool.submit(cache.read, "projects", fetch)
        assert started.wait(timeout=5)
        others = [pool.submit(cache.read, "projects", fetch) for _ in range(3)]
        release.set()
        results = [first.result(timeout=5)] + [f.result(timeout=5) for f in others]

    assert len(calls) == 1
    assert all(r.data == ["x"] for r in results)


def test_invalidate_marks_stale_and_next_read_refetches():
    cache = QueryCache()
    data = iter([["a"], ["a", "b"]])
    cache.read("tasks", lambda: next(data))

    cache.invalidate("tasks")
    assert cache.peek("tasks").stale

    assert cache.read("tasks", lambda: next(data)).data == ["a", "b"]


def test_invalidate_during_fetch_leaves_result_stale():
    cache = QueryCache()

    def fetch():
        cache.invalidate("mails")
        return ["old"]

    state = cache.read("mails", fetch)

    assert state.data == ["old"]
    assert state.stale
    assert cache.read("mails", lambda: ["new"]).data == ["new"]


def test_failed_read_keeps_previous_data():
    cache = QueryCache()
    cache.read("staff", lambda: ["kept"])
    cache.invalidate("staff")

    def boom():
        raise ApiError("down", status=500)

    state = cache.read("staff", boom)

    assert state.is_error
    assert state.data == ["kept"]
    assert str(state.error) == "down"


def test_stale_after_expires_snapshot():
    now = [100.0]
    cache = QueryCache(stale_after=30, clock=lambda: now[0])
    calls = []

    def fetch():
        calls.append(1)
        return []

    cache.read("timesheets", fetch)
    now[0] += 10
    cache.read("timesheets", fetch)
    now[0] += 25
    cache.read("timesheets", fetch)

    assert len(calls) == 2


def test_mutate_invalidates_each_key_once_on_success():
    cache = QueryCache()
    seen = []
    cache.subscribe("tasks", seen.append)
    cache.subscribe("timesheets", seen.append)

    result = cache.mutate(lambda: {"id": 9}, invalidates=("tasks", "timesheets", "tasks"))

    assert result == {"id": 9}
    assert seen == ["tasks", "timesheets"]


def test_mutate_failure_invalidates_nothing():
    cache = QueryCache()
    seen = []
    cache.subscribe("tasks", seen.append)

    def boom():
        raise ApiError("nope", status=400)

    with pytest.raises(ApiError):
        cache.mutate(boom, invalidates=("tasks",))

    assert seen == []


def test_unsubscribe_stops_notifications():
    cache = QueryCache()
    seen = []
    unsubscribe = cache.subscribe("staff", seen.append)

    unsubscribe()
    cache.invalidate("staff")

    assert seen == []


def test_clear_forgets_snapshots():
    cache = QueryCache()
    cache.read("staff", lambda: ["a"])

    cache.clear()

    assert cache.peek("staff").status == QueryStatus.IDLE
    assert cache.peek("staff").data is None


class Abort(BaseException):
    pass


def test_interrupted_fetch_does_not_leave_key_in_flight():
    cache = QueryCache()

    def interrupted():
        raise Abort()

    with pytest.raises(Abort):
        cache.read("staff", interrupted)

    assert cache.peek("staff").status == QueryStatus.ERROR
    state = cache.read("staff", lambda: [{"id": 1}])
    assert state.status == QueryStatus.SUCCESS
    assert state.data == [{"id": 1}]
