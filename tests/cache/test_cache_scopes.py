from __future__ import annotations

from src.staff_portal.staff_portal.cache.scopes import CacheScopes, fingerprint


def test_each_token_gets_its_own_cache():
    scopes = CacheScopes(token_provider=lambda: None)

    a = scopes.for_token("tok-a")

    assert scopes.for_token("tok-a") is a
    assert scopes.for_token("tok-b") is not a
    assert len(scopes) == 2


def test_current_follows_the_token_provider():
    token = {"value": "tok-a"}
    scopes = CacheScopes(token_provider=lambda: token["value"])
    scopes.current().read("staff", lambda: ["a's row"])

    token["value"] = "tok-b"

    assert scopes.current().peek("staff").data is None


def test_discard_drops_only_that_scope():
    scopes = CacheScopes(token_provider=lambda: None)
    scopes.for_token("tok-a").read("staff", lambda: ["a"])
    kept = scopes.for_token("tok-b")
    kept.read("staff", lambda: ["b"])

    scopes.discard("tok-a")

    assert scopes.for_token("tok-a").peek("staff").data is None
    assert scopes.for_token("tok-b") is kept
    assert kept.peek("staff").data == ["b"]


def test_fingerprint_hides_the_token():
    assert fingerprint(None) == "anonymous"
    assert "tok-a" not in fingerprint("tok-a")
    assert fingerprint("tok-a") == fingerprint("tok-a")
