from __future__ import annotations

import pytest

from src.staff_portal.staff_portal.api.entity_client import AuthClient
from src.staff_portal.staff_portal.core.constants import INVALID_CREDENTIALS
from src.staff_portal.staff_portal.core.enums import SessionState
from src.staff_portal.staff_portal.core.exceptions import AuthenticationError
from src.staff_portal.staff_portal.session.context import SessionContext
from src.staff_portal.staff_portal.session.token_store import InMemoryTokenStore


def test_start_without_token_is_unauthenticated(api, http):
    ctx = SessionContext(AuthClient(api), InMemoryTokenStore())

    assert ctx.start() == SessionState.UNAUTHENTICATED
    assert http.calls == []


def test_start_verifies_stored_token(api, http, tokens):
    http.respond("GET", "/api/auth/verify/", 200, {"id": 1})
    ctx = SessionContext(AuthClient(api), tokens)

    assert ctx.start() == SessionState.AUTHENTICATED
    assert ctx.is_authenticated
    assert not ctx.loading
    assert ctx.token == "tok-123"


def test_loading_only_while_verifying(api, tokens):
    assert SessionContext(AuthClient(api), tokens, state=SessionState.VERIFYING).loading
    assert not SessionContext(AuthClient(api), tokens).loading


def test_rejected_token_is_discarded(api, http, tokens):
    http.respond("GET", "/api/auth/verify/", 401, {"message": "invalid"})
    ctx = SessionContext(AuthClient(api), tokens)

    assert ctx.start() == SessionState.UNAUTHENTICATED
    assert tokens.get() is None


def test_login_stores_token(api, http):
    store = InMemoryTokenStore()
    http.respond("POST", "/api/auth/login/", 200, {"token": "fresh"})
    ctx = SessionContext(AuthClient(api), store)

    ctx.login("a@b.c", "pw")

    assert store.get() == "fresh"
    assert ctx.state == SessionState.AUTHENTICATED


def test_login_failure_raises_invalid_credentials(api, http):
    store = InMemoryTokenStore()
    http.respond("POST", "/api/auth/login/", 400, {"message": "bad password"})
    ctx = SessionContext(AuthClient(api), store)

    with pytest.raises(AuthenticationError) as exc:
        ctx.login("a@b.c", "wrong")

    assert str(exc.value) == INVALID_CREDENTIALS
    assert store.get() is None
    assert not ctx.is_authenticated


def test_login_response_without_token_is_rejected(api, http):
    store = InMemoryTokenStore()
    http.respond("POST", "/api/auth/login/", 200, {"user": {"id": 1}})
    ctx = SessionContext(AuthClient(api), store)

    with pytest.raises(AuthenticationError):
        ctx.login("a@b.c", "pw")

    assert store.get() is None


def test_logout_clears_token_even_when_server_fails(api, http, tokens):
    http.respond("POST", "/api/auth/logout/", 500)
    ctx = SessionContext(AuthClient(api), tokens, state=SessionState.AUTHENTICATED)

    ctx.logout()

    assert tokens.get() is None
    assert ctx.state == SessionState.UNAUTHENTICATED
    assert len(http.calls_to("POST", "/api/auth/logout/")) == 1


def test_handle_unauthorized(api, tokens):
    ctx = SessionContext(AuthClient(api), tokens, state=SessionState.AUTHENTICATED)

    ctx.handle_unauthorized()

    assert tokens.get() is None
    assert not ctx.is_authenticated
