from __future__ import annotations

import pytest

from src.staff_portal.staff_portal.api.client import ApiClient, ApiConfig
from src.staff_portal.staff_portal.container import build_container
from src.staff_portal.staff_portal.main import create_app
from src.staff_portal.staff_portal.records.notices import RecordingNotifier
from src.staff_portal.staff_portal.session.token_store import InMemoryTokenStore
from tests.fakes import BASE_URL, FakeHttp


@pytest.fixture
def http() -> FakeHttp:
    return FakeHttp()


@pytest.fixture
def tokens() -> InMemoryTokenStore:
    return InMemoryTokenStore("tok-123")


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def api(http, tokens) -> ApiClient:
    return ApiClient(ApiConfig(base_url=BASE_URL), token_provider=tokens.get, on_unauthorized=tokens.clear, http=http)


@pytest.fixture
def container(http, tokens, notifier):
    return build_container(api_config={"base_url": BASE_URL}, tokens=tokens, notifier=notifier, http=http)


@pytest.fixture
def app(http):
    # Flask session token store and flash notices, as in production.
    return create_app("config.testing", container=build_container(api_config={"base_url": BASE_URL}, http=http))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def logged_in(client, http):
    http.respond("POST", "/api/auth/login/", 200, {"token": "tok-abc"})
    response = client.post("/login", data={"email": "a@b.c", "password": "pw"})
    assert response.status_code == 302
    return client
