from __future__ import annotations

import pytest
import requests

from src.staff_portal.staff_portal.api.client import ApiClient, ApiConfig
from src.staff_portal.staff_portal.api.entity_client import AuthClient, EntityClient
from src.staff_portal.staff_portal.core.constants import GENERIC_API_ERROR
from src.staff_portal.staff_portal.core.exceptions import ApiError, AuthorizationError
from src.staff_portal.staff_portal.session.token_store import InMemoryTokenStore
from tests.fakes import BASE_URL, FakeHttp


def test_bearer_header_attached_when_token_present(api, http):
    http.respond("GET", "/api/staffs/", 200, [])

    api.get("/api/staffs/")

    assert http.calls[0].headers["Authorization"] == "Bearer tok-123"


def test_no_authorization_header_without_token(http):
    api = ApiClient(ApiConfig(base_url=BASE_URL), token_provider=InMemoryTokenStore().get, http=http)
    http.respond("GET", "/api/staffs/", 200, [])

    api.get("/api/staffs/")

    assert "Authorization" not in http.calls[0].headers


def test_401_runs_hook_then_raises(api, http, tokens):
    http.respond("GET", "/api/tasks/", 401, {"message": "token expired"})

    with pytest.raises(AuthorizationError) as exc:
        api.get("/api/tasks/")

    assert exc.value.status == 401
    assert tokens.get() is None


def test_error_message_taken_from_body(api, http):
    http.respond("POST", "/api/projects/", 400, {"message": "duplicate project"})

    with pytest.raises(ApiError) as exc:
        api.post("/api/projects/", {"project_name": "x"})

    assert str(exc.value) == "duplicate project"
    assert exc.value.status == 400


def test_error_message_falls_back_to_generic(api, http):
    http.respond("DELETE", "/api/tasks/7/", 500, {"detail": "boom"})

    with pytest.raises(ApiError) as exc:
        api.delete("/api/tasks/7/")

    assert str(exc.value) == GENERIC_API_ERROR
    assert exc.value.status == 500


def test_transport_failure_becomes_api_error(api, http):
    http.fail("GET", "/api/mails/", requests.ConnectionError("refused"))

    with pytest.raises(ApiError) as exc:
        api.get("/api/mails/")

    assert str(exc.value) == GENERIC_API_ERROR
    assert exc.value.status is None


def test_empty_success_returns_none(api, http):
    http.respond("DELETE", "/api/tasks/7/", 204)

    assert api.delete("/api/tasks/7/") is None


def test_entity_client_paths_and_pagination(api, http):
    client = EntityClient(api, "staffs")
    http.respond("GET", "/api/staffs/", 200, {"count": 1, "next": None, "previous": None, "results": [{"id": 1}]})
    http.respond("PATCH", "/api/staffs/1/", 200, {"id": 1, "name": "Ali"})

    assert client.list_all() == [{"id": 1}]
    assert client.update(1, {"name": "Ali"}) == {"id": 1, "name": "Ali"}
    assert http.calls[-1].json == {"name": "Ali"}


def test_entity_client_plain_list(api, http):
    http.respond("GET", "/api/projects/", 200, [{"id": 1}, {"id": 2}])

    assert EntityClient(api, "/projects/").list_all() == [{"id": 1}, {"id": 2}]


def test_auth_client_accepts_access_token_field(api, http):
    http.respond("POST", "/api/auth/login/", 200, {"access_token": "jwt"})

    assert AuthClient(api).login("a@b.c", "pw") == "jwt"
    assert http.calls[0].json == {"email": "a@b.c", "password": "pw"}


def test_trailing_slash_in_base_url_is_ignored(tokens):
    http = FakeHttp()
    api = ApiClient(ApiConfig(base_url=BASE_URL + "/"), token_provider=tokens.get, http=http)
    http.respond("GET", "/api/auth/verify/", 200, {"ok": True})

    assert api.get("/api/auth/verify/") == {"ok": True}


def test_entity_client_get_by_id(api, http):
    http.respond("GET", "/api/mails/3/", 200, {"id": 3, "subject": "Invoice"})

    assert EntityClient(api, "mails").get_by_id(3)["subject"] == "Invoice"
