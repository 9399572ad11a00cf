from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from .client import ApiClient
from .repository import Record


class EntityClient:
    """HTTP implementation of EntityRepository for `/api/<collection>/`."""

    def __init__(self, api: ApiClient, collection: str):
        self._api = api
        self.collection = collection.strip("/")

    def _list_path(self) -> str:
        return f"/api/{self.collection}/"

    def _item_path(self, record_id: int) -> str:
        return f"/api/{self.collection}/{int(record_id)}/"

    def list_all(self) -> Sequence[Record]:
        data = self._api.get(self._list_path())
        # Paginated envelope: {"results": [...], "count": n, "next": ..., "previous": ...}
        if isinstance(data, dict) and "results" in data:
            data = data["results"]
        return list(data or [])

    def get_by_id(self, record_id: int) -> Record:
        return self._api.get(self._item_path(record_id))

    def create(self, data: Mapping[str, Any]) -> Optional[Record]:
        return self._api.post(self._list_path(), dict(data))

    def update(self, record_id: int, data: Mapping[str, Any]) -> Optional[Record]:
        return self._api.patch(self._item_path(record_id), dict(data))

    def delete(self, record_id: int) -> None:
        self._api.delete(self._item_path(record_id))


class AuthClient:
    def __init__(self, api: ApiClient):
        self._api = api

    def login(self, email: str, password: str) -> Optional[str]:
        """Returns the credential token from the login response, if any."""
        data = self._api.post("/api/auth/login/", {"email": email, "password": password}) or {}
        return data.get("token") or data.get("access_token")

    def logout(self) -> None:
        self._api.post("/api/auth/logout/")

    def verify(self) -> Any:
        return self._api.get("/api/auth/verify/")
