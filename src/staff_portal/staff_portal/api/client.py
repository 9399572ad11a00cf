from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import requests

from ..core.constants import DEFAULT_API_TIMEOUT, GENERIC_API_ERROR
from ..core.exceptions import ApiError, AuthorizationError

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Optional[str]]


@dataclass
class ApiConfig:
    base_url: str
    timeout: float = DEFAULT_API_TIMEOUT


class ApiClient:
    """JSON-over-HTTP transport shared by every Entity Client.

    Note: One `requests.Session` per process; the bearer token is resolved per
    request so each user's session cookie decides which credential is sent.
    """

    def __init__(
        self,
        config: ApiConfig,
        *,
        token_provider: TokenProvider = lambda: None,
        on_unauthorized: Optional[Callable[[], None]] = None,
        http: Optional[requests.Session] = None,
    ):
        self._config = config
        self._token_provider = token_provider
        self._on_unauthorized = on_unauthorized
        self._http = http or requests.Session()

    @property
    def base_url(self) -> str:
        return self._config.base_url.rstrip("/")

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        token = self._token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return GENERIC_API_ERROR
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return GENERIC_API_ERROR

    def request(self, method: str, path: str, payload: Optional[Any] = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self._http.request(
                method,
                url,
                json=payload,
                headers=self._headers(),
                timeout=self._config.timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ApiError(GENERIC_API_ERROR) from e

        if response.status_code == 401:
            logger.info("%s %s rejected credential (401)", method, url)
            if self._on_unauthorized:
                self._on_unauthorized()
            raise AuthorizationError(self._error_message(response), status=401)

        if not 200 <= response.status_code < 300:
            message = self._error_message(response)
            logger.warning("%s %s -> %s: %s", method, url, response.status_code, message)
            raise ApiError(message, status=response.status_code)

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(GENERIC_API_ERROR, status=response.status_code) from e

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, payload: Optional[Any] = None) -> Any:
        return self.request("POST", path, payload)

    def patch(self, path: str, payload: Any) -> Any:
        return self.request("PATCH", path, payload)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)
