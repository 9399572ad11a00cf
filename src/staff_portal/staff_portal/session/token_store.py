from __future__ import annotations

from typing import Optional, Protocol

from flask import has_request_context, session

from ..core.constants import TOKEN_STORAGE_KEY


class TokenStore(Protocol):
    """Durable client-side storage for one credential token."""

    def get(self) -> Optional[str]:
        raise NotImplementedError

    def set(self, token: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class FlaskSessionTokenStore:
    """Keeps the token in the signed Flask session cookie of the current request.

    Note: Outside a request context there is no client, so reads return None and
    writes are ignored (e.g. scripts using the container directly).
    """

    def __init__(self, key: str = TOKEN_STORAGE_KEY):
        self._key = key

    def get(self) -> Optional[str]:
        if not has_request_context():
            return None
        return session.get(self._key)

    def set(self, token: str) -> None:
        if has_request_context():
            session[self._key] = token

    def clear(self) -> None:
        if has_request_context():
            session.pop(self._key, None)


class InMemoryTokenStore:
    def __init__(self, token: Optional[str] = None):
        self._token = token

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None
