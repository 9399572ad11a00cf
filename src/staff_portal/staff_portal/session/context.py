from __future__ import annotations

import logging
from typing import Optional

from ..api.entity_client import AuthClient
from ..core.constants import INVALID_CREDENTIALS
from ..core.enums import SessionState
from ..core.exceptions import AuthenticationError, PortalError
from .token_store import TokenStore

logger = logging.getLogger(__name__)


class SessionContext:
    """Authentication state of one client.

    UNAUTHENTICATED -> VERIFYING -> AUTHENTICATED, and back to UNAUTHENTICATED
    on logout or when the API rejects the credential.
    """

    def __init__(self, auth: AuthClient, tokens: TokenStore, *, state: SessionState = SessionState.UNAUTHENTICATED):
        self._auth = auth
        self._tokens = tokens
        self._state = state

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_authenticated(self) -> bool:
        return self._state == SessionState.AUTHENTICATED

    @property
    def loading(self) -> bool:
        return self._state == SessionState.VERIFYING

    @property
    def token(self) -> Optional[str]:
        return self._tokens.get()

    def start(self) -> SessionState:
        """Verify a stored credential, if any."""
        if not self._tokens.get():
            self._state = SessionState.UNAUTHENTICATED
            return self._state

        self._state = SessionState.VERIFYING
        try:
            self._auth.verify()
        except PortalError as e:
            logger.info("stored credential failed verification: %s", e)
            self._tokens.clear()
            self._state = SessionState.UNAUTHENTICATED
        else:
            self._state = SessionState.AUTHENTICATED
        return self._state

    def login(self, identifier: str, secret: str) -> None:
        try:
            token = self._auth.login(identifier, secret)
        except PortalError as e:
            logger.info("login failed for %s: %s", identifier, e)
            self._state = SessionState.UNAUTHENTICATED
            raise AuthenticationError(INVALID_CREDENTIALS) from e

        if not token:
            logger.warning("login response for %s carried no token", identifier)
            self._state = SessionState.UNAUTHENTICATED
            raise AuthenticationError(INVALID_CREDENTIALS)

        self._tokens.set(token)
        self._state = SessionState.AUTHENTICATED
        logger.info("login ok for %s", identifier)

    def logout(self) -> None:
        try:
            self._auth.logout()
        except PortalError as e:
            logger.warning("logout notification failed: %s", e)
        finally:
            self._tokens.clear()
            self._state = SessionState.UNAUTHENTICATED

    def handle_unauthorized(self) -> None:
        self._tokens.clear()
        self._state = SessionState.UNAUTHENTICATED
