from __future__ import annotations

from typing import Optional


class PortalError(Exception):
    """Base exception for every error the portal reports to the user."""


class ApiError(PortalError):
    """Raised when the remote API answers non-2xx or cannot be reached."""

    def __init__(self, message: str, *, status: Optional[int] = None):
        self.status = status
        self.message = message
        super().__init__(message)


class AuthorizationError(ApiError):
    """Raised when the API rejects the credential (HTTP 401)."""


class AuthenticationError(PortalError):
    """Raised when login credentials are invalid."""
