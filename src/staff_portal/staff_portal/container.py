from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

import requests

from .admin.service import AdminService
from .api.client import ApiClient, ApiConfig
from .api.entity_client import AuthClient, EntityClient
from .api.repository import EntityRepository
from .cache.scopes import CacheScopes
from .core.constants import (
    ADMIN_GROUPS_KEY,
    ADMIN_PERMISSIONS_KEY,
    ADMIN_USERS_KEY,
    DEFAULT_API_BASE_URL,
    DEFAULT_API_TIMEOUT,
    MAILS_KEY,
    MESSAGES_KEY,
    PROJECTS_KEY,
    STAFF_KEY,
    TASKS_KEY,
    TIMESHEETS_KEY,
)
from .core.enums import SessionState
from .dashboard.service import DashboardService
from .records.collections import Collections
from .records.notices import FlashNotifier, Notifier
from .session.context import SessionContext
from .session.token_store import FlaskSessionTokenStore, TokenStore

# Cache key -> API collection path.
COLLECTIONS = {
    STAFF_KEY: "staffs",
    PROJECTS_KEY: "projects",
    TASKS_KEY: "tasks",
    TIMESHEETS_KEY: "timesheets",
    MAILS_KEY: "mails",
    MESSAGES_KEY: "messages",
    ADMIN_USERS_KEY: "admin/users",
    ADMIN_GROUPS_KEY: "admin/groups",
    ADMIN_PERMISSIONS_KEY: "admin/permissions",
}


@dataclass(frozen=True)
class Container:
    api: ApiClient
    auth_client: AuthClient
    tokens: TokenStore
    caches: CacheScopes
    repositories: Mapping[str, EntityRepository]
    collections: Collections
    notifier: Notifier

    dashboard_service: DashboardService
    admin_service: AdminService

    def session_context(self, state: SessionState = SessionState.UNAUTHENTICATED) -> SessionContext:
        return SessionContext(self.auth_client, self.tokens, state=state)


def build_container(
    *,
    api_config: dict,
    cache_stale_seconds: float = 0,
    tokens: Optional[TokenStore] = None,
    notifier: Optional[Notifier] = None,
    http: Optional[requests.Session] = None,
) -> Container:
    config = ApiConfig(
        base_url=str(api_config.get("base_url") or DEFAULT_API_BASE_URL),
        timeout=float(api_config.get("timeout", DEFAULT_API_TIMEOUT)),
    )
    tokens = tokens or FlaskSessionTokenStore()
    notifier = notifier or FlashNotifier()
    caches = CacheScopes(token_provider=tokens.get, stale_after=cache_stale_seconds)

    def on_unauthorized() -> None:
        caches.discard(tokens.get())
        tokens.clear()

    api = ApiClient(config, token_provider=tokens.get, on_unauthorized=on_unauthorized, http=http)
    auth_client = AuthClient(api)

    repositories = {key: EntityClient(api, path) for key, path in COLLECTIONS.items()}
    collections = Collections(caches.current, repositories)

    return Container(
        api=api,
        auth_client=auth_client,
        tokens=tokens,
        caches=caches,
        repositories=repositories,
        collections=collections,
        notifier=notifier,
        dashboard_service=DashboardService(collections),
        admin_service=AdminService(collections, notifier),
    )
