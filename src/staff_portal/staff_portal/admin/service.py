from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..api.repository import Record
from ..core.constants import ADMIN_USERS_KEY
from ..core.exceptions import ApiError, AuthorizationError
from ..records.collections import Collections
from ..records.notices import Notifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserSummary:
    total: int
    active: int
    superusers: int


def summarize_users(users: Sequence[Record]) -> UserSummary:
    return UserSummary(
        total=len(users),
        active=sum(1 for u in users if u.get("is_active")),
        superusers=sum(1 for u in users if u.get("is_superuser")),
    )


class AdminService:
    """Use case: admin user management beyond plain listing."""

    def __init__(self, collections: Collections, notifier: Notifier):
        self._collections = collections
        self._notifier = notifier

    def toggle_user(self, user: Record) -> bool:
        """Flip `is_active` with a partial update."""
        repo = self._collections.repository(ADMIN_USERS_KEY)
        new_value = not bool(user.get("is_active"))
        try:
            self._collections.cache.mutate(
                lambda: repo.update(user["id"], {"is_active": new_value}),
                invalidates=(ADMIN_USERS_KEY,),
            )
        except AuthorizationError:
            self._notifier.error("خطا در تغییر وضعیت کاربر")
            raise
        except ApiError as e:
            logger.warning("toggle user id=%s failed: %s", user.get("id"), e)
            self._notifier.error("خطا در تغییر وضعیت کاربر")
            return False

        self._notifier.success("وضعیت کاربر تغییر کرد")
        return True
