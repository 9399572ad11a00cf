from __future__ import annotations

from ..api.repository import Record
from ..common.datetime_utils import format_date
from ..core.constants import ADMIN_GROUPS_KEY, ADMIN_PERMISSIONS_KEY, ADMIN_USERS_KEY
from ..records.page import EntityDefinition
from ..records.table import DELETE, Column


def full_name(record: Record) -> str:
    return f"{record.get('first_name') or ''} {record.get('last_name') or ''}"


def user_status(record: Record) -> str:
    if not record.get("is_active"):
        return "غیرفعال"
    if record.get("is_superuser"):
        return "مدیر کل"
    if record.get("is_staff"):
        return "کارمند"
    return "فعال"


def last_login(value, _record=None) -> str:
    return format_date(value) if value else "هرگز"


def user_columns(_collections):
    return [
        Column("username", "نام کاربری"),
        Column("first_name", "نام", lambda _v, r: full_name(r).strip()),
        Column("email", "ایمیل"),
        Column("is_active", "وضعیت", lambda _v, r: user_status(r)),
        Column("last_login", "آخرین ورود", last_login),
    ]


def group_columns(_collections):
    return [
        Column("name", "نام گروه"),
        Column("permissions", "تعداد مجوزها", lambda v, _r: str(len(v or []))),
    ]


def permission_columns(_collections):
    return [
        Column("name", "نام مجوز"),
        Column("codename", "کد"),
        Column("content_type", "نوع محتوا"),
    ]


USERS = EntityDefinition(
    slug="users",
    title="کاربران",
    key=ADMIN_USERS_KEY,
    columns=user_columns,
    search_fields=("username", "email", full_name),
    deleted="کاربر با موفقیت حذف شد",
    delete_failed="خطا در حذف کاربر",
    actions=(DELETE,),
)

GROUPS = EntityDefinition(
    slug="groups",
    title="گروه‌ها",
    key=ADMIN_GROUPS_KEY,
    columns=group_columns,
    search_fields=("name",),
    actions=(),
)

PERMISSIONS = EntityDefinition(
    slug="permissions",
    title="مجوزها",
    key=ADMIN_PERMISSIONS_KEY,
    columns=permission_columns,
    search_fields=("name", "codename"),
    actions=(),
)

ADMIN_TABS = (USERS, GROUPS, PERMISSIONS)
