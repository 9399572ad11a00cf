from __future__ import annotations

from ..common.datetime_utils import format_datetime
from ..common.validators import FieldRules, Schema, positive_number, required
from ..core.constants import MESSAGES_KEY, PROJECTS_KEY, STAFF_KEY
from ..records.form import FormField, FormMessages, FormSpec
from ..records.lookups import foreign_key, message_preview, project_name, staff_name
from ..records.page import EntityDefinition
from ..records.table import Column
from .common import PROJECT_REF, STAFF_REF

SCHEMA = Schema(
    fields=(
        FieldRules("body", required("متن پیام الزامی است", min_len=5, min_message="متن پیام باید حداقل ۵ کاراکتر باشد")),
        FieldRules("sender", positive_number("فرستنده الزامی است"), numeric=True),
        FieldRules("receiver", positive_number("گیرنده الزامی است"), numeric=True),
        FieldRules("project", positive_number("پروژه الزامی است"), numeric=True),
    )
)

FORM = FormSpec(
    key=MESSAGES_KEY,
    title_create="ارسال پیام جدید",
    title_edit="ویرایش پیام",
    fields=(
        FormField("sender", "فرستنده", "select", source=STAFF_REF, numeric=True, required=True, section="فرستنده و گیرنده"),
        FormField("receiver", "گیرنده", "select", source=STAFF_REF, numeric=True, required=True, section="فرستنده و گیرنده"),
        FormField("project", "پروژه", "select", source=PROJECT_REF, numeric=True, required=True, section="پروژه مرتبط"),
        FormField("body", "متن پیام", "textarea", required=True, section="متن پیام"),
    ),
    schema=SCHEMA,
    messages=FormMessages(
        created="پیام با موفقیت ارسال شد",
        create_failed="خطا در ارسال پیام",
        updated="پیام با موفقیت ویرایش شد",
        update_failed="خطا در ویرایش پیام",
    ),
)


def columns(collections):
    staff = foreign_key(lambda: collections.items(STAFF_KEY), staff_name, kind="staff")
    return [
        Column("date", "Date", format_datetime),
        Column("body", "Message", message_preview),
        Column("sender", "Sender", staff),
        Column("receiver", "Receiver", staff),
        Column("project", "Project", foreign_key(lambda: collections.items(PROJECTS_KEY), project_name, kind="project")),
    ]


MESSAGES = EntityDefinition(
    slug="messages",
    title="Messages",
    key=MESSAGES_KEY,
    columns=columns,
    search_fields=("body",),
    form=FORM,
    deleted="پیام با موفقیت حذف شد",
    delete_failed="خطا در حذف پیام",
    search_placeholder="جستجوی پیام‌ها...",
)
