from __future__ import annotations

from ..common.validators import FieldRules, Schema, positive_number, required
from ..core.constants import MAILS_KEY, PROJECTS_KEY, STAFF_KEY
from ..core.enums import MailState, MailType, choices
from ..records.form import FormField, FormMessages, FormSpec
from ..records.lookups import foreign_key, project_name, staff_name
from ..records.page import EntityDefinition
from ..records.table import Column
from .common import PROJECT_REF, STAFF_REF

GENERAL = "اطلاعات کلی نامه"
PARTIES = "فرستنده و گیرنده"
PROJECT = "پروژه مرتبط"
ATTACHMENT = "فایل ضمیمه"

SCHEMA = Schema(
    fields=(
        FieldRules("employer", required("کارفرما الزامی است", min_len=2, min_message="کارفرما باید حداقل ۲ کاراکتر باشد")),
        FieldRules("subject", required("موضوع الزامی است", min_len=5, min_message="موضوع باید حداقل ۵ کاراکتر باشد")),
        FieldRules("body", required("متن نامه الزامی است", min_len=10, min_message="متن نامه باید حداقل ۱۰ کاراکتر باشد")),
        FieldRules("sender", positive_number("فرستنده الزامی است"), numeric=True),
        FieldRules("receiver", positive_number("گیرنده الزامی است"), numeric=True),
        FieldRules("project", positive_number("پروژه الزامی است"), numeric=True),
    )
)

FORM = FormSpec(
    key=MAILS_KEY,
    title_create="افزودن نامه جدید",
    title_edit="ویرایش نامه",
    fields=(
        FormField("employer", "کارفرما", required=True, section=GENERAL),
        FormField("type", "نوع نامه", "select", choices=choices(MailType), section=GENERAL),
        FormField("subject", "موضوع", required=True, section=GENERAL),
        FormField("body", "متن نامه", "textarea", required=True, section=GENERAL),
        FormField("state", "وضعیت", "select", choices=choices(MailState), section=GENERAL),
        FormField("sender", "فرستنده", "select", source=STAFF_REF, numeric=True, required=True, section=PARTIES),
        FormField("receiver", "گیرنده", "select", source=STAFF_REF, numeric=True, required=True, section=PARTIES),
        FormField("project", "پروژه", "select", source=PROJECT_REF, numeric=True, required=True, section=PROJECT),
        FormField("attachment", "فایل ضمیمه", "url", section=ATTACHMENT),
    ),
    schema=SCHEMA,
    messages=FormMessages(
        created="نامه با موفقیت اضافه شد",
        create_failed="خطا در افزودن نامه",
        updated="نامه با موفقیت ویرایش شد",
        update_failed="خطا در ویرایش نامه",
    ),
    defaults={"type": MailType.OUTGOING.value, "state": MailState.UNDER_REVIEW.value},
)


def columns(collections):
    staff = foreign_key(lambda: collections.items(STAFF_KEY), staff_name, kind="staff")
    return [
        Column("subject", "Subject"),
        Column("employer", "Employer"),
        Column("type", "Type"),
        Column("state", "State"),
        Column("sender", "Sender", staff),
        Column("receiver", "Receiver", staff),
        Column("project", "Project", foreign_key(lambda: collections.items(PROJECTS_KEY), project_name, kind="project")),
    ]


MAILS = EntityDefinition(
    slug="mails",
    title="Mails",
    key=MAILS_KEY,
    columns=columns,
    search_fields=("subject", "employer", "body"),
    form=FORM,
    deleted="نامه با موفقیت حذف شد",
    delete_failed="خطا در حذف نامه",
    search_placeholder="جستجوی نامه‌ها...",
)
