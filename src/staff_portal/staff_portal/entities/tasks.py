from __future__ import annotations

from ..common.datetime_utils import format_date
from ..common.validators import FieldRules, Schema, positive_number, required
from ..core.constants import PROJECTS_KEY, STAFF_KEY, TASKS_KEY
from ..core.enums import TaskState, choices
from ..records.form import FormField, FormMessages, FormSpec
from ..records.lookups import foreign_key, project_name, staff_name
from ..records.page import EntityDefinition
from ..records.table import Column
from .common import PROJECT_REF, STAFF_REF

GENERAL = "اطلاعات کلی وظیفه"
ASSIGNMENT = "تخصیص وظیفه"
SCHEDULE = "پروژه و زمان‌بندی"

SCHEMA = Schema(
    fields=(
        FieldRules("body", required("متن وظیفه الزامی است", min_len=10, min_message="متن وظیفه باید حداقل ۱۰ کاراکتر باشد")),
        FieldRules("ded_line", required("ددلاین الزامی است")),
        FieldRules("evaluation", required("ارزیابی الزامی است")),
        FieldRules("assignor", positive_number("تخصیص دهنده الزامی است"), numeric=True),
        FieldRules("assigned_to", positive_number("تخصیص داده شده به الزامی است"), numeric=True),
        FieldRules("project", positive_number("پروژه الزامی است"), numeric=True),
    )
)

FORM = FormSpec(
    key=TASKS_KEY,
    title_create="افزودن وظیفه جدید",
    title_edit="ویرایش وظیفه",
    fields=(
        FormField("body", "شرح وظیفه", "textarea", required=True, section=GENERAL),
        FormField("state", "وضعیت", "select", choices=choices(TaskState), section=GENERAL),
        FormField("evaluation", "ارزیابی", "number", required=True, section=GENERAL),
        FormField("assignor", "تخصیص دهنده", "select", source=STAFF_REF, numeric=True, required=True, section=ASSIGNMENT),
        FormField(
            "assigned_to", "تخصیص داده شده به", "select", source=STAFF_REF, numeric=True, required=True, section=ASSIGNMENT
        ),
        FormField("project", "پروژه", "select", source=PROJECT_REF, numeric=True, required=True, section=SCHEDULE),
        FormField("ded_line", "ددلاین", "date", required=True, section=SCHEDULE),
        FormField("end_date", "تاریخ پایان", "date", edit_only=True, section=SCHEDULE),
    ),
    schema=SCHEMA,
    messages=FormMessages(
        created="وظیفه با موفقیت اضافه شد",
        create_failed="خطا در افزودن وظیفه",
        updated="وظیفه با موفقیت ویرایش شد",
        update_failed="خطا در ویرایش وظیفه",
    ),
    defaults={"state": TaskState.IN_PROGRESS.value},
)


def columns(collections):
    staff = foreign_key(lambda: collections.items(STAFF_KEY), staff_name, kind="staff")
    project = foreign_key(lambda: collections.items(PROJECTS_KEY), project_name, kind="project")
    return [
        Column("body", "Description"),
        Column("assignor", "Assignor", staff),
        Column("assigned_to", "Assigned To", staff),
        Column("project", "Project", project),
        Column("state", "Status"),
        Column("ded_line", "Deadline", format_date),
        Column("evaluation", "Evaluation"),
    ]


TASKS = EntityDefinition(
    slug="tasks",
    title="Tasks",
    key=TASKS_KEY,
    columns=columns,
    search_fields=("body",),
    form=FORM,
    deleted="وظیفه با موفقیت حذف شد",
    delete_failed="خطا در حذف وظیفه",
    search_placeholder="جستجوی وظایف...",
)
