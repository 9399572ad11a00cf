from __future__ import annotations

from ..common.datetime_utils import format_date
from ..common.validators import FieldRules, Schema, positive_number, required
from ..core.constants import PROJECTS_KEY, STAFF_KEY, TASKS_KEY, TIMESHEETS_KEY
from ..records.form import FormField, FormMessages, FormSpec
from ..records.lookups import foreign_key, project_name, staff_name, task_summary, yes_no
from ..records.page import EntityDefinition
from ..records.table import Column
from .common import MANAGER_REF, PROJECT_REF, TASK_REF

TIMES = "اطلاعات زمانی"
MISSION = "اطلاعات ماموریت"
ASSIGNMENT = "تخصیص پروژه و وظیفه"

SCHEMA = Schema(
    fields=(
        FieldRules("start_time", required("زمان شروع الزامی است")),
        FieldRules("end_time", required("زمان پایان الزامی است")),
        FieldRules("description", required("توضیحات الزامی است", min_len=5, min_message="توضیحات باید حداقل ۵ کاراکتر باشد")),
        FieldRules("project", positive_number("پروژه الزامی است"), numeric=True),
        FieldRules("manager", positive_number("مدیر الزامی است"), numeric=True),
        FieldRules("task", positive_number("وظیفه الزامی است"), numeric=True),
    )
)

FORM = FormSpec(
    key=TIMESHEETS_KEY,
    title_create="افزودن تایم‌شیت جدید",
    title_edit="ویرایش تایم‌شیت",
    fields=(
        FormField("start_time", "زمان شروع", "time", required=True, section=TIMES),
        FormField("end_time", "زمان پایان", "time", required=True, section=TIMES),
        FormField("description", "توضیحات", "textarea", required=True, section=TIMES),
        FormField("mission", "این کار شامل ماموریت است", "checkbox", section=MISSION),
        FormField("mission_duration", "طول زمان ماموریت", section=MISSION),
        FormField("verified_duration_mission", "طول زمان تایید شده ماموریت", section=MISSION),
        FormField("project", "پروژه", "select", source=PROJECT_REF, numeric=True, required=True, section=ASSIGNMENT),
        FormField("manager", "مدیر", "select", source=MANAGER_REF, numeric=True, required=True, section=ASSIGNMENT),
        FormField("task", "وظیفه", "select", source=TASK_REF, numeric=True, required=True, section=ASSIGNMENT),
    ),
    schema=SCHEMA,
    messages=FormMessages(
        created="تایم‌شیت با موفقیت اضافه شد",
        create_failed="خطا در افزودن تایم‌شیت",
        updated="تایم‌شیت با موفقیت ویرایش شد",
        update_failed="خطا در ویرایش تایم‌شیت",
    ),
    defaults={"mission": False},
)


def columns(collections):
    return [
        Column("date", "Date", format_date),
        Column("start_time", "Start Time"),
        Column("end_time", "End Time"),
        Column("description", "Description"),
        Column("project", "Project", foreign_key(lambda: collections.items(PROJECTS_KEY), project_name, kind="project")),
        Column("manager", "Manager", foreign_key(lambda: collections.items(STAFF_KEY), staff_name, kind="staff")),
        Column("task", "Task", foreign_key(lambda: collections.items(TASKS_KEY), task_summary, kind="task")),
        Column("mission", "Mission", yes_no),
    ]


TIMESHEETS = EntityDefinition(
    slug="timesheets",
    title="Timesheets",
    key=TIMESHEETS_KEY,
    columns=columns,
    search_fields=("description",),
    form=FORM,
    deleted="تایم‌شیت با موفقیت حذف شد",
    delete_failed="خطا در حذف تایم‌شیت",
    search_placeholder="جستجوی تایم‌شیت‌ها...",
)
