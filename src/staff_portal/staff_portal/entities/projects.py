from __future__ import annotations

from ..common.datetime_utils import format_date
from ..common.validators import FieldRules, Schema, positive_number, required
from ..core.constants import PROJECTS_KEY
from ..core.enums import EmployerType, ServiceType, choices
from ..records.form import FormField, FormMessages, FormSpec
from ..records.page import EntityDefinition
from ..records.table import Column

GENERAL = "اطلاعات کلی پروژه"
PARTIES = "اطلاعات طرف‌های قرارداد"
CONTRACT = "اطلاعات قرارداد"
DATES = "تاریخ‌های مهم"
FINANCE = "اطلاعات مالی"

SCHEMA = Schema(
    fields=(
        FieldRules("project_code", positive_number("کد پروژه الزامی است", "کد پروژه باید مثبت باشد"), numeric=True),
        FieldRules(
            "project_name",
            required("نام پروژه الزامی است", min_len=2, min_message="نام پروژه باید حداقل ۲ کاراکتر باشد"),
        ),
        FieldRules(
            "contract_number",
            positive_number("شماره قرارداد الزامی است", "شماره قرارداد باید مثبت باشد"),
            numeric=True,
        ),
        FieldRules("contract_start_date", required("تاریخ شروع قرارداد الزامی است")),
        FieldRules("contract_notification_date", required("تاریخ ابلاغ قرارداد الزامی است")),
        FieldRules("contract_completion_date", required("تاریخ پایان قرارداد الزامی است")),
        FieldRules("employer", required("کارفرما الزامی است")),
        FieldRules("contractor", required("پیمانکار الزامی است")),
        FieldRules("sajat", required("ساجات الزامی است")),
        FieldRules("contract_row", required("ردیف قرارداد الزامی است")),
        FieldRules("account_settlement", required("تسویه حساب الزامی است")),
        FieldRules("as_date", required("تاریخ تسویه حساب الزامی است")),
    )
)

FORM = FormSpec(
    key=PROJECTS_KEY,
    title_create="افزودن پروژه جدید",
    title_edit="ویرایش پروژه",
    fields=(
        FormField("project_code", "کد پروژه", "number", numeric=True, required=True, section=GENERAL),
        FormField("project_name", "نام پروژه", required=True, section=GENERAL),
        FormField("service_type", "نوع خدمت", "select", choices=choices(ServiceType), section=GENERAL),
        FormField("employer", "کارفرما", required=True, section=PARTIES),
        FormField("contractor", "پیمانکار", required=True, section=PARTIES),
        FormField("employer_type", "نوع کارفرما", "select", choices=choices(EmployerType), section=PARTIES),
        FormField("contract_number", "شماره قرارداد", "number", numeric=True, required=True, section=CONTRACT),
        FormField("contract_row", "ردیف قرارداد", required=True, section=CONTRACT),
        FormField("sajat", "ساجات", required=True, section=CONTRACT),
        FormField("contract_start_date", "تاریخ شروع قرارداد", "date", required=True, section=DATES),
        FormField("contract_notification_date", "تاریخ ابلاغ قرارداد", "date", required=True, section=DATES),
        FormField("contract_completion_date", "تاریخ پایان قرارداد", "date", required=True, section=DATES),
        FormField("account_settlement", "تسویه حساب", required=True, section=FINANCE),
        FormField("as_date", "تاریخ تسویه حساب", "date", required=True, section=FINANCE),
    ),
    schema=SCHEMA,
    messages=FormMessages(
        created="پروژه با موفقیت اضافه شد",
        create_failed="خطا در افزودن پروژه",
        updated="پروژه با موفقیت ویرایش شد",
        update_failed="خطا در ویرایش پروژه",
    ),
    defaults={"service_type": ServiceType.RENOVATION.value, "employer_type": EmployerType.GOVERNMENT.value},
)


def columns(_collections):
    return [
        Column("project_code", "Code"),
        Column("project_name", "Project Name"),
        Column("employer", "Employer"),
        Column("contractor", "Contractor"),
        Column("service_type", "Service Type"),
        Column("contract_start_date", "Start Date", format_date),
        Column("contract_completion_date", "End Date", format_date),
    ]


PROJECTS = EntityDefinition(
    slug="projects",
    title="Projects",
    key=PROJECTS_KEY,
    columns=columns,
    search_fields=("project_name", "employer", "contractor"),
    form=FORM,
    deleted="پروژه با موفقیت حذف شد",
    delete_failed="خطا در حذف پروژه",
    search_placeholder="جستجوی پروژه‌ها...",
)
