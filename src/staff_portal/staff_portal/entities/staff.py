from __future__ import annotations

from ..common.datetime_utils import format_date
from ..common.validators import FieldRules, Schema, positive_number, required
from ..core.constants import STAFF_KEY
from ..core.enums import MaritalStatus, StaffRole, choices
from ..records.form import FormField, FormMessages, FormSpec
from ..records.page import EntityDefinition
from ..records.table import Column
from .common import positive_message

PERSONAL = "اطلاعات شخصی"
JOB = "اطلاعات شغلی"
CONTACT = "اطلاعات تماس"
EDUCATION = "اطلاعات تحصیلی"
IDENTITY = "اطلاعات شناسایی"
DOCUMENTS = "مدارک"

SCHEMA = Schema(
    fields=(
        FieldRules("staff_id", positive_number("کد پرسنلی الزامی است", positive_message("کد پرسنلی")), numeric=True),
        FieldRules("name", required("نام الزامی است", min_len=2, min_message="نام باید حداقل ۲ کاراکتر باشد")),
        FieldRules(
            "family",
            required("نام خانوادگی الزامی است", min_len=2, min_message="نام خانوادگی باید حداقل ۲ کاراکتر باشد"),
        ),
        FieldRules("national_id", positive_number("کد ملی الزامی است", positive_message("کد ملی")), numeric=True),
        FieldRules("father_name", required("نام پدر الزامی است")),
        FieldRules("birth_date", required("تاریخ تولد الزامی است")),
        FieldRules("id_number", positive_number("شماره شناسنامه الزامی است", positive_message("شماره شناسنامه")), numeric=True),
        FieldRules("id_serial", required("سریال شناسنامه الزامی است")),
        FieldRules("id_code", positive_number("کد شناسنامه الزامی است", positive_message("کد شناسنامه")), numeric=True),
        FieldRules("insurance_code", positive_number("کد بیمه الزامی است", positive_message("کد بیمه")), numeric=True),
        FieldRules("job_label", required("عنوان شغلی الزامی است")),
        FieldRules("start_date", required("تاریخ شروع به کار الزامی است")),
        FieldRules("mobile_phone", required("شماره همراه الزامی است")),
        FieldRules("emergency_phone", required("تلفن اضطراری الزامی است")),
        FieldRules("home_phone", required("تلفن منزل الزامی است")),
        FieldRules("education_level", required("سطح تحصیلات الزامی است")),
        FieldRules("study_field", required("رشته تحصیلی الزامی است")),
        FieldRules("home_address", required("آدرس منزل الزامی است")),
        FieldRules("zip_code", positive_number("کد پستی الزامی است", positive_message("کد پستی")), numeric=True),
        FieldRules("recruitment_group", required("گروه پرسنلی الزامی است")),
    )
)

FORM = FormSpec(
    key=STAFF_KEY,
    title_create="افزودن کارمند جدید",
    title_edit="ویرایش اطلاعات کارمند",
    fields=(
        FormField("staff_id", "کد پرسنلی", "number", numeric=True, required=True, section=PERSONAL),
        FormField("name", "نام", required=True, section=PERSONAL),
        FormField("family", "نام خانوادگی", required=True, section=PERSONAL),
        FormField("national_id", "کد ملی", "number", numeric=True, required=True, section=PERSONAL),
        FormField("father_name", "نام پدر", required=True, section=PERSONAL),
        FormField("birth_date", "تاریخ تولد", "date", required=True, section=PERSONAL),
        FormField("marital_status", "وضعیت تاهل", "select", choices=choices(MaritalStatus), section=PERSONAL),
        FormField("role", "نقش", "select", choices=choices(StaffRole), section=PERSONAL),
        FormField("job_label", "عنوان شغلی", required=True, section=JOB),
        FormField("start_date", "تاریخ شروع به کار", "date", required=True, section=JOB),
        FormField("leave_date", "تاریخ ترک کار", "date", section=JOB),
        FormField("recruitment_group", "گروه پرسنلی", required=True, section=JOB),
        FormField("insurance_code", "کد بیمه", "number", numeric=True, required=True, section=JOB),
        FormField("mobile_phone", "شماره همراه", required=True, section=CONTACT),
        FormField("home_phone", "تلفن منزل", required=True, section=CONTACT),
        FormField("emergency_phone", "تلفن اضطراری", required=True, section=CONTACT),
        FormField("home_address", "آدرس منزل", "textarea", required=True, section=CONTACT),
        FormField("zip_code", "کد پستی", "number", numeric=True, required=True, section=CONTACT),
        FormField("education_level", "سطح تحصیلات", required=True, section=EDUCATION),
        FormField("study_field", "رشته تحصیلی", required=True, section=EDUCATION),
        FormField("id_number", "شماره شناسنامه", "number", numeric=True, required=True, section=IDENTITY),
        FormField("id_serial", "سریال شناسنامه", required=True, section=IDENTITY),
        FormField("id_code", "کد شناسنامه", "number", numeric=True, required=True, section=IDENTITY),
        FormField("interview_form", "فرم مصاحبه", "url", section=DOCUMENTS),
        FormField("contract_form", "فرم قرارداد", "url", section=DOCUMENTS),
        FormField("promissory_note", "سفته", "url", section=DOCUMENTS),
    ),
    schema=SCHEMA,
    messages=FormMessages(
        created="کارمند با موفقیت اضافه شد",
        create_failed="خطا در افزودن کارمند",
        updated="کارمند با موفقیت ویرایش شد",
        update_failed="خطا در ویرایش کارمند",
    ),
    defaults={"role": StaffRole.EXPERT.value, "marital_status": MaritalStatus.SINGLE.value},
)


def columns(_collections):
    return [
        Column("staff_id", "Staff ID"),
        Column("name", "Name"),
        Column("family", "Family"),
        Column("job_label", "Job Title"),
        Column("role", "Role"),
        Column("mobile_phone", "Mobile"),
        Column("start_date", "Start Date", format_date),
    ]


STAFF = EntityDefinition(
    slug="staff",
    title="Staff",
    key=STAFF_KEY,
    columns=columns,
    search_fields=("name", "family", "job_label"),
    form=FORM,
    deleted="کارمند با موفقیت حذف شد",
    delete_failed="خطا در حذف کارمند",
    search_placeholder="جستجوی کارمندان...",
)
