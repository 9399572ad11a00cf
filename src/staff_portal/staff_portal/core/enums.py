from __future__ import annotations

from enum import Enum


class StaffRole(str, Enum):
    """Staff roles exactly as the API stores them."""

    CEO = "مدیرعامل"
    EXPERT = "کارشناس"
    SENIOR_MANAGER = "مدیر ارشد"
    CONSULTANT = "مشاور"
    UNIT_MANAGER = "مدیر واحد"
    MIDDLE_MANAGER = "مدیر میانی"


class MaritalStatus(str, Enum):
    MARRIED = "متاهل"
    SINGLE = "مجرد"


class ServiceType(str, Enum):
    RENOVATION = "بازسازی"
    RETROFIT = "مقاوم سازی"
    NEW_DESIGN = "طراحی از ابتدا"
    RENOVATION_RETROFIT = "بازسازی و مقاوم‌سازی"
    SUPERVISE_NEW_DESIGN = "نظارت بر طراحی از ابتدا"
    SUPERVISE_RETROFIT = "نظارت بر مقاوم‌سازی"
    SUPERVISE_RENOVATION_RETROFIT = "نظارت بر بازسازی و مقاوم‌سازی"
    RAPID_ASSESSMENT = "ارزیابی سریع"
    RISK_ANALYSIS = "تحلیل ریسک"
    SIDE_SERVICES = "خدمات جانبی"


class EmployerType(str, Enum):
    GOVERNMENT = "دولتی"
    SEMI_GOVERNMENT = "خصولتی"
    PRIVATE = "شخصی"


class TaskState(str, Enum):
    """Task lifecycle states."""

    IN_PROGRESS = "در حال انجام"
    DONE = "اتمام"
    CANCELLED = "لغو"


class MailType(str, Enum):
    OUTGOING = "صادره"
    INCOMING = "دریافتی"


class MailState(str, Enum):
    UNDER_REVIEW = "در حال بررسی"
    DONE = "انجام شده"
    ARCHIVED = "بایگانی"
    DELETED = "حذف"


class SessionState(str, Enum):
    """States of the per-user session context."""

    UNAUTHENTICATED = "UNAUTHENTICATED"
    VERIFYING = "VERIFYING"
    AUTHENTICATED = "AUTHENTICATED"


class QueryStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


def choices(enum_cls) -> list[tuple[str, str]]:
    """(value, label) pairs for select widgets."""
    return [(m.value, m.value) for m in enum_cls]
