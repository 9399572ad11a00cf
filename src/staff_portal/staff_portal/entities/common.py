"""Shared pieces of entity definitions: option labels and FK references."""

from __future__ import annotations

from ..api.repository import Record
from ..core.constants import PROJECTS_KEY, STAFF_KEY, TASKS_KEY
from ..records.form import Reference
from ..records.lookups import task_summary


def positive_message(label: str) -> str:
    return f"{label} باید مثبت باشد"


def staff_option(record: Record) -> str:
    return f"{record.get('name', '')} {record.get('family', '')} - {record.get('job_label', '')}"


def project_option(record: Record) -> str:
    return f"{record.get('project_name', '')} - {record.get('employer', '')}"


def is_manager(record: Record) -> bool:
    return "مدیر" in str(record.get("role") or "")


STAFF_REF = Reference(key=STAFF_KEY, label=staff_option)
MANAGER_REF = Reference(key=STAFF_KEY, label=staff_option, where=is_manager)
PROJECT_REF = Reference(key=PROJECTS_KEY, label=project_option)
TASK_REF = Reference(key=TASKS_KEY, label=task_summary)
