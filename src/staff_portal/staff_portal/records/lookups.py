from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence

from ..api.repository import Record
from ..core.constants import MESSAGE_PREVIEW_CHARS, TASK_PREVIEW_CHARS, UNKNOWN_LABEL

logger = logging.getLogger(__name__)


def find_by_id(records: Sequence[Record], record_id: Any) -> Optional[Record]:
    for record in records:
        if record.get("id") == record_id:
            return record
    return None


def truncate(text: Any, limit: int) -> str:
    if text is None:
        return ""
    s = str(text)
    return s[:limit] + "..." if len(s) > limit else s


def staff_name(record: Record) -> str:
    return f"{record.get('name', '')} {record.get('family', '')}".strip()


def project_name(record: Record) -> str:
    return str(record.get("project_name", ""))


def task_summary(record: Record) -> str:
    return str(record.get("body") or "")[:TASK_PREVIEW_CHARS] + "..."


def foreign_key(
    collection: Callable[[], Sequence[Record]],
    label: Callable[[Record], str],
    *,
    kind: str,
) -> Callable[[Any, Record], str]:
    """Column renderer resolving an id against a cached collection.

    A missing reference renders UNKNOWN_LABEL and is logged, never raised.
    """

    def render(value: Any, _record: Record) -> str:
        if value is None:
            return ""
        match = find_by_id(collection(), value)
        if match is None:
            logger.warning("dangling %s reference id=%s", kind, value)
            return UNKNOWN_LABEL
        return label(match)

    return render


def message_preview(value: Any, _record: Optional[Record] = None) -> str:
    return truncate(value, MESSAGE_PREVIEW_CHARS)


def yes_no(value: Any, _record: Optional[Record] = None) -> str:
    if value is None:
        return ""
    return "بله" if value else "خیر"
