from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value[:10], "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an API timestamp (ISO 8601, optional trailing Z)."""
    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    return datetime.fromisoformat(v)


def format_date(value: Any, _record: Any = None) -> str:
    """Column renderer: YYYY/MM/DD, empty for missing values."""
    if value is None or value == "":
        return ""
    try:
        return parse_iso_date(str(value)).strftime("%Y/%m/%d")
    except ValueError:
        return str(value)


def format_datetime(value: Any, _record: Any = None) -> str:
    if value is None or value == "":
        return ""
    try:
        return parse_iso_datetime(str(value)).strftime("%Y/%m/%d %H:%M")
    except ValueError:
        return str(value)


def to_input_date(value: Optional[str]) -> str:
    """Value for an <input type=date> from an API date/datetime string."""
    if not value:
        return ""
    return str(value)[:10]
