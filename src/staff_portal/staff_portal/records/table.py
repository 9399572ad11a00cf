from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

from ..api.repository import Record

Renderer = Callable[[Any, Record], str]

VIEW = "view"
EDIT = "edit"
DELETE = "delete"

ACTIONS_LABEL = "عملیات"


@dataclass(frozen=True)
class Column:
    field: str
    label: str
    render: Optional[Renderer] = None

    def cell(self, record: Record) -> str:
        value = record.get(self.field)
        if self.render is not None:
            return self.render(value, record)
        return "" if value is None else str(value)


@dataclass(frozen=True)
class Row:
    id: Any
    cells: tuple[str, ...]
    actions: tuple[str, ...] = ()
    record: Record = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class TableView:
    headers: tuple[str, ...]
    rows: tuple[Row, ...]
    has_actions: bool
    placeholder: bool = False


class RecordTable:
    """Maps records + column descriptors into a TableView.

    Rows keep input order. With any action registered, every row gets a
    trailing action cell.
    """

    def __init__(self, columns: Sequence[Column], actions: Sequence[str] = ()):
        self.columns = tuple(columns)
        self.actions = tuple(a for a in (VIEW, EDIT, DELETE) if a in actions)

    def build(self, records: Sequence[Record], *, loading: bool = False) -> TableView:
        headers = tuple(c.label for c in self.columns)
        if self.actions:
            headers += (ACTIONS_LABEL,)

        if loading:
            return TableView(headers=headers, rows=(), has_actions=bool(self.actions), placeholder=True)

        rows = tuple(
            Row(
                id=record.get("id"),
                cells=tuple(c.cell(record) for c in self.columns),
                actions=self.actions,
                record=record,
            )
            for record in records
        )
        return TableView(headers=headers, rows=rows, has_actions=bool(self.actions))
