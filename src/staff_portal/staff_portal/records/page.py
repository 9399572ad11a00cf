from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Union

from ..api.repository import Record
from ..cache.query_cache import QueryState
from ..core.exceptions import ApiError, AuthorizationError
from .collections import Collections
from .form import FormSpec, RecordForm
from .notices import Notifier
from .table import DELETE, EDIT, Column, RecordTable, TableView

logger = logging.getLogger(__name__)

SearchField = Union[str, Callable[[Record], Any]]


@dataclass(frozen=True)
class EntityDefinition:
    """Data-driven description of one entity screen."""

    slug: str
    title: str
    key: str
    columns: Callable[[Collections], Sequence[Column]]
    search_fields: Sequence[SearchField]
    form: Optional[FormSpec] = None
    deleted: str = "رکورد با موفقیت حذف شد"
    delete_failed: str = "خطا در حذف رکورد"
    actions: Sequence[str] = (EDIT, DELETE)
    search_placeholder: str = "جستجو..."


def _search_text(record: Record, search_field: SearchField) -> str:
    value = search_field(record) if callable(search_field) else record.get(search_field)
    return "" if value is None else str(value)


def filter_records(records: Sequence[Record], search_fields: Sequence[SearchField], text: str) -> list[Record]:
    """Case-insensitive substring match; never mutates `records`."""
    term = (text or "").lower()
    if not term:
        return list(records)
    return [r for r in records if any(term in _search_text(r, f).lower() for f in search_fields)]


@dataclass(frozen=True)
class PageView:
    title: str
    table: TableView
    search_text: str
    count: int
    error: Optional[str]
    form: Optional[RecordForm]


class PageController:
    """One entity screen: collection read, search filter, table, modal form."""

    def __init__(
        self,
        definition: EntityDefinition,
        collections: Collections,
        notifier: Notifier,
        *,
        search_text: str = "",
    ):
        self.definition = definition
        self._collections = collections
        self._notifier = notifier
        self.search_text = search_text or ""
        self.modal_open = False
        self.editing_record: Optional[Record] = None
        self._form: Optional[RecordForm] = None

    def open_create(self) -> None:
        self.editing_record = None
        self.modal_open = True
        self._form = None

    def open_edit(self, record: Record) -> None:
        self.editing_record = record
        self.modal_open = True
        self._form = None

    def close_modal(self) -> None:
        self.modal_open = False
        self.editing_record = None
        self._form = None

    def form(self) -> Optional[RecordForm]:
        if not self.modal_open or self.definition.form is None:
            return None
        if self._form is None:
            self._form = RecordForm(self.definition.form, self._collections, self._notifier, record=self.editing_record)
        return self._form

    def submit(self, raw: dict) -> bool:
        form = self.form()
        if form is None:
            return False
        if form.submit(raw):
            self.close_modal()
            return True
        return False

    def delete(self, record: Record, *, confirmed: bool) -> bool:
        if not confirmed:
            return False
        repo = self._collections.repository(self.definition.key)
        try:
            self._collections.cache.mutate(lambda: repo.delete(record["id"]), invalidates=(self.definition.key,))
        except AuthorizationError:
            self._notifier.error(self.definition.delete_failed)
            raise
        except ApiError as e:
            logger.warning("%s delete id=%s failed: %s", self.definition.key, record.get("id"), e)
            self._notifier.error(self.definition.delete_failed)
            return False
        self._notifier.success(self.definition.deleted)
        return True

    def state(self) -> QueryState:
        return self._collections.read(self.definition.key)

    def find(self, record_id: int) -> Optional[Record]:
        for record in self.state().data_or([]):
            if record.get("id") == record_id:
                return record
        return None

    def filter(self, records: Sequence[Record]) -> list[Record]:
        return filter_records(records, self.definition.search_fields, self.search_text)

    def view(self) -> PageView:
        state = self.state()
        records = self.filter(state.data_or([]))
        table = RecordTable(self.definition.columns(self._collections), self.definition.actions)
        error = str(state.error) if state.is_error and state.error is not None else None
        return PageView(
            title=self.definition.title,
            # No data and no answer yet: placeholder instead of an empty table.
            table=table.build(records, loading=state.data is None),
            search_text=self.search_text,
            count=len(records),
            error=error,
            form=self.form(),
        )
