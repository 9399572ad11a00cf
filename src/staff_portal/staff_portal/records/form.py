from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence

from ..api.repository import Record
from ..common.datetime_utils import to_input_date
from ..common.validators import Schema, is_blank, to_number
from ..core.exceptions import ApiError, AuthorizationError
from .collections import Collections
from .notices import Notifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reference:
    """Select options drawn from a cached collection."""

    key: str
    label: Callable[[Record], str]
    where: Optional[Callable[[Record], bool]] = None


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    widget: str = "text"  # text, textarea, number, date, time, email, url, select, checkbox
    choices: Sequence[tuple[str, str]] = ()
    source: Optional[Reference] = None
    numeric: bool = False
    edit_only: bool = False
    required: bool = False
    section: str = ""


@dataclass(frozen=True)
class FormMessages:
    created: str
    create_failed: str
    updated: str
    update_failed: str


@dataclass(frozen=True)
class FormSpec:
    key: str
    title_create: str
    title_edit: str
    fields: Sequence[FormField]
    schema: Schema
    messages: FormMessages
    defaults: Mapping[str, Any] = field(default_factory=dict)

    def active_fields(self, *, editing: bool) -> list[FormField]:
        return [f for f in self.fields if editing or not f.edit_only]


class RecordForm:
    """Modal editor: create when `record` is None, partial update otherwise."""

    def __init__(
        self,
        spec: FormSpec,
        collections: Collections,
        notifier: Notifier,
        record: Optional[Record] = None,
    ):
        self.spec = spec
        self._collections = collections
        self._notifier = notifier
        self.record = record
        self.values: dict[str, Any] = dict(record) if record else dict(spec.defaults)
        self.errors: dict[str, str] = {}
        self.closed = False

    @property
    def is_edit(self) -> bool:
        return self.record is not None

    @property
    def title(self) -> str:
        return self.spec.title_edit if self.is_edit else self.spec.title_create

    @property
    def fields(self) -> list[FormField]:
        return self.spec.active_fields(editing=self.is_edit)

    def sections(self) -> list[tuple[str, list[FormField]]]:
        """Fields grouped by section, in declaration order."""
        grouped: dict[str, list[FormField]] = {}
        for f in self.fields:
            grouped.setdefault(f.section, []).append(f)
        return list(grouped.items())

    def _collect(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for f in self.fields:
            if f.widget == "checkbox":
                values[f.name] = str(raw.get(f.name, "")).lower() in {"1", "true", "on", "yes"}
                continue
            value = raw.get(f.name) if f.name in raw else self.values.get(f.name)
            if isinstance(value, str):
                value = value.strip()
            if is_blank(value):
                value = None
            elif f.numeric:
                number = to_number(value)
                value = number if number is not None else value
            values[f.name] = value
        return values

    def submit(self, raw: Mapping[str, Any]) -> bool:
        values = self._collect(raw)
        self.values.update(values)

        cleaned, errors = self.spec.schema.validate(values)
        self.errors = errors
        if errors:
            return False

        payload = {**values, **cleaned}
        repo = self._collections.repository(self.spec.key)
        messages = self.spec.messages
        try:
            if self.is_edit:
                record_id = self.record["id"]
                self._collections.cache.mutate(
                    lambda: repo.update(record_id, payload),
                    invalidates=(self.spec.key,),
                )
            else:
                self._collections.cache.mutate(
                    lambda: repo.create(payload),
                    invalidates=(self.spec.key,),
                )
        except AuthorizationError:
            self._notifier.error(messages.update_failed if self.is_edit else messages.create_failed)
            raise
        except ApiError as e:
            logger.warning("%s save failed: %s", self.spec.key, e)
            self._notifier.error(messages.update_failed if self.is_edit else messages.create_failed)
            return False

        self._notifier.success(messages.updated if self.is_edit else messages.created)
        self.closed = True
        return True

    def options(self, f: FormField) -> list[tuple[Any, str]]:
        if f.choices:
            return list(f.choices)
        if f.source is None:
            return []
        records = self._collections.items(f.source.key)
        if f.source.where is not None:
            records = [r for r in records if f.source.where(r)]
        return [(r.get("id"), f.source.label(r)) for r in records]

    def value(self, f: FormField) -> Any:
        value = self.values.get(f.name)
        if f.widget == "date":
            return to_input_date(value)
        if value is None:
            return ""
        return value
