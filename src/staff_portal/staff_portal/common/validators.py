from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Union

Number = Union[int, float]


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def to_number(value: Any) -> Optional[Number]:
    """Coerce form input into int/float, None when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    s = str(value).strip()
    try:
        return int(s)
    except ValueError:
        pass
    try:
        return float(s)
    except ValueError:
        return None


class Rule(ABC):
    """One declarative constraint on a field."""

    message: str

    @abstractmethod
    def check(self, value: Any) -> bool:
        ...


@dataclass(frozen=True)
class Required(Rule):
    message: str

    def check(self, value: Any) -> bool:
        return not is_blank(value)


@dataclass(frozen=True)
class MinLength(Rule):
    min_len: int
    message: str

    def check(self, value: Any) -> bool:
        return value is not None and len(str(value).strip()) >= self.min_len


@dataclass(frozen=True)
class Numeric(Rule):
    message: str

    def check(self, value: Any) -> bool:
        return to_number(value) is not None


@dataclass(frozen=True)
class Positive(Rule):
    message: str

    def check(self, value: Any) -> bool:
        n = to_number(value)
        return n is not None and n > 0


@dataclass(frozen=True)
class FieldRules:
    name: str
    rules: Sequence[Rule]
    numeric: bool = False


@dataclass(frozen=True)
class Schema:
    """Validates a flat mapping of form values.

    Rules of a field run in order and stop at the first failure. A blank
    optional field (no Required rule) skips its remaining rules.
    """

    fields: Sequence[FieldRules] = field(default_factory=tuple)

    def validate(self, values: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, str]]:
        cleaned: dict[str, Any] = {}
        errors: dict[str, str] = {}

        for f in self.fields:
            value = values.get(f.name)
            required = any(isinstance(r, Required) for r in f.rules)
            if is_blank(value) and not required:
                continue

            for rule in f.rules:
                if not rule.check(value):
                    errors[f.name] = rule.message
                    break
            else:
                if f.numeric:
                    cleaned[f.name] = to_number(value)
                elif isinstance(value, str):
                    cleaned[f.name] = value.strip()
                else:
                    cleaned[f.name] = value

        return cleaned, errors


def required(message: str, *, min_len: Optional[int] = None, min_message: str = "") -> list[Rule]:
    rules: list[Rule] = [Required(message)]
    if min_len:
        rules.append(MinLength(min_len, min_message))
    return rules


def positive_number(message: str, positive_message: str = "") -> list[Rule]:
    return [Required(message), Numeric(positive_message or message), Positive(positive_message or message)]
