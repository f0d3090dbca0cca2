# src/notion_chores/chores/properties.py

"""
Typed readers for Notion page properties.

Only the two property types the chore database uses are supported:
- select -> SelectValue
- date   -> datetime.date | None
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from ..core.ports import RawRow
from .errors import MissingPropertyError, PropertyTypeMismatchError

SELECT = "select"
DATE = "date"


@dataclass(frozen=True, slots=True)
class SelectOption:
    id: str
    name: str


@dataclass(frozen=True, slots=True)
class SelectValue:
    """A select property; `option` is None when nothing is chosen."""

    id: str
    option: SelectOption | None = None

    @property
    def name(self) -> str | None:
        return self.option.name if self.option is not None else None


def _check_type(prop: dict[str, Any], expected: str) -> None:
    actual = prop.get("type")
    if actual != expected:
        raise PropertyTypeMismatchError(str(prop.get("id")), expected, str(actual))


def parse_date_value(raw: str) -> date:
    """Calendar date of an ISO date or date-time string, as written (no zone shift)."""
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return datetime.fromisoformat(raw).date()


def get_property(row: RawRow, name: str) -> dict[str, Any]:
    prop = (row.get("properties") or {}).get(name)
    if prop is None:
        raise MissingPropertyError(str(row.get("id")), name)
    return prop


def parse_select_property(prop: dict[str, Any]) -> SelectValue:
    _check_type(prop, SELECT)
    body = prop.get(SELECT)
    if body is None:
        return SelectValue(id=prop["id"])
    return SelectValue(id=prop["id"], option=SelectOption(id=body["id"], name=body["name"]))


def parse_date_property(prop: dict[str, Any]) -> date | None:
    _check_type(prop, DATE)
    body = prop.get(DATE)
    if body is None:
        return None
    return parse_date_value(body["start"])
