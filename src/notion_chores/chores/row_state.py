# src/notion_chores/chores/row_state.py

from __future__ import annotations

"""
Per-row state transitions.

Nothing is persisted besides the row's own status/date fields, so every cycle
re-derives the transition from the current values:

- DONE    -> PENDING, last done = last edited date, next due = last edited + frequency
- PENDING -> TODO when the next due date is missing or has been reached
- anything else -> no change

The decision is pure; the sync driver performs the write-back.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from zoneinfo import ZoneInfo

from ..core.ports import PropertiesPatch
from .frequency import add_offset
from .row_models import (
    LAST_DONE_FIELD,
    NEXT_DUE_FIELD,
    STATUS_FIELD,
    TIMEZONE,
    ChoreStatus,
    Row,
)


class ActionKind(StrEnum):
    COMPLETE = "complete"
    TODO = "todo"


@dataclass(slots=True, frozen=True)
class RowAction:
    """What the sync wants to write back for one row."""

    row: Row
    kind: ActionKind
    patch: PropertiesPatch


def today_in(tz: ZoneInfo = TIMEZONE, now: datetime | None = None) -> date:
    now = now or datetime.now(tz)
    return now.astimezone(tz).date()


def _select(name: str) -> dict:
    return {"select": {"name": name}}


def _date(day: date) -> dict:
    return {"date": {"start": day.isoformat()}}


def completed_patch(row: Row) -> PropertiesPatch:
    # The last edit is taken as the moment the chore was done.
    return {
        STATUS_FIELD: _select(ChoreStatus.PENDING),
        LAST_DONE_FIELD: _date(row.last_edited),
        NEXT_DUE_FIELD: _date(add_offset(row.last_edited, row.frequency)),
    }


def todo_patch() -> PropertiesPatch:
    return {STATUS_FIELD: _select(ChoreStatus.TODO)}


def is_due(row: Row, today: date) -> bool:
    """A row without a next due date is always due; the due date itself counts."""
    return row.next_due is None or today >= row.next_due


def decide(row: Row, today: date) -> RowAction | None:
    status = ChoreStatus.from_select(row.status)

    if status == ChoreStatus.DONE:
        return RowAction(row=row, kind=ActionKind.COMPLETE, patch=completed_patch(row))

    if status == ChoreStatus.PENDING and is_due(row, today):
        return RowAction(row=row, kind=ActionKind.TODO, patch=todo_patch())

    return None
