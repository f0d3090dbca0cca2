# src/notion_chores/chores/row_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime
from enum import StrEnum
from zoneinfo import ZoneInfo

from ..core.ports import RawRow
from .errors import NoFrequencySetError, UnsupportedRowTypeError
from .frequency import Frequency
from .properties import SelectValue, get_property, parse_date_property, parse_select_property

# Property names in the chores database.
STATUS_FIELD = "状態"
LAST_DONE_FIELD = "最後にやった日"
NEXT_DUE_FIELD = "次にやる日"
FREQUENCY_FIELD = "頻度"

TIMEZONE = ZoneInfo("Asia/Tokyo")


class ChoreStatus(StrEnum):
    """Option names of the status select field."""

    DONE = "やった"
    PENDING = "まだ"
    TODO = "やる"

    @classmethod
    def from_select(cls, value: SelectValue) -> ChoreStatus | None:
        """None for an empty field or an option the sync does not act on."""
        if value.name is None:
            return None
        try:
            return cls(value.name)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class Row:
    id: str
    last_edited: date
    last_done: date | None
    next_due: date | None
    status: SelectValue
    frequency: Frequency


def local_date(timestamp: str, tz: ZoneInfo = TIMEZONE) -> date:
    """Calendar date of an ISO instant as seen in `tz`; a timestamp without offset is UTC."""
    instant = datetime.fromisoformat(timestamp)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    return instant.astimezone(tz).date()


def parse_row(raw: RawRow, tz: ZoneInfo = TIMEZONE) -> Row:
    """
    Validate one page object from a database query into a Row.

    Raises (all ChoreError subclasses):
    - UnsupportedRowTypeError: the object is not a page
    - MissingPropertyError / PropertyTypeMismatchError: schema drift in the database
    - NoFrequencySetError / UnknownFrequencyError: frequency empty or not recognised
    """
    row_id = str(raw.get("id"))
    if raw.get("object") != "page":
        raise UnsupportedRowTypeError(row_id, str(raw.get("object")))

    last_edited = local_date(raw["last_edited_time"], tz)
    status = parse_select_property(get_property(raw, STATUS_FIELD))
    last_done = parse_date_property(get_property(raw, LAST_DONE_FIELD))
    next_due = parse_date_property(get_property(raw, NEXT_DUE_FIELD))
    frequency_value = parse_select_property(get_property(raw, FREQUENCY_FIELD))
    if frequency_value.name is None:
        raise NoFrequencySetError(row_id)

    return Row(
        id=row_id,
        last_edited=last_edited,
        last_done=last_done,
        next_due=next_due,
        status=status,
        frequency=Frequency.from_label(row_id, frequency_value.name),
    )
