# src/notion_chores/chores/frequency.py

from __future__ import annotations

from datetime import date
from enum import StrEnum

from dateutil.relativedelta import relativedelta

from .errors import UnknownFrequencyError


class Frequency(StrEnum):
    """
    Recurrence labels as they appear in the frequency select field.

    Values are the option names, so `Frequency("週1")` resolves a label directly.
    """

    TWICE_WEEKLY = "週2"
    WEEKLY = "週1"
    BIWEEKLY = "隔週"
    MONTHLY = "月1"

    @property
    def offset(self) -> relativedelta:
        return _OFFSETS[self]

    @classmethod
    def from_label(cls, row_id: str, label: str) -> Frequency:
        try:
            return cls(label)
        except ValueError:
            raise UnknownFrequencyError(row_id, label) from None


# "Twice a week" is approximated as every third day.
_OFFSETS: dict[Frequency, relativedelta] = {
    Frequency.TWICE_WEEKLY: relativedelta(days=3),
    Frequency.WEEKLY: relativedelta(weeks=1),
    Frequency.BIWEEKLY: relativedelta(weeks=2),
    Frequency.MONTHLY: relativedelta(months=1),
}


def add_offset(day: date, frequency: Frequency) -> date:
    """Next due date; month steps clamp to the last day of shorter months."""
    return day + frequency.offset
