# src/notion_chores/chores/sync.py

from __future__ import annotations

"""
Sync driver.

One run:
- fetches every row of the database in a single query,
- parses all rows up front (a malformed row aborts the run),
- decides and writes back each row strictly in fetch order,
- logs and skips rows whose write-back fails.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from zoneinfo import ZoneInfo

from ..core.ports import RecordStore
from .row_models import TIMEZONE, ChoreStatus, parse_row
from .row_state import ActionKind, decide, today_in

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class SyncReport:
    total: int = 0
    completed: int = 0
    marked_todo: int = 0
    skipped: int = 0
    failed_ids: tuple[str, ...] = field(default_factory=tuple)

    @property
    def failed(self) -> int:
        return len(self.failed_ids)


async def run_sync(
        store: RecordStore,
        *,
        tz: ZoneInfo = TIMEZONE,
        today: date | None = None,
) -> SyncReport:
    """
    Run one sync cycle against `store`.

    `today` defaults to the current date in `tz`, evaluated once per run.
    ChoreError from parsing and any error from the fetch propagate to the caller.
    """
    raw_rows = await store.fetch_all_rows()
    logger.debug("Fetched %d rows", len(raw_rows))

    rows = [parse_row(raw, tz) for raw in raw_rows]
    if today is None:
        today = today_in(tz)

    completed = 0
    marked_todo = 0
    skipped = 0
    failed_ids: list[str] = []

    for row in rows:
        if ChoreStatus.from_select(row.status) == ChoreStatus.PENDING:
            logger.info("Checking %s for if it's past the due date...", row.id)

        action = decide(row, today)
        if action is None:
            skipped += 1
            continue

        if action.kind == ActionKind.COMPLETE:
            logger.info("Updating %s as completed...", action.row.id)
        else:
            logger.info("Updating %s as to-do.", action.row.id)

        try:
            await store.update_row_properties(action.row.id, action.patch)
        except Exception:
            logger.exception("Failed to update row %s", action.row.id)
            failed_ids.append(action.row.id)
            continue

        if action.kind == ActionKind.COMPLETE:
            completed += 1
        else:
            marked_todo += 1

    report = SyncReport(
        total=len(rows),
        completed=completed,
        marked_todo=marked_todo,
        skipped=skipped,
        failed_ids=tuple(failed_ids),
    )
    logger.info(
        "Sync finished: total=%d completed=%d todo=%d skipped=%d failed=%d",
        report.total,
        report.completed,
        report.marked_todo,
        report.skipped,
        report.failed,
    )
    return report
