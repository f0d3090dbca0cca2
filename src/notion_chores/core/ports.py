# src/notion_chores/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the sync driver.

The driver depends on a Protocol instead of the concrete Notion client.
This keeps the transport swappable and makes testing easier.
"""

from typing import Any, Awaitable, Protocol

RawRow = dict[str, Any]
# A page object as returned by the Notion database query endpoint.

PropertiesPatch = dict[str, Any]
# Partial `properties` mapping for a page update, keyed by field name.


class RecordStore(Protocol):
    """Remote record store holding the chore rows."""

    def fetch_all_rows(self) -> Awaitable[list[RawRow]]: ...

    def update_row_properties(self, row_id: str, patch: PropertiesPatch) -> Awaitable[Any]: ...
