# src/notion_chores/cli/bootstrap.py

"""
Composition root shared by the CLI and the Lambda handler:
- configures logging from settings,
- builds the Notion client,
- runs one sync cycle.
"""

from __future__ import annotations

import logging

import httpx

from ..chores.sync import SyncReport, run_sync
from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from ..notion.client import NotionClient

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)


async def sync_once(
        *,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
) -> SyncReport:
    """
    Run a single sync using the configured Notion database.

    Keeping settings and the HTTP transport injectable makes this testable without
    touching the environment or the network.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    async with NotionClient.from_settings(settings, transport=transport) as client:
        return await run_sync(client)
