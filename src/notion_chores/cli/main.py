# src/notion_chores/cli/main.py

"""
CLI entrypoint.

Initializes logging, runs one sync against the configured database and exits:
- 0 when the run completed (individual write-back failures are only logged),
- 1 when the run aborted (configuration, fetch or row parse error).
"""

from __future__ import annotations

import asyncio
import logging
import sys

from ..chores.errors import ChoreError
from ..config import get_settings
from .bootstrap import configure_logging, sync_once

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    configure_logging(settings)

    logger.info("Starting %s...", settings.app_name)

    try:
        report = asyncio.run(sync_once(settings=settings))
    except ChoreError:
        logger.exception("Sync aborted.")
        return 1
    except Exception:
        logger.exception("Sync aborted by an unexpected error.")
        return 1

    if report.failed:
        logger.warning("Rows not updated: %s", ", ".join(report.failed_ids))
    return 0


if __name__ == "__main__":
    sys.exit(main())
