# src/notion_chores/lambda_handler.py

from __future__ import annotations

import asyncio
import logging

from .cli.bootstrap import configure_logging, sync_once
from .config import get_settings

logger = logging.getLogger(__name__)


def handler(event, context):
    """
    AWS Lambda entrypoint (scheduled or behind an HTTP API).

    Errors are not caught: a failed invocation should show up as failed.
    """
    settings = get_settings()
    configure_logging(settings)

    report = asyncio.run(sync_once(settings=settings))
    logger.info("Lambda sync done: %d rows, %d failed", report.total, report.failed)

    return {
        "body": "Done",
        "headers": {"content-type": "text/html;charset=utf8"},
        "statusCode": 200,
    }
