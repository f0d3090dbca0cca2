# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from notion_chores.config import Settings


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings built directly rather than from the environment,
    to keep unit tests isolated and deterministic.
    """
    return Settings(
        app_name="notion-chores-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        notion_api_key="secret_test",
        notion_database_id="db123",
        notion_base_url="https://notion.test/v1",
        notion_version="2022-06-28",
        http_timeout_seconds=5.0,
    )


@pytest.fixture()
def today() -> date:
    return date(2024, 3, 20)
