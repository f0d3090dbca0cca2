# tests/test_entrypoints.py

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path

import httpx
import pytest

from notion_chores import lambda_handler
from notion_chores.chores.errors import MissingPropertyError, NotionError
from notion_chores.chores.sync import SyncReport
from notion_chores.cli import main as cli_main
from notion_chores.cli.bootstrap import sync_once
from notion_chores.config import Settings

from .fakes import make_page


@pytest.fixture()
def quiet_logging(monkeypatch) -> None:
    # setup_logging replaces root handlers, which would fight with pytest's capture.
    monkeypatch.setattr(cli_main, "configure_logging", lambda settings: None)
    monkeypatch.setattr(lambda_handler, "configure_logging", lambda settings: None)


def test_cli_returns_zero_when_run_completes(monkeypatch, settings, quiet_logging) -> None:
    async def fake_sync_once(*, settings=None):
        return SyncReport(total=2, completed=1, failed_ids=("p2",))

    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "sync_once", fake_sync_once)

    assert cli_main.main() == 0


def test_cli_returns_one_when_parse_aborts(monkeypatch, settings, quiet_logging) -> None:
    async def fake_sync_once(*, settings=None):
        raise MissingPropertyError("p1", "頻度")

    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "sync_once", fake_sync_once)

    assert cli_main.main() == 1


def test_cli_returns_one_when_fetch_fails(monkeypatch, settings, quiet_logging) -> None:
    async def fake_sync_once(*, settings=None):
        raise NotionError(401, {"object": "error", "code": "unauthorized", "message": "API token is invalid."})

    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "sync_once", fake_sync_once)

    assert cli_main.main() == 1


def test_cli_returns_one_without_api_key(monkeypatch, settings, quiet_logging) -> None:
    # Real sync_once: the missing credential is reported when the client is built.
    monkeypatch.setattr(cli_main, "get_settings", lambda: replace(settings, notion_api_key=None))

    assert cli_main.main() == 1


@pytest.mark.asyncio
async def test_sync_once_runs_against_configured_database(settings) -> None:
    seen: list[tuple[str, str, object]] = []

    def notion_api(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path, json.loads(request.content)))
        if request.method == "POST":
            page = make_page("p1", status="やった", last_edited_time="2024-03-10T03:00:00.000Z")
            return httpx.Response(200, json={"object": "list", "results": [page]})
        return httpx.Response(200, json={"object": "page", "id": "p1"})

    report = await sync_once(settings=settings, transport=httpx.MockTransport(notion_api))

    assert report.completed == 1
    assert [(method, path) for method, path, _ in seen] == [
        ("POST", "/v1/databases/db123/query"),
        ("PATCH", "/v1/pages/p1"),
    ]
    assert seen[1][2]["properties"]["次にやる日"] == {"date": {"start": "2024-03-17"}}


def test_lambda_handler_returns_done(monkeypatch, settings, quiet_logging) -> None:
    calls: list[Settings] = []

    async def fake_sync_once(*, settings=None):
        calls.append(settings)
        return SyncReport(total=3, marked_todo=1, skipped=2)

    monkeypatch.setattr(lambda_handler, "get_settings", lambda: settings)
    monkeypatch.setattr(lambda_handler, "sync_once", fake_sync_once)

    resp = lambda_handler.handler({}, None)

    assert resp["statusCode"] == 200
    assert resp["body"] == "Done"
    assert resp["headers"]["content-type"].startswith("text/html")
    assert calls == [settings]


def test_lambda_handler_lets_parse_errors_escape(monkeypatch, settings, quiet_logging) -> None:
    async def fake_sync_once(*, settings=None):
        raise MissingPropertyError("p1", "状態")

    monkeypatch.setattr(lambda_handler, "get_settings", lambda: settings)
    monkeypatch.setattr(lambda_handler, "sync_once", fake_sync_once)

    with pytest.raises(MissingPropertyError):
        lambda_handler.handler({}, None)


def test_settings_from_env_prefers_prefixed_names(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("NOTION_API_KEY", "legacy")
    monkeypatch.setenv("NOTION_CHORES_API_KEY", "prefixed")
    monkeypatch.setenv("NOTION_DATABASE_ID", "legacy-db")
    monkeypatch.delenv("NOTION_CHORES_DATABASE_ID", raising=False)
    monkeypatch.setenv("NOTION_CHORES_BASE_URL", "https://example.test/v1/")
    monkeypatch.setenv("NOTION_CHORES_HTTP_TIMEOUT_SECONDS", "not-a-number")
    monkeypatch.setenv("NOTION_CHORES_LOG_DIR", str(tmp_path))

    s = Settings.from_env()

    assert s.notion_api_key == "prefixed"
    assert s.notion_database_id == "legacy-db"
    assert s.notion_base_url == "https://example.test/v1"
    assert s.http_timeout_seconds == 30.0
    assert s.log_dir == tmp_path
