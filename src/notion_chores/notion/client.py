# src/notion_chores/notion/client.py

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..chores.errors import NotionError
from ..config import DEFAULT_BASE_URL, DEFAULT_NOTION_VERSION, Settings
from ..core.ports import PropertiesPatch, RawRow

logger = logging.getLogger(__name__)


class NotionClient:
    """
    Minimal async Notion API client: one database query and page updates.

    Use as an async context manager so the underlying connection pool is closed:

        async with NotionClient(api_key, database_id) as client:
            rows = await client.fetch_all_rows()
    """

    def __init__(
            self,
            api_key: str,
            database_id: str,
            *,
            base_url: str = DEFAULT_BASE_URL,
            notion_version: str = DEFAULT_NOTION_VERSION,
            timeout_seconds: float = 30.0,
            transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._database_id = database_id
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/") + "/",
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
                "Notion-Version": notion_version,
            },
            timeout=timeout_seconds,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> NotionClient:
        """Build a client from Settings; missing credentials fail here, not at import."""
        if not settings.notion_api_key:
            raise RuntimeError("Notion API key is not set. Set NOTION_CHORES_API_KEY (or NOTION_API_KEY).")
        if not settings.notion_database_id:
            raise RuntimeError(
                "Notion database id is not set. Set NOTION_CHORES_DATABASE_ID (or NOTION_DATABASE_ID)."
            )
        return cls(
            settings.notion_api_key,
            settings.notion_database_id,
            base_url=settings.notion_base_url,
            notion_version=settings.notion_version,
            timeout_seconds=settings.http_timeout_seconds,
            **kwargs,
        )

    async def __aenter__(self) -> NotionClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, payload: dict[str, Any] | None = None) -> Any:
        resp = await self._http.request(method, path, json=payload)
        if resp.status_code != 200:
            try:
                body: Any = resp.json()
            except ValueError:
                body = resp.text
            logger.debug("Notion %s %s -> %s %r", method, path, resp.status_code, body)
            raise NotionError(resp.status_code, body)
        return resp.json()

    async def fetch_all_rows(self) -> list[RawRow]:
        # First page only; the chores database stays well under the page size.
        data = await self._request("POST", f"databases/{self._database_id}/query", {})
        return list(data.get("results") or [])

    async def update_row_properties(self, row_id: str, patch: PropertiesPatch) -> Any:
        return await self._request("PATCH", f"pages/{row_id}", {"properties": patch})
