# src/notion_chores/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No secrets required at import time (the Notion client checks them when built).
- Legacy names (NOTION_API_KEY / NOTION_DATABASE_ID) keep working.

Environment:
- NOTION_CHORES_API_KEY (or NOTION_API_KEY): integration token, sent as a bearer credential.
- NOTION_CHORES_DATABASE_ID (or NOTION_DATABASE_ID): database holding the chores.
- NOTION_CHORES_BASE_URL: API root (default: https://api.notion.com/v1).
- NOTION_CHORES_NOTION_VERSION: Notion-Version header (default: 2022-06-28).
- NOTION_CHORES_HTTP_TIMEOUT_SECONDS: per-request timeout (default: 30).
- NOTION_CHORES_LOG_LEVEL: console log level (default: INFO).
- NOTION_CHORES_LOG_DIR: if set, full DEBUG logs are also written there.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_PREFIX = "NOTION_CHORES"

DEFAULT_BASE_URL = "https://api.notion.com/v1"
DEFAULT_NOTION_VERSION = "2022-06-28"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except ImportError:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Optional[Path]

    # ---- Notion ----
    notion_api_key: Optional[str]
    notion_database_id: Optional[str]
    notion_base_url: str
    notion_version: str
    http_timeout_seconds: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "notion-chores")
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_dir = _env_path(_k("LOG_DIR"))

        notion_api_key = _first_env(_k("API_KEY"), "NOTION_API_KEY", default=None)
        notion_database_id = _first_env(_k("DATABASE_ID"), "NOTION_DATABASE_ID", default=None)
        notion_base_url = _env(_k("BASE_URL"), DEFAULT_BASE_URL).rstrip("/")
        notion_version = _env(_k("NOTION_VERSION"), DEFAULT_NOTION_VERSION)
        http_timeout_seconds = max(1.0, _env_float(_k("HTTP_TIMEOUT_SECONDS"), 30.0))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            notion_api_key=(notion_api_key or "").strip() or None,
            notion_database_id=(notion_database_id or "").strip() or None,
            notion_base_url=notion_base_url,
            notion_version=notion_version,
            http_timeout_seconds=http_timeout_seconds,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
