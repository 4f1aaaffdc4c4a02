"""Environment-driven settings shared by the API, scripts and dashboard."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]

DEFAULT_DATABASE_URL = "sqlite:///./hotels.db"
DEFAULT_API_BASE_URL = "http://localhost:8000"


def _flag(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "INFO"
    api_base_url: str = DEFAULT_API_BASE_URL
    sql_echo: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv(dotenv_path=ROOT_DIR / ".env", override=False)
        return cls(
            database_url=os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            api_base_url=os.getenv("API_BASE_URL") or DEFAULT_API_BASE_URL,
            sql_echo=_flag(os.getenv("SQL_ECHO")),
        )


__all__ = ["Settings", "ROOT_DIR"]
