"""
Application settings.

Values come from the environment; a `.env` file at the project root is loaded
first for local development.

Environment variables:
- SUPABASE_URL: Your Supabase project URL (required when DATA_SOURCE=supabase)
- SUPABASE_KEY: Your Supabase API key (use a server-side key only on the backend)
- DATA_SOURCE: "supabase" (live store) or "fixtures" (in-memory development data)
- ALLOWED_EMAIL_DOMAIN: company domain allowed to sign in to the dashboard
- LOG_LEVEL: logging level name for the API process
- FOLLOW_UP_AFTER_DAYS: days of inactivity before a lead needs follow-up
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PATH = Path(__file__).parent.parent / ".env"

DATA_SOURCE_SUPABASE = "supabase"
DATA_SOURCE_FIXTURES = "fixtures"
DATA_SOURCES = (DATA_SOURCE_SUPABASE, DATA_SOURCE_FIXTURES)


@dataclass(frozen=True)
class Settings:
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    data_source: str = DATA_SOURCE_SUPABASE
    allowed_email_domain: str = "houseofclarence.uk"
    log_level: str = "INFO"
    follow_up_after_days: int = 14

    def __post_init__(self) -> None:
        if self.data_source not in DATA_SOURCES:
            raise ValueError(
                f"DATA_SOURCE must be one of {', '.join(DATA_SOURCES)} (got {self.data_source!r})"
            )
        if self.follow_up_after_days < 0:
            raise ValueError("FOLLOW_UP_AFTER_DAYS must be >= 0")

    @classmethod
    def from_env(cls, env_path: Optional[Path] = ENV_PATH) -> "Settings":
        if env_path is not None:
            load_dotenv(dotenv_path=env_path)

        return cls(
            supabase_url=os.getenv("SUPABASE_URL") or None,
            supabase_key=os.getenv("SUPABASE_KEY") or None,
            data_source=os.getenv("DATA_SOURCE", DATA_SOURCE_SUPABASE).strip().lower(),
            allowed_email_domain=os.getenv("ALLOWED_EMAIL_DOMAIN", "houseofclarence.uk"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            follow_up_after_days=int(os.getenv("FOLLOW_UP_AFTER_DAYS", "14")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read once on first use."""

    return Settings.from_env()


__all__ = ["DATA_SOURCES", "DATA_SOURCE_FIXTURES", "DATA_SOURCE_SUPABASE", "Settings", "get_settings"]
