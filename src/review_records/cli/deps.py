"""Shared CLI dependency helpers."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from review_records.config import AppSettings
from review_records.logging_config import configure_logging


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return cached settings, reading a local ``.env`` file first if present."""

    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)
    settings = AppSettings.from_env()
    configure_logging(settings)
    return settings


def reset_settings() -> None:
    """Clear the cached settings (useful for tests)."""

    get_settings.cache_clear()


def configure_cli() -> None:
    """Resolve settings once so logging is configured before any command runs."""

    get_settings()
