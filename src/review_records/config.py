"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    log_level: str = "WARNING"
    demo_title: str = "The case of the forgotten reviews"
    rich_output: bool = True

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("REVIEW_RECORDS_ENV", cls.environment),
            log_level=os.getenv("REVIEW_RECORDS_LOG_LEVEL", cls.log_level).strip().upper(),
            demo_title=os.getenv("REVIEW_RECORDS_DEMO_TITLE") or cls.demo_title,
            rich_output=_env_bool("REVIEW_RECORDS_RICH_OUTPUT", cls.rich_output),
        )


__all__ = ["AppSettings"]
