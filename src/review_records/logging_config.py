"""Logging setup for command-line entry points."""

from __future__ import annotations

import logging

from review_records.config import AppSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        msg = f"Unknown log level: {name!r}"
        raise ValueError(msg)
    return level


def configure_logging(settings: AppSettings) -> None:
    """Apply ``settings.log_level`` to the root logger."""

    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(resolve_level(settings.log_level))
