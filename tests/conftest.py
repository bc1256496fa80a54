from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run via `uv run pytest`.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from review_records.cli.deps import reset_settings  # noqa: E402

TITLE = "The case of the forgotten reviews"


@pytest.fixture()
def title() -> str:
    return TITLE


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in (
        "REVIEW_RECORDS_ENV",
        "REVIEW_RECORDS_LOG_LEVEL",
        "REVIEW_RECORDS_DEMO_TITLE",
        "REVIEW_RECORDS_RICH_OUTPUT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
