"""Append-only log of purge attempts."""
from __future__ import annotations

from datetime import datetime
from pathlib import Path

from ava_cloudflare.models.purge import PurgeResult


def format_entry(result: PurgeResult, when: datetime | None = None) -> str:
    when = when or datetime.now()
    return f"[{when:%Y-%m-%d %H:%M:%S}] {result.status_label}: {result.message}\n"


def append_entry(log_file: str | Path, result: PurgeResult, when: datetime | None = None) -> None:
    """Append a line for the result, creating the log directory if needed."""
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    with open(log_file, "a", encoding="utf-8") as f:
        f.write(format_entry(result, when))
