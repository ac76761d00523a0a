"""Timestamped backups written next to a stylesheet before it is overwritten."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from csspruner.errors import FileWriteError


def backup_path(path: str | Path, now: datetime | None = None) -> Path:
    """``styles.css`` -> ``styles.css.backup.20260101T120000123456Z``."""
    stamp = (now or datetime.now(timezone.utc)).strftime("%Y%m%dT%H%M%S%fZ")
    source = Path(path)
    return source.with_name(f"{source.name}.backup.{stamp}")


def create_backup(path: str | Path, content: str) -> Path:
    """Write *content* to a fresh backup file for *path* and return its location."""
    target = backup_path(path)
    try:
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FileWriteError(str(target), str(exc)) from exc
    return target


def write_stylesheet(path: str | Path, content: str) -> None:
    try:
        Path(path).write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FileWriteError(str(path), str(exc)) from exc
