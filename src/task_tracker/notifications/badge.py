# src/task_tracker/notifications/badge.py

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from datetime import date, datetime
from pathlib import Path

from ..core.ports import BadgeSink, DefaultsSource
from ..prefs.defaults_store import BADGE_DAYS_KEY
from ..tasks.grouping import badge_count
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


class MemoryBadgeSink:
    """Keeps the last badge value in memory."""

    def __init__(self) -> None:
        self.count = 0
        self.writes = 0

    def set_badge_count(self, count: int) -> None:
        self.count = int(count)
        self.writes += 1


class FileBadgeSink:
    """
    Writes the badge number to a text file.

    The console host has no OS badge; the file keeps the value observable
    between runs.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def read(self) -> int:
        """Last written count; a missing or unreadable file reads as 0."""
        try:
            return int(self._path.read_text("utf-8").strip() or 0)
        except FileNotFoundError:
            return 0
        except (OSError, ValueError):
            logger.warning("Badge file %s is unreadable; using 0.", self._path)
            return 0

    def set_badge_count(self, count: int) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(f"{int(count)}\n", "utf-8")
        os.replace(tmp, self._path)


def update_badge(
    tasks: Iterable[Task],
    *,
    defaults: DefaultsSource,
    sink: BadgeSink,
    now: datetime | date | None = None,
) -> int:
    """
    Recompute the badge and overwrite the sink with it.

    The previous badge value is never read, so calling this repeatedly is safe.
    """
    if now is None:
        now = datetime.now().astimezone()
    horizon_days = defaults.integer_for_key(BADGE_DAYS_KEY)
    count = badge_count(tasks, horizon_days, now)
    sink.set_badge_count(count)
    logger.debug("Badge updated count=%s horizon_days=%s", count, horizon_days)
    return count
