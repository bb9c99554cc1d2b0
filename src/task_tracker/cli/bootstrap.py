# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- seeds the badge horizon default on first run,
- wires the store, defaults and badge sink into the task list screen.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..notifications.badge import FileBadgeSink
from ..prefs.defaults_store import BADGE_DAYS_KEY, DefaultsStore
from ..tasks.task_store import TaskStore
from ..ui.task_list import TaskListScreen

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)
    settings.defaults_path.parent.mkdir(parents=True, exist_ok=True)
    settings.badge_path.parent.mkdir(parents=True, exist_ok=True)


def seed_defaults(defaults: DefaultsStore, settings) -> None:
    """Store the configured badge horizon unless the user already picked one."""
    if defaults.has_key(BADGE_DAYS_KEY):
        return
    days = int(getattr(settings, "default_badge_days", 0) or 0)
    if days:
        defaults.set_integer(BADGE_DAYS_KEY, days)
        logger.info("Seeded %s=%s", BADGE_DAYS_KEY, days)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_db_path)
    defaults = DefaultsStore(settings.defaults_path)
    seed_defaults(defaults, settings)
    sink = FileBadgeSink(settings.badge_path)

    return AppState(
        settings=settings,
        task_store=store,
        defaults=defaults,
        badge_sink=sink,
        screen=TaskListScreen(store, defaults=defaults, badge_sink=sink),
    )
