# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.notifications.badge import MemoryBadgeSink
from task_tracker.prefs.defaults_store import DefaultsStore
from task_tracker.tasks.task_store import TaskStore
from task_tracker.ui.task_list import TaskListScreen

from .fakes import FixedClock

NOW = datetime(2024, 1, 9, 15, 30)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="task-tracker-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        defaults_path=tmp_path / "defaults.json",
        badge_path=tmp_path / "badge.txt",
        default_badge_days=0,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_db_path)


@pytest.fixture()
def defaults(settings: SimpleNamespace) -> DefaultsStore:
    return DefaultsStore(settings.defaults_path)


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    store: TaskStore,
    defaults: DefaultsStore,
    clock: FixedClock,
) -> AppState:
    """
    AppState with a fixed clock and an in-memory badge.

    NOTE: the SQLite store is real; its ordering and transactions are part of
    what we want to test.
    """
    sink = MemoryBadgeSink()
    return AppState(
        settings=settings,
        task_store=store,
        defaults=defaults,
        badge_sink=sink,
        screen=TaskListScreen(store, defaults=defaults, badge_sink=sink, clock=clock),
    )
