# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..prefs.defaults_store import DefaultsStore
from ..tasks.task_store import TaskStore
from ..ui.task_list import TaskListScreen
from .ports import BadgeSink


@dataclass
class AppState:
    # Settings live on the state so commands can read paths and app name.
    settings: object

    task_store: TaskStore
    defaults: DefaultsStore
    badge_sink: BadgeSink
    screen: TaskListScreen
