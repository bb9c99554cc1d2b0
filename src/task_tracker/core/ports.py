# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the screen and badge code.

The screen depends on Protocols instead of concrete implementations,
so the store, the defaults and the badge target stay swappable in tests.
"""

from collections.abc import Callable
from contextlib import AbstractContextManager
from datetime import date
from typing import Any, Protocol


class TaskWriter(Protocol):
    def update_task(
            self,
            task_id: int,
            *,
            title: str | None = None,
            topic: str | None = None,
            due_date: date | None = None,
            finished: bool | None = None,
    ) -> None: ...

    def set_finished(self, task_id: int, finished: bool) -> None: ...
    def toggle_finished(self, task_id: int) -> bool: ...
    def delete_task(self, task_id: int) -> None: ...


class TaskRepo(Protocol):
    # Read API used by the grouping code
    def list_tasks_sorted_by_due(self) -> list[Any]: ...

    # Write API (scoped transactions)
    def transaction(self) -> AbstractContextManager[TaskWriter]: ...
    def write(self, fn: Callable[[TaskWriter], Any]) -> Any: ...

    def add_task(
            self,
            *,
            title: str,
            due_date: date,
            topic: str = "",
            finished: bool = False,
    ) -> int: ...


class DefaultsSource(Protocol):
    """Persisted integer settings; absent keys read as 0."""
    def integer_for_key(self, key: str) -> int: ...


class BadgeSink(Protocol):
    """Application badge number; each write replaces the previous value."""
    def set_badge_count(self, count: int) -> None: ...
