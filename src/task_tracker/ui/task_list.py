# src/task_tracker/ui/task_list.py

"""
Task list screen.

Table sections are the distinct due dates (past to future); rows are the tasks
due on that date. The screen holds no task data of its own: every call
re-reads the store's sorted output and re-derives sections from it.

A host (the console connector, or a test) drives it through the lifecycle
hooks on_load / on_show / on_hide and the data-source methods.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime

from ..core.ports import BadgeSink, DefaultsSource, TaskRepo
from ..notifications.badge import update_badge
from ..tasks.grouping import (
    TaskPositionError,
    count_for_date,
    distinct_due_dates,
    local_date,
    task_at,
)
from ..tasks.task_models import Task
from .date_labels import descriptive_due_date_message, screen_title

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass(slots=True, frozen=True)
class TaskRow:
    title: str
    topic: str
    finished: bool

    @property
    def strikethrough(self) -> bool:
        return self.finished


@dataclass(slots=True, frozen=True)
class RowReload:
    section: int
    row: int


@dataclass(slots=True, frozen=True)
class RowRemoval:
    section: int
    row: int


@dataclass(slots=True, frozen=True)
class SectionRemoval:
    section: int


class TaskListScreen:
    def __init__(
        self,
        store: TaskRepo,
        *,
        defaults: DefaultsSource,
        badge_sink: BadgeSink,
        clock: Clock = _local_now,
    ) -> None:
        self._store = store
        self._defaults = defaults
        self._badge_sink = badge_sink
        self._clock = clock
        self.title = ""
        self.editing_enabled = False

    # ---- lifecycle ----

    def on_load(self) -> None:
        self.editing_enabled = True
        self.update_badge()

    def on_show(self) -> None:
        self.refresh_title()
        self.update_badge()

    def on_hide(self) -> None:
        self.update_badge()

    def on_preferred_fonts_changed(self) -> None:
        self.refresh_title()

    # ---- derived data ----

    def tasks(self) -> list[Task]:
        return self._store.list_tasks_sorted_by_due()

    def due_dates(self, tasks: list[Task] | None = None) -> list[date]:
        return distinct_due_dates(self.tasks() if tasks is None else tasks)

    def _date_for_section(self, section: int, tasks: list[Task]) -> date:
        dates = self.due_dates(tasks)
        if section < 0 or section >= len(dates):
            raise TaskPositionError(None, section, len(dates))
        return dates[section]

    def task_at_index(self, section: int, row: int, tasks: list[Task] | None = None) -> Task:
        if tasks is None:
            tasks = self.tasks()
        return task_at(tasks, self._date_for_section(section, tasks), row)

    # ---- table data source ----

    def number_of_sections(self) -> int:
        return len(self.due_dates())

    def number_of_rows(self, section: int) -> int:
        tasks = self.tasks()
        return count_for_date(tasks, self._date_for_section(section, tasks))

    def title_for_header(self, section: int) -> str:
        tasks = self.tasks()
        due = self._date_for_section(section, tasks)
        return descriptive_due_date_message(due, self._today())

    def row(self, section: int, row: int) -> TaskRow:
        task = self.task_at_index(section, row)
        return TaskRow(title=task.title, topic=task.topic, finished=task.finished)

    # ---- user actions ----

    def select_row(self, section: int, row: int) -> RowReload:
        """Flip the finished flag of the tapped task."""
        task = self.task_at_index(section, row)
        with self._store.transaction() as tx:
            finished = tx.toggle_finished(task.id)
        logger.info("Task id=%s finished=%s", task.id, finished)
        self.update_badge()
        return RowReload(section=section, row=row)

    def delete_row(self, section: int, row: int) -> RowRemoval | SectionRemoval:
        """
        Delete the task at (section, row).

        If it was the last task due on its date the whole section goes away and
        the host must remove the section rather than the row.
        """
        tasks = self.tasks()
        task = self.task_at_index(section, row, tasks)
        date_count = len(self.due_dates(tasks))

        with self._store.transaction() as tx:
            tx.delete_task(task.id)
        logger.info("Task id=%s deleted", task.id)

        remaining = self.tasks()
        self.update_badge(remaining)

        if len(self.due_dates(remaining)) == date_count - 1:
            return SectionRemoval(section=section)
        return RowRemoval(section=section, row=row)

    def task_for_edit(self, section: int, row: int) -> Task:
        """The task handed to the edit screen."""
        return self.task_at_index(section, row)

    # ---- helpers ----

    def _today(self) -> date:
        return local_date(self._clock())

    def refresh_title(self) -> str:
        self.title = screen_title(self._today())
        return self.title

    def update_badge(self, tasks: list[Task] | None = None) -> int:
        return update_badge(
            self.tasks() if tasks is None else tasks,
            defaults=self._defaults,
            sink=self._badge_sink,
            now=self._clock(),
        )
