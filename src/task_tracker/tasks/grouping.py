# src/task_tracker/tasks/grouping.py

from __future__ import annotations

"""
Due-date grouping.

Pure helpers that turn the store's "all tasks sorted by due date" output into:
- the ordered list of distinct due dates (one table section each),
- per-date task counts and positional lookups (table rows),
- the badge count of unfinished tasks that are overdue or due soon.

Nothing here sorts, caches or mutates tasks. Callers re-run these on every refresh.
"""

from collections.abc import Callable, Hashable, Iterable, Sequence
from datetime import date, datetime
from typing import TypeVar

from .task_models import DueDateGroup, Task

K = TypeVar("K", bound=Hashable)


class TaskPositionError(IndexError):
    """Row position outside the tasks due on a given date."""

    def __init__(self, due_date: date | None, position: int, size: int) -> None:
        self.due_date = due_date
        self.position = position
        self.size = size
        super().__init__(f"position {position} out of range for {due_date} (size={size})")


def due_date_of(task: Task) -> date:
    return task.due_date


def distinct_due_dates(
    tasks: Iterable[Task],
    key: Callable[[Task], K] = due_date_of,  # type: ignore[assignment]
) -> list[K]:
    """
    Distinct keys in first-seen order.

    With input sorted ascending by due date (the store guarantees it) this is
    also chronological order.
    """
    seen: set[K] = set()
    out: list[K] = []
    for task in tasks:
        k = key(task)
        if k in seen:
            continue
        seen.add(k)
        out.append(k)
    return out


def tasks_for_date(tasks: Iterable[Task], due_date: date) -> list[Task]:
    return [t for t in tasks if t.due_date == due_date]


def count_for_date(tasks: Iterable[Task], due_date: date) -> int:
    return sum(1 for t in tasks if t.due_date == due_date)


def task_at(tasks: Iterable[Task], due_date: date, position: int) -> Task:
    """
    The `position`-th task due on `due_date`.

    Negative positions are rejected rather than indexed from the end.
    """
    group = tasks_for_date(tasks, due_date)
    if position < 0 or position >= len(group):
        raise TaskPositionError(due_date, position, len(group))
    return group[position]


def group_by_due_date(tasks: Sequence[Task]) -> list[DueDateGroup]:
    buckets: dict[date, list[Task]] = {}
    for task in tasks:
        buckets.setdefault(task.due_date, []).append(task)
    return [DueDateGroup(date=d, tasks=tuple(buckets[d])) for d in distinct_due_dates(tasks)]


def local_date(now: datetime | date) -> date:
    if isinstance(now, datetime):
        if now.tzinfo is not None:
            now = now.astimezone()
        return now.date()
    return now


def whole_days_between(now: datetime | date, due_date: date) -> int:
    """
    Calendar days from `now` to `due_date`, counted at local midnight.

    Time of day is dropped, so a task due tomorrow is 1 day away whether it is
    00:01 or 23:59. Past due dates give negative values.
    """
    return (due_date - local_date(now)).days


def badge_count(
    tasks: Iterable[Task],
    horizon_days: int | None,
    now: datetime | date,
) -> int:
    """
    Unfinished tasks due within `horizon_days` days of `now`.

    Overdue tasks always count (there is no lower bound). A missing horizon is 0,
    i.e. "due today or overdue".
    """
    horizon = int(horizon_days or 0)
    today = local_date(now)
    return sum(
        1
        for t in tasks
        if not t.finished and whole_days_between(today, t.due_date) <= horizon
    )
