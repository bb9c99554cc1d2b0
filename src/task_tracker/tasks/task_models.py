# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(slots=True)
class Task:
    id: int
    title: str
    topic: str
    due_date: date
    finished: bool

    created_at: float = 0.0
    updated_at: float = 0.0


@dataclass(slots=True, frozen=True)
class DueDateGroup:
    """
    Tasks sharing one exact due date, in store order.

    Derived on every refresh; never persisted.
    """

    date: date
    tasks: tuple[Task, ...]

    def __len__(self) -> int:
        return len(self.tasks)
