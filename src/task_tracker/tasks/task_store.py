# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from collections.abc import Callable, Iterator
from datetime import date
from pathlib import Path
from typing import Any, TypeVar

from .task_models import Task

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _date_to_str(d: date) -> str:
    return d.isoformat()


def _str_to_date(s: str) -> date:
    return date.fromisoformat(str(s)[:10])


class TaskTransaction:
    """
    Writes bound to one open connection.

    Obtained from TaskStore.transaction(); nothing is visible to other readers
    until the surrounding `with` block exits normally.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def _require(self, task_id: int) -> sqlite3.Row:
        row = self._conn.execute(
            "SELECT * FROM tasks WHERE id = ?", (int(task_id),)
        ).fetchone()
        if row is None:
            raise KeyError(task_id)
        return row

    def update_task(
        self,
        task_id: int,
        *,
        title: str | None = None,
        topic: str | None = None,
        due_date: date | None = None,
        finished: bool | None = None,
    ) -> None:
        self._require(task_id)

        fields: list[str] = []
        params: list[Any] = []

        if title is not None:
            if not title.strip():
                raise ValueError("title is required")
            fields.append("title = ?")
            params.append(title.strip())

        if topic is not None:
            fields.append("topic = ?")
            params.append(topic.strip())

        if due_date is not None:
            fields.append("due_date = ?")
            params.append(_date_to_str(due_date))

        if finished is not None:
            fields.append("finished = ?")
            params.append(1 if finished else 0)

        if not fields:
            return

        fields.append("updated_at = ?")
        params.append(time.time())
        params.append(int(task_id))

        self._conn.execute(f"UPDATE tasks SET {', '.join(fields)} WHERE id = ?", params)

    def set_finished(self, task_id: int, finished: bool) -> None:
        self.update_task(task_id, finished=finished)

    def toggle_finished(self, task_id: int) -> bool:
        row = self._require(task_id)
        new_value = not bool(row["finished"])
        self.update_task(task_id, finished=new_value)
        return new_value

    def delete_task(self, task_id: int) -> None:
        cur = self._conn.execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
        if cur.rowcount != 1:
            raise KeyError(task_id)


class TaskStore:
    """
    SQLite task store.

    The schema is simple and migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Each method opens its own connection; writes go through transaction().
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()

            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    topic TEXT NOT NULL DEFAULT '',
                    due_date TEXT NOT NULL,
                    finished INTEGER NOT NULL DEFAULT 0,
                    created_at REAL NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )

            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("topic", "TEXT NOT NULL DEFAULT ''")
            add_col("finished", "INTEGER NOT NULL DEFAULT 0")
            add_col("created_at", "REAL NOT NULL DEFAULT 0")
            add_col("updated_at", "REAL NOT NULL DEFAULT 0")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_due ON tasks(due_date, id)")

            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            title=str(row["title"] or ""),
            topic=str(row["topic"] or ""),
            due_date=_str_to_date(row["due_date"]),
            finished=bool(row["finished"]),
            created_at=float(row["created_at"] or 0.0),
            updated_at=float(row["updated_at"] or 0.0),
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)
        finally:
            conn.close()

    def add_task(
        self,
        *,
        title: str,
        due_date: date,
        topic: str = "",
        finished: bool = False,
    ) -> int:
        if not title or not title.strip():
            raise ValueError("title is required")

        now = time.time()
        conn = self._get_conn()
        try:
            cur = conn.execute(
                """
                INSERT INTO tasks(title, topic, due_date, finished, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    title.strip(),
                    (topic or "").strip(),
                    _date_to_str(due_date),
                    1 if finished else 0,
                    now,
                    now,
                ),
            )
            conn.commit()
            rowid = cur.lastrowid
            if rowid is None:
                raise RuntimeError("SQLite did not return lastrowid for tasks insert")
            task_id = int(rowid)
            logger.debug("Task added id=%s due_date=%s", task_id, due_date)
            return task_id
        finally:
            conn.close()

    def get_task(self, task_id: int) -> Task | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM tasks WHERE id = ?", (int(task_id),)).fetchone()
            return self._row_to_task(row) if row else None
        finally:
            conn.close()

    def list_tasks_sorted_by_due(self) -> list[Task]:
        """All tasks, ascending by due date; equal dates keep insertion order."""
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM tasks ORDER BY due_date ASC, id ASC").fetchall()
            return [self._row_to_task(r) for r in rows]
        finally:
            conn.close()

    @contextlib.contextmanager
    def transaction(self) -> Iterator[TaskTransaction]:
        """
        Scoped write transaction.

        Commits when the block exits normally; rolls back and re-raises otherwise.
        """
        conn = self._get_conn()
        try:
            conn.execute("BEGIN IMMEDIATE")
            try:
                yield TaskTransaction(conn)
            except BaseException:
                conn.rollback()
                logger.debug("TaskStore transaction rolled back db=%s", self._db_path)
                raise
            conn.commit()
        finally:
            conn.close()

    def write(self, fn: Callable[[TaskTransaction], T]) -> T:
        """Run `fn` inside one transaction and return its result."""
        with self.transaction() as tx:
            return fn(tx)
