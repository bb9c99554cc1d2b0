# tests/test_badge.py

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

from task_tracker.notifications.badge import FileBadgeSink, MemoryBadgeSink, update_badge
from task_tracker.prefs.defaults_store import BADGE_DAYS_KEY

from .fakes import FakeDefaults, make_task

TASKS = [
    make_task(1, date(2024, 1, 10)),
    make_task(2, date(2024, 1, 10), finished=True),
    make_task(3, date(2024, 1, 12)),
]


def test_update_badge_reads_horizon_from_defaults() -> None:
    sink = MemoryBadgeSink()

    count = update_badge(
        TASKS,
        defaults=FakeDefaults({BADGE_DAYS_KEY: 2}),
        sink=sink,
        now=datetime(2024, 1, 9, 8, 0),
    )

    assert count == 1
    assert sink.count == 1


def test_update_badge_missing_horizon_means_zero() -> None:
    sink = MemoryBadgeSink()

    assert update_badge(TASKS, defaults=FakeDefaults(), sink=sink, now=date(2024, 1, 9)) == 0
    assert update_badge(TASKS, defaults=FakeDefaults(), sink=sink, now=date(2024, 1, 10)) == 1


def test_update_badge_overwrites_previous_value() -> None:
    sink = MemoryBadgeSink()
    sink.set_badge_count(42)

    update_badge([], defaults=FakeDefaults({BADGE_DAYS_KEY: 7}), sink=sink, now=date(2024, 1, 9))
    update_badge([], defaults=FakeDefaults({BADGE_DAYS_KEY: 7}), sink=sink, now=date(2024, 1, 9))

    assert sink.count == 0
    assert sink.writes == 3


def test_file_badge_sink_round_trip(tmp_path: Path) -> None:
    sink = FileBadgeSink(tmp_path / "sub" / "badge.txt")
    assert sink.read() == 0

    update_badge(TASKS, defaults=FakeDefaults({BADGE_DAYS_KEY: 5}), sink=sink, now=date(2024, 1, 9))

    assert sink.read() == 2
    assert (tmp_path / "sub" / "badge.txt").read_text("utf-8") == "2\n"


def test_file_badge_sink_corrupt_file_reads_zero(tmp_path: Path) -> None:
    path = tmp_path / "badge.txt"
    path.write_text("lots\n", "utf-8")
    sink = FileBadgeSink(path)

    assert sink.read() == 0

    sink.set_badge_count(3)
    assert sink.read() == 3
