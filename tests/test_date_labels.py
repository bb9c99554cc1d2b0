# tests/test_date_labels.py

from __future__ import annotations

from datetime import date

import pytest

from task_tracker.ui.date_labels import day_of_week, descriptive_due_date_message, screen_title

TODAY = date(2024, 1, 9)  # Tuesday


@pytest.mark.parametrize(
    ("due", "expected"),
    [
        (date(2024, 1, 9), "Today"),
        (date(2024, 1, 10), "Tomorrow"),
        (date(2024, 1, 8), "Yesterday"),
        (date(2024, 1, 12), "In 3 days"),
        (date(2024, 1, 16), "In 7 days"),
        (date(2024, 1, 5), "4 days ago"),
        (date(2024, 1, 2), "7 days ago"),
        (date(2024, 1, 17), "Due Wednesday, Jan 17"),
        (date(2023, 12, 25), "Was due Monday, Dec 25, 2023"),
        (date(2025, 3, 1), "Due Saturday, Mar 1, 2025"),
    ],
)
def test_descriptive_due_date_message(due: date, expected: str) -> None:
    assert descriptive_due_date_message(due, TODAY) == expected


def test_day_of_week_and_title() -> None:
    assert day_of_week(TODAY) == "Tuesday"
    assert screen_title(date(2024, 1, 14)) == "It's Sunday!"
