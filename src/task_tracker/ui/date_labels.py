# src/task_tracker/ui/date_labels.py

from __future__ import annotations

from datetime import date

from ..tasks.grouping import whole_days_between

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def day_of_week(d: date) -> str:
    return WEEKDAYS[d.weekday()]


def screen_title(today: date) -> str:
    return f"It's {day_of_week(today)}!"


def descriptive_due_date_message(due_date: date, today: date) -> str:
    """
    Section header text for a due date, relative to `today`.

    Within a week either way the label is relative ("Tomorrow", "In 3 days",
    "2 days ago"); further out it names the date.
    """
    days = whole_days_between(today, due_date)
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    if days == -1:
        return "Yesterday"
    if 1 < days <= 7:
        return f"In {days} days"
    if -7 <= days < -1:
        return f"{-days} days ago"

    label = f"{day_of_week(due_date)}, {MONTHS[due_date.month - 1]} {due_date.day}"
    if due_date.year != today.year:
        label = f"{label}, {due_date.year}"
    return f"Due {label}" if days > 0 else f"Was due {label}"
