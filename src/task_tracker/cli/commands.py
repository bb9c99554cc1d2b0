# src/task_tracker/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
import shlex
from collections.abc import Callable
from datetime import date
from typing import cast

from ..core.state import AppState
from ..prefs.defaults_store import BADGE_DAYS_KEY
from ..tasks.grouping import TaskPositionError
from ..ui.task_list import SectionRemoval

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

EDITABLE_FIELDS = ("title", "topic", "due")

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_due_date(raw: str) -> date:
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise ValueError(f"Bad date {raw!r}; expected YYYY-MM-DD.") from None


def _parse_position(args: list[str]) -> tuple[int, int]:
    """User-facing positions are 1-based; the screen is 0-based."""
    if len(args) < 2:
        raise ValueError("Expected <section> <row>.")
    try:
        section, row = int(args[0]), int(args[1])
    except ValueError:
        raise ValueError("Section and row must be numbers.") from None
    return section - 1, row - 1


def render_task_list(state: AppState) -> str:
    screen = state.screen
    lines = [screen.title or screen.refresh_title()]

    sections = screen.number_of_sections()
    if sections == 0:
        lines.append("  (no tasks)")
        return "\n".join(lines)

    for s in range(sections):
        lines.append(f"[{s + 1}] {screen.title_for_header(s)}")
        for r in range(screen.number_of_rows(s)):
            row = screen.row(s, r)
            mark = "x" if row.finished else " "
            title = "".join(f"{ch}\u0336" for ch in row.title) if row.strikethrough else row.title
            topic = f"  ({row.topic})" if row.topic else ""
            lines.append(f"  {r + 1}. [{mark}] {title}{topic}")
    return "\n".join(lines)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_task_list(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add 2024-01-10 Buy milk | errands
    """
    if len(args) < 2:
        return "Usage: /add <YYYY-MM-DD> <title> [| topic]"
    try:
        due = parse_due_date(args[0])
    except ValueError as e:
        return str(e)

    title, _, topic = " ".join(args[1:]).partition("|")
    try:
        task_id = state.task_store.add_task(title=title, topic=topic, due_date=due)
    except ValueError as e:
        return f"Cannot add task: {e}."

    state.screen.update_badge()
    logger.debug("Added task id=%s via console", task_id)
    return f"Added: {title.strip()} (due {due.isoformat()})."


def cmd_done(state: AppState, args: list[str]) -> str:
    try:
        section, row = _parse_position(args)
        state.screen.select_row(section, row)
        task_row = state.screen.row(section, row)
    except (ValueError, TaskPositionError) as e:
        return f"Cannot toggle: {e}"
    status = "finished" if task_row.finished else "not finished"
    return f"Marked {task_row.title!r} as {status}."


def cmd_del(state: AppState, args: list[str]) -> str:
    try:
        section, row = _parse_position(args)
        title = state.screen.row(section, row).title
        update = state.screen.delete_row(section, row)
    except (ValueError, TaskPositionError) as e:
        return f"Cannot delete: {e}"

    if isinstance(update, SectionRemoval):
        return f"Deleted {title!r}; section {update.section + 1} removed."
    return f"Deleted {title!r}."


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit 1 2 title="Buy bread" topic=home due=2024-01-11
    """
    if len(args) < 3:
        return "Usage: /edit <section> <row> title=... topic=... due=YYYY-MM-DD"
    try:
        section, row = _parse_position(args)
        task = state.screen.task_for_edit(section, row)
    except (ValueError, TaskPositionError) as e:
        return f"Cannot edit: {e}"

    # Values may be quoted: title="Buy bread".
    try:
        pairs = shlex.split(" ".join(args[2:]))
    except ValueError as e:
        return f"Cannot edit: {e}."

    changes: dict[str, str] = {}
    for pair in pairs:
        field, sep, value = pair.partition("=")
        field = field.strip().lower()
        if not sep or field not in EDITABLE_FIELDS:
            return f"Bad field {pair!r}; use one of: {', '.join(EDITABLE_FIELDS)}."
        changes[field] = value

    try:
        due = parse_due_date(changes["due"]) if "due" in changes else None
        with state.task_store.transaction() as tx:
            tx.update_task(
                task.id,
                title=changes.get("title"),
                topic=changes.get("topic"),
                due_date=due,
            )
    except (ValueError, KeyError) as e:
        return f"Cannot edit: {e}"

    state.screen.update_badge()
    return f"Updated task {task.id}."


def cmd_badge(state: AppState, args: list[str]) -> str:
    count = state.screen.update_badge()
    days = state.defaults.integer_for_key(BADGE_DAYS_KEY)
    return f"Badge: {count} (horizon {days} day{'s' if days != 1 else ''})."


def cmd_horizon(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /horizon      -> show the badge horizon
    /horizon 3    -> count tasks due within 3 days
    """
    if not args:
        days = state.defaults.integer_for_key(BADGE_DAYS_KEY)
        return f"Badge horizon is {days} day(s). Use /horizon <days> to change it."

    try:
        days = int(args[0])
    except ValueError:
        return "Usage: /horizon <days>"
    if days < 0:
        return "Horizon must be 0 or more days."

    state.defaults.set_integer(BADGE_DAYS_KEY, days)
    count = state.screen.update_badge()
    if emit:
        with contextlib.suppress(Exception):
            emit(f"[BADGE] {count}")
    return f"Badge horizon set to {days} day(s)."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks grouped by due date.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <YYYY-MM-DD> <title> [| topic].")
registry.register("done", cmd_done, help_text="Toggle finished: /done <section> <row>.")
registry.register("del", cmd_del, help_text="Delete a task: /del <section> <row>.", aliases=["rm"])
registry.register(
    "edit", cmd_edit, help_text="Edit a task: /edit <section> <row> title=.. topic=.. due=.."
)
registry.register("badge", cmd_badge, help_text="Recompute and show the badge count.")
registry.register("horizon", cmd_horizon, help_text="Show or set badge horizon: /horizon [days].")
