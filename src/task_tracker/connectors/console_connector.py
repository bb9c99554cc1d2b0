# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import render_task_list
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def run_console_loop(
    state: AppState,
    *,
    read: InputFn = input,
    write: OutputFn = print,
) -> None:
    """
    Interactive host for the task list screen.

    Plays the role the OS plays for a view controller: load once, show,
    dispatch user actions, hide on exit.
    """
    screen = state.screen
    screen.on_load()
    screen.on_show()
    logger.info("Console connector started.")

    def emit(text: str) -> None:
        write(f"[{_ts_local()}] {text}")

    write(render_task_list(state))
    write("Use /help for commands. Use /exit to quit.\n")

    try:
        while True:
            try:
                user_input = read(">>> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                write("")
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            if not user_input.startswith("/"):
                write("Commands start with '/'. Use /help to list them.")
                continue

            try:
                reply = command_registry.handle(state, user_input, emit=emit)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply is not None:
                write(reply)
    finally:
        screen.on_hide()
        logger.info("Console connector finished.")
