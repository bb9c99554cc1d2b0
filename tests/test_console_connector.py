# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterator

from task_tracker.connectors.console_connector import run_console_loop


def _feed(lines: list[str]):
    it: Iterator[str] = iter(lines)

    def read(_prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def test_console_runs_commands_until_exit(state) -> None:
    out: list[str] = []

    run_console_loop(
        state,
        read=_feed(["/add 2024-01-09 Call mom", "", "hello", "/list", "/exit", "/list"]),
        write=out.append,
    )

    assert out[0].splitlines() == ["It's Tuesday!", "  (no tasks)"]
    assert any(o.startswith("Added: Call mom") for o in out)
    assert any("Commands start with '/'" in o for o in out)
    assert any("[1] Today" in o for o in out)
    assert state.badge_sink.count == 1
    # "/list" after "/exit" is never read.
    assert sum(1 for o in out if "[1] Today" in o) == 1


def test_console_stops_on_eof_and_hides_screen(state) -> None:
    out: list[str] = []
    state.badge_sink.set_badge_count(99)

    run_console_loop(state, read=_feed([]), write=out.append)

    assert state.badge_sink.count == 0


def test_console_survives_handler_crash(state, monkeypatch) -> None:
    out: list[str] = []

    def boom(_state, _args):
        raise RuntimeError("boom")

    from task_tracker.cli.commands import registry

    monkeypatch.setitem(registry._handlers, "list", boom)

    run_console_loop(state, read=_feed(["/list", "/exit"]), write=out.append)

    assert "Internal error while handling a command." in out
