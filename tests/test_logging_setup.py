# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

from task_tracker.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_quiets_others() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("task_tracker.ui.task_list", logging.DEBUG))
    assert not f.filter(_record("sqlite_helper", logging.WARNING))
    assert f.filter(_record("sqlite_helper", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        root.addHandler(logging.NullHandler())
        log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)
        assert len(root.handlers) == 2
        logging.getLogger("task_tracker.test").debug("hello file")
        for h in root.handlers:
            h.flush()

        assert log_file == tmp_path / "logs" / "task_tracker.log"
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
