# src/task_tracker/prefs/defaults_store.py

"""
Persisted user defaults (small JSON key/value file).

Reads never fail: a missing file, a missing key or a corrupt value all read as
the default. Writes replace the file atomically.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

BADGE_DAYS_KEY = "daysForBadge"


class DefaultsStore:
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.exception("Failed to read defaults from %s; treating as empty.", self._path)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)

    def has_key(self, key: str) -> bool:
        return key in self._load()

    def integer_for_key(self, key: str) -> int:
        """Stored int or integer string; anything else (floats, bools, junk) reads as 0."""
        raw = self._load().get(key)
        if raw is None:
            return 0
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        if isinstance(raw, str):
            try:
                return int(raw.strip())
            except ValueError:
                pass
        logger.warning("Defaults key %s holds non-integer %r; using 0.", key, raw)
        return 0

    def set_integer(self, key: str, value: int) -> None:
        data = self._load()
        data[key] = int(value)
        self._save(data)
        logger.debug("Defaults %s=%s saved to %s", key, value, self._path)

