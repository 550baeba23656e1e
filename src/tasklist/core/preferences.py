# src/tasklist/core/preferences.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

IS_DARK_MODE = "isDarkMode"


class JsonPreferenceStore:
    """
    Named preference flags persisted as one small JSON object.

    Reads are best-effort (a missing or broken file behaves as empty).
    Writes go through a temp file + os.replace so a crash never leaves half a file.
    """

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
            logger.warning("Failed to read preferences from %s; using defaults.", self._path)
            return {}
        return data if isinstance(data, dict) else {}

    def get_bool(self, name: str, default: bool = False) -> bool:
        val = self._load().get(name)
        return val if isinstance(val, bool) else default

    def set_bool(self, name: str, value: bool) -> None:
        data = self._load()
        data[name] = bool(value)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        logger.debug("Preference saved %s=%s to %s", name, value, self._path)
