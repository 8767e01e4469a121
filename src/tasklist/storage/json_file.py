# src/tasklist/storage/json_file.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """
    Slots kept in a single JSON object file: {"<key>": "<text>", ...}.

    Writes go to a sibling .tmp file first and are swapped in with os.replace.
    An unreadable or non-object file is treated as "no slots" (logged).
    """

    def __init__(self, path: str | Path = "storage.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError, RecursionError):
            logger.warning("Failed to read slot file %s; treating as empty.", self._path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Slot file %s is not a JSON object; treating as empty.", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def read_slot(self, key: str) -> str | None:
        return self._load().get(key)

    def write_slot(self, key: str, value: str) -> None:
        slots = self._load()
        slots[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(json.dumps(slots, indent=2), "utf-8")
        os.replace(tmp, self._path)
