# src/tasklist/storage/__init__.py

"""Concrete SlotStorage backends and the factory that picks one from settings."""

from __future__ import annotations

import logging

from ..core.ports import SlotStorage
from .json_file import JsonFileStorage
from .memory import MemorySlotStorage
from .sqlite_slots import SqliteSlotStorage

logger = logging.getLogger(__name__)

BACKENDS = ("sqlite", "json", "memory")

__all__ = [
    "BACKENDS",
    "JsonFileStorage",
    "MemorySlotStorage",
    "SqliteSlotStorage",
    "build_storage",
]


def build_storage(settings) -> SlotStorage:
    backend = str(getattr(settings, "storage_backend", "sqlite")).strip().lower()
    path = getattr(settings, "storage_path", None)

    if backend == "memory":
        logger.info("Using in-memory storage (nothing is persisted across runs).")
        return MemorySlotStorage()
    if backend == "json":
        return JsonFileStorage(path or "storage.json")
    if backend == "sqlite":
        return SqliteSlotStorage(path or "storage.sqlite3")

    raise ValueError(f"Unknown storage backend: {backend!r} (expected one of {', '.join(BACKENDS)})")
