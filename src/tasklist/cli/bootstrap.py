# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the storage backend into the RecordStore,
- hydrates the store (one read, one write-back).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Clock
from ..core.state import AppState
from ..records.store import RecordStore
from ..storage import build_storage

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    if getattr(settings, "storage_backend", "sqlite") != "memory":
        settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, clock: Clock | None = None) -> AppState:
    """
    Create AppState from the provided settings and hydrate the store.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = build_storage(settings)
    store = RecordStore(
        storage,
        key=settings.storage_key,
        clock=clock,
        seed_samples=settings.seed_samples,
    )
    store.initialize()
    logger.info(
        "Store ready backend=%s key=%s records=%d",
        settings.storage_backend,
        settings.storage_key,
        len(store),
    )
    return AppState(settings=settings, store=store)
