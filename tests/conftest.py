# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.records.store import RecordStore

from .fakes import FakeClock, RecordingStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        storage_backend="sqlite",
        storage_path=tmp_path / "storage.sqlite3",
        storage_key="todos",
        seed_samples=True,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def storage() -> RecordingStorage:
    # "[]" -> hydrate to an empty list instead of the sample seed
    return RecordingStorage({"todos": "[]"})


@pytest.fixture()
def store(storage: RecordingStorage, clock: FakeClock) -> RecordStore:
    """Initialized, empty store backed by a recording in-memory slot."""
    s = RecordStore(storage, key="todos", clock=clock)
    s.initialize()
    return s


@pytest.fixture()
def state(settings: SimpleNamespace, store: RecordStore) -> AppState:
    return AppState(settings=settings, store=store)
