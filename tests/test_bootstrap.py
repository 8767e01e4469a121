# tests/test_bootstrap.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.cli.bootstrap import create_initial_state
from tasklist.config import Settings
from tasklist.records.models import Tab

from .fakes import FakeClock


def test_create_initial_state_seeds_and_persists(settings: SimpleNamespace) -> None:
    state = create_initial_state(settings=settings, clock=FakeClock())

    assert len(state.store) == 5
    assert state.view.tab is Tab.TODO
    assert state.view.search == ""
    assert Path(settings.storage_path).exists()

    state.store.add("From test", "persisted")
    again = create_initial_state(settings=settings)
    assert len(again.store) == 6
    assert again.store.records()[-1].title == "From test"


def test_create_initial_state_json_backend(settings: SimpleNamespace, tmp_path: Path) -> None:
    settings.storage_backend = "json"
    settings.storage_path = tmp_path / "sub" / "storage.json"
    settings.seed_samples = False

    state = create_initial_state(settings=settings)

    assert len(state.store) == 0
    assert settings.storage_path.read_text("utf-8") == '{\n  "todos": "[]"\n}'


def test_settings_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TASKLIST_APP_NAME",
        "TASKLIST_LOG_LEVEL",
        "TASKLIST_DATA_DIR",
        "TASKLIST_STORAGE_BACKEND",
        "TASKLIST_STORAGE_PATH",
        "TASKLIST_STORAGE_KEY",
        "TASKLIST_SEED_SAMPLES",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.app_name == "tasklist"
    assert s.log_level == "INFO"
    assert s.storage_backend == "sqlite"
    assert s.storage_path == Path(".local/tasklist") / "storage.sqlite3"
    assert s.storage_key == "todos"
    assert s.seed_samples is True


def test_settings_from_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKLIST_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKLIST_STORAGE_BACKEND", "JSON")
    monkeypatch.delenv("TASKLIST_STORAGE_PATH", raising=False)
    monkeypatch.setenv("TASKLIST_STORAGE_KEY", "work")
    monkeypatch.setenv("TASKLIST_SEED_SAMPLES", "no")

    s = Settings.from_env()

    assert s.storage_backend == "json"
    assert s.storage_path == tmp_path / "storage.json"
    assert s.storage_key == "work"
    assert s.seed_samples is False
