# tests/test_console.py

from __future__ import annotations

from collections.abc import Iterator

from tasklist.connectors.console_connector import PROMPT, handle_line, run_console_loop
from tasklist.core.state import AppState

from .fakes import RecordingStorage


def _feeder(lines: list[str]) -> tuple[list[str], object]:
    prompts: list[str] = []
    it: Iterator[str] = iter(lines)

    def read(prompt: str) -> str:
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return prompts, read


def test_plain_text_is_a_search(state: AppState) -> None:
    handle_line(state, "/add Call Mom | weekend")
    reply = handle_line(state, "mom")
    assert state.view.search == "mom"
    assert "Call Mom" in reply


def test_console_loop_runs_commands_until_exit(state: AppState) -> None:
    out: list[str] = []
    prompts, read = _feeder(["/add Buy milk | 2%", "", "/stats", "/exit", "/add never | run"])

    run_console_loop(state, read=read, write=out.append)  # type: ignore[arg-type]

    assert prompts == [PROMPT] * 4
    assert any(o.startswith("Added #") for o in out)
    assert "Total: 1 | Completed: 0 | Pending: 1" in out
    assert len(state.store) == 1


def test_console_loop_stops_on_eof(state: AppState) -> None:
    out: list[str] = []
    _, read = _feeder([])
    run_console_loop(state, read=read, write=out.append)  # type: ignore[arg-type]
    # banner + initial render
    assert len(out) == 2
    assert "No todos found." in out[1]


def test_console_loop_survives_storage_failure(state: AppState, storage: RecordingStorage) -> None:
    out: list[str] = []
    _, read = _feeder(["/add a | b", "/stats"])
    storage.fail_writes = True

    run_console_loop(state, read=read, write=out.append)  # type: ignore[arg-type]

    assert "Internal error while handling a command (see log)." in out
    assert out[-1].startswith("Total:")
