# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..view.render import render_view

logger = logging.getLogger(__name__)

PROMPT = "tasklist> "

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def handle_line(state: AppState, line: str) -> str:
    """
    Route one console line.

    Slash commands go through the registry; plain text is a search shortcut.
    """
    reply = command_registry.handle(state, line)
    if reply is not None:
        return reply
    return command_registry.handle(state, f"/search {line}") or ""


def run_console_loop(
    state: AppState,
    *,
    read: InputFn = input,
    write: OutputFn = print,
) -> None:
    logger.info("Console connector started (records=%d).", len(state.store))
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "tasklist"))
    write(f"[{app_name}] Use /help for commands. Use /exit to quit.\n")
    write(render_view(state.store.records(), state.view))

    while True:
        try:
            user_input = read(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, user_input)
        except Exception:
            # Storage write failures land here; the failed command is reported
            # and the loop keeps going.
            logger.exception("Command handler crashed: %r", user_input)
            reply = "Internal error while handling a command (see log)."

        write(reply)

    logger.info("Console connector finished.")
