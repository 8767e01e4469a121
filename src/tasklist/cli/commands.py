# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState, EditDraft
from ..records.models import MutationResult, Tab
from ..view.projection import count_records
from ..view.render import render_totals, render_view

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        The argument text is passed through unsplit so titles and
        descriptions keep their inner spacing.
        """
        if not line.startswith("/"):
            return None

        body = line[1:].strip()
        if not body:
            return "Empty command. Use /help to list available commands."

        name, _, arg = body.partition(" ")
        name = name.lower()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, arg.strip())

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Plain text (without a leading /) searches the list.")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- helpers ----


def _screen(state: AppState, message: str | None = None) -> str:
    body = render_view(state.store.records(), state.view)
    return f"{message}\n\n{body}" if message else body


def _split_fields(arg: str) -> tuple[str, str] | None:
    """'<title> | <description>' -> (title, description); None without a separator."""
    if "|" not in arg:
        return None
    title, _, description = arg.partition("|")
    return title, description


def _parse_id(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _refused(action: str, result: MutationResult) -> str:
    return f"Not {action}: {result.reason}."


# ---- handlers ----


def cmd_help(state: AppState, arg: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, arg: str) -> str:
    return _screen(state)


def cmd_add(state: AppState, arg: str) -> str:
    """
    /add <title> | <description>
    """
    fields = _split_fields(arg)
    if fields is None:
        return "Usage: /add <title> | <description>"

    result = state.store.add(*fields)
    if not result.ok or result.record is None:
        return _refused("added", result)
    return _screen(state, f"Added #{result.record.id}.")


def cmd_edit(state: AppState, arg: str) -> str:
    """
    /edit <id>                          -> start editing (draft copy)
    /edit <id> <title> | <description>  -> edit in one step
    """
    raw_id, _, rest = arg.partition(" ")
    record_id = _parse_id(raw_id)
    if record_id is None:
        return "Usage: /edit <id> [<title> | <description>]"

    rest = rest.strip()
    if rest:
        fields = _split_fields(rest)
        if fields is None:
            return "Usage: /edit <id> <title> | <description>"
        result = state.store.edit(record_id, *fields)
        if not result.ok:
            return _refused("saved", result)
        if state.view.editing_id == record_id:
            state.view.draft = None
        return _screen(state, f"Saved #{record_id}.")

    record = state.store.get(record_id)
    if record is None:
        return f"No record with id {record_id}."

    state.view.draft = EditDraft(
        record_id=record.id,
        title=record.title,
        description=record.description,
    )
    return _screen(state, f"Editing #{record_id}. Use /title, /desc, then /save or /cancel.")


def cmd_title(state: AppState, arg: str) -> str:
    if state.view.draft is None:
        return "Not editing. Use /edit <id> first."
    state.view.draft.title = arg
    return _screen(state)


def cmd_desc(state: AppState, arg: str) -> str:
    if state.view.draft is None:
        return "Not editing. Use /edit <id> first."
    state.view.draft.description = arg
    return _screen(state)


def cmd_save(state: AppState, arg: str) -> str:
    draft = state.view.draft
    if draft is None:
        return "Not editing. Use /edit <id> first."

    result = state.store.edit(draft.record_id, draft.title, draft.description)
    if not result.ok:
        if state.store.get(draft.record_id) is None:
            state.view.draft = None
        return _refused("saved", result)

    state.view.draft = None
    return _screen(state, f"Saved #{draft.record_id}.")


def cmd_cancel(state: AppState, arg: str) -> str:
    if state.view.draft is None:
        return "Not editing."
    state.view.draft = None
    return _screen(state, "Edit cancelled.")


def cmd_remove(state: AppState, arg: str) -> str:
    record_id = _parse_id(arg)
    if record_id is None:
        return "Usage: /rm <id>"

    result = state.store.remove(record_id)
    if not result.ok:
        return _refused("deleted", result)
    if state.view.editing_id == record_id:
        state.view.draft = None
    return _screen(state, f"Deleted #{record_id}.")


def cmd_toggle(state: AppState, arg: str) -> str:
    record_id = _parse_id(arg)
    if record_id is None:
        return "Usage: /done <id>"

    result = state.store.toggle_complete(record_id)
    if not result.ok or result.record is None:
        return _refused("changed", result)
    status = "completed" if result.record.completed else "to do"
    return _screen(state, f"#{record_id} marked {status}.")


def cmd_tab(state: AppState, arg: str) -> str:
    """
    /tab              -> show current tab
    /tab todo         -> "To Do" (incomplete records)
    /tab completed    -> "Completed"
    """
    if not arg:
        return f"Current tab: {state.view.tab.value}. Use /tab todo or /tab completed."

    tab = Tab.parse(arg)
    if tab is None:
        return "Usage: /tab todo | /tab completed"
    state.view.tab = tab
    return _screen(state)


def cmd_search(state: AppState, arg: str) -> str:
    state.view.search = arg
    return _screen(state)


def cmd_stats(state: AppState, arg: str) -> str:
    return render_totals(count_records(state.store.records()))


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the current view.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a record: /add <title> | <description>.", aliases=["new"])
registry.register(
    "edit",
    cmd_edit,
    help_text="Edit a record: /edit <id> (draft) or /edit <id> <title> | <description>.",
)
registry.register("title", cmd_title, help_text="Change the draft title while editing.")
registry.register("desc", cmd_desc, help_text="Change the draft description while editing.")
registry.register("save", cmd_save, help_text="Save the draft.")
registry.register("cancel", cmd_cancel, help_text="Discard the draft.")
registry.register("rm", cmd_remove, help_text="Delete a record: /rm <id>.", aliases=["delete", "del"])
registry.register(
    "done",
    cmd_toggle,
    help_text="Toggle completion: /done <id> (same as /toggle, /undo).",
    aliases=["toggle", "undo", "complete"],
)
registry.register("tab", cmd_tab, help_text="Switch tab: /tab todo | /tab completed.")
registry.register("search", cmd_search, help_text="Filter by text: /search <text> (empty clears).", aliases=["find"])
registry.register("stats", cmd_stats, help_text="Show total / completed / pending counts.")
