# src/tasklist/view/render.py

"""Plain-text rendering of the current view (tabs, table, totals)."""

from __future__ import annotations

import shutil
import textwrap

from ..core.state import ViewState
from ..records.models import TaskRecord, Tab
from .projection import Counts, count_records, project

TAB_TITLES: dict[Tab, str] = {Tab.TODO: "To Do", Tab.COMPLETED: "Completed"}

COLUMNS = ("ID", "Title", "Description", "Date Created/Updated", "Action")
SEP = " | "
MIN_TEXT_WIDTH = 12
DONE_MARK = "[x]"
OPEN_MARK = "[ ]"


def render_tabs(view: ViewState, counts: Counts) -> str:
    cells = []
    for tab in Tab:
        n = counts.completed if tab is Tab.COMPLETED else counts.pending
        label = f"{TAB_TITLES[tab]} ({n})"
        cells.append(f"*{label}*" if tab is view.tab else f" {label} ")
    line = SEP.join(cells)
    if view.search:
        line += f'    search: "{view.search}"'
    return line


def render_totals(counts: Counts) -> str:
    return f"Total: {counts.total} | Completed: {counts.completed} | Pending: {counts.pending}"


def _action_hint(record: TaskRecord, view: ViewState) -> str:
    if view.editing_id == record.id:
        return "/save /cancel"
    return "/edit /rm " + ("/undo" if record.completed else "/done")


def _row_cells(record: TaskRecord, view: ViewState) -> list[str]:
    draft = view.draft if view.editing_id == record.id else None
    if draft is not None:
        title = f"> {draft.title}"
        description = f"> {draft.description}"
    else:
        mark = DONE_MARK if record.completed else OPEN_MARK
        title = f"{mark} {record.title}"
        description = record.description
    return [str(record.id), title, description, record.date_updated, _action_hint(record, view)]


def _column_widths(rows: list[list[str]], term_width: int) -> list[int]:
    widths = [len(c) for c in COLUMNS]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    # Shrink the two free-text columns (title, description) until the table fits.
    budget = term_width - len(SEP) * (len(COLUMNS) - 1)
    while sum(widths) > budget:
        i = 2 if widths[2] >= widths[1] else 1
        if widths[i] <= MIN_TEXT_WIDTH:
            break
        widths[i] -= 1
    return widths


def render_table(records: list[TaskRecord], view: ViewState, *, term_width: int | None = None) -> str:
    if not records:
        return "No todos match your search." if view.search else "No todos found."

    if term_width is None:
        term_width = shutil.get_terminal_size((120, 30)).columns

    rows = [_row_cells(r, view) for r in records]
    widths = _column_widths(rows, term_width)

    lines = [
        SEP.join(h.ljust(w) for h, w in zip(COLUMNS, widths)).rstrip(),
        SEP.join("-" * w for w in widths),
    ]
    for row in rows:
        wrapped = [textwrap.wrap(cell, w) or [""] for cell, w in zip(row, widths)]
        height = max(len(col) for col in wrapped)
        for n in range(height):
            parts = [(col[n] if n < len(col) else "").ljust(w) for col, w in zip(wrapped, widths)]
            lines.append(SEP.join(parts).rstrip())
    return "\n".join(lines)


def render_view(records: list[TaskRecord], view: ViewState, *, term_width: int | None = None) -> str:
    """Full screen: tabs with live counts, the projected table, aggregate totals."""
    counts = count_records(records)
    visible = project(records, view.tab, view.search)
    return "\n".join(
        [
            render_tabs(view, counts),
            "",
            render_table(visible, view, term_width=term_width),
            "",
            render_totals(counts),
        ]
    )
