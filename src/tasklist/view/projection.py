# src/tasklist/view/projection.py

"""
Pure derivations over the record collection.

Nothing here mutates its input; callers recompute on every render.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..records.models import TaskRecord, Tab


@dataclass(frozen=True, slots=True)
class Counts:
    total: int
    completed: int
    pending: int


def matches_search(record: TaskRecord, search: str) -> bool:
    if not search:
        return True
    needle = search.lower()
    return needle in record.title.lower() or needle in record.description.lower()


def matches_tab(record: TaskRecord, tab: Tab) -> bool:
    if tab is Tab.COMPLETED:
        return record.completed
    return not record.completed


def project(records: Iterable[TaskRecord], tab: Tab, search: str = "") -> list[TaskRecord]:
    """Records passing both the tab filter and the text match, in collection order."""
    return [r for r in records if matches_search(r, search) and matches_tab(r, tab)]


def count_records(records: Iterable[TaskRecord]) -> Counts:
    total = 0
    completed = 0
    for r in records:
        total += 1
        if r.completed:
            completed += 1
    return Counts(total=total, completed=completed, pending=total - completed)
