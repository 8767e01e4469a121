# src/tasklist/records/models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Tab(StrEnum):
    """
    The two mutually exclusive list filters.

    Stored/typed values are lowercase ("todo", "completed"); the console renders
    them as "To Do" and "Completed".
    """

    TODO = "todo"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | None) -> Tab | None:
        if not raw:
            return None
        key = raw.strip().lower().replace(" ", "").replace("-", "")
        aliases = {
            "todo": cls.TODO,
            "pending": cls.TODO,
            "completed": cls.COMPLETED,
            "done": cls.COMPLETED,
        }
        return aliases.get(key)


@dataclass(slots=True)
class TaskRecord:
    id: int
    title: str
    description: str
    completed: bool
    date_created: str
    date_updated: str


@dataclass(frozen=True, slots=True)
class MutationResult:
    """Outcome of a store mutation. On refusal the collection is untouched."""

    ok: bool
    reason: str | None = None
    record: TaskRecord | None = None

    @classmethod
    def done(cls, record: TaskRecord | None = None) -> MutationResult:
        return cls(ok=True, record=record)

    @classmethod
    def refused(cls, reason: str) -> MutationResult:
        return cls(ok=False, reason=reason)


def validate_fields(title: str, description: str) -> str | None:
    """Return a refusal reason for empty (after trimming) fields, else None."""
    if not (title or "").strip():
        return "title is required"
    if not (description or "").strip():
        return "description is required"
    return None
