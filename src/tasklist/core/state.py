# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..records.models import Tab
from ..records.store import RecordStore


@dataclass
class EditDraft:
    """In-progress edit of one record. Fields may be empty until saved."""

    record_id: int
    title: str
    description: str


@dataclass
class ViewState:
    tab: Tab = Tab.TODO
    search: str = ""
    draft: EditDraft | None = None

    @property
    def editing_id(self) -> int | None:
        return self.draft.record_id if self.draft else None


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object
    store: RecordStore
    view: ViewState = field(default_factory=ViewState)
