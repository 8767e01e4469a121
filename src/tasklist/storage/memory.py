# src/tasklist/storage/memory.py

from __future__ import annotations


class MemorySlotStorage:
    """Process-local slots; nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.slots: dict[str, str] = dict(initial or {})

    def read_slot(self, key: str) -> str | None:
        return self.slots.get(key)

    def write_slot(self, key: str, value: str) -> None:
        self.slots[key] = value
