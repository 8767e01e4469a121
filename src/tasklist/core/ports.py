# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The record store depends on Protocols instead of concrete implementations.
This keeps storage backends swappable and makes testing easier.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Protocol

Clock = Callable[[], datetime]
# Returns an aware "now" in the host local timezone.


class SlotStorage(Protocol):
    """
    Named-slot durable storage (the local-storage equivalent).

    A slot holds one text value; writes always replace the whole value.
    read_slot returns None when the slot has never been written.
    """

    def read_slot(self, key: str) -> str | None: ...

    def write_slot(self, key: str, value: str) -> None: ...
