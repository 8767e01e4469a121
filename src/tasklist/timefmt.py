# src/tasklist/timefmt.py

from __future__ import annotations

from datetime import datetime

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def local_now() -> datetime:
    return datetime.now().astimezone()


def format_timestamp(now: datetime | None = None) -> str:
    """
    Human-readable en-US timestamp, e.g. "November 20, 2025 09:23 PM".

    Long month name, numeric day/year, zero-padded 12-hour clock. Uses the host
    local timezone; month names are fixed English so output does not depend on
    the process locale.
    """
    if now is None:
        now = local_now()
    hour12 = now.hour % 12 or 12
    meridiem = "AM" if now.hour < 12 else "PM"
    return f"{_MONTHS[now.month - 1]} {now.day}, {now.year} {hour12:02d}:{now.minute:02d} {meridiem}"
