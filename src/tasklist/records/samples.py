# src/tasklist/records/samples.py

from __future__ import annotations

from .models import TaskRecord

SAMPLE_TIMESTAMP = "November 20, 2025 09:23 PM"

_SAMPLES: tuple[tuple[int, str, str], ...] = (
    (
        1700445601,
        "Grocery Shopping",
        "Pick up milk, eggs, cheese, and fresh produce from the market.",
    ),
    (
        1700445602,
        "Pay Utility Bills",
        "Ensure electricity and internet bills are paid before the due date (Friday).",
    ),
    (
        1700445603,
        "Call Mom",
        "Check in and finalize plans for the upcoming holiday weekend.",
    ),
    (
        1700445604,
        "Car Wash",
        "Take the car to the wash and check the tire pressure.",
    ),
    (
        1700445605,
        "Book Appointment",
        "Schedule the annual physical check-up with Dr. Peterson.",
    ),
)


def sample_records() -> list[TaskRecord]:
    """Fresh copies of the fixed seed records (safe to mutate)."""
    return [
        TaskRecord(
            id=rid,
            title=title,
            description=description,
            completed=False,
            date_created=SAMPLE_TIMESTAMP,
            date_updated=SAMPLE_TIMESTAMP,
        )
        for rid, title, description in _SAMPLES
    ]
