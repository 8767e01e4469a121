# src/tasklist/records/codec.py

"""
JSON encoding of the whole record collection for the storage slot.

Wire shape (one element per record, insertion order kept):
    {"id": int, "title": str, "description": str, "completed": bool,
     "dateCreated": str, "dateUpdated": str}
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from .models import TaskRecord


class MalformedStateError(ValueError):
    """Persisted slot value could not be parsed or has the wrong shape."""


_STR_FIELDS = ("title", "description", "dateCreated", "dateUpdated")


def record_to_dict(record: TaskRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "title": record.title,
        "description": record.description,
        "completed": record.completed,
        "dateCreated": record.date_created,
        "dateUpdated": record.date_updated,
    }


def record_from_dict(raw: Any, *, index: int = 0) -> TaskRecord:
    if not isinstance(raw, dict):
        raise MalformedStateError(f"item {index} is not an object")

    rid = raw.get("id")
    # bool is an int subclass; reject it explicitly
    if not isinstance(rid, int) or isinstance(rid, bool):
        raise MalformedStateError(f"item {index}: id must be an integer")

    for name in _STR_FIELDS:
        if not isinstance(raw.get(name), str):
            raise MalformedStateError(f"item {index}: {name} must be a string")

    completed = raw.get("completed", False)
    if not isinstance(completed, bool):
        raise MalformedStateError(f"item {index}: completed must be a boolean")

    return TaskRecord(
        id=rid,
        title=raw["title"],
        description=raw["description"],
        completed=completed,
        date_created=raw["dateCreated"],
        date_updated=raw["dateUpdated"],
    )


def encode_records(records: Iterable[TaskRecord]) -> str:
    return json.dumps(
        [record_to_dict(r) for r in records],
        separators=(",", ":"),
    )


def decode_records(text: str) -> list[TaskRecord]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedStateError(f"not valid JSON: {e}") from e
    except RecursionError as e:
        raise MalformedStateError("JSON nested too deeply") from e

    if not isinstance(data, list):
        raise MalformedStateError(f"expected a JSON array, got {type(data).__name__}")

    return [record_from_dict(item, index=i) for i, item in enumerate(data)]
