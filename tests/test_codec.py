# tests/test_codec.py

from __future__ import annotations

import json

import pytest

from tasklist.records.codec import MalformedStateError, decode_records, encode_records
from tasklist.records.models import TaskRecord
from tasklist.records.samples import sample_records


def test_encode_uses_wire_field_names() -> None:
    rec = TaskRecord(
        id=5,
        title="Café",
        description="Latte",
        completed=True,
        date_created="May 1, 2025 07:05 AM",
        date_updated="May 2, 2025 12:00 PM",
    )

    data = json.loads(encode_records([rec]))

    assert data == [
        {
            "id": 5,
            "title": "Café",
            "description": "Latte",
            "completed": True,
            "dateCreated": "May 1, 2025 07:05 AM",
            "dateUpdated": "May 2, 2025 12:00 PM",
        }
    ]
    encoded = encode_records([rec])
    # non-ASCII escaped so any text survives a UTF-8 slot; compact separators
    assert "Caf\\u00e9" in encoded
    assert '"id":5,' in encoded
    assert encode_records([]) == "[]"


def test_decode_reverses_encode_for_samples() -> None:
    records = sample_records()
    records[2].completed = True
    assert decode_records(encode_records(records)) == records


def test_decode_defaults_missing_completed_to_false() -> None:
    raw = '[{"id": 1, "title": "a", "description": "b", "dateCreated": "x", "dateUpdated": "y"}]'
    assert decode_records(raw)[0].completed is False


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "not json",
        "null",
        '"text"',
        "{}",
        "[null]",
        '[{"id": true, "title": "a", "description": "b", "completed": false, "dateCreated": "x", "dateUpdated": "y"}]',
        '[{"id": 1, "description": "b", "completed": false, "dateCreated": "x", "dateUpdated": "y"}]',
        '[{"id": 1, "title": "a", "description": "b", "completed": "no", "dateCreated": "x", "dateUpdated": "y"}]',
        '[{"id": 1, "title": "a", "description": "b", "completed": false, "dateCreated": 3, "dateUpdated": "y"}]',
    ],
)
def test_decode_rejects_malformed_input(raw: str) -> None:
    with pytest.raises(MalformedStateError):
        decode_records(raw)


def test_lone_surrogates_encode_to_ascii_escapes() -> None:
    rec = TaskRecord(
        id=1,
        title="a\ud800",
        description="b\udcff",
        completed=False,
        date_created="x",
        date_updated="x",
    )

    encoded = encode_records([rec])

    assert encoded.isascii()
    encoded.encode("utf-8")
    assert decode_records(encoded) == [rec]


def test_decode_rejects_deeply_nested_input() -> None:
    with pytest.raises(MalformedStateError):
        decode_records("[" * 100_000 + "]" * 100_000)
