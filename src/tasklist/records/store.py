# src/tasklist/records/store.py

from __future__ import annotations

import logging
import time
from dataclasses import replace

from ..core.ports import Clock, SlotStorage
from ..timefmt import format_timestamp, local_now
from .codec import MalformedStateError, decode_records, encode_records
from .models import MutationResult, TaskRecord, validate_fields
from .samples import sample_records

logger = logging.getLogger(__name__)

DEFAULT_SLOT_KEY = "todos"


class IdGenerator:
    """
    Millisecond-based ids that never repeat within one store.

    next() returns max(now_ms, last + 1), so ids stay roughly time-sortable
    while two creations in the same millisecond still get distinct values.
    """

    def __init__(self, floor: int = 0) -> None:
        self._last = int(floor)

    def observe(self, existing_id: int) -> None:
        if existing_id > self._last:
            self._last = existing_id

    def next(self) -> int:
        now_ms = time.time_ns() // 1_000_000
        nid = max(now_ms, self._last + 1)
        self._last = nid
        return nid


class RecordStore:
    """
    Ordered in-memory task list with write-through persistence.

    Lifecycle:
    - initialize() reads the storage slot exactly once (hydration) and writes
      the resulting collection back
    - every successful mutation writes the full collection to the slot
    - refused / no-op mutations do not touch the slot

    Storage write errors are not caught here; they propagate to the caller.
    """

    def __init__(
        self,
        storage: SlotStorage,
        *,
        key: str = DEFAULT_SLOT_KEY,
        clock: Clock | None = None,
        id_generator: IdGenerator | None = None,
        seed_samples: bool = True,
    ) -> None:
        self._storage = storage
        self._key = key
        self._clock: Clock = clock or local_now
        self._ids = id_generator or IdGenerator()
        self._seed_samples = seed_samples
        self._records: list[TaskRecord] = []
        self._initialized = False

    # ---- hydration / persistence ----

    def initialize(self) -> list[TaskRecord]:
        """Hydrate from storage (or seed) and persist the result once."""
        if self._initialized:
            logger.debug("RecordStore already initialized key=%s", self._key)
            return self.records()

        raw = self._storage.read_slot(self._key)
        records: list[TaskRecord]
        if raw is None:
            records = self._defaults()
            logger.info("No stored records under key=%s; seeded %d records.", self._key, len(records))
        else:
            try:
                records = decode_records(raw)
                logger.info("Hydrated %d records from key=%s", len(records), self._key)
            except MalformedStateError as e:
                logger.warning("Failed to parse stored records (%s); seeding sample data.", e)
                records = self._defaults()

        self._records = records
        for r in self._records:
            self._ids.observe(r.id)
        self._initialized = True
        self._persist()
        return self.records()

    def _defaults(self) -> list[TaskRecord]:
        return sample_records() if self._seed_samples else []

    def _persist(self) -> None:
        self._storage.write_slot(self._key, encode_records(self._records))
        logger.debug("Persisted %d records to key=%s", len(self._records), self._key)

    def _now_text(self) -> str:
        return format_timestamp(self._clock())

    def _index_of(self, record_id: int) -> int | None:
        for i, r in enumerate(self._records):
            if r.id == record_id:
                return i
        return None

    # ---- queries ----

    def records(self) -> list[TaskRecord]:
        """Snapshot copy in display (insertion) order."""
        return [replace(r) for r in self._records]

    def get(self, record_id: int) -> TaskRecord | None:
        idx = self._index_of(record_id)
        return replace(self._records[idx]) if idx is not None else None

    def __len__(self) -> int:
        return len(self._records)

    # ---- mutations ----

    def add(self, title: str, description: str) -> MutationResult:
        reason = validate_fields(title, description)
        if reason:
            logger.debug("Add refused: %s", reason)
            return MutationResult.refused(reason)

        now_text = self._now_text()
        record = TaskRecord(
            id=self._ids.next(),
            title=title.strip(),
            description=description.strip(),
            completed=False,
            date_created=now_text,
            date_updated=now_text,
        )
        self._records.append(record)
        self._persist()
        logger.debug("Record added id=%s", record.id)
        return MutationResult.done(replace(record))

    def edit(self, record_id: int, title: str, description: str) -> MutationResult:
        reason = validate_fields(title, description)
        if reason:
            logger.debug("Edit refused id=%s: %s", record_id, reason)
            return MutationResult.refused(reason)

        idx = self._index_of(record_id)
        if idx is None:
            logger.debug("Edit ignored: unknown id=%s", record_id)
            return MutationResult.refused(f"unknown id {record_id}")

        updated = replace(
            self._records[idx],
            title=title.strip(),
            description=description.strip(),
            date_updated=self._now_text(),
        )
        self._records[idx] = updated
        self._persist()
        logger.debug("Record edited id=%s", record_id)
        return MutationResult.done(replace(updated))

    def toggle_complete(self, record_id: int) -> MutationResult:
        idx = self._index_of(record_id)
        if idx is None:
            logger.debug("Toggle ignored: unknown id=%s", record_id)
            return MutationResult.refused(f"unknown id {record_id}")

        current = self._records[idx]
        updated = replace(
            current,
            completed=not current.completed,
            date_updated=self._now_text(),
        )
        self._records[idx] = updated
        self._persist()
        logger.debug("Record toggled id=%s completed=%s", record_id, updated.completed)
        return MutationResult.done(replace(updated))

    def remove(self, record_id: int) -> MutationResult:
        idx = self._index_of(record_id)
        if idx is None:
            logger.debug("Remove ignored: unknown id=%s", record_id)
            return MutationResult.refused(f"unknown id {record_id}")

        removed = self._records.pop(idx)
        self._persist()
        logger.debug("Record removed id=%s", record_id)
        return MutationResult.done(removed)
