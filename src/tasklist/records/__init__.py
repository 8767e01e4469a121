"""
Record subsystem.

Components:
- models.py: data structures (TaskRecord, Tab, MutationResult)
- codec.py: JSON encoding of the whole collection for the storage slot
- samples.py: fixed seed records used when nothing (valid) is stored
- store.py: ordered in-memory store with write-through persistence
"""
