# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Storage
    "TASKLIST_DATA_DIR": "Local data directory (default: .local/tasklist).",
    "TASKLIST_STORAGE_BACKEND": "sqlite | json | memory (default: sqlite).",
    "TASKLIST_STORAGE_PATH": (
        "Slot file path (default: <data_dir>/storage.sqlite3, or <data_dir>/storage.json for json)."
    ),
    "TASKLIST_STORAGE_KEY": "Slot name holding the serialized list (default: todos).",
    # Behaviour
    "TASKLIST_SEED_SAMPLES": "Seed 5 sample records when nothing valid is stored (default: true).",
}
