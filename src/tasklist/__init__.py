"""Single-user task list editor with local write-through persistence."""

__version__ = "0.1.0"
