# src/task_tracker/core/errors.py

"""
Error taxonomy.

Everything raised on purpose by task_tracker derives from TaskTrackerError,
so the command layer can report it with a single except clause.
"""

from __future__ import annotations

from pathlib import Path


class TaskTrackerError(Exception):
    """Base class for all task_tracker errors."""


class StorageError(TaskTrackerError):
    """Reading, decoding, encoding or writing the task file failed."""

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class TaskNotFoundError(TaskTrackerError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"task with ID {task_id} not found")
        self.task_id = task_id


class InvalidStatusError(TaskTrackerError, ValueError):
    def __init__(self, raw: object) -> None:
        super().__init__(f"invalid status {raw!r}; expected one of: todo, in-progress, done")
        self.raw = raw


class UsageError(TaskTrackerError):
    """Bad command-line input (missing arguments, malformed id, ...)."""

    def __init__(self, message: str, *, show_help: bool = True) -> None:
        super().__init__(message)
        self.show_help = show_help
