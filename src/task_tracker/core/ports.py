# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

TaskManager depends on a Protocol instead of the JSON file store.
This keeps storage swappable and lets tests run against an in-memory fake.
"""

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task

Emitter = Callable[[str], None]
# Receives one line of user-facing output.


class TaskStorage(Protocol):
    """Whole-collection persistence: read everything, write everything."""

    def read_tasks(self) -> list[Task]: ...
    def write_tasks(self, tasks: Sequence[Task]) -> None: ...
