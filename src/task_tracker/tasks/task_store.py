# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from ..core.errors import StorageError
from .task_models import Task

logger = logging.getLogger(__name__)


class JsonFileTaskStore:
    """
    JSON file task store.

    The file holds a single JSON array of task objects, in insertion order.

    Semantics:
    - missing or blank file reads as an empty collection
    - every write replaces the whole file (temp file + os.replace)
    - no locking: with two concurrent writers the last one wins
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_tasks(self) -> list[Task]:
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.debug("Task file %s does not exist yet; starting empty", self._path)
            return []
        except UnicodeDecodeError as e:
            raise StorageError(f"failed to decode {self._path}: {e}", path=self._path) from e
        except OSError as e:
            raise StorageError(f"failed to read {self._path}: {e}", path=self._path) from e

        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, RecursionError) as e:
            raise StorageError(
                f"failed to decode {self._path}: {e}", path=self._path
            ) from e

        if not isinstance(data, list):
            raise StorageError(
                f"failed to decode {self._path}: top-level value must be a JSON array",
                path=self._path,
            )

        try:
            tasks = [Task.from_dict(item) for item in data]
        except ValueError as e:
            raise StorageError(f"failed to decode {self._path}: {e}", path=self._path) from e

        logger.debug("Read %d tasks from %s", len(tasks), self._path)
        return tasks

    def write_tasks(self, tasks: Sequence[Task]) -> None:
        try:
            payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as e:
            raise StorageError(f"failed to encode tasks: {e}", path=self._path) from e

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload + "\n", "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(f"failed to write {self._path}: {e}", path=self._path) from e

        logger.debug("Wrote %d tasks to %s", len(tasks), self._path)
