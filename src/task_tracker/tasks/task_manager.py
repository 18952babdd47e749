# src/task_tracker/tasks/task_manager.py

"""
Task lifecycle operations.

Every public method is one full read-modify-write cycle against the store:
read all tasks, change them in memory, write all tasks back (pure reads skip
the write). Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core.errors import TaskNotFoundError
from ..core.ports import Emitter, TaskStorage
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

EMPTY_LIST_MESSAGE = "Looking good, no pending tasks 😄"


def _now() -> datetime:
    return datetime.now().astimezone()


class TaskManager:
    def __init__(
        self,
        store: TaskStorage,
        *,
        emit: Emitter = print,
        clock: Clock = _now,
    ) -> None:
        self._store = store
        self._emit = emit
        self._clock = clock

    def add_task(self, description: str) -> Task:
        tasks = self._store.read_tasks()

        now = self._clock()
        new_id = max((t.id for t in tasks), default=0) + 1
        task = Task(
            id=new_id,
            description=description,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        tasks.append(task)
        self._store.write_tasks(tasks)

        logger.debug("Task added id=%s", task.id)
        self._emit(f"Task added successfully (ID: {task.id})")
        return task

    def update_task(self, task_id: int, description: str) -> Task:
        tasks = self._store.read_tasks()

        task = self._find(tasks, task_id)
        task.description = description
        task.updated_at = self._clock()
        self._store.write_tasks(tasks)

        logger.debug("Task updated id=%s", task_id)
        self._emit(f"Task updated successfully (ID: {task_id})")
        return task

    def delete_task(self, task_id: int) -> Task:
        tasks = self._store.read_tasks()

        removed: Task | None = None
        kept: list[Task] = []
        for task in tasks:
            if task.id == task_id:
                removed = task
                continue
            kept.append(task)

        if removed is None:
            raise TaskNotFoundError(task_id)

        self._store.write_tasks(kept)

        logger.debug("Task deleted id=%s remaining=%d", task_id, len(kept))
        self._emit(f"Task deleted successfully (ID: {task_id})")
        return removed

    def list_tasks(self, status_filter: str | None = None) -> list[Task]:
        """
        Emit one line per task, optionally only those with the given status.

        The filter is compared as-is; validating it is the caller's job.
        Returns the tasks that were emitted.
        """
        tasks = self._store.read_tasks()

        if not tasks:
            self._emit(EMPTY_LIST_MESSAGE)
            return []

        shown: list[Task] = []
        for task in tasks:
            if status_filter and task.status != status_filter:
                continue
            self._emit(str(task))
            shown.append(task)
        return shown

    def mark_task_todo(self, task_id: int) -> Task:
        return self._update_status(task_id, TaskStatus.TODO)

    def mark_task_in_progress(self, task_id: int) -> Task:
        return self._update_status(task_id, TaskStatus.IN_PROGRESS)

    def mark_task_done(self, task_id: int) -> Task:
        return self._update_status(task_id, TaskStatus.DONE)

    # ---- internals ----

    def _update_status(self, task_id: int, status: TaskStatus) -> Task:
        tasks = self._store.read_tasks()

        task = self._find(tasks, task_id)
        task.status = status
        task.updated_at = self._clock()
        self._store.write_tasks(tasks)

        logger.debug("Task status updated id=%s status=%s", task_id, status.value)
        self._emit(f"Task status updated successfully (ID: {task_id})")
        return task

    @staticmethod
    def _find(tasks: list[Task], task_id: int) -> Task:
        for task in tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)
