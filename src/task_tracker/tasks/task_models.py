# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from ..core.errors import InvalidStatusError


class TaskStatus(StrEnum):
    """Task lifecycle status. Values are what gets written to the JSON file."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str | None) -> TaskStatus:
        if isinstance(raw, str):
            try:
                return cls(raw.strip().lower())
            except ValueError:
                pass
        raise InvalidStatusError(raw)


STATUS_ICONS: dict[TaskStatus, str] = {
    TaskStatus.DONE: "✅",
    TaskStatus.IN_PROGRESS: "🔄",
    TaskStatus.TODO: "📋",
}


def _ts_to_json(ts: datetime | None) -> str | None:
    return ts.isoformat() if ts is not None else None


def _ts_from_json(raw: Any, field_name: str) -> datetime | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ValueError(f"{field_name} must be an ISO-8601 string or null")
    return datetime.fromisoformat(raw)


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus = TaskStatus.TODO

    # None means "unknown" (e.g. hand-edited file), never epoch zero.
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __str__(self) -> str:
        return f"{STATUS_ICONS[self.status]} ID: {self.id:<4d} {self.description}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": _ts_to_json(self.created_at),
            "updatedAt": _ts_to_json(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        """
        Build a Task from one decoded JSON object.

        Raises ValueError (InvalidStatusError included) on anything that does
        not match the persisted schema.
        """
        if not isinstance(data, dict):
            raise ValueError("task entry must be a JSON object")

        task_id = data.get("id")
        # bool is an int subclass; reject it explicitly.
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise ValueError(f"task id must be an integer, got {task_id!r}")

        description = data.get("description")
        if not isinstance(description, str):
            raise ValueError(f"task {task_id}: description must be a string")

        return cls(
            id=task_id,
            description=description,
            status=TaskStatus.parse(data.get("status")),
            created_at=_ts_from_json(data.get("createdAt"), "createdAt"),
            updated_at=_ts_from_json(data.get("updatedAt"), "updatedAt"),
        )
