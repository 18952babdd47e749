# tests/conftest.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from task_tracker.config import Settings
from task_tracker.tasks.task_manager import TaskManager
from task_tracker.tasks.task_models import Task


class FakeTaskStorage:
    """
    In-memory TaskStorage used for TaskManager unit tests.

    - Hands out copies, so the manager cannot mutate stored state without a write
    - Counts writes for "no write on NotFound" assertions
    """

    def __init__(self, tasks: list[Task] | None = None, error: Exception | None = None) -> None:
        self.tasks: list[Task] = list(tasks or [])
        self.error = error
        self.writes = 0

    def read_tasks(self) -> list[Task]:
        if self.error is not None:
            raise self.error
        return [replace(t) for t in self.tasks]

    def write_tasks(self, tasks: Sequence[Task]) -> None:
        if self.error is not None:
            raise self.error
        self.writes += 1
        self.tasks = [replace(t) for t in tasks]


class StepClock:
    """Deterministic clock: every call is one second after the previous one."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, 9, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture()
def storage() -> FakeTaskStorage:
    return FakeTaskStorage()


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def output() -> list[str]:
    return []


@pytest.fixture()
def manager(storage: FakeTaskStorage, clock: StepClock, output: list[str]) -> TaskManager:
    return TaskManager(storage, emit=output.append, clock=clock)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a per-test task file; no real env/config is read."""
    return Settings(
        app_name="task-cli-test",
        log_level="WARNING",
        log_to_file=False,
        log_dir=tmp_path / "logs",
        tasks_file=tmp_path / "tasks.json",
    )
