# tests/test_task_manager.py

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from task_tracker.core.errors import StorageError, TaskNotFoundError
from task_tracker.tasks.task_manager import EMPTY_LIST_MESSAGE
from task_tracker.tasks.task_models import Task, TaskStatus

T0 = datetime(2023, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def _task(task_id: int, description: str, status: TaskStatus = TaskStatus.TODO) -> Task:
    return Task(id=task_id, description=description, status=status, created_at=T0, updated_at=T0)


def test_add_task_to_empty_collection_gets_id_1(manager, storage, output) -> None:
    task = manager.add_task("Buy groceries")

    assert task.id == 1
    assert len(storage.tasks) == 1
    stored = storage.tasks[0]
    assert stored.description == "Buy groceries"
    assert stored.status is TaskStatus.TODO
    assert stored.created_at is not None
    assert stored.created_at == stored.updated_at
    assert output == ["Task added successfully (ID: 1)"]


def test_add_task_uses_max_id_plus_one_and_never_fills_gaps(manager, storage) -> None:
    storage.tasks = [_task(1, "a"), _task(2, "b"), _task(3, "c")]

    manager.delete_task(2)
    task = manager.add_task("d")

    assert task.id == 4
    assert [t.id for t in storage.tasks] == [1, 3, 4]


def test_update_task_changes_description_and_updated_at_only(manager, storage, output) -> None:
    storage.tasks = [_task(1, "Buy groceries", TaskStatus.IN_PROGRESS)]

    manager.update_task(1, "Buy groceries and cook dinner")

    stored = storage.tasks[0]
    assert stored.description == "Buy groceries and cook dinner"
    assert stored.status is TaskStatus.IN_PROGRESS
    assert stored.created_at == T0
    assert stored.updated_at is not None and stored.updated_at > T0
    assert output == ["Task updated successfully (ID: 1)"]


@pytest.mark.parametrize(
    "op",
    [
        lambda m: m.update_task(2, "Non-existent check"),
        lambda m: m.delete_task(2),
        lambda m: m.mark_task_todo(2),
        lambda m: m.mark_task_in_progress(2),
        lambda m: m.mark_task_done(2),
    ],
)
def test_missing_id_raises_not_found_without_writing(op, manager, storage, output) -> None:
    storage.tasks = [_task(1, "only")]

    with pytest.raises(TaskNotFoundError) as excinfo:
        op(manager)

    assert excinfo.value.task_id == 2
    assert str(excinfo.value) == "task with ID 2 not found"
    assert storage.writes == 0
    assert [t.description for t in storage.tasks] == ["only"]
    assert output == []


def test_delete_removes_exactly_the_matching_task(manager, storage, output) -> None:
    original = [_task(1, "a"), _task(2, "b", TaskStatus.DONE), _task(3, "c")]
    storage.tasks = list(original)

    removed = manager.delete_task(2)

    assert removed.id == 2
    assert len(storage.tasks) == 2
    assert storage.tasks == [original[0], original[2]]
    assert output == ["Task deleted successfully (ID: 2)"]


@pytest.mark.parametrize(
    ("method", "expected"),
    [
        ("mark_task_todo", TaskStatus.TODO),
        ("mark_task_in_progress", TaskStatus.IN_PROGRESS),
        ("mark_task_done", TaskStatus.DONE),
    ],
)
def test_mark_status(method, expected, manager, storage, output) -> None:
    storage.tasks = [_task(1, "x", TaskStatus.DONE if expected is TaskStatus.TODO else TaskStatus.TODO)]

    getattr(manager, method)(1)

    stored = storage.tasks[0]
    assert stored.status is expected
    assert stored.created_at == T0
    assert stored.updated_at != T0
    assert output == ["Task status updated successfully (ID: 1)"]


def test_every_mutation_refreshes_updated_at(manager, storage) -> None:
    manager.add_task("x")
    stamps = [storage.tasks[0].updated_at]
    created = storage.tasks[0].created_at

    manager.mark_task_in_progress(1)
    stamps.append(storage.tasks[0].updated_at)
    manager.update_task(1, "y")
    stamps.append(storage.tasks[0].updated_at)
    manager.mark_task_done(1)
    stamps.append(storage.tasks[0].updated_at)

    assert stamps == sorted(stamps)
    assert len(set(stamps)) == len(stamps)
    assert storage.tasks[0].created_at == created


def test_list_empty_collection_prints_message_and_never_writes(manager, storage, output) -> None:
    assert manager.list_tasks() == []
    assert output == [EMPTY_LIST_MESSAGE]
    assert storage.writes == 0


def test_list_without_filter_returns_all_in_stored_order(manager, storage, output) -> None:
    storage.tasks = [_task(3, "c"), _task(1, "a", TaskStatus.DONE), _task(2, "b")]

    shown = manager.list_tasks()

    assert [t.id for t in shown] == [3, 1, 2]
    assert len(output) == 3
    assert output[0].endswith("c")
    assert storage.writes == 0


def test_list_with_filter_returns_exact_subset(manager, storage, output) -> None:
    storage.tasks = [
        _task(1, "a", TaskStatus.DONE),
        _task(2, "b", TaskStatus.TODO),
        _task(3, "c", TaskStatus.DONE),
        _task(4, "d", TaskStatus.IN_PROGRESS),
    ]

    assert [t.id for t in manager.list_tasks("done")] == [1, 3]
    assert [t.id for t in manager.list_tasks(TaskStatus.IN_PROGRESS)] == [4]
    assert manager.list_tasks("") == manager.list_tasks(None)
    assert storage.writes == 0


def test_storage_errors_propagate(manager, storage) -> None:
    storage.error = StorageError("disk on fire")

    with pytest.raises(StorageError):
        manager.add_task("x")
    with pytest.raises(StorageError):
        manager.list_tasks()


def test_full_lifecycle_scenario(manager, storage) -> None:
    manager.add_task("Buy groceries")
    assert [(t.id, t.description, t.status) for t in storage.tasks] == [
        (1, "Buy groceries", TaskStatus.TODO)
    ]

    manager.mark_task_in_progress(1)
    assert storage.tasks[0].status == "in-progress"

    manager.update_task(1, "Buy groceries and cook dinner")
    assert storage.tasks[0].description == "Buy groceries and cook dinner"
    assert storage.tasks[0].status is TaskStatus.IN_PROGRESS

    manager.delete_task(1)
    assert storage.tasks == []

    with pytest.raises(TaskNotFoundError):
        manager.delete_task(1)
    assert storage.tasks == []


def test_deleting_highest_id_lets_next_add_take_it_again(manager, storage) -> None:
    storage.tasks = [_task(1, "a"), _task(2, "b")]

    manager.delete_task(2)
    task = manager.add_task("c")

    assert task.id == 2
    assert [t.id for t in storage.tasks] == [1, 2]
