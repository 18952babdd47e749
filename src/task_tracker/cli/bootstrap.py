# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the JSON file store into a TaskManager,
- builds the CommandContext handed to the registry.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.ports import Emitter
from ..tasks.task_manager import TaskManager
from ..tasks.task_store import JsonFileTaskStore
from .commands import CommandContext

logger = logging.getLogger(__name__)


def create_task_manager(*, settings: Settings | None = None, emit: Emitter = print) -> TaskManager:
    """
    Build a TaskManager backed by settings.tasks_file.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = JsonFileTaskStore(settings.tasks_file)
    logger.debug("Using task file %s", store.path)
    return TaskManager(store, emit=emit)


def create_context(*, settings: Settings | None = None, emit: Emitter = print) -> CommandContext:
    return CommandContext(manager=create_task_manager(settings=settings, emit=emit), emit=emit)
